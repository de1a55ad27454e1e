"""Cursor, expansion and scroll state over a projected hierarchy."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from jv_common.api import InvalidCursorError
from jv_core.models import Node, Path, format_path
from jv_core.projector import iter_paths

logger = logging.getLogger(__name__)

DEFAULT_VIEWPORT_HEIGHT = 20


@dataclass
class NavigationState:
    cursor: Path | None = None
    expanded: set[Path] = field(default_factory=set)
    scroll_offset: int = 0
    overlay_visible: bool = False
    viewport_height: int = DEFAULT_VIEWPORT_HEIGHT


@dataclass(frozen=True)
class FlatRow:
    path: Path
    node: Node
    depth: int


class TreeNavigator:
    """Mutates a NavigationState in response to user operations.

    The hierarchy is fixed for the lifetime of the navigator. Every operation
    returns True when the state changed. The visible row list is recomputed
    from ``state.expanded`` on each call, so positions are never cached across
    expansion changes.
    """

    def __init__(
        self,
        hierarchy: Sequence[Node],
        state: NavigationState | None = None,
    ) -> None:
        self.hierarchy: tuple[Node, ...] = tuple(hierarchy)
        self.state = state or NavigationState()
        self._node_by_path: dict[Path, Node] = dict(iter_paths(self.hierarchy))

    def node_at(self, path: Path) -> Node | None:
        return self._node_by_path.get(path)

    def selected_node(self) -> Node | None:
        if self.state.cursor is None:
            return None
        return self._node_by_path.get(self.state.cursor)

    def is_expanded(self, path: Path) -> bool:
        return path in self.state.expanded

    def flatten(self) -> list[FlatRow]:
        """Depth-first pre-order walk, pruning collapsed subtrees."""
        rows: list[FlatRow] = []
        stack: list[tuple[Path, Iterator[Node]]] = [((), iter(self.hierarchy))]
        while stack:
            parent, nodes = stack[-1]
            node = next(nodes, None)
            if node is None:
                stack.pop()
                continue
            path = (*parent, node.address)
            rows.append(FlatRow(path=path, node=node, depth=len(parent)))
            if node.children and path in self.state.expanded:
                stack.append((path, iter(node.children)))
        return rows

    # -- expansion -------------------------------------------------------

    def toggle_selected(self) -> bool:
        node = self.selected_node()
        if node is None or not node.expandable:
            return False
        if self.state.cursor in self.state.expanded:
            return self.collapse()
        return self.expand()

    def expand(self) -> bool:
        """Expand the container under the cursor, if it is collapsed."""
        node = self.selected_node()
        cursor = self.state.cursor
        if cursor is None or node is None or not node.expandable:
            return False
        if cursor in self.state.expanded:
            return False
        self.state.expanded.add(cursor)
        logger.debug("Expanded %s", format_path(cursor))
        self._clamp_scroll()
        return True

    def collapse(self) -> bool:
        """Collapse the container under the cursor, if it is expanded."""
        cursor = self.state.cursor
        if cursor is None or cursor not in self.state.expanded:
            return False
        self.state.expanded.discard(cursor)
        logger.debug("Collapsed %s", format_path(cursor))
        self._clamp_scroll()
        self._ensure_cursor_visible()
        return True

    # -- hierarchical movement ------------------------------------------

    def select_parent(self) -> bool:
        cursor = self.state.cursor
        if cursor is None or len(cursor) <= 1:
            return False
        return self._select(cursor[:-1])

    def select_first_child(self) -> bool:
        cursor = self.state.cursor
        node = self.selected_node()
        if cursor is None or node is None or not node.children:
            return False
        if cursor not in self.state.expanded:
            return False
        return self._select((*cursor, node.children[0].address))

    def move_left(self) -> bool:
        if self.collapse():
            return True
        return self.select_parent()

    def move_right(self) -> bool:
        if self.expand():
            return True
        return self.select_first_child()

    # -- linear movement -------------------------------------------------

    def move_down(self) -> bool:
        rows = self.flatten()
        if not rows:
            return False
        index = self._cursor_index(rows)
        target = 0 if index is None else min(index + 1, len(rows) - 1)
        return self._select_row(rows, target)

    def move_up(self) -> bool:
        rows = self.flatten()
        if not rows:
            return False
        index = self._cursor_index(rows)
        target = len(rows) - 1 if index is None else max(index - 1, 0)
        return self._select_row(rows, target)

    def select_first(self) -> bool:
        rows = self.flatten()
        if not rows:
            return False
        return self._select_row(rows, 0)

    def select_last(self) -> bool:
        rows = self.flatten()
        if not rows:
            return False
        return self._select_row(rows, len(rows) - 1)

    # -- scrolling -------------------------------------------------------

    def scroll_down(self, lines: int) -> bool:
        return self._set_offset(self.state.scroll_offset + lines)

    def scroll_up(self, lines: int) -> bool:
        return self._set_offset(self.state.scroll_offset - lines)

    def max_scroll_offset(self, row_count: int | None = None) -> int:
        if row_count is None:
            row_count = len(self.flatten())
        return max(0, row_count - self.state.viewport_height)

    def set_viewport_height(self, height: int) -> bool:
        height = max(1, height)
        if height == self.state.viewport_height:
            return False
        self.state.viewport_height = height
        self._clamp_scroll()
        self._ensure_cursor_visible()
        return True

    # -- overlay ---------------------------------------------------------

    def toggle_overlay(self) -> bool:
        self.state.overlay_visible = not self.state.overlay_visible
        return True

    # -- internals -------------------------------------------------------

    def _cursor_index(self, rows: Sequence[FlatRow]) -> int | None:
        cursor = self.state.cursor
        if cursor is None:
            return None
        for index, row in enumerate(rows):
            if row.path == cursor:
                return index
        raise InvalidCursorError(
            "Cursor does not address a visible row",
            context={"cursor": format_path(cursor), "rows": len(rows)},
        )

    def _select(self, path: Path) -> bool:
        if path == self.state.cursor:
            return False
        self.state.cursor = path
        logger.debug("Selected %s", format_path(path))
        self._ensure_cursor_visible()
        return True

    def _select_row(self, rows: Sequence[FlatRow], index: int) -> bool:
        changed = self._select(rows[index].path)
        # the offset may still need adjusting when the cursor did not move
        return self._scroll_to_row(index, len(rows)) or changed

    def _ensure_cursor_visible(self) -> None:
        rows = self.flatten()
        index = self._cursor_index(rows)
        if index is not None:
            self._scroll_to_row(index, len(rows))

    def _scroll_to_row(self, index: int, row_count: int) -> bool:
        offset = self.state.scroll_offset
        height = self.state.viewport_height
        if index < offset:
            offset = index
        elif index >= offset + height:
            offset = index - height + 1
        offset = max(0, min(offset, self.max_scroll_offset(row_count)))
        if offset == self.state.scroll_offset:
            return False
        self.state.scroll_offset = offset
        return True

    def _set_offset(self, offset: int) -> bool:
        offset = max(0, min(offset, self.max_scroll_offset()))
        if offset == self.state.scroll_offset:
            return False
        self.state.scroll_offset = offset
        return True

    def _clamp_scroll(self) -> None:
        self._set_offset(self.state.scroll_offset)
