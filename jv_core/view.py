"""Read-only render instruction handed to the screen every frame."""

from __future__ import annotations

from dataclasses import dataclass

from jv_core.models import Path, format_path
from jv_core.navigation import TreeNavigator


@dataclass(frozen=True)
class VisibleRow:
    path: Path
    label: str
    depth: int
    selected: bool
    expandable: bool
    expanded: bool


@dataclass(frozen=True)
class RenderView:
    """Everything a renderer needs to paint one frame.

    ``rows`` is the full flattened list; ``visible_rows`` is the slice that
    fits the viewport starting at ``scroll_offset``.
    """

    title: str
    rows: tuple[VisibleRow, ...]
    scroll_offset: int
    viewport_height: int
    overlay_visible: bool

    @property
    def visible_rows(self) -> tuple[VisibleRow, ...]:
        return self.rows[self.scroll_offset : self.scroll_offset + self.viewport_height]

    @property
    def selected_row(self) -> VisibleRow | None:
        return next((row for row in self.rows if row.selected), None)


def build_view(
    navigator: TreeNavigator,
    *,
    title: str,
    show_state: bool = False,
) -> RenderView:
    state = navigator.state
    rows = tuple(
        VisibleRow(
            path=row.path,
            label=row.node.label,
            depth=row.depth,
            selected=row.path == state.cursor,
            expandable=row.node.expandable,
            expanded=row.path in state.expanded,
        )
        for row in navigator.flatten()
    )
    if show_state:
        title = f"{title} {describe_state(navigator)}"
    return RenderView(
        title=title,
        rows=rows,
        scroll_offset=state.scroll_offset,
        viewport_height=state.viewport_height,
        overlay_visible=state.overlay_visible,
    )


def describe_state(navigator: TreeNavigator) -> str:
    """Compact debug rendering of the navigation state."""
    state = navigator.state
    cursor = "-" if state.cursor is None else format_path(state.cursor) or "<root>"
    return f"[cursor={cursor} expanded={len(state.expanded)} offset={state.scroll_offset}]"
