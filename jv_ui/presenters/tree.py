"""Presenter for the non-interactive, fully expanded tree dump."""

from __future__ import annotations

from typing import Iterator, Sequence

from rich.markup import escape
from rich.tree import Tree

from jv_core.api import Node
from jv_ui.tui.core import theme


def build_rich_tree(hierarchy: Sequence[Node], *, title: str) -> Tree:
    """Transform a projected hierarchy into a rich Tree with every node expanded."""
    tree = Tree(theme.panel_title(escape(title)), guide_style=theme.RICH_ACCENT)
    stack: list[tuple[Tree, Iterator[Node]]] = [(tree, iter(hierarchy))]
    while stack:
        branch, nodes = stack[-1]
        node = next(nodes, None)
        if node is None:
            stack.pop()
            continue
        label = escape(node.label)
        if node.is_container:
            child = branch.add(f"[bold]{label}[/bold]")
            stack.append((child, iter(node.children)))
        else:
            branch.add(label)
    return tree
