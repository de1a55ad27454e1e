"""Project a decoded JSON value onto an ordered hierarchy of nodes.

Containers at the root are unwrapped: their entries become the top-level
sequence. A scalar root becomes a single leaf addressed ``ROOT``.
"""

from __future__ import annotations

import json
from typing import Any, Iterator, Mapping, Sequence, TypeAlias

from jv_core.models import ROOT, Address, ArrayIndex, Node, ObjectKey, Path

JsonValue: TypeAlias = dict[str, Any] | list[Any] | str | int | float | bool | None
Hierarchy: TypeAlias = tuple[Node, ...]


def project(value: JsonValue) -> Hierarchy:
    """Convert a JSON value into the top-level node sequence."""
    if _is_container(value):
        return _project_container(value)
    return (Node(address=ROOT, label=render_scalar(value)),)


def render_scalar(value: Any) -> str:
    """Render a scalar as JSON text.

    Raises:
        TypeError: If value is not a JSON scalar.
    """
    # bool is an int subclass; json.dumps already handles it, only filter non-JSON types
    if value is None or isinstance(value, (str, int, float)):
        return json.dumps(value, ensure_ascii=False)
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def _is_container(value: Any) -> bool:
    return isinstance(value, (Mapping, list))


def _entries(container: Any) -> Iterator[tuple[Address, Any]]:
    if isinstance(container, Mapping):
        return ((ObjectKey(key), val) for key, val in container.items())
    return ((ArrayIndex(idx), item) for idx, item in enumerate(container))


def _project_container(container: Any) -> Hierarchy:
    """Build the child nodes of ``container`` with an explicit stack.

    Each frame holds the address of the container being built, its pending
    entries and the children finished so far. Nesting depth is bounded only by
    memory.
    """
    stack: list[tuple[Address, Iterator[tuple[Address, Any]], list[Node]]] = [
        (ROOT, _entries(container), [])
    ]
    while True:
        address, entries, children = stack[-1]
        for child_address, child in entries:
            if _is_container(child):
                stack.append((child_address, _entries(child), []))
                break
            children.append(
                Node(
                    address=child_address,
                    label=f"{child_address}: {render_scalar(child)}",
                )
            )
        else:
            stack.pop()
            if not stack:
                return tuple(children)
            stack[-1][2].append(
                Node(
                    address=address,
                    label=str(address),
                    children=tuple(children),
                    is_container=True,
                )
            )


def iter_paths(hierarchy: Sequence[Node], prefix: Path = ()) -> Iterator[tuple[Path, Node]]:
    """Yield every ``(path, node)`` pair in depth-first pre-order."""
    stack: list[tuple[Path, Iterator[Node]]] = [(prefix, iter(hierarchy))]
    while stack:
        parent, nodes = stack[-1]
        node = next(nodes, None)
        if node is None:
            stack.pop()
            continue
        path = (*parent, node.address)
        yield path, node
        if node.children:
            stack.append((path, iter(node.children)))
