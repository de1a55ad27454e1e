"""Addresses, paths and nodes of the projected JSON tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final, TypeAlias, Union


@dataclass(frozen=True, slots=True)
class ObjectKey:
    """Node reached through a named field of a parent object."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class ArrayIndex:
    """Node reached through a positional slot of a parent array."""

    index: int

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"Array index must be non-negative, got {self.index}")

    def __str__(self) -> str:
        return str(self.index)


@dataclass(frozen=True, slots=True)
class RootAddress:
    """Identity of a document whose root is a scalar."""

    def __str__(self) -> str:
        return ""


ROOT: Final[RootAddress] = RootAddress()

Address: TypeAlias = Union[ObjectKey, ArrayIndex, RootAddress]
Path: TypeAlias = tuple[Address, ...]


@dataclass(frozen=True, slots=True)
class Node:
    """One JSON value projected at one position.

    Attributes:
        address:      This node's own identity segment (not the full path).
        label:        Display text. Containers show their address; scalars show
                      ``"<address>: <value as JSON>"`` (just the JSON text at Root).
        children:     Ordered child nodes; empty for scalars.
        is_container: True for objects and arrays, including empty ones.
    """

    address: Address
    label: str
    children: tuple[Node, ...] = field(default=())
    is_container: bool = False

    @property
    def expandable(self) -> bool:
        return bool(self.children)


def format_path(path: Path) -> str:
    """Render a path as a JSON Pointer-like string, e.g. ``/a/0/b``."""
    segments = [str(address) for address in path if not isinstance(address, RootAddress)]
    if not segments:
        return ""
    return "/" + "/".join(
        segment.replace("~", "~0").replace("/", "~1") for segment in segments
    )
