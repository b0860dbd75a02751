"""Immutable node datatypes shared by the tree and view modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

D = TypeVar("D")


@dataclass(frozen=True)
class Node(Generic[D]):
    """One tree node: a payload and its ordered children.

    A node owns its children; subtrees are never shared and never cyclic.
    Callers build trees bottom-up and replace them instead of mutating.
    """

    data: D
    children: tuple[Node[D], ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_leaf(self) -> bool:
        return not self.children


@dataclass(frozen=True)
class AnnotatedNode(Generic[D]):
    """Node paired with its pre-order ``index`` and depth ``level``."""

    node: Node[D]
    index: int
    level: int

    @property
    def data(self) -> D:
        return self.node.data

    @property
    def is_leaf(self) -> bool:
        return self.node.is_leaf


def data_of(node: Node[D]) -> D:
    """Return the payload stored on ``node``."""
    return node.data


def children_of(node: Node[D]) -> tuple[Node[D], ...]:
    """Return the ordered children of ``node``."""
    return node.children
