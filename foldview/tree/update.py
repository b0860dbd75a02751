"""Shape-preserving payload rewrites."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from .fold import FoldOptions, fold_forest, fold_tree
from .types import Node

D = TypeVar("D")


def _data_update_options(
    predicate: Callable[[D], bool],
    transform: Callable[[D], D],
) -> FoldOptions[Any]:
    """Fold options that rebuild each node from its already-rebuilt children."""

    def start_children(_state: Any, _node: Node[D]) -> tuple[Node[D], ...]:
        return ()

    def rebuild(_state_from_parent: Any, node: Node[D], children: tuple[Node[D], ...]) -> Node[D]:
        data = transform(node.data) if predicate(node.data) else node.data
        return Node(data, children)

    def collect(rebuilt: tuple[Node[D], ...], _node: Node[D], subtree: Node[D]) -> tuple[Node[D], ...]:
        return (*rebuilt, subtree)

    return FoldOptions(pre_visit=start_children, post_visit=rebuild, combine_sibling=collect)


def update_tree_data(
    predicate: Callable[[D], bool],
    transform: Callable[[D], D],
    node: Node[D],
) -> Node[D]:
    """Return a new tree with ``transform`` applied to every matching payload."""
    return fold_tree(_data_update_options(predicate, transform), None, node)


def update_forest_data(
    predicate: Callable[[D], bool],
    transform: Callable[[D], D],
    nodes: Sequence[Node[D]],
) -> tuple[Node[D], ...]:
    """Forest variant of :func:`update_tree_data`."""
    return fold_forest(_data_update_options(predicate, transform), (), nodes)
