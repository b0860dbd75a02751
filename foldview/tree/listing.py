"""Derived tree aggregates: heights, pre-order listings, and text joins."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from .fold import FoldOptions, fold_forest, fold_tree
from .types import Node


def _height_from_children(_state_from_parent: int, _node: Node[Any], tallest_child: int) -> int:
    return tallest_child + 1


def _taller(tallest_so_far: int, _node: Node[Any], subtree_height: int) -> int:
    return max(tallest_so_far, subtree_height)


_HEIGHT_OPTIONS: FoldOptions[int] = FoldOptions(
    pre_visit=lambda _state, _node: 0,
    post_visit=_height_from_children,
    combine_sibling=_taller,
)


def tree_height(node: Node[Any]) -> int:
    """Return the number of levels in the tree rooted at ``node`` (at least 1)."""
    return fold_tree(_HEIGHT_OPTIONS, 0, node)


def forest_height(nodes: Sequence[Node[Any]]) -> int:
    """Return the tallest root height, or ``0`` for an empty forest."""
    return fold_forest(_HEIGHT_OPTIONS, 0, nodes)


def _append_node(collected: list[Node[Any]], node: Node[Any]) -> list[Node[Any]]:
    collected.append(node)
    return collected


_LISTING_OPTIONS: FoldOptions[list[Node[Any]]] = FoldOptions(pre_visit=_append_node)


def list_tree_nodes(node: Node[Any]) -> list[Node[Any]]:
    """List ``node`` and its descendants in pre-order, left to right."""
    return fold_tree(_LISTING_OPTIONS, [], node)


def list_forest_nodes(nodes: Sequence[Node[Any]]) -> list[Node[Any]]:
    """List every node of every root in pre-order; empty only for no roots."""
    return fold_forest(_LISTING_OPTIONS, [], nodes)


def join_tree(to_text: Callable[[Node[Any]], str], separator: str, node: Node[Any]) -> str:
    """Join the text of each node in pre-order with ``separator``."""
    return separator.join(to_text(item) for item in list_tree_nodes(node))


def join_forest(to_text: Callable[[Node[Any]], str], separator: str, nodes: Sequence[Node[Any]]) -> str:
    """Forest variant of :func:`join_tree`; empty string for an empty forest."""
    return separator.join(to_text(item) for item in list_forest_nodes(nodes))
