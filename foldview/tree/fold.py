"""Generic pre/post/sibling fold over trees and forests.

The traversal order is fixed; callers only choose how state is transformed
when a node is entered, when it is left, and when a finished child subtree
is merged into the running state of its siblings.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .types import Node

S = TypeVar("S")


def _keep_state(state: Any, _node: Node[Any]) -> Any:
    return state


def _keep_children_state(_state_from_parent: Any, _node: Node[Any], state_after_children: Any) -> Any:
    return state_after_children


def _take_sibling_result(_state_before: Any, _node: Node[Any], state_after: Any) -> Any:
    return state_after


@dataclass(frozen=True)
class FoldOptions(Generic[S]):
    """Bundle of the three fold callbacks.

    ``pre_visit(state_from_parent, node)`` seeds the traversal of the node's
    children. ``post_visit(state_from_parent, node, state_after_children)``
    produces the node's result. ``combine_sibling(state_before, node,
    state_after)`` merges one finished child (or root) into the running state.
    """

    pre_visit: Callable[[S, Node[Any]], S] = _keep_state
    post_visit: Callable[[S, Node[Any], S], S] = _keep_children_state
    combine_sibling: Callable[[S, Node[Any], S], S] = _take_sibling_result


DEFAULT_FOLD_OPTIONS: FoldOptions[Any] = FoldOptions()


def _fold_siblings(options: FoldOptions[S], state: S, nodes: Iterable[Node[Any]]) -> S:
    """Fold each node left to right, threading the running sibling state."""
    running = state
    for node in nodes:
        running = options.combine_sibling(running, node, fold_tree(options, running, node))
    return running


def fold_tree(options: FoldOptions[S], initial_state: S, node: Node[Any]) -> S:
    """Fold one tree, visiting ``node`` before and after its children."""
    seeded = options.pre_visit(initial_state, node)
    after_children = _fold_siblings(options, seeded, node.children)
    return options.post_visit(initial_state, node, after_children)


def fold_forest(options: FoldOptions[S], initial_state: S, nodes: Iterable[Node[Any]]) -> S:
    """Fold a sequence of root trees as siblings of one another."""
    return _fold_siblings(options, initial_state, nodes)
