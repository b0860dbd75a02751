"""Pre-order index and depth annotation built on the tree fold."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, NamedTuple

from .fold import FoldOptions, fold_forest, fold_tree
from .types import AnnotatedNode, Node


class _AnnotationState(NamedTuple):
    collected: list[AnnotatedNode[Any]]
    level: int


def _enter(state: _AnnotationState, node: Node[Any]) -> _AnnotationState:
    state.collected.append(AnnotatedNode(node, len(state.collected), state.level))
    return _AnnotationState(state.collected, state.level + 1)


def _leave(state_from_parent: _AnnotationState, _node: Node[Any], after_children: _AnnotationState) -> _AnnotationState:
    # Siblings continue at the parent's level, not one deeper.
    return _AnnotationState(after_children.collected, state_from_parent.level)


_ANNOTATION_OPTIONS: FoldOptions[_AnnotationState] = FoldOptions(pre_visit=_enter, post_visit=_leave)


def list_annotated_tree_nodes(node: Node[Any]) -> list[AnnotatedNode[Any]]:
    """Annotate one tree: consecutive pre-order indexes, root at level 0."""
    return fold_tree(_ANNOTATION_OPTIONS, _AnnotationState([], 0), node).collected


def list_annotated_forest_nodes(nodes: Sequence[Node[Any]]) -> list[AnnotatedNode[Any]]:
    """Annotate a forest; indexes run across roots, every root is level 0."""
    return fold_forest(_ANNOTATION_OPTIONS, _AnnotationState([], 0), nodes).collected
