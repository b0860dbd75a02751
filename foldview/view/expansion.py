"""Collapsed-set builders for bulk expand/collapse operations."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from typing import Any, NamedTuple

from ..tree import AnnotatedNode, FoldOptions, Node, fold_forest


def branch_uids(
    uid_of: Callable[[Node[Any]], Hashable],
    annotated_nodes: Sequence[AnnotatedNode[Any]],
) -> frozenset[Hashable]:
    """Return uids of every node that has children."""
    return frozenset(uid_of(item.node) for item in annotated_nodes if not item.is_leaf)


class _MatchState(NamedTuple):
    collapsed: set[Hashable]
    matched: bool


def collapsed_uids_for_expand_only(
    uid_of: Callable[[Node[Any]], Hashable],
    predicate: Callable[[Any], bool],
    forest: Sequence[Node[Any]],
) -> frozenset[Hashable]:
    """Collapse every branch whose subtree holds no payload matching ``predicate``.

    Each node reports upward whether it or any descendant matched; a branch
    stays expanded exactly when that flag is set. Roots are collapsed like any
    other branch but remain visible.
    """
    collapsed: set[Hashable] = set()

    def enter(_state: _MatchState, _node: Node[Any]) -> _MatchState:
        return _MatchState(collapsed, False)

    def leave(_state_from_parent: _MatchState, node: Node[Any], after_children: _MatchState) -> _MatchState:
        matched = after_children.matched or bool(predicate(node.data))
        if not matched and node.children:
            collapsed.add(uid_of(node))
        return _MatchState(collapsed, matched)

    def combine(before: _MatchState, _node: Node[Any], after: _MatchState) -> _MatchState:
        return _MatchState(collapsed, before.matched or after.matched)

    options = FoldOptions(pre_visit=enter, post_visit=leave, combine_sibling=combine)
    fold_forest(options, _MatchState(collapsed, False), forest)
    return frozenset(collapsed)
