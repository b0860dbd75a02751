"""Visible-row projection of an annotated pre-order listing."""

from __future__ import annotations

from collections.abc import Callable, Collection, Hashable, Sequence
from typing import Any

from ..tree import AnnotatedNode, Node


def compute_visible(
    uid_of: Callable[[Node[Any]], Hashable],
    collapsed_uids: Collection[Hashable],
    annotated_nodes: Sequence[AnnotatedNode[Any]],
) -> list[AnnotatedNode[Any]]:
    """Drop every descendant of a collapsed node, keeping input order.

    Single pass: while a collapsed ancestor is open at ``threshold``, rows
    deeper than it are skipped. The first row at or above that level closes
    the hidden range and may start a new one if it is collapsed itself.
    """
    visible: list[AnnotatedNode[Any]] = []
    threshold: int | None = None
    for annotated in annotated_nodes:
        if threshold is not None and annotated.level > threshold:
            continue
        visible.append(annotated)
        threshold = annotated.level if uid_of(annotated.node) in collapsed_uids else None
    return visible
