"""Selection cursor over the visible rows.

A selection is the pair (visible index, uid). The index makes stepping
cheap; the uid lets the cursor survive recomputation of the visible list.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from dataclasses import dataclass
from typing import Any

from ..tree import AnnotatedNode, Node

UidOf = Callable[[Node[Any]], Hashable]


@dataclass(frozen=True)
class Selection:
    """Currently selected visible row."""

    index: int
    uid: Hashable


def _index_of_uid(visible: Sequence[AnnotatedNode[Any]], uid_of: UidOf, uid: Hashable) -> int | None:
    for idx, annotated in enumerate(visible):
        if uid_of(annotated.node) == uid:
            return idx
    return None


def select_by_uid(
    visible: Sequence[AnnotatedNode[Any]],
    uid_of: UidOf,
    selection: Selection | None,
    uid: Hashable,
) -> Selection | None:
    """Select the visible row carrying ``uid``; unknown or hidden uids are ignored."""
    idx = _index_of_uid(visible, uid_of, uid)
    if idx is None:
        return selection
    return Selection(idx, uid)


def step_selection(
    visible: Sequence[AnnotatedNode[Any]],
    uid_of: UidOf,
    selection: Selection | None,
    direction: int,
) -> Selection | None:
    """Move the cursor one row in ``direction`` (+1 or -1), wrapping at both ends.

    With nothing selected, +1 picks the first row and -1 the last one. An
    empty visible list leaves the selection untouched.
    """
    if not visible:
        return selection
    step = 1 if direction > 0 else -1
    if selection is None:
        idx = 0 if step > 0 else len(visible) - 1
    else:
        idx = (selection.index + step) % len(visible)
    return Selection(idx, uid_of(visible[idx].node))


def relocate_selection(
    visible: Sequence[AnnotatedNode[Any]],
    uid_of: UidOf,
    selection: Selection | None,
) -> Selection | None:
    """Re-resolve ``selection`` after the visible list changed.

    The index follows the uid; a uid that is no longer visible clears the
    selection.
    """
    if selection is None:
        return None
    idx = _index_of_uid(visible, uid_of, selection.uid)
    if idx is None:
        return None
    if idx == selection.index:
        return selection
    return Selection(idx, selection.uid)


def selected_node(
    visible: Sequence[AnnotatedNode[Any]],
    selection: Selection | None,
) -> AnnotatedNode[Any] | None:
    """Return the selected visible row, or ``None``."""
    if selection is None or not 0 <= selection.index < len(visible):
        return None
    return visible[selection.index]
