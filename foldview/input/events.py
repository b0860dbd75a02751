"""Decoded input events and their application to a ``TreeView``.

Hosts translate raw key names and clicks into these values; the view only
ever sees a ``Direction`` or one of the node events below.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, Union

from ..view import Direction, TreeView

_KEY_DIRECTIONS: dict[str, Direction] = {
    "ArrowLeft": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
    "ArrowUp": Direction.UP,
    "ArrowDown": Direction.DOWN,
}


def decode_key_name(name: str) -> Direction:
    """Map a key name such as ``"ArrowUp"`` to a ``Direction``."""
    return _KEY_DIRECTIONS.get(name, Direction.OTHER)


@dataclass(frozen=True)
class Expand:
    uid: Hashable


@dataclass(frozen=True)
class Collapse:
    uid: Hashable


@dataclass(frozen=True)
class Select:
    uid: Hashable


NodeEvent = Union[Expand, Collapse, Select]


def apply_event(view: TreeView[Any], event: NodeEvent | Direction) -> TreeView[Any]:
    """Return the view that results from one input event."""
    if isinstance(event, Direction):
        return view.handle_direction(event)
    if isinstance(event, Expand):
        return view.set_expanded(event.uid, True)
    if isinstance(event, Collapse):
        return view.set_expanded(event.uid, False)
    if isinstance(event, Select):
        return view.select_by_uid(event.uid)
    return view
