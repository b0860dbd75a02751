"""Browser key bindings: key names to directions and view actions.

Arrow names go through :func:`decode_key_name`; vi letters are aliases for
the same directions. Everything else maps to a ``KeyAction`` or nothing.
"""

from __future__ import annotations

from enum import Enum

from ..view import Direction
from .events import decode_key_name

VI_DIRECTIONS: dict[str, Direction] = {
    "k": Direction.UP,
    "j": Direction.DOWN,
    "h": Direction.LEFT,
    "l": Direction.RIGHT,
}


class KeyAction(Enum):
    """Non-directional commands of the tree browser."""

    TOGGLE = "toggle"
    EXPAND_ALL = "expand_all"
    COLLAPSE_ALL = "collapse_all"
    OPEN_FILTER = "open_filter"
    CLEAR_FILTER = "clear_filter"
    QUIT = "quit"


KEY_ACTIONS: dict[str, KeyAction] = {
    "Enter": KeyAction.TOGGLE,
    " ": KeyAction.TOGGLE,
    "E": KeyAction.EXPAND_ALL,
    "C": KeyAction.COLLAPSE_ALL,
    "/": KeyAction.OPEN_FILTER,
    "Escape": KeyAction.CLEAR_FILTER,
    "q": KeyAction.QUIT,
    "Ctrl+C": KeyAction.QUIT,
}


def key_direction(key: str, *, vi_aliases: bool = True) -> Direction:
    """Return the direction for ``key``; ``vi_aliases`` adds ``h/j/k/l``."""
    direction = decode_key_name(key)
    if direction is Direction.OTHER and vi_aliases:
        return VI_DIRECTIONS.get(key, Direction.OTHER)
    return direction


def key_action(key: str) -> KeyAction | None:
    return KEY_ACTIONS.get(key)
