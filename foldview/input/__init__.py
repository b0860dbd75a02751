"""Input decoding: key names, key bindings, and node interaction events."""

from __future__ import annotations

from .events import Collapse, Expand, NodeEvent, Select, apply_event, decode_key_name
from .keymap import KEY_ACTIONS, KeyAction, key_action, key_direction

__all__ = [
    "decode_key_name",
    "Expand",
    "Collapse",
    "Select",
    "NodeEvent",
    "apply_event",
    "KeyAction",
    "KEY_ACTIONS",
    "key_action",
    "key_direction",
]
