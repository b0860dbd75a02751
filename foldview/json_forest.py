"""Build display forests from decoded JSON documents.

Each object member or array element becomes one node. The node uid is the
RFC 6901 JSON pointer of the value, which is unique within a document.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .render.highlight import highlight_scalar
from .tree import Node
from .view import RowCookie, TreeViewConfig


@dataclass(frozen=True)
class JsonItem:
    """Payload for one JSON value in the tree."""

    pointer: str
    key: str
    kind: str
    value: Any = None
    size: int = 0

    @property
    def is_container(self) -> bool:
        return self.kind in {"object", "array"}

    def scalar_text(self) -> str:
        """Return the value as a JSON literal (empty for containers)."""
        if self.is_container:
            return ""
        return json.dumps(self.value, ensure_ascii=False)


def escape_pointer_token(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def _kind_of(value: Any) -> str:
    if isinstance(value, dict):
        return "object"
    if isinstance(value, list):
        return "array"
    if isinstance(value, bool):
        return "boolean"
    if value is None:
        return "null"
    if isinstance(value, (int, float)):
        return "number"
    return "string"


def _members(value: Any) -> list[tuple[str, Any]]:
    if isinstance(value, dict):
        return [(str(key), item) for key, item in value.items()]
    if isinstance(value, list):
        return [(str(idx), item) for idx, item in enumerate(value)]
    return []


def json_to_node(key: str, value: Any, pointer: str) -> Node[JsonItem]:
    """Convert one decoded JSON value into a node, recursing into containers."""
    kind = _kind_of(value)
    members = _members(value)
    children = tuple(
        json_to_node(member_key, member, f"{pointer}/{escape_pointer_token(member_key)}")
        for member_key, member in members
    )
    if kind in {"object", "array"}:
        return Node(JsonItem(pointer, key, kind, size=len(members)), children)
    return Node(JsonItem(pointer, key, kind, value=value))


def json_to_forest(document: Any) -> tuple[Node[JsonItem], ...]:
    """Return one root per top-level member; a scalar document is one leaf."""
    members = _members(document)
    if not members and not isinstance(document, (dict, list)):
        return (json_to_node("", document, ""),)
    return tuple(
        json_to_node(key, value, f"/{escape_pointer_token(key)}")
        for key, value in members
    )


def load_json_forest(path: Path) -> tuple[Node[JsonItem], ...]:
    """Read and decode ``path``; ``OSError`` and ``ValueError`` propagate."""
    return json_to_forest(json.loads(path.read_text(encoding="utf-8")))


def json_uid(node: Node[JsonItem]) -> str:
    return node.data.pointer


def json_label(item: JsonItem, style: str | None = None) -> str:
    """Format ``key: value`` for scalars and ``key {n}`` / ``key [n]`` for containers.

    ``style`` enables Pygments highlighting of scalar literals.
    """
    if item.kind == "object":
        suffix = f"{{{item.size}}}"
    elif item.kind == "array":
        suffix = f"[{item.size}]"
    else:
        literal = item.scalar_text()
        suffix = highlight_scalar(literal, style) if style is not None else literal
    if not item.key:
        return suffix
    separator = " " if item.is_container else ": "
    return f"{item.key}{separator}{suffix}"


def json_view_config(style: str | None = None) -> TreeViewConfig[JsonItem, str]:
    """Tree-view config for JSON forests rendering labels as strings."""

    def render(_cookie: RowCookie, node: Node[JsonItem]) -> str:
        return json_label(node.data, style)

    return TreeViewConfig(uid_of=json_uid, render=render)


def item_matcher(query: str) -> Callable[[JsonItem], bool]:
    """Return a case-insensitive predicate over keys and scalar literals."""
    folded = query.casefold()

    def matches(item: JsonItem) -> bool:
        if not folded:
            return False
        return folded in item.key.casefold() or folded in item.scalar_text().casefold()

    return matches
