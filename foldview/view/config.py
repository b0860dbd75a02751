"""View configuration: uid extraction, row rendering, and style classes."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from ..tree import Node
from .types import RowCookie, StyleClasses

D = TypeVar("D")
R = TypeVar("R")


def default_render(_cookie: RowCookie, node: Node[Any]) -> str:
    """Render a node as the text of its payload."""
    return str(node.data)


@dataclass(frozen=True)
class TreeViewConfig(Generic[D, R]):
    """Caller-supplied hooks for one tree view.

    ``uid_of`` must return a value unique across the displayed forest; this is
    not checked. ``render`` receives the row cookie and the node and may
    return any renderer-specific value; the default returns ``str(data)``.
    """

    uid_of: Callable[[Node[D]], Hashable]
    render: Callable[[RowCookie, Node[D]], R] = default_render  # type: ignore[assignment]
    style: StyleClasses = field(default_factory=StyleClasses)

    @classmethod
    def with_label(
        cls,
        uid_of: Callable[[Node[D]], Hashable],
        label_of: Callable[[Node[D]], str],
        style: StyleClasses | None = None,
    ) -> TreeViewConfig[D, str]:
        """Build a config whose renderer is a plain label function."""
        return cls(
            uid_of=uid_of,
            render=lambda _cookie, node: label_of(node),
            style=style if style is not None else StyleClasses(),
        )
