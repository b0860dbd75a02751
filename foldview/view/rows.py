"""Row records handed to a renderer for each visible node."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ..tree import AnnotatedNode
from .state import TreeView
from .types import ExpansionState

R = TypeVar("R")


@dataclass(frozen=True)
class TreeRow(Generic[R]):
    """One visible row with its bullet state, selection flag, and rendered value."""

    annotated: AnnotatedNode[Any]
    uid: Hashable
    expansion: ExpansionState
    selected: bool
    rendered: R

    @property
    def level(self) -> int:
        return self.annotated.level


def build_rows(view: TreeView[Any]) -> list[TreeRow[Any]]:
    """Render every visible node through the view's configured renderer."""
    config = view.config
    rows: list[TreeRow[Any]] = []
    for annotated in view.get_visible_annotated_nodes():
        cookie = view.row_cookie(annotated)
        rows.append(
            TreeRow(
                annotated=annotated,
                uid=config.uid_of(annotated.node),
                expansion=cookie.expansion,
                selected=cookie.selected,
                rendered=config.render(cookie, annotated.node),
            )
        )
    return rows
