"""Value types exchanged between the view state and its renderer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ExpansionState(Enum):
    """Bullet state of a visible row."""

    LEAF = "leaf"
    EXPANDED = "expanded"
    COLLAPSED = "collapsed"


@dataclass(frozen=True)
class StyleClasses:
    """Opaque style identifiers forwarded untouched to the renderer."""

    container: str = "tree-view"
    selected: str = "tree-view-selected"
    indent: str = "tree-view-indent"
    bullet_expanded: str = "tree-view-bullet-expanded"
    bullet_collapsed: str = "tree-view-bullet-collapsed"
    bullet_leaf: str = "tree-view-bullet-leaf"

    def bullet_for(self, expansion: ExpansionState) -> str:
        """Return the bullet class slot matching ``expansion``."""
        if expansion is ExpansionState.EXPANDED:
            return self.bullet_expanded
        if expansion is ExpansionState.COLLAPSED:
            return self.bullet_collapsed
        return self.bullet_leaf


@dataclass(frozen=True)
class RowCookie:
    """Per-row context handed to a custom renderer."""

    level: int
    expansion: ExpansionState
    selected: bool
    style: StyleClasses


class Direction(Enum):
    """Decoded directional input."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    OTHER = "other"
