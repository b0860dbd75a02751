"""Tree-view state engine: collapse state, visible rows, and the cursor."""

from __future__ import annotations

from .config import TreeViewConfig, default_render
from .expansion import branch_uids, collapsed_uids_for_expand_only
from .rows import TreeRow, build_rows
from .selection import Selection, relocate_selection, select_by_uid, selected_node, step_selection
from .state import TreeView
from .types import Direction, ExpansionState, RowCookie, StyleClasses
from .visibility import compute_visible

__all__ = [
    "TreeView",
    "TreeViewConfig",
    "default_render",
    "StyleClasses",
    "RowCookie",
    "ExpansionState",
    "Direction",
    "Selection",
    "select_by_uid",
    "step_selection",
    "relocate_selection",
    "selected_node",
    "compute_visible",
    "branch_uids",
    "collapsed_uids_for_expand_only",
    "TreeRow",
    "build_rows",
]
