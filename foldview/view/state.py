"""Immutable tree-view state: forest, collapse set, visible rows, selection.

Every operation returns a new ``TreeView``. The derived fields (annotated
rows, visible rows, selection) are recomputed inside the same call that
changes their inputs, so no caller ever sees them out of sync.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence
from dataclasses import dataclass, replace
from typing import Any, Generic, TypeVar

from ..tree import AnnotatedNode, Node, list_annotated_forest_nodes, update_forest_data
from .config import TreeViewConfig
from .expansion import branch_uids, collapsed_uids_for_expand_only
from .selection import Selection, relocate_selection, select_by_uid, selected_node, step_selection
from .types import Direction, ExpansionState, RowCookie
from .visibility import compute_visible

D = TypeVar("D")


@dataclass(frozen=True)
class _Guts:
    forest: tuple[Node[Any], ...]
    annotated: tuple[AnnotatedNode[Any], ...]
    collapsed: frozenset[Hashable]
    visible: tuple[AnnotatedNode[Any], ...]
    selection: Selection | None


class TreeView(Generic[D]):
    """Collapsible, selectable flat view over a forest of ``Node`` values."""

    __slots__ = ("_config", "_guts")

    def __init__(self, config: TreeViewConfig[D, Any], guts: _Guts) -> None:
        """Wrap precomputed state; use :meth:`initialize` to build one."""
        self._config = config
        self._guts = guts

    @classmethod
    def initialize(cls, config: TreeViewConfig[D, Any], forest: Iterable[Node[D]]) -> TreeView[D]:
        """Start with every node expanded and nothing selected."""
        roots = tuple(forest)
        annotated = tuple(list_annotated_forest_nodes(roots))
        guts = _Guts(
            forest=roots,
            annotated=annotated,
            collapsed=frozenset(),
            visible=annotated,
            selection=None,
        )
        return cls(config, guts)

    # -- internal transitions -------------------------------------------------

    def _uid(self, node: Node[Any]) -> Hashable:
        return self._config.uid_of(node)

    def _evolve(self, **changes: Any) -> TreeView[D]:
        return type(self)(self._config, replace(self._guts, **changes))

    def _with_collapsed(self, collapsed: frozenset[Hashable]) -> TreeView[D]:
        return self._recomputed(self._guts.annotated, collapsed, forest=self._guts.forest)

    def _recomputed(
        self,
        annotated: tuple[AnnotatedNode[Any], ...],
        collapsed: frozenset[Hashable],
        *,
        forest: tuple[Node[Any], ...],
    ) -> TreeView[D]:
        visible = tuple(compute_visible(self._config.uid_of, collapsed, annotated))
        selection = relocate_selection(visible, self._config.uid_of, self._guts.selection)
        return self._evolve(
            forest=forest,
            annotated=annotated,
            collapsed=collapsed,
            visible=visible,
            selection=selection,
        )

    # -- collapse state ----------------------------------------------------------

    def set_expanded(self, uid: Hashable, expanded: bool) -> TreeView[D]:
        """Expand or collapse ``uid``; unknown uids and leaves are inert."""
        if expanded:
            collapsed = self._guts.collapsed - {uid}
        else:
            collapsed = self._guts.collapsed | {uid}
        return self._with_collapsed(collapsed)

    def expand_all(self) -> TreeView[D]:
        return self._with_collapsed(frozenset())

    def collapse_all(self) -> TreeView[D]:
        """Collapse every node that has children."""
        return self._with_collapsed(branch_uids(self._config.uid_of, self._guts.annotated))

    def expand_only(self, predicate: Callable[[D], bool]) -> TreeView[D]:
        """Keep expanded only the branches leading to payloads matching ``predicate``."""
        collapsed = collapsed_uids_for_expand_only(self._config.uid_of, predicate, self._guts.forest)
        return self._with_collapsed(collapsed)

    def collapse_uids(self, uids: Iterable[Hashable]) -> TreeView[D]:
        """Replace the collapsed set wholesale (for restoring saved state)."""
        return self._with_collapsed(frozenset(uids))

    # -- data ------------------------------------------------------------------

    def update_node_data(self, selector: Callable[[D], bool], transform: Callable[[D], D]) -> TreeView[D]:
        """Rewrite matching payloads; collapse state is left as it was."""
        return self.replace_forest(update_forest_data(selector, transform, self._guts.forest))

    def replace_forest(self, forest: Iterable[Node[D]]) -> TreeView[D]:
        """Swap in a new forest, keeping the collapsed set and selected uid."""
        roots = tuple(forest)
        annotated = tuple(list_annotated_forest_nodes(roots))
        return self._recomputed(annotated, self._guts.collapsed, forest=roots)

    # -- selection -----------------------------------------------------------------

    def select_by_uid(self, uid: Hashable) -> TreeView[D]:
        """Select a visible node; hidden or unknown uids leave the state unchanged."""
        selection = select_by_uid(self._guts.visible, self._config.uid_of, self._guts.selection, uid)
        if selection == self._guts.selection:
            return self
        return self._evolve(selection=selection)

    def step_selection(self, direction: int) -> TreeView[D]:
        """Move the cursor by one visible row, wrapping around."""
        selection = step_selection(self._guts.visible, self._config.uid_of, self._guts.selection, direction)
        if selection == self._guts.selection:
            return self
        return self._evolve(selection=selection)

    def handle_direction(self, direction: Direction) -> TreeView[D]:
        """Apply arrow input: up/down move the cursor, left/right collapse/expand it."""
        if direction is Direction.UP:
            return self.step_selection(-1)
        if direction is Direction.DOWN:
            return self.step_selection(1)
        if direction in (Direction.LEFT, Direction.RIGHT):
            selection = self._guts.selection
            if selection is None:
                return self
            return self.set_expanded(selection.uid, direction is Direction.RIGHT)
        return self

    def get_selected(self) -> AnnotatedNode[D] | None:
        return selected_node(self._guts.visible, self._guts.selection)

    @property
    def selection(self) -> Selection | None:
        return self._guts.selection

    # -- queries -------------------------------------------------------------------

    def get_visible_annotated_nodes(self) -> tuple[AnnotatedNode[D], ...]:
        return self._guts.visible

    def get_annotated_nodes(self) -> tuple[AnnotatedNode[D], ...]:
        return self._guts.annotated

    @property
    def forest(self) -> tuple[Node[D], ...]:
        return self._guts.forest

    @property
    def config(self) -> TreeViewConfig[D, Any]:
        return self._config

    @property
    def collapsed_uids(self) -> frozenset[Hashable]:
        return self._guts.collapsed

    def expansion_state(self, annotated: AnnotatedNode[D]) -> ExpansionState:
        """Return the bullet state for a row."""
        if annotated.is_leaf:
            return ExpansionState.LEAF
        if self._uid(annotated.node) in self._guts.collapsed:
            return ExpansionState.COLLAPSED
        return ExpansionState.EXPANDED

    def is_selected(self, annotated: AnnotatedNode[D]) -> bool:
        selection = self._guts.selection
        return selection is not None and self._uid(annotated.node) == selection.uid

    def row_cookie(self, annotated: AnnotatedNode[D]) -> RowCookie:
        """Build the renderer context for one row."""
        return RowCookie(
            level=annotated.level,
            expansion=self.expansion_state(annotated),
            selected=self.is_selected(annotated),
            style=self._config.style,
        )

    def visible_uids(self) -> Sequence[Hashable]:
        return [self._uid(item.node) for item in self._guts.visible]

    def __repr__(self) -> str:
        return (
            f"TreeView(visible={len(self._guts.visible)}/{len(self._guts.annotated)}, "
            f"collapsed={len(self._guts.collapsed)}, selection={self._guts.selection!r})"
        )
