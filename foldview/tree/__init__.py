"""Immutable trees, the generic fold, and aggregates derived from it.

Everything here is pure: folds never mutate the nodes they visit and
updates return freshly built structures.
"""

from __future__ import annotations

from .annotation import list_annotated_forest_nodes, list_annotated_tree_nodes
from .fold import DEFAULT_FOLD_OPTIONS, FoldOptions, fold_forest, fold_tree
from .listing import (
    forest_height,
    join_forest,
    join_tree,
    list_forest_nodes,
    list_tree_nodes,
    tree_height,
)
from .types import AnnotatedNode, Node, children_of, data_of
from .update import update_forest_data, update_tree_data

__all__ = [
    "Node",
    "AnnotatedNode",
    "data_of",
    "children_of",
    "FoldOptions",
    "DEFAULT_FOLD_OPTIONS",
    "fold_tree",
    "fold_forest",
    "tree_height",
    "forest_height",
    "list_tree_nodes",
    "list_forest_nodes",
    "join_tree",
    "join_forest",
    "list_annotated_tree_nodes",
    "list_annotated_forest_nodes",
    "update_tree_data",
    "update_forest_data",
]
