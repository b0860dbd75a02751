"""Public package surface for foldview.

Re-exports the tree fold and tree-view state engine; ``main`` runs the CLI.
"""

from __future__ import annotations

from .tree import (
    AnnotatedNode,
    FoldOptions,
    Node,
    fold_forest,
    fold_tree,
    forest_height,
    join_forest,
    join_tree,
    list_annotated_forest_nodes,
    list_annotated_tree_nodes,
    list_forest_nodes,
    list_tree_nodes,
    tree_height,
    update_forest_data,
    update_tree_data,
)
from .view import Direction, ExpansionState, StyleClasses, TreeRow, TreeView, TreeViewConfig, build_rows


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "Node",
    "AnnotatedNode",
    "FoldOptions",
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
    "TreeView",
    "TreeViewConfig",
    "StyleClasses",
    "ExpansionState",
    "Direction",
    "TreeRow",
    "build_rows",
    "main",
]
