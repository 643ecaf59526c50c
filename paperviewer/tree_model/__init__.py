"""Paper-tree model: node types, construction, integrity and row formatting.

This package contains the manifest-derived hierarchy:
- tagged ``FileNode``/``FolderNode`` datatypes with read-only children
- order-independent tree building with file-to-folder promotion
- leaf/manifest integrity diagnostics
- listing-row formatting with paper-kind badges
"""

from __future__ import annotations

from .build import build_tree, folder_children, iter_nodes, node_at
from .integrity import IntegrityReport, check_tree_integrity, collect_leaf_paths
from .rendering import display_name, format_entry, highlight_substring, paper_kind
from .types import EMPTY_FOLDER, FileNode, FolderNode, Node, Tree

__all__ = [
    "EMPTY_FOLDER",
    "FileNode",
    "FolderNode",
    "IntegrityReport",
    "Node",
    "Tree",
    "build_tree",
    "check_tree_integrity",
    "collect_leaf_paths",
    "display_name",
    "folder_children",
    "format_entry",
    "highlight_substring",
    "iter_nodes",
    "node_at",
    "paper_kind",
]
