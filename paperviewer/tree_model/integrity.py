"""Diagnostic comparison between manifest paths and built tree leaves."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from .build import iter_nodes
from .types import FileNode, Tree

logger = logging.getLogger(__name__)

MISSING_PREVIEW_LIMIT = 10


@dataclass(frozen=True)
class IntegrityReport:
    """Leaf/manifest counts and a capped preview of unreachable manifest paths."""

    files_in_tree: int
    manifest_files: int
    missing: int
    missing_preview: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.missing == 0


def collect_leaf_paths(tree: Tree) -> set[str]:
    """Return the full path of every file leaf reachable in ``tree``."""
    return {node.path for node in iter_nodes(tree) if isinstance(node, FileNode)}


def check_tree_integrity(
    tree: Tree,
    paths: Iterable[str],
    preview_limit: int = MISSING_PREVIEW_LIMIT,
) -> IntegrityReport:
    """Report manifest paths that are not leaves of ``tree``.

    Paths that ended up as folders (because a longer path promoted them) are
    reported as missing. The tree is never modified.
    """
    leaves = collect_leaf_paths(tree)
    manifest_paths = list(paths)
    missing = [path for path in manifest_paths if path not in leaves]
    report = IntegrityReport(
        files_in_tree=len(leaves),
        manifest_files=len(manifest_paths),
        missing=len(missing),
        missing_preview=tuple(missing[: max(0, preview_limit)]),
    )
    if report.ok:
        logger.info(
            "All %d manifest file(s) present in tree (%d leaves)",
            report.manifest_files,
            report.files_in_tree,
        )
    else:
        logger.warning(
            "Missing %d of %d manifest file(s) from tree: %s",
            report.missing,
            report.manifest_files,
            ", ".join(report.missing_preview),
        )
    return report
