"""Node datatypes for the manifest-derived paper tree."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class FileNode:
    """Leaf entry for one manifest file."""

    name: str
    path: str

    @property
    def is_folder(self) -> bool:
        return False


@dataclass(frozen=True)
class FolderNode:
    """Folder entry with a read-only name-keyed mapping of children."""

    name: str
    path: str
    children: Mapping[str, "Node"] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def is_folder(self) -> bool:
        return True


Node = FolderNode | FileNode
Tree = Mapping[str, Node]

EMPTY_FOLDER: Tree = MappingProxyType({})


__all__ = [
    "EMPTY_FOLDER",
    "FileNode",
    "FolderNode",
    "Node",
    "Tree",
]
