"""Tree construction from normalized manifest paths.

Paths are inserted into a private draft first, then published as one
immutable tree of :class:`FileNode`/:class:`FolderNode` values.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from .types import EMPTY_FOLDER, FileNode, FolderNode, Node, Tree

# ``None`` marks a file; a dict marks a folder and holds its children.
_Draft = dict[str, "_Draft | None"]


def _insert(draft: _Draft, segments: list[str]) -> None:
    """Insert one path, promoting files to folders when a longer path needs them."""
    level = draft
    last = len(segments) - 1
    for index, name in enumerate(segments):
        if index == last:
            # An existing folder stays a folder.
            level.setdefault(name, None)
            return
        children = level.get(name)
        if children is None:
            children = {}
            level[name] = children
        level = children


def _freeze(draft: _Draft, prefix: str) -> Tree:
    """Convert draft level into read-only nodes with full ``path`` values."""
    nodes: dict[str, Node] = {}
    for name, children in draft.items():
        path = f"{prefix}/{name}" if prefix else name
        if children is None:
            nodes[name] = FileNode(name=name, path=path)
        else:
            nodes[name] = FolderNode(name=name, path=path, children=_freeze(children, path))
    return MappingProxyType(nodes)


def build_tree(paths: Iterable[str]) -> Tree:
    """Build the paper tree from ``/``-joined normalized paths.

    The result's shape and node kinds do not depend on the order of ``paths``:
    whenever a path is both a leaf and an ancestor, it becomes a folder.
    Empty segments are ignored.
    """
    draft: _Draft = {}
    for path in paths:
        segments = [segment for segment in path.split("/") if segment]
        if segments:
            _insert(draft, segments)
    return _freeze(draft, "")


def iter_nodes(tree: Tree) -> Iterator[Node]:
    """Yield every node depth-first, parents before their children."""
    for node in tree.values():
        yield node
        if isinstance(node, FolderNode):
            yield from iter_nodes(node.children)


def node_at(tree: Tree, path: str) -> Node | None:
    """Return the node addressed by ``path`` or ``None`` when unresolvable."""
    segments = [segment for segment in path.split("/") if segment]
    if not segments:
        return None
    level = tree
    node: Node | None = None
    for segment in segments:
        if node is not None:
            if not isinstance(node, FolderNode):
                return None
            level = node.children
        node = level.get(segment)
        if node is None:
            return None
    return node


def folder_children(tree: Tree, segments: Iterable[str]) -> Tree:
    """Walk ``segments`` from the root and return that folder's children.

    Missing segments or segments naming a file resolve to an empty folder.
    """
    level = tree
    for segment in segments:
        node = level.get(segment)
        if not isinstance(node, FolderNode):
            return EMPTY_FOLDER
        level = node.children
    return level
