"""Navigation primitives: folder segment stack and shareable addresses.

This module has no rendering concerns. Resolution against a tree is
fail-soft: unknown or non-folder segments resolve to an empty folder.
"""

from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import unquote

from .tree_model import FolderNode, Tree, folder_children


def parse_address(address: str) -> tuple[str, ...]:
    """Split a ``/``-joined address into segments, dropping empty ones.

    Percent-encoded addresses are decoded once first.
    """
    decoded = unquote(address) if "%" in address else address
    return tuple(segment for segment in decoded.split("/") if segment)


class NavigationState:
    """Ordered stack of segment names identifying the viewed folder."""

    def __init__(self, segments: Iterable[str] = ()) -> None:
        self._segments: list[str] = [segment for segment in segments if segment]

    @classmethod
    def from_address(cls, address: str) -> NavigationState:
        """Create a state from a shareable ``/``-joined address."""
        return cls(parse_address(address))

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(self._segments)

    @property
    def depth(self) -> int:
        return len(self._segments)

    @property
    def at_root(self) -> bool:
        return not self._segments

    def resolve(self, tree: Tree) -> Tree:
        """Return the current folder's children, or an empty folder."""
        return folder_children(tree, self._segments)

    def descend(self, name: str, tree: Tree) -> bool:
        """Enter child folder ``name`` of the current folder.

        Returns ``False`` and leaves the state unchanged when the current
        folder has no folder child with that name.
        """
        if not isinstance(self.resolve(tree).get(name), FolderNode):
            return False
        self._segments.append(name)
        return True

    def ascend(self, depth: int) -> None:
        """Truncate the stack to ``depth`` segments (clamped to the valid range)."""
        del self._segments[max(0, depth):]

    def reset(self) -> None:
        self._segments.clear()

    def to_address(self) -> str:
        return "/".join(self._segments)

    def breadcrumbs(self) -> list[tuple[str, int]]:
        """Return ``(name, depth)`` pairs; ``ascend(depth)`` jumps to that crumb."""
        return [(name, index + 1) for index, name in enumerate(self._segments)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NavigationState):
            return NotImplemented
        return self._segments == other._segments

    def __repr__(self) -> str:
        return f"NavigationState({self._segments!r})"
