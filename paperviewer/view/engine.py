"""Visible-entry computation: search, then filter, then sort."""

from __future__ import annotations

import locale
from collections.abc import Iterable, Mapping

from ..tree_model import Node
from .filters import DEFAULT_FILTER, FilterState


def search_entries(nodes: Iterable[Node], query: str) -> list[Node]:
    """Keep nodes whose name or path contains ``query`` case-insensitively.

    A blank query keeps everything.
    """
    if not query.strip():
        return list(nodes)
    folded = query.casefold()
    return [node for node in nodes if folded in node.name.casefold() or folded in node.path.casefold()]


def apply_filters(nodes: Iterable[Node], filter_state: FilterState = DEFAULT_FILTER) -> list[Node]:
    """Apply session/year filters to files; the default filter is skipped."""
    if filter_state.is_default:
        return list(nodes)
    return [node for node in nodes if filter_state.matches(node)]


def entry_sort_key(node: Node) -> tuple[bool, str, str]:
    """Sort folders before files and then by locale-aware name."""
    return (not node.is_folder, locale.strxfrm(node.name.casefold()), node.name)


def sort_entries(nodes: Iterable[Node]) -> list[Node]:
    return sorted(nodes, key=entry_sort_key)


def compute_view(
    children: Mapping[str, Node] | Iterable[Node],
    search_query: str = "",
    filter_state: FilterState = DEFAULT_FILTER,
) -> list[Node]:
    """Return the ordered entries visible in a folder.

    ``children`` is either a folder's name-keyed mapping or its nodes.
    Identical inputs always produce identical output.
    """
    nodes = children.values() if isinstance(children, Mapping) else children
    searched = search_entries(nodes, search_query)
    filtered = apply_filters(searched, filter_state)
    return sort_entries(filtered)
