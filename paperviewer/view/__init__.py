"""View engine: ordered visible entries for a folder under search and filters."""

from __future__ import annotations

from .engine import apply_filters, compute_view, entry_sort_key, search_entries, sort_entries
from .filters import (
    DEFAULT_FILTER,
    DEFAULT_YEAR_MAX,
    DEFAULT_YEAR_MIN,
    FilterState,
    Session,
    session_token,
    year_token,
)

__all__ = [
    "DEFAULT_FILTER",
    "DEFAULT_YEAR_MAX",
    "DEFAULT_YEAR_MIN",
    "FilterState",
    "Session",
    "apply_filters",
    "compute_view",
    "entry_sort_key",
    "search_entries",
    "session_token",
    "year_token",
    "sort_entries",
]
