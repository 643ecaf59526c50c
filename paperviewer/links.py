"""Action-URL construction for opening and downloading papers."""

from __future__ import annotations

from .config import DEFAULT_BASE_URL


def file_url(path: str, base_url: str = DEFAULT_BASE_URL) -> str:
    """Join ``base_url`` and a node ``path`` with a single slash.

    The path is used as-is; no extra encoding is applied.
    """
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"
