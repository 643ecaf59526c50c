"""Formatting helpers for listing rows, paper labels and search highlights."""

from __future__ import annotations

from bisect import bisect_left, bisect_right

from ..ui_theme import DEFAULT_THEME, UITheme
from .types import Node

QUESTION_PAPER = "QP"
MARK_SCHEME = "MS"


def paper_kind(name: str) -> str:
    """Return ``QP``/``MS`` for question papers and mark schemes, else ``""``."""
    lower = name.lower()
    if "_ms_" in lower or "_ms." in lower:
        return MARK_SCHEME
    if "_qp_" in lower or "_qp." in lower:
        return QUESTION_PAPER
    return ""


def display_name(name: str) -> str:
    """Return ``name`` without a trailing ``.pdf`` extension."""
    if name.lower().endswith(".pdf"):
        return name[: -len(".pdf")]
    return name


def highlight_substring(text: str, query: str, theme: UITheme | None = None) -> str:
    """Highlight first case-insensitive substring match in ``text``."""
    active_theme = theme or DEFAULT_THEME
    if not query or not active_theme.highlight:
        return text
    folded_query = query.casefold()
    # offsets[i] is where text[i] starts in the case-folded text.
    offsets = [0]
    for char in text:
        offsets.append(offsets[-1] + len(char.casefold()))
    idx = text.casefold().find(folded_query)
    if idx < 0:
        return text
    start = bisect_right(offsets, idx) - 1
    end = bisect_left(offsets, idx + len(folded_query))
    return text[:start] + active_theme.highlight + text[start:end] + active_theme.reset + text[end:]


def format_entry(
    node: Node,
    favorite: bool = False,
    search_query: str = "",
    theme: UITheme | None = None,
) -> str:
    """Render one listing row as ANSI-styled display text."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    star = f"{active_theme.favorite}*{reset} " if favorite else "  "
    if node.is_folder:
        name = highlight_substring(node.name, search_query, active_theme)
        return f"{star}{active_theme.folder}{name}/{reset}"

    name = highlight_substring(display_name(node.name), search_query, active_theme)
    kind = paper_kind(node.name)
    badge = ""
    if kind == QUESTION_PAPER:
        badge = f" {active_theme.kind_question_paper}[{kind}]{reset}"
    elif kind == MARK_SCHEME:
        badge = f" {active_theme.kind_mark_scheme}[{kind}]{reset}"
    return f"{star}{active_theme.file}{name}{reset}{badge}"
