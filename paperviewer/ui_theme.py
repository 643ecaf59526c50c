"""ANSI palettes for listing output.

``DEFAULT_THEME`` is used on color-capable terminals and ``PLAIN_THEME`` when
color is disabled.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by listing renderers."""

    name: str
    reset: str
    highlight: str
    folder: str
    file: str
    favorite: str
    kind_question_paper: str
    kind_mark_scheme: str
    heading: str
    dim: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    highlight="\033[7;1m",
    folder="\033[1;34m",
    file="\033[38;5;252m",
    favorite="\033[38;5;220m",
    kind_question_paper="\033[38;5;110m",
    kind_mark_scheme="\033[38;5;42m",
    heading="\033[1;38;5;81m",
    dim="\033[2;38;5;250m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    highlight="",
    folder="",
    file="",
    favorite="",
    kind_question_paper="",
    kind_mark_scheme="",
    heading="",
    dim="",
)


def theme_for(no_color: bool) -> UITheme:
    """Return the palette for the requested color mode."""
    return PLAIN_THEME if no_color else DEFAULT_THEME
