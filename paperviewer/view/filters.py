"""Session/year filter state and the path token rules behind it.

Session letters (``m``/``s``/``w``) are found either as a whole folder
segment (``/w/``) or as a ``_``/``-``/``.`` delimited token (``_w_``). The
folder-segment rule is consulted first. Years are standalone four-digit path
segments, inner segments before the leading one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum

from ..tree_model import Node

DEFAULT_YEAR_MIN = 2016
DEFAULT_YEAR_MAX = 2025

SESSION_LETTERS = frozenset("msw")
SESSION_TOKEN_RE = re.compile(r"[_\-.]([msw])[_\-.]", re.IGNORECASE)
YEAR_SEGMENT_RE = re.compile(r"\d{4}")


class Session(str, Enum):
    """Exam sitting encoded as a single-letter path token."""

    ALL = "all"
    MARCH = "m"
    SUMMER = "s"
    WINTER = "w"

    @classmethod
    def parse(cls, value: str) -> Session:
        """Parse ``all``/letter/full-name forms, case-insensitively.

        Raises ``ValueError`` for unknown values.
        """
        lowered = value.strip().lower()
        for session in cls:
            if lowered in (session.value, session.name.lower()):
                return session
        raise ValueError(f"unknown session: {value!r}")


def session_token(path: str) -> str | None:
    """Return the lowercase session letter encoded in ``path``, if any."""
    for segment in path.split("/")[:-1]:
        if segment.lower() in SESSION_LETTERS:
            return segment.lower()
    match = SESSION_TOKEN_RE.search(path)
    if match:
        return match.group(1).lower()
    return None


def year_token(path: str) -> int | None:
    """Return the year encoded as a standalone four-digit segment of ``path``.

    Inner segments are searched first so a leading subject code such as
    ``0580/2021/...`` does not shadow the year; the leading segment is the
    fallback (``2023/w/...``).
    """
    segments = path.split("/")
    for segment in segments[1:] + segments[:1]:
        if YEAR_SEGMENT_RE.fullmatch(segment):
            return int(segment)
    return None


@dataclass(frozen=True)
class FilterState:
    """Session and inclusive year-range filter applied to files."""

    session: Session = Session.ALL
    year_min: int = DEFAULT_YEAR_MIN
    year_max: int = DEFAULT_YEAR_MAX

    @property
    def is_default(self) -> bool:
        return self == DEFAULT_FILTER

    @property
    def has_active_filters(self) -> bool:
        return not self.is_default

    def with_session(self, session: Session) -> FilterState:
        return replace(self, session=session)

    def with_years(self, year_min: int | None = None, year_max: int | None = None) -> FilterState:
        """Return a copy with the given bounds replaced; ``None`` keeps a bound."""
        return replace(
            self,
            year_min=self.year_min if year_min is None else year_min,
            year_max=self.year_max if year_max is None else year_max,
        )

    def matches(self, node: Node) -> bool:
        """Return whether ``node`` passes this filter; folders always pass."""
        if node.is_folder:
            return True
        if self.session is not Session.ALL and session_token(node.path) != self.session.value:
            return False
        year = year_token(node.path)
        if year is None:
            return False
        return self.year_min <= year <= self.year_max


DEFAULT_FILTER = FilterState()
