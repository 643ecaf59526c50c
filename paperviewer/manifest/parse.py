"""Manifest text parsing into normalized relative paths.

Each manifest record describes one file path, either double-quoted or as the
last column of a comma-separated row. Parsing is total: lines that cannot be
interpreted are skipped and counted instead of raising.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

BYTE_ORDER_MARK = "\ufeff"
QUOTED_PATH_RE = re.compile(r'"([^"]+)"')
LINE_SPLIT_RE = re.compile(r"\r?\n")


@dataclass(frozen=True)
class ParsedManifest:
    """Best-effort parse result: paths in input order plus skipped-line count."""

    paths: tuple[str, ...]
    malformed_lines: int = 0

    def __len__(self) -> int:
        return len(self.paths)


def extract_path(line: str) -> str | None:
    """Pull the raw path out of one manifest record.

    A double-quoted substring wins; otherwise the last non-empty
    comma-separated column is used. Returns ``None`` when neither exists.
    """
    quoted = QUOTED_PATH_RE.search(line)
    if quoted:
        return quoted.group(1)
    for column in reversed(line.split(",")):
        stripped = column.strip()
        if stripped:
            return stripped
    return None


def split_segments(raw_path: str) -> list[str]:
    """Split ``raw_path`` on ``/`` with each segment trimmed and empties dropped."""
    cleaned = raw_path.rstrip("\r").strip()
    return [segment for segment in (part.strip() for part in cleaned.split("/")) if segment]


def normalize_path(raw_path: str) -> str | None:
    """Return the canonical ``a/b/c`` form of ``raw_path`` or ``None`` if empty."""
    segments = split_segments(raw_path)
    if not segments:
        return None
    return "/".join(segments)


def parse_manifest(text: str) -> ParsedManifest:
    """Parse whole manifest ``text`` into a :class:`ParsedManifest`.

    A single leading byte-order mark is stripped. Blank lines are ignored and
    do not count as malformed.
    """
    if text.startswith(BYTE_ORDER_MARK):
        text = text[len(BYTE_ORDER_MARK):]

    paths: list[str] = []
    malformed = 0
    for line_number, line in enumerate(LINE_SPLIT_RE.split(text), start=1):
        if not line.strip():
            continue
        raw_path = extract_path(line)
        normalized = normalize_path(raw_path) if raw_path is not None else None
        if normalized is None:
            malformed += 1
            logger.debug("Skipping manifest line %d: %r", line_number, line)
            continue
        paths.append(normalized)

    if malformed:
        logger.warning("Skipped %d malformed manifest line(s)", malformed)
    logger.info("Parsed %d manifest path(s)", len(paths))
    return ParsedManifest(paths=tuple(paths), malformed_lines=malformed)


def read_manifest_text(path: Path) -> str:
    """Read manifest text, trying UTF-8 first and falling back to latin-1."""
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


def load_manifest(path: Path) -> ParsedManifest:
    """Read and parse the manifest file at ``path``.

    ``OSError`` from reading propagates to the caller.
    """
    return parse_manifest(read_manifest_text(path))
