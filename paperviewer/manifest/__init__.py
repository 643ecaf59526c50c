"""Manifest parsing: raw CSV-ish text to normalized relative paths."""

from __future__ import annotations

from .parse import (
    ParsedManifest,
    extract_path,
    load_manifest,
    normalize_path,
    parse_manifest,
    read_manifest_text,
    split_segments,
)

__all__ = [
    "ParsedManifest",
    "extract_path",
    "load_manifest",
    "normalize_path",
    "parse_manifest",
    "read_manifest_text",
    "split_segments",
]
