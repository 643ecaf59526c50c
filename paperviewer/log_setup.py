"""Logging configuration for the command-line front door.

Installs a single stderr handler on the root logger. Repeated calls are
no-ops unless ``force`` is set, so tests and embedding code can call it
freely.
"""

from __future__ import annotations

import logging
import sys

CONSOLE_FORMAT = "%(levelname)s | %(message)s"

_HANDLER_TAG = "_paperviewer_handler"

_LEVEL_MAP: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


def parse_level(level: str | int) -> int:
    """Map a level name or number to a ``logging`` constant (default WARNING)."""
    if isinstance(level, int):
        return level
    return _LEVEL_MAP.get(level.strip().upper(), logging.WARNING)


def _our_handlers(root: logging.Logger) -> list[logging.Handler]:
    return [handler for handler in root.handlers if getattr(handler, _HANDLER_TAG, False)]


def configure_logging(level: str | int = "WARNING", *, force: bool = False) -> logging.Logger:
    """Attach the stderr handler to the root logger and set its level."""
    root = logging.getLogger()
    existing = _our_handlers(root)
    if existing and not force:
        return root
    for handler in existing:
        root.removeHandler(handler)

    level_int = parse_level(level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level_int)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    setattr(handler, _HANDLER_TAG, True)
    root.addHandler(handler)
    root.setLevel(level_int)
    return root
