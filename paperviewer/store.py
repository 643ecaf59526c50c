"""Persisted favorites and recent-files store.

The store is a JSON document ``{"favorites": [...], "recent": [...]}``. It is
loaded once when constructed and rewritten wholesale after every mutation,
through a sibling temp file that replaces the document in one step.
Missing or corrupt data loads as empty collections; malformed entries are
dropped individually.
"""

from __future__ import annotations

import json
import logging
import os
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from . import config

logger = logging.getLogger(__name__)

MAX_RECENT = 10
FAVORITES_KEY = "favorites"
RECENT_KEY = "recent"


def now_ms() -> int:
    """Return the current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class FavoriteEntry:
    name: str
    path: str
    added_at: int

    def to_json(self) -> dict[str, object]:
        return {"name": self.name, "path": self.path, "addedAt": self.added_at}


@dataclass(frozen=True)
class RecentEntry:
    name: str
    path: str
    accessed_at: int

    def to_json(self) -> dict[str, object]:
        return {"name": self.name, "path": self.path, "accessedAt": self.accessed_at}


def _coerce_timestamp(value: object) -> int:
    """Normalize JSON timestamps; booleans and non-numbers become ``0``."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return max(0, int(value))


def _entry_fields(raw: object, stamp_key: str) -> tuple[str, str, int] | None:
    """Validate one stored entry and return ``(name, path, stamp)``."""
    if not isinstance(raw, dict):
        return None
    path = raw.get("path")
    if not isinstance(path, str) or not path:
        return None
    name = raw.get("name")
    if not isinstance(name, str) or not name:
        name = path.rsplit("/", 1)[-1]
    return name, path, _coerce_timestamp(raw.get(stamp_key))


def _load_favorites(value: object) -> list[FavoriteEntry]:
    if not isinstance(value, list):
        return []
    favorites: list[FavoriteEntry] = []
    seen: set[str] = set()
    for raw in value:
        fields = _entry_fields(raw, "addedAt")
        if fields is None or fields[1] in seen:
            continue
        seen.add(fields[1])
        favorites.append(FavoriteEntry(*fields))
    return favorites


def _load_recent(value: object) -> list[RecentEntry]:
    if not isinstance(value, list):
        return []
    recent: list[RecentEntry] = []
    seen: set[str] = set()
    for raw in value:
        fields = _entry_fields(raw, "accessedAt")
        if fields is None or fields[1] in seen:
            continue
        seen.add(fields[1])
        recent.append(RecentEntry(*fields))
    return recent[:MAX_RECENT]


class PaperStore:
    """Favorites set and bounded recent list, keyed by paper path."""

    def __init__(self, path: Path | None = None, clock: Callable[[], int] = now_ms) -> None:
        self.path = path if path is not None else config.STORE_PATH
        self._clock = clock
        data = self._read()
        self._favorites = _load_favorites(data.get(FAVORITES_KEY))
        self._recent = _load_recent(data.get(RECENT_KEY))

    def _read(self) -> dict[str, object]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except Exception as exc:
            logger.warning("Ignoring unreadable store %s: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self) -> None:
        data = {
            FAVORITES_KEY: [entry.to_json() for entry in self._favorites],
            RECENT_KEY: [entry.to_json() for entry in self._recent],
        }
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
            # The previous document stays intact until the swap succeeds.
            os.replace(tmp_path, self.path)
        except Exception as exc:
            logger.warning("Could not write store %s: %s", self.path, exc)
            tmp_path.unlink(missing_ok=True)

    @property
    def favorites(self) -> list[FavoriteEntry]:
        return list(self._favorites)

    @property
    def recent(self) -> list[RecentEntry]:
        return list(self._recent)

    def is_favorite(self, path: str) -> bool:
        return any(entry.path == path for entry in self._favorites)

    def toggle_favorite(self, path: str, name: str) -> bool:
        """Add or remove ``path`` from favorites and return the new membership."""
        if self.is_favorite(path):
            self._favorites = [entry for entry in self._favorites if entry.path != path]
            added = False
        else:
            self._favorites.append(FavoriteEntry(name=name, path=path, added_at=self._clock()))
            added = True
        self._write()
        logger.debug("%s favorite %s", "Added" if added else "Removed", path)
        return added

    def record_recent(self, path: str, name: str) -> None:
        """Move ``path`` to the front of the recent list, evicting past the cap."""
        entry = RecentEntry(name=name, path=path, accessed_at=self._clock())
        remaining = [item for item in self._recent if item.path != path]
        self._recent = [entry, *remaining][:MAX_RECENT]
        self._write()
