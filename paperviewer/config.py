"""Persistent JSON config helpers.

Stores the delivery base URL, the last used manifest and the color
preference. All access is defensive: malformed or missing config falls back
safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

logger = logging.getLogger(__name__)

APP_NAME = "paperviewer"
CONFIG_FILENAME = "config.json"
STORE_FILENAME = "store.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
STORE_PATH = Path(user_data_dir(APP_NAME, appauthor=False)) / STORE_FILENAME

DEFAULT_BASE_URL = "https://cloudflare-b2-worker.studies-c0ba1t-is-a-dev.workers.dev"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem/serialization errors are logged and otherwise ignored so a
    read-only config directory never breaks browsing.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception as exc:
        logger.warning("Could not write config %s: %s", CONFIG_PATH, exc)


def _load_string(key: str) -> str | None:
    """Read a non-blank string value, returning ``None`` when unset/invalid."""
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _save_string(key: str, value: str) -> None:
    stripped = str(value).strip()
    if not stripped:
        return
    config = load_config()
    config[key] = stripped
    save_config(config)


def load_base_url() -> str:
    """Return the persisted delivery base URL or the built-in default."""
    return _load_string("base_url") or DEFAULT_BASE_URL


def save_base_url(base_url: str) -> None:
    _save_string("base_url", base_url)


def load_manifest_path() -> Path | None:
    """Return the last used manifest path, if one was stored."""
    value = _load_string("manifest_path")
    return Path(value) if value is not None else None


def save_manifest_path(path: Path) -> None:
    """Remember ``path`` as the manifest to open when none is given."""
    _save_string("manifest_path", str(path))


def load_theme_color() -> bool:
    """Return persisted color preference.

    Only explicit boolean values are accepted; any other type falls back to
    ``True``.
    """
    value = load_config().get("color")
    return value if isinstance(value, bool) else True
