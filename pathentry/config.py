"""Persistent JSON config helpers.

Stores an optional resource subdirectory name. ``PathEntry`` never reads it;
callers opt in through ``open_configured_resource_directory``.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .entry import RESOURCE_DIRNAME, PathEntry
from .normalize import SPLIT_SEPARATORS
from .platform import PlatformQuery

APP_NAME = "pathentry"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_RESOURCE_DIRNAME = RESOURCE_DIRNAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored so an unwritable config
    directory never breaks path operations.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError):
        pass


def _valid_dirname(value: object) -> str | None:
    """Return ``value`` stripped when it is a single usable path segment."""
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    if not stripped or stripped in {".", ".."}:
        return None
    if any(sep in stripped for sep in SPLIT_SEPARATORS):
        return None
    return stripped


def load_resource_dirname() -> str:
    """Return the configured resource subdirectory name.

    Only a single non-empty path segment is accepted; anything else falls
    back to ``DEFAULT_RESOURCE_DIRNAME``.
    """
    return _valid_dirname(load_config().get("resource_dirname")) or DEFAULT_RESOURCE_DIRNAME


def save_resource_dirname(dirname: str) -> None:
    """Persist the resource subdirectory name; invalid names are ignored."""
    valid = _valid_dirname(dirname)
    if valid is None:
        return
    config = load_config()
    config["resource_dirname"] = valid
    save_config(config)


def open_configured_resource_directory(platform: PlatformQuery | None = None) -> PathEntry:
    """Open the resource directory using the persisted subdirectory name."""
    return PathEntry.open_resource_directory(platform, dirname=load_resource_dirname())


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_RESOURCE_DIRNAME",
    "load_config",
    "save_config",
    "load_resource_dirname",
    "save_resource_dirname",
    "open_configured_resource_directory",
]
