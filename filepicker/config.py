"""Persistent JSON config helpers.

Stores the last browsed directory, picker extension constraints, the
rendered filename width, and recently selected files. All access is
defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from platformdirs import user_config_dir

from .picker.selection import DEFAULT_SELECTABLE_EXTENSIONS, normalize_extensions
from .render import FILENAME_CHAR_LIMIT

APP_NAME = "filepicker"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
MAX_RECENT_FILES = 10


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

    Any filesystem/serialization error is ignored to keep CLI behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def load_last_directory() -> Path | None:
    """Return the last browsed directory when it is still a directory."""
    value = load_config().get("last_directory")
    if not isinstance(value, str) or not value.strip():
        return None
    path = Path(value)
    return path if path.is_dir() else None


def save_last_directory(path: Path) -> None:
    config = load_config()
    config["last_directory"] = str(path.resolve())
    save_config(config)


def load_selectable_extensions() -> frozenset[str]:
    """Load picker extension constraints.

    Only a JSON list of strings is accepted; anything else, or a list that
    normalizes to nothing, falls back to the built-in defaults.
    """
    value = load_config().get("selectable_extensions")
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        return DEFAULT_SELECTABLE_EXTENSIONS
    normalized = normalize_extensions(value)
    return normalized if normalized else DEFAULT_SELECTABLE_EXTENSIONS


def save_selectable_extensions(extensions: list[str]) -> None:
    config = load_config()
    config["selectable_extensions"] = sorted(normalize_extensions(extensions))
    save_config(config)


def load_name_limit() -> int:
    """Return the persisted filename width, defaulting for non-positive or non-int values."""
    value = load_config().get("name_limit")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return FILENAME_CHAR_LIMIT
    return value


def load_recent_files() -> list[str]:
    """Return remembered file paths, most recent first.

    Non-string and blank items are skipped, duplicates collapse to their
    first occurrence, and the list is capped at ``MAX_RECENT_FILES``.
    """
    value = load_config().get("recent_files")
    if not isinstance(value, list):
        return []
    recent: list[str] = []
    for item in value:
        if not isinstance(item, str) or not item.strip() or item in recent:
            continue
        recent.append(item)
    return recent[:MAX_RECENT_FILES]


def record_recent_file(path: str | os.PathLike[str]) -> None:
    """Move ``path`` to the front of the recent-files list and persist it."""
    absolute = os.path.abspath(os.fspath(path))
    recent = [absolute] + [item for item in load_recent_files() if item != absolute]
    config = load_config()
    config["recent_files"] = recent[:MAX_RECENT_FILES]
    save_config(config)


__all__ = [
    "CONFIG_PATH",
    "MAX_RECENT_FILES",
    "load_config",
    "save_config",
    "load_last_directory",
    "save_last_directory",
    "load_selectable_extensions",
    "save_selectable_extensions",
    "load_name_limit",
    "load_recent_files",
    "record_recent_file",
]
