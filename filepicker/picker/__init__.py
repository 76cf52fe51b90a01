"""Picker model: selection rules plus directory navigation state."""

from __future__ import annotations

from .selection import (
    ARCHIVE_EXTENSIONS,
    DEFAULT_SELECTABLE_EXTENSIONS,
    file_icon_kind,
    is_selectable,
    normalize_extensions,
)
from .state import FilePicker

__all__ = [
    "ARCHIVE_EXTENSIONS",
    "DEFAULT_SELECTABLE_EXTENSIONS",
    "normalize_extensions",
    "is_selectable",
    "file_icon_kind",
    "FilePicker",
]
