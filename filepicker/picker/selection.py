"""Selection rules and icon classification for picker entries."""

from __future__ import annotations

from collections.abc import Iterable

from ..file_model import FileEntry

DEFAULT_SELECTABLE_EXTENSIONS = frozenset(
    {".img", ".bin", ".gz", ".bz", ".bz2", ".bzip2", ".bzip", ".dmg", ".iso", ".zip"}
)
ARCHIVE_EXTENSIONS = frozenset({".zip", ".rar", ".gz", ".tar", ".xz", ".bzip", ".bz", ".bz2", ".bzip2"})


def normalize_extensions(extensions: Iterable[str]) -> frozenset[str]:
    """Lowercase extensions and give each a single leading dot; blanks are dropped."""
    normalized: set[str] = set()
    for raw in extensions:
        stripped = str(raw).strip().lower().lstrip(".")
        if stripped:
            normalized.add("." + stripped)
    return frozenset(normalized)


def is_selectable(entry: FileEntry, constraints: Iterable[str] = DEFAULT_SELECTABLE_EXTENSIONS) -> bool:
    """Return whether ``entry`` may be picked.

    Directories are always selectable (they navigate), as are files without
    an extension. Other files must carry one of ``constraints``.
    """
    if entry.is_directory or not entry.ext:
        return True
    return entry.ext.lower() in normalize_extensions(constraints)


def file_icon_kind(entry: FileEntry) -> str:
    if entry.is_directory:
        return "folder"
    if entry.ext.lower() in ARCHIVE_EXTENSIONS:
        return "archive"
    return "file"


__all__ = [
    "DEFAULT_SELECTABLE_EXTENSIONS",
    "ARCHIVE_EXTENSIONS",
    "normalize_extensions",
    "is_selectable",
    "file_icon_kind",
]
