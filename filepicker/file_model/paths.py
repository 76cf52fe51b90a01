"""Path decomposition helpers backing picker breadcrumbs."""

from __future__ import annotations

import os

_SEPARATORS = os.sep + (os.altsep or "")


def _parse_path(fullpath: str) -> tuple[str, str, str]:
    """Split ``fullpath`` into ``(root, dir, base)``.

    ``root`` is the drive plus leading separator for rooted paths and empty
    for relative ones. Trailing separators are ignored, so ``"a/b/"`` parses
    like ``"a/b"``. A bare root parses to ``(root, root, "")``.
    """
    drive, rest = os.path.splitdrive(fullpath)
    root = drive + os.sep if rest[:1] and rest[:1] in _SEPARATORS else drive
    trimmed = rest.rstrip(_SEPARATORS)
    if not trimmed:
        return root, root, ""
    dir_part, base = os.path.split(drive + trimmed)
    return root, dir_part, base


def split_path(fullpath: str | os.PathLike[str], _segments: list[str] | None = None) -> list[str]:
    """Split a path into its segments from root (or first component) to leaf.

    >>> split_path("/home/user/Downloads")
    ['/', 'home', 'user', 'Downloads']
    >>> split_path("relative/path")
    ['relative', 'path']

    Joining the result with ``os.path.join`` yields an equivalent path.
    Raises ``TypeError`` for values that are not paths.
    """
    path = os.fspath(fullpath)
    if not isinstance(path, str):
        raise TypeError(f"expected a str path, got {type(path).__name__}")
    segments = _segments if _segments is not None else []
    root, dir_part, base = _parse_path(path)

    # relative path with nothing left above ``base``
    if not root and not dir_part:
        return ([base] if base else []) + segments
    # reduced to the bare root
    if root and not base:
        return [root] + segments

    return split_path(dir_part, [base] + segments)


def subpaths(fullpath: object) -> list[str] | None:
    """Return ``split_path(fullpath)``, or ``None`` when ``fullpath`` is not a string."""
    if not isinstance(fullpath, str):
        return None
    return split_path(fullpath)


def breadcrumb_paths(fullpath: str | os.PathLike[str]) -> list[tuple[str, str]]:
    """Pair each segment of ``fullpath`` with the cumulative path ending at it.

    ``"/home/user"`` gives ``[("/", "/"), ("home", "/home"), ("user", "/home/user")]``.
    """
    crumbs: list[tuple[str, str]] = []
    current = ""
    for segment in split_path(fullpath):
        current = os.path.join(current, segment) if current else segment
        crumbs.append((segment, current))
    return crumbs


def parent_path(fullpath: str | os.PathLike[str]) -> str:
    """Return the normalized parent of ``fullpath``; a root is its own parent."""
    return os.path.normpath(os.path.join(os.fspath(fullpath), os.pardir))


__all__ = [
    "split_path",
    "subpaths",
    "breadcrumb_paths",
    "parent_path",
]
