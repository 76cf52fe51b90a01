"""Plain-text rendering of picker listings and breadcrumbs.

Rows carry an icon marker, a middle-ellipsized basename, and a size label
for non-directories. Rows that the picker would refuse are dimmed, or
prefixed with ``-`` when colors are disabled.
"""

from __future__ import annotations

import math
import unicodedata
from collections.abc import Iterable
from dataclasses import dataclass

from .file_model import FileEntry, split_path
from .picker.selection import DEFAULT_SELECTABLE_EXTENSIONS, file_icon_kind, is_selectable, normalize_extensions

FILENAME_CHAR_LIMIT = 20
ELLIPSIS = "…"
BREADCRUMB_SEPARATOR = " > "
SIZE_UNITS = ("B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
ICON_MARKERS = {
    "folder": "[D]",
    "archive": "[A]",
    "file": "[F]",
}


@dataclass(frozen=True)
class ListingTheme:
    """ANSI palette for listing rows."""

    reset: str = "\033[0m"
    folder: str = "\033[1;34m"
    archive: str = "\033[38;5;214m"
    file: str = "\033[38;5;252m"
    size: str = "\033[38;5;109m"
    disabled: str = "\033[2m"
    breadcrumb: str = "\033[38;5;81m"


DEFAULT_LISTING_THEME = ListingTheme()


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def _take_columns(chars: Iterable[str], max_cols: int) -> str:
    out: list[str] = []
    col = 0
    for ch in chars:
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(out)


def middle_ellipsis(text: str, limit: int) -> str:
    """Shorten ``text`` to ``limit`` columns by replacing its middle with an ellipsis.

    The head gets the extra column when the remaining budget is odd.
    """
    if limit <= 0:
        return ""
    if display_width(text) <= limit:
        return text
    if limit == 1:
        return ELLIPSIS
    budget = limit - 1
    head = _take_columns(text, math.ceil(budget / 2))
    tail = _take_columns(reversed(text), budget // 2)[::-1]
    return f"{head}{ELLIPSIS}{tail}"


def format_size(num_bytes: int | float) -> str:
    """Format a byte count with decimal units and three significant digits.

    ``1340`` becomes ``"1.34 kB"`` and ``1000`` becomes ``"1 kB"``.
    """
    if num_bytes < 0:
        return "-" + format_size(-num_bytes)
    if num_bytes < 1:
        return f"{num_bytes:g} B"
    exponent = min(int(math.floor(math.log10(num_bytes) / 3)), len(SIZE_UNITS) - 1)
    value = float(f"{num_bytes / 1000 ** exponent:.3g}")
    return f"{value:g} {SIZE_UNITS[exponent]}"


def render_entry(
    entry: FileEntry,
    *,
    name_limit: int = FILENAME_CHAR_LIMIT,
    constraints: Iterable[str] = DEFAULT_SELECTABLE_EXTENSIONS,
    no_color: bool = False,
    theme: ListingTheme = DEFAULT_LISTING_THEME,
) -> str:
    """Render one listing row without a trailing newline."""
    kind = file_icon_kind(entry)
    selectable = is_selectable(entry, constraints)
    name = middle_ellipsis(entry.basename, name_limit)
    size_label = ""
    if not entry.is_directory:
        padding = " " * max(0, name_limit - display_width(name))
        size_label = f"{padding}  {format_size(entry.size)}"

    if no_color:
        mark = "  " if selectable else "- "
        return f"{mark}{ICON_MARKERS[kind]} {name}{size_label}"

    name_color = getattr(theme, kind)
    row = f"  {name_color}{ICON_MARKERS[kind]} {name}{theme.reset}"
    if size_label:
        row += f"{theme.size}{size_label}{theme.reset}"
    if not selectable:
        row = f"{theme.disabled}{row.replace(theme.reset, theme.reset + theme.disabled)}{theme.reset}"
    return row


def render_listing(
    entries: Iterable[FileEntry],
    *,
    name_limit: int = FILENAME_CHAR_LIMIT,
    constraints: Iterable[str] = DEFAULT_SELECTABLE_EXTENSIONS,
    no_color: bool = False,
    theme: ListingTheme = DEFAULT_LISTING_THEME,
) -> str:
    """Render ``entries`` one per line, in the order given."""
    normalized = normalize_extensions(constraints)
    return "".join(
        render_entry(
            entry,
            name_limit=name_limit,
            constraints=normalized,
            no_color=no_color,
            theme=theme,
        )
        + "\n"
        for entry in entries
    )


def render_breadcrumbs(
    path: str,
    *,
    no_color: bool = False,
    theme: ListingTheme = DEFAULT_LISTING_THEME,
) -> str:
    segments = split_path(path)
    if no_color:
        return BREADCRUMB_SEPARATOR.join(segments)
    return BREADCRUMB_SEPARATOR.join(f"{theme.breadcrumb}{segment}{theme.reset}" for segment in segments)


__all__ = [
    "FILENAME_CHAR_LIMIT",
    "ListingTheme",
    "DEFAULT_LISTING_THEME",
    "char_display_width",
    "display_width",
    "middle_ellipsis",
    "format_size",
    "render_entry",
    "render_listing",
    "render_breadcrumbs",
]
