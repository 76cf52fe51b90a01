"""Non-visual picker state: current directory, listing, highlight, selection.

The picker owns navigation and selection rules; scanning is delegated to an
injected callable so callers can run it synchronously or swap in a fake.
Selected files are remembered in a recent-files list, persisted through
``filepicker.config`` unless other callables are injected.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable

from ..file_model import FileEntry, breadcrumb_paths, get_all_files_metadata, parent_path, readdir
from .selection import DEFAULT_SELECTABLE_EXTENSIONS, is_selectable, normalize_extensions

ScanDirectory = Callable[[str], list[FileEntry]]
LoadRecentFiles = Callable[[], list[str]]
RecordRecentFile = Callable[[str], None]


class FilePicker:
    """Directory-browsing state machine behind a file-selection dialog."""

    def __init__(
        self,
        path: str | os.PathLike[str],
        *,
        constraints: Iterable[str] = DEFAULT_SELECTABLE_EXTENSIONS,
        scan: ScanDirectory = readdir,
        load_recent: LoadRecentFiles | None = None,
        record_recent: RecordRecentFile | None = None,
    ) -> None:
        self.path = os.path.abspath(os.fspath(path))
        self.constraints = normalize_extensions(constraints)
        self._scan = scan
        if load_recent is None or record_recent is None:
            from .. import config

            load_recent = load_recent if load_recent is not None else config.load_recent_files
            record_recent = record_recent if record_recent is not None else config.record_recent_file
        self._load_recent = load_recent
        self._record_recent = record_recent
        self.files: list[FileEntry] = []
        self.highlighted: FileEntry | None = None
        self.selected: FileEntry | None = None
        self.scan_error: Exception | None = None

    def refresh(self) -> bool:
        """Rescan ``path``; on failure keep the previous listing and record the error."""
        try:
            files = self._scan(self.path)
        except (OSError, ValueError) as exc:
            self.scan_error = exc
            return False
        self.files = files
        self.scan_error = None
        if self.highlighted is not None and all(f.path != self.highlighted.path for f in files):
            self.highlighted = None
        return True

    def navigate(self, path: str | os.PathLike[str]) -> bool:
        """Move to ``path`` and rescan.

        When the scan fails the picker stays on the previous directory so the
        listing and ``path`` never disagree. Unexpected scan errors restore
        the previous directory before propagating.
        """
        previous_path = self.path
        previous_highlight = self.highlighted
        self.path = os.path.abspath(os.fspath(path))
        self.highlighted = None
        try:
            refreshed = self.refresh()
        except BaseException:
            self.path = previous_path
            self.highlighted = previous_highlight
            raise
        if refreshed:
            return True
        self.path = previous_path
        self.highlighted = previous_highlight
        return False

    def navigate_up(self) -> bool:
        parent = parent_path(self.path)
        if parent == self.path:
            return False
        return self.navigate(parent)

    def highlight(self, entry: FileEntry | None) -> None:
        self.highlighted = entry

    def is_selectable(self, entry: FileEntry) -> bool:
        return is_selectable(entry, self.constraints)

    def _select(self, entry: FileEntry) -> None:
        self.highlighted = entry
        self.selected = entry
        self._record_recent(entry.path)

    def activate(self, entry: FileEntry) -> bool:
        """Open a directory or select a file, like a double click.

        Returns ``False`` when nothing happened: the entry is not selectable
        or the directory could not be scanned.
        """
        if entry.is_directory:
            return self.navigate(entry.path)
        if not self.is_selectable(entry):
            return False
        self._select(entry)
        return True

    def breadcrumbs(self) -> list[tuple[str, str]]:
        return breadcrumb_paths(self.path)

    def confirm_selection(self) -> FileEntry | None:
        """Return the selected file, falling back to a selectable highlighted file."""
        if self.selected is not None:
            return self.selected
        candidate = self.highlighted
        if candidate is not None and not candidate.is_directory and self.is_selectable(candidate):
            self._select(candidate)
            return candidate
        return None

    def recent_files(self) -> list[FileEntry]:
        """Resolve remembered files, most recent first.

        Paths are looked up per parent directory with the lenient metadata
        batch, so files that vanished (or turned into directories) are
        silently left out.
        """
        recent_paths = self._load_recent()
        basenames_by_parent: dict[str, list[str]] = {}
        for recent_path in recent_paths:
            dirname, basename = os.path.split(recent_path)
            basenames_by_parent.setdefault(dirname, []).append(basename)

        found: dict[str, FileEntry] = {}
        for dirname, basenames in basenames_by_parent.items():
            for entry in get_all_files_metadata(dirname, basenames):
                if not entry.is_directory:
                    found[entry.path] = entry
        return [found[recent_path] for recent_path in recent_paths if recent_path in found]

    def reveal(self, entry: FileEntry) -> bool:
        """Navigate to the directory holding ``entry`` and highlight it there."""
        if not self.navigate(entry.dirname):
            return False
        self.highlighted = next((f for f in self.files if f.path == entry.path), None)
        return True


__all__ = [
    "FilePicker",
]
