"""Domain datatypes for directory-listing entries."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field

_SEPARATORS = os.sep + (os.altsep or "")


@dataclass(frozen=True)
class FileEntry:
    """One child of a scanned directory plus its stat snapshot."""

    path: str
    dirname: str
    basename: str
    name: str
    ext: str
    is_hidden: bool
    is_file: bool
    is_directory: bool
    is_block_device: bool
    is_character_device: bool
    stats: os.stat_result = field(repr=False, compare=False)

    @classmethod
    def from_stat(cls, filename: str | os.PathLike[str], stats: os.stat_result) -> FileEntry:
        """Build an entry for ``filename`` from an already-fetched stat result.

        ``name``/``ext`` follow ``os.path.splitext``, so dotfiles such as
        ``.bashrc`` keep the whole basename as ``name`` and an empty ``ext``.
        Trailing separators are dropped, so ``"docs/"`` has basename ``"docs"``.
        """
        drive, rest = os.path.splitdrive(os.fspath(filename))
        path = drive + (rest.rstrip(_SEPARATORS) or rest[:1])
        dirname, basename = os.path.split(path)
        name, ext = os.path.splitext(basename)
        mode = stats.st_mode
        return cls(
            path=path,
            dirname=dirname,
            basename=basename,
            name=name,
            ext=ext,
            is_hidden=name.startswith("."),
            is_file=stat.S_ISREG(mode),
            is_directory=stat.S_ISDIR(mode),
            is_block_device=stat.S_ISBLK(mode),
            is_character_device=stat.S_ISCHR(mode),
            stats=stats,
        )

    @property
    def size(self) -> int:
        return int(self.stats.st_size)


__all__ = [
    "FileEntry",
]
