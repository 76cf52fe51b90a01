"""Domain model for picker directory listings.

This package contains non-UI primitives:
- the ``FileEntry`` datatype built from a stat snapshot
- strict bounded-concurrency directory scans and lenient metadata batches
- path decomposition for breadcrumbs
"""

from __future__ import annotations

from .types import FileEntry
from .fs import (
    CONCURRENCY,
    file_sort_key,
    get_all_files_metadata,
    get_all_files_metadata_async,
    get_file_metadata,
    readdir,
    readdir_async,
    sort_files,
)
from .paths import breadcrumb_paths, parent_path, split_path, subpaths

__all__ = [
    "FileEntry",
    "CONCURRENCY",
    "file_sort_key",
    "sort_files",
    "get_file_metadata",
    "readdir",
    "readdir_async",
    "get_all_files_metadata",
    "get_all_files_metadata_async",
    "split_path",
    "subpaths",
    "breadcrumb_paths",
    "parent_path",
]
