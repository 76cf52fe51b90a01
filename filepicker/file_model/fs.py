"""Directory scanning and per-file metadata lookup for the picker listing.

``readdir`` is strict: one failed stat fails the whole scan. The batch
metadata helpers are lenient and drop entries whose lookup fails.
"""

from __future__ import annotations

import os
import threading
import time
import unicodedata
from collections.abc import Callable, Iterable
from concurrent.futures import Executor, Future, ThreadPoolExecutor

from .types import FileEntry

CONCURRENCY = 10

StatPath = Callable[[str], os.stat_result]
TimingSink = Callable[[str, float], None]
CollationKey = tuple[tuple[tuple[bool, str], ...], tuple[bool, ...]]


def _collation_key(basename: str) -> CollationKey:
    """Accent/case-insensitive primary key with lowercase-first tie break.

    Punctuation and symbols sort ahead of digits and letters.
    """
    decomposed = unicodedata.normalize("NFKD", basename)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    primary = tuple((ch.isalnum(), ch) for ch in stripped.casefold())
    return primary, tuple(ch.isupper() for ch in stripped)


def file_sort_key(entry: FileEntry) -> tuple[bool, CollationKey]:
    """Sort key placing directories first, then basenames in collation order."""
    return (not entry.is_directory, _collation_key(entry.basename))


def sort_files(entries: Iterable[FileEntry]) -> list[FileEntry]:
    """Return ``entries`` in listing order; equal keys keep their input order."""
    return sorted(entries, key=file_sort_key)


def get_file_metadata(filename: str | os.PathLike[str], *, stat_path: StatPath = os.stat) -> FileEntry:
    """Stat one path and wrap it as a ``FileEntry``. Stat errors propagate."""
    path = os.fspath(filename)
    return FileEntry.from_stat(path, stat_path(path))


def readdir(
    dirname: str | os.PathLike[str],
    *,
    concurrency: int = CONCURRENCY,
    stat_path: StatPath = os.stat,
    on_timing: TimingSink | None = None,
) -> list[FileEntry]:
    """List non-hidden children of ``dirname`` with stat metadata, sorted.

    Hidden names (leading ``.``) are dropped before any stat call. At most
    ``concurrency`` stats run at once; they are submitted in listing order
    and the results are collected before sorting, so completion order never
    shows in the output.

    Raises the ``OSError`` from ``os.listdir`` when the directory cannot be
    read, and the first failing stat's ``OSError`` otherwise. No partial
    listing is returned. ``on_timing(dirname, seconds)`` is called after a
    successful scan.
    """
    if concurrency < 1:
        raise ValueError("concurrency must be >= 1")

    started = time.perf_counter()
    directory = os.fspath(dirname)
    filenames = [
        os.path.join(directory, name)
        for name in os.listdir(directory)
        if not name.startswith(".")
    ]

    entries: list[FileEntry] = []
    if filenames:
        with ThreadPoolExecutor(
            max_workers=min(concurrency, len(filenames)),
            thread_name_prefix="filepicker-stat",
        ) as executor:
            futures = [executor.submit(stat_path, filename) for filename in filenames]
            try:
                for filename, future in zip(filenames, futures):
                    entries.append(FileEntry.from_stat(filename, future.result()))
            except BaseException:
                for future in futures:
                    future.cancel()
                raise

    entries.sort(key=file_sort_key)
    if on_timing is not None:
        on_timing(directory, time.perf_counter() - started)
    return entries


def get_all_files_metadata(
    dirname: str | os.PathLike[str],
    basenames: Iterable[str],
    *,
    stat_path: StatPath = os.stat,
) -> list[FileEntry]:
    """Look up ``basenames`` inside ``dirname`` one at a time, in input order.

    Names whose lookup fails are left out, so the result may be shorter than
    the input. This never raises for a bad entry.
    """
    directory = os.fspath(dirname)
    entries: list[FileEntry] = []
    for basename in basenames:
        try:
            entries.append(get_file_metadata(os.path.join(directory, basename), stat_path=stat_path))
        except (OSError, ValueError):
            continue
    return entries


def _run_in_background(
    fn: Callable[..., list[FileEntry]],
    args: tuple[object, ...],
    kwargs: dict[str, object],
    *,
    executor: Executor | None,
    thread_name: str,
) -> Future[list[FileEntry]]:
    """Run ``fn`` on ``executor`` or on a fresh daemon thread and return its future."""
    if executor is not None:
        return executor.submit(fn, *args, **kwargs)

    future: Future[list[FileEntry]] = Future()

    def worker() -> None:
        if not future.set_running_or_notify_cancel():
            return
        try:
            result = fn(*args, **kwargs)
        except BaseException as exc:
            future.set_exception(exc)
        else:
            future.set_result(result)

    threading.Thread(target=worker, name=thread_name, daemon=True).start()
    return future


def readdir_async(
    dirname: str | os.PathLike[str],
    *,
    executor: Executor | None = None,
    **kwargs,
) -> Future[list[FileEntry]]:
    """Non-blocking ``readdir``; errors surface from ``future.result()``."""
    return _run_in_background(
        readdir,
        (dirname,),
        kwargs,
        executor=executor,
        thread_name="filepicker-readdir",
    )


def get_all_files_metadata_async(
    dirname: str | os.PathLike[str],
    basenames: Iterable[str],
    *,
    executor: Executor | None = None,
    **kwargs,
) -> Future[list[FileEntry]]:
    """Non-blocking ``get_all_files_metadata``."""
    return _run_in_background(
        get_all_files_metadata,
        (dirname, list(basenames)),
        kwargs,
        executor=executor,
        thread_name="filepicker-metadata",
    )


__all__ = [
    "CONCURRENCY",
    "file_sort_key",
    "sort_files",
    "get_file_metadata",
    "readdir",
    "get_all_files_metadata",
    "readdir_async",
    "get_all_files_metadata_async",
]
