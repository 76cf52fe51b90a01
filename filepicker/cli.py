"""Command-line front door for filepicker.

Parses CLI options, resolves the target directory, and prints the sorted
directory listing, a lenient metadata lookup for named entries, or the
recently selected files.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import (
    load_last_directory,
    load_name_limit,
    load_selectable_extensions,
    save_last_directory,
    save_selectable_extensions,
)
from .file_model import CONCURRENCY, get_all_files_metadata, readdir
from .picker import FilePicker, normalize_extensions
from .render import render_breadcrumbs, render_listing


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _resolve_start_directory(path_arg: str | None, default_path: Path | None) -> Path:
    """Pick the directory to browse: explicit arg, then remembered, then cwd."""
    if path_arg is not None:
        return Path(path_arg)
    if default_path is not None:
        return default_path
    remembered = load_last_directory()
    return remembered if remembered is not None else Path.cwd()


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and print a listing for one directory.

    ``default_path`` is primarily for tests; when omitted the remembered
    directory (or the current working directory) is used.
    """
    parser = argparse.ArgumentParser(description="List a directory the way the file picker shows it.")
    parser.add_argument("path", nargs="?", default=None, help="Directory to list. Defaults to the last one listed.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--name-limit",
        type=_positive_int,
        default=None,
        help="Display width for file names before they are middle-ellipsized.",
    )
    parser.add_argument(
        "--concurrency",
        type=_positive_int,
        default=CONCURRENCY,
        help=f"Maximum simultaneous stat calls while scanning (default: {CONCURRENCY}).",
    )
    parser.add_argument(
        "--extensions",
        nargs="+",
        metavar="EXT",
        default=None,
        help="Selectable file extensions; remembered for later runs.",
    )
    parser.add_argument(
        "--metadata",
        nargs="+",
        metavar="NAME",
        default=None,
        help="Look up only these entry names; missing ones are skipped.",
    )
    parser.add_argument(
        "--recent",
        action="store_true",
        help="List recently selected files that still exist, most recent first.",
    )
    args = parser.parse_args()

    if args.extensions is not None:
        save_selectable_extensions(args.extensions)
        constraints = normalize_extensions(args.extensions)
    else:
        constraints = load_selectable_extensions()
    name_limit = args.name_limit if args.name_limit is not None else load_name_limit()

    if args.recent:
        entries = FilePicker(Path.cwd(), constraints=constraints).recent_files()
        sys.stdout.write(render_listing(entries, name_limit=name_limit, constraints=constraints, no_color=args.no_color))
        return

    path = _resolve_start_directory(args.path, default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")

    if args.metadata is not None:
        entries = get_all_files_metadata(path, args.metadata)
    else:
        try:
            entries = readdir(path, concurrency=args.concurrency)
        except OSError as exc:
            raise SystemExit(f"Cannot read directory: {path}: {exc.strerror or exc}") from exc
        save_last_directory(path)

    out = [render_breadcrumbs(str(path.resolve()), no_color=args.no_color), "\n"]
    out.append(render_listing(entries, name_limit=name_limit, constraints=constraints, no_color=args.no_color))
    sys.stdout.write("".join(out))


if __name__ == "__main__":
    main()
