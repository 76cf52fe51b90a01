"""Public package surface for filepicker.

Exports ``main`` for programmatic CLI invocation.
The directory-listing core lives in ``filepicker.file_model``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
