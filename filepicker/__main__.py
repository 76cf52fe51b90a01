"""Module entrypoint for ``python -m filepicker``.

Argument parsing and listing output happen in ``filepicker.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
