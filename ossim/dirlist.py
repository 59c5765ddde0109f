"""List the entries of a directory, including the "." and ".." entries."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

PROMPT = "\n\n ENTER DIRECTORY NAME: "
MISSING_MESSAGE = "The given directory does not exist"


def list_directory(path: str | os.PathLike[str]) -> list[str]:
    """Return the names in *path*, starting with "." and "..".

    Raises FileNotFoundError or NotADirectoryError if *path* cannot be opened
    as a directory.
    """
    with os.scandir(path) as entries:
        names = [entry.name for entry in entries]
    return [os.curdir, os.pardir, *names]


def _read_directory_name() -> str:
    try:
        words = input(PROMPT).split()
    except EOFError:
        return ""
    return words[0] if words else ""


def main(argv: Sequence[str] | None = None) -> int:
    """List a directory named on the command line, or ask for one."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        path = args[0]
        header = f"\n contents of the directory {path} are "
    else:
        path = _read_directory_name()
        header = None

    try:
        names = list_directory(path) if path else None
    except OSError:
        names = None
    if names is None:
        print(MISSING_MESSAGE)
        return 1

    if header is not None:
        print(header)
    for name in names:
        print(name)
    return 0


if __name__ == "__main__":
    sys.exit(main())