"""Count the space characters in a file."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

_CHUNK = 64 * 1024


def count_spaces(path: str | os.PathLike[str]) -> int:
    """Return how many ASCII space bytes the file at *path* holds."""
    total = 0
    with open(path, "rb") as handle:
        while chunk := handle.read(_CHUNK):
            total += chunk.count(b" ")
    return total


def main(argv: Sequence[str] | None = None) -> int:
    """Print the number of spaces in the file named as the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("usage: spaces filename")
        return 1
    try:
        count = count_spaces(args[0])
    except OSError:
        print("unable to open a file")
        return 1
    print(f"no of spaces {count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())