"""Print the lines of a file that contain a given word."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

USAGE = "usage:\t. /a.out filename word \n "


@dataclass(frozen=True)
class Match:
    """A matching line and its 1-based line number."""

    line_number: int
    text: str


def grep_lines(lines: Iterable[str], word: str) -> Iterator[Match]:
    """Yield a Match for every line that contains *word*.

    Each line is cut at its first newline before it is searched.
    """
    for number, line in enumerate(lines, start=1):
        text = line.split("\n", 1)[0]
        if word in text:
            yield Match(number, text)


def grep_file(path: str | os.PathLike[str], word: str) -> list[Match]:
    """Return the matches for *word* in the file at *path*."""
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        return list(grep_lines(handle, word))


def main(argv: Sequence[str] | None = None) -> int:
    """Search FILE for WORD and print each matching line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print(USAGE, end="")
        return 1
    path, word = args
    try:
        matches = grep_file(path, word)
    except OSError:
        print(f"grep: couldnot open file : {path} ")
        return 1
    for match in matches:
        print(f"{path}: {match.line_number} {match.text} ")
    return 0


if __name__ == "__main__":
    sys.exit(main())