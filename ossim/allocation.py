"""Contiguous memory allocation of files to blocks: worst, first and best fit."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass

HEADER = "File_no\tFile_size\tBlock_no\tBlock_size\tFragment"

# Best fit starts from this fragment and only accepts blocks that leave less.
BEST_FIT_CEILING = 10000

_Candidate = tuple[int, int]  # (block index, fragment left over)
_Chooser = Callable[[list[_Candidate]], "_Candidate | None"]


@dataclass(frozen=True)
class Allocation:
    """Where one file went: a block index (from 0) and the space left, or nowhere."""

    file_size: int
    block: int | None = None
    fragment: int | None = None

    @property
    def allocated(self) -> bool:
        return self.block is not None


def _allocate(
    blocks: Sequence[int], files: Sequence[int], choose: _Chooser
) -> list[Allocation]:
    taken: set[int] = set()
    result: list[Allocation] = []
    for size in files:
        candidates = [
            (index, block - size)
            for index, block in enumerate(blocks)
            if index not in taken and block - size >= 0
        ]
        chosen = choose(candidates) if candidates else None
        if chosen is None:
            result.append(Allocation(size))
            continue
        index, fragment = chosen
        taken.add(index)
        result.append(Allocation(size, index, fragment))
    return result


def _largest(candidates: list[_Candidate]) -> _Candidate:
    return max(candidates, key=lambda candidate: candidate[1])


def _first(candidates: list[_Candidate]) -> _Candidate:
    return candidates[0]


def _smallest(candidates: list[_Candidate]) -> _Candidate | None:
    eligible = [c for c in candidates if c[1] < BEST_FIT_CEILING]
    if not eligible:
        return None
    return min(eligible, key=lambda candidate: candidate[1])


def worst_fit(blocks: Sequence[int], files: Sequence[int]) -> list[Allocation]:
    """Give each file the free block that leaves the largest fragment.

    Ties go to the earliest block; each block holds at most one file.
    """
    return _allocate(blocks, files, _largest)


def first_fit(blocks: Sequence[int], files: Sequence[int]) -> list[Allocation]:
    """Give each file the first free block that is large enough."""
    return _allocate(blocks, files, _first)


def best_fit(blocks: Sequence[int], files: Sequence[int]) -> list[Allocation]:
    """Give each file the free block that leaves the smallest fragment.

    Ties go to the earliest block. A block that would leave a fragment of
    BEST_FIT_CEILING or more is never chosen.
    """
    return _allocate(blocks, files, _smallest)


def format_table(blocks: Sequence[int], allocations: Sequence[Allocation]) -> str:
    """Render one row per file, numbering files and blocks from 1."""
    lines = [HEADER]
    for number, allocation in enumerate(allocations, start=1):
        if allocation.allocated:
            lines.append(
                f"{number}\t\t{allocation.file_size}\t\t{allocation.block + 1}"
                f"\t\t{blocks[allocation.block]}\t\t{allocation.fragment}"
            )
        else:
            lines.append(
                f"{number}\t\t{allocation.file_size}\t\tNot Allocated\t-\t\t-"
            )
    return "\n".join(lines) + "\n"


class _Reader:
    def __init__(self, stream) -> None:
        self._stream = stream
        self._pending: list[str] = []

    def ask(self, prompt: str) -> int:
        print(prompt, end="", flush=True)
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise EOFError("unexpected end of input")
            self._pending = line.split()
        return int(self._pending.pop(0))


def _run(title: str, strategy: Callable[[Sequence[int], Sequence[int]], list[Allocation]]) -> int:
    print(f"\n\tMemory Management Scheme - {title}")
    reader = _Reader(sys.stdin)
    try:
        block_count = reader.ask("Enter the number of blocks: ")
        file_count = reader.ask("Enter the number of files: ")
        print("\nEnter the size of the blocks:")
        blocks = [reader.ask(f"Block {n}: ") for n in range(1, block_count + 1)]
        print("\nEnter the size of the files:")
        files = [reader.ask(f"File {n}: ") for n in range(1, file_count + 1)]
    except (EOFError, ValueError) as error:
        print(f"\ninvalid input: {error}", file=sys.stderr)
        return 1
    print()
    print(format_table(blocks, strategy(blocks, files)), end="")
    return 0


def worst_fit_main(argv: Sequence[str] | None = None) -> int:
    """Read blocks and files from standard input and allocate by worst fit."""
    return _run("Worst Fit", worst_fit)


def first_fit_main(argv: Sequence[str] | None = None) -> int:
    """Read blocks and files from standard input and allocate by first fit."""
    return _run("First Fit", first_fit)


def best_fit_main(argv: Sequence[str] | None = None) -> int:
    """Read blocks and files from standard input and allocate by best fit."""
    return _run("Best Fit", best_fit)


if __name__ == "__main__":
    sys.exit(first_fit_main())