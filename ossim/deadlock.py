"""Deadlock detection over maximum, allocation and available resource tables."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

RULE = "-" * 61
TITLE = "********** Deadlock Detection Algorithm ************"

Matrix = Sequence[Sequence[int]]


@dataclass(frozen=True)
class DeadlockReport:
    """The need matrix, which processes could finish, and in what order."""

    need: tuple[tuple[int, ...], ...]
    finished: tuple[bool, ...]
    order: tuple[int, ...]

    @property
    def deadlocked(self) -> tuple[int, ...]:
        """Indices (from 0) of the processes that can never finish."""
        return tuple(i for i, done in enumerate(self.finished) if not done)

    @property
    def is_safe(self) -> bool:
        return all(self.finished)


def _check_shapes(maximum: Matrix, allocation: Matrix, available=None) -> int:
    if len(maximum) != len(allocation):
        raise ValueError("maximum and allocation must list the same processes")
    widths = {len(row) for row in (*maximum, *allocation)}
    if available is not None:
        widths.add(len(available))
    if len(widths) > 1:
        raise ValueError("every row must give the same number of resource types")
    return widths.pop() if widths else 0


def need_matrix(maximum: Matrix, allocation: Matrix) -> list[list[int]]:
    """Return maximum minus allocation, row by row."""
    _check_shapes(maximum, allocation)
    return [
        [most - held for most, held in zip(max_row, alloc_row)]
        for max_row, alloc_row in zip(maximum, allocation)
    ]


def detect_deadlock(
    maximum: Matrix, allocation: Matrix, available: Sequence[int]
) -> DeadlockReport:
    """Repeatedly finish any process whose need fits the free resources.

    Raises ValueError if the tables do not agree in shape.
    """
    _check_shapes(maximum, allocation, available)
    need = need_matrix(maximum, allocation)
    work = list(available)
    finished = [False] * len(need)
    order: list[int] = []
    progress = True
    while progress:
        progress = False
        for index, row in enumerate(need):
            if finished[index]:
                continue
            if all(wanted <= free for wanted, free in zip(row, work)):
                work = [free + held for free, held in zip(work, allocation[index])]
                finished[index] = True
                order.append(index)
                progress = True
    return DeadlockReport(
        need=tuple(tuple(row) for row in need),
        finished=tuple(finished),
        order=tuple(order),
    )


def _cells(values: Sequence[int]) -> str:
    return "".join(f"{value} " for value in values)


def format_state(maximum: Matrix, allocation: Matrix, available: Sequence[int]) -> str:
    """Render the allocation, maximum and available tables."""
    lines = ["", RULE, "Process\t\tAllocation\t\tMax\t\tAvailable", RULE]
    for index, (alloc_row, max_row) in enumerate(zip(allocation, maximum)):
        free = _cells(available) if index == 0 else ""
        lines.append(
            f"P{index + 1}\t\t{_cells(alloc_row)}\t\t{_cells(max_row)}\t\t{free}"
        )
    lines.append(RULE)
    return "\n".join(lines) + "\n"


def format_report(report: DeadlockReport) -> str:
    """Render the need matrix and the verdict."""
    lines = ["", "--- NEED MATRIX ---"]
    lines += [f"P{i + 1}\t{_cells(row)}" for i, row in enumerate(report.need)]
    lines.append("")
    if report.deadlocked:
        lines.append("⚠️  System is in DEADLOCK state.")
        names = "".join(f"P{index + 1} " for index in report.deadlocked)
        lines.append(f"Deadlocked processes are: {names}")
    else:
        lines.append("✅ No Deadlock detected. System is in SAFE state.")
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


def _read_tables(reader: _Reader):
    processes = reader.ask("Enter the number of processes: ")
    resources = reader.ask("Enter the number of resource types: ")

    print("\n--- Enter MAX matrix values ---")
    maximum = []
    for p in range(1, processes + 1):
        print(f"Process P{p}:")
        maximum.append(
            [reader.ask(f"  Maximum need of Resource R{r}: ") for r in range(1, resources + 1)]
        )

    print("\n--- Enter ALLOCATION matrix values ---")
    allocation = []
    for p in range(1, processes + 1):
        print(f"Process P{p}:")
        allocation.append(
            [
                reader.ask(f"  Resources of type R{r} currently allocated: ")
                for r in range(1, resources + 1)
            ]
        )

    print("\n--- Enter AVAILABLE resources ---")
    available = [
        reader.ask(f"Available instances of Resource R{r}: ")
        for r in range(1, resources + 1)
    ]
    return maximum, allocation, available


def main(argv: Sequence[str] | None = None) -> int:
    """Read the tables from standard input and report any deadlock."""
    print(TITLE + "\n")
    try:
        maximum, allocation, available = _read_tables(_Reader(sys.stdin))
    except (EOFError, ValueError) as error:
        print(f"\ninvalid input: {error}", file=sys.stderr)
        return 1
    print(format_state(maximum, allocation, available), end="")
    print(format_report(detect_deadlock(maximum, allocation, available)), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())