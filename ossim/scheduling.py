"""CPU scheduling: priority, round robin and first-come-first-served."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from itertools import accumulate


@dataclass(frozen=True)
class ScheduledProcess:
    """A process after scheduling, with the time it spent waiting."""

    pid: int
    burst: int
    waiting: int
    priority: int | None = None

    @property
    def turnaround(self) -> int:
        return self.waiting + self.burst


@dataclass(frozen=True)
class GanttSlice:
    """One stretch of CPU time given to a process."""

    pid: int
    start: int
    end: int


@dataclass(frozen=True)
class ScheduleResult:
    """Processes in the order they are listed, and the slices they ran in."""

    processes: tuple[ScheduledProcess, ...]
    gantt: tuple[GanttSlice, ...] = field(default_factory=tuple)

    def total_waiting(self) -> int:
        return sum(process.waiting for process in self.processes)

    def total_turnaround(self) -> int:
        return sum(process.turnaround for process in self.processes)

    def average_waiting(self) -> float:
        """Mean waiting time; NaN when there are no processes."""
        if not self.processes:
            return math.nan
        return self.total_waiting() / len(self.processes)

    def average_turnaround(self) -> float:
        """Mean turnaround time; NaN when there are no processes."""
        if not self.processes:
            return math.nan
        return self.total_turnaround() / len(self.processes)


@dataclass
class _PendingJob:
    pid: int
    burst: int
    remaining: int
    waiting: int = 0


def _exchange_sort(jobs: list[_PendingJob | tuple]) -> Iterator:
    """Order by priority with a pairwise exchange sort.

    Each pass keeps a candidate for the front and trades it for any later
    entry of strictly lower priority, leaving the traded entry in that
    entry's place. Ties therefore do not always keep their input order.
    """
    remaining = list(jobs)
    while remaining:
        candidate, *others = remaining
        rest = []
        for item in others:
            if candidate[2] > item[2]:
                rest.append(candidate)
                candidate = item
            else:
                rest.append(item)
        yield candidate
        remaining = rest


def _sequential(entries: Sequence[tuple[int, int, int | None]]) -> ScheduleResult:
    bursts = [burst for _, burst, _ in entries]
    starts = accumulate(bursts, initial=0)
    processes = tuple(
        ScheduledProcess(pid=pid, burst=burst, waiting=start, priority=priority)
        for (pid, burst, priority), start in zip(entries, starts)
    )
    return ScheduleResult(processes)


def priority_schedule(jobs: Iterable[tuple[int, int]]) -> ScheduleResult:
    """Run (burst, priority) jobs by priority, lower number first.

    Processes are numbered from 1 in input order.
    """
    entries = [
        (pid, burst, priority)
        for pid, (burst, priority) in enumerate(jobs, start=1)
    ]
    return _sequential(list(_exchange_sort(entries)))


def fcfs(bursts: Iterable[int]) -> ScheduleResult:
    """Run jobs in the order given."""
    entries = [(pid, burst, None) for pid, burst in enumerate(bursts, start=1)]
    return _sequential(entries)


def round_robin(bursts: Iterable[int], time_slice: int) -> ScheduleResult:
    """Run jobs in turn, each for at most *time_slice* units at a time.

    Raises ValueError if *time_slice* is not positive.
    """
    if time_slice <= 0:
        raise ValueError("time slice must be positive")
    jobs = [
        _PendingJob(pid=pid, burst=burst, remaining=burst)
        for pid, burst in enumerate(bursts, start=1)
    ]
    clock = 0
    slices: list[GanttSlice] = []
    while any(job.remaining > 0 for job in jobs):
        for job in jobs:
            if job.remaining <= 0:
                continue
            run = min(job.remaining, time_slice)
            job.remaining -= run
            slices.append(GanttSlice(job.pid, clock, clock + run))
            clock += run
            for other in jobs:
                if other is not job and other.remaining > 0:
                    other.waiting += run
    processes = tuple(
        ScheduledProcess(pid=job.pid, burst=job.burst, waiting=job.waiting)
        for job in jobs
    )
    return ScheduleResult(processes, tuple(slices))


def format_gantt(slices: Iterable[GanttSlice]) -> str:
    """Render the slices on one line, each as P<pid>(<start>→<end>)."""
    return "".join(f"P{s.pid}({s.start}→{s.end})  " for s in slices)


def format_report(result: ScheduleResult, show_priority: bool = False) -> str:
    """Render the per-process table followed by totals and averages."""
    if show_priority:
        lines = ["Process\tBurstTime\tPriority\tWaitingTime\tTurnAroundTime"]
        lines += [
            f"{p.pid}\t\t{p.burst}\t\t{p.priority}\t\t{p.waiting}\t\t{p.turnaround}"
            for p in result.processes
        ]
    else:
        lines = ["Process\tBurstTime\tWaitingTime\tTurnAroundTime"]
        lines += [
            f"P{p.pid}\t\t{p.burst}\t\t{p.waiting}\t\t{p.turnaround}"
            for p in result.processes
        ]
    lines += [
        "",
        f"Total Waiting Time: {result.total_waiting()}",
        f"Average Waiting Time: {result.average_waiting():.2f}",
        f"Total Turnaround Time: {result.total_turnaround()}",
        f"Average Turnaround Time: {result.average_turnaround():.2f}",
    ]
    return "\n".join(lines) + "\n"


class _Tokens:
    """Whitespace-separated integers read from a stream, line by line."""

    def __init__(self, stream) -> None:
        self._stream = stream
        self._pending: list[str] = []

    def next_int(self, prompt: str = "") -> int:
        if prompt:
            print(prompt, end="", flush=True)
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise EOFError("unexpected end of input")
            self._pending = line.split()
        return int(self._pending.pop(0))


def _run(body) -> int:
    try:
        body(_Tokens(sys.stdin))
    except (EOFError, ValueError) as error:
        print(f"\ninvalid input: {error}", file=sys.stderr)
        return 1
    return 0


def priority_main(argv: Sequence[str] | None = None) -> int:
    """Read jobs interactively and print a priority schedule."""

    def body(tokens: _Tokens) -> None:
        print("\nPRIORITY SCHEDULING")
        count = tokens.next_int("Enter the number of processes: ")
        print("Enter burst time and priority for each process:")
        jobs = []
        for number in range(1, count + 1):
            burst = tokens.next_int(f"Process {number}: ")
            jobs.append((burst, tokens.next_int()))
        print()
        print(format_report(priority_schedule(jobs), True), end="")

    return _run(body)


def round_robin_main(argv: Sequence[str] | None = None) -> int:
    """Read jobs and a time slice interactively and print a round-robin schedule."""

    def body(tokens: _Tokens) -> None:
        print("\nROUND ROBIN SCHEDULING")
        count = tokens.next_int("Enter number of processes: ")
        time_slice = tokens.next_int("Enter the time slice: ")
        print("Enter burst time for each process:")
        bursts = [
            tokens.next_int(f"Process {number}: ")
            for number in range(1, count + 1)
        ]
        result = round_robin(bursts, time_slice)
        print("\nGantt Chart:")
        print(format_gantt(result.gantt))
        print()
        print(format_report(result, False), end="")

    return _run(body)


def fcfs_main(argv: Sequence[str] | None = None) -> int:
    """Read jobs interactively and print a first-come-first-served schedule."""

    def body(tokens: _Tokens) -> None:
        print("\nFCFS Scheduling...")
        count = tokens.next_int("Enter the number of processes: ")
        bursts = [
            tokens.next_int(f"Enter burst time for Process {number}: ")
            for number in range(1, count + 1)
        ]
        print()
        print(format_report(fcfs(bursts), False), end="")

    return _run(body)


if __name__ == "__main__":
    sys.exit(fcfs_main())