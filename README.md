# ossim

Small simulations of classic operating-systems topics. You can use them
as a library or from the command line:

- CPU scheduling: first-come first-served, non-preemptive priority and
  round robin, with waiting and turnaround times and a Gantt chart
- Contiguous memory allocation of files to blocks: first fit, best fit
  and worst fit
- Deadlock detection from maximum, allocation and available tables
- A bounded producer/consumer buffer driven by a menu
- Unix utilities: directory listing, space counting, a minimal grep,
  a fork demonstration and a shared-memory round trip

The package needs only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command-line tools

The scheduling, allocation, deadlock and producer/consumer tools prompt
for their input and read whitespace-separated numbers from standard input.
If input ends early or a value is not a number, the tool prints an error
to standard error and exits with status 1.

| Command                         | What it does                                                         |
|---------------------------------|----------------------------------------------------------------------|
| `ossim-fcfs`                    | First-come first-served scheduling report                            |
| `ossim-priority`                | Priority scheduling report; a lower number runs first                |
| `ossim-rr`                      | Round robin scheduling report with a Gantt chart                     |
| `ossim-first-fit`               | First-fit allocation of files to memory blocks                       |
| `ossim-best-fit`                | Best-fit allocation of files to memory blocks                        |
| `ossim-worst-fit`               | Worst-fit allocation of files to memory blocks                       |
| `ossim-deadlock`                | Prints the tables and the need matrix, then lists deadlocked processes |
| `ossim-prodcons`                | Menu: 1 produces, 2 consumes, 3 exits; the buffer holds three items  |
| `ossim-ls [DIR]`                | Lists a directory, with `.` and `..`; asks for a name if none is given |
| `ossim-spaces FILE`             | Counts the space characters in a file                                |
| `ossim-grep FILE WORD`          | Prints each line of FILE that contains WORD, with its line number    |
| `ossim-fork`                    | Forks a child; parent and child each print their process ID          |
| `ossim-shm [TEXT]`              | Writes TEXT (default `poooda`) to a shared-memory segment, reads it back and removes it |

`ossim-prodcons` also stops at the end of its input.
`ossim-shm` runs `ipcs -m` to show the system's segments, if that
command is available.

Example:

```
$ ossim-grep notes.txt deadlock
```

This prints every line of `notes.txt` that contains `deadlock`. Each line
is printed as `notes.txt: <line number> <line>`.

## Library use

### Scheduling

```python
from ossim.scheduling import fcfs, round_robin, priority_schedule, format_report, format_gantt

result = fcfs([24, 3, 3])
print(result.total_waiting(), result.average_turnaround())
print(format_report(result, False))

rr = round_robin([24, 3, 3], 4)
print(format_gantt(rr.gantt))

prio = priority_schedule([(10, 3), (1, 1), (2, 4)])   # (burst, priority) pairs
print(format_report(prio, True))
```

`ScheduleResult.processes` holds `ScheduledProcess` records with `pid`,
`burst`, `waiting`, `priority` and `turnaround`. The averages are NaN
when there are no processes. `round_robin` raises `ValueError` for a time
slice that is not positive.

### Memory allocation

```python
from ossim.allocation import best_fit, format_table

blocks = [100, 500, 200, 300, 600]
files = [212, 417, 112, 426]
print(format_table(blocks, best_fit(blocks, files)))
```

Each file gets an `Allocation` with `block` (from 0) and `fragment`.
Both are `None` when no free block is large enough. Each block holds at
most one file.

### Deadlock detection

```python
from ossim.deadlock import detect_deadlock, format_state, format_report

maximum = [[7, 5, 3], [3, 2, 2], [9, 0, 2]]
allocation = [[0, 1, 0], [2, 0, 0], [3, 0, 2]]
available = [3, 3, 2]
report = detect_deadlock(maximum, allocation, available)
print(report.is_safe, report.deadlocked, report.order)
print(format_state(maximum, allocation, available))
print(format_report(report))
```

`need_matrix` gives maximum minus allocation on its own. Tables whose
shapes do not agree raise `ValueError`.

### Producer and consumer

```python
from ossim.prodcons import BoundedBuffer, BufferEmpty

buffer = BoundedBuffer()      # capacity 3
buffer.produce()              # returns the item number, 1
buffer.consume()              # returns 1
try:
    buffer.consume()
except BufferEmpty:
    print("buffer is empty")
```

`produce` raises `BufferFull` when every slot is taken.

### Files and directories

```python
from ossim.grep import grep_file
from ossim.spaces import count_spaces
from ossim.dirlist import list_directory

for match in grep_file("notes.txt", "deadlock"):
    print(match.line_number, match.text)
print(count_spaces("notes.txt"))
print(list_directory("."))
```

`ossim.forkdemo.spawn_child` and `ossim.sharedmem.write_and_read` need a
POSIX system.

## What it does not do

- The schedulers take no arrival times; every process is ready at time 0.
  Priority scheduling is non-preemptive.
- The interactive tools read only from standard input. They do not load
  input files or save results.
- Deadlock detection reports the current state only. It does not grant
  or refuse resource requests.