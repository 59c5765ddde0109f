"""Create a child process and report the process ids of parent and child."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

ERROR_MESSAGE = "ERROR IN PROCESS CREATION "


def spawn_child() -> int:
    """Fork the current process.

    Returns the child's pid in the parent and 0 in the child.
    Raises OSError if the process cannot be created.
    """
    return os.fork()


def main(argv: Sequence[str] | None = None) -> int:
    """Fork once; parent and child each print their own process id."""
    try:
        pid = spawn_child()
    except OSError:
        print(ERROR_MESSAGE)
        return 1

    if pid == 0:
        print(f"\n the child process ID is {os.getpid()}")
        sys.stdout.flush()
        os._exit(0)

    print(f"\n the parent process ID is {os.getpid()}")
    sys.stdout.flush()
    os.waitpid(pid, 0)
    return 0


if __name__ == "__main__":
    sys.exit(main())