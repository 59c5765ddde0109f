"""Producer and consumer sharing a bounded buffer, guarded by counting semaphores."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

DEFAULT_CAPACITY = 3
MENU = "\n1. PRODUCER\n2. CONSUMER\n3. EXIT"


class BufferFull(Exception):
    """Raised when an item is produced into a full buffer."""


class BufferEmpty(Exception):
    """Raised when an item is consumed from an empty buffer."""


def _wait(value: int) -> int:
    return value - 1


def _signal(value: int) -> int:
    return value + 1


class BoundedBuffer:
    """A buffer of *capacity* slots whose items are numbered as they are produced."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._mutex = 1
        self._full = 0
        self._empty = capacity
        self._item = 0

    @property
    def count(self) -> int:
        """Number of items in the buffer."""
        return self._full

    @property
    def free(self) -> int:
        """Number of empty slots."""
        return self._empty

    @contextmanager
    def _critical(self) -> Iterator[None]:
        self._mutex = _wait(self._mutex)
        try:
            yield
        finally:
            self._mutex = _signal(self._mutex)

    def produce(self) -> int:
        """Add an item and return its number. Raises BufferFull if no slot is free."""
        if self._mutex != 1 or self._empty == 0:
            raise BufferFull("BUFFER IS FULL!")
        with self._critical():
            self._empty = _wait(self._empty)
            self._full = _signal(self._full)
            self._item += 1
            return self._item

    def consume(self) -> int:
        """Remove the newest item and return its number. Raises BufferEmpty if none."""
        if self._mutex != 1 or self._full == 0:
            raise BufferEmpty("BUFFER IS EMPTY!")
        with self._critical():
            self._full = _wait(self._full)
            self._empty = _signal(self._empty)
            item = self._item
            self._item -= 1
            return item


def _choices(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Offer a menu to produce, consume or exit, read from standard input."""
    buffer = BoundedBuffer()
    print(MENU)
    tokens = _choices(sys.stdin)
    while True:
        print("\nENTER YOUR CHOICE: ", end="", flush=True)
        choice = next(tokens, None)
        if choice is None:
            print()
            return 0
        if choice == "1":
            try:
                print(f"\nProducer produces item {buffer.produce()}", end="")
            except BufferFull:
                print("\nBUFFER IS FULL!", end="")
        elif choice == "2":
            try:
                print(f"\nConsumer consumes item {buffer.consume()}", end="")
            except BufferEmpty:
                print("\nBUFFER IS EMPTY!", end="")
        elif choice == "3":
            print("\nExiting program...")
            return 0
        else:
            print("\nInvalid choice! Please enter 1, 2, or 3.")


if __name__ == "__main__":
    sys.exit(main())