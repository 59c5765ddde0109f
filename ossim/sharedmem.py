"""Write a string into a shared memory segment, read it back, remove it."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from multiprocessing import shared_memory

SEGMENT_SIZE = 100
DEFAULT_DATA = "poooda"


@contextmanager
def _segment(size: int) -> Iterator[shared_memory.SharedMemory]:
    segment = shared_memory.SharedMemory(create=True, size=size)
    try:
        yield segment
    finally:
        segment.close()


def _store(segment: shared_memory.SharedMemory, data: str, size: int) -> None:
    payload = data.encode("utf-8") + b"\0"
    if len(payload) > size:
        raise ValueError(
            f"{len(payload)} bytes do not fit in a segment of {size} bytes"
        )
    with segment.buf[: len(payload)] as view:
        view[:] = payload


def _load(segment: shared_memory.SharedMemory, size: int) -> str:
    with segment.buf[:size] as view:
        raw = bytes(view)
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def write_and_read(data: str, size: int = SEGMENT_SIZE) -> str:
    """Store *data* as a NUL-terminated string in a new segment and read it back.

    The string read back ends at the first NUL. Raises ValueError if the
    encoded string and its terminator do not fit in *size* bytes.
    """
    with _segment(size) as segment:
        try:
            _store(segment, data, size)
            return _load(segment, size)
        finally:
            segment.unlink()


def _show_segments() -> None:
    try:
        subprocess.run(["ipcs", "-m"], check=False)
    except OSError as error:
        print(f"ipcs: {error}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Walk through creating, using and removing a shared memory segment."""
    args = list(sys.argv[1:] if argv is None else argv)
    data = args[0] if args else DEFAULT_DATA

    try:
        context = _segment(SEGMENT_SIZE)
        segment = context.__enter__()
    except OSError as error:
        print(f"shmget: {error}", file=sys.stderr)
        return 1

    with context if False else _nullcontext_exit(context):
        print("Creating a new shared memory segment")
        print(f"SHMID: {segment.name}")
        sys.stdout.flush()
        _show_segments()

        print("Writing data to shared memory...")
        try:
            _store(segment, data, SEGMENT_SIZE)
        except ValueError as error:
            print(f"write: {error}", file=sys.stderr)
            segment.unlink()
            return 1
        print("DONE")

        print("Reading data from shared memory...")
        print(f"DATA: {_load(segment, SEGMENT_SIZE)}")
        print("DONE")

        print("Removing shared memory segment...")
        try:
            segment.unlink()
        except OSError:
            print("Can't remove shared memory segment...")
        else:
            print("Removed successfully.")
    return 0


@contextmanager
def _nullcontext_exit(context) -> Iterator[None]:
    try:
        yield
    finally:
        context.__exit__(None, None, None)


if __name__ == "__main__":
    sys.exit(main())