"""Reading newline-terminated lines from file descriptors."""

from __future__ import annotations

import os
from typing import Iterator, Optional

BUFFER_SIZE = 32
MAX_FD = 4096


class LineReader:
    """Reads one line at a time from any number of descriptors.

    Bytes read past a newline are kept per descriptor for the next call.
    """

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._pending: dict[int, bytes] = {}

    def next_line(self, fd: int) -> Optional[bytes]:
        """Return the next line of ``fd`` with its newline, or None at end of input.

        A read error discards what was buffered for ``fd`` and propagates.
        """
        if not 0 <= fd < MAX_FD:
            raise ValueError(f"file descriptor out of range: {fd}")
        pending = self._pending.pop(fd, b"")
        while b"\n" not in pending:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                break
            pending += chunk
        if not pending:
            return None
        line, newline, rest = pending.partition(b"\n")
        if rest:
            self._pending[fd] = rest
        return line + newline


def iter_lines(fd: int, buffer_size: int = BUFFER_SIZE) -> Iterator[bytes]:
    """Yield every remaining line of ``fd``."""
    reader = LineReader(buffer_size)
    while (line := reader.next_line(fd)) is not None:
        yield line