"""Reading a file descriptor one line at a time through a fixed-size buffer."""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional

BUFFER_SIZE = 12


class LineReader:
    """Read lines from ``fd`` in chunks of ``buffer_size`` bytes.

    Each line keeps its trailing newline; the final line may lack one.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = b""

    def read_line(self) -> Optional[str]:
        """The next line, or ``None`` once the descriptor is exhausted.

        A failed read discards any buffered data and raises ``OSError``.
        """
        data = self._pending
        while b"\n" not in data:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending = b""
                raise
            if not chunk:
                break
            data += chunk
        if not data:
            self._pending = b""
            return None
        cut = data.find(b"\n")
        end = len(data) if cut < 0 else cut + 1
        line, self._pending = data[:end], data[end:]
        return line.decode("utf-8", errors="replace")

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


_readers: Dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[str]:
    """The next line of ``fd``, keeping unread data between calls per descriptor.

    Returns ``None`` at end of input. A failed read forgets the descriptor's
    buffered data and raises ``OSError``.
    """
    if fd < 0:
        raise ValueError(f"invalid file descriptor {fd}")
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line