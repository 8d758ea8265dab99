"""Writing characters, strings and numbers straight to file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union

Text = Union[str, bytes]

STDOUT = 1


def _terminated(s: Text) -> bytes:
    """Encode ``s`` and cut it at its first NUL."""
    data = s.encode("utf-8") if isinstance(s, str) else bytes(s)
    return data.split(b"\0", 1)[0]


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char(c: str, fd: int) -> None:
    """Write the single character ``c`` to ``fd``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write_all(fd, c.encode("utf-8"))


def put_str(s: Text, fd: int) -> None:
    """Write ``s`` to ``fd``, stopping at a NUL."""
    _write_all(fd, _terminated(s))


def put_endl(s: Text, fd: int) -> None:
    """Write ``s`` and a newline to ``fd``."""
    _write_all(fd, _terminated(s) + b"\n")


def put_line(s: Optional[Text]) -> None:
    """Write ``s`` and a newline to standard output; ``None`` writes nothing."""
    if s is None:
        return
    _write_all(STDOUT, _terminated(s) + b"\n")


def put_number(n: int, fd: int) -> None:
    """Write the decimal form of ``n`` to ``fd``."""
    _write_all(fd, str(n).encode("ascii"))


def put_unquoted(s: str, fd: int) -> None:
    """Write ``s`` to ``fd`` without the quotes that open and close spans.

    A quote of the other kind inside an open span is written as is.
    """
    quote = ""
    out = []
    for ch in s.split("\0", 1)[0]:
        if not quote and ch in "'\"":
            quote = ch
        elif quote and ch == quote:
            quote = ""
        else:
            out.append(ch)
    _write_all(fd, "".join(out).encode("utf-8"))