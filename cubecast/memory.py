"""Byte-buffer helpers: filling, copying, searching and comparing raw memory."""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]

SIZE_MAX = (1 << 64) - 1


def _check_span(buffer: Bytes, start: int, n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what}: count must not be negative")
    if start < 0 or start + n > len(buffer):
        raise IndexError(f"{what}: {n} bytes at offset {start} exceed a buffer of {len(buffer)}")


def zero_fill(buffer: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to zero and return it."""
    _check_span(buffer, 0, n, "zero_fill")
    buffer[:n] = bytes(n)
    return buffer


def zeroed(count: int, size: int) -> bytearray:
    """A new zero-filled buffer of ``count * size`` bytes.

    Raises ``OverflowError`` when the total would not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and SIZE_MAX // size < count:
        raise OverflowError(f"{count} * {size} bytes exceeds the addressable size")
    return bytearray(count * size)


def find_byte(data: Bytes, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` (taken modulo 256) in ``data[:n]``."""
    _check_span(data, 0, n, "find_byte")
    target = value & 0xFF
    for index, byte in enumerate(bytes(data[:n])):
        if byte == target:
            return index
    return None


def compare_bytes(a: Bytes, b: Bytes, n: int) -> int:
    """Difference of the first differing bytes within ``n``; 0 when they match."""
    _check_span(a, 0, n, "compare_bytes")
    _check_span(b, 0, n, "compare_bytes")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def copy_bytes(dst: bytearray, src: Bytes, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dst`` and return ``dst``."""
    _check_span(dst, 0, n, "copy_bytes")
    _check_span(src, 0, n, "copy_bytes")
    dst[:n] = bytes(src[:n])
    return dst


def move_bytes(buffer: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes from offset ``src`` to offset ``dst`` inside ``buffer``.

    Overlapping regions are handled as if through a temporary copy.
    """
    _check_span(buffer, src, n, "move_bytes")
    _check_span(buffer, dst, n, "move_bytes")
    buffer[dst:dst + n] = bytes(buffer[src:src + n])
    return buffer


def fill_bytes(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to ``value`` modulo 256."""
    _check_span(buffer, 0, count, "fill_bytes")
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer