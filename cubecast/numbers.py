"""Integer parsing and formatting with C integer widths."""

from __future__ import annotations

import re

_LEADING_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")

INT_BITS = 32
LONG_BITS = 64


def _wrap(value: int, bits: int) -> int:
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _parse(text: str, bits: int) -> int:
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return _wrap(value, bits)


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a signed 32-bit value.

    Leading whitespace and a single sign are accepted; parsing stops at the
    first non-digit. Text without digits yields 0.
    """
    return _parse(text, INT_BITS)


def atol(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a signed 64-bit value."""
    return _parse(text, LONG_BITS)


def itoa(n: int) -> str:
    """Format a signed 32-bit integer in decimal."""
    low, high = -(1 << (INT_BITS - 1)), (1 << (INT_BITS - 1)) - 1
    if not low <= n <= high:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)