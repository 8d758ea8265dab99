"""Searching and comparing text that follows NUL-terminated string rules.

Every function here treats its input as ending at the first NUL character,
so anything after an embedded ``"\\0"`` is never seen. Both ``str`` and
``bytes`` are accepted; comparisons work on unsigned code units.
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

Text = Union[str, bytes, bytearray]
CharLike = Union[str, int]


def _units(s: Text) -> list[int]:
    """Code units of ``s`` up to (not including) the first NUL."""
    codes: Sequence[int] = [ord(ch) for ch in s] if isinstance(s, str) else s
    units = []
    for code in codes:
        if code == 0:
            break
        units.append(code)
    return units


def _unit(c: CharLike) -> int:
    if isinstance(c, int):
        return c
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return ord(c)


def c_length(s: Optional[Text]) -> int:
    """Length of ``s`` up to its first NUL; ``None`` counts as empty."""
    if s is None:
        return 0
    return len(_units(s))


def find_char(s: Text, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or ``None``.

    Searching for NUL finds the terminator, so it returns the string's length.
    """
    target = _unit(c)
    units = _units(s)
    if target == 0:
        return len(units)
    for index, code in enumerate(units):
        if code == target:
            return index
    return None


def rfind_char(s: Text, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or ``None``.

    Searching for NUL finds the terminator, so it returns the string's length.
    """
    target = _unit(c) & 0xFF if isinstance(s, (bytes, bytearray)) else _unit(c)
    units = _units(s)
    if target == 0:
        return len(units)
    for index in reversed(range(len(units))):
        if units[index] == target:
            return index
    return None


def find_either(s: Text, a: CharLike, b: CharLike) -> Optional[int]:
    """Index of the first character equal to ``a`` or ``b``, or ``None``.

    If either of them is NUL and neither occurs earlier, the terminator's
    index is returned.
    """
    wanted = {_unit(a), _unit(b)}
    units = _units(s)
    for index, code in enumerate(units):
        if code in wanted:
            return index
    if 0 in wanted:
        return len(units)
    return None


def rfind_either(s: Text, a: CharLike, b: CharLike) -> Optional[int]:
    """Index of the last character equal to ``a`` or ``b``, or ``None``."""
    wanted = {_unit(a), _unit(b)}
    found = None
    for index, code in enumerate(_units(s)):
        if code in wanted:
            found = index
    return found


def compare(s1: Optional[Text], s2: Optional[Text]) -> int:
    """Compare two strings, returning the difference of the first differing units.

    Returns 0 when equal, and -1 if either argument is ``None``.
    """
    if s1 is None or s2 is None:
        return -1
    left = _units(s1) + [0]
    right = _units(s2) + [0]
    for x, y in zip(left, right):
        if x != y or x == 0:
            return x - y
    return 0


def compare_n(s1: Text, s2: Text, n: int) -> int:
    """Compare at most ``n`` units of two strings; 0 when they agree that far."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0
    left = _units(s1) + [0]
    right = _units(s2) + [0]
    for x, y in zip(left[:n], right[:n]):
        if x != y or x == 0:
            return x - y
    return 0


def find_in_prefix(haystack: Text, needle: Text, length: int) -> Optional[int]:
    """Index of ``needle`` within the first ``length`` units of ``haystack``, or ``None``.

    An empty needle is found at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    hay = _units(haystack)
    pattern = _units(needle)
    if not pattern:
        return 0
    window = hay[:length]
    last_start = len(window) - len(pattern)
    for start in range(last_start + 1):
        if window[start:start + len(pattern)] == pattern:
            return start
    return None