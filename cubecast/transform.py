"""String transformations: slicing, trimming, splitting and quote handling."""

from __future__ import annotations

from typing import Callable, Iterable, Optional


def substring(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` from ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0:
        raise ValueError("start must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def trim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the text that fits and the full length of ``src``, so a truncation
    shows as a returned length of ``size`` or more.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def bounded_concat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    have had. When ``dest`` already fills the buffer it is left alone and the
    length reported is ``len(src) + size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dst_len, src_len = len(dest), len(src)
    if dst_len >= size:
        return dest, src_len + size
    return dest + src[:size - dst_len - 1], dst_len + src_len


def map_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def each_indexed(s: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(index, char)`` for each character.

    A returned character replaces the one passed in; ``None`` keeps it.
    """
    out = []
    for index, ch in enumerate(s):
        replacement = func(index, ch)
        out.append(ch if replacement is None else replacement)
    return "".join(out)


def remove_chars(s: str, a: str, b: str) -> str:
    """Drop every occurrence of the characters ``a`` and ``b``."""
    return "".join(ch for ch in s if ch != a and ch != b)


def remove_quotes(s: Optional[str]) -> Optional[str]:
    """Strip quote characters that open or close a quoted span.

    A double quote inside single quotes is kept, and the other way round.
    ``None`` is passed through.
    """
    if s is None:
        return None
    in_double = in_single = False
    out = []
    for ch in s:
        if ch == '"' and not in_single:
            in_double = not in_double
        elif ch == "'" and not in_double:
            in_single = not in_single
        else:
            out.append(ch)
    return "".join(out)


def remove_quotes_all(items: Iterable[str]) -> list[str]:
    """Apply :func:`remove_quotes` to every item."""
    return [remove_quotes(item) for item in items]