"""Character classification and case helpers restricted to ASCII."""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]


def _code(c: CharLike) -> int:
    """Return the code point of a one-character string or pass an int through."""
    if isinstance(c, int):
        return c
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return ord(c)


def _same_kind(original: CharLike, code: int) -> CharLike:
    return code if isinstance(original, int) else chr(code)


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for code points 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if 97 <= code <= 122:
        return _same_kind(c, code - 32)
    return c


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if 65 <= code <= 90:
        return _same_kind(c, code + 32)
    return c


def char_in_set(c: str, charset: str) -> bool:
    """True if the single character ``c`` appears in ``charset``."""
    return len(c) == 1 and c in charset


def str_is_alpha(s: str) -> bool:
    """True if every character of ``s`` is an ASCII letter (vacuously true when empty)."""
    return all(is_alpha(ch) for ch in s)


def str_is_alnum(s: str) -> bool:
    """True if every character of ``s`` is an ASCII letter or digit (vacuously true when empty)."""
    return all(is_alnum(ch) for ch in s)


def toggle_quote(current: str, char: str) -> str:
    """Track the open quote while scanning text.

    ``current`` is the quote that is open, or ``""`` when none is. With no quote
    open, ``char`` becomes the new state; with a quote open, meeting the same
    quote closes it and anything else leaves it open.
    """
    if not current:
        return char
    if char == current:
        return ""
    return current