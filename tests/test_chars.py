import string

import pytest

from cubecast.chars import (
    char_in_set,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    str_is_alnum,
    str_is_alpha,
    to_lower,
    to_upper,
    toggle_quote,
)


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_letters_are_alpha_and_alnum(c):
    assert is_alpha(c)
    assert is_alnum(c)
    assert not is_digit(c)


@pytest.mark.parametrize("c", list(string.digits))
def test_digits(c):
    assert is_digit(c)
    assert is_alnum(c)
    assert not is_alpha(c)


@pytest.mark.parametrize("c", ["@", "[", "`", "{", " ", "é", "٣"])
def test_non_ascii_alnum_rejected(c):
    assert not is_alpha(c)
    assert not is_alnum(c)
    assert not is_digit(c)


def test_accepts_integer_codes():
    assert is_alpha(ord("Q"))
    assert is_digit(ord("7"))
    assert not is_alpha(ord("7"))


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)
    assert not is_ascii("é")


def test_is_print_bounds():
    assert is_print(" ")
    assert is_print("~")
    assert not is_print(31)
    assert not is_print(127)
    assert not is_print("\n")


@pytest.mark.parametrize("lower, upper", zip(string.ascii_lowercase, string.ascii_uppercase))
def test_case_conversion_pairs(lower, upper):
    assert to_upper(lower) == upper
    assert to_lower(upper) == lower
    assert to_upper(upper) == upper
    assert to_lower(lower) == lower


@pytest.mark.parametrize("c", ["1", "@", "é", " "])
def test_case_conversion_leaves_others(c):
    assert to_upper(c) == c
    assert to_lower(c) == c


def test_case_conversion_on_codes():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")


def test_multi_char_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_char_in_set():
    assert char_in_set("1", "1P")
    assert char_in_set("P", "1P")
    assert not char_in_set("0", "1P")
    assert not char_in_set("", "1P")


def test_str_is_alpha():
    assert str_is_alpha("Hello")
    assert not str_is_alpha("Hello1")
    assert str_is_alpha("")


def test_str_is_alnum():
    assert str_is_alnum("abc123")
    assert not str_is_alnum("abc 123")
    assert str_is_alnum("")


def test_toggle_quote_opens():
    assert toggle_quote("", "'") == "'"
    assert toggle_quote("", "x") == "x"


def test_toggle_quote_closes_same():
    assert toggle_quote("'", "'") == ""


def test_toggle_quote_keeps_other():
    assert toggle_quote('"', "'") == '"'
    assert toggle_quote("'", "a") == "'"


def test_toggle_quote_scan_ends_closed():
    state = ""
    for ch in "'ab\"c'":
        state = toggle_quote(state, ch) if ch in "'\"" or not state else state
    assert state == ""