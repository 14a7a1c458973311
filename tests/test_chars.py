import string

import pytest

from pushswap.libft.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_space,
    str_iteri,
    str_mapi,
    to_lower,
    to_upper,
)


def test_letters_are_alpha():
    assert all(is_alpha(c) for c in string.ascii_letters)
    assert not any(is_alpha(c) for c in string.digits + string.punctuation + " ")


def test_digits():
    assert all(is_digit(c) for c in string.digits)
    assert not any(is_digit(c) for c in string.ascii_letters)


def test_alnum_is_union_of_alpha_and_digit():
    for code in range(256):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_print_bounds():
    assert is_print(" ")
    assert is_print("~")
    assert not is_print(31)
    assert not is_print(127)
    assert all(is_print(c) for c in string.ascii_letters + string.digits)


def test_space_set():
    assert all(is_space(c) for c in " \t\n\r\f\v")
    assert not is_space("a")
    assert not is_space(0)


def test_case_round_trip():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_upper(lower) == upper
        assert to_lower(upper) == lower
        assert to_lower(to_upper(lower)) == lower


def test_non_letters_unchanged():
    for c in string.digits + string.punctuation + " ":
        assert to_upper(c) == c
        assert to_lower(c) == c


def test_int_input_gives_int():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")


def test_multi_char_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_str_mapi_identity_and_upper():
    text = "Hello, world"
    assert str_mapi(text, lambda i, c: c) == text
    assert str_mapi(text, lambda i, c: to_upper(c)) == text.upper()


def test_str_mapi_passes_index():
    assert str_mapi("abc", lambda i, c: str(i)) == "012"


def test_str_iteri_modifies_in_place():
    chars = list("hello")
    str_iteri(chars, lambda i, c: to_upper(c) if i % 2 == 0 else None)
    assert "".join(chars) == "HeLlO"


def test_str_iteri_none_keeps_chars():
    chars = list("keep")
    str_iteri(chars, lambda i, c: None)
    assert chars == list("keep")