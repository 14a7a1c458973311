"""Character classification and per-character string transforms."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional, Union

Char = Union[str, int]

_SPACE_CODES = frozenset(map(ord, " \t\n\r\f\v"))


def _code(c: Char) -> int:
    """Return the character code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def is_alpha(c: Char) -> bool:
    """True for an ASCII letter, upper or lower case."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: Char) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for a code in the range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for a printable ASCII character (32..126)."""
    return 32 <= _code(c) <= 126


def is_space(c: Char) -> bool:
    """True for space, tab, newline, carriage return, form feed or vertical tab."""
    return _code(c) in _SPACE_CODES


def _convert(c: Char, low: int, high: int, shift: int) -> Char:
    code = _code(c)
    if low <= code <= high:
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_upper(c: Char) -> Char:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    return _convert(c, ord("a"), ord("z"), -32)


def to_lower(c: Char) -> Char:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    return _convert(c, ord("A"), ord("Z"), 32)


def str_mapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from f(index, char) applied to every character of s."""
    return "".join(f(i, ch) for i, ch in enumerate(s))


def str_iteri(
    chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]
) -> None:
    """Call f(index, char) on each element in place; a non-None result replaces it."""
    for i, ch in enumerate(chars):
        result = f(i, ch)
        if result is not None:
            chars[i] = result