"""Integer parsing and formatting with C int and long semantics."""

from __future__ import annotations

import re

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_LEADING_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def _wrap(value: int, bits: int) -> int:
    """Reduce value to a signed two's-complement integer of the given width."""
    value &= (1 << bits) - 1
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _leading(text: str) -> tuple[str, int]:
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    return sign, int(digits) if digits else 0


def atoi(text: str) -> int:
    """Parse the leading integer of text, wrapping the result to a 32-bit int."""
    sign, magnitude = _leading(text)
    return _wrap(-magnitude if sign == "-" else magnitude, 32)


def strtol(text: str) -> int:
    """Parse the leading digits of text as a 64-bit long.

    Leading whitespace and an optional sign are skipped; the sign is not
    applied, so the result is the magnitude of the number.
    """
    _, magnitude = _leading(text)
    return _wrap(magnitude, 64)


def itoa(n: int) -> str:
    """Return the decimal representation of n."""
    return f"{n:d}"