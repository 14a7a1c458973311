"""Checks on the command-line values before they are put on the stack."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations

from pushswap.libft.convert import INT_MAX, INT_MIN, strtol

INVALID_CHAR = "Input contains INVALID CHAR."
DUPLICATE = "Input contains DUPLICATE."
EXCEEDS_INT = "Input exceeds LIMIT of INT."


class InputError(ValueError):
    """Raised when the input values cannot be sorted."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def is_valid_number(text: str) -> bool:
    """True when text is an optional sign followed only by decimal digits."""
    if text[:1] in ("-", "+"):
        text = text[1:]
    return all("0" <= ch <= "9" for ch in text)


def has_duplicate(args: Sequence[str]) -> bool:
    """True when two arguments are the same text."""
    return any(first == second for first, second in combinations(args, 2))


def overflows(args: Sequence[str]) -> bool:
    """True when the magnitude of any argument lies outside the int range."""
    return any(not INT_MIN <= strtol(arg) <= INT_MAX for arg in args)


def check_input(args: Sequence[str]) -> None:
    """Raise InputError for invalid characters, duplicates or overflow, in that order."""
    if not all(is_valid_number(arg) for arg in args):
        raise InputError(INVALID_CHAR)
    if has_duplicate(args):
        raise InputError(DUPLICATE)
    if overflows(args):
        raise InputError(EXCEEDS_INT)