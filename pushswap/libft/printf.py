"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

_CONVERSIONS = frozenset("cspdiuxX%")


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >> 31 else value


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _format(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        address = 0 if value is None else int(value) & 0xFFFFFFFFFFFFFFFF
        return f"0x{address:x}"
    if spec in "di":
        return str(_to_int32(int(value)))
    if spec == "u":
        return str(int(value) & 0xFFFFFFFF)
    if spec == "x":
        return f"{int(value) & 0xFFFFFFFF:x}"
    return f"{int(value) & 0xFFFFFFFF:X}"


def sprintf(fmt: str, *args: Any) -> str:
    """Return fmt with its conversions replaced by the formatted arguments.

    An unknown conversion character is written as itself; a lone '%' at
    the end is dropped; text after a NUL character is ignored.
    """
    fmt = fmt.split("\0", 1)[0]
    arg_iter = iter(args)
    pieces: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec in _CONVERSIONS:
            pieces.append(_format(spec, arg_iter))
        else:
            pieces.append(spec)
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return the number of characters."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)