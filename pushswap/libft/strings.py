"""String helpers with the length limits and edge cases of the C string routines."""

from __future__ import annotations

from typing import Optional, Union

Char = Union[str, int]


def _char(c: Char) -> str:
    """Return c as a one-character string; an int is reduced to a byte."""
    if isinstance(c, int):
        return chr(c & 0xFF)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most size - 1 characters of src.

    Returns the copied text and the length of src, the length that a
    copy without a limit would have had.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst so the result holds at most size - 1 characters.

    Returns the new text and the length the concatenation tried to reach:
    len(dst) + len(src) when dst fits in size, otherwise size + len(src).
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if len(dst) < size:
        total = len(dst) + len(src)
    else:
        total = len(src) + size
    room = max(0, size - len(dst) - 1)
    return dst + src[:room], total


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first occurrence of c in s.

    Searching for the NUL character finds the end of the string.
    Returns None when c does not occur.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last occurrence of c in s, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; the sign of the result orders s1 and s2.

    The end of a string compares as character code 0.
    """
    if n <= 0:
        return 0
    a = s1[:n]
    b = s2[:n]
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    if len(a) == len(b):
        return 0
    shorter_a = len(a) < len(b)
    first = 0 if shorter_a else ord(a[len(b)])
    second = ord(b[len(a)]) if shorter_a else 0
    return first - second


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first occurrence of needle lying wholly in the first length characters.

    An empty needle is found at index 0. Returns None when there is no match.
    """
    if not needle:
        return 0
    window = haystack[: max(0, length)]
    index = window.find(needle)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of s."""
    return "".join(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s beginning at start.

    A start beyond the end of s gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    return s1 + s2


def split(s: str, c: Char) -> list[str]:
    """Split s on the delimiter c, dropping empty pieces."""
    delimiter = _char(c)
    if delimiter == "\0":
        return [s] if s else []
    return [piece for piece in s.split(delimiter) if piece]


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in charset from both ends of s."""
    if not charset:
        return s
    return s.strip(charset)