"""Fixed move sequences for stacks of two, three and five values."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.stack import PushSwap


def _run(ps: PushSwap, ops: Iterable[str]) -> None:
    for op in ops:
        ps.apply(op)


def _require(ps: PushSwap, count: int, what: str) -> list[int]:
    values = ps.contents("a")
    if len(values) < count:
        raise ValueError(f"{what} needs at least {count} values on stack a, got {len(values)}")
    return values


def sort_two(ps: PushSwap) -> None:
    """Swap the top two values of stack a when they are out of order."""
    first, second = _require(ps, 2, "sort_two")[:2]
    if first > second:
        ps.apply("sa")


def sort_three(ps: PushSwap) -> None:
    """Order the top three values of stack a with at most two operations."""
    a, b, c = _require(ps, 3, "sort_three")[:3]
    if a > b and b < c and c > a:
        ops: tuple[str, ...] = ("sa",)
    elif a > b and b > c and c < a:
        ops = ("sa", "rra")
    elif a > b and b < c and c < a:
        ops = ("ra",)
    elif a < b and b > c and c > a:
        ops = ("sa", "ra")
    elif a < b and b > c and c < a:
        ops = ("rra",)
    else:
        ops = ()
    _run(ps, ops)


def _put_first(ps: PushSwap) -> None:
    a = ps.contents("a")
    top = ps.contents("b")[0]
    if a[0] > top:
        ops: tuple[str, ...] = ("pa",)
    elif a[0] < top and a[1] > top:
        ops = ("pa", "sa")
    elif a[1] < top and a[2] > top:
        ops = ("rra", "pa", "rra", "rra")
    elif a[2] < top:
        ops = ("pa", "rb")
    else:
        ops = ()
    _run(ps, ops)


def _put_second(ps: PushSwap) -> None:
    a = ps.contents("a")
    top = ps.contents("b")[0]
    if a[0] > top:
        ops: tuple[str, ...] = ("pa",)
    elif a[0] < top and a[1] > top:
        ops = ("pa", "sa")
    elif a[1] < top and a[2] > top:
        ops = ("rra", "rra", "pa", "rra", "rra")
    elif a[2] < top and a[3] > top:
        ops = ("rra", "pa", "rra", "rra", "rra")
    elif a[3] < top:
        ops = ("pa", "ra")
    else:
        ops = ()
    _run(ps, ops)


def sort_five(ps: PushSwap) -> None:
    """Move two values to stack b, sort the other three, then insert the two back."""
    _require(ps, 5, "sort_five")
    ps.apply("pb")
    ps.apply("pb")
    sort_three(ps)
    b_one, b_two = ps.contents("b")[:2]
    if b_one > b_two:
        ps.apply("sb")
    _put_first(ps)
    _put_second(ps)