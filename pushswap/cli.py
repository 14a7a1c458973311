"""Command line: validate the values, sort them and print the operations used."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import Optional

from pushswap.buckets import sort_large
from pushswap.libft.convert import atoi
from pushswap.radix import sort_radix
from pushswap.small import sort_five, sort_three, sort_two
from pushswap.stack import PushSwap
from pushswap.validate import InputError, check_input


def solve(values: Iterable[int]) -> list[str]:
    """Return the operations that sort values, choosing a method by their count."""
    ps = PushSwap(values)
    if ps.is_sorted():
        return []
    if ps.n == 2:
        sort_two(ps)
    elif ps.n == 3:
        sort_three(ps)
    elif ps.n <= 5:
        sort_five(ps)
    elif ps.n < 500:
        sort_large(ps)
    else:
        sort_radix(ps)
    return list(ps.ops)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the sorter on the given arguments; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 1
    try:
        check_input(args)
    except InputError as err:
        print("Error")
        print(err.message)
        return 1
    if len(args) == 1:
        return 1
    try:
        ops = solve(atoi(arg) for arg in args)
    except ValueError as err:
        print(err, file=sys.stderr)
        return 1
    if ops:
        sys.stdout.write("\n".join(ops) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())