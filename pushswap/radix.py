"""Binary radix sort on the ranks of the values."""

from __future__ import annotations

from pushswap.stack import BITS, PushSwap


def sort_bits(ps: PushSwap, bit: int) -> None:
    """One pass: push ranks with a 0 at string position bit to b, rotate the rest, bring b back.

    Position 31 of the 32-character binary rank is its lowest bit.
    """
    if not 0 <= bit < BITS:
        raise ValueError(f"bit position must be in 0..{BITS - 1}, got {bit}")
    handled = 0
    while ps.a and handled < ps.n:
        if ps.a[0].index_bin[bit] == "0":
            ps.apply("pb")
        else:
            ps.apply("ra")
        handled += 1
    for _ in range(len(ps.b) + 1):
        ps.apply("pa")


def sort_radix(ps: PushSwap) -> None:
    """Sort stack a with one pass per bit of the largest rank, lowest bit first."""
    top = ps.significant_bits()
    for bit in range(BITS - 1, BITS - 2 - top, -1):
        sort_bits(ps, bit)