import random

import pytest

from pushswap.radix import sort_bits, sort_radix
from pushswap.stack import PushSwap


def _replay(values, ops):
    ps = PushSwap(values)
    for op in ops:
        ps.apply(op)
    return ps


def test_lowest_bit_pass_puts_even_ranks_first():
    values = random.Random(3).sample(range(1000), 20)
    ps = PushSwap(values)
    sort_bits(ps, 31)
    parities = [node.index % 2 for node in ps.a]
    assert parities == sorted(parities)
    assert ps.contents("b") == []
    assert sorted(ps.contents("a")) == sorted(values)


def test_sort_bits_uses_only_push_and_rotate():
    ps = PushSwap([5, 3, 8, 1, 9, 2])
    sort_bits(ps, 30)
    assert set(ps.ops) <= {"pa", "pb", "ra"}
    assert len(ps.contents("a")) == 6


@pytest.mark.parametrize("bit", [-1, 32])
def test_sort_bits_rejects_bad_position(bit):
    with pytest.raises(ValueError):
        sort_bits(PushSwap([2, 1]), bit)


@pytest.mark.parametrize("n", [2, 7, 64, 500, 731])
def test_sort_radix_sorts(n):
    values = random.Random(n).sample(range(-100000, 100000), n)
    ps = PushSwap(values)
    sort_radix(ps)
    assert ps.contents("a") == sorted(values)
    assert ps.contents("b") == []
    assert _replay(values, ps.ops).contents("a") == sorted(values)


def test_sort_radix_keeps_sorted_input_sorted():
    values = list(range(10))
    ps = PushSwap(values)
    sort_radix(ps)
    assert ps.contents("a") == values