"""Sorting by moving ranges of ranks to stack b, then pulling back the largest."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pushswap.libft.convert import INT_MIN
from pushswap.stack import PushSwap


@dataclass
class Bucket:
    """The layout of the rank ranges and the range currently being moved."""

    n_buckets: int
    bucket_size: int
    min_bucket: int
    max_bucket: int
    lower: int
    upper: int


def _in_bucket(bucket: Bucket, index: int) -> bool:
    return bucket.lower <= index < bucket.upper


def _first_in_bucket(ps: PushSwap, bucket: Bucket) -> Optional[int]:
    return next(
        (pos for pos, node in enumerate(ps.a) if _in_bucket(bucket, node.index)),
        None,
    )


def _last_in_bucket(ps: PushSwap, bucket: Bucket) -> Optional[int]:
    return next(
        (pos for pos, node in enumerate(reversed(ps.a)) if _in_bucket(bucket, node.index)),
        None,
    )


def _drain_bucket(ps: PushSwap, bucket: Bucket) -> None:
    """Push every node of the current range to b, taking the nearer end each time."""
    while (first := _first_in_bucket(ps, bucket)) is not None:
        last = _last_in_bucket(ps, bucket)
        if first <= last:
            ops = ["ra"] * first
        else:
            ops = ["rra"] * (last + 1)
        for op in ops:
            ps.apply(op)
        ps.apply("pb")


def place_into_buckets(ps: PushSwap) -> Bucket:
    """Move all of stack a to stack b, one range of ranks at a time, lowest first."""
    if 5 < ps.n <= 40:
        n_buckets = 5
    elif 40 < ps.n <= 100:
        n_buckets = 10
    else:
        raise ValueError(f"bucket sort handles 6 to 100 values, got {ps.n}")
    size = ps.highest_index // n_buckets + 1
    bucket = Bucket(
        n_buckets=n_buckets,
        bucket_size=size,
        min_bucket=0,
        max_bucket=ps.min_index + size,
        lower=ps.min_index,
        upper=ps.min_index + size,
    )
    for _ in range(n_buckets + 1):
        _drain_bucket(ps, bucket)
        bucket.lower += size
        bucket.upper += size
    return bucket


def _position_of_max(ps: PushSwap, bucket: Bucket) -> Optional[int]:
    target = ps.max_index("b")
    highest = INT_MIN
    for pos, node in enumerate(ps.b):
        highest = max(highest, node.index)
        if pos == bucket.bucket_size or highest == target:
            return pos
    return None


def _insert_largest(ps: PushSwap, bucket: Bucket) -> bool:
    pos = _position_of_max(ps, bucket)
    if pos is None:
        return False
    for _ in range(pos):
        ps.apply("rb")
    ps.apply("pa")
    for _ in range(pos):
        ps.apply("rrb")
    return True


def sort_large(ps: PushSwap) -> None:
    """Sort 6 to 100 values: fill b by ranges, then move the largest back to a."""
    bucket = place_into_buckets(ps)
    while _insert_largest(ps, bucket):
        pass