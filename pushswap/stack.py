"""The two stacks of the puzzle, their operations and the ranking of values."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import pairwise

from pushswap.libft.convert import INT_MIN

BITS = 32

OPERATIONS = frozenset({"sa", "sb", "ra", "rb", "rra", "rrb", "pa", "pb"})


def to_binary(value: int) -> str:
    """Return value as a 32-character string of binary digits.

    Values of zero or below give a string of zeros.
    """
    if value <= 0:
        return "0" * BITS
    return format(value, f"0{BITS}b")[-BITS:]


@dataclass(eq=False)
class Node:
    """One element of a stack: its value and its rank among all values."""

    content: int
    index: int = -1

    @property
    def index_bin(self) -> str:
        """The rank as a 32-character binary string."""
        return to_binary(self.index)


class PushSwap:
    """Stacks a and b, with a record of every operation performed.

    All values start on stack a, top first; each node is given its rank
    among the values, starting at 0.
    """

    def __init__(self, values: Iterable[int]) -> None:
        nodes = [Node(value) for value in values]
        if not nodes:
            raise ValueError("at least one value is needed")
        self.a: deque[Node] = deque(nodes)
        self.b: deque[Node] = deque()
        self.ops: list[str] = []
        self.n = len(nodes)
        for rank, node in enumerate(sorted(nodes, key=lambda nd: nd.content)):
            node.index = rank
        self.min_index = 0
        self.highest_index = self.max_index("a")
        self.center = self.highest_index // 2

    def _stack(self, name: str) -> deque[Node]:
        if name == "a":
            return self.a
        if name == "b":
            return self.b
        raise ValueError(f"unknown stack {name!r}")

    def apply(self, op: str) -> bool:
        """Perform op and record it; return False if it was skipped.

        Swaps and rotations of a stack with fewer than two elements are
        skipped, as is a push from an empty stack. A reverse rotation is
        always recorded, even when it changes nothing.
        """
        if op not in OPERATIONS:
            raise ValueError(f"unknown operation {op!r}")
        kind, name = op[:-1], op[-1]
        if kind == "p":
            source, target = (self.b, self.a) if name == "a" else (self.a, self.b)
            if not source:
                return False
            target.appendleft(source.popleft())
        else:
            stack = self._stack(name)
            if kind == "s":
                if len(stack) < 2:
                    return False
                stack[0], stack[1] = stack[1], stack[0]
            elif kind == "r":
                if len(stack) < 2:
                    return False
                stack.rotate(-1)
            elif len(stack) >= 2:
                stack.rotate(1)
        self.ops.append(op)
        return True

    def is_sorted(self) -> bool:
        """True when the values on stack a never decrease from top to bottom."""
        return all(x.content <= y.content for x, y in pairwise(self.a))

    def max_index(self, stack: str) -> int:
        """Highest rank on the named stack; INT_MIN when it is empty."""
        return max((node.index for node in self._stack(stack)), default=INT_MIN)

    def significant_bits(self) -> int:
        """Position of the highest set bit of the largest rank on stack a."""
        bits = to_binary(self.max_index("a"))
        first = bits.find("1")
        return 0 if first < 0 else BITS - 1 - first

    def contents(self, stack: str) -> list[int]:
        """The values on the named stack, top first."""
        return [node.content for node in self._stack(stack)]