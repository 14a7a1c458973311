# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of operations. It prints the operations it uses, one per line:

| Operation   | Effect                                        |
|-------------|-----------------------------------------------|
| `sa` `sb`   | swap the top two elements of a / b            |
| `pa` `pb`   | push the top of b onto a / of a onto b        |
| `ra` `rb`   | rotate a / b up: the top goes to the bottom   |
| `rra` `rrb` | rotate a / b down: the bottom goes to the top |

## Installing

```
pip install .
```

## Command line

```
push-swap 3 2 1
```

prints

```
sa
rra
```

If the input is already sorted, nothing is printed and the exit status is 0.
Otherwise the method depends on how many numbers there are:

| Count     | Method                                              |
|-----------|-----------------------------------------------------|
| 2         | a single swap if needed                             |
| 3         | a fixed case table                                  |
| 5         | two pushed to b, three sorted, the two put back     |
| 6 to 100  | bucket sort by ranges of ranks                      |
| 500 and up| binary radix sort on the ranks                      |

Each argument must be an optional `+` or `-` followed by digits. Two
arguments may not be the same text, and the digits, read without their sign,
may not exceed 2147483647. If a check fails the program prints `Error` and
one of these reasons on standard output, then exits with status 1:

```
Input contains INVALID CHAR.
Input contains DUPLICATE.
Input exceeds LIMIT of INT.
```

With no arguments the program exits with status 1 and prints nothing. A
single argument is checked but never sorted; the exit status is 1.

## From Python

```python
from pushswap.cli import solve
from pushswap.stack import PushSwap

ops = solve([3, 2, 1])             # ['sa', 'rra']
ps = PushSwap([3, 2, 1])
for op in ops:
    ps.apply(op)
assert ps.is_sorted()
```

`PushSwap` holds the two stacks as deques of `Node` objects, each with its
value (`content`) and its rank among all values (`index`). `apply` performs
an operation and records it in `ops`; `contents("a")` and `contents("b")`
give the values top first.

`pushswap.validate.check_input` checks a list of argument strings and raises
`InputError` on bad input. The sorting steps are `sort_two`, `sort_three`
and `sort_five` in `pushswap.small`, `sort_large` and `place_into_buckets`
in `pushswap.buckets`, and `sort_radix` and `sort_bits` in `pushswap.radix`.

The `pushswap.libft` sub-package holds small helpers: character tests
(`chars`), integer parsing and formatting (`convert`), writing to a stream
(`output`), string routines (`strings`), a small `printf` and `sprintf`
(`printf`), a singly linked list (`linked_list`) and a line reader for file
descriptors (`gnl`).

## Limits

- Four values, and 101 to 499 values, are not sorted: `solve` raises
  `ValueError`, and the command prints the reason on standard error and exits
  with status 1 (unless the input is already sorted).
- There is no checker command that reads operations and verifies them; use
  `PushSwap.apply` and `PushSwap.is_sorted` for that.
- `pushswap.libft` has no raw-memory helpers.

## Tests

```
pip install .[test]
pytest
```