import random

import pytest

from pushswap.cli import main, solve
from pushswap.stack import PushSwap


def _replay(values, ops):
    ps = PushSwap(values)
    for op in ops:
        ps.apply(op)
    return ps


def test_no_arguments_fails_silently(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == ""


def test_single_valid_argument_fails_silently(capsys):
    assert main(["5"]) == 1
    assert capsys.readouterr().out == ""


def test_single_invalid_argument_reports_error(capsys):
    assert main(["x"]) == 1
    assert capsys.readouterr().out == "Error\nInput contains INVALID CHAR.\n"


def test_invalid_character(capsys):
    assert main(["1", "2a", "3"]) == 1
    assert capsys.readouterr().out == "Error\nInput contains INVALID CHAR.\n"


def test_duplicate(capsys):
    assert main(["1", "1"]) == 1
    assert capsys.readouterr().out == "Error\nInput contains DUPLICATE.\n"


def test_overflow(capsys):
    assert main(["1", "2147483648"]) == 1
    assert capsys.readouterr().out == "Error\nInput exceeds LIMIT of INT.\n"


def test_two_values_swapped(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_sorted_input_prints_nothing(capsys):
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == ""


def test_five_values_worked_example(capsys):
    args = ["10", "77", "2", "100", "5"]
    assert main(args) == 0
    ops = capsys.readouterr().out.splitlines()
    assert len(ops) == 14
    assert _replay([int(a) for a in args], ops).is_sorted()


def test_negative_values(capsys):
    args = ["-1", "-3", "-2"]
    assert main(args) == 0
    ops = capsys.readouterr().out.splitlines()
    assert _replay([-1, -3, -2], ops).contents("a") == [-3, -2, -1]


def test_solve_sorted_is_empty():
    assert solve([4, 8, 15]) == []


@pytest.mark.parametrize("n", [3, 5, 50, 500])
def test_solve_sorts(n):
    values = random.Random(n).sample(range(-5000, 5000), n)
    ops = solve(values)
    ps = _replay(values, ops)
    assert ps.contents("a") == sorted(values)
    assert ps.contents("b") == []


def test_solve_four_values_is_rejected():
    with pytest.raises(ValueError):
        solve([4, 3, 2, 1])


def test_main_reports_unsupported_count(capsys):
    assert main(["4", "3", "2", "1"]) == 1
    assert capsys.readouterr().out == ""