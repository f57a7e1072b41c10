import pytest

from pushswap.cli import main
from pushswap.stacks import Stacks


def _replay(values, output):
    stacks = Stacks(values)
    for move in output.splitlines():
        getattr(stacks, move)()
    return list(stacks.a)


def test_no_arguments(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_empty_single_argument(capsys):
    assert main([""]) == 1
    assert capsys.readouterr().err == ""


def test_whitespace_only_argument(capsys):
    assert main(["   "]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_simple_swap(capsys):
    assert main(["2", "1", "3"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_sorted_input_prints_nothing(capsys):
    assert main(["1", "2", "3", "4"]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "args",
    [["1", "1"], ["a"], ["2147483648"], ["-2147483649"], ["1", "2x"], ["1 2 2"]],
)
def test_invalid_input_reports_error(args, capsys):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_single_string_argument(capsys):
    assert main(["5 3\t9 -1\n7 0"]) == 0
    output = capsys.readouterr().out
    assert _replay([5, 3, 9, -1, 7, 0], output) == [-1, 0, 3, 5, 7, 9]


def test_many_arguments(capsys):
    values = [42, -7, 19, 3, 88, -100, 0, 56, 21, 13]
    assert main([str(value) for value in values]) == 0
    output = capsys.readouterr().out
    assert _replay(values, output) == sorted(values)


def test_int_limits_accepted(capsys):
    assert main(["2147483647", "-2147483648"]) == 0
    output = capsys.readouterr().out
    assert _replay([2147483647, -2147483648], output) == [-2147483648, 2147483647]