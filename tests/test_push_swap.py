import itertools
import random

import pytest

from pushswap.push_swap import ERROR_MESSAGE, main
from pushswap.stack import Operation, Stack, apply


def _replay(values, output):
    stack_a = Stack(values)
    stack_b = Stack()
    for line in output.splitlines():
        apply(Operation(line), stack_a, stack_b)
    return stack_a, stack_b


def test_two_numbers_need_one_swap(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_sorted_input_prints_nothing(capsys):
    assert main(["1", "2", "3", "4"]) == 0
    assert capsys.readouterr().out == ""


def test_no_arguments_prints_nothing(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


@pytest.mark.parametrize(
    "args",
    [
        ["1", "1"],
        ["abc"],
        ["2147483648"],
        ["-2147483649"],
        [""],
        ["   "],
        ["3 2 3"],
        ["1", "2a"],
    ],
)
def test_invalid_arguments_report_error(capsys, args):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == ERROR_MESSAGE
    assert captured.out == ""


def test_numbers_in_one_argument(capsys):
    assert main(["3 1 2"]) == 0
    out = capsys.readouterr().out
    stack_a, stack_b = _replay([3, 1, 2], out)
    assert stack_a.values() == [1, 2, 3]
    assert len(stack_b) == 0


@pytest.mark.parametrize("size", [3, 4, 5])
def test_every_small_permutation_is_sorted(capsys, size):
    for perm in itertools.permutations(range(1, size + 1)):
        assert main([str(v) for v in perm]) == 0
        out = capsys.readouterr().out
        stack_a, stack_b = _replay(perm, out)
        assert stack_a.values() == sorted(perm)
        assert len(stack_b) == 0


@pytest.mark.parametrize("size,seed", [(6, 1), (10, 2), (20, 3), (100, 4)])
def test_larger_inputs_are_sorted(capsys, size, seed):
    values = random.Random(seed).sample(range(-1000, 1000), size)
    assert main([str(v) for v in values]) == 0
    out = capsys.readouterr().out
    stack_a, stack_b = _replay(values, out)
    assert stack_a.values() == sorted(values)
    assert len(stack_b) == 0