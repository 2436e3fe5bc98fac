import math

import pytest

from minitools.mathutils import (
    digits_to_decimal,
    factorial,
    factorial_main,
    find_max,
    sum4,
    swap,
)


@pytest.mark.parametrize("n", range(0, 21))
def test_factorial_matches_exact_value(n):
    assert factorial(n) == math.factorial(n)


@pytest.mark.parametrize("n", range(2, 30))
def test_factorial_recurrence_mod_64_bits(n):
    assert factorial(n) == n * factorial(n - 1) % 2**64


def test_factorial_wraps():
    assert factorial(25) == math.factorial(25) % 2**64


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-1)


def test_digits_source_example():
    assert digits_to_decimal([1, 1, 1], 2) == 7


@pytest.mark.parametrize("base", [2, 8, 10, 16])
def test_digits_single_and_place(base):
    assert digits_to_decimal([5 % base], base) == 5 % base
    assert digits_to_decimal([0, 1], base) == base


def test_digits_empty():
    assert digits_to_decimal([], 10) == 0


def test_find_max_source_example():
    assert find_max([3, 5, 1, 12, 2]) == 12


def test_find_max_invariant():
    values = [-4, 17, 0, 17, -90, 3]
    result = find_max(values)
    assert result in values
    assert all(result >= v for v in values)


def test_find_max_empty():
    with pytest.raises(ValueError):
        find_max([])


def test_swap():
    assert swap(10, 20) == (20, 10)


def test_sum4_source_example():
    assert sum4(1, 2, 3, 4) == 10


def test_sum4_wraps():
    assert sum4(2**31 - 1, 1, 0, 0) == -(2**31)


def test_factorial_main(capsys):
    assert factorial_main(["5"]) == 0
    assert capsys.readouterr().out == f"The factorial of 5 is {math.factorial(5)}\n"


@pytest.mark.parametrize("args", [["0"], ["abc"], ["-3"], [], ["1", "2"]])
def test_factorial_main_rejects(args):
    assert factorial_main(args) == 1