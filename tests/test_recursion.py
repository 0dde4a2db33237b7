import itertools
import math

import pytest

from dsalgo.recursion import (
    countdown,
    fibonacci,
    permutations,
    recursive_fibonacci,
    recursive_sum,
)

FIRST_FIFTEEN = [0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144, 233, 377]


def test_fibonacci_table():
    assert [fibonacci(i) for i in range(15)] == FIRST_FIFTEEN


def test_recursive_fibonacci_table():
    assert [recursive_fibonacci(i) for i in range(15)] == FIRST_FIFTEEN


@pytest.mark.parametrize("n", range(2, 100, 7))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_recursive_agrees_with_iterative():
    assert all(recursive_fibonacci(n) == fibonacci(n) for n in range(20))


@pytest.mark.parametrize("func", [fibonacci, recursive_fibonacci])
def test_fibonacci_negative_raises(func):
    with pytest.raises(ValueError):
        func(-1)


def test_recursive_sum_matches_builtin():
    values = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    assert recursive_sum(values) == sum(values)


def test_recursive_sum_edges():
    assert recursive_sum([]) == 0
    assert recursive_sum([7]) == 7
    assert recursive_sum([1.5, 2.5]) == pytest.approx(4.0)


def test_permutations_single_and_pair():
    assert list(permutations("a")) == [("a",)]
    assert list(permutations("ab")) == [("a", "b"), ("b", "a")]


def test_permutations_three_in_swap_order():
    expected = [
        ("a", "b", "c"),
        ("a", "c", "b"),
        ("b", "a", "c"),
        ("b", "c", "a"),
        ("c", "b", "a"),
        ("c", "a", "b"),
    ]
    assert list(permutations("abc")) == expected


def test_permutations_four_complete_and_unique():
    result = list(permutations("abcd"))
    assert len(result) == math.factorial(4)
    assert set(result) == set(itertools.permutations("abcd"))


def test_permutations_does_not_mutate_input():
    items = ["x", "y", "z"]
    list(permutations(items))
    assert items == ["x", "y", "z"]


def test_countdown():
    assert list(countdown(5)) == list(range(5, 0, -1))
    assert list(countdown(0)) == []