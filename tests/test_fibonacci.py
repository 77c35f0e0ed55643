import pytest

from dsakit.fibonacci import fib, fib_bottom_up, fib_memo

CASES = [(0, 0), (1, 1), (2, 1), (3, 2), (4, 3), (5, 5)]


@pytest.mark.parametrize(("n", "expected"), CASES)
def test_fib(n, expected):
    assert fib(n) == expected


@pytest.mark.parametrize(("n", "expected"), CASES)
def test_fib_memo(n, expected):
    assert fib_memo(n, {}) == expected


@pytest.mark.parametrize(("n", "expected"), CASES)
def test_fib_bottom_up(n, expected):
    assert fib_bottom_up(n) == expected


def test_fib_memo_fills_memo():
    memo = {}
    assert fib_memo(10, memo) == 55
    assert memo[10] == 55
    assert memo[5] == 5


def test_fib_memo_without_memo():
    assert fib_memo(30) == 832040


def test_fib_bottom_up_negative_is_zero():
    assert fib_bottom_up(-3) == 0