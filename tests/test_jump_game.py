import pytest

from dsakit.jump_game import jump_bottom_up, jump_recursive, jump_recursive_memo

CASES = [(5, 8), (45, 1836311903)]


@pytest.mark.parametrize(("n", "expected"), CASES)
def test_jump_bottom_up(n, expected):
    assert jump_bottom_up(n) == expected


@pytest.mark.parametrize(("n", "expected"), CASES)
def test_jump_recursive(n, expected):
    assert jump_recursive(n) == expected


@pytest.mark.parametrize(("n", "expected"), CASES)
def test_jump_recursive_memo(n, expected):
    assert jump_recursive_memo(n, {}) == expected


@pytest.mark.parametrize("n", [0, 1])
def test_small_staircases_have_one_way(n):
    assert jump_bottom_up(n) == 1
    assert jump_recursive(n) == 1
    assert jump_recursive_memo(n) == 1


def test_memo_is_filled():
    memo = {}
    jump_recursive_memo(6, memo)
    assert memo[6] == 13
    assert memo[1] == 1


def test_bottom_up_negative_is_zero():
    assert jump_bottom_up(-1) == 0