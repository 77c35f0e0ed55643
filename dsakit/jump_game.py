"""Counting the ways to climb n stairs taking one or two steps at a time."""

from __future__ import annotations

import functools
from typing import Optional


def jump_bottom_up(n: int) -> int:
    """Return the number of ways to climb n stairs; 0 for negative n."""
    if n < 0:
        return 0
    a, b = 1, 1
    for _ in range(n):
        a, b = b, a + b
    return a


@functools.cache
def jump_recursive(n: int) -> int:
    """Return the number of ways to climb n stairs by recursion."""
    if n <= 1:
        return 1
    return jump_recursive(n - 1) + jump_recursive(n - 2)


def jump_recursive_memo(n: int, memo: Optional[dict[int, int]] = None) -> int:
    """Return the number of ways to climb n stairs, caching in ``memo``."""
    if memo is None:
        memo = {}
    if n <= 1:
        memo[n] = 1
        return 1
    if n in memo:
        return memo[n]
    memo[n] = jump_recursive_memo(n - 1, memo) + jump_recursive_memo(n - 2, memo)
    return memo[n]