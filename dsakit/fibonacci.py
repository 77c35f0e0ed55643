"""Fibonacci numbers computed three ways."""

from __future__ import annotations

from typing import Optional


def fib(n: int) -> int:
    """Return the n-th Fibonacci number by plain recursion."""
    if n <= 1:
        return n
    return fib(n - 1) + fib(n - 2)


def fib_memo(n: int, memo: Optional[dict[int, int]] = None) -> int:
    """Return the n-th Fibonacci number, caching results in ``memo``."""
    if memo is None:
        memo = {}
    if n <= 1:
        return n
    if n in memo:
        return memo[n]
    memo[n] = fib_memo(n - 1, memo) + fib_memo(n - 2, memo)
    return memo[n]


def fib_bottom_up(n: int) -> int:
    """Return the n-th Fibonacci number iteratively; 0 for negative n."""
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a