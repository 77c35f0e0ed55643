"""All orderings of a list, generated by backtracking."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def permutations(nums: Sequence[T]) -> list[list[T]]:
    """Return every ordering of ``nums`` in swap-backtracking order.

    The input is left unchanged.
    """
    work = list(nums)
    result: list[list[T]] = []

    def backtrack(start: int) -> None:
        if start == len(work):
            result.append(work.copy())
            return
        for i in range(start, len(work)):
            work[start], work[i] = work[i], work[start]
            backtrack(start + 1)
            work[start], work[i] = work[i], work[start]

    backtrack(0)
    return result