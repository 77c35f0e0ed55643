"""Merge sort."""

from __future__ import annotations

import heapq
from collections.abc import Sequence


def merge_sort(arr: Sequence[int]) -> list[int]:
    """Return a new list with the items of ``arr`` in ascending order."""
    if len(arr) <= 1:
        return list(arr)
    mid = len(arr) // 2
    left = merge_sort(arr[:mid])
    right = merge_sort(arr[mid:])
    # heapq.merge takes from the left run on ties, keeping the sort stable.
    return list(heapq.merge(left, right))