"""A min-heap of integers."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


def _check_int(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"MinHeap holds ints, got {type(value).__name__}")
    return value


class MinHeap:
    """A heap of ints that pops the smallest value first."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._data = [_check_int(v) for v in values]
        heapq.heapify(self._data)

    def push(self, value: int) -> None:
        """Add an int to the heap."""
        heapq.heappush(self._data, _check_int(value))

    def pop(self) -> int:
        """Remove and return the smallest value."""
        if not self._data:
            raise IndexError("heap is empty")
        return heapq.heappop(self._data)

    def __len__(self) -> int:
        return len(self._data)