"""A max-priority queue whose items know their position in the heap."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class PriorityQueueItem(Generic[T]):
    """A value held in a priority queue; ``index`` is maintained by the queue."""

    value: T
    priority: int
    index: int = -1


class PriorityQueue(Generic[T]):
    """A binary heap that pops the item with the highest priority first."""

    def __init__(self) -> None:
        self._items: list[PriorityQueueItem[T]] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, item: PriorityQueueItem[T]) -> None:
        """Add an item to the queue."""
        if not isinstance(item, PriorityQueueItem):
            raise TypeError(
                f"expected PriorityQueueItem, got {type(item).__name__}"
            )
        item.index = len(self._items)
        self._items.append(item)
        self._sift_up(item.index)

    def pop(self) -> PriorityQueueItem[T]:
        """Remove and return the item with the highest priority."""
        if not self._items:
            raise IndexError("priority queue is empty")
        last = len(self._items) - 1
        self._swap(0, last)
        self._sift_down(0, last)
        item = self._items.pop()
        item.index = -1
        return item

    def update(self, item: PriorityQueueItem[T], value: T, priority: int) -> None:
        """Change an item's value and priority and restore heap order."""
        i = item.index
        if not (0 <= i < len(self._items)) or self._items[i] is not item:
            raise ValueError("item is not in this priority queue")
        item.value = value
        item.priority = priority
        if not self._sift_down(i, len(self._items)):
            self._sift_up(i)

    def _less(self, i: int, j: int) -> bool:
        return self._items[i].priority > self._items[j].priority

    def _swap(self, i: int, j: int) -> None:
        items = self._items
        items[i], items[j] = items[j], items[i]
        items[i].index = i
        items[j].index = j

    def _sift_up(self, j: int) -> None:
        while j > 0:
            parent = (j - 1) // 2
            if not self._less(j, parent):
                break
            self._swap(parent, j)
            j = parent

    def _sift_down(self, start: int, n: int) -> bool:
        i = start
        while True:
            child = 2 * i + 1
            if child >= n:
                break
            right = child + 1
            if right < n and self._less(right, child):
                child = right
            if not self._less(child, i):
                break
            self._swap(i, child)
            i = child
        return i > start