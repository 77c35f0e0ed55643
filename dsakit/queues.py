"""A double-ended FIFO queue."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class EmptyQueueError(IndexError):
    """Raised when an item is taken from an empty queue."""


class Queue(Generic[T]):
    """A queue that is filled at the right and emptied from either end."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def push(self, item: T) -> Queue[T]:
        """Append an item at the right end and return the queue."""
        self._items.append(item)
        return self

    def pop_left(self) -> T:
        """Remove and return the oldest item."""
        if not self._items:
            raise EmptyQueueError("queue is empty")
        return self._items.popleft()

    def pop_right(self) -> T:
        """Remove and return the newest item."""
        if not self._items:
            raise EmptyQueueError("queue is empty")
        return self._items.pop()

    def empty(self) -> bool:
        """Return True when the queue holds no items."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)