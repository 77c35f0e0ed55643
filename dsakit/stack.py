"""A last-in, first-out stack."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """A LIFO stack; popping an empty stack yields None."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> Stack[T]:
        """Put an item on top and return the stack."""
        self._items.append(item)
        return self

    def pop(self) -> Optional[T]:
        """Remove and return the top item, or None when empty."""
        if not self._items:
            return None
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)