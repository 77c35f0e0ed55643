"""An undirected graph stored as adjacency lists."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Generic, Optional, TypeVar

T = TypeVar("T", bound=Hashable)


class Graph(Generic[T]):
    """An undirected graph whose neighbours keep insertion order."""

    def __init__(self) -> None:
        self._adjacency: dict[T, list[T]] = {}

    def add_node(self, value: T) -> Graph[T]:
        """Add a node if it is not present and return the graph."""
        self._adjacency.setdefault(value, [])
        return self

    def add_edge(self, a: T, b: T) -> Graph[T]:
        """Connect two nodes, adding them if needed, and return the graph."""
        self.add_node(a).add_node(b)
        self._adjacency[a].append(b)
        self._adjacency[b].append(a)
        return self

    def neighbors(self, value: T) -> Optional[list[T]]:
        """Return the node's neighbours, or None if the node is unknown."""
        adjacent = self._adjacency.get(value)
        return None if adjacent is None else list(adjacent)

    def empty(self) -> bool:
        """Return True when the graph has no nodes."""
        return not self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)