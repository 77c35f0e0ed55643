"""Breadth-first and depth-first traversal of a graph."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Optional, TypeVar

from dsakit.graph import Graph
from dsakit.queues import Queue

T = TypeVar("T", bound=Hashable)


def bfs(graph: Graph[T], start: T) -> list[T]:
    """Return the nodes reachable from start in breadth-first order."""
    if graph.empty():
        return []
    visited: set[T] = set()
    order: list[T] = []
    queue: Queue[T] = Queue()
    queue.push(start)
    while not queue.empty():
        node = queue.pop_left()
        if node in visited:
            continue
        visited.add(node)
        order.append(node)
        for neighbor in graph.neighbors(node) or ():
            if neighbor not in visited:
                queue.push(neighbor)
    return order


def dfs(graph: Graph[T], start: T, visited: Optional[set[T]] = None) -> list[T]:
    """Return the nodes reachable from start in depth-first order.

    Nodes already in ``visited`` are skipped; the set is updated in place.
    """
    if visited is None:
        visited = set()
    if graph.empty() or start in visited:
        return []
    visited.add(start)
    order = [start]
    stack = [iter(graph.neighbors(start) or ())]
    while stack:
        for neighbor in stack[-1]:
            if neighbor not in visited:
                visited.add(neighbor)
                order.append(neighbor)
                stack.append(iter(graph.neighbors(neighbor) or ()))
                break
        else:
            stack.pop()
    return order