"""Binary tree nodes and depth-first traversals."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class BinaryTreeNode(Generic[T]):
    """A node of a binary tree."""

    value: T
    left: Optional[BinaryTreeNode[T]] = None
    right: Optional[BinaryTreeNode[T]] = None


def _pre(node: Optional[BinaryTreeNode[T]]) -> Iterator[T]:
    if node is not None:
        yield node.value
        yield from _pre(node.left)
        yield from _pre(node.right)


def _in(node: Optional[BinaryTreeNode[T]]) -> Iterator[T]:
    if node is not None:
        yield from _in(node.left)
        yield node.value
        yield from _in(node.right)


def _post(node: Optional[BinaryTreeNode[T]]) -> Iterator[T]:
    if node is not None:
        yield from _post(node.left)
        yield from _post(node.right)
        yield node.value


def pre_order_traversal(node: Optional[BinaryTreeNode[T]]) -> list[T]:
    """Return the values in node, left, right order."""
    return list(_pre(node))


def in_order_traversal(node: Optional[BinaryTreeNode[T]]) -> list[T]:
    """Return the values in left, node, right order."""
    return list(_in(node))


def post_order_traversal(node: Optional[BinaryTreeNode[T]]) -> list[T]:
    """Return the values in left, right, node order."""
    return list(_post(node))