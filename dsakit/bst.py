"""A binary search tree of distinct, ordered items."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from .sll import _SizedCollection


@dataclass(slots=True, eq=False)
class _Node:
    data: Any
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree(_SizedCollection):
    """An unbalanced binary search tree; inserting an item already present does nothing."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def _locate(self, item: Any) -> tuple[_Node | None, _Node | None]:
        """Return the last node visited before ``item``'s place, and the node holding it."""
        parent: _Node | None = None
        node = self._root
        while node is not None:
            if item < node.data:
                parent, node = node, node.left
            elif node.data < item:
                parent, node = node, node.right
            else:
                break
        return parent, node

    def insert(self, item: Any) -> None:
        """Add ``item`` unless an equal item is already stored."""
        parent, node = self._locate(item)
        if node is not None:
            return
        new = _Node(item)
        if parent is None:
            self._root = new
        elif item < parent.data:
            parent.left = new
        else:
            parent.right = new
        self._size += 1

    def remove(self, item: Any) -> None:
        """Remove ``item`` if present; a missing item leaves the tree unchanged."""
        parent, node = self._locate(item)
        if node is None:
            return
        if node.left is not None and node.right is not None:
            successor_parent, successor = node, node.right
            while successor.left is not None:
                successor_parent, successor = successor, successor.left
            node.data = successor.data
            parent, node = successor_parent, successor
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        self._size -= 1

    def min_value(self) -> Any:
        """Return the smallest stored item."""
        if self._root is None:
            raise ValueError("tree is empty")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.data

    def inorder(self) -> list[Any]:
        """Return the items in ascending order."""
        return list(self)

    def __iter__(self) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def __contains__(self, item: Any) -> bool:
        return self._locate(item)[1] is not None

    def __len__(self) -> int:
        return self._size