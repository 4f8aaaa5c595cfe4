"""A singly linked circular list."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from .sll import _LinkedCollection, _Node


class CircularLinkedList(_LinkedCollection):
    """A ring of nodes reached through the last one, whose successor is the first."""

    def __init__(self) -> None:
        self._last: _Node | None = None
        self._size = 0

    def _nodes(self) -> Iterator[_Node]:
        node = None if self._last is None else self._last.next
        for _ in range(self._size):
            yield node
            node = node.next

    def _find_with_previous(self, item: Any) -> tuple[_Node | None, _Node | None]:
        previous = self._last
        for node in self._nodes():
            if node.data == item:
                return previous, node
            previous = node
        return None, None

    def _link_first(self, item: Any) -> _Node:
        node = _Node(item)
        if self._last is None:
            node.next = node
            self._last = node
        else:
            node.next = self._last.next
            self._last.next = node
        self._size += 1
        return node

    def _unlink(self, previous: _Node, node: _Node) -> Any:
        if node is previous:
            self._last = None
        else:
            previous.next = node.next
            if node is self._last:
                self._last = previous
        self._size -= 1
        return node.data

    def insert_begin(self, item: Any) -> None:
        self._link_first(item)

    def insert_end(self, item: Any) -> None:
        self._last = self._link_first(item)

    def insert_after(self, target: Any, item: Any) -> None:
        """Insert ``item`` right after the first node holding ``target``."""
        node = self._find(target)
        if node is None:
            raise ValueError(f"{target!r} is not in the list")
        new = _Node(item, node.next)
        node.next = new
        if node is self._last:
            self._last = new
        self._size += 1

    def delete_first(self) -> Any:
        """Remove and return the first item."""
        if self._last is None:
            raise IndexError("list is empty")
        return self._unlink(self._last, self._last.next)

    def delete_last(self) -> Any:
        """Remove and return the last item."""
        if self._last is None:
            raise IndexError("list is empty")
        previous = self._last
        while previous.next is not self._last:
            previous = previous.next
        return self._unlink(previous, self._last)

    def remove(self, item: Any) -> None:
        """Remove the first node holding ``item``."""
        if self._last is None:
            raise ValueError("list is empty")
        previous, node = self._find_with_previous(item)
        if node is None:
            raise ValueError(f"{item!r} is not in the list")
        self._unlink(previous, node)

    def __contains__(self, item: Any) -> bool:
        return self._find(item) is not None

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._size