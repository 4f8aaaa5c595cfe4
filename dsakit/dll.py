"""Doubly linked lists, linear and circular."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from .sll import _LinkedCollection
from .sll import _Node as _ForwardNode


@dataclass(slots=True, eq=False)
class _Node(_ForwardNode):
    prev: _Node | None = None


def _walk(node: _Node | None, count: int, step: str) -> Iterator[_Node]:
    for _ in range(count):
        yield node
        node = getattr(node, step)


class DoublyLinkedList(_LinkedCollection):
    """A chain of nodes linked in both directions, open at both ends."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    def _nodes(self) -> Iterator[_Node]:
        return _walk(self._head, self._size, "next")

    def insert_begin(self, item: Any) -> None:
        node = _Node(item, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def insert_end(self, item: Any) -> None:
        node = _Node(item, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_after(self, target: Any, item: Any) -> None:
        """Insert ``item`` right after the first node holding ``target``."""
        node = self._find(target)
        if node is None:
            raise ValueError(f"{target!r} is not in the list")
        new = _Node(item, prev=node, next=node.next)
        if node.next is None:
            self._tail = new
        else:
            node.next.prev = new
        node.next = new
        self._size += 1

    def delete_first(self) -> Any:
        """Remove and return the first item."""
        if self._head is None:
            raise IndexError("list is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return node.data

    def __contains__(self, item: Any) -> bool:
        return self._find(item) is not None

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        return (node.data for node in _walk(self._tail, self._size, "prev"))

    def __len__(self) -> int:
        return self._size


class CircularDoublyLinkedList(_LinkedCollection):
    """A doubly linked ring whose last node links back to the first."""

    def __init__(self) -> None:
        self._start: _Node | None = None
        self._size = 0

    def _nodes(self) -> Iterator[_Node]:
        return _walk(self._start, self._size, "next")

    def _link_before_start(self, item: Any) -> _Node:
        node = _Node(item)
        if self._start is None:
            node.prev = node.next = node
            self._start = node
        else:
            last = self._start.prev
            node.prev = last
            node.next = self._start
            last.next = node
            self._start.prev = node
        self._size += 1
        return node

    def insert_begin(self, item: Any) -> None:
        self._start = self._link_before_start(item)

    def insert_end(self, item: Any) -> None:
        self._link_before_start(item)

    def __contains__(self, item: Any) -> bool:
        return self._find(item) is not None

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        last = None if self._start is None else self._start.prev
        return (node.data for node in _walk(last, self._size, "prev"))

    def __len__(self) -> int:
        return self._size