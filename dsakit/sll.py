"""A singly linked list, and the pieces the other linked containers share."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, eq=False)
class _Node:
    data: Any
    next: _Node | None = None


class _SizedCollection:
    """Representation for iterable containers."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class _LinkedCollection(_SizedCollection, ABC):
    """Search for containers built from nodes."""

    @abstractmethod
    def _nodes(self) -> Iterator[Any]:
        """Yield the nodes from first to last."""

    def _find(self, item: Any) -> Any:
        return next((node for node in self._nodes() if node.data == item), None)


class SinglyLinkedList(_LinkedCollection):
    """A chain of nodes, each pointing to the next."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for item in items:
            self.insert_end(item)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def insert_begin(self, item: Any) -> None:
        node = _Node(item, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def insert_end(self, item: Any) -> None:
        node = _Node(item)
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
        new = _Node(item, node.next)
        node.next = new
        if node is self._tail:
            self._tail = new
        self._size += 1

    def delete_first(self) -> Any:
        """Remove and return the first item."""
        if self._head is None:
            raise IndexError("list is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.data

    def delete_last(self) -> Any:
        """Remove and return the last item."""
        if self._head is None:
            raise IndexError("list is empty")
        last = self._tail
        if self._head is last:
            self._head = self._tail = None
        else:
            previous = next(node for node in self._nodes() if node.next is last)
            previous.next = None
            self._tail = previous
        self._size -= 1
        return last.data

    def remove(self, item: Any) -> None:
        """Remove the first node holding ``item``."""
        if self._head is None:
            raise ValueError("list is empty")
        previous: _Node | None = None
        for node in self._nodes():
            if node.data == item:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                if node is self._tail:
                    self._tail = previous
                self._size -= 1
                return
            previous = node
        raise ValueError(f"{item!r} is not in the list")

    def __contains__(self, item: Any) -> bool:
        return self._find(item) is not None

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def copy(self) -> SinglyLinkedList:
        """Return a new list holding the same items."""
        return type(self)(self)