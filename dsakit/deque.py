"""A double-ended queue stored in a fixed ring of slots."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from .sll import _SizedCollection


class CircularDeque(_SizedCollection):
    """A bounded deque whose items wrap around a fixed number of slots."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def _index(self, offset: int) -> int:
        return (self._front + offset) % len(self._slots)

    def _put(self, index: int, item: Any) -> None:
        self._slots[index] = item
        self._size += 1

    def _take(self, index: int) -> Any:
        item = self._slots[index]
        self._slots[index] = None
        self._size -= 1
        return item

    def _require_room(self) -> None:
        if self.is_full():
            raise OverflowError("deque is full")

    def _require_items(self) -> None:
        if self.is_empty():
            raise IndexError("deque is empty")

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == len(self._slots)

    def insert_front(self, item: Any) -> None:
        self._require_room()
        self._front = self._index(-1)
        self._put(self._front, item)

    def insert_rear(self, item: Any) -> None:
        self._require_room()
        self._put(self._index(self._size), item)

    def delete_front(self) -> Any:
        """Remove and return the front item."""
        self._require_items()
        item = self._take(self._front)
        self._front = self._index(1)
        return item

    def delete_rear(self) -> Any:
        """Remove and return the rear item."""
        self._require_items()
        return self._take(self._index(self._size - 1))

    def __iter__(self) -> Iterator[Any]:
        return (self._slots[self._index(offset)] for offset in range(self._size))

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularDeque({list(self)!r}, capacity={self.capacity})"