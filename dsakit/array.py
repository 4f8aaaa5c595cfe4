"""Arrays with a fixed or a self-adjusting number of slots."""

from __future__ import annotations

import operator
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class FixedArray(Generic[T]):
    """An array with a fixed number of slots, filled from the front without gaps."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[T] = []

    @property
    def capacity(self) -> int:
        """Number of slots the array holds."""
        return self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def append(self, item: T) -> None:
        """Store ``item`` after the last occupied slot."""
        if self.is_full():
            raise OverflowError("array is full")
        self._items.append(item)

    def insert(self, index: int, item: T) -> None:
        """Store ``item`` at ``index``, shifting later items one slot right."""
        if self.is_full():
            raise OverflowError("array is full")
        self._insert_at(index, item)

    def _insert_at(self, index: int, item: T) -> None:
        index = operator.index(index)
        if index < 0 or index == self._capacity or index > len(self._items):
            raise IndexError("insertion is not possible")
        self._items.insert(index, item)

    def _checked(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._items):
            raise IndexError("invalid index")
        return index

    def __getitem__(self, index: int) -> T:
        return self._items[self._checked(index)]

    def __setitem__(self, index: int, item: T) -> None:
        self._items[self._checked(index)] = item

    def __delitem__(self, index: int) -> None:
        del self._items[self._checked(index)]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def copy(self) -> FixedArray[T]:
        """Return an independent array with the same capacity and items."""
        clone = type(self)(self._capacity)
        clone._items = list(self._items)
        return clone

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, capacity={self._capacity})"


class DynamicArray(FixedArray[T]):
    """An array that doubles its slots when full and halves them when half empty."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        super().__init__(capacity)

    @property
    def capacity(self) -> int:
        """Number of slots currently allocated; changes as the array resizes."""
        return self._capacity

    def append(self, item: T) -> None:
        if self.is_full():
            self._capacity *= 2
        self._items.append(item)

    def insert(self, index: int, item: T) -> None:
        if self.is_full():
            self._capacity *= 2
        self._insert_at(index, item)

    def __delitem__(self, index: int) -> None:
        super().__delitem__(index)
        if len(self._items) == self._capacity // 2 and self._capacity != 1:
            self._capacity //= 2