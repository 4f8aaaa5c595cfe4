"""A priority queue that serves higher priorities first."""

from __future__ import annotations

import bisect
from collections.abc import Iterator
from typing import Any


class PriorityQueue:
    """Items ordered by descending priority; equal priorities keep insertion order."""

    def __init__(self) -> None:
        self._entries: list[tuple[Any, int]] = []

    def insert(self, item: Any, priority: int) -> None:
        position = bisect.bisect_right(self._entries, -priority, key=lambda entry: -entry[1])
        self._entries.insert(position, (item, priority))

    def pop(self) -> Any:
        """Remove and return the item with the highest priority."""
        if not self._entries:
            raise IndexError("priority queue is empty")
        return self._entries.pop(0)[0]

    def peek(self) -> Any:
        """Return the item with the highest priority without removing it."""
        if not self._entries:
            raise IndexError("priority queue is empty")
        return self._entries[0][0]

    def __iter__(self) -> Iterator[tuple[Any, int]]:
        """Yield ``(item, priority)`` pairs from highest to lowest priority."""
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PriorityQueue({self._entries!r})"