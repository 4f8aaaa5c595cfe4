"""A value shared by every Item."""

from __future__ import annotations


class Item:
    """Holds one class-wide value, initially 20."""

    _shared: int = 20

    @classmethod
    def set_data(cls, value: int) -> None:
        Item._shared = value

    @classmethod
    def get_data(cls) -> int:
        return Item._shared