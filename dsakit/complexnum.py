"""A pair of integer parts that add and negate component-wise."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ComplexPair:
    """Two integer parts ``a`` and ``b``; both default to zero."""

    a: int = 0
    b: int = 0

    def __add__(self, other: ComplexPair) -> ComplexPair:
        if not isinstance(other, ComplexPair):
            return NotImplemented
        return ComplexPair(self.a + other.a, self.b + other.b)

    def __neg__(self) -> ComplexPair:
        return ComplexPair(-self.a, -self.b)

    def __str__(self) -> str:
        return f"a={self.a}b= {self.b}"