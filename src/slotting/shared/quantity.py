from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(frozen=True, slots=True)
class Quantity:
    """
    A strictly positive number of units.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Quantity must be an integer")
        if self.value <= 0:
            raise ValueError("Quantity must be positive")

    @classmethod
    def of(cls, value: int) -> Quantity:
        return cls(value)

    def add(self, other: Quantity) -> Quantity:
        return Quantity(self.value + other.value)

    def subtract(self, other: Quantity) -> Quantity:
        result = self.value - other.value
        if result <= 0:
            raise ValueError("Subtraction would result in non-positive quantity")
        return Quantity(result)

    def multiply(self, factor: int) -> Quantity:
        if factor <= 0:
            raise ValueError("Multiplication factor must be positive")
        return Quantity(self.value * factor)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.value < other.value

    def __str__(self) -> str:
        return str(self.value)
