from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SkuCode:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValueError("SKU code must be a string")
        object.__setattr__(self, "value", self.value.strip())

    @classmethod
    def of(cls, value: str) -> SkuCode:
        return cls(value)

    def __str__(self) -> str:
        return self.value
