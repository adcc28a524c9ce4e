from __future__ import annotations

from slotting.exceptions.base import SlottingError


class InvalidBinLocation(SlottingError, ValueError):
    def __init__(self, value: object):
        self.value = value
        super().__init__(value)

    def __str__(self) -> str:
        return f"Invalid bin location {self.value!r}, expected 'Aisle-Rack-Level'"
