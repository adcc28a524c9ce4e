from __future__ import annotations

from dataclasses import dataclass

from slotting.exceptions.location import InvalidBinLocation

SEPARATOR = "-"


@dataclass(frozen=True, slots=True)
class BinLocation:
    """
    A physical slot in the warehouse, identified by aisle, rack and level.
    """

    aisle: str
    rack: str
    level: str

    def __post_init__(self) -> None:
        for part in ("aisle", "rack", "level"):
            value = getattr(self, part)
            if not isinstance(value, str) or not value.strip():
                raise InvalidBinLocation(f"{part}={value!r}")

    @classmethod
    def parse(cls, location: str) -> BinLocation:
        """
        Build a BinLocation from its 'Aisle-Rack-Level' representation.
        """

        if not isinstance(location, str):
            raise InvalidBinLocation(location)
        parts = location.split(SEPARATOR)
        if len(parts) != 3:
            raise InvalidBinLocation(location)
        aisle, rack, level = parts
        return cls(aisle=aisle, rack=rack, level=level)

    @classmethod
    def of(cls, aisle: str, rack: str, level: str) -> BinLocation:
        return cls(aisle=aisle, rack=rack, level=level)

    @property
    def rack_number(self) -> int:
        return int(self.rack)

    @property
    def level_number(self) -> int:
        return int(self.level)

    def __str__(self) -> str:
        return SEPARATOR.join((self.aisle, self.rack, self.level))
