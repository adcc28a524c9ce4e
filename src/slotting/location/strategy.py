from __future__ import annotations

from enum import StrEnum


class LocationStrategy(StrEnum):
    """
    The placement algorithm a directive uses to propose a location.
    """

    FIXED = "FIXED"
    NEAREST_EMPTY = "NEAREST_EMPTY"
    BULK_LOCATION = "BULK_LOCATION"
    FAST_MOVING = "FAST_MOVING"
    ZONE_BASED = "ZONE_BASED"
    CAPACITY_OPTIMIZED = "CAPACITY_OPTIMIZED"
    FIFO = "FIFO"
    LIFO = "LIFO"
    RANDOM = "RANDOM"
    LOWEST_LEVEL = "LOWEST_LEVEL"
    HIGHEST_LEVEL = "HIGHEST_LEVEL"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def requires_inventory_data(self) -> bool:
        return self in (LocationStrategy.FIFO, LocationStrategy.LIFO, LocationStrategy.CAPACITY_OPTIMIZED)

    @property
    def requires_zone_configuration(self) -> bool:
        return self in (LocationStrategy.ZONE_BASED, LocationStrategy.FAST_MOVING, LocationStrategy.BULK_LOCATION)

    @property
    def is_distance_based(self) -> bool:
        return self is LocationStrategy.NEAREST_EMPTY

    @property
    def is_level_based(self) -> bool:
        return self in (LocationStrategy.LOWEST_LEVEL, LocationStrategy.HIGHEST_LEVEL)

    @property
    def requires_fixed_mapping(self) -> bool:
        return self is LocationStrategy.FIXED


_DESCRIPTIONS = {
    LocationStrategy.FIXED: "Use pre-defined fixed location",
    LocationStrategy.NEAREST_EMPTY: "Select nearest available empty location",
    LocationStrategy.BULK_LOCATION: "Prefer bulk storage locations",
    LocationStrategy.FAST_MOVING: "Prefer fast-moving pick locations",
    LocationStrategy.ZONE_BASED: "Select based on product zone classification",
    LocationStrategy.CAPACITY_OPTIMIZED: "Select based on available capacity",
    LocationStrategy.FIFO: "First In, First Out location selection",
    LocationStrategy.LIFO: "Last In, First Out location selection",
    LocationStrategy.RANDOM: "Random available location selection",
    LocationStrategy.LOWEST_LEVEL: "Prefer lower level locations",
    LocationStrategy.HIGHEST_LEVEL: "Prefer higher level locations",
}
