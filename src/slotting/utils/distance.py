from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from slotting.shared.bin_location import BinLocation


def aisle_distance(from_aisle: str, to_aisle: str) -> int:
    """
    Distance between two aisle identifiers.

    Identical aisles are 0 apart. Otherwise the distance is the absolute
    difference between the character codes of the last character of each
    identifier (single-character aisles therefore compare directly).
    """

    if from_aisle == to_aisle:
        return 0
    return abs(ord(from_aisle[-1]) - ord(to_aisle[-1]))


def weighted_manhattan(
    location_a: BinLocation,
    location_b: BinLocation,
    *,
    aisle_weight: float = 10,
    rack_weight: float = 1,
    level_weight: float = 2,
) -> float:
    """
    The weighted manhattan distance between two BinLocations.

    Raises ValueError if a rack or level is not numeric.
    """

    aisle = aisle_distance(location_a.aisle, location_b.aisle)
    rack = abs(location_a.rack_number - location_b.rack_number)
    level = abs(location_a.level_number - location_b.level_number)
    return aisle * aisle_weight + rack * rack_weight + level * level_weight


def aisle_offset(aisle: str) -> int:
    """
    Offset of an aisle from the first one ('1' or 'A').

    Numeric aisles are offset from 1, single letters from 'A'; any other
    identifier has no defined offset and counts as 0.
    """

    try:
        return abs(int(aisle) - 1)
    except ValueError:
        pass
    if len(aisle) == 1 and aisle.isalpha():
        return abs(ord(aisle.upper()) - ord("A"))
    return 0


def origin_distance(location: BinLocation) -> int:
    """
    The unweighted manhattan distance of a BinLocation from the first slot of the first aisle.

    Raises ValueError if the rack or level is not numeric.
    """

    return aisle_offset(location.aisle) + abs(location.rack_number - 1) + abs(location.level_number - 1)
