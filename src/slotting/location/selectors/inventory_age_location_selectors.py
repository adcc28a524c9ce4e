from __future__ import annotations

from typing import TYPE_CHECKING

from slotting.location.selectors.base import RankingLocationSelector
from slotting.location.strategy import LocationStrategy
from slotting.shared.bin_location import BinLocation

if TYPE_CHECKING:
    from slotting.location.context import LocationContext
    from slotting.location.directive import LocationDirective
    from slotting.location.query import LocationQuery

INVENTORY_AGE = "inventory_age"


def _aged(contexts: list[LocationContext]) -> list[tuple[float, BinLocation]]:
    """(inventory age, location) pairs of the contexts that know the age of their stock."""
    pairs = ((context.attribute_as_float(INVENTORY_AGE), context.location) for context in contexts)
    return [(age, location) for age, location in pairs if age is not None]


class FifoLocationSelector(RankingLocationSelector):
    """
    Selects the location holding the oldest stock.
    """

    strategy = LocationStrategy.FIFO
    description = "First In, First Out location selection"
    fallback = BinLocation("F", "01", "1")

    def choose(
        self,
        query: LocationQuery,
        directive: LocationDirective,
        contexts: list[LocationContext],
    ) -> BinLocation | None:
        oldest = max(_aged(contexts), key=lambda pair: pair[0], default=None)
        return oldest[1] if oldest is not None else None


class LifoLocationSelector(RankingLocationSelector):
    """
    Selects the location holding the most recently received stock.
    """

    strategy = LocationStrategy.LIFO
    description = "Last In, First Out location selection"
    fallback = BinLocation("L", "01", "1")

    def choose(
        self,
        query: LocationQuery,
        directive: LocationDirective,
        contexts: list[LocationContext],
    ) -> BinLocation | None:
        newest = min(_aged(contexts), key=lambda pair: pair[0], default=None)
        return newest[1] if newest is not None else None
