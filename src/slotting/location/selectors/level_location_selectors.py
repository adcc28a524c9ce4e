from __future__ import annotations

from typing import TYPE_CHECKING

from slotting.location.selectors.base import RankingLocationSelector
from slotting.location.strategy import LocationStrategy
from slotting.shared.attributes import as_int
from slotting.shared.bin_location import BinLocation

if TYPE_CHECKING:
    from slotting.location.context import LocationContext
    from slotting.location.directive import LocationDirective
    from slotting.location.query import LocationQuery


def _levels(contexts: list[LocationContext]) -> list[tuple[int, BinLocation]]:
    """(level, location) pairs of the contexts whose level is numeric, in order."""
    pairs = ((as_int(context.location.level), context.location) for context in contexts)
    return [(level, location) for level, location in pairs if level is not None]


class LowestLevelLocationSelector(RankingLocationSelector):
    strategy = LocationStrategy.LOWEST_LEVEL
    description = "Prefers lower level locations"
    fallback = BinLocation("A", "01", "1")

    def choose(
        self,
        query: LocationQuery,
        directive: LocationDirective,
        contexts: list[LocationContext],
    ) -> BinLocation | None:
        best = min(_levels(contexts), key=lambda pair: pair[0], default=None)
        return best[1] if best is not None else None


class HighestLevelLocationSelector(RankingLocationSelector):
    strategy = LocationStrategy.HIGHEST_LEVEL
    description = "Prefers higher level locations"
    fallback = BinLocation("A", "01", "5")

    def choose(
        self,
        query: LocationQuery,
        directive: LocationDirective,
        contexts: list[LocationContext],
    ) -> BinLocation | None:
        best = max(_levels(contexts), key=lambda pair: pair[0], default=None)
        return best[1] if best is not None else None
