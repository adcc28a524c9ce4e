from __future__ import annotations

from typing import TYPE_CHECKING

from slotting.location.selectors.base import RankingLocationSelector
from slotting.location.strategy import LocationStrategy
from slotting.shared.bin_location import BinLocation

if TYPE_CHECKING:
    from slotting.location.context import LocationContext
    from slotting.location.directive import LocationDirective
    from slotting.location.query import LocationQuery

BULK_ZONE = "BULK"


class BulkLocationSelector(RankingLocationSelector):
    """
    Selects bulk storage: the first candidate in the BULK zone, otherwise the
    candidate with the most available capacity, otherwise the first candidate.
    """

    strategy = LocationStrategy.BULK_LOCATION
    description = "Selects bulk storage locations for high-volume items"
    fallback = BinLocation("B", "01", "1")

    def choose(
        self,
        query: LocationQuery,
        directive: LocationDirective,
        contexts: list[LocationContext],
    ) -> BinLocation | None:
        for context in contexts:
            if context.zone == BULK_ZONE:
                return context.location

        known = [context for context in contexts if context.available_capacity is not None]
        if known:
            return max(known, key=lambda context: context.available_capacity or 0.0).location
        return contexts[0].location
