from __future__ import annotations

from typing import TYPE_CHECKING

from slotting.location.selectors.base import RankingLocationSelector
from slotting.location.strategy import LocationStrategy
from slotting.shared.bin_location import BinLocation

if TYPE_CHECKING:
    from slotting.location.context import LocationContext
    from slotting.location.directive import LocationDirective
    from slotting.location.query import LocationQuery


class CapacityOptimizedLocationSelector(RankingLocationSelector):
    """
    Selects the candidate with the most available capacity.
    Candidates with unknown capacity are never chosen.
    """

    strategy = LocationStrategy.CAPACITY_OPTIMIZED
    description = "Selects locations based on available capacity"
    fallback = BinLocation("C", "01", "1")

    def choose(
        self,
        query: LocationQuery,
        directive: LocationDirective,
        contexts: list[LocationContext],
    ) -> BinLocation | None:
        known = [context for context in contexts if context.available_capacity is not None]
        best = max(known, key=lambda context: context.available_capacity or 0.0, default=None)
        return best.location if best is not None else None

    def score_bonus(self, context: LocationContext) -> float:
        capacity = context.available_capacity
        if capacity is None:
            return 0.0
        scoring = self.settings.scoring
        return min(scoring.capacity_bonus_cap, capacity * scoring.capacity_factor)
