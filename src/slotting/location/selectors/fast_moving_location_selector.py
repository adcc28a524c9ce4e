from __future__ import annotations

from typing import TYPE_CHECKING

from slotting.location.selectors.base import RankingLocationSelector
from slotting.location.strategy import LocationStrategy
from slotting.shared.bin_location import BinLocation

if TYPE_CHECKING:
    from slotting.location.context import LocationContext
    from slotting.location.directive import LocationDirective
    from slotting.location.query import LocationQuery


class FastMovingLocationSelector(RankingLocationSelector):
    """
    Prefers the candidates in the fastest pick zones (FAST_PICK, then MEDIUM_PICK by default).
    """

    strategy = LocationStrategy.FAST_MOVING
    description = "Selects fast-moving pick locations"
    fallback = BinLocation("F", "01", "1")

    def choose(
        self,
        query: LocationQuery,
        directive: LocationDirective,
        contexts: list[LocationContext],
    ) -> BinLocation | None:
        return max(contexts, key=self.score_bonus).location

    def score_bonus(self, context: LocationContext) -> float:
        zone = context.zone
        if zone is None:
            return 0.0
        return self.settings.scoring.zone_velocity_bonus.get(zone, 0.0)
