from __future__ import annotations

from typing import TYPE_CHECKING

from slotting.location.constraint_type import LocationConstraintType
from slotting.location.selectors.base import RankingLocationSelector
from slotting.location.strategy import LocationStrategy
from slotting.shared.bin_location import BinLocation

if TYPE_CHECKING:
    from slotting.location.context import LocationContext
    from slotting.location.directive import LocationDirective
    from slotting.location.query import LocationQuery


class ZoneBasedLocationSelector(RankingLocationSelector):
    """
    Selects the first candidate lying in the target zone.

    The target zone is the query's ``required_zone`` parameter or, failing
    that, the value of the directive's first zone restriction using equality.
    Without a target zone the first candidate satisfying the directive wins.
    """

    strategy = LocationStrategy.ZONE_BASED
    description = "Selects locations based on product zone classification"
    fallback = BinLocation("Z", "01", "1")

    @staticmethod
    def target_zone(query: LocationQuery, directive: LocationDirective) -> str | None:
        if query.required_zone is not None:
            return query.required_zone
        for constraint in directive.constraints_of_type(LocationConstraintType.ZONE_RESTRICTION):
            if constraint.operator.lower() in ("equals", "eq"):
                return constraint.value_as_str
        return None

    def choose(
        self,
        query: LocationQuery,
        directive: LocationDirective,
        contexts: list[LocationContext],
    ) -> BinLocation | None:
        zone = self.target_zone(query, directive)
        if zone is None:
            return contexts[0].location
        return next((context.location for context in contexts if context.zone == zone), None)
