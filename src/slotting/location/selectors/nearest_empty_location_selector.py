from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from slotting.location.selectors.base import BaseLocationSelector
from slotting.location.strategy import LocationStrategy
from slotting.shared.attributes import as_int
from slotting.shared.bin_location import BinLocation
from slotting.utils.distance import origin_distance, weighted_manhattan

if TYPE_CHECKING:
    from slotting.config import EngineSettings
    from slotting.location.context import LocationContext
    from slotting.location.context_builder import ContextBuilder
    from slotting.location.directive import LocationDirective
    from slotting.location.query import LocationQuery

type EmptinessCheck = Callable[[LocationContext], bool]


def default_is_empty(context: LocationContext) -> bool:
    """
    Whether a location is empty, from the best information the context carries.

    An explicit ``is_empty`` attribute wins, then ``available_inventory == 0``.
    Without either, odd levels are considered empty.
    """

    is_empty = context.attribute_as_bool("is_empty")
    if is_empty is not None:
        return is_empty
    inventory = context.available_inventory
    if inventory is not None:
        return inventory == 0
    level = as_int(context.location.level)
    return level is not None and level % 2 == 1


class NearestEmptyLocationSelector(BaseLocationSelector):
    """
    Selects the empty location closest to the query's reference location.

    Candidates are the query's explicit ones or, when there are none, the
    neighbourhood of the reference in its own aisle. Distance is the weighted
    manhattan metric (aisle x10, rack x1, level x2); on ties the first
    candidate wins.
    """

    strategy = LocationStrategy.NEAREST_EMPTY
    description = "Selects the nearest available empty location"

    def __init__(
        self,
        *,
        is_empty: EmptinessCheck = default_is_empty,
        context_builder: ContextBuilder | None = None,
        settings: EngineSettings | None = None,
    ) -> None:
        super().__init__(context_builder=context_builder, settings=settings)
        self.is_empty = is_empty

    def select_optimal_location(self, query: LocationQuery, directive: LocationDirective) -> BinLocation | None:
        reference = query.reference_location or self.settings.origin_location
        candidates = query.candidate_locations or self.neighbourhood(reference)

        contexts = self.satisfying_contexts(query, directive, candidates)
        empty = [context.location for context in contexts if self.is_empty(context)]
        return min(empty, key=lambda candidate: weighted_manhattan(reference, candidate), default=None)

    def neighbourhood(self, reference: BinLocation) -> list[BinLocation]:
        """
        The slots around ``reference`` in the same aisle, racks and levels clamped at 1.
        """

        rack_radius = self.settings.neighbourhood.rack_radius
        level_radius = self.settings.neighbourhood.level_radius
        rack, level = reference.rack_number, reference.level_number

        candidates = (
            BinLocation(
                aisle=reference.aisle,
                rack=f"{max(1, rack + rack_offset):02d}",
                level=str(max(1, level + level_offset)),
            )
            for rack_offset in range(-rack_radius, rack_radius + 1)
            for level_offset in range(-level_radius, level_radius + 1)
        )
        return list(dict.fromkeys(candidates))

    def score_bonus(self, context: LocationContext) -> float:
        scoring = self.settings.scoring
        return max(0.0, scoring.distance_bonus_cap - scoring.distance_step * origin_distance(context.location))
