from __future__ import annotations

import random
from typing import TYPE_CHECKING

from slotting.location.selectors.base import BaseLocationSelector
from slotting.location.strategy import LocationStrategy
from slotting.shared.bin_location import BinLocation

if TYPE_CHECKING:
    from slotting.config import EngineSettings
    from slotting.location.context_builder import ContextBuilder
    from slotting.location.directive import LocationDirective
    from slotting.location.query import LocationQuery

N_AISLES = 10
N_RACKS = 20
N_LEVELS = 5


class RandomLocationSelector(BaseLocationSelector):
    """
    Picks one of the query candidates at random, or a random slot when the
    query has none.

    Pass a seeded ``random.Random`` as ``rng`` for reproducible selections.
    """

    strategy = LocationStrategy.RANDOM
    description = "Random available location selection"

    def __init__(
        self,
        *,
        rng: random.Random | None = None,
        context_builder: ContextBuilder | None = None,
        settings: EngineSettings | None = None,
    ) -> None:
        super().__init__(context_builder=context_builder, settings=settings)
        self.rng = rng or random.Random()  # noqa: S311

    def select_optimal_location(self, query: LocationQuery, directive: LocationDirective) -> BinLocation | None:
        if query.candidate_locations:
            return self.rng.choice(query.candidate_locations)

        return BinLocation(
            aisle=f"A{self.rng.randint(1, N_AISLES)}",
            rack=f"{self.rng.randint(1, N_RACKS):02d}",
            level=str(self.rng.randint(1, N_LEVELS)),
        )
