from __future__ import annotations

import random
from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING

from slotting.config import EngineSettings
from slotting.location.context_builder import ContextBuilder
from slotting.location.selectors import (
    BulkLocationSelector,
    CapacityOptimizedLocationSelector,
    FastMovingLocationSelector,
    FifoLocationSelector,
    FixedLocationSelector,
    HighestLevelLocationSelector,
    LifoLocationSelector,
    LowestLevelLocationSelector,
    NearestEmptyLocationSelector,
    RandomLocationSelector,
    ZoneBasedLocationSelector,
    default_is_empty,
)
from slotting.location.strategy import LocationStrategy

if TYPE_CHECKING:
    from slotting.location.selectors import EmptinessCheck, LocationSelector
    from slotting.shared.bin_location import BinLocation
    from slotting.shared.sku_code import SkuCode


class StrategyRegistry:
    """
    Maps every LocationStrategy to the selector implementing it.

    Strategies without a registered selector resolve to the random selector,
    which must always be registered.
    """

    __slots__ = ("_selectors",)

    def __init__(self, selectors: Iterable[LocationSelector]) -> None:
        self._selectors: dict[LocationStrategy, LocationSelector] = {}
        for selector in selectors:
            self.register(selector)
        if LocationStrategy.RANDOM not in self._selectors:
            raise ValueError("A registry needs a selector for the RANDOM strategy")

    @classmethod
    def default(
        cls,
        *,
        rng: random.Random | None = None,
        context_builder: ContextBuilder | None = None,
        settings: EngineSettings | None = None,
        fixed_locations: Mapping[SkuCode, BinLocation] | None = None,
        is_empty: EmptinessCheck = default_is_empty,
    ) -> StrategyRegistry:
        """
        A registry holding one selector per strategy, sharing the given dependencies.
        """

        settings = settings or EngineSettings()
        context_builder = context_builder or ContextBuilder(equipment=settings.equipment)
        shared = {"context_builder": context_builder, "settings": settings}
        return cls(
            [
                FixedLocationSelector(mapping=fixed_locations, **shared),
                NearestEmptyLocationSelector(is_empty=is_empty, **shared),
                RandomLocationSelector(rng=rng, **shared),
                LowestLevelLocationSelector(**shared),
                HighestLevelLocationSelector(**shared),
                CapacityOptimizedLocationSelector(**shared),
                FastMovingLocationSelector(**shared),
                ZoneBasedLocationSelector(**shared),
                BulkLocationSelector(**shared),
                FifoLocationSelector(**shared),
                LifoLocationSelector(**shared),
            ]
        )

    def register(self, selector: LocationSelector) -> None:
        """Register ``selector`` for its strategy, replacing any previous one."""
        self._selectors[LocationStrategy(selector.strategy)] = selector

    def resolve(self, strategy: LocationStrategy) -> LocationSelector:
        return self._selectors.get(strategy) or self._selectors[LocationStrategy.RANDOM]

    def is_registered(self, strategy: LocationStrategy) -> bool:
        return strategy in self._selectors

    def __iter__(self) -> Iterator[LocationSelector]:
        return iter(self._selectors.values())

    def __len__(self) -> int:
        return len(self._selectors)
