from __future__ import annotations

import zlib
from collections.abc import Mapping
from typing import TYPE_CHECKING

from slotting.exceptions.location import InvalidBinLocation
from slotting.location.selectors.base import BaseLocationSelector
from slotting.location.strategy import LocationStrategy
from slotting.shared.bin_location import BinLocation

if TYPE_CHECKING:
    from slotting.config import EngineSettings
    from slotting.location.context_builder import ContextBuilder
    from slotting.location.directive import LocationDirective
    from slotting.location.query import LocationQuery
    from slotting.shared.sku_code import SkuCode


class FixedLocationSelector(BaseLocationSelector):
    """
    Selects the predefined location of an item.

    The ``fixed_location`` query parameter wins; an unparseable value means no
    placement. Otherwise the item is looked up in the injected mapping, and
    items without a mapping get a stable slot derived from their code.
    """

    strategy = LocationStrategy.FIXED
    description = "Selects predefined fixed locations for items"

    def __init__(
        self,
        *,
        mapping: Mapping[SkuCode, BinLocation] | None = None,
        context_builder: ContextBuilder | None = None,
        settings: EngineSettings | None = None,
    ) -> None:
        super().__init__(context_builder=context_builder, settings=settings)
        self.mapping = dict(mapping or {})

    def select_optimal_location(self, query: LocationQuery, directive: LocationDirective) -> BinLocation | None:
        fixed_location = query.parameter_as_str("fixed_location")
        if fixed_location is not None:
            try:
                return BinLocation.parse(fixed_location)
            except InvalidBinLocation:
                return None

        if query.item in self.mapping:
            return self.mapping[query.item]
        return self.hashed_location(query.item)

    @staticmethod
    def hashed_location(item: SkuCode) -> BinLocation:
        """
        A slot in A1-A10 / 01-20 / 1-5, always the same for the same item code.
        """

        digest = zlib.crc32(item.value.encode("utf-8"))
        return BinLocation(
            aisle=f"A{digest % 10 + 1}",
            rack=f"{digest % 20 + 1:02d}",
            level=str(digest % 5 + 1),
        )
