from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from slotting.location.context import DEFAULT_EQUIPMENT, LocationContext
from slotting.shared.attributes import as_bool, as_float, as_int, as_str
from slotting.shared.work_type import WorkType

if TYPE_CHECKING:
    from slotting.shared.attributes import AttributeValue
    from slotting.shared.bin_location import BinLocation
    from slotting.shared.quantity import Quantity
    from slotting.shared.sku_code import SkuCode


@dataclass(frozen=True, slots=True)
class LocationQuery:
    """
    A request for a location: what is being done, with which item and how much of it.

    ``parameters`` are free-form hints (``required_zone``, ``fixed_location``,
    ``available_capacity``...) that are also copied into every context built
    for the query. ``candidate_locations`` restricts the search to an explicit
    list of bins; when it is None the engine generates its own candidates.
    """

    work_type: WorkType
    item: SkuCode
    quantity: Quantity
    reference_location: BinLocation | None = None
    parameters: Mapping[str, AttributeValue] = field(default_factory=dict, hash=False)
    candidate_locations: tuple[BinLocation, ...] | None = None

    def __post_init__(self) -> None:
        if self.work_type is None:
            raise ValueError("Work type cannot be None")
        if self.item is None:
            raise ValueError("Item cannot be None")
        if self.quantity is None:
            raise ValueError("Quantity cannot be None")
        object.__setattr__(self, "work_type", WorkType(self.work_type))
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters or {})))
        if self.candidate_locations is not None:
            candidates: Iterable[BinLocation] = self.candidate_locations
            object.__setattr__(self, "candidate_locations", tuple(candidates))

    def parameter(self, key: str) -> AttributeValue | None:
        return self.parameters.get(key)

    def parameter_as_str(self, key: str) -> str | None:
        return as_str(self.parameters.get(key))

    def parameter_as_int(self, key: str) -> int | None:
        return as_int(self.parameters.get(key))

    def parameter_as_float(self, key: str) -> float | None:
        return as_float(self.parameters.get(key))

    def parameter_as_bool(self, key: str) -> bool | None:
        return as_bool(self.parameters.get(key))

    @property
    def required_zone(self) -> str | None:
        return self.parameter_as_str("required_zone")

    @property
    def minimum_capacity(self) -> float | None:
        return self.parameter_as_float("minimum_capacity")

    @property
    def accessibility_level(self) -> str | None:
        return self.parameter_as_str("accessibility_level")

    @property
    def requires_special_equipment(self) -> bool | None:
        return self.parameter_as_bool("requires_special_equipment")

    @property
    def has_candidate_locations(self) -> bool:
        return bool(self.candidate_locations)

    @property
    def is_pick_query(self) -> bool:
        return self.work_type is WorkType.PICK

    @property
    def is_put_query(self) -> bool:
        return self.work_type is WorkType.PUT

    @property
    def is_count_query(self) -> bool:
        return self.work_type is WorkType.COUNT

    @property
    def is_move_query(self) -> bool:
        return self.work_type is WorkType.MOVE

    def context_for(
        self,
        location: BinLocation,
        location_attributes: Mapping[str, AttributeValue] | None = None,
        equipment: Iterable[str] = DEFAULT_EQUIPMENT,
    ) -> LocationContext:
        """
        Build the context a constraint sees for ``location``.

        Query parameters come first, then the location attributes override
        them; the structural attributes (aisle, rack, level, work type) are
        always set last.
        """

        attributes: dict[str, AttributeValue] = dict(self.parameters)
        attributes.update(location_attributes or {})
        attributes["aisle"] = location.aisle
        attributes["rack"] = location.rack
        attributes["level"] = location.level
        attributes["work_type"] = str(self.work_type)
        return LocationContext(
            location=location,
            item=self.item,
            attributes=attributes,
            available_equipment=frozenset(equipment),
        )

    def __str__(self) -> str:
        n_candidates = len(self.candidate_locations) if self.candidate_locations is not None else 0
        return (
            f"LocationQuery({self.work_type}, item={self.item}, quantity={self.quantity}, "
            f"reference={self.reference_location}, candidates={n_candidates})"
        )
