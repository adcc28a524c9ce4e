from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from slotting.shared.attributes import as_bool, as_float, as_int, as_str

if TYPE_CHECKING:
    from slotting.shared.attributes import AttributeValue
    from slotting.shared.bin_location import BinLocation
    from slotting.shared.sku_code import SkuCode

DEFAULT_EQUIPMENT = frozenset({"scanner", "printer"})


@dataclass(frozen=True, slots=True)
class LocationContext:
    """
    Read-only snapshot of everything a constraint can look at for one candidate location.

    A context is built for a single (query, location) pair and discarded once
    the evaluation is over.
    """

    location: BinLocation
    item: SkuCode | None = None
    attributes: Mapping[str, AttributeValue] = field(default_factory=dict, hash=False)
    available_equipment: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.location is None:
            raise ValueError("Location cannot be None")
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))
        equipment: Iterable[str] = self.available_equipment
        object.__setattr__(self, "available_equipment", frozenset(equipment))

    @property
    def zone(self) -> str | None:
        return self.attribute_as_str("zone")

    @property
    def available_capacity(self) -> float | None:
        return self.attribute_as_float("available_capacity")

    @property
    def accessibility(self) -> str | None:
        return self.attribute_as_str("accessibility")

    @property
    def safety_level(self) -> str | None:
        return self.attribute_as_str("safety_level")

    @property
    def temperature(self) -> float | None:
        return self.attribute_as_float("temperature")

    @property
    def hazmat_compatible(self) -> bool | None:
        return self.attribute_as_bool("hazmat_compatible")

    @property
    def available_inventory(self) -> int | None:
        return self.attribute_as_int("available_inventory")

    @property
    def max_weight(self) -> float | None:
        return self.attribute_as_float("max_weight")

    @property
    def max_height(self) -> float | None:
        return self.attribute_as_float("max_height")

    def has_equipment(self, equipment: str | None) -> bool:
        return equipment is not None and equipment in self.available_equipment

    def attribute(self, key: str) -> AttributeValue | None:
        return self.attributes.get(key)

    def attribute_as_str(self, key: str) -> str | None:
        return as_str(self.attributes.get(key))

    def attribute_as_float(self, key: str) -> float | None:
        return as_float(self.attributes.get(key))

    def attribute_as_int(self, key: str) -> int | None:
        return as_int(self.attributes.get(key))

    def attribute_as_bool(self, key: str) -> bool | None:
        return as_bool(self.attributes.get(key))

    def __str__(self) -> str:
        return (
            f"LocationContext({self.location}, item={self.item}, "
            f"zone={self.zone}, capacity={self.available_capacity})"
        )
