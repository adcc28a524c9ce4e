from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Protocol

from slotting.location.context import DEFAULT_EQUIPMENT

if TYPE_CHECKING:
    from slotting.location.context import LocationContext
    from slotting.location.query import LocationQuery
    from slotting.shared.attributes import AttributeValue
    from slotting.shared.bin_location import BinLocation


class LocationAttributeProvider(Protocol):
    """
    LocationAttributeProvider supplies the known attributes of a bin location
    (zone, available capacity, available inventory, accessibility...).

    It is the boundary towards the inventory and layout systems: the engine
    never looks those up by itself.
    """

    def __call__(self, location: BinLocation) -> Mapping[str, AttributeValue]: ...


class StaticAttributeProvider:
    """
    Attribute provider backed by a fixed mapping of locations to attributes.
    """

    def __init__(self, attributes: Mapping[BinLocation, Mapping[str, AttributeValue]] | None = None) -> None:
        self._attributes = {location: dict(values) for location, values in (attributes or {}).items()}

    def __call__(self, location: BinLocation) -> Mapping[str, AttributeValue]:
        return self._attributes.get(location, {})


class ContextBuilder:
    """Assembles the LocationContext of a (query, location) pair."""

    def __init__(
        self,
        *,
        attribute_provider: LocationAttributeProvider | None = None,
        equipment: Iterable[str] = DEFAULT_EQUIPMENT,
    ) -> None:
        self.attribute_provider = attribute_provider
        self.equipment = frozenset(equipment)

    def build(
        self,
        query: LocationQuery,
        location: BinLocation,
        overlay: Mapping[str, AttributeValue] | None = None,
    ) -> LocationContext:
        attributes: dict[str, AttributeValue] = {}
        if self.attribute_provider is not None:
            attributes.update(self.attribute_provider(location))
        if overlay:
            attributes.update(overlay)
        return query.context_for(location, attributes, self.equipment)
