from __future__ import annotations

from enum import StrEnum


class ConstraintCategory(StrEnum):
    PHYSICAL = "PHYSICAL"
    ENVIRONMENTAL = "ENVIRONMENTAL"
    OPERATIONAL = "OPERATIONAL"
    ZONE = "ZONE"


class LocationConstraintType(StrEnum):
    """
    The kind of predicate a LocationConstraint applies to a location.
    """

    ZONE_RESTRICTION = "ZONE_RESTRICTION"
    CAPACITY_REQUIREMENT = "CAPACITY_REQUIREMENT"
    ACCESSIBILITY = "ACCESSIBILITY"
    EQUIPMENT_REQUIREMENT = "EQUIPMENT_REQUIREMENT"
    SAFETY_RESTRICTION = "SAFETY_RESTRICTION"
    TEMPERATURE_RANGE = "TEMPERATURE_RANGE"
    HAZMAT_COMPATIBLE = "HAZMAT_COMPATIBLE"
    INVENTORY_AVAILABLE = "INVENTORY_AVAILABLE"
    HEIGHT_RESTRICTION = "HEIGHT_RESTRICTION"
    WEIGHT_RESTRICTION = "WEIGHT_RESTRICTION"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @property
    def category(self) -> ConstraintCategory:
        return _CATEGORIES[self]

    @property
    def is_physical_constraint(self) -> bool:
        return self.category is ConstraintCategory.PHYSICAL

    @property
    def is_environmental_constraint(self) -> bool:
        return self.category is ConstraintCategory.ENVIRONMENTAL

    @property
    def is_operational_constraint(self) -> bool:
        return self.category is ConstraintCategory.OPERATIONAL

    @property
    def is_zone_constraint(self) -> bool:
        return self.category is ConstraintCategory.ZONE


_DESCRIPTIONS = {
    LocationConstraintType.ZONE_RESTRICTION: "Restrict to specific warehouse zones",
    LocationConstraintType.CAPACITY_REQUIREMENT: "Minimum capacity requirement",
    LocationConstraintType.ACCESSIBILITY: "Location accessibility level",
    LocationConstraintType.EQUIPMENT_REQUIREMENT: "Required equipment at location",
    LocationConstraintType.SAFETY_RESTRICTION: "Safety classification requirement",
    LocationConstraintType.TEMPERATURE_RANGE: "Temperature control requirement",
    LocationConstraintType.HAZMAT_COMPATIBLE: "Hazardous material compatibility",
    LocationConstraintType.INVENTORY_AVAILABLE: "Minimum available inventory",
    LocationConstraintType.HEIGHT_RESTRICTION: "Height limitation constraint",
    LocationConstraintType.WEIGHT_RESTRICTION: "Weight capacity constraint",
}

_CATEGORIES = {
    LocationConstraintType.ZONE_RESTRICTION: ConstraintCategory.ZONE,
    LocationConstraintType.CAPACITY_REQUIREMENT: ConstraintCategory.PHYSICAL,
    LocationConstraintType.HEIGHT_RESTRICTION: ConstraintCategory.PHYSICAL,
    LocationConstraintType.WEIGHT_RESTRICTION: ConstraintCategory.PHYSICAL,
    LocationConstraintType.TEMPERATURE_RANGE: ConstraintCategory.ENVIRONMENTAL,
    LocationConstraintType.HAZMAT_COMPATIBLE: ConstraintCategory.ENVIRONMENTAL,
    LocationConstraintType.SAFETY_RESTRICTION: ConstraintCategory.ENVIRONMENTAL,
    LocationConstraintType.EQUIPMENT_REQUIREMENT: ConstraintCategory.OPERATIONAL,
    LocationConstraintType.ACCESSIBILITY: ConstraintCategory.OPERATIONAL,
    LocationConstraintType.INVENTORY_AVAILABLE: ConstraintCategory.OPERATIONAL,
}
