"""Typed location constraints and their evaluation.

A constraint is a ``(type, operator, value)`` triple, plus optional parameters
such as a temperature ``tolerance``. Evaluation is dispatched on the type:

* zone, capacity and inventory constraints compare a context attribute with
  the constraint value through the operator; an operator outside their set
  evaluates to ``False``. Inventory only accepts the lower-bound operators;
* accessibility, safety, equipment, temperature and hazmat constraints apply
  one fixed predicate and do not consult the operator;
* height and weight restrictions have no comparison and always pass.

A missing attribute or a value that cannot be coerced makes a comparison
fail. Evaluation never raises.
"""

from __future__ import annotations

import operator as op
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from slotting.exceptions.directive import DirectiveConfigurationError
from slotting.location.constraint_type import LocationConstraintType
from slotting.shared.attributes import as_bool, as_float, as_int, as_str

if TYPE_CHECKING:
    from slotting.location.context import LocationContext
    from slotting.shared.attributes import AttributeValue

type Comparison = Callable[[float, float], bool]

NUMERIC_OPERATORS: Mapping[str, Comparison] = MappingProxyType(
    {
        "gt": op.gt,
        "greater_than": op.gt,
        "gte": op.ge,
        "greater_equal": op.ge,
        "lt": op.lt,
        "less_than": op.lt,
        "lte": op.le,
        "less_equal": op.le,
        "eq": op.eq,
        "equals": op.eq,
    }
)

ZONE_OPERATORS = frozenset({"equals", "eq", "not_equals", "ne", "in"})

# inventory constraints only express a lower bound
INVENTORY_OPERATORS = frozenset({"gt", "greater_than", "gte", "greater_equal"})


@dataclass(frozen=True, slots=True)
class LocationConstraint:
    type: LocationConstraintType
    operator: str
    value: AttributeValue
    parameters: Mapping[str, AttributeValue] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if self.type is None:
            raise DirectiveConfigurationError("Constraint type cannot be None")
        if not isinstance(self.operator, str):
            raise DirectiveConfigurationError("Operator must be a string")
        if self.value is None:
            raise DirectiveConfigurationError("Value cannot be None")
        if self.parameters is None:
            raise DirectiveConfigurationError("Parameters cannot be None")
        object.__setattr__(self, "type", LocationConstraintType(self.type))
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    def __deepcopy__(self, memo: dict[int, object]) -> LocationConstraint:
        return self

    def parameter(self, key: str) -> AttributeValue | None:
        return self.parameters.get(key)

    @property
    def value_as_str(self) -> str | None:
        return as_str(self.value)

    @property
    def value_as_int(self) -> int | None:
        return as_int(self.value)

    @property
    def value_as_float(self) -> float | None:
        return as_float(self.value)

    def evaluate(self, context: LocationContext) -> bool:
        evaluator = _EVALUATORS.get(self.type)
        if evaluator is None:
            return True
        return evaluator(self, context)

    def __str__(self) -> str:
        return f"{self.type} {self.operator} {self.value!r}"


def _compare_numbers(operator: str, actual: float | None, required: float | None) -> bool:
    comparison = NUMERIC_OPERATORS.get(operator.lower())
    if comparison is None or actual is None or required is None:
        return False
    return comparison(actual, required)


def _zone(constraint: LocationConstraint, context: LocationContext) -> bool:
    location_zone = context.zone
    required_zone = constraint.value_as_str
    match constraint.operator.lower():
        case "equals" | "eq":
            return location_zone == required_zone
        case "not_equals" | "ne":
            return location_zone != required_zone
        case "in":
            if location_zone is None or required_zone is None:
                return False
            return location_zone in {zone.strip() for zone in required_zone.split(",")}
        case _:
            return False


def _capacity(constraint: LocationConstraint, context: LocationContext) -> bool:
    return _compare_numbers(constraint.operator, context.available_capacity, constraint.value_as_float)


def _inventory(constraint: LocationConstraint, context: LocationContext) -> bool:
    if constraint.operator.lower() not in INVENTORY_OPERATORS:
        return False
    return _compare_numbers(constraint.operator, context.available_inventory, constraint.value_as_int)


def _accessibility(constraint: LocationConstraint, context: LocationContext) -> bool:
    return context.accessibility == constraint.value_as_str


def _equipment(constraint: LocationConstraint, context: LocationContext) -> bool:
    return context.has_equipment(constraint.value_as_str)


def _safety(constraint: LocationConstraint, context: LocationContext) -> bool:
    return context.safety_level == constraint.value_as_str


def _temperature(constraint: LocationConstraint, context: LocationContext) -> bool:
    temperature = context.temperature
    required = constraint.value_as_float
    tolerance = as_float(constraint.parameters.get("tolerance", 0.0))
    if temperature is None or required is None or tolerance is None:
        return False
    return abs(temperature - required) <= tolerance


def _hazmat(constraint: LocationConstraint, context: LocationContext) -> bool:
    hazmat_compatible = context.hazmat_compatible
    if hazmat_compatible is None:
        return False
    return hazmat_compatible == bool(as_bool(constraint.value))


_EVALUATORS: Mapping[LocationConstraintType, Callable[[LocationConstraint, LocationContext], bool]] = (
    MappingProxyType(
        {
            LocationConstraintType.ZONE_RESTRICTION: _zone,
            LocationConstraintType.CAPACITY_REQUIREMENT: _capacity,
            LocationConstraintType.ACCESSIBILITY: _accessibility,
            LocationConstraintType.EQUIPMENT_REQUIREMENT: _equipment,
            LocationConstraintType.SAFETY_RESTRICTION: _safety,
            LocationConstraintType.TEMPERATURE_RANGE: _temperature,
            LocationConstraintType.HAZMAT_COMPATIBLE: _hazmat,
            LocationConstraintType.INVENTORY_AVAILABLE: _inventory,
        }
    )
)
