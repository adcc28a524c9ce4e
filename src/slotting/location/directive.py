from __future__ import annotations

import uuid
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from slotting.exceptions.directive import DirectiveConfigurationError
from slotting.location.constraint import LocationConstraint
from slotting.location.strategy import LocationStrategy
from slotting.shared.work_type import WorkType

if TYPE_CHECKING:
    from slotting.location.constraint_type import LocationConstraintType
    from slotting.location.context import LocationContext

type Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class LocationDirectiveId:
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise DirectiveConfigurationError("LocationDirectiveId value cannot be empty")
        object.__setattr__(self, "value", self.value.strip())

    @classmethod
    def generate(cls) -> LocationDirectiveId:
        return cls(str(uuid.uuid4()))

    @classmethod
    def of(cls, value: str) -> LocationDirectiveId:
        return cls(value)

    def __str__(self) -> str:
        return self.value


class LocationDirective:
    """
    A named, prioritized rule bundle telling the engine how to choose a
    location for one kind of work.

    The directive owns its constraints: they can only be changed through its
    own methods, which also refresh ``last_modified_at`` using the injected
    clock. The version is never changed here, it belongs to the repository
    that persists the directive.

    The aggregate is not thread-safe: evaluate snapshots, or lock externally.
    """

    __slots__ = (
        "_id",
        "_name",
        "_description",
        "_work_type",
        "_strategy",
        "_constraints",
        "_priority",
        "_active",
        "_created_at",
        "_last_modified_at",
        "_created_by",
        "_version",
        "_clock",
    )

    def __init__(
        self,
        name: str,
        description: str | None,
        work_type: WorkType,
        strategy: LocationStrategy,
        priority: int,
        *,
        constraints: Iterable[LocationConstraint] = (),
        id: LocationDirectiveId | None = None,
        active: bool = True,
        created_at: datetime | None = None,
        last_modified_at: datetime | None = None,
        created_by: str | None = None,
        version: int = 1,
        clock: Clock | None = None,
    ) -> None:
        if work_type is None:
            raise DirectiveConfigurationError("Work type cannot be None")
        if strategy is None:
            raise DirectiveConfigurationError("Strategy cannot be None")
        if constraints is None:
            raise DirectiveConfigurationError("Constraints cannot be None")

        self._clock: Clock = clock or utc_now
        now = self._clock()

        self._id = id or LocationDirectiveId.generate()
        self._name = self._validate_name(name)
        self._description = description
        self._work_type = WorkType(work_type)
        self._strategy = LocationStrategy(strategy)
        self._constraints: list[LocationConstraint] = []
        for constraint in constraints:
            self._constraints.append(self._validate_constraint(constraint))
        self._priority = self._validate_priority(priority)
        self._active = active
        self._created_at = created_at or now
        self._last_modified_at = last_modified_at or now
        self._created_by = created_by
        self._version = version

    @staticmethod
    def _validate_name(name: str) -> str:
        if name is None:
            raise DirectiveConfigurationError("Name cannot be None")
        if not isinstance(name, str) or not name.strip():
            raise DirectiveConfigurationError("Name cannot be empty")
        return name.strip()

    @staticmethod
    def _validate_priority(priority: int) -> int:
        if isinstance(priority, bool) or not isinstance(priority, int):
            raise DirectiveConfigurationError(f"Priority must be an integer, got {priority!r}")
        if priority < 1:
            raise DirectiveConfigurationError("Priority must be positive")
        return priority

    @staticmethod
    def _validate_constraint(constraint: LocationConstraint) -> LocationConstraint:
        if not isinstance(constraint, LocationConstraint):
            raise DirectiveConfigurationError(f"Not a LocationConstraint: {constraint!r}")
        return constraint

    def _touch(self) -> None:
        self._last_modified_at = self._clock()

    # Mutations

    def add_constraint(self, constraint: LocationConstraint) -> None:
        self._constraints.append(self._validate_constraint(constraint))
        self._touch()

    def remove_constraint(self, constraint: LocationConstraint) -> bool:
        """
        Remove the first constraint equal to ``constraint``.
        Returns whether a constraint was removed.
        """

        try:
            self._constraints.remove(constraint)
        except ValueError:
            return False
        self._touch()
        return True

    def update_strategy(self, strategy: LocationStrategy) -> None:
        if strategy is None:
            raise DirectiveConfigurationError("Strategy cannot be None")
        self._strategy = LocationStrategy(strategy)
        self._touch()

    def update_priority(self, priority: int) -> None:
        self._priority = self._validate_priority(priority)
        self._touch()

    def update_name(self, name: str) -> None:
        self._name = self._validate_name(name)
        self._touch()

    def update_description(self, description: str | None) -> None:
        self._description = description
        self._touch()

    def activate(self) -> None:
        self._active = True
        self._touch()

    def deactivate(self) -> None:
        self._active = False
        self._touch()

    # Queries

    def is_applicable_for(self, work_type: WorkType) -> bool:
        return self._active and self._work_type == work_type

    def satisfies_constraints(self, context: LocationContext) -> bool:
        if not self._active:
            return False
        return all(constraint.evaluate(context) for constraint in self._constraints)

    def violated_constraints(self, context: LocationContext) -> list[LocationConstraint]:
        return [constraint for constraint in self._constraints if not constraint.evaluate(context)]

    def has_constraint_of_type(self, constraint_type: LocationConstraintType) -> bool:
        return any(constraint.type == constraint_type for constraint in self._constraints)

    def constraints_of_type(self, constraint_type: LocationConstraintType) -> list[LocationConstraint]:
        return [constraint for constraint in self._constraints if constraint.type == constraint_type]

    @property
    def id(self) -> LocationDirectiveId:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str | None:
        return self._description

    @property
    def work_type(self) -> WorkType:
        return self._work_type

    @property
    def strategy(self) -> LocationStrategy:
        return self._strategy

    @property
    def constraints(self) -> tuple[LocationConstraint, ...]:
        return tuple(self._constraints)

    @property
    def constraint_count(self) -> int:
        return len(self._constraints)

    @property
    def priority(self) -> int:
        return self._priority

    @property
    def active(self) -> bool:
        return self._active

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def last_modified_at(self) -> datetime:
        return self._last_modified_at

    @property
    def created_by(self) -> str | None:
        return self._created_by

    @created_by.setter
    def created_by(self, created_by: str | None) -> None:
        self._created_by = created_by

    @property
    def version(self) -> int:
        return self._version

    @version.setter
    def version(self, version: int) -> None:
        self._version = version

    def __deepcopy__(self, memo: dict[int, object]) -> LocationDirective:
        # constraints are immutable and the clock is shared with the caller
        copy = object.__new__(LocationDirective)
        memo[id(self)] = copy
        for slot in self.__slots__:
            setattr(copy, slot, getattr(self, slot))
        copy._constraints = list(self._constraints)
        return copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocationDirective):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"LocationDirective(id={self._id}, name={self._name!r}, work_type={self._work_type}, "
            f"strategy={self._strategy}, priority={self._priority}, active={self._active})"
        )
