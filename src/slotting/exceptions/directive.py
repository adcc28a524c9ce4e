from __future__ import annotations

from typing import TYPE_CHECKING

from slotting.exceptions.base import SlottingError

if TYPE_CHECKING:
    from slotting.location.directive import LocationDirectiveId


class DirectiveConfigurationError(SlottingError, ValueError):
    """Raised when a directive would be built or mutated into an invalid state."""

    pass


class DirectiveNotFound(SlottingError, KeyError):
    def __init__(self, directive_id: LocationDirectiveId | object):
        self.directive_id = directive_id
        super().__init__(directive_id)

    def __str__(self) -> str:
        return f"Location directive {self.directive_id} not found"


class ConcurrentModificationError(SlottingError):
    def __init__(self, directive_id: LocationDirectiveId | object, expected: int, actual: int):
        self.directive_id = directive_id
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Location directive {directive_id} was modified concurrently "
            f"(saving version {expected}, stored version {actual})"
        )
