from __future__ import annotations

import copy
import threading
from typing import TYPE_CHECKING, Protocol

from slotting.exceptions.directive import ConcurrentModificationError, DirectiveNotFound
from slotting.logger import component_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from slotting.location.directive import LocationDirective, LocationDirectiveId
    from slotting.location.strategy import LocationStrategy
    from slotting.shared.work_type import WorkType

logger = component_logger("LocationDirectiveRepository")


class LocationDirectiveRepository(Protocol):
    """
    LocationDirectiveRepository defines the storage port of location directives.

    find_by_id returns None for an unknown id while get raises
    DirectiveNotFound. Every finder returns a list, empty when nothing
    matches, in insertion order. The repository owns the directive version:
    save bumps it and refuses to overwrite a newer stored version.
    """

    def save(self, directive: LocationDirective) -> None: ...

    def delete(self, directive: LocationDirective) -> None: ...

    def exists_by_id(self, directive_id: LocationDirectiveId) -> bool: ...

    def find_by_id(self, directive_id: LocationDirectiveId) -> LocationDirective | None: ...

    def get(self, directive_id: LocationDirectiveId) -> LocationDirective: ...

    def find_by_work_type(self, work_type: WorkType) -> list[LocationDirective]: ...

    def find_by_work_type_and_active(self, work_type: WorkType, active: bool) -> list[LocationDirective]: ...

    def find_by_strategy(self, strategy: LocationStrategy) -> list[LocationDirective]: ...

    def find_active_directives(self) -> list[LocationDirective]: ...

    def find_by_priority(self, priority: int) -> list[LocationDirective]: ...

    def find_by_priority_range(self, min_priority: int, max_priority: int) -> list[LocationDirective]: ...

    def find_active_directives_by_strategy(self, strategy: LocationStrategy) -> list[LocationDirective]: ...

    def find_by_name_containing(self, name: str) -> list[LocationDirective]: ...

    def find_by_created_by(self, created_by: str) -> list[LocationDirective]: ...

    def count_by_work_type(self, work_type: WorkType) -> int: ...

    def count_by_strategy(self, strategy: LocationStrategy) -> int: ...

    def count_active_directives(self) -> int: ...

    def count_active_directives_by_work_type(self, work_type: WorkType) -> int: ...


class InMemoryLocationDirectiveRepository:
    """
    Thread-safe, process-local directive store.

    Directives are deep-copied on the way in and on the way out, so callers
    always work on snapshots and must ``save`` to publish their changes.
    Saving an already stored directive requires its version to match the
    stored one; the stored copy then gets the next version, which is also
    written back on the saved object.
    """

    __slots__ = ("_directives", "_lock")

    def __init__(self) -> None:
        self._directives: dict[LocationDirectiveId, LocationDirective] = {}
        self._lock = threading.Lock()

    def save(self, directive: LocationDirective) -> None:
        with self._lock:
            stored = self._directives.get(directive.id)
            if stored is not None:
                if stored.version != directive.version:
                    raise ConcurrentModificationError(directive.id, directive.version, stored.version)
                directive.version = stored.version + 1
            self._directives[directive.id] = copy.deepcopy(directive)
        logger.debug(f"Saved directive {directive.id} at version {directive.version}")

    def delete(self, directive: LocationDirective) -> None:
        with self._lock:
            removed = self._directives.pop(directive.id, None)
        if removed is not None:
            logger.debug(f"Deleted directive {directive.id}")

    def exists_by_id(self, directive_id: LocationDirectiveId) -> bool:
        with self._lock:
            return directive_id in self._directives

    def find_by_id(self, directive_id: LocationDirectiveId) -> LocationDirective | None:
        with self._lock:
            stored = self._directives.get(directive_id)
            return copy.deepcopy(stored) if stored is not None else None

    def get(self, directive_id: LocationDirectiveId) -> LocationDirective:
        directive = self.find_by_id(directive_id)
        if directive is None:
            raise DirectiveNotFound(directive_id)
        return directive

    def _filter(self, predicate: Callable[[LocationDirective], bool]) -> list[LocationDirective]:
        with self._lock:
            return [copy.deepcopy(d) for d in self._directives.values() if predicate(d)]

    def _count(self, predicate: Callable[[LocationDirective], bool]) -> int:
        with self._lock:
            return sum(1 for d in self._directives.values() if predicate(d))

    def find_all(self) -> list[LocationDirective]:
        return self._filter(lambda d: True)

    def find_by_work_type(self, work_type: WorkType) -> list[LocationDirective]:
        return self._filter(lambda d: d.work_type == work_type)

    def find_by_work_type_and_active(self, work_type: WorkType, active: bool) -> list[LocationDirective]:
        return self._filter(lambda d: d.work_type == work_type and d.active == active)

    def find_by_strategy(self, strategy: LocationStrategy) -> list[LocationDirective]:
        return self._filter(lambda d: d.strategy == strategy)

    def find_active_directives(self) -> list[LocationDirective]:
        return self._filter(lambda d: d.active)

    def find_by_priority(self, priority: int) -> list[LocationDirective]:
        return self._filter(lambda d: d.priority == priority)

    def find_by_priority_range(self, min_priority: int, max_priority: int) -> list[LocationDirective]:
        """Directives whose priority lies in ``[min_priority, max_priority]``."""
        return self._filter(lambda d: min_priority <= d.priority <= max_priority)

    def find_active_directives_by_strategy(self, strategy: LocationStrategy) -> list[LocationDirective]:
        return self._filter(lambda d: d.active and d.strategy == strategy)

    def find_by_name_containing(self, name: str) -> list[LocationDirective]:
        """Case-insensitive substring search on the directive name."""
        needle = name.lower()
        return self._filter(lambda d: needle in d.name.lower())

    def find_by_created_by(self, created_by: str) -> list[LocationDirective]:
        return self._filter(lambda d: d.created_by == created_by)

    def count_by_work_type(self, work_type: WorkType) -> int:
        return self._count(lambda d: d.work_type == work_type)

    def count_by_strategy(self, strategy: LocationStrategy) -> int:
        return self._count(lambda d: d.strategy == strategy)

    def count_active_directives(self) -> int:
        return self._count(lambda d: d.active)

    def count_active_directives_by_work_type(self, work_type: WorkType) -> int:
        return self._count(lambda d: d.active and d.work_type == work_type)

    def __len__(self) -> int:
        with self._lock:
            return len(self._directives)
