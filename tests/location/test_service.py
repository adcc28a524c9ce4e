from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import pytest

from slotting.config import EngineSettings
from slotting.location import (
    InMemoryLocationDirectiveRepository,
    LocationConstraint,
    LocationConstraintType,
    LocationDirective,
    LocationDirectiveService,
    LocationQuery,
    LocationStrategy,
    StrategyRegistry,
)
from slotting.location.selectors import FixedLocationSelector
from slotting.location.service import NO_DIRECTIVES
from slotting.shared import BinLocation, WorkType

if TYPE_CHECKING:
    from slotting.logger import EventHistoryBuffer
    from tests.conftest import FixedClock

T = LocationConstraintType
L = BinLocation.parse

type ServiceFactory = Callable[[dict[BinLocation, dict[str, Any]]], LocationDirectiveService]


def add(
    repository: InMemoryLocationDirectiveRepository,
    strategy: LocationStrategy,
    priority: int = 1,
    *constraints: LocationConstraint,
    work_type: WorkType = WorkType.PICK,
    name: str | None = None,
    active: bool = True,
) -> LocationDirective:
    directive = LocationDirective(
        name or f"{work_type} {strategy} {priority}",
        None,
        work_type,
        strategy,
        priority,
        constraints=constraints,
        active=active,
    )
    repository.save(directive)
    return directive


class FailingSelector(FixedLocationSelector):
    def select_optimal_location(self, query: LocationQuery, directive: LocationDirective) -> BinLocation | None:
        raise RuntimeError("selector exploded")


class TestSelectOptimalLocation:
    def test_no_directives(
        self,
        service: LocationDirectiveService,
        make_query: Callable[..., LocationQuery],
        history: EventHistoryBuffer,
    ) -> None:
        assert service.select_optimal_location(make_query()) is None
        assert history.query(level="WARNING", component="LocationDirectiveService")

    def test_fixed_location(
        self,
        service: LocationDirectiveService,
        repository: InMemoryLocationDirectiveRepository,
        make_query: Callable[..., LocationQuery],
    ) -> None:
        add(repository, LocationStrategy.FIXED)

        assert service.select_optimal_location(make_query(fixed_location="A1-01-1")) == BinLocation("A1", "01", "1")

    def test_first_directive_by_priority_wins(
        self,
        service: LocationDirectiveService,
        repository: InMemoryLocationDirectiveRepository,
        make_query: Callable[..., LocationQuery],
    ) -> None:
        add(repository, LocationStrategy.HIGHEST_LEVEL, 2)
        add(repository, LocationStrategy.LOWEST_LEVEL, 1)
        add(repository, LocationStrategy.FIXED, 3)

        assert service.select_optimal_location(make_query()) == L("A-01-1")

    def test_descending_priority_order(
        self,
        repository: InMemoryLocationDirectiveRepository,
        make_query: Callable[..., LocationQuery],
    ) -> None:
        service = LocationDirectiveService(repository, settings=EngineSettings(priority_order="descending"))
        add(repository, LocationStrategy.HIGHEST_LEVEL, 2)
        add(repository, LocationStrategy.LOWEST_LEVEL, 1)

        assert service.select_optimal_location(make_query()) == L("A-01-5")

    def test_directives_for_other_work_types_or_inactive_are_ignored(
        self,
        service: LocationDirectiveService,
        repository: InMemoryLocationDirectiveRepository,
        make_query: Callable[..., LocationQuery],
    ) -> None:
        add(repository, LocationStrategy.HIGHEST_LEVEL, 1, work_type=WorkType.PUT)
        add(repository, LocationStrategy.BULK_LOCATION, 1, active=False)
        add(repository, LocationStrategy.LOWEST_LEVEL, 9)

        assert service.select_optimal_location(make_query()) == L("A-01-1")

    def test_directive_without_proposal_is_skipped(
        self,
        service: LocationDirectiveService,
        repository: InMemoryLocationDirectiveRepository,
        make_query: Callable[..., LocationQuery],
    ) -> None:
        add(repository, LocationStrategy.CAPACITY_OPTIMIZED, 1)
        add(repository, LocationStrategy.LOWEST_LEVEL, 2)

        # no candidate has a known capacity
        assert service.select_optimal_location(make_query(candidates=["A-01-3", "A-01-2"])) == L("A-01-2")

    def test_nothing_found(
        self,
        service: LocationDirectiveService,
        repository: InMemoryLocationDirectiveRepository,
        make_query: Callable[..., LocationQuery],
        history: EventHistoryBuffer,
    ) -> None:
        add(repository, LocationStrategy.CAPACITY_OPTIMIZED, 1)

        assert service.select_optimal_location(make_query(candidates=["A-01-1"])) is None
        assert any("No suitable location" in event.message for event in history.query(level="WARNING"))

    def test_failing_selector_is_isolated(
        self,
        repository: InMemoryLocationDirectiveRepository,
        make_query: Callable[..., LocationQuery],
        history: EventHistoryBuffer,
    ) -> None:
        registry = StrategyRegistry.default()
        registry.register(FailingSelector())
        service = LocationDirectiveService(repository, registry=registry)
        failing = add(repository, LocationStrategy.FIXED, 1)
        add(repository, LocationStrategy.LOWEST_LEVEL, 2)

        assert service.select_optimal_location(make_query()) == L("A-01-1")

        errors = history.query(level="ERROR")
        assert len(errors) == 1
        assert "selector exploded" in errors[0].message
        assert errors[0].extra["directive_id"] == str(failing.id)

    def test_selection_is_logged(
        self,
        service: LocationDirectiveService,
        repository: InMemoryLocationDirectiveRepository,
        make_query: Callable[..., LocationQuery],
        history: EventHistoryBuffer,
    ) -> None:
        add(repository, LocationStrategy.LOWEST_LEVEL, 1, name="lowest first")

        service.select_optimal_location(make_query())

        infos = [event.message for event in history.query(level="INFO", component="LocationDirectiveService")]
        assert "Selected location A-01-1 using directive 'lowest first'" in infos


class TestEvaluateLocation:
    def test_no_directives(self, service: LocationDirectiveService, make_query: Callable[..., LocationQuery]) -> None:
        result = service.evaluate_location(make_query(), L("A-01-1"))

        assert not result.suitable
        assert result.score == 0.0
        assert result.applicable_directive_count == 0
        assert result.violations == (NO_DIRECTIVES,)
        assert NO_DIRECTIVES == "No applicable directives available"

    def test_scores_are_averaged(
        self,
        service: LocationDirectiveService,
        repository: InMemoryLocationDirectiveRepository,
        make_query: Callable[..., LocationQuery],
    ) -> None:
        add(repository, LocationStrategy.FIXED, 1)
        add(repository, LocationStrategy.RANDOM, 3)
        add(repository, LocationStrategy.FIXED, 2, LocationConstraint(T.ZONE_RESTRICTION, "equals", "X"))

        result = service.evaluate_location(make_query(), L("A-01-1"))

        assert result.suitable
        assert result.score == 200.0
        assert result.applicable_directive_count == 2
        assert result.violations == ()

    def test_capacity_optimized_score(
        self,
        service: LocationDirectiveService,
        repository: InMemoryLocationDirectiveRepository,
        make_query: Callable[..., LocationQuery],
    ) -> None:
        add(repository, LocationStrategy.CAPACITY_OPTIMIZED, 100, work_type=WorkType.PUT)

        result = service.evaluate_location(make_query(WorkType.PUT, available_capacity=8.0), L("A-01-1"))

        assert result.score == 10080.0

    def test_non_finite_capacity_earns_no_bonus(
        self,
        service: LocationDirectiveService,
        repository: InMemoryLocationDirectiveRepository,
        make_query: Callable[..., LocationQuery],
    ) -> None:
        add(repository, LocationStrategy.CAPACITY_OPTIMIZED, 1, work_type=WorkType.PUT)

        result = service.evaluate_location(make_query(WorkType.PUT, available_capacity="nan"), L("A-01-1"))

        assert result.suitable
        assert result.score == 100.0

    def test_violations_are_collected(
        self,
        service: LocationDirectiveService,
        repository: InMemoryLocationDirectiveRepository,
        make_query: Callable[..., LocationQuery],
    ) -> None:
        add(repository, LocationStrategy.FIXED, 1, LocationConstraint(T.ZONE_RESTRICTION, "equals", "X"))
        add(
            repository,
            LocationStrategy.FIXED,
            2,
            LocationConstraint(T.INVENTORY_AVAILABLE, "gt", 0),
            LocationConstraint(T.ACCESSIBILITY, "equals", "STANDARD"),
        )

        result = service.evaluate_location(make_query(accessibility="STANDARD"), L("A-01-1"))

        assert not result.suitable
        assert result.violations == ("ZONE_RESTRICTION equals 'X'", "INVENTORY_AVAILABLE gt 0")

    def test_scoring_error_disqualifies_only_its_directive(
        self,
        service: LocationDirectiveService,
        repository: InMemoryLocationDirectiveRepository,
        make_query: Callable[..., LocationQuery],
    ) -> None:
        nearest = add(repository, LocationStrategy.NEAREST_EMPTY, 1)
        add(repository, LocationStrategy.FIXED, 2)
        location = BinLocation("A", "R1", "1")

        result = service.evaluate_location(make_query(), location)

        assert result.suitable
        assert result.score == 200.0
        assert result.applicable_directive_count == 1
        assert service.evaluate_directive(nearest, make_query(), location).has_error

    def test_only_failing_directives(
        self,
        service: LocationDirectiveService,
        repository: InMemoryLocationDirectiveRepository,
        make_query: Callable[..., LocationQuery],
    ) -> None:
        add(repository, LocationStrategy.NEAREST_EMPTY, 1)

        result = service.evaluate_location(make_query(), BinLocation("A", "R1", "1"))

        assert not result.suitable
        assert result.violations == ()

    def test_directive_for_other_work_type(
        self,
        service: LocationDirectiveService,
        repository: InMemoryLocationDirectiveRepository,
        make_query: Callable[..., LocationQuery],
    ) -> None:
        put = add(repository, LocationStrategy.FIXED, 1, work_type=WorkType.PUT)

        assert service.evaluate_directive(put, make_query(WorkType.PICK), L("A-01-1")).is_not_applicable

    def test_is_idempotent(
        self,
        service: LocationDirectiveService,
        repository: InMemoryLocationDirectiveRepository,
        make_query: Callable[..., LocationQuery],
    ) -> None:
        add(repository, LocationStrategy.NEAREST_EMPTY, 1)
        add(repository, LocationStrategy.FAST_MOVING, 2)
        query = make_query(zone="FAST_PICK")

        assert service.evaluate_location(query, L("B-03-2")) == service.evaluate_location(query, L("B-03-2"))


class TestFindBestLocations:
    def test_fast_pick_before_slow_pick(
        self,
        service_with_attributes: ServiceFactory,
        repository: InMemoryLocationDirectiveRepository,
        make_query: Callable[..., LocationQuery],
    ) -> None:
        service = service_with_attributes({L("A-01-1"): {"zone": "SLOW_PICK"}, L("A-01-2"): {"zone": "FAST_PICK"}})
        add(repository, LocationStrategy.FAST_MOVING, 1)

        ranked = service.rank_locations(make_query(candidates=["A-01-1", "A-01-2"]), 10)

        assert [location for location, _ in ranked] == [L("A-01-2"), L("A-01-1")]
        assert [evaluation.score for _, evaluation in ranked] == [150.0, 100.0]

    def test_unsuitable_locations_are_dropped(
        self,
        service_with_attributes: ServiceFactory,
        repository: InMemoryLocationDirectiveRepository,
        make_query: Callable[..., LocationQuery],
    ) -> None:
        service = service_with_attributes(
            {
                L("A-01-1"): {"available_capacity": 2.0},
                L("A-01-2"): {"available_capacity": 0.0},
                L("A-01-3"): {"available_capacity": 6.0},
            }
        )
        add(
            repository,
            LocationStrategy.CAPACITY_OPTIMIZED,
            1,
            LocationConstraint(T.CAPACITY_REQUIREMENT, "gt", 0.0),
            work_type=WorkType.PUT,
        )

        best = service.find_best_locations(make_query(WorkType.PUT, candidates=["A-01-1", "A-01-2", "A-01-3"]), 5)

        assert best == [L("A-01-3"), L("A-01-1")]

    def test_ties_keep_candidate_order(
        self,
        service: LocationDirectiveService,
        repository: InMemoryLocationDirectiveRepository,
        make_query: Callable[..., LocationQuery],
    ) -> None:
        add(repository, LocationStrategy.FIXED, 1)
        candidates = ["C-01-1", "A-01-1", "B-01-1"]

        assert service.find_best_locations(make_query(candidates=candidates), 2) == [L("C-01-1"), L("A-01-1")]

    def test_generated_candidates(
        self,
        service: LocationDirectiveService,
        repository: InMemoryLocationDirectiveRepository,
        make_query: Callable[..., LocationQuery],
    ) -> None:
        add(repository, LocationStrategy.NEAREST_EMPTY, 1)

        best = service.find_best_locations(make_query(), 100)

        assert len(best) == 50
        assert best[0] == L("A1-01-1")
        scores = [service.evaluate_location(make_query(), location).score for location in best]
        assert scores == sorted(scores, reverse=True)

    def test_max_results(
        self,
        service: LocationDirectiveService,
        repository: InMemoryLocationDirectiveRepository,
        make_query: Callable[..., LocationQuery],
    ) -> None:
        add(repository, LocationStrategy.FIXED, 1)

        assert len(service.find_best_locations(make_query(), 7)) == 7
        assert service.find_best_locations(make_query(), 0) == []
        with pytest.raises(ValueError):
            service.find_best_locations(make_query(), -1)

    def test_no_directives(self, service: LocationDirectiveService, make_query: Callable[..., LocationQuery]) -> None:
        assert service.find_best_locations(make_query(), 10) == []

    def test_candidate_grid(self, service: LocationDirectiveService, make_query: Callable[..., LocationQuery]) -> None:
        grid = service.generate_candidate_locations(make_query())

        assert len(grid) == 50
        assert grid[:4] == [L("A1-01-1"), L("A1-01-2"), L("A1-01-3"), L("A1-02-1")]
        assert grid[-1] == L("A2-07-2")


class TestDirectiveQueries:
    def test_can_satisfy_query(
        self,
        service: LocationDirectiveService,
        repository: InMemoryLocationDirectiveRepository,
        make_query: Callable[..., LocationQuery],
    ) -> None:
        assert not service.can_satisfy_query(make_query())
        add(repository, LocationStrategy.FIXED, 1, active=False)
        assert not service.can_satisfy_query(make_query())
        add(repository, LocationStrategy.FIXED, 1)
        assert service.can_satisfy_query(make_query())

    def test_applicable_directives_are_sorted(
        self,
        service: LocationDirectiveService,
        repository: InMemoryLocationDirectiveRepository,
    ) -> None:
        add(repository, LocationStrategy.FIXED, 5, name="five")
        add(repository, LocationStrategy.FIXED, 1, name="one")
        add(repository, LocationStrategy.RANDOM, 5, name="five again")
        add(repository, LocationStrategy.FIXED, 2, name="put", work_type=WorkType.PUT)

        directives = service.get_applicable_directives(WorkType.PICK)

        assert [d.name for d in directives] == ["one", "five", "five again"]

    def test_changes_in_the_repository_are_visible(
        self,
        service: LocationDirectiveService,
        repository: InMemoryLocationDirectiveRepository,
    ) -> None:
        directive = add(repository, LocationStrategy.FIXED, 1)
        directive.deactivate()
        assert service.get_applicable_directives(WorkType.PICK)

        repository.save(directive)
        assert service.get_applicable_directives(WorkType.PICK) == []


class TestValidateDirective:
    @staticmethod
    def directive(
        strategy: LocationStrategy,
        *constraints: LocationConstraint,
        active: bool = True,
    ) -> LocationDirective:
        return LocationDirective("validated", None, WorkType.PICK, strategy, 1, constraints=constraints, active=active)

    def test_valid(self, service: LocationDirectiveService) -> None:
        result = service.validate_directive(self.directive(LocationStrategy.FIXED))

        assert result.valid
        assert result.issues == ()

    def test_inactive_without_constraints(self, service: LocationDirectiveService) -> None:
        result = service.validate_directive(self.directive(LocationStrategy.RANDOM, active=False))

        assert not result.valid
        assert result.issues == ("Directive is inactive", "No constraints defined for non-fixed strategy")

    def test_inventory_strategy(self, service: LocationDirectiveService) -> None:
        zone = LocationConstraint(T.ZONE_RESTRICTION, "equals", "A")

        result = service.validate_directive(self.directive(LocationStrategy.FIFO, zone))

        assert result.issues == ("Strategy requires inventory data but no inventory constraints defined",)
        assert service.validate_directive(
            self.directive(LocationStrategy.FIFO, LocationConstraint(T.INVENTORY_AVAILABLE, "gt", 0))
        ).valid

    def test_zone_strategy(self, service: LocationDirectiveService) -> None:
        result = service.validate_directive(self.directive(LocationStrategy.FAST_MOVING))

        assert result.issues == (
            "No constraints defined for non-fixed strategy",
            "Strategy requires zone configuration but no zone constraints defined",
        )


class TestCreateDefaultDirective:
    def test_pick(self, service: LocationDirectiveService, clock: FixedClock) -> None:
        directive = service.create_default_directive(WorkType.PICK, LocationStrategy.FIFO)

        assert directive.name == "Default PICK FIFO"
        assert directive.description == "Default directive for PICK operations using FIFO strategy"
        assert directive.priority == 100
        assert directive.active
        assert directive.created_at == clock.now
        assert directive.constraints == (
            LocationConstraint(T.ACCESSIBILITY, "equals", "STANDARD"),
            LocationConstraint(T.INVENTORY_AVAILABLE, "gt", 0),
        )

    def test_put(self, service: LocationDirectiveService) -> None:
        directive = service.create_default_directive(WorkType.PUT, LocationStrategy.NEAREST_EMPTY)

        assert [c.type for c in directive.constraints] == [T.CAPACITY_REQUIREMENT, T.ACCESSIBILITY]

    def test_count_and_others(self, service: LocationDirectiveService) -> None:
        count = service.create_default_directive(WorkType.COUNT, LocationStrategy.RANDOM)
        assert [c.type for c in count.constraints] == [T.ACCESSIBILITY]
        assert service.create_default_directive(WorkType.MOVE, LocationStrategy.RANDOM).constraints == ()

    def test_is_not_saved(
        self,
        service: LocationDirectiveService,
        repository: InMemoryLocationDirectiveRepository,
    ) -> None:
        service.create_default_directive(WorkType.PICK, LocationStrategy.FIFO)

        assert len(repository) == 0

    def test_configured_defaults(self, repository: InMemoryLocationDirectiveRepository) -> None:
        service = LocationDirectiveService(
            repository,
            settings=EngineSettings(default_priority=7, default_accessibility="GROUND"),
        )

        directive = service.create_default_directive(WorkType.COUNT, LocationStrategy.RANDOM)

        assert directive.priority == 7
        assert directive.constraints == (LocationConstraint(T.ACCESSIBILITY, "equals", "GROUND"),)

    def test_default_pick_directive_in_use(
        self,
        service: LocationDirectiveService,
        repository: InMemoryLocationDirectiveRepository,
        make_query: Callable[..., LocationQuery],
    ) -> None:
        repository.save(service.create_default_directive(WorkType.PICK, LocationStrategy.LOWEST_LEVEL))

        stocked = make_query(accessibility="STANDARD", available_inventory=4)
        empty = make_query(accessibility="STANDARD", available_inventory=0)

        assert service.evaluate_location(stocked, L("A-01-1")).score == 10000.0
        assert not service.evaluate_location(empty, L("A-01-1")).suitable


def test_repository_is_required() -> None:
    with pytest.raises(ValueError):
        LocationDirectiveService(None)  # type: ignore[arg-type]
