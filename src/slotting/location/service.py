"""Directive evaluation: selection, evaluation and ranking of bin locations."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import TYPE_CHECKING

from slotting.config import EngineSettings
from slotting.location.constraint import LocationConstraint
from slotting.location.constraint_type import LocationConstraintType
from slotting.location.context_builder import ContextBuilder
from slotting.location.directive import LocationDirective
from slotting.location.registry import StrategyRegistry
from slotting.location.result import LocationDirectiveResult
from slotting.location.scoring import DirectiveScorer
from slotting.logger import component_logger
from slotting.shared.bin_location import BinLocation
from slotting.shared.work_type import WorkType

if TYPE_CHECKING:
    from collections.abc import Iterator

    from slotting.location.directive import Clock
    from slotting.location.query import LocationQuery
    from slotting.location.repository import LocationDirectiveRepository
    from slotting.location.strategy import LocationStrategy

logger = component_logger("LocationDirectiveService")

NO_DIRECTIVES = "No applicable directives available"


@dataclass(frozen=True, slots=True)
class LocationEvaluationResult:
    """
    Aggregated verdict of every applicable directive on one location.

    ``score`` is the mean score of the directives that found the location
    suitable; ``violations`` collects the constraint violations reported
    when none did.
    """

    suitable: bool
    score: float = 0.0
    applicable_directive_count: int = 0
    violations: tuple[str, ...] = ()

    @classmethod
    def suitable_with(cls, score: float, applicable_directive_count: int) -> LocationEvaluationResult:
        return cls(True, score, applicable_directive_count)

    @classmethod
    def unsuitable(cls, violations: list[str] | tuple[str, ...]) -> LocationEvaluationResult:
        return cls(False, 0.0, 0, tuple(violations))

    @classmethod
    def no_directives_available(cls) -> LocationEvaluationResult:
        return cls.unsuitable((NO_DIRECTIVES,))


@dataclass(frozen=True, slots=True)
class LocationDirectiveValidationResult:
    valid: bool
    issues: tuple[str, ...] = ()


class LocationDirectiveService:
    """
    Runs the directives stored in a repository against location queries.

    Directives are fetched fresh for every call, so changes saved in the
    repository are picked up immediately. A selector or scoring failure only
    disqualifies the directive it happened in.
    """

    def __init__(
        self,
        repository: LocationDirectiveRepository,
        *,
        registry: StrategyRegistry | None = None,
        context_builder: ContextBuilder | None = None,
        settings: EngineSettings | None = None,
        clock: Clock | None = None,
    ) -> None:
        if repository is None:
            raise ValueError("LocationDirectiveRepository cannot be None")
        self.repository = repository
        self.settings = settings or EngineSettings()
        self.context_builder = context_builder or ContextBuilder(equipment=self.settings.equipment)
        self.registry = registry or StrategyRegistry.default(
            context_builder=self.context_builder,
            settings=self.settings,
        )
        self.scorer = DirectiveScorer(self.registry, self.settings)
        self.clock = clock

    def select_optimal_location(self, query: LocationQuery) -> BinLocation | None:
        """
        The location proposed by the first directive, in priority order, that proposes one.
        """

        logger.info(f"Selecting optimal location for {query}")

        directives = self.get_applicable_directives(query.work_type)
        if not directives:
            logger.warning(f"No applicable location directives found for work type {query.work_type}")
            return None

        for directive in directives:
            selector = self.registry.resolve(directive.strategy)
            try:
                location = selector.select_optimal_location(query, directive)
            except Exception as exc:
                logger.bind(directive_id=str(directive.id)).error(
                    f"Error selecting location with directive {directive.name!r}: {exc}"
                )
                continue
            if location is not None:
                logger.bind(directive_id=str(directive.id)).info(
                    f"Selected location {location} using directive {directive.name!r}"
                )
                return location

        logger.warning(f"No suitable location found for {query}")
        return None

    def evaluate_location(self, query: LocationQuery, location: BinLocation) -> LocationEvaluationResult:
        logger.debug(f"Evaluating location {location} for {query}")
        return self._evaluate(query, location, self.get_applicable_directives(query.work_type))

    def _evaluate(
        self,
        query: LocationQuery,
        location: BinLocation,
        directives: list[LocationDirective],
    ) -> LocationEvaluationResult:
        if not directives:
            return LocationEvaluationResult.no_directives_available()

        scores: list[float] = []
        violations: list[str] = []
        for directive in directives:
            result = self.evaluate_directive(directive, query, location)
            if result.is_suitable:
                scores.append(result.score)
            elif result.has_constraint_violations:
                violations.extend(result.violations)

        if not scores:
            return LocationEvaluationResult.unsuitable(violations)
        return LocationEvaluationResult.suitable_with(sum(scores) / len(scores), len(scores))

    def evaluate_directive(
        self,
        directive: LocationDirective,
        query: LocationQuery,
        location: BinLocation,
    ) -> LocationDirectiveResult:
        """
        Verdict of a single directive on ``location``.
        """

        if not directive.is_applicable_for(query.work_type):
            return LocationDirectiveResult.not_applicable("Work type not supported")

        context = self.context_builder.build(query, location)
        violated = directive.violated_constraints(context)
        if violated:
            return LocationDirectiveResult.constraint_violation([str(constraint) for constraint in violated])

        try:
            score = self.scorer.score(directive, context)
        except ValueError as exc:
            logger.bind(directive_id=str(directive.id)).error(
                f"Error scoring location {location} with directive {directive.name!r}: {exc}"
            )
            return LocationDirectiveResult.error(str(exc))
        return LocationDirectiveResult.suitable(score)

    def rank_locations(
        self,
        query: LocationQuery,
        max_results: int,
    ) -> list[tuple[BinLocation, LocationEvaluationResult]]:
        """
        Suitable candidates with their evaluation, best score first.

        Candidates are the query's own or, when it has none, the generated
        grid. Equal scores keep the candidate order.
        """

        if max_results < 0:
            raise ValueError(f"max_results must be non-negative, got {max_results}")

        logger.info(f"Finding best {max_results} locations for {query}")

        if query.has_candidate_locations:
            assert query.candidate_locations is not None
            candidates = list(query.candidate_locations)
        else:
            candidates = self.generate_candidate_locations(query)

        directives = self.get_applicable_directives(query.work_type)
        evaluated = ((location, self._evaluate(query, location, directives)) for location in candidates)
        suitable = [(location, evaluation) for location, evaluation in evaluated if evaluation.suitable]
        suitable.sort(key=lambda pair: pair[1].score, reverse=True)
        return suitable[:max_results]

    def find_best_locations(self, query: LocationQuery, max_results: int) -> list[BinLocation]:
        return [location for location, _ in self.rank_locations(query, max_results)]

    def can_satisfy_query(self, query: LocationQuery) -> bool:
        return any(directive.active for directive in self.get_applicable_directives(query.work_type))

    def get_applicable_directives(self, work_type: WorkType) -> list[LocationDirective]:
        """
        Active directives of ``work_type``, sorted by priority number.

        The sort follows ``settings.priority_order`` and is stable, so
        directives sharing a priority keep the repository order.
        """

        directives = self.repository.find_by_work_type_and_active(work_type, True)
        descending = self.settings.priority_order == "descending"
        return sorted(directives, key=lambda directive: directive.priority, reverse=descending)

    def validate_directive(self, directive: LocationDirective) -> LocationDirectiveValidationResult:
        logger.debug(f"Validating location directive {directive.name!r}")

        issues: list[str] = []
        strategy = directive.strategy

        if not directive.active:
            issues.append("Directive is inactive")

        if directive.constraint_count == 0 and not strategy.requires_fixed_mapping:
            issues.append("No constraints defined for non-fixed strategy")

        if strategy.requires_inventory_data and not directive.has_constraint_of_type(
            LocationConstraintType.INVENTORY_AVAILABLE
        ):
            issues.append("Strategy requires inventory data but no inventory constraints defined")

        if strategy.requires_zone_configuration and not directive.has_constraint_of_type(
            LocationConstraintType.ZONE_RESTRICTION
        ):
            issues.append("Strategy requires zone configuration but no zone constraints defined")

        return LocationDirectiveValidationResult(valid=not issues, issues=tuple(issues))

    def create_default_directive(self, work_type: WorkType, strategy: LocationStrategy) -> LocationDirective:
        """
        A new, unsaved directive with the standard constraints of ``work_type``.
        """

        directive = LocationDirective(
            name=f"Default {work_type} {strategy}",
            description=f"Default directive for {work_type} operations using {strategy} strategy",
            work_type=work_type,
            strategy=strategy,
            priority=self.settings.default_priority,
            constraints=self.default_constraints(work_type),
            clock=self.clock,
        )
        logger.debug(f"Created default directive {directive.name!r}")
        return directive

    def default_constraints(self, work_type: WorkType) -> list[LocationConstraint]:
        accessibility = LocationConstraint(
            LocationConstraintType.ACCESSIBILITY,
            "equals",
            self.settings.default_accessibility,
        )
        match work_type:
            case WorkType.PICK:
                return [accessibility, LocationConstraint(LocationConstraintType.INVENTORY_AVAILABLE, "gt", 0)]
            case WorkType.PUT:
                return [LocationConstraint(LocationConstraintType.CAPACITY_REQUIREMENT, "gt", 0.0), accessibility]
            case WorkType.COUNT:
                return [accessibility]
            case _:
                return []

    def generate_candidate_locations(self, query: LocationQuery) -> list[BinLocation]:
        """
        Candidates for queries carrying none: the first ``grid.limit`` slots of
        the configured grid, walked aisle by aisle, rack by rack, level by level.
        """

        return list(islice(self._grid(), self.settings.grid.limit))

    def _grid(self) -> Iterator[BinLocation]:
        grid = self.settings.grid
        for aisle in range(1, grid.aisles + 1):
            for rack in range(1, grid.racks + 1):
                for level in range(1, grid.levels + 1):
                    yield BinLocation(f"{grid.aisle_prefix}{aisle}", f"{rack:02d}", str(level))
