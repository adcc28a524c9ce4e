from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Protocol

from slotting.config import EngineSettings
from slotting.location.context_builder import ContextBuilder

if TYPE_CHECKING:
    from collections.abc import Sequence

    from slotting.location.context import LocationContext
    from slotting.location.directive import LocationDirective
    from slotting.location.query import LocationQuery
    from slotting.location.strategy import LocationStrategy
    from slotting.shared.bin_location import BinLocation


class LocationSelector(Protocol):
    """
    LocationSelector defines the interface of a placement algorithm.

    select_optimal_location takes the query to satisfy and the directive the
    selector is running for, and returns the proposed BinLocation, or None if
    the strategy cannot propose anything.

    score_bonus is the strategy-specific term added to the priority score of
    a location that satisfies the directive. Strategies without a bonus
    return 0.
    """

    strategy: LocationStrategy
    description: str

    def select_optimal_location(self, query: LocationQuery, directive: LocationDirective) -> BinLocation | None: ...

    def supports_strategy(self, strategy: LocationStrategy) -> bool: ...

    def score_bonus(self, context: LocationContext) -> float: ...


class BaseLocationSelector:
    strategy: ClassVar[LocationStrategy]
    description: ClassVar[str] = ""

    def __init__(
        self,
        *,
        context_builder: ContextBuilder | None = None,
        settings: EngineSettings | None = None,
    ) -> None:
        self.settings = settings or EngineSettings()
        self.context_builder = context_builder or ContextBuilder(equipment=self.settings.equipment)

    def select_optimal_location(self, query: LocationQuery, directive: LocationDirective) -> BinLocation | None:
        raise NotImplementedError

    def supports_strategy(self, strategy: LocationStrategy) -> bool:
        return strategy == self.strategy

    def score_bonus(self, context: LocationContext) -> float:
        return 0.0

    def satisfying_contexts(
        self,
        query: LocationQuery,
        directive: LocationDirective,
        candidates: Sequence[BinLocation],
    ) -> list[LocationContext]:
        """
        Contexts of the candidates satisfying every constraint of the directive, in candidate order.
        """

        contexts = (self.context_builder.build(query, candidate) for candidate in candidates)
        return [context for context in contexts if directive.satisfies_constraints(context)]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.strategy})"


class RankingLocationSelector(BaseLocationSelector):
    """
    Selector that ranks the explicit candidates of a query.

    Candidates violating the directive are discarded, and ``choose`` picks one
    among the survivors. Queries without explicit candidates get the
    strategy's ``fallback`` location.
    """

    fallback: ClassVar[BinLocation]

    def select_optimal_location(self, query: LocationQuery, directive: LocationDirective) -> BinLocation | None:
        if not query.has_candidate_locations:
            return self.fallback
        assert query.candidate_locations is not None
        contexts = self.satisfying_contexts(query, directive, query.candidate_locations)
        if not contexts:
            return None
        return self.choose(query, directive, contexts)

    def choose(
        self,
        query: LocationQuery,
        directive: LocationDirective,
        contexts: list[LocationContext],
    ) -> BinLocation | None:
        raise NotImplementedError
