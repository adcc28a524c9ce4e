from __future__ import annotations

from typing import TYPE_CHECKING

from slotting.config import EngineSettings
from slotting.logger import component_logger

if TYPE_CHECKING:
    from slotting.location.context import LocationContext
    from slotting.location.directive import LocationDirective
    from slotting.location.registry import StrategyRegistry

logger = component_logger("DirectiveScorer")


class DirectiveScorer:
    """
    Scores a location that satisfies a directive.

    The score is the directive priority times ``priority_weight`` plus the
    bonus of the directive's strategy, floored at 0. A strategy without a
    registered selector is scored by the random fallback, which adds no bonus.
    """

    __slots__ = ("registry", "settings")

    def __init__(self, registry: StrategyRegistry, settings: EngineSettings | None = None) -> None:
        self.registry = registry
        self.settings = settings or EngineSettings()

    def score(self, directive: LocationDirective, context: LocationContext) -> float:
        base = directive.priority * self.settings.scoring.priority_weight
        if not self.registry.is_registered(directive.strategy):
            logger.warning(f"No selector registered for {directive.strategy}, scoring {directive.id} without a bonus")
        bonus = self.registry.resolve(directive.strategy).score_bonus(context)
        return max(0.0, base + bonus)
