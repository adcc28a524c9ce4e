"""Location directives: constraints, strategies and the evaluation service."""

from __future__ import annotations

from .constraint import LocationConstraint
from .constraint_type import ConstraintCategory, LocationConstraintType
from .context import LocationContext
from .context_builder import ContextBuilder, LocationAttributeProvider, StaticAttributeProvider
from .directive import LocationDirective, LocationDirectiveId
from .query import LocationQuery
from .registry import StrategyRegistry
from .repository import InMemoryLocationDirectiveRepository, LocationDirectiveRepository
from .result import LocationDirectiveResult, ResultType
from .scoring import DirectiveScorer
from .service import LocationDirectiveService, LocationDirectiveValidationResult, LocationEvaluationResult
from .strategy import LocationStrategy

__all__ = [
    "ConstraintCategory",
    "ContextBuilder",
    "DirectiveScorer",
    "InMemoryLocationDirectiveRepository",
    "LocationAttributeProvider",
    "LocationConstraint",
    "LocationConstraintType",
    "LocationContext",
    "LocationDirective",
    "LocationDirectiveId",
    "LocationDirectiveRepository",
    "LocationDirectiveResult",
    "LocationDirectiveService",
    "LocationDirectiveValidationResult",
    "LocationEvaluationResult",
    "LocationQuery",
    "LocationStrategy",
    "ResultType",
    "StaticAttributeProvider",
    "StrategyRegistry",
]
