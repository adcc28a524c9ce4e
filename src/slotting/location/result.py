from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ResultType(StrEnum):
    SUITABLE = "SUITABLE"
    NOT_APPLICABLE = "NOT_APPLICABLE"
    CONSTRAINT_VIOLATION = "CONSTRAINT_VIOLATION"
    ERROR = "ERROR"


@dataclass(frozen=True, slots=True)
class LocationDirectiveResult:
    """
    Outcome of evaluating one directive against one location.
    """

    type: ResultType
    score: float = 0.0
    message: str | None = None
    violations: tuple[str, ...] = ()

    @classmethod
    def suitable(cls, score: float) -> LocationDirectiveResult:
        return cls(ResultType.SUITABLE, score=score)

    @classmethod
    def not_applicable(cls, reason: str) -> LocationDirectiveResult:
        return cls(ResultType.NOT_APPLICABLE, message=reason)

    @classmethod
    def constraint_violation(cls, violations: list[str] | tuple[str, ...]) -> LocationDirectiveResult:
        violations = tuple(violations)
        return cls(
            ResultType.CONSTRAINT_VIOLATION,
            message=f"Constraint violations: {', '.join(violations)}",
            violations=violations,
        )

    @classmethod
    def error(cls, reason: str) -> LocationDirectiveResult:
        return cls(ResultType.ERROR, message=reason)

    @property
    def is_suitable(self) -> bool:
        return self.type is ResultType.SUITABLE

    @property
    def is_not_applicable(self) -> bool:
        return self.type is ResultType.NOT_APPLICABLE

    @property
    def has_constraint_violations(self) -> bool:
        return self.type is ResultType.CONSTRAINT_VIOLATION

    @property
    def has_error(self) -> bool:
        return self.type is ResultType.ERROR
