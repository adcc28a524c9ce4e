"""Pydantic settings for the location directive engine."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from slotting.shared.bin_location import BinLocation


class CandidateGridSettings(BaseModel):
    """Shape of the candidate grid generated when a query carries no candidates."""

    model_config = ConfigDict(frozen=True)

    aisle_prefix: str = Field("A", description="Prefix of the generated aisle identifiers")
    aisles: int = Field(5, description="Number of aisles in the grid", ge=1)
    racks: int = Field(10, description="Number of racks per aisle", ge=1)
    levels: int = Field(3, description="Number of levels per rack", ge=1)
    limit: int = Field(50, description="Maximum number of generated candidates", ge=0)


class NeighbourhoodSettings(BaseModel):
    """Neighbourhood explored by the nearest-empty strategy around its reference location."""

    model_config = ConfigDict(frozen=True)

    rack_radius: int = Field(2, description="Racks explored on each side of the reference", ge=0)
    level_radius: int = Field(1, description="Levels explored above and below the reference", ge=0)


class ScoringSettings(BaseModel):
    """Weights of the composite location score."""

    model_config = ConfigDict(frozen=True)

    priority_weight: float = Field(100.0, description="Score contributed by each priority point", ge=0)
    distance_bonus_cap: float = Field(100.0, description="Bonus of a location at the origin", ge=0)
    distance_step: float = Field(10.0, description="Bonus lost per unit of distance from the origin", ge=0)
    capacity_factor: float = Field(10.0, description="Bonus per unit of available capacity", ge=0)
    capacity_bonus_cap: float = Field(100.0, description="Maximum capacity bonus", ge=0)
    zone_velocity_bonus: dict[str, float] = Field(
        default_factory=lambda: {"FAST_PICK": 50.0, "MEDIUM_PICK": 25.0},
        description="Bonus granted by the fast-moving strategy per zone",
    )


class EngineSettings(BaseModel):
    """Configuration of the location directive engine."""

    model_config = ConfigDict(frozen=True)

    scoring: ScoringSettings = Field(default_factory=ScoringSettings)
    grid: CandidateGridSettings = Field(default_factory=CandidateGridSettings)
    neighbourhood: NeighbourhoodSettings = Field(default_factory=NeighbourhoodSettings)
    origin: str = Field("A-01-1", description="Default reference location, as 'Aisle-Rack-Level'")
    default_priority: int = Field(100, description="Priority of generated default directives", ge=1)
    default_accessibility: str = Field("STANDARD", description="Accessibility required by default directives")
    equipment: frozenset[str] = Field(
        default_factory=lambda: frozenset({"scanner", "printer"}),
        description="Equipment assumed available at every location",
    )
    priority_order: Literal["ascending", "descending"] = Field(
        "ascending",
        description="Order in which directives are tried by priority number",
    )

    @field_validator("origin")
    @classmethod
    def _check_origin(cls, value: str) -> str:
        BinLocation.parse(value)
        return value

    @property
    def origin_location(self) -> BinLocation:
        return BinLocation.parse(self.origin)


def load_settings(path: str | Path) -> EngineSettings:
    """
    Load EngineSettings from a JSON file.
    """

    return EngineSettings.model_validate_json(Path(path).read_text())
