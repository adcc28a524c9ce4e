"""Warehouse location directive selection engine."""

from __future__ import annotations

from slotting.config import EngineSettings, load_settings
from slotting.location import (
    InMemoryLocationDirectiveRepository,
    LocationConstraint,
    LocationConstraintType,
    LocationDirective,
    LocationDirectiveService,
    LocationQuery,
    LocationStrategy,
)
from slotting.shared import BinLocation, Quantity, SkuCode, WorkType

__all__ = [
    "BinLocation",
    "EngineSettings",
    "InMemoryLocationDirectiveRepository",
    "LocationConstraint",
    "LocationConstraintType",
    "LocationDirective",
    "LocationDirectiveService",
    "LocationQuery",
    "LocationStrategy",
    "Quantity",
    "SkuCode",
    "WorkType",
    "load_settings",
]
