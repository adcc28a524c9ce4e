"""Placement algorithms, one per location strategy."""

from __future__ import annotations

from .base import BaseLocationSelector, LocationSelector, RankingLocationSelector
from .bulk_location_selector import BulkLocationSelector
from .capacity_optimized_location_selector import CapacityOptimizedLocationSelector
from .fast_moving_location_selector import FastMovingLocationSelector
from .fixed_location_selector import FixedLocationSelector
from .inventory_age_location_selectors import FifoLocationSelector, LifoLocationSelector
from .level_location_selectors import HighestLevelLocationSelector, LowestLevelLocationSelector
from .nearest_empty_location_selector import EmptinessCheck, NearestEmptyLocationSelector, default_is_empty
from .random_location_selector import RandomLocationSelector
from .zone_based_location_selector import ZoneBasedLocationSelector

__all__ = [
    "BaseLocationSelector",
    "BulkLocationSelector",
    "CapacityOptimizedLocationSelector",
    "EmptinessCheck",
    "FastMovingLocationSelector",
    "FifoLocationSelector",
    "FixedLocationSelector",
    "HighestLevelLocationSelector",
    "LifoLocationSelector",
    "LocationSelector",
    "LowestLevelLocationSelector",
    "NearestEmptyLocationSelector",
    "RandomLocationSelector",
    "RankingLocationSelector",
    "ZoneBasedLocationSelector",
    "default_is_empty",
]
