from __future__ import annotations

from .distance import aisle_distance, aisle_offset, origin_distance, weighted_manhattan

__all__ = [
    "aisle_distance",
    "aisle_offset",
    "origin_distance",
    "weighted_manhattan",
]
