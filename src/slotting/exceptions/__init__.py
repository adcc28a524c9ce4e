from __future__ import annotations

from .base import SlottingError
from .directive import ConcurrentModificationError, DirectiveConfigurationError, DirectiveNotFound
from .location import InvalidBinLocation

__all__ = [
    "ConcurrentModificationError",
    "DirectiveConfigurationError",
    "DirectiveNotFound",
    "InvalidBinLocation",
    "SlottingError",
]
