from __future__ import annotations


class SlottingError(Exception):
    """Base class for every error raised by the slotting engine."""
