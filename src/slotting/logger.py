"""Structured logging for the slotting engine, with component binding and history capture."""

from __future__ import annotations

import json
import sys
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Literal, TextIO

from loguru import logger as _logger

if TYPE_CHECKING:
    from loguru import Logger, Message, Record

PACKAGE = "slotting"

# Libraries stay silent until the application opts in.
_logger.disable(PACKAGE)


def component_logger(component: str) -> Logger:
    """Return the package logger bound to a component name (e.g. "LocationDirectiveService")."""
    return _logger.bind(component=component)


@dataclass(frozen=True, slots=True)
class LogEvent:
    """Immutable record of a logged event."""

    timestamp: datetime
    level: str
    message: str
    component: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)


class EventHistoryBuffer:
    """Fixed-size ring buffer for log events."""

    __slots__ = ("_buffer",)

    def __init__(self, max_size: int = 1000) -> None:
        self._buffer: deque[LogEvent] = deque(maxlen=max_size)

    def append(self, event: LogEvent) -> None:
        """Add an event to the buffer."""
        self._buffer.append(event)

    def __iter__(self) -> Iterator[LogEvent]:
        yield from self._buffer

    def __len__(self) -> int:
        return len(self._buffer)

    def clear(self) -> None:
        """Clear all events from the buffer."""
        self._buffer.clear()

    def query(self, *, level: str | None = None, component: str | None = None) -> list[LogEvent]:
        """Query history with optional filters.

        Args:
            level: Filter by log level (e.g., "INFO", "ERROR")
            component: Filter by component name (e.g., "LocationDirectiveService")

        Returns:
            List of matching LogEvent objects
        """
        results = list(self._buffer)
        if level:
            level_upper = level.upper()
            results = [e for e in results if e.level == level_upper]
        if component:
            results = [e for e in results if e.component == component]
        return results


def _is_package_record(record: Record) -> bool:
    return record["name"] is not None and record["name"].split(".")[0] == PACKAGE


def _format_record(record: Record, log_format: Literal["text", "json"]) -> str:
    extra = {k: v for k, v in record["extra"].items() if k != "component"}
    component = record["extra"].get("component") or "-"
    level_name = record["level"].name
    if log_format == "json":
        data = {
            "time": record["time"].astimezone(UTC).isoformat(),
            "level": level_name,
            "message": record["message"],
            "component": component if component != "-" else None,
            "extra": extra,
        }
        return json.dumps(data, default=str)
    return f"{record['time']:%Y-%m-%d %H:%M:%S.%f} | {level_name:<8} | {component:<28} | {record['message']}"


def configure_logging(
    *,
    level: str = "INFO",
    log_format: Literal["text", "json"] = "text",
    sink: TextIO | None = None,
) -> int:
    """Enable package logging and add a sink for it.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format ("text" or "json")
        sink: Stream to write to (defaults to stderr)

    Returns:
        The loguru handler id, to be passed to ``remove_handler``.
    """
    stream = sink if sink is not None else sys.stderr

    def write(message: Message) -> None:
        stream.write(_format_record(message.record, log_format) + "\n")
        stream.flush()

    _logger.enable(PACKAGE)
    return _logger.add(write, level=level.upper(), filter=_is_package_record, format="{message}")


def capture_history(buffer: EventHistoryBuffer, *, level: str = "DEBUG") -> int:
    """Record every package log event into ``buffer``; returns the loguru handler id."""

    def write(message: Message) -> None:
        record = message.record
        buffer.append(
            LogEvent(
                timestamp=record["time"],
                level=record["level"].name,
                message=record["message"],
                component=record["extra"].get("component"),
                extra={k: v for k, v in record["extra"].items() if k != "component"},
            )
        )

    _logger.enable(PACKAGE)
    return _logger.add(write, level=level.upper(), filter=_is_package_record, format="{message}")


def remove_handler(handler_id: int) -> None:
    """Remove a handler added by ``configure_logging`` or ``capture_history``."""
    try:
        _logger.remove(handler_id)
    except ValueError:
        pass  # Handler already removed
