"""Pytest fixtures for slotting tests.

Directives are created with a fixed clock, so timestamps are predictable, and
selection runs with a seeded random generator.
"""

from __future__ import annotations

import random
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import pytest

from slotting.config import EngineSettings
from slotting.location.context_builder import ContextBuilder, StaticAttributeProvider
from slotting.location.query import LocationQuery
from slotting.location.registry import StrategyRegistry
from slotting.location.repository import InMemoryLocationDirectiveRepository
from slotting.location.service import LocationDirectiveService
from slotting.logger import EventHistoryBuffer, capture_history, remove_handler
from slotting.shared.bin_location import BinLocation
from slotting.shared.quantity import Quantity
from slotting.shared.sku_code import SkuCode
from slotting.shared.work_type import WorkType

if TYPE_CHECKING:
    from collections.abc import Callable, Generator, Iterable, Mapping


T0 = datetime(2024, 1, 1, 8, 0, tzinfo=UTC)


class FixedClock:
    """Clock returning a settable instant."""

    def __init__(self, now: datetime = T0) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def settings() -> EngineSettings:
    return EngineSettings()


@pytest.fixture
def repository() -> InMemoryLocationDirectiveRepository:
    return InMemoryLocationDirectiveRepository()


@pytest.fixture
def service(
    repository: InMemoryLocationDirectiveRepository,
    settings: EngineSettings,
    clock: FixedClock,
) -> LocationDirectiveService:
    registry = StrategyRegistry.default(rng=random.Random(42), settings=settings)
    return LocationDirectiveService(repository, registry=registry, settings=settings, clock=clock)


@pytest.fixture
def service_with_attributes(
    repository: InMemoryLocationDirectiveRepository,
    settings: EngineSettings,
    clock: FixedClock,
) -> Callable[[Mapping[BinLocation, Mapping[str, Any]]], LocationDirectiveService]:
    """Build a service whose locations carry the given attributes."""

    def build(attributes: Mapping[BinLocation, Mapping[str, Any]]) -> LocationDirectiveService:
        context_builder = ContextBuilder(attribute_provider=StaticAttributeProvider(attributes))
        registry = StrategyRegistry.default(rng=random.Random(42), context_builder=context_builder, settings=settings)
        return LocationDirectiveService(
            repository,
            registry=registry,
            context_builder=context_builder,
            settings=settings,
            clock=clock,
        )

    return build


@pytest.fixture
def make_query() -> Callable[..., LocationQuery]:
    def build(
        work_type: WorkType = WorkType.PICK,
        *,
        item: str = "SKU-1",
        quantity: int = 1,
        reference: str | None = None,
        candidates: Iterable[str] | None = None,
        **parameters: Any,
    ) -> LocationQuery:
        return LocationQuery(
            work_type=work_type,
            item=SkuCode(item),
            quantity=Quantity(quantity),
            reference_location=BinLocation.parse(reference) if reference is not None else None,
            parameters=parameters,
            candidate_locations=(
                tuple(BinLocation.parse(c) for c in candidates) if candidates is not None else None
            ),
        )

    return build


@pytest.fixture
def history() -> Generator[EventHistoryBuffer, Any, None]:
    """Capture the package log events emitted during a test."""
    buffer = EventHistoryBuffer()
    handler_id = capture_history(buffer)
    yield buffer
    remove_handler(handler_id)
