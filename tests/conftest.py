"""Shared fixtures for the variantcore test suite."""

from pathlib import Path

import pytest

from variantcore.engine.engine import VariantEngine
from variantcore.events.bus import EventBus
from variantcore.registry.registry import VariantRegistry

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def registry(bus) -> VariantRegistry:
    return VariantRegistry(event_bus=bus)


@pytest.fixture
def snapshot(registry):
    return registry.snapshot()


@pytest.fixture
def engine(registry) -> VariantEngine:
    return VariantEngine(registry)
