"""Pytest configuration and shared fixtures."""

from collections.abc import Generator
from datetime import datetime

import pytest
import pytz

from prio_core.adapters.clock import FixedClock
from prio_core.config import settings as settings_module
from prio_core.domain.models import EngineConfig
from prio_core.engine import PriorityEngine
from prio_core.services.classification_engine import ClassificationEngine
from prio_core.services.deadline_urgency import DeadlineUrgencyCalculator
from prio_core.services.pattern_library import PatternLibrary
from prio_core.services.temporal_parser import TemporalExpressionParser


@pytest.fixture
def reference_date() -> datetime:
    """Reference instant for testing: Wednesday Feb 4, 2026, 12:00 UTC."""
    return datetime(2026, 2, 4, 12, 0, tzinfo=pytz.UTC)


@pytest.fixture
def fixed_clock(reference_date: datetime) -> FixedClock:
    """Clock frozen at the reference instant."""
    return FixedClock(reference_date)


@pytest.fixture
def config() -> EngineConfig:
    """Default engine configuration."""
    return EngineConfig()


@pytest.fixture(scope="session")
def library() -> PatternLibrary:
    """Compiled default pattern library (shared, read-only)."""
    return PatternLibrary()


@pytest.fixture
def calculator(config: EngineConfig) -> DeadlineUrgencyCalculator:
    """Deadline urgency calculator with default thresholds."""
    return DeadlineUrgencyCalculator(config)


@pytest.fixture
def engine(
    library: PatternLibrary, config: EngineConfig, fixed_clock: FixedClock
) -> ClassificationEngine:
    """Classification engine pinned to the reference instant."""
    return ClassificationEngine(library=library, config=config, clock=fixed_clock)


@pytest.fixture
def parser(config: EngineConfig, fixed_clock: FixedClock) -> TemporalExpressionParser:
    """Temporal parser pinned to the reference instant."""
    return TemporalExpressionParser(config=config, clock=fixed_clock)


@pytest.fixture
def priority_engine(fixed_clock: FixedClock) -> PriorityEngine:
    """Facade pinned to the reference instant."""
    return PriorityEngine(clock=fixed_clock)


@pytest.fixture
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear PRIO_* variables and the cached settings around a test."""
    for name in ("PRIO_TIMEZONE", "PRIO_LOG_LEVEL", "PRIO_JSON_LOGS", "PRIO_THRESHOLDS_FILE"):
        monkeypatch.delenv(name, raising=False)
    settings_module.reset_settings()
    yield
    settings_module.reset_settings()
