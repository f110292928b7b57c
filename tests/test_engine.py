"""Tests for the PriorityEngine facade."""

from datetime import datetime, timedelta

import pytest
from pytest_mock import MockerFixture

from prio_core import PriorityEngine, Quadrant
from prio_core.adapters.clock import FixedClock
from prio_core.config.settings import Settings
from prio_core.domain.models import ClassificationResult


def test_facade_classify(priority_engine: PriorityEngine) -> None:
    """Classification goes through the shared engine."""
    result = priority_engine.classify("Order office supplies - printer ink running low")

    assert isinstance(result, ClassificationResult)
    assert result.quadrant == Quadrant.DELEGATE
    assert priority_engine.should_escalate_to_llm(result) is result.should_escalate


def test_facade_uses_injected_clock(
    priority_engine: PriorityEngine, reference_date: datetime
) -> None:
    """Deadline urgency and parsing use the facade clock."""
    assert priority_engine.calculate_deadline_urgency(reference_date) == 0.75
    assert priority_engine.calculate_deadline_urgency() == 0.0
    assert priority_engine.parse("Pay rent tomorrow").due_date == reference_date.replace(
        hour=9
    ) + timedelta(days=1)


def test_facade_batch(priority_engine: PriorityEngine) -> None:
    """Batch results are index-aligned."""
    results = priority_engine.classify_batch(
        ["Browse Reddit for interesting posts", "Research investment options for retirement"]
    )
    assert [r.quadrant for r in results] == [Quadrant.ELIMINATE, Quadrant.SCHEDULE]


def test_facade_escalation(priority_engine: PriorityEngine, mocker: MockerFixture) -> None:
    """Escalation is exposed on the facade."""
    secondary = mocker.Mock()
    secondary.classify.return_value = mocker.Mock(
        quadrant=Quadrant.DO_FIRST, explanation="Looks pressing"
    )

    result = priority_engine.classify_with_escalation("", secondary=secondary)

    assert result.quadrant == Quadrant.DO_FIRST
    assert result.rule == "escalated"


@pytest.mark.usefixtures("clean_settings")
def test_from_settings(reference_date: datetime) -> None:
    """Settings configure the time zone of every component."""
    engine = PriorityEngine.from_settings(
        Settings(timezone="America/New_York"), clock=FixedClock(reference_date)
    )

    assert engine.config.timezone == "America/New_York"
    assert engine.classifier.calculator.config.timezone == "America/New_York"
    # 09:00 EST is 14:00 UTC
    assert engine.parse("Pay rent tomorrow").due_date.hour == 14
