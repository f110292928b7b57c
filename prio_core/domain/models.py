"""Domain models for priority classification and task parsing.

All models use Pydantic v2 and are frozen: every result is a fresh,
immutable value produced per call.
"""

from datetime import datetime
from enum import Enum
from typing import Final

import pytz
from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from prio_core.domain.classification_constants import (
    AFTERNOON_HOUR,
    CONFIDENCE_CAP,
    DEFAULT_DUE_HOUR,
    DEFAULT_TIMEZONE,
    END_OF_DAY_HOUR,
    ESCALATION_THRESHOLD,
    EVENING_HOUR,
    FAR_DECAY_STEP,
    HIGH_CONFIDENCE,
    IMPLICIT_PM_BEFORE_HOUR,
    LOW_MAX_DAYS,
    MAX_TEXT_LENGTH,
    MEDIUM_MAX_DAYS,
    MORNING_HOUR,
    OVERDUE_STEP,
    TODAY_DUE_HOUR,
    URGENCY_CRITICAL,
    URGENCY_HIGH,
    URGENCY_LOW,
    URGENCY_MEDIUM,
    WEEKEND_DUE_HOUR,
)


class Quadrant(str, Enum):
    """Eisenhower matrix quadrant."""

    DO_FIRST = "do_first"
    SCHEDULE = "schedule"
    DELEGATE = "delegate"
    ELIMINATE = "eliminate"

    @property
    def display_name(self) -> str:
        """Label shown to users."""
        return QUADRANT_DISPLAY[self][0]

    @property
    def description(self) -> str:
        """Urgent/important summary for the quadrant."""
        return QUADRANT_DISPLAY[self][1]

    @property
    def color_hex(self) -> str:
        """Badge colour for the quadrant."""
        return QUADRANT_DISPLAY[self][2]

    @classmethod
    def from_flags(cls, is_urgent: bool, is_important: bool) -> "Quadrant":
        """Map urgent/important flags straight onto the matrix.

        Example:
            >>> Quadrant.from_flags(is_urgent=True, is_important=False)
            <Quadrant.DELEGATE: 'delegate'>
        """
        if is_urgent and is_important:
            return cls.DO_FIRST
        if is_important:
            return cls.SCHEDULE
        if is_urgent:
            return cls.DELEGATE
        return cls.ELIMINATE


QUADRANT_DISPLAY: Final[dict[Quadrant, tuple[str, str, str]]] = {
    Quadrant.DO_FIRST: ("Do First", "Urgent + Important", "#DC2626"),
    Quadrant.SCHEDULE: ("Schedule", "Important, Not Urgent", "#F59E0B"),
    Quadrant.DELEGATE: ("Delegate", "Urgent, Not Important", "#F97316"),
    Quadrant.ELIMINATE: ("Later", "Not Urgent, Not Important", "#6B7280"),
}
"""Display name, description and colour per quadrant."""


class PatternCategory(str, Enum):
    """Named pattern collections in the pattern library."""

    URGENCY = "urgency"
    IMPORTANCE = "importance"
    DELEGATION = "delegation"
    LOW_PRIORITY = "low_priority"
    SOON_DEADLINE = "soon_deadline"
    FUTURE_DEADLINE = "future_deadline"


class EngineConfig(BaseModel):
    """Thresholds, decay rates and default times for the engine.

    Built once and handed to every service at construction.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    escalation_threshold: float = Field(
        default=ESCALATION_THRESHOLD,
        ge=0.0,
        le=1.0,
        description="Confidence below which escalation is recommended",
    )
    confidence_cap: float = Field(
        default=CONFIDENCE_CAP, ge=0.0, le=1.0, description="Maximum confidence"
    )
    high_confidence: float = Field(
        default=HIGH_CONFIDENCE, ge=0.0, le=1.0, description="High confidence cut-off"
    )
    max_text_length: int = Field(
        default=MAX_TEXT_LENGTH,
        ge=1,
        description="Characters of task text scanned for signals",
    )

    urgency_critical: float = Field(default=URGENCY_CRITICAL, ge=0.0, le=1.0)
    urgency_high: float = Field(default=URGENCY_HIGH, ge=0.0, le=1.0)
    urgency_medium: float = Field(default=URGENCY_MEDIUM, ge=0.0, le=1.0)
    urgency_low: float = Field(default=URGENCY_LOW, ge=0.0, le=1.0)
    overdue_step: float = Field(default=OVERDUE_STEP, ge=0.0)
    far_decay_step: float = Field(default=FAR_DECAY_STEP, ge=0.0)
    medium_max_days: int = Field(default=MEDIUM_MAX_DAYS, ge=2)
    low_max_days: int = Field(default=LOW_MAX_DAYS, ge=2)

    today_due_hour: int = Field(default=TODAY_DUE_HOUR, ge=0, le=23)
    default_due_hour: int = Field(default=DEFAULT_DUE_HOUR, ge=0, le=23)
    weekend_due_hour: int = Field(default=WEEKEND_DUE_HOUR, ge=0, le=23)
    morning_hour: int = Field(default=MORNING_HOUR, ge=0, le=23)
    afternoon_hour: int = Field(default=AFTERNOON_HOUR, ge=0, le=23)
    evening_hour: int = Field(default=EVENING_HOUR, ge=0, le=23)
    end_of_day_hour: int = Field(default=END_OF_DAY_HOUR, ge=0, le=23)
    implicit_pm_before_hour: int = Field(
        default=IMPLICIT_PM_BEFORE_HOUR, ge=0, le=12
    )

    timezone: str = Field(
        default=DEFAULT_TIMEZONE,
        description="IANA time zone used for calendar-day arithmetic",
    )

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            pytz.timezone(value)
        except pytz.UnknownTimeZoneError as e:
            raise ValueError(f"Unknown timezone: {value}") from e
        return value

    @property
    def tzinfo(self) -> pytz.BaseTzInfo:
        """Resolved pytz time zone."""
        return pytz.timezone(self.timezone)


class ClassificationResult(BaseModel):
    """Outcome of classifying a single task."""

    model_config = ConfigDict(frozen=True)

    quadrant: Quadrant = Field(..., description="Assigned quadrant")
    confidence: float = Field(..., ge=0.0, le=1.0, description="Confidence 0-1")
    explanation: str = Field(..., min_length=1, description="Why this quadrant")
    is_urgent: bool = Field(..., description="Urgency decision input")
    is_important: bool = Field(..., description="Importance decision input")
    urgency_score: float = Field(
        ..., description="Urgency match count plus deadline urgency"
    )
    importance_score: float = Field(..., description="Importance match count")
    urgency_signals: list[str] = Field(
        default_factory=list, description="Matched urgency literals"
    )
    importance_signals: list[str] = Field(
        default_factory=list, description="Matched importance literals"
    )
    rule: str = Field(default="", description="Name of the rule that fired")
    escalation_threshold: float = Field(
        default=ESCALATION_THRESHOLD,
        ge=0.0,
        le=1.0,
        description="Threshold the escalation flag is derived from",
    )
    high_confidence_threshold: float = Field(
        default=HIGH_CONFIDENCE,
        ge=0.0,
        le=1.0,
        description="Threshold the high-confidence flag is derived from",
    )
    latency_ms: float = Field(default=0.0, ge=0.0, description="Wall-clock cost")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def should_escalate(self) -> bool:
        """True when confidence is below the escalation threshold."""
        return self.confidence < self.escalation_threshold

    @property
    def is_high_confidence(self) -> bool:
        """Confidence at or above the carried high-confidence threshold."""
        return self.confidence >= self.high_confidence_threshold

    @property
    def is_low_confidence(self) -> bool:
        """Alias of ``should_escalate`` for display code."""
        return self.should_escalate


class ParsedTask(BaseModel):
    """Structured task extracted from a natural-language entry."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Cleaned task title")
    due_date: datetime | None = Field(
        default=None, description="Due instant (UTC) if one was found"
    )
    due_time: str | None = Field(
        default=None, description="Human-readable time, e.g. '2:30 PM'"
    )
    is_urgent: bool = Field(default=False, description="Urgency marker present")
    keywords: list[str] = Field(default_factory=list, description="Detected keywords")


class AccuracyReport(BaseModel):
    """Accuracy and latency of the engine over a labelled task set."""

    total: int
    correct: int
    accuracy: float
    per_quadrant: dict[Quadrant, float] = Field(default_factory=dict)
    confusion: dict[Quadrant, dict[Quadrant, int]] = Field(default_factory=dict)
    failures: list[str] = Field(default_factory=list)
    avg_latency_ms: float = 0.0
    max_latency_ms: float = 0.0


class SignalContext(BaseModel):
    """Per-call signal snapshot the classification rules are evaluated against."""

    model_config = ConfigDict(frozen=True)

    urgency_signals: list[str] = Field(default_factory=list)
    importance_signals: list[str] = Field(default_factory=list)
    delegation_signals: list[str] = Field(default_factory=list)
    low_priority_signals: list[str] = Field(default_factory=list)
    has_soon_deadline: bool = False
    has_future_deadline: bool = False
    deadline_urgency: float = 0.0
    is_urgent: bool = False
    is_important: bool = False

    def count(self, category: PatternCategory) -> int:
        """Number of matched signals in a category."""
        if category is PatternCategory.URGENCY:
            return len(self.urgency_signals)
        if category is PatternCategory.IMPORTANCE:
            return len(self.importance_signals)
        if category is PatternCategory.DELEGATION:
            return len(self.delegation_signals)
        if category is PatternCategory.LOW_PRIORITY:
            return len(self.low_priority_signals)
        return 0
