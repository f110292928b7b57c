"""Default thresholds and times for priority classification and parsing.

These values seed ``EngineConfig``. The engine itself only ever reads the
config object it was constructed with, so alternate profiles are built by
overriding fields on ``EngineConfig`` rather than by editing this module.
"""

from typing import Final

# Escalation
ESCALATION_THRESHOLD: Final[float] = 0.65
"""Confidence below which a result should be handed to a secondary classifier.

Business rule: the rule-based engine handles clear-cut tasks well; anything it
scores below this line is cheaper to re-check than to trust.
"""

CONFIDENCE_CAP: Final[float] = 0.95
"""Upper bound on any rule-based confidence.

A keyword engine is never certain, so confidence stops short of 1.0 even when
every signal agrees.
"""

HIGH_CONFIDENCE: Final[float] = 0.75
"""Confidence at or above which a result is reported as high confidence."""

MAX_TEXT_LENGTH: Final[int] = 500
"""Characters of task text scanned for signals; the rest is ignored.

Several patterns span words (e.g. "ask ... to"), so matching cost grows with
the square of the scanned length.
"""

# Deadline urgency steps
URGENCY_CRITICAL: Final[float] = 0.75
"""Urgency for a task due today (and the floor for overdue tasks)."""

URGENCY_HIGH: Final[float] = 0.65
"""Urgency for a task due tomorrow. Also the is-urgent cut-off."""

URGENCY_MEDIUM: Final[float] = 0.50
"""Urgency for a task due in two or three days."""

URGENCY_LOW: Final[float] = 0.25
"""Urgency for a task due within a week."""

OVERDUE_STEP: Final[float] = 0.05
"""Extra urgency per day overdue, capped at 1.0.

Example:
    - 1 day overdue -> 0.80
    - 5+ days overdue -> 1.0
"""

FAR_DECAY_STEP: Final[float] = 0.01
"""Urgency lost per day beyond a week out, floored at 0.0."""

MEDIUM_MAX_DAYS: Final[int] = 3
LOW_MAX_DAYS: Final[int] = 7

# Default times of day (local hour)
TODAY_DUE_HOUR: Final[int] = 17
DEFAULT_DUE_HOUR: Final[int] = 9
WEEKEND_DUE_HOUR: Final[int] = 10
MORNING_HOUR: Final[int] = 9
AFTERNOON_HOUR: Final[int] = 14
EVENING_HOUR: Final[int] = 18
END_OF_DAY_HOUR: Final[int] = 17

IMPLICIT_PM_BEFORE_HOUR: Final[int] = 8
"""Bare clock hours below this value with no am/pm suffix are read as PM.

Example:
    - "call at 3" -> 3:00 PM
    - "call at 9" -> 9:00 AM
"""

DEFAULT_TIMEZONE: Final[str] = "UTC"
