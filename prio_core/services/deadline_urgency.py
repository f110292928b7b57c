"""Deadline urgency calculation.

Maps a due instant to a continuous urgency score in [0, 1] using whole
calendar days in the configured time zone (not elapsed hours):

- overdue: 0.75 + 0.05 per day overdue, capped at 1.0
- due today: 0.75
- due tomorrow: 0.65
- due in 2-3 days: 0.50
- due in 4-7 days: 0.25
- further out: 0.25 minus 0.01 per day past a week, floored at 0.0
"""

from datetime import datetime

import pytz

from prio_core.domain.models import EngineConfig


def ensure_aware(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC.

    Args:
        value: Datetime that may lack tzinfo

    Returns:
        Timezone-aware datetime
    """
    if value.tzinfo is None:
        return pytz.UTC.localize(value)
    return value


class DeadlineUrgencyCalculator:
    """Turn a due date into a deadline urgency score."""

    def __init__(self, config: EngineConfig | None = None) -> None:
        """Initialize calculator.

        Args:
            config: Thresholds and time zone (defaults to ``EngineConfig()``)
        """
        self.config = config or EngineConfig()
        self._tz = self.config.tzinfo

    def days_until(self, due_date: datetime, now: datetime) -> int:
        """Whole calendar days from ``now``'s local date to ``due_date``'s.

        Example:
            >>> calc = DeadlineUrgencyCalculator()
            >>> calc.days_until(datetime(2026, 2, 5, 1, tzinfo=pytz.UTC),
            ...                 datetime(2026, 2, 4, 23, tzinfo=pytz.UTC))
            1
        """
        due_local = ensure_aware(due_date).astimezone(self._tz).date()
        now_local = ensure_aware(now).astimezone(self._tz).date()
        return (due_local - now_local).days

    def calculate(self, due_date: datetime | None, now: datetime) -> float:
        """Calculate deadline urgency.

        Args:
            due_date: Task due instant, None when the task has no deadline
            now: Current instant

        Returns:
            Urgency score in [0.0, 1.0]

        Example:
            >>> calc = DeadlineUrgencyCalculator()
            >>> now = datetime(2026, 2, 4, 12, tzinfo=pytz.UTC)
            >>> calc.calculate(datetime(2026, 2, 4, 23, 59, tzinfo=pytz.UTC), now)
            0.75
        """
        if due_date is None:
            return 0.0

        cfg = self.config
        days = self.days_until(due_date, now)

        if days < 0:
            return min(1.0, cfg.urgency_critical + (-days) * cfg.overdue_step)
        if days == 0:
            return cfg.urgency_critical
        if days == 1:
            return cfg.urgency_high
        if days <= cfg.medium_max_days:
            return cfg.urgency_medium
        if days <= cfg.low_max_days:
            return cfg.urgency_low
        return max(0.0, cfg.urgency_low - (days - cfg.low_max_days) * cfg.far_decay_step)

    def urgency_label(self, urgency: float) -> str:
        """Get human-readable label for a deadline urgency score.

        Returns:
            Label: "critical", "high", "medium", "low", "none"

        Example:
            >>> DeadlineUrgencyCalculator().urgency_label(0.65)
            'high'
        """
        cfg = self.config
        if urgency >= cfg.urgency_critical:
            return "critical"
        elif urgency >= cfg.urgency_high:
            return "high"
        elif urgency >= cfg.urgency_medium:
            return "medium"
        elif urgency > 0.0:
            return "low"
        else:
            return "none"
