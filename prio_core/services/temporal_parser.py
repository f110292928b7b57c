"""Natural-language task parsing.

Splits free-text task entries into a title and an implied due date/time:
- Absolute day words (today, tomorrow, next week, this week, this weekend, next month)
- Weekday names and abbreviations
- Explicit clock times ("at 3", "3:30pm")
- Day parts (morning, afternoon, evening/tonight, end of day)
- Relative offsets ("in 3 days", "in 2 weeks")
- Urgency markers (urgent, asap, ...)

Extraction is a greedy, order-dependent phrase scan: each family runs on the
text left over by the previous ones. Parsing never raises; unrecognised input
simply yields no due date.
"""

import re
from collections.abc import Callable
from datetime import date, datetime, time, timedelta
from typing import Final

import pytz
from dateutil.relativedelta import relativedelta

from prio_core.adapters.clock import SystemClock
from prio_core.config.logging_config import get_logger
from prio_core.domain.models import EngineConfig, ParsedTask
from prio_core.domain.protocols import ClockProtocol
from prio_core.services.deadline_urgency import ensure_aware
from prio_core.services.text_normalizer import clean_title

logger = get_logger(__name__)

FRIDAY: Final[int] = 4
"""``date.weekday()`` value for Friday."""

SATURDAY: Final[int] = 5
"""``date.weekday()`` value for Saturday."""

URGENT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\b(urgent|asap|immediately|critical|emergency|now)\b", flags=re.IGNORECASE
)
"""Urgency marker words."""

BY_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\b(by|before|due|deadline)\s+", flags=re.IGNORECASE
)
"""Deadline connectives dropped from the title."""

TODAY_PATTERN: Final[re.Pattern[str]] = re.compile(r"\btoday\b", flags=re.IGNORECASE)
TOMORROW_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\btomorrow\b", flags=re.IGNORECASE
)
NEXT_WEEK_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\bnext\s+week\b", flags=re.IGNORECASE
)
THIS_WEEK_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\bthis\s+week\b", flags=re.IGNORECASE
)
THIS_WEEKEND_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\bthis\s+weekend\b", flags=re.IGNORECASE
)
NEXT_MONTH_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\bnext\s+month\b", flags=re.IGNORECASE
)

WEEKDAY_PATTERNS: Final[tuple[tuple[re.Pattern[str], int], ...]] = (
    (re.compile(r"\b(monday|mon)\b", flags=re.IGNORECASE), 0),
    (re.compile(r"\b(tuesday|tues|tue)\b", flags=re.IGNORECASE), 1),
    (re.compile(r"\b(wednesday|wed)\b", flags=re.IGNORECASE), 2),
    (re.compile(r"\b(thursday|thurs|thu)\b", flags=re.IGNORECASE), 3),
    (re.compile(r"\b(friday|fri)\b", flags=re.IGNORECASE), 4),
    (re.compile(r"\b(saturday|sat)\b", flags=re.IGNORECASE), 5),
    (re.compile(r"\b(sunday|sun)\b", flags=re.IGNORECASE), 6),
)
"""Weekday patterns paired with ``date.weekday()`` values, Monday first."""

TIME_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\b(at\s+)?(\d{1,2})(?::(\d{2}))?\s*(am|pm)?\b", flags=re.IGNORECASE
)
"""Clock time candidates; a match counts only with "at", minutes or am/pm."""

MORNING_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\b(in the morning|morning)\b", flags=re.IGNORECASE
)
AFTERNOON_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\b(in the afternoon|afternoon)\b", flags=re.IGNORECASE
)
EVENING_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\b(in the evening|evening|tonight)\b", flags=re.IGNORECASE
)
EOD_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\b(end of day|eod)\b", flags=re.IGNORECASE
)

IN_DAYS_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\bin\s+(\d+)\s+days?\b", flags=re.IGNORECASE
)
IN_WEEKS_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\bin\s+(\d+)\s+weeks?\b", flags=re.IGNORECASE
)


def format_time(hour: int, minute: int) -> str:
    """Format a 24-hour time as "H:MM AM/PM".

    Example:
        >>> format_time(14, 30)
        '2:30 PM'
        >>> format_time(0, 5)
        '12:05 AM'
    """
    suffix = "PM" if hour >= 12 else "AM"
    return f"{hour % 12 or 12}:{minute:02d} {suffix}"


def days_until_weekday(today: date, weekday: int) -> int:
    """Days to the next occurrence of ``weekday``, never 0.

    Example:
        >>> days_until_weekday(date(2026, 2, 4), 4)  # Wednesday -> Friday
        2
    """
    delta = (weekday - today.weekday()) % 7
    return delta or 7


class TemporalExpressionParser:
    """Extract title, due date and urgency from task input."""

    def __init__(
        self,
        config: EngineConfig | None = None,
        clock: ClockProtocol | None = None,
    ) -> None:
        """Initialize parser.

        Args:
            config: Default times and time zone
            clock: Time source used when ``now`` is not passed explicitly
        """
        self.config = config or EngineConfig()
        self.clock: ClockProtocol = clock or SystemClock()
        self._tz = self.config.tzinfo

    def _at(self, day: date, hour: int, minute: int = 0) -> datetime:
        local = self._tz.localize(datetime.combine(day, time(hour, minute)))
        return local.astimezone(pytz.UTC)

    def _local_date(self, instant: datetime) -> date:
        return instant.astimezone(self._tz).date()

    def _absolute_day(self, text: str, today: date) -> tuple[datetime | None, str]:
        """Apply the first matching absolute day family.

        Returns:
            Tuple of (due instant or None, remaining text)
        """
        cfg = self.config
        families: tuple[tuple[re.Pattern[str], Callable[[], datetime]], ...] = (
            (TODAY_PATTERN, lambda: self._at(today, cfg.today_due_hour)),
            (
                TOMORROW_PATTERN,
                lambda: self._at(today + timedelta(days=1), cfg.default_due_hour),
            ),
            (
                NEXT_WEEK_PATTERN,
                lambda: self._at(today + timedelta(days=7), cfg.default_due_hour),
            ),
            (
                THIS_WEEK_PATTERN,
                lambda: self._at(
                    today + timedelta(days=days_until_weekday(today, FRIDAY)),
                    cfg.today_due_hour,
                ),
            ),
            (
                THIS_WEEKEND_PATTERN,
                lambda: self._at(
                    today + timedelta(days=days_until_weekday(today, SATURDAY)),
                    cfg.weekend_due_hour,
                ),
            ),
            (
                NEXT_MONTH_PATTERN,
                lambda: self._at(today + relativedelta(months=1), cfg.default_due_hour),
            ),
        )

        for pattern, resolve in families:
            if pattern.search(text):
                return resolve(), pattern.sub("", text)
        return None, text

    def _weekday(self, text: str, today: date) -> tuple[datetime | None, str]:
        for pattern, weekday in WEEKDAY_PATTERNS:
            if pattern.search(text):
                target = today + timedelta(days=days_until_weekday(today, weekday))
                return self._at(target, self.config.default_due_hour), pattern.sub(
                    "", text
                )
        return None, text

    def _explicit_time(self, text: str) -> tuple[int, int, str] | None:
        """Find the first usable clock time.

        Returns:
            Tuple of (hour, minute, remaining text), or None
        """
        for match in TIME_PATTERN.finditer(text):
            at_prefix, hour_raw, minute_raw, meridiem = match.groups()
            if not (at_prefix or minute_raw or meridiem):
                continue

            hour = int(hour_raw)
            minute = int(minute_raw) if minute_raw else 0
            meridiem = (meridiem or "").lower()

            if meridiem == "pm" and hour < 12:
                hour += 12
            elif meridiem == "am" and hour == 12:
                hour = 0
            elif not meridiem and hour < self.config.implicit_pm_before_hour:
                hour += 12

            if hour > 23 or minute > 59:
                continue

            remaining = text[: match.start()] + text[match.end() :]
            return hour, minute, remaining
        return None

    def _day_part(
        self, text: str, due: datetime | None, today: date, apply: bool
    ) -> tuple[datetime | None, str | None, str]:
        """Apply day-part words (morning, afternoon, evening, end of day).

        Args:
            text: Remaining text
            due: Due instant so far
            today: Local date of ``now``
            apply: False when an explicit clock time already set the time of day

        Returns:
            Tuple of (due instant, due time string or None, remaining text)
        """
        cfg = self.config
        parts = (
            (MORNING_PATTERN, cfg.morning_hour),
            (AFTERNOON_PATTERN, cfg.afternoon_hour),
            (EVENING_PATTERN, cfg.evening_hour),
        )

        if due is not None:
            for pattern, hour in parts:
                if pattern.search(text):
                    text = pattern.sub("", text)
                    if not apply:
                        return due, None, text
                    return self._at(self._local_date(due), hour), format_time(hour, 0), text

        if EOD_PATTERN.search(text):
            text = EOD_PATTERN.sub("", text)
            if not apply:
                return due, None, text
            day = self._local_date(due) if due is not None else today
            hour = cfg.end_of_day_hour
            return self._at(day, hour), format_time(hour, 0), text

        return due, None, text

    def parse(self, text: str, now: datetime | None = None) -> ParsedTask:
        """Parse a natural-language task entry.

        Args:
            text: Raw input (typed text or voice transcription)
            now: Reference instant (defaults to the parser clock)

        Returns:
            Parsed task; ``due_date`` is None when no temporal phrase was found

        Example:
            >>> parser = TemporalExpressionParser()
            >>> task = parser.parse("remind me to call mom tomorrow morning",
            ...                     now=datetime(2026, 2, 4, 12, tzinfo=pytz.UTC))
            >>> task.title, task.due_time
            ('Call Mom', '9:00 AM')
        """
        reference = ensure_aware(now if now is not None else self.clock.now())
        today = self._local_date(reference)

        original = text.strip()
        working = original
        keywords: list[str] = []
        due_time: str | None = None

        is_urgent = URGENT_PATTERN.search(working) is not None
        if is_urgent:
            keywords.append("urgent")

        due, working = self._absolute_day(working, today)
        if due is None:
            due, working = self._weekday(working, today)

        explicit_time = self._explicit_time(working) if due is not None else None
        if explicit_time is not None:
            hour, minute, working = explicit_time
            due = self._at(self._local_date(due), hour, minute)
            due_time = format_time(hour, minute)

        due, part_time, working = self._day_part(
            working, due, today, apply=explicit_time is None
        )
        due_time = part_time or due_time

        days_match = IN_DAYS_PATTERN.search(working)
        if days_match:
            target = today + timedelta(days=int(days_match.group(1)))
            due = self._at(target, self.config.default_due_hour)
            due_time = None
            working = working[: days_match.start()] + working[days_match.end() :]

        weeks_match = IN_WEEKS_PATTERN.search(working)
        if weeks_match:
            target = today + timedelta(weeks=int(weeks_match.group(1)))
            due = self._at(target, self.config.default_due_hour)
            due_time = None
            working = working[: weeks_match.start()] + working[weeks_match.end() :]

        working = BY_PATTERN.sub("", working)
        working = URGENT_PATTERN.sub("", working)
        title = clean_title(working) or original

        logger.debug(
            "task_parsed",
            has_due_date=due is not None,
            due_time=due_time,
            is_urgent=is_urgent,
        )

        return ParsedTask(
            title=title,
            due_date=due,
            due_time=due_time,
            is_urgent=is_urgent,
            keywords=keywords,
        )
