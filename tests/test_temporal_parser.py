"""Tests for natural-language task parsing."""

from datetime import datetime

import pytest
import pytz

from prio_core.adapters.clock import FixedClock
from prio_core.domain.models import EngineConfig
from prio_core.services.temporal_parser import (
    TemporalExpressionParser,
    days_until_weekday,
    format_time,
)


def utc(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> datetime:
    """Build a UTC datetime."""
    return datetime(year, month, day, hour, minute, tzinfo=pytz.UTC)


def test_call_mom_tomorrow_morning(parser: TemporalExpressionParser) -> None:
    """Filler, day word and day part are all extracted."""
    task = parser.parse("remind me to call mom tomorrow morning")

    assert task.title == "Call Mom"
    assert task.due_date == utc(2026, 2, 5, 9, 0)
    assert task.due_time == "9:00 AM"
    assert task.is_urgent is False
    assert task.keywords == []


@pytest.mark.parametrize(
    ("text", "title", "due"),
    [
        ("Submit report today", "Submit report", utc(2026, 2, 4, 17)),
        ("Buy groceries tomorrow", "Buy groceries", utc(2026, 2, 5, 9)),
        ("Review budget next week", "Review budget", utc(2026, 2, 11, 9)),
        ("Finish draft this week", "Finish draft", utc(2026, 2, 6, 17)),
        ("Clean garage this weekend", "Clean garage", utc(2026, 2, 7, 10)),
        ("Renew passport next month", "Renew passport", utc(2026, 3, 4, 9)),
    ],
)
def test_absolute_day_words(
    parser: TemporalExpressionParser, text: str, title: str, due: datetime
) -> None:
    """Absolute day words resolve against the reference date."""
    task = parser.parse(text)

    assert task.title == title
    assert task.due_date == due
    assert task.due_time is None


def test_first_absolute_family_wins(parser: TemporalExpressionParser) -> None:
    """"today" beats "tomorrow" when both appear."""
    task = parser.parse("Draft today or tomorrow")
    assert task.due_date == utc(2026, 2, 4, 17)


def test_absolute_day_beats_weekday(parser: TemporalExpressionParser) -> None:
    """A weekday is ignored once an absolute day word set the date."""
    task = parser.parse("Demo Friday next week")

    assert task.due_date == utc(2026, 2, 11, 9)
    assert "Friday" in task.title


@pytest.mark.parametrize(
    ("text", "due"),
    [
        ("Pay rent Monday", utc(2026, 2, 9, 9)),
        ("Team sync tue", utc(2026, 2, 10, 9)),
        ("Gym on Wednesday", utc(2026, 2, 11, 9)),
        ("Ship build thurs", utc(2026, 2, 5, 9)),
        ("Send invoices Friday", utc(2026, 2, 6, 9)),
        ("Hike on sat", utc(2026, 2, 7, 9)),
        ("Call grandma Sunday", utc(2026, 2, 8, 9)),
    ],
)
def test_weekdays_next_occurrence(
    parser: TemporalExpressionParser, text: str, due: datetime
) -> None:
    """Weekdays resolve to the next occurrence, never today."""
    assert parser.parse(text).due_date == due


def test_explicit_time_with_meridiem(parser: TemporalExpressionParser) -> None:
    """Explicit times replace the default time of day."""
    task = parser.parse("Finish slides by Friday at 3:30pm")

    assert task.title == "Finish slides"
    assert task.due_date == utc(2026, 2, 6, 15, 30)
    assert task.due_time == "3:30 PM"


@pytest.mark.parametrize(
    ("text", "due", "due_time"),
    [
        ("Dentist tomorrow at 3", utc(2026, 2, 5, 15), "3:00 PM"),
        ("Standup tomorrow at 9", utc(2026, 2, 5, 9), "9:00 AM"),
        ("Flight tomorrow at 10:45", utc(2026, 2, 5, 10, 45), "10:45 AM"),
        ("Launch tomorrow 12am", utc(2026, 2, 5, 0), "12:00 AM"),
        ("Lunch tomorrow at 12pm", utc(2026, 2, 5, 12), "12:00 PM"),
        ("Run tomorrow 6am", utc(2026, 2, 5, 6), "6:00 AM"),
    ],
)
def test_time_formats(
    parser: TemporalExpressionParser, text: str, due: datetime, due_time: str
) -> None:
    """Bare hours below 8 are PM; am/pm suffixes are honoured."""
    task = parser.parse(text)

    assert task.due_date == due
    assert task.due_time == due_time


def test_time_ignored_without_date(parser: TemporalExpressionParser) -> None:
    """A clock time alone does not create a due date."""
    task = parser.parse("Call dentist at 4")

    assert task.due_date is None
    assert task.due_time is None
    assert task.title == "Call dentist at 4"


def test_explicit_time_wins_over_day_part(parser: TemporalExpressionParser) -> None:
    """An explicit time is kept when a day part also appears."""
    task = parser.parse("Review tomorrow afternoon at 4:15pm")

    assert task.due_date == utc(2026, 2, 5, 16, 15)
    assert task.due_time == "4:15 PM"
    assert task.title == "Review"


@pytest.mark.parametrize(
    ("text", "due", "due_time"),
    [
        ("Water plants tomorrow afternoon", utc(2026, 2, 5, 14), "2:00 PM"),
        ("Dinner tomorrow evening", utc(2026, 2, 5, 18), "6:00 PM"),
        ("Movie tomorrow in the evening", utc(2026, 2, 5, 18), "6:00 PM"),
    ],
)
def test_day_parts(
    parser: TemporalExpressionParser, text: str, due: datetime, due_time: str
) -> None:
    """Day parts set the time on an existing date."""
    task = parser.parse(text)

    assert task.due_date == due
    assert task.due_time == due_time


def test_day_part_without_date_is_kept(parser: TemporalExpressionParser) -> None:
    """Day parts need a date; otherwise they stay in the title."""
    task = parser.parse("call mom tonight")

    assert task.due_date is None
    assert task.title == "Call Mom tonight"


def test_end_of_day_sets_today(parser: TemporalExpressionParser) -> None:
    """EOD without a date means today at 17:00."""
    task = parser.parse("Send report EOD")

    assert task.title == "Send report"
    assert task.due_date == utc(2026, 2, 4, 17)
    assert task.due_time == "5:00 PM"


def test_end_of_day_keeps_existing_date(parser: TemporalExpressionParser) -> None:
    """End of day moves an existing date to 17:00."""
    task = parser.parse("Wrap up Friday end of day")

    assert task.due_date == utc(2026, 2, 6, 17)
    assert task.due_time == "5:00 PM"


@pytest.mark.parametrize(
    ("text", "due"),
    [
        ("Water plants in 3 days", utc(2026, 2, 7, 9)),
        ("Follow up in 1 day", utc(2026, 2, 5, 9)),
        ("Check results in 2 weeks", utc(2026, 2, 18, 9)),
        ("Renew lease tomorrow in 5 days", utc(2026, 2, 9, 9)),
    ],
)
def test_relative_offsets_override(
    parser: TemporalExpressionParser, text: str, due: datetime
) -> None:
    """Relative offsets are applied last and win."""
    task = parser.parse(text)

    assert task.due_date == due
    assert "days" not in task.title
    assert "weeks" not in task.title


def test_urgency_markers(parser: TemporalExpressionParser) -> None:
    """Urgency words set the flag and are removed from the title."""
    task = parser.parse("Fix login bug ASAP")

    assert task.is_urgent is True
    assert task.keywords == ["urgent"]
    assert task.title == "Fix login bug"


def test_deadline_connectives_removed(parser: TemporalExpressionParser) -> None:
    """by/before/due/deadline connectives are dropped."""
    task = parser.parse("I need to submit taxes before tomorrow")

    assert task.title == "Submit taxes"
    assert task.due_date == utc(2026, 2, 5, 9)


@pytest.mark.parametrize("text", ["tomorrow", "  urgent  ", "tomorrow at 5pm"])
def test_empty_title_falls_back_to_input(
    parser: TemporalExpressionParser, text: str
) -> None:
    """If nothing is left, the trimmed input is the title."""
    assert parser.parse(text).title == text.strip()


def test_unparseable_input(parser: TemporalExpressionParser) -> None:
    """Text without temporal phrases has no due date."""
    task = parser.parse("write the blog post")

    assert task.title == "Write the blog post"
    assert task.due_date is None
    assert task.is_urgent is False


def test_empty_input(parser: TemporalExpressionParser) -> None:
    """Empty input parses to an empty task."""
    task = parser.parse("")

    assert task.title == ""
    assert task.due_date is None


def test_next_month_clamps_day(config: EngineConfig) -> None:
    """Month arithmetic clamps to the end of the shorter month."""
    parser = TemporalExpressionParser(config=config, clock=FixedClock(utc(2026, 1, 31, 12)))
    assert parser.parse("Close books next month").due_date == utc(2026, 2, 28, 9)


def test_this_week_rolls_over_on_friday(config: EngineConfig) -> None:
    """On a Friday "this week" means next week's Friday."""
    friday = FixedClock(utc(2026, 2, 6, 12))
    parser = TemporalExpressionParser(config=config, clock=friday)

    assert parser.parse("Finish draft this week").due_date == utc(2026, 2, 13, 17)


def test_configured_timezone(reference_date: datetime) -> None:
    """Default times are local to the configured zone."""
    parser = TemporalExpressionParser(
        config=EngineConfig(timezone="America/New_York"),
        clock=FixedClock(reference_date),
    )
    task = parser.parse("Call the bank tomorrow")

    # 09:00 EST is 14:00 UTC
    assert task.due_date == utc(2026, 2, 5, 14)
    assert task.due_date.tzinfo is pytz.UTC


def test_explicit_now(parser: TemporalExpressionParser) -> None:
    """Passing now bypasses the parser clock."""
    task = parser.parse("Pay bills tomorrow", now=utc(2026, 12, 31, 8))
    assert task.due_date == utc(2027, 1, 1, 9)


@pytest.mark.parametrize(
    ("hour", "minute", "expected"),
    [(0, 0, "12:00 AM"), (9, 5, "9:05 AM"), (12, 0, "12:00 PM"), (23, 59, "11:59 PM")],
)
def test_format_time(hour: int, minute: int, expected: str) -> None:
    """12-hour formatting with hour 0 shown as 12."""
    assert format_time(hour, minute) == expected


def test_days_until_weekday_never_zero() -> None:
    """Same weekday means one week ahead."""
    wednesday = datetime(2026, 2, 4).date()
    assert days_until_weekday(wednesday, 2) == 7
    assert days_until_weekday(wednesday, 4) == 2
    assert days_until_weekday(wednesday, 0) == 5
