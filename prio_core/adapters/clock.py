"""Clock adapters.

Decision logic never reads the wall clock directly; it asks a clock.
"""

from datetime import datetime

import pytz


class SystemClock:
    """Clock backed by the system time, always in UTC."""

    def now(self) -> datetime:
        """Return the current UTC time."""
        return datetime.now(pytz.UTC)


class FixedClock:
    """Clock frozen at a given instant (tests, replays, batch snapshots)."""

    def __init__(self, instant: datetime) -> None:
        """Initialize with the instant to report.

        Args:
            instant: Instant to return from ``now``; naive values are taken as UTC
        """
        if instant.tzinfo is None:
            instant = pytz.UTC.localize(instant)
        self._instant = instant

    def now(self) -> datetime:
        """Return the frozen instant."""
        return self._instant
