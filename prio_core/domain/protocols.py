"""Protocol definitions for dependency inversion.

The engine depends on these interfaces; concrete clocks live in
``prio_core.adapters`` and secondary classifiers are supplied by the caller.
"""

from datetime import datetime
from typing import Protocol

from prio_core.domain.models import Quadrant


class ClockProtocol(Protocol):
    """Source of the current instant."""

    def now(self) -> datetime:
        """Return the current time as a timezone-aware datetime."""
        ...


class SecondaryVerdict(Protocol):
    """Replacement decision returned by a secondary classifier."""

    quadrant: Quadrant
    explanation: str


class SecondaryClassifierProtocol(Protocol):
    """Heavier classifier that low-confidence results are escalated to.

    Typically an on-device or hosted LLM. It receives the same text the
    rule-based engine saw and may decline to answer.
    """

    def classify(self, text: str) -> SecondaryVerdict | None:
        """Classify task text.

        Args:
            text: Raw task text

        Returns:
            Verdict with quadrant and explanation, or None to keep the
            rule-based result

        Raises:
            SecondaryClassifierError: When the classifier is unavailable
        """
        ...
