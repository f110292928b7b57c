"""Labelled task set and accuracy evaluation.

The labelled set holds 20 representative tasks per quadrant. ``evaluate``
runs any engine over a dataset and reports accuracy per quadrant, a confusion
matrix and latency figures.
"""

import time
from collections.abc import Sequence
from datetime import datetime
from typing import Final

from prio_core.config.logging_config import get_logger
from prio_core.domain.models import AccuracyReport, Quadrant
from prio_core.services.classification_engine import ClassificationEngine

logger = get_logger(__name__)

DO_FIRST_TASKS: Final[tuple[str, ...]] = (
    "Urgent: Submit tax return by today deadline",
    "Emergency: Server is down, fix immediately",
    "ASAP: Prepare for board presentation this afternoon",
    "Client waiting - send contract now",
    "Critical bug in production - hotfix needed",
    "Doctor appointment today at 3pm - health checkup",
    "Deadline today: Submit quarterly report",
    "Boss needs the analysis report by end of day",
    "Production outage - users cannot login",
    "Tax filing deadline tomorrow - review documents",
    "Important meeting with CEO in 1 hour",
    "Critical: Family emergency - need to leave now",
    "Overdue invoice payment - client is waiting",
    "Career review meeting today - prepare talking points",
    "Legal contract needs signature by 5pm today",
    "Health: Prescription refill expires today",
    "Project milestone due today - final review needed",
    "Customer escalation - resolve billing issue immediately",
    "Board meeting presentation due in 2 hours",
    "Critical decision needed: Accept job offer by EOD",
)
"""Urgent and important tasks."""

SCHEDULE_TASKS: Final[tuple[str, ...]] = (
    "Plan next quarter's strategy",
    "Read leadership book for career development",
    "Research investment options for retirement",
    "Learn new programming language for skill growth",
    "Schedule annual health checkup",
    "Plan family vacation for summer",
    "Write blog post about career journey",
    "Review and update resume",
    "Build portfolio website for career",
    "Take online course on machine learning",
    "Develop workout routine for fitness goal",
    "Plan monthly budget review",
    "Research grad school programs",
    "Write thank you notes to mentors",
    "Plan team building event for next month",
    "Create personal development roadmap",
    "Review insurance coverage options",
    "Schedule networking coffee chats",
    "Read industry report for market trends",
    "Plan long-term financial goals",
)
"""Important, not urgent tasks."""

DELEGATE_TASKS: Final[tuple[str, ...]] = (
    "Order office supplies - printer ink running low",
    "Schedule recurring team meeting for next week",
    "Compile weekly status report for distribution",
    "Book meeting room for Friday standup",
    "Fill out travel expense form",
    "Update team spreadsheet with latest numbers",
    "Forward meeting notes to the team",
    "Respond to standard vendor inquiry",
    "Archive old project files",
    "Update Slack channel settings",
    "Send calendar invite for training session",
    "File expense receipts from last trip",
    "Order new employee welcome kit supplies",
    "Schedule office maintenance visit",
    "Update shared document templates",
    "Coordinate lunch order for team",
    "Send reminder about timesheet submission",
    "Book conference room for client call",
    "Update team contact list",
    "Standard monthly reporting task",
)
"""Urgent or routine tasks that someone else could do."""

ELIMINATE_TASKS: Final[tuple[str, ...]] = (
    "Browse Reddit for interesting posts",
    "Watch Netflix new releases",
    "Maybe reorganize bookshelf someday",
    "Scroll through social media",
    "Eventually clean up old photos",
    "Nice to have: custom keyboard shortcuts",
    "Browse YouTube tech videos",
    "Someday: learn to play guitar",
    "Optional: try new coffee shop",
    "When I have time: organize music playlist",
    "Maybe check out that new game",
    "Low priority: rearrange desk setup",
    "If time: browse furniture options",
    "Eventually: organize old files",
    "Nice to have: better phone case",
    "Someday: visit that museum",
    "Browse Twitter for news",
    "Maybe: reorganize closet",
    "Not urgent: random ideas to explore",
    "Just check social media updates",
)
"""Neither urgent nor important tasks."""

LABELLED_TASKS: Final[tuple[tuple[str, Quadrant], ...]] = (
    *((task, Quadrant.DO_FIRST) for task in DO_FIRST_TASKS),
    *((task, Quadrant.SCHEDULE) for task in SCHEDULE_TASKS),
    *((task, Quadrant.DELEGATE) for task in DELEGATE_TASKS),
    *((task, Quadrant.ELIMINATE) for task in ELIMINATE_TASKS),
)
"""All labelled tasks as (text, expected quadrant) pairs, 80 in total."""


def evaluate(
    engine: ClassificationEngine,
    dataset: Sequence[tuple[str, Quadrant]] = LABELLED_TASKS,
    now: datetime | None = None,
) -> AccuracyReport:
    """Measure engine accuracy and latency over a labelled dataset.

    Args:
        engine: Engine under evaluation
        dataset: (text, expected quadrant) pairs
        now: Reference instant shared by every classification

    Returns:
        Accuracy report

    Example:
        >>> report = evaluate(ClassificationEngine())
        >>> report.total
        80
    """
    reference = now if now is not None else engine.clock.now()

    confusion: dict[Quadrant, dict[Quadrant, int]] = {
        expected: {actual: 0 for actual in Quadrant} for expected in Quadrant
    }
    failures: list[str] = []
    latencies: list[float] = []

    for text, expected in dataset:
        start = time.perf_counter()
        result = engine.classify(text, now=reference)
        latencies.append((time.perf_counter() - start) * 1000.0)

        confusion[expected][result.quadrant] += 1
        if result.quadrant != expected:
            failures.append(
                f"'{text}' -> {result.quadrant.value} (expected {expected.value}), "
                f"confidence={result.confidence:.2f}"
            )

    per_quadrant: dict[Quadrant, float] = {}
    for expected, row in confusion.items():
        total = sum(row.values())
        if total:
            per_quadrant[expected] = row[expected] / total

    total = len(dataset)
    correct = total - len(failures)
    report = AccuracyReport(
        total=total,
        correct=correct,
        accuracy=correct / total if total else 0.0,
        per_quadrant=per_quadrant,
        confusion=confusion,
        failures=failures,
        avg_latency_ms=sum(latencies) / total if total else 0.0,
        max_latency_ms=max(latencies, default=0.0),
    )

    logger.info(
        "evaluation_complete",
        total=report.total,
        correct=report.correct,
        accuracy=report.accuracy,
        avg_latency_ms=report.avg_latency_ms,
    )
    return report
