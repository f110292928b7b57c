"""Rule-based Eisenhower classification engine.

Classifies free-text tasks into quadrants using:
1. Keyword pattern matches for urgency, importance, delegation and low priority
2. Deadline proximity (calendar days) for urgency
3. An ordered rule list where the first applicable rule wins

Results below the escalation threshold should be handed to a heavier
secondary classifier by the caller.
"""

import time
from collections.abc import Iterable, Sequence
from datetime import datetime

import structlog

from prio_core.adapters.clock import SystemClock
from prio_core.config.logging_config import get_logger
from prio_core.domain.models import (
    ClassificationResult,
    EngineConfig,
    PatternCategory,
    SignalContext,
)
from prio_core.domain.protocols import ClockProtocol
from prio_core.services.classification_rules import (
    ClassificationRule,
    build_default_rules,
    evaluate_rules,
)
from prio_core.services.deadline_urgency import DeadlineUrgencyCalculator
from prio_core.services.pattern_library import PatternLibrary

logger = get_logger(__name__)


class ClassificationEngine:
    """Classify task text into Eisenhower quadrants.

    The engine holds only read-only state (compiled patterns, config, rules)
    and can be shared across threads.
    """

    def __init__(
        self,
        library: PatternLibrary | None = None,
        calculator: DeadlineUrgencyCalculator | None = None,
        config: EngineConfig | None = None,
        clock: ClockProtocol | None = None,
        rules: Sequence[ClassificationRule] | None = None,
    ) -> None:
        """Initialize engine.

        Args:
            library: Compiled pattern library (defaults to built-in tables)
            calculator: Deadline urgency calculator (defaults to one built from config)
            config: Thresholds and default times
            clock: Time source used when ``now`` is not passed explicitly
            rules: Ordered rule list (defaults to ``build_default_rules(config)``)
        """
        self.config = config or EngineConfig()
        self.library = library or PatternLibrary()
        self.calculator = calculator or DeadlineUrgencyCalculator(self.config)
        self.clock: ClockProtocol = clock or SystemClock()
        self.rules: tuple[ClassificationRule, ...] = tuple(
            rules if rules is not None else build_default_rules(self.config)
        )

    def build_context(
        self, text: str, due_date: datetime | None, now: datetime
    ) -> SignalContext:
        """Collect all signals for one task.

        Args:
            text: Task text
            due_date: Optional due instant
            now: Reference instant

        Returns:
            Signal context the rules are evaluated against
        """
        text = text[: self.config.max_text_length]
        urgency = self.library.match_all(text, PatternCategory.URGENCY)
        importance = self.library.match_all(text, PatternCategory.IMPORTANCE)
        delegation = self.library.match_all(text, PatternCategory.DELEGATION)
        low_priority = self.library.match_all(text, PatternCategory.LOW_PRIORITY)
        has_soon = self.library.matches_any(text, PatternCategory.SOON_DEADLINE)
        has_future = self.library.matches_any(text, PatternCategory.FUTURE_DEADLINE)

        deadline_urgency = self.calculator.calculate(due_date, now)

        is_urgent = (
            len(urgency) >= 1
            or has_soon
            or deadline_urgency >= self.config.urgency_high
        )
        is_important = len(importance) >= 1 and not low_priority and not delegation

        return SignalContext(
            urgency_signals=urgency,
            importance_signals=importance,
            delegation_signals=delegation,
            low_priority_signals=low_priority,
            has_soon_deadline=has_soon,
            has_future_deadline=has_future,
            deadline_urgency=deadline_urgency,
            is_urgent=is_urgent,
            is_important=is_important,
        )

    def classify(
        self,
        text: str,
        due_date: datetime | None = None,
        now: datetime | None = None,
    ) -> ClassificationResult:
        """Classify a task into an Eisenhower quadrant.

        Any string is accepted, including empty and very long ones; empty
        text falls through to the default rule with low confidence and long
        text is scanned up to ``max_text_length`` characters.

        Args:
            text: Task description
            due_date: Optional due instant for deadline-based urgency
            now: Reference instant (defaults to the engine clock)

        Returns:
            Classification result

        Example:
            >>> engine = ClassificationEngine()
            >>> engine.classify("Browse Reddit for interesting posts").quadrant
            <Quadrant.ELIMINATE: 'eliminate'>
        """
        start = time.perf_counter()
        reference = now if now is not None else self.clock.now()

        context = self.build_context(text, due_date, reference)
        rule_name, outcome = evaluate_rules(self.rules, context)
        confidence = min(round(outcome.confidence, 4), self.config.confidence_cap)

        latency_ms = (time.perf_counter() - start) * 1000.0

        result = ClassificationResult(
            quadrant=outcome.quadrant,
            confidence=confidence,
            explanation=outcome.explanation,
            is_urgent=context.is_urgent,
            is_important=context.is_important,
            urgency_score=len(context.urgency_signals) + context.deadline_urgency,
            importance_score=float(len(context.importance_signals)),
            urgency_signals=context.urgency_signals,
            importance_signals=context.importance_signals,
            rule=rule_name,
            escalation_threshold=self.config.escalation_threshold,
            high_confidence_threshold=self.config.high_confidence,
            latency_ms=latency_ms,
        )

        logger.debug(
            "task_classified",
            quadrant=result.quadrant.value,
            confidence=result.confidence,
            rule=rule_name,
            should_escalate=result.should_escalate,
            latency_ms=latency_ms,
        )
        return result

    def classify_batch(
        self, texts: Iterable[str], now: datetime | None = None
    ) -> list[ClassificationResult]:
        """Classify several tasks against one reference instant.

        Args:
            texts: Task descriptions
            now: Reference instant shared by the whole batch

        Returns:
            Results, index-aligned with ``texts``
        """
        reference = now if now is not None else self.clock.now()
        batch = list(texts)
        # Per-task log entries carry the batch position
        results: list[ClassificationResult] = []
        for index, text in enumerate(batch):
            with structlog.contextvars.bound_contextvars(
                batch_index=index, batch_size=len(batch)
            ):
                results.append(self.classify(text, now=reference))

        logger.debug(
            "batch_classified",
            count=len(results),
            escalations=sum(1 for r in results if r.should_escalate),
        )
        return results

    def calculate_deadline_urgency(
        self, due_date: datetime | None, now: datetime | None = None
    ) -> float:
        """Deadline urgency for a due instant (0.0 when there is none)."""
        reference = now if now is not None else self.clock.now()
        return self.calculator.calculate(due_date, reference)

    @staticmethod
    def should_escalate_to_llm(result: ClassificationResult) -> bool:
        """Re-derive the escalation decision from a (possibly cached) result."""
        return result.confidence < result.escalation_threshold
