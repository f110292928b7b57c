"""Ordered classification rules.

Each rule pairs a condition (a specification over ``SignalContext``) with an
outcome producer. Rules are evaluated in list order and the first rule whose
condition holds decides the quadrant, base confidence and explanation.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import NamedTuple

from prio_core.domain.models import EngineConfig, PatternCategory, Quadrant, SignalContext
from prio_core.domain.specifications import (
    AlwaysSpec,
    DeadlineUrgencyAtLeastSpec,
    FutureDeadlineHintSpec,
    IsImportantSpec,
    IsUrgentSpec,
    SignalCountAtLeastSpec,
    Specification,
)


class RuleOutcome(NamedTuple):
    """Quadrant, uncapped confidence and explanation produced by a rule."""

    quadrant: Quadrant
    confidence: float
    explanation: str


@dataclass(frozen=True)
class ClassificationRule:
    """A named condition/outcome pair."""

    name: str
    condition: Specification[SignalContext]
    outcome: Callable[[SignalContext], RuleOutcome]

    def applies_to(self, context: SignalContext) -> bool:
        """Check the rule condition against a signal context."""
        return self.condition.is_satisfied_by(context)


def build_urgent_important_explanation(
    context: SignalContext, config: EngineConfig
) -> str:
    """Explanation for DO_FIRST via urgent and important signals.

    Example:
        >>> ctx = SignalContext(urgency_signals=["urgent"], importance_signals=["tax"])
        >>> build_urgent_important_explanation(ctx, EngineConfig())
        'Urgent and important (urgency: urgent, importance: tax)'
    """
    prefix = "Urgent and important"
    parts: list[str] = []

    if context.deadline_urgency >= config.urgency_critical:
        parts.append("deadline critical")
    elif context.deadline_urgency >= config.urgency_high:
        parts.append("deadline approaching")

    if context.urgency_signals:
        parts.append(f"urgency: {context.urgency_signals[0]}")
    if context.importance_signals:
        parts.append(f"importance: {context.importance_signals[0]}")

    if parts:
        return f"{prefix} ({', '.join(parts)})"
    return prefix


def build_default_rules(config: EngineConfig | None = None) -> list[ClassificationRule]:
    """Build the rule list in priority order.

    Args:
        config: Thresholds used by deadline-driven rules

    Returns:
        Rules, highest priority first; the last rule always applies
    """
    cfg = config or EngineConfig()

    has_urgency = SignalCountAtLeastSpec(PatternCategory.URGENCY, 1)
    has_importance = SignalCountAtLeastSpec(PatternCategory.IMPORTANCE, 1)
    has_delegation = SignalCountAtLeastSpec(PatternCategory.DELEGATION, 1)
    is_urgent = IsUrgentSpec()
    is_important = IsImportantSpec()
    critical_deadline = DeadlineUrgencyAtLeastSpec(cfg.urgency_critical)

    def urgent_and_important(ctx: SignalContext) -> RuleOutcome:
        signal_total = min(len(ctx.urgency_signals) + len(ctx.importance_signals), 4)
        confidence = 0.75 + signal_total * 0.05
        if ctx.deadline_urgency >= cfg.urgency_critical:
            confidence += 0.10
        return RuleOutcome(
            Quadrant.DO_FIRST,
            confidence,
            build_urgent_important_explanation(ctx, cfg),
        )

    return [
        ClassificationRule(
            name="multiple_low_priority",
            condition=SignalCountAtLeastSpec(PatternCategory.LOW_PRIORITY, 2),
            outcome=lambda ctx: RuleOutcome(
                Quadrant.ELIMINATE,
                0.85,
                "Multiple low-priority indicators: "
                + ", ".join(ctx.low_priority_signals[:2]),
            ),
        ),
        ClassificationRule(
            name="low_priority_only",
            condition=SignalCountAtLeastSpec(PatternCategory.LOW_PRIORITY, 1)
            .and_(has_urgency.not_())
            .and_(has_importance.not_()),
            outcome=lambda ctx: RuleOutcome(
                Quadrant.ELIMINATE,
                0.75,
                f"Low-priority activity: {_first(ctx.low_priority_signals, 'optional')}",
            ),
        ),
        ClassificationRule(
            name="routine_delegation",
            condition=has_delegation.and_(is_important.not_()).and_(is_urgent.not_()),
            outcome=lambda ctx: RuleOutcome(
                Quadrant.DELEGATE,
                0.70 + min(len(ctx.delegation_signals), 2) * 0.05,
                f"Routine or delegation task: {_first(ctx.delegation_signals)}",
            ),
        ),
        ClassificationRule(
            name="urgent_and_important",
            condition=is_urgent.and_(is_important),
            outcome=urgent_and_important,
        ),
        ClassificationRule(
            name="critical_deadline",
            condition=critical_deadline,
            outcome=lambda ctx: RuleOutcome(
                Quadrant.DO_FIRST,
                0.80,
                "Critical deadline - due today or overdue",
            ),
        ),
        ClassificationRule(
            name="important_not_urgent",
            condition=is_important.and_(is_urgent.not_()),
            outcome=lambda ctx: RuleOutcome(
                Quadrant.SCHEDULE,
                0.70 + min(len(ctx.importance_signals), 3) * 0.05,
                "Important but not time-sensitive: "
                + _first(ctx.importance_signals, "long-term value"),
            ),
        ),
        ClassificationRule(
            name="urgent_not_important",
            condition=is_urgent.and_(is_important.not_()),
            outcome=lambda ctx: RuleOutcome(
                Quadrant.DELEGATE,
                0.65 + min(len(ctx.urgency_signals), 2) * 0.05,
                "Time-sensitive but could be delegated: "
                + _first(ctx.urgency_signals, "deadline pressure"),
            ),
        ),
        ClassificationRule(
            name="delegation_fallback",
            condition=has_delegation,
            outcome=lambda ctx: RuleOutcome(
                Quadrant.DELEGATE,
                0.65,
                f"Routine task: {_first(ctx.delegation_signals)}",
            ),
        ),
        ClassificationRule(
            name="future_deadline",
            condition=FutureDeadlineHintSpec(),
            outcome=lambda ctx: RuleOutcome(
                Quadrant.SCHEDULE,
                0.60,
                "Future deadline - schedule for later",
            ),
        ),
        ClassificationRule(
            name="moderate_deadline",
            condition=DeadlineUrgencyAtLeastSpec(cfg.urgency_medium),
            outcome=lambda ctx: RuleOutcome(
                Quadrant.SCHEDULE,
                0.65,
                f"Deadline within {cfg.medium_max_days} days - plan to complete",
            ),
        ),
        ClassificationRule(
            name="default",
            condition=AlwaysSpec(),
            outcome=lambda ctx: RuleOutcome(
                Quadrant.SCHEDULE,
                0.55,
                "No clear urgency - scheduling for review",
            ),
        ),
    ]


def evaluate_rules(
    rules: Sequence[ClassificationRule], context: SignalContext
) -> tuple[str, RuleOutcome]:
    """Run rules in order and return the first that applies.

    Args:
        rules: Ordered rules
        context: Signal context for one task

    Returns:
        Tuple of (rule name, outcome)

    Raises:
        ValueError: If no rule applies (rule list without a catch-all)
    """
    for rule in rules:
        if rule.applies_to(context):
            return rule.name, rule.outcome(context)
    raise ValueError("No classification rule applied; rule list needs a default")


def _first(signals: Sequence[str], fallback: str = "") -> str:
    return signals[0] if signals else fallback
