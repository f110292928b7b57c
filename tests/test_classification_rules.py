"""Tests for ordered classification rules and specifications."""

import pytest

from prio_core.domain.models import EngineConfig, PatternCategory, Quadrant, SignalContext
from prio_core.domain.specifications import (
    AlwaysSpec,
    DeadlineUrgencyAtLeastSpec,
    IsUrgentSpec,
    SignalCountAtLeastSpec,
)
from prio_core.services.classification_rules import (
    ClassificationRule,
    RuleOutcome,
    build_default_rules,
    build_urgent_important_explanation,
    evaluate_rules,
)


@pytest.fixture
def rules() -> list[ClassificationRule]:
    """Default rules."""
    return build_default_rules(EngineConfig())


def test_rule_order(rules: list[ClassificationRule]) -> None:
    """Rules are listed highest priority first, default last."""
    assert [r.name for r in rules] == [
        "multiple_low_priority",
        "low_priority_only",
        "routine_delegation",
        "urgent_and_important",
        "critical_deadline",
        "important_not_urgent",
        "urgent_not_important",
        "delegation_fallback",
        "future_deadline",
        "moderate_deadline",
        "default",
    ]


def test_specifications_combine() -> None:
    """And/Or/Not compose over signal contexts."""
    ctx = SignalContext(urgency_signals=["asap"], is_urgent=True, deadline_urgency=0.5)
    has_urgency = SignalCountAtLeastSpec(PatternCategory.URGENCY, 1)
    critical = DeadlineUrgencyAtLeastSpec(0.75)

    assert has_urgency.and_(IsUrgentSpec()).is_satisfied_by(ctx)
    assert not has_urgency.and_(critical).is_satisfied_by(ctx)
    assert has_urgency.or_(critical).is_satisfied_by(ctx)
    assert critical.not_().is_satisfied_by(ctx)
    assert AlwaysSpec().is_satisfied_by(SignalContext())


def test_signal_context_count() -> None:
    """Counts are per category; hint tables count as zero."""
    ctx = SignalContext(delegation_signals=["routine", "weekly report"])
    assert ctx.count(PatternCategory.DELEGATION) == 2
    assert ctx.count(PatternCategory.URGENCY) == 0
    assert ctx.count(PatternCategory.SOON_DEADLINE) == 0


@pytest.mark.parametrize(
    ("context", "rule", "quadrant", "confidence"),
    [
        (
            SignalContext(low_priority_signals=["maybe", "browse"], urgency_signals=["asap"]),
            "multiple_low_priority",
            Quadrant.ELIMINATE,
            0.85,
        ),
        (
            SignalContext(low_priority_signals=["maybe"]),
            "low_priority_only",
            Quadrant.ELIMINATE,
            0.75,
        ),
        (
            SignalContext(delegation_signals=["routine", "form", "survey"]),
            "routine_delegation",
            Quadrant.DELEGATE,
            0.80,
        ),
        (
            SignalContext(
                urgency_signals=["urgent"],
                importance_signals=["tax"],
                is_urgent=True,
                is_important=True,
            ),
            "urgent_and_important",
            Quadrant.DO_FIRST,
            0.85,
        ),
        (
            SignalContext(deadline_urgency=0.75, is_urgent=True),
            "critical_deadline",
            Quadrant.DO_FIRST,
            0.80,
        ),
        (
            SignalContext(importance_signals=["career", "plan"], is_important=True),
            "important_not_urgent",
            Quadrant.SCHEDULE,
            0.80,
        ),
        (
            SignalContext(urgency_signals=["now"], is_urgent=True),
            "urgent_not_important",
            Quadrant.DELEGATE,
            0.70,
        ),
        (
            SignalContext(has_future_deadline=True),
            "future_deadline",
            Quadrant.SCHEDULE,
            0.60,
        ),
        (
            SignalContext(deadline_urgency=0.5),
            "moderate_deadline",
            Quadrant.SCHEDULE,
            0.65,
        ),
        (SignalContext(), "default", Quadrant.SCHEDULE, 0.55),
    ],
)
def test_each_rule_fires(
    rules: list[ClassificationRule],
    context: SignalContext,
    rule: str,
    quadrant: Quadrant,
    confidence: float,
) -> None:
    """Each rule produces its quadrant and base confidence."""
    name, outcome = evaluate_rules(rules, context)

    assert name == rule
    assert outcome.quadrant == quadrant
    assert outcome.confidence == pytest.approx(confidence)
    assert outcome.explanation


def test_delegation_vetoes_importance(rules: list[ClassificationRule]) -> None:
    """Delegation signals without urgency go to routine delegation."""
    ctx = SignalContext(
        delegation_signals=["routine"], importance_signals=["report"], is_urgent=False
    )
    # Importance is vetoed by delegation, so neither important nor urgent
    name, outcome = evaluate_rules(rules, ctx)
    assert name == "routine_delegation"
    assert outcome.quadrant == Quadrant.DELEGATE


def test_delegation_fallback_rule(rules: list[ClassificationRule]) -> None:
    """Fallback delegation only fires once the urgent and important rules pass."""
    ctx = SignalContext(
        delegation_signals=["routine"],
        importance_signals=["report"],
        is_urgent=True,
        is_important=True,
    )
    # Urgent and important beats delegation fallback
    name, _ = evaluate_rules(rules, ctx)
    assert name == "urgent_and_important"

    fallback_only = [r for r in rules if r.name in ("delegation_fallback", "default")]
    name, outcome = evaluate_rules(fallback_only, ctx)
    assert name == "delegation_fallback"
    assert outcome == RuleOutcome(Quadrant.DELEGATE, 0.65, "Routine task: routine")


def test_critical_deadline_bonus(rules: list[ClassificationRule]) -> None:
    """Urgent+important gets a bonus when the deadline is critical."""
    ctx = SignalContext(
        urgency_signals=["urgent", "today"],
        importance_signals=["tax", "deadline", "submit"],
        deadline_urgency=0.75,
        is_urgent=True,
        is_important=True,
    )
    _, outcome = evaluate_rules(rules, ctx)

    # 0.75 + min(5, 4) * 0.05 + 0.10, capped later by the engine
    assert outcome.confidence == pytest.approx(1.05)


def test_low_priority_explanations(rules: list[ClassificationRule]) -> None:
    """Low-priority explanations quote the matched signals."""
    _, many = evaluate_rules(
        rules, SignalContext(low_priority_signals=["Browse", "Reddit", "game"])
    )
    _, single = evaluate_rules(rules, SignalContext(low_priority_signals=["someday"]))

    assert many.explanation == "Multiple low-priority indicators: Browse, Reddit"
    assert single.explanation == "Low-priority activity: someday"


def test_default_explanation(rules: list[ClassificationRule]) -> None:
    """Default rule explains itself."""
    _, outcome = evaluate_rules(rules, SignalContext())
    assert outcome.explanation == "No clear urgency - scheduling for review"


@pytest.mark.parametrize(
    ("deadline", "expected"),
    [
        (0.80, "Urgent and important (deadline critical, urgency: asap, importance: tax)"),
        (0.65, "Urgent and important (deadline approaching, urgency: asap, importance: tax)"),
        (0.0, "Urgent and important (urgency: asap, importance: tax)"),
    ],
)
def test_urgent_important_explanation(deadline: float, expected: str) -> None:
    """Explanation lists deadline state and first signals."""
    ctx = SignalContext(
        urgency_signals=["asap", "today"],
        importance_signals=["tax"],
        deadline_urgency=deadline,
    )
    assert build_urgent_important_explanation(ctx, EngineConfig()) == expected


def test_urgent_important_explanation_without_signals() -> None:
    """Deadline-only urgency still gets the bare prefix."""
    assert (
        build_urgent_important_explanation(SignalContext(), EngineConfig())
        == "Urgent and important"
    )


def test_rule_list_without_default_raises() -> None:
    """A rule list without a catch-all is a programming error."""
    rules = [
        ClassificationRule(
            name="never",
            condition=AlwaysSpec().not_(),
            outcome=lambda ctx: RuleOutcome(Quadrant.SCHEDULE, 0.5, "never"),
        )
    ]
    with pytest.raises(ValueError):
        evaluate_rules(rules, SignalContext())
