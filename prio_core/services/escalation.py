"""Escalation of low-confidence classifications to a secondary classifier."""

from datetime import datetime

from prio_core.config.logging_config import get_logger
from prio_core.domain.exceptions import SecondaryClassifierError
from prio_core.domain.models import ClassificationResult
from prio_core.domain.protocols import SecondaryClassifierProtocol
from prio_core.services.classification_engine import ClassificationEngine

logger = get_logger(__name__)

ESCALATED_RULE = "escalated"


def classify_with_escalation(
    engine: ClassificationEngine,
    text: str,
    due_date: datetime | None = None,
    secondary: SecondaryClassifierProtocol | None = None,
    now: datetime | None = None,
) -> ClassificationResult:
    """Classify, deferring to ``secondary`` when the rule-based result is unsure.

    The secondary classifier is consulted only when the rule-based result
    has ``should_escalate`` set. Its quadrant and explanation replace the
    rule-based ones; confidence and signals stay as computed by the rules.

    Args:
        engine: Rule-based engine
        text: Task text
        due_date: Optional due instant
        secondary: Heavier classifier (None disables escalation)
        now: Reference instant

    Returns:
        Rule-based result, or the reconciled result with ``rule="escalated"``
    """
    result = engine.classify(text, due_date=due_date, now=now)
    if secondary is None or not engine.should_escalate_to_llm(result):
        return result

    try:
        verdict = secondary.classify(text)
    except SecondaryClassifierError as e:
        logger.warning(
            "escalation_failed",
            provider=e.provider,
            error=str(e),
            fallback_quadrant=result.quadrant.value,
        )
        return result

    if verdict is None:
        logger.warning(
            "escalation_declined", fallback_quadrant=result.quadrant.value
        )
        return result

    logger.info(
        "escalation_applied",
        rule_quadrant=result.quadrant.value,
        secondary_quadrant=verdict.quadrant.value,
        confidence=result.confidence,
    )
    return result.model_copy(
        update={
            "quadrant": verdict.quadrant,
            "explanation": verdict.explanation or result.explanation,
            "rule": ESCALATED_RULE,
        }
    )
