"""Single entry point wiring classification and parsing together."""

from collections.abc import Iterable
from datetime import datetime

from prio_core.adapters.clock import SystemClock
from prio_core.config.settings import Settings, build_engine_config
from prio_core.domain.models import ClassificationResult, EngineConfig, ParsedTask
from prio_core.domain.protocols import ClockProtocol, SecondaryClassifierProtocol
from prio_core.services.classification_engine import ClassificationEngine
from prio_core.services.deadline_urgency import DeadlineUrgencyCalculator
from prio_core.services.escalation import classify_with_escalation
from prio_core.services.pattern_library import PatternLibrary
from prio_core.services.temporal_parser import TemporalExpressionParser


class PriorityEngine:
    """Classifier, deadline scorer and parser sharing one config and clock.

    Example:
        >>> engine = PriorityEngine()
        >>> engine.classify("Order office supplies - printer ink running low").quadrant
        <Quadrant.DELEGATE: 'delegate'>
        >>> engine.parse("remind me to call mom tomorrow morning").title
        'Call Mom'
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        clock: ClockProtocol | None = None,
        library: PatternLibrary | None = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.clock: ClockProtocol = clock or SystemClock()
        self.classifier = ClassificationEngine(
            library=library,
            calculator=DeadlineUrgencyCalculator(self.config),
            config=self.config,
            clock=self.clock,
        )
        self.parser = TemporalExpressionParser(config=self.config, clock=self.clock)

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, clock: ClockProtocol | None = None
    ) -> "PriorityEngine":
        """Build an engine from ``PRIO_*`` settings and the optional thresholds file.

        Raises:
            ConfigurationError: If settings or thresholds are invalid
        """
        return cls(config=build_engine_config(settings), clock=clock)

    def classify(
        self, text: str, due_date: datetime | None = None
    ) -> ClassificationResult:
        """Classify a task into an Eisenhower quadrant."""
        return self.classifier.classify(text, due_date=due_date)

    def classify_batch(self, texts: Iterable[str]) -> list[ClassificationResult]:
        """Classify several tasks; results are index-aligned with ``texts``."""
        return self.classifier.classify_batch(texts)

    def calculate_deadline_urgency(self, due_date: datetime | None = None) -> float:
        """Deadline urgency in [0, 1] for a due instant relative to now."""
        return self.classifier.calculate_deadline_urgency(due_date)

    def should_escalate_to_llm(self, result: ClassificationResult) -> bool:
        """Whether a result should be handed to a secondary classifier."""
        return self.classifier.should_escalate_to_llm(result)

    def classify_with_escalation(
        self,
        text: str,
        due_date: datetime | None = None,
        secondary: SecondaryClassifierProtocol | None = None,
    ) -> ClassificationResult:
        """Classify and defer low-confidence results to ``secondary``."""
        return classify_with_escalation(
            self.classifier, text, due_date=due_date, secondary=secondary
        )

    def parse(self, text: str) -> ParsedTask:
        """Extract title, due date and urgency from a task entry."""
        return self.parser.parse(text)
