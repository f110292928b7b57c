"""Offline rule-based task prioritisation and natural-language task parsing."""

from prio_core.adapters.clock import FixedClock, SystemClock
from prio_core.domain.exceptions import (
    ConfigurationError,
    PrioCoreError,
    SecondaryClassifierError,
)
from prio_core.domain.models import (
    ClassificationResult,
    EngineConfig,
    ParsedTask,
    PatternCategory,
    Quadrant,
)
from prio_core.engine import PriorityEngine
from prio_core.services.classification_engine import ClassificationEngine
from prio_core.services.temporal_parser import TemporalExpressionParser

__all__ = [
    "ClassificationEngine",
    "ClassificationResult",
    "ConfigurationError",
    "EngineConfig",
    "FixedClock",
    "ParsedTask",
    "PatternCategory",
    "PrioCoreError",
    "PriorityEngine",
    "Quadrant",
    "SecondaryClassifierError",
    "SystemClock",
    "TemporalExpressionParser",
]
