"""Specification pattern for classification rule conditions.

Specifications encapsulate the conditions of the priority rules so they can be:
- Combined with logical operators (AND, OR, NOT)
- Tested independently of the rule list
- Read as business logic
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from prio_core.domain.models import PatternCategory, SignalContext

T = TypeVar("T")


class Specification(ABC, Generic[T]):
    """Base specification interface.

    A specification represents a business rule that can be checked
    against a candidate object. Specifications can be combined using
    logical operators to create complex conditions.
    """

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool:
        """Check if candidate satisfies this specification.

        Args:
            candidate: Object to check

        Returns:
            True if candidate satisfies the specification
        """
        pass

    def and_(self, other: "Specification[T]") -> "AndSpecification[T]":
        """Combine with AND logic."""
        return AndSpecification(self, other)

    def or_(self, other: "Specification[T]") -> "OrSpecification[T]":
        """Combine with OR logic."""
        return OrSpecification(self, other)

    def not_(self) -> "NotSpecification[T]":
        """Negate this specification."""
        return NotSpecification(self)


class AndSpecification(Specification[T]):
    """AND combination of two specifications."""

    def __init__(self, left: Specification[T], right: Specification[T]) -> None:
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        """Both specifications must be satisfied."""
        return self.left.is_satisfied_by(candidate) and self.right.is_satisfied_by(
            candidate
        )


class OrSpecification(Specification[T]):
    """OR combination of two specifications."""

    def __init__(self, left: Specification[T], right: Specification[T]) -> None:
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        """At least one specification must be satisfied."""
        return self.left.is_satisfied_by(candidate) or self.right.is_satisfied_by(
            candidate
        )


class NotSpecification(Specification[T]):
    """NOT negation of a specification."""

    def __init__(self, spec: Specification[T]) -> None:
        self.spec = spec

    def is_satisfied_by(self, candidate: T) -> bool:
        """Specification must NOT be satisfied."""
        return not self.spec.is_satisfied_by(candidate)


# Signal Specifications


class AlwaysSpec(Specification[SignalContext]):
    """Matches every context (default rule)."""

    def is_satisfied_by(self, candidate: SignalContext) -> bool:
        return True


class SignalCountAtLeastSpec(Specification[SignalContext]):
    """Specification for a minimum number of signals in one category."""

    def __init__(self, category: PatternCategory, minimum: int) -> None:
        """Initialize with category and minimum count.

        Args:
            category: Signal category to count
            minimum: Minimum matched signals required
        """
        self.category = category
        self.minimum = minimum

    def is_satisfied_by(self, candidate: SignalContext) -> bool:
        """Check if the category has enough matched signals."""
        return candidate.count(self.category) >= self.minimum


class IsUrgentSpec(Specification[SignalContext]):
    """Specification for contexts judged urgent."""

    def is_satisfied_by(self, candidate: SignalContext) -> bool:
        return candidate.is_urgent


class IsImportantSpec(Specification[SignalContext]):
    """Specification for contexts judged important."""

    def is_satisfied_by(self, candidate: SignalContext) -> bool:
        return candidate.is_important


class DeadlineUrgencyAtLeastSpec(Specification[SignalContext]):
    """Specification for deadline urgency at or above a threshold."""

    def __init__(self, threshold: float) -> None:
        """Initialize with urgency threshold.

        Args:
            threshold: Minimum deadline urgency (0-1)
        """
        self.threshold = threshold

    def is_satisfied_by(self, candidate: SignalContext) -> bool:
        """Check if deadline urgency meets threshold."""
        return candidate.deadline_urgency >= self.threshold


class FutureDeadlineHintSpec(Specification[SignalContext]):
    """Specification for text mentioning a distant deadline ("next month")."""

    def is_satisfied_by(self, candidate: SignalContext) -> bool:
        return candidate.has_future_deadline
