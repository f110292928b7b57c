"""Pattern library service.

Compiles the pattern tables once and answers "which signals does this text
carry?" for each category. Instances are read-only after construction and can
be shared across threads.
"""

import re
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from prio_core.domain.models import PatternCategory
from prio_core.domain.pattern_tables import PATTERN_TABLES


class PatternLibrary:
    """Compiled, case-insensitive pattern matchers grouped by category."""

    def __init__(
        self, tables: Mapping[PatternCategory, Sequence[str]] | None = None
    ) -> None:
        """Compile pattern tables.

        Args:
            tables: Override default pattern tables (category -> regex sources)

        Raises:
            re.error: If a supplied pattern does not compile
        """
        source = tables if tables is not None else PATTERN_TABLES
        self._compiled: Mapping[PatternCategory, tuple[re.Pattern[str], ...]] = (
            MappingProxyType(
                {
                    category: tuple(
                        re.compile(pattern, flags=re.IGNORECASE)
                        for pattern in patterns
                    )
                    for category, patterns in source.items()
                }
            )
        )

    def match_all(self, text: str, category: PatternCategory) -> list[str]:
        """Return matched literals for a category.

        One entry per matching pattern, in pattern-definition order; each entry
        is the first substring of ``text`` that pattern matched.

        Args:
            text: Task text
            category: Pattern category to run

        Returns:
            Matched substrings (empty list when nothing matches)

        Example:
            >>> PatternLibrary().match_all("URGENT: call the client", PatternCategory.URGENCY)
            ['URGENT']
        """
        matches: list[str] = []
        for pattern in self._compiled.get(category, ()):
            match = pattern.search(text)
            if match is not None:
                matches.append(match.group(0))
        return matches

    def matches_any(self, text: str, category: PatternCategory) -> bool:
        """Check whether any pattern of a category matches."""
        return any(
            pattern.search(text) is not None
            for pattern in self._compiled.get(category, ())
        )

    def pattern_count(self, category: PatternCategory) -> int:
        """Number of patterns registered for a category."""
        return len(self._compiled.get(category, ()))
