"""Task title normalization.

Handles:
- Leading filler phrase removal ("remind me to", "please", ...)
- Whitespace collapsing
- Capitalization of the first letter and of kinship names
"""

import re
from typing import Final

FILLER_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(i need to|i have to|i want to|i should|need to|have to|want to|should|please|remind me to)\s+",
    flags=re.IGNORECASE,
)
"""Leading filler phrases that carry no task content."""

KINSHIP_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\b(mom|dad|mum|grandma|grandpa)\b", flags=re.IGNORECASE
)
"""Kinship words used as proper nouns in personal tasks ("call mom")."""

WHITESPACE_PATTERN: Final[re.Pattern[str]] = re.compile(r"\s+")
"""Runs of whitespace."""


def collapse_whitespace(text: str) -> str:
    """Collapse runs of whitespace and trim.

    Example:
        >>> collapse_whitespace("  call   mom  ")
        'call mom'
    """
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def strip_filler(text: str) -> str:
    """Remove a single leading filler phrase.

    Example:
        >>> strip_filler("remind me to call mom")
        'call mom'
    """
    return FILLER_PATTERN.sub("", text, count=1).strip()


def capitalize_title(text: str) -> str:
    """Uppercase the first character and kinship names, leave the rest as typed.

    Example:
        >>> capitalize_title("call mom")
        'Call Mom'
    """
    if not text:
        return text
    text = KINSHIP_PATTERN.sub(lambda m: m.group(0).capitalize(), text)
    return text[0].upper() + text[1:]


def clean_title(text: str) -> str:
    """Turn what is left after phrase extraction into a display title.

    Args:
        text: Input with temporal and urgency phrases already removed

    Returns:
        Cleaned title (may be empty)

    Example:
        >>> clean_title("remind me to  call mom ")
        'Call Mom'
    """
    return capitalize_title(strip_filler(collapse_whitespace(text)))
