"""Exception hierarchy for prio-core.

Classification and parsing never raise for string input; these errors only
surface at the edges (configuration and secondary-classifier adapters).
"""


class PrioCoreError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(PrioCoreError):
    """Invalid settings, engine config or threshold file."""

    pass


class SecondaryClassifierError(PrioCoreError):
    """A secondary (escalation) classifier failed to produce a verdict."""

    def __init__(self, message: str, provider: str | None = None) -> None:
        """Initialize with optional provider identifier."""
        self.provider = provider
        super().__init__(message if provider is None else f"{provider}: {message}")
