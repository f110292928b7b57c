"""Library settings with Pydantic Settings validation.

Values come from ``PRIO_*`` environment variables (or a ``.env`` file).
Threshold overrides can be kept in a YAML file pointed to by
``PRIO_THRESHOLDS_FILE``; the file is validated against a JSON Schema before
it is merged into ``EngineConfig``.
"""

from pathlib import Path
from typing import Any, Final, Literal, cast

import pytz
import yaml
from jsonschema import ValidationError as JSONSchemaValidationError
from jsonschema import validate
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from prio_core.config.logging_config import get_logger
from prio_core.domain.classification_constants import DEFAULT_TIMEZONE
from prio_core.domain.exceptions import ConfigurationError
from prio_core.domain.models import EngineConfig

logger = cast(Any, get_logger(__name__))

_PROBABILITY: Final[dict[str, Any]] = {"type": "number", "minimum": 0, "maximum": 1}
_HOUR: Final[dict[str, Any]] = {"type": "integer", "minimum": 0, "maximum": 23}

THRESHOLDS_SCHEMA: Final[dict[str, Any]] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "prio-core thresholds",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "escalation_threshold": _PROBABILITY,
        "confidence_cap": _PROBABILITY,
        "high_confidence": _PROBABILITY,
        "max_text_length": {"type": "integer", "minimum": 1},
        "urgency_critical": _PROBABILITY,
        "urgency_high": _PROBABILITY,
        "urgency_medium": _PROBABILITY,
        "urgency_low": _PROBABILITY,
        "overdue_step": {"type": "number", "minimum": 0},
        "far_decay_step": {"type": "number", "minimum": 0},
        "medium_max_days": {"type": "integer", "minimum": 2},
        "low_max_days": {"type": "integer", "minimum": 2},
        "today_due_hour": _HOUR,
        "default_due_hour": _HOUR,
        "weekend_due_hour": _HOUR,
        "morning_hour": _HOUR,
        "afternoon_hour": _HOUR,
        "evening_hour": _HOUR,
        "end_of_day_hour": _HOUR,
        "implicit_pm_before_hour": {"type": "integer", "minimum": 0, "maximum": 12},
        "timezone": {"type": "string", "minLength": 1},
    },
}
"""JSON Schema for the thresholds YAML file (a flat mapping of EngineConfig fields)."""


def load_thresholds(path: Path) -> dict[str, Any]:
    """Load and validate a thresholds YAML file.

    Args:
        path: YAML file path

    Returns:
        Mapping of ``EngineConfig`` field overrides (empty for an empty file)

    Raises:
        ConfigurationError: If the file cannot be read, parsed or validated

    Example:
        >>> load_thresholds(Path("config/thresholds.yaml"))
        {'escalation_threshold': 0.7, 'timezone': 'Europe/Amsterdam'}
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError) as e:
        logger.error("thresholds_file_load_failed", path=str(path), error=str(e))
        raise ConfigurationError(f"Cannot load thresholds file {path}: {e}") from e

    try:
        validate(instance=data, schema=THRESHOLDS_SCHEMA)
    except JSONSchemaValidationError as e:
        logger.error("thresholds_validation_failed", path=str(path), error=e.message)
        raise ConfigurationError(
            f"Thresholds validation failed (file: {path}): {e.message}"
        ) from e

    logger.debug("thresholds_file_loaded", path=str(path), keys=sorted(data))
    return cast(dict[str, Any], data)


class Settings(BaseSettings):
    """Library settings.

    All fields map to ``PRIO_``-prefixed environment variables.
    """

    model_config = SettingsConfigDict(
        env_prefix="PRIO_",
        env_file=".env" if Path(".env").exists() else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    timezone: str = Field(
        default=DEFAULT_TIMEZONE,
        description="IANA time zone for calendar-day arithmetic",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    json_logs: bool = Field(default=False, description="Emit JSON log lines")
    thresholds_file: Path | None = Field(
        default=None, description="Optional YAML file with EngineConfig overrides"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            pytz.timezone(value)
        except pytz.UnknownTimeZoneError as e:
            raise ValueError(f"Unknown timezone: {value}") from e
        return value


def build_engine_config(settings: Settings | None = None) -> EngineConfig:
    """Build the engine configuration from settings.

    Environment timezone applies unless the thresholds file sets one.

    Args:
        settings: Settings (defaults to ``get_settings()``)

    Returns:
        Validated engine configuration

    Raises:
        ConfigurationError: If the thresholds file or resulting config is invalid
    """
    settings = settings or get_settings()

    overrides: dict[str, Any] = {"timezone": settings.timezone}
    if settings.thresholds_file is not None:
        overrides.update(load_thresholds(settings.thresholds_file))

    try:
        config = EngineConfig(**overrides)
    except ValidationError as e:
        logger.error("engine_config_invalid", error=str(e))
        raise ConfigurationError(f"Invalid engine configuration: {e}") from e

    logger.debug("engine_config_built", timezone=config.timezone)
    return config


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance.

    Raises:
        ConfigurationError: If environment values fail validation
    """
    global _settings
    if _settings is None:
        try:
            _settings = Settings()
        except ValidationError as e:
            raise ConfigurationError(f"Invalid settings: {e}") from e
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
