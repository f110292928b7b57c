"""Logging configuration with structlog.

The library only emits events; applications (and the evaluation script)
decide how they are rendered by calling ``setup_logging`` once at startup.
"""

import logging
import sys
from typing import Final

import structlog
from structlog.types import EventDict, Processor

LOG_FLOAT_PRECISION: Final[int] = 3
"""Decimal places kept for scores, confidences and latencies in log output."""


def add_app_context(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Tag every log entry with the library name."""
    event_dict["app"] = "prio_core"
    return event_dict


def round_float_fields(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Round float fields so confidences and latencies stay readable.

    Args:
        logger: Logger instance
        method_name: Method name
        event_dict: Event dictionary

    Returns:
        Event dictionary with every float rounded to ``LOG_FLOAT_PRECISION``

    Example:
        >>> round_float_fields(None, "debug", {"confidence": 0.7999999999999999})
        {'confidence': 0.8}
    """
    for key, value in event_dict.items():
        if isinstance(value, float):
            event_dict[key] = round(value, LOG_FLOAT_PRECISION)
    return event_dict


def setup_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """Configure structured logging with structlog.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: If True, output JSON lines. If False, use the console renderer

    Example:
        >>> setup_logging(log_level="DEBUG")
        >>> setup_logging(log_level="INFO", json_logs=True)
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=numeric_level)

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        round_float_fields,
    ]

    if json_logs:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("task_classified", quadrant="do_first", confidence=0.9)
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]
