"""
Structured logging utilities for Tasmee library.

Provides a configured logger and helper functions for consistent logging.
"""

import logging
import sys
from typing import Optional

from tasmee.exceptions import ConfigurationError


# Default format for Tasmee logs
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOGGER_NAME = "tasmee"


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name (default: "tasmee")

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def configure_logging(
    level: int | str = logging.INFO,
    format_string: Optional[str] = None,
    date_format: Optional[str] = None,
    stream: Optional[object] = None,
) -> logging.Logger:
    """
    Configure logging for the Tasmee library.

    Args:
        level: Logging level, numeric or name (default: INFO)
        format_string: Log format string (default: DEFAULT_FORMAT)
        date_format: Date format string (default: DEFAULT_DATE_FORMAT)
        stream: Output stream (default: sys.stderr)

    Returns:
        Configured root logger for tasmee

    Raises:
        ConfigurationError: If level is not a known level name
    """
    if isinstance(level, str):
        name = level
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ConfigurationError(f"Unknown log level: {name}", setting_name="log_level")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)

    formatter = logging.Formatter(
        format_string or DEFAULT_FORMAT,
        datefmt=date_format or DEFAULT_DATE_FORMAT,
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)

    return logger


def enable_debug_logging() -> None:
    """Enable debug-level logging for the Tasmee library."""
    configure_logging(level=logging.DEBUG)


def disable_logging() -> None:
    """Disable all Tasmee logging."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())


_logger = get_logger()


def log_match_complete(
    ref_count: int,
    hyp_count: int,
    accuracy: int,
    jaccard: float,
    strategy: str,
) -> None:
    """Log a completed reference/hypothesis comparison."""
    _logger.debug(
        f"Matched {hyp_count} heard words against {ref_count} reference words "
        f"({strategy}): accuracy={accuracy}%, jaccard={jaccard:.2f}"
    )


def log_cache_event(event: str, key: str, size: int) -> None:
    """Log a reference cache hit, miss or eviction."""
    _logger.debug(f"Reference cache {event}: {key[:40]!r} (entries={size})")


def log_warning(message: str, **context) -> None:
    """Log a warning with optional context."""
    if context:
        ctx_str = ", ".join(f"{k}={v}" for k, v in context.items())
        _logger.warning(f"{message} ({ctx_str})")
    else:
        _logger.warning(message)
