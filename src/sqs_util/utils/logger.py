"""
Module: logger.py
Description: Structured logging configuration for sqs_util.

Configures structlog for JSON output. The minimum level is an explicit
value handed to configure_logging() by the command-line entry point, so
verbose output is switched on per invocation rather than through a
module level flag.

Key Components:
- JSON output with timestamp and log level processors
- configure_logging() to set the minimum level
- get_logger() helper function

Dependencies: structlog, logging, datetime
Author: sqs_util Team
"""

import logging
from datetime import datetime, timezone

import structlog

DEFAULT_LOG_LEVEL = "WARNING"


def _add_timestamp(logger, method_name, event_dict):
    """
    Add ISO 8601 timestamp to log entries.

    Args:
        logger: Logger instance
        method_name: Log method name (info, error, etc.)
        event_dict: Current log event dictionary

    Returns:
        Updated event dictionary with timestamp
    """
    event_dict["timestamp"] = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")
    return event_dict


def _add_log_level(logger, method_name, event_dict):
    """
    Add log level to event dictionary.

    Args:
        logger: Logger instance
        method_name: Log method name (info, error, etc.)
        event_dict: Current log event dictionary

    Returns:
        Updated event dictionary with level
    """
    event_dict["level"] = method_name.upper()
    return event_dict


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """
    Configure structlog with the given minimum log level.

    Safe to call more than once; loggers obtained through get_logger()
    pick up the latest configuration.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Raises:
        ValueError: If level is not a known level name
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    structlog.configure(
        processors=[
            # Add timestamp and log level
            _add_timestamp,
            _add_log_level,
            # Add exception information
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.WriteLoggerFactory(),
        # Drop events below the configured level before processing
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        # Reconfiguration must reach module level loggers
        cache_logger_on_first_use=False,
    )


configure_logging()


def get_logger(name: str):
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Queue resolved", queue_name="orders", queue_url="https://...")
    """
    return structlog.get_logger(name)
