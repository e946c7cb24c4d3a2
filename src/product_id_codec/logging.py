"""Logging utilities for the product identifier codec.

This module provides standardized logging functionality for codec operations.
The library only emits records; handlers and levels are left to the host
application (the ``pidc`` CLI configures them from its verbosity flags).
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict

# Type for log callback functions
LogCallback = Callable[[int, str, Dict[str, Any]], None]

ROOT_LOGGER_NAME = "product_id_codec"


class LogLevel(int, Enum):
    """Log levels for the codec."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


class LogEvent(str, Enum):
    """Event types for codec logging."""

    CONFIG_UPDATE = "config_update"
    CONFIG_LOAD = "config_load"
    ID_GENERATION = "id_generation"
    ID_VALIDATION = "id_validation"
    ID_PARSE = "id_parse"


def get_logger(name: str = "") -> logging.Logger:
    """Get a logger inside the codec's logger hierarchy.

    Args:
        name: Optional child name (e.g. "codec")

    Returns:
        The ``product_id_codec`` logger or one of its children
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def _log(
    callback: LogCallback,
    level: LogLevel,
    event: LogEvent,
    data: Dict[str, Any],
) -> None:
    """Log an event with the provided callback.

    Args:
        callback: Function to call with the log data
        level: Severity level
        event: Event type
        data: Dictionary of event data
    """
    try:
        callback(level, event.value, data)
    except Exception as e:
        # Fallback to standard logging if callback fails
        logging.error(
            f"Logging callback failed with error: {e}. Original log: "
            f"level={level}, event={event}, data={data}"
        )


def _emit(level: LogLevel, event: LogEvent, message: str, data: Dict[str, Any]) -> None:
    logger = get_logger()
    if not logger.isEnabledFor(level):
        return

    def _callback(lvl: int, evt: str, payload: Dict[str, Any]) -> None:
        logger.log(lvl, message, extra={"event": evt, "event_data": payload})

    _log(_callback, level, event, data)


def log_debug(event: LogEvent, message: str, **data: Any) -> None:
    """Log a debug-level codec event."""
    _emit(LogLevel.DEBUG, event, message, data)


def log_info(event: LogEvent, message: str, **data: Any) -> None:
    """Log an info-level codec event."""
    _emit(LogLevel.INFO, event, message, data)


def log_warning(event: LogEvent, message: str, **data: Any) -> None:
    """Log a warning-level codec event."""
    _emit(LogLevel.WARNING, event, message, data)


def log_error(event: LogEvent, message: str, **data: Any) -> None:
    """Log an error-level codec event."""
    _emit(LogLevel.ERROR, event, message, data)
