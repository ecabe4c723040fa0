"""
Structured logging helpers.

Turn arbitrary context values into a log-safe `extra` dict (short strings,
collections summarised, keys that collide with LogRecord attributes renamed).

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

# Attribute names owned by LogRecord; passing them in extra raises KeyError
_RESERVED_RECORD_KEYS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Convert any value to a bounded string for logging.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    try:
        text = _describe(value)
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"
    if len(text) <= max_length:
        return text
    return f"{text[:max_length]}... (truncated, {len(text)} total)"


def _describe(value: Any) -> str:
    """Short text form of a value; collections are summarised by size."""
    if value is None:
        return "None"
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple, set, frozenset)):
        return f"{type(value).__name__}({len(value)} items)"
    if isinstance(value, dict):
        return f"dict({len(value)} keys)"
    return str(value)


def safe_context(**context: Any) -> dict[str, str]:
    """
    Build a log-safe extra dict.

    Values go through safe_log_value; keys that clash with LogRecord
    attributes are prefixed with "ctx_".
    """
    return {
        (f"ctx_{key}" if key in _RESERVED_RECORD_KEYS else key): safe_log_value(val)
        for key, val in context.items()
    }


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """
    Log a message with structured context, safely converting all values.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Context dict with arbitrary key-value pairs
    """
    logger.log(level, message, extra=safe_context(**context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    level: int = logging.ERROR,
    **context: Any,
) -> None:
    """
    Log an exception with full context and traceback.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        level: Log level (ERROR unless the failure is recoverable)
        **context: Additional context dict
    """
    extra = safe_context(**context)
    extra.update({
        "error_type": type(exc).__name__,
        "error_msg": safe_log_value(str(exc)),
    })
    logger.log(level, message, exc_info=exc, extra=extra)
