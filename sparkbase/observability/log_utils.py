"""
Structured context logging for collection operations.

Context values are type keys, collection names, modes and counts. Type keys
are logged by display name; everything else by str(), truncated.

Dependencies: logging (stdlib), sparkbase.models.document
System role: Logging helper functions
"""

import logging
from typing import Any, Union

from sparkbase.models.document import type_display_name

LoggerLike = Union[logging.Logger, logging.LoggerAdapter]

MAX_VALUE_LENGTH = 200


def safe_log_value(value: Any, max_length: int = MAX_VALUE_LENGTH) -> str:
    """
    Render one context value for a log record.

    Args:
        value: Type key, name, mode or count
        max_length: Maximum length before truncating

    Returns:
        str: Display name for classes, str(value) otherwise
    """
    text = type_display_name(value) if isinstance(value, type) else str(value)
    if len(text) > max_length:
        return f"{text[:max_length]}... (truncated, {len(text)} total)"
    return text


def _context(context: dict[str, Any]) -> dict[str, str]:
    return {key: safe_log_value(value) for key, value in context.items()}


def log_with_context(logger: LoggerLike, level: int, message: str, **context) -> None:
    """
    Log a message with the operation's context attached as record extras.

    Args:
        logger: Logger or TaggedLogger instance
        level: Log level (logging.DEBUG, etc.)
        message: Log message
        **context: Operation context (collection, type, mode, ...)
    """
    logger.log(level, message, extra=_context(context))


def log_exception_with_context(logger: LoggerLike, message: str, exc: Exception, **context) -> None:
    """
    Log a driver failure with traceback, error type and operation context.

    Args:
        logger: Logger or TaggedLogger instance
        message: Log message
        exc: Exception being propagated
        **context: Operation context (collection, operation, type)
    """
    extra = _context(context)
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = str(exc)
    logger.exception(message, extra=extra)
