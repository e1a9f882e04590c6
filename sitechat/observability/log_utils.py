"""
Structured logging helpers.

Page text, sitemaps and questions can be arbitrarily long, so every value
attached to a log record goes through ``safe_log_value`` first.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any


def _describe(value: Any) -> str:
    if value is None:
        return "None"
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return f"{type(value).__name__}({len(value)} items)"
    if isinstance(value, dict):
        return f"dict({len(value)} keys)"
    return str(value)


def safe_log_value(value: Any, max_length: int = 200) -> str:
    """
    Bounded string form of ``value`` for a log record.

    Containers are summarized by size rather than dumped.
    """
    try:
        text = _describe(value)
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"

    if len(text) > max_length:
        return f"{text[:max_length]}... (truncated, {len(text)} total)"
    return text


def log_with_context(logger: logging.Logger, level: int, message: str, **context: Any) -> None:
    """Log ``message`` with ``context`` attached as bounded ``extra`` fields."""
    logger.log(level, message, extra={key: safe_log_value(val) for key, val in context.items()})


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """
    Log a failure with traceback, error type and bounded context.

    Must be called from inside the ``except`` block handling ``exc``.
    """
    extra = {key: safe_log_value(val) for key, val in context.items()}
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(str(exc), max_length=1000)
    logger.exception(message, extra=extra)
