"""
Observability module.

Provides logging configuration, correlation ID tracking and request middleware.
"""

from sitechat.observability.correlation import get_correlation_id, set_correlation_id
from sitechat.observability.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_correlation_id",
    "get_logger",
    "set_correlation_id",
]
