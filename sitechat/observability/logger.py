"""
Logging setup.

One stdout handler on the root logger; every line carries the request's
correlation id (``-`` outside a request).

Dependencies: logging (stdlib), sitechat.observability.correlation
System role: Centralized logging configuration
"""

import logging
import sys

from sitechat.observability.correlation import get_correlation_id

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] %(message)s"
NOISY_LOGGERS = ("urllib3", "botocore", "httpx", "httpcore", "faiss")


class CorrelationIdFilter(logging.Filter):
    """Stamp records with the current correlation id."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        return True


def configure_logging(level: str = "INFO") -> None:
    """
    Replace root handlers with a single correlation-aware stdout handler.

    Args:
        level: Root log level name (DEBUG, INFO, ...)
    """
    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(CorrelationIdFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger.setLevel(level.upper())
    root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
