"""
Observability module.

Provides logging configuration, correlation ID tracking and request
logging middleware.
"""

from chaseplus_backend.observability.correlation import (
    CorrelationIdFilter,
    get_correlation_id,
    set_correlation_id,
)
from chaseplus_backend.observability.logger import configure_logging, get_logger

__all__ = [
    "CorrelationIdFilter",
    "configure_logging",
    "get_correlation_id",
    "get_logger",
    "set_correlation_id",
]
