"""
Observability module.

Provides structured logging, correlation ID tracking and request logging.
"""

from admin_panel.observability.logger import configure_logging
from admin_panel.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

__all__ = [
    "CorrelationMiddleware",
    "RequestLoggingMiddleware",
    "configure_logging",
]
