"""
Infrastructure Layer.

This layer contains all external dependencies and adapters:
- Logging configuration
- Metrics
- HTTP clients (Mailjet)
"""

from frighet.infrastructure.logging import (
    get_logger,
    log_duration,
    log_request_context,
    logger,
    StructuredLogger,
)


__all__ = [
    "get_logger",
    "log_duration",
    "log_request_context",
    "logger",
    "StructuredLogger",
]
