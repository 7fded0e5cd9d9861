"""
Log filters for correlation IDs and static fields.

Correlation IDs live in a ``ContextVar`` so each asyncio task sees its own
value (a thread-local would be shared by every task on the event loop).
"""

import logging
from contextvars import ContextVar
from typing import Dict, Any, Optional


_correlation_id: ContextVar[Optional[str]] = ContextVar("sportmonks_correlation_id", default=None)


def set_correlation_id(correlation_id: str) -> None:
    """
    Set correlation ID for the current task/context.

    Example:
        >>> set_correlation_id("poll-livescores")
        >>> logger.info("Tick")  # Will include correlation_id
    """
    _correlation_id.set(correlation_id)


def get_correlation_id() -> Optional[str]:
    """Get correlation ID for the current task/context."""
    return _correlation_id.get()


def clear_correlation_id() -> None:
    """Clear correlation ID for the current task/context."""
    _correlation_id.set(None)


class CorrelationIdFilter(logging.Filter):
    """Adds ``correlation_id`` to records when one is set."""

    def filter(self, record: logging.LogRecord) -> bool:
        correlation_id = get_correlation_id()
        if correlation_id:
            record.correlation_id = correlation_id
        return True


class ExtraFieldsFilter(logging.Filter):
    """
    Adds static fields (service, environment, ...) to every record.

    Fields already present on the record win.
    """

    def __init__(self, extra_fields: Dict[str, Any]):
        super().__init__()
        self.extra_fields = extra_fields

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in self.extra_fields.items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True
