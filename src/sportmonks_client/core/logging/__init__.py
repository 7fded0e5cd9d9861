"""
Logging system for the SportMonks client.

Example:
    >>> from sportmonks_client.core.logging import LoggingConfig
    >>> from sportmonks_client import SportMonksClient, SportMonksConfig
    >>>
    >>> config = SportMonksConfig(logging=LoggingConfig.create(level="DEBUG", format="json"))
    >>> client = SportMonksClient("token", config=config)
"""

from .config import LoggingConfig, LogLevel, LogFormat
from .logger import SportMonksLogger
from .formatters import JSONFormatter, TextFormatter, get_formatter
from .filters import (
    CorrelationIdFilter,
    ExtraFieldsFilter,
    set_correlation_id,
    get_correlation_id,
    clear_correlation_id,
)
from .handlers import build_handlers

__all__ = [
    # Config
    "LoggingConfig",
    "LogLevel",
    "LogFormat",
    # Logger
    "SportMonksLogger",
    # Formatters
    "JSONFormatter",
    "TextFormatter",
    "get_formatter",
    # Filters
    "CorrelationIdFilter",
    "ExtraFieldsFilter",
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
    # Handlers
    "build_handlers",
]
