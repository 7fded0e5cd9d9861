"""
Structured logging configuration for the SportMonks client.

Logging is off until a LoggingConfig is passed as ``SportMonksConfig.logging``.
From the environment it is built by ``SportMonksSettings`` (``SPORTMONKS_LOG_*``).
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union


class LogLevel(str, Enum):
    """Log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""
    JSON = "json"
    TEXT = "text"


@dataclass(frozen=True)
class LoggingConfig:
    """
    What SportMonksLogger writes and where.

    Args:
        level: Log level (string or LogLevel, case-insensitive)
        format: ``json`` or ``text``
        enable_console: Log to stdout
        file_path: Rotating log file (10MB x 5), disabled when None
        log_params: Add request query params to records
        enable_correlation_id: Add the current task correlation ID
        extra_fields: Static fields added to every record

    Raises:
        ValueError: Unknown level or format, empty file_path

    Example:
        >>> LoggingConfig(level="debug", format="json", file_path="logs/sportmonks.log")
    """

    level: Union[LogLevel, str] = LogLevel.INFO
    format: Union[LogFormat, str] = LogFormat.TEXT
    enable_console: bool = True
    file_path: Optional[str] = None
    log_params: bool = True
    enable_correlation_id: bool = True
    extra_fields: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.level, LogLevel):
            object.__setattr__(self, 'level', LogLevel(str(self.level).upper()))
        if not isinstance(self.format, LogFormat):
            object.__setattr__(self, 'format', LogFormat(str(self.format).lower()))

        if self.file_path is not None and not self.file_path.strip():
            raise ValueError("file_path must not be empty")

        object.__setattr__(self, 'extra_fields', MappingProxyType(dict(self.extra_fields)))

    @property
    def level_number(self) -> int:
        return getattr(logging, self.level.value)

    @classmethod
    def create(cls, level: str = "INFO", format: str = "text", **options: Any) -> "LoggingConfig":
        """Create from plain strings, as read from the environment."""
        return cls(level=level, format=format, **options)
