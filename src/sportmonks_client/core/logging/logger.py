"""
Main logger for the SportMonks client.

Attaches handlers to the ``sportmonks_client`` logger, so records from every
module logger (``sportmonks_client.core.request_executor`` etc.) reach them.
"""

import logging
from typing import Optional, Any

from .config import LoggingConfig
from .formatters import get_formatter
from .filters import CorrelationIdFilter, ExtraFieldsFilter
from .handlers import build_handlers
from ...utils.sanitizer import mask_sensitive_data


class SportMonksLogger:
    """
    Structured logger with console/file handlers.

    Keyword arguments become record fields and pass through
    ``mask_sensitive_data`` first, so ``api_token`` never reaches a handler.
    With ``log_params=False`` the ``params`` field is dropped entirely.

    Example:
        >>> logger = SportMonksLogger(LoggingConfig.create(level="DEBUG"))
        >>> logger.info("Request completed", endpoint="/football/leagues", status_code=200)
    """

    def __init__(self, config: Optional[LoggingConfig] = None, name: str = "sportmonks_client"):
        self.config = config or LoggingConfig()
        self.name = name
        self._closed = False

        self._logger = logging.getLogger(name)
        self._logger.setLevel(self.config.level_number)
        self._logger.propagate = False

        # Re-initialisation replaces previous handlers
        self._logger.handlers.clear()

        filters = []
        if self.config.enable_correlation_id:
            filters.append(CorrelationIdFilter())
        if self.config.extra_fields:
            filters.append(ExtraFieldsFilter(dict(self.config.extra_fields)))

        for handler in build_handlers(self.config, get_formatter(self.config.format.value), filters):
            self._logger.addHandler(handler)

    def _fields(self, kwargs: dict) -> dict:
        if not self.config.log_params:
            kwargs.pop("params", None)
        return mask_sensitive_data(kwargs)

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        self._logger.log(level, message, extra=self._fields(kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        """Log with traceback; call from an ``except`` block."""
        self._logger.exception(message, extra=self._fields(kwargs))

    @property
    def handlers(self):
        return list(self._logger.handlers)

    def close(self) -> None:
        """
        Flush, close and detach all handlers. Idempotent.
        """
        if self._closed:
            return

        for handler in self._logger.handlers[:]:
            handler.flush()
            handler.close()
            self._logger.removeHandler(handler)

        # Hand records back to the application's logging setup
        self._logger.propagate = True
        self._closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
