"""
Log handlers for console and rotating file output.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Iterable, List

from .config import LoggingConfig

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5


def build_handlers(
    config: LoggingConfig,
    formatter: logging.Formatter,
    filters: Iterable[logging.Filter] = (),
) -> List[logging.Handler]:
    """
    Console and/or file handlers for a LoggingConfig.

    Empty list when both outputs are disabled.
    """
    handlers: List[logging.Handler] = []
    if config.enable_console:
        handlers.append(logging.StreamHandler(sys.stdout))
    if config.file_path:
        handlers.append(_rotating_file(config.file_path))

    filters = list(filters)
    for handler in handlers:
        handler.setLevel(config.level_number)
        handler.setFormatter(formatter)
        for log_filter in filters:
            handler.addFilter(log_filter)

    return handlers


def _rotating_file(file_path: str) -> RotatingFileHandler:
    path = Path(file_path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)

    return RotatingFileHandler(
        filename=str(path),
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding='utf-8',
    )
