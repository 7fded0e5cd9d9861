"""SportMonks Client - async client for the SportMonks Football API v3."""

import logging
from importlib.metadata import version, PackageNotFoundError

from .client import SportMonksClient
from .core.config import RetryConfig, SportMonksConfig
from .core.env_config import SportMonksSettings, load_from_env
from .core.exceptions import ErrorType, SportMonksError, ValidationError, PollingError
from .core.query_builder import QueryBuilder
from .core.logging import LoggingConfig, SportMonksLogger
from .models import (
    Pagination,
    RateLimit,
    get_nested_include,
    has_data,
    has_include,
    is_paginated_payload,
    is_single_payload,
)
from .resources import Resource
from .utils.polling import (
    Poller,
    PollingOptions,
    create_livescores_poller,
    create_transfers_poller,
    compare_latest_transfer,
)

# Users can configure logging themselves using logging.getLogger('sportmonks_client')
logging.getLogger('sportmonks_client').addHandler(logging.NullHandler())

try:
    __version__ = version("sportmonks-client")
except PackageNotFoundError:
    # Package is not installed (development mode)
    __version__ = "0.0.0-dev"

__license__ = "MIT"

__all__ = [
    # Client
    "SportMonksClient",
    "QueryBuilder",
    "Resource",

    # Config
    "SportMonksConfig",
    "RetryConfig",
    "SportMonksSettings",
    "load_from_env",
    "LoggingConfig",
    "SportMonksLogger",

    # Exceptions
    "ErrorType",
    "SportMonksError",
    "ValidationError",
    "PollingError",

    # Models
    "Pagination",
    "RateLimit",
    "has_data",
    "is_paginated_payload",
    "is_single_payload",
    "has_include",
    "get_nested_include",

    # Polling
    "Poller",
    "PollingOptions",
    "create_livescores_poller",
    "create_transfers_poller",
    "compare_latest_transfer",

    # Version
    "__version__",
]
