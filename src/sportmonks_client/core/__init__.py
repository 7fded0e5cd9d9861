"""Core модули SportMonks клиента."""

from .config import RetryConfig, SportMonksConfig, DEFAULT_BASE_URL, DEFAULT_TIMEZONE
from .exceptions import ErrorType, SportMonksError, ValidationError, PollingError
from .error_handler import ErrorHandler
from .retry_engine import RetryEngine
from .request_executor import RequestExecutor
from .query_builder import QueryBuilder
from .env_config import SportMonksSettings, load_from_env

__all__ = [
    # Config
    "RetryConfig",
    "SportMonksConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEZONE",
    "SportMonksSettings",
    "load_from_env",
    # Exceptions
    "ErrorType",
    "SportMonksError",
    "ValidationError",
    "PollingError",
    # Core
    "ErrorHandler",
    "RetryEngine",
    "RequestExecutor",
    "QueryBuilder",
]
