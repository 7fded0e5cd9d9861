"""
Pytest configuration and fixtures for sportmonks-client tests.
"""

import logging
from unittest.mock import AsyncMock

import httpx
import pytest
import respx

from sportmonks_client import SportMonksClient, SportMonksConfig
from sportmonks_client.core.config import RetryConfig
from sportmonks_client.core.logging.config import LoggingConfig
from sportmonks_client.core.request_executor import RequestExecutor

BASE_URL = "https://api.sportmonks.com/v3"


@pytest.fixture
def base_url():
    """Base URL for testing."""
    return BASE_URL


@pytest.fixture
def mock_api():
    """Mock SportMonks API using respx."""
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
        yield router


@pytest.fixture
def no_sleep(monkeypatch):
    """Replace asyncio.sleep in the retry engine; records requested delays."""
    sleep = AsyncMock(return_value=None)
    monkeypatch.setattr("sportmonks_client.core.retry_engine.asyncio.sleep", sleep)
    return sleep


@pytest.fixture
async def http_client(base_url):
    """Bare httpx client pointed at the API."""
    client = httpx.AsyncClient(base_url=base_url, params={"api_token": "test-token"})
    yield client
    await client.aclose()


@pytest.fixture
def make_executor(http_client):
    """Factory for RequestExecutor bound to a resource root."""
    def _make(base_path="/football/leagues", **kwargs):
        return RequestExecutor(http_client, base_path, **kwargs)
    return _make


@pytest.fixture
async def client():
    """SportMonksClient without retries."""
    client = SportMonksClient("test-token")
    yield client
    await client.close()


@pytest.fixture
async def retrying_client():
    """SportMonksClient retrying 503 twice."""
    config = SportMonksConfig(retry=RetryConfig(max_retries=2, retry_status_codes={503}))
    client = SportMonksClient("test-token", config=config)
    yield client
    await client.close()


@pytest.fixture
def logging_config():
    """LoggingConfig for tests that need structured logging."""
    return LoggingConfig.create(level="DEBUG", enable_console=False)


@pytest.fixture(autouse=True)
def _restore_package_logger():
    """SportMonksLogger reconfigures the package logger; undo between tests."""
    package_logger = logging.getLogger("sportmonks_client")
    handlers = package_logger.handlers[:]
    level = package_logger.level
    propagate = package_logger.propagate
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate
