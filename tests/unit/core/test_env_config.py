"""
Tests for environment configuration loader.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from sportmonks_client.core.config import RetryConfig
from sportmonks_client.core.env_config import SportMonksSettings, load_from_env
from sportmonks_client.core.logging.config import LogFormat, LogLevel


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """No SPORTMONKS_* variables and no stray .env file."""
    for name in (
        "API_TOKEN", "BASE_URL", "TIMEOUT", "TIMEZONE", "INCLUDE_SEPARATOR",
        "RETRY_MAX_RETRIES", "RETRY_BASE_DELAY", "LOG_LEVEL", "LOG_FILE_PATH",
    ):
        monkeypatch.delenv(f"SPORTMONKS_{name}", raising=False)
    monkeypatch.chdir(tmp_path)


class TestSportMonksSettings:

    def test_defaults(self):
        settings = SportMonksSettings()
        assert settings.api_token is None
        assert settings.base_url == "https://api.sportmonks.com/v3"
        assert settings.timezone == "Europe/Amsterdam"
        assert settings.retry_max_retries == 0
        assert settings.to_logging_config() is None

    def test_reads_prefixed_env(self, monkeypatch):
        monkeypatch.setenv("SPORTMONKS_API_TOKEN", "env-token")
        monkeypatch.setenv("SPORTMONKS_TIMEOUT", "12.5")
        monkeypatch.setenv("SPORTMONKS_RETRY_MAX_RETRIES", "3")

        settings = SportMonksSettings()

        assert settings.api_token == "env-token"
        assert settings.timeout == 12.5
        assert settings.to_retry_config() == RetryConfig(max_retries=3)

    def test_blank_token_is_none(self, monkeypatch):
        monkeypatch.setenv("SPORTMONKS_API_TOKEN", "   ")
        assert SportMonksSettings().api_token is None

    def test_invalid_timeout(self, monkeypatch):
        monkeypatch.setenv("SPORTMONKS_TIMEOUT", "0")
        with pytest.raises(PydanticValidationError):
            SportMonksSettings()

    def test_logging_enabled_by_level(self, monkeypatch):
        monkeypatch.setenv("SPORTMONKS_LOG_LEVEL", "debug")
        monkeypatch.setenv("SPORTMONKS_LOG_FORMAT", "json")

        logging_config = SportMonksSettings().to_logging_config()

        assert logging_config.level is LogLevel.DEBUG
        assert logging_config.format is LogFormat.JSON

    def test_log_params_setting(self, monkeypatch):
        monkeypatch.setenv("SPORTMONKS_LOG_LEVEL", "info")
        monkeypatch.setenv("SPORTMONKS_LOG_PARAMS", "false")

        assert SportMonksSettings().to_logging_config().log_params is False


class TestLoadFromEnv:

    def test_requires_token(self):
        with pytest.raises(ValueError, match="SPORTMONKS_API_TOKEN"):
            load_from_env()

    def test_load_from_env_vars(self, monkeypatch):
        monkeypatch.setenv("SPORTMONKS_API_TOKEN", "env-token")
        monkeypatch.setenv("SPORTMONKS_TIMEZONE", "UTC")

        token, config = load_from_env()

        assert token == "env-token"
        assert config.timezone == "UTC"

    def test_load_from_env_file(self, tmp_path):
        env_file = tmp_path / "sportmonks.env"
        env_file.write_text(
            "SPORTMONKS_API_TOKEN=file-token\n"
            "SPORTMONKS_INCLUDE_SEPARATOR=,\n"
            "SPORTMONKS_RETRY_MAX_RETRIES=2\n"
        )

        token, config = load_from_env(env_file=str(env_file))

        assert token == "file-token"
        assert config.include_separator == ","
        assert config.retry.max_retries == 2

    def test_overrides_take_priority(self, monkeypatch):
        monkeypatch.setenv("SPORTMONKS_API_TOKEN", "env-token")
        monkeypatch.setenv("SPORTMONKS_TIMEZONE", "UTC")

        token, config = load_from_env(api_token="explicit", timezone="Europe/London", timeout=5.0)

        assert token == "explicit"
        assert config.timezone == "Europe/London"
        assert config.timeout == 5.0


def test_retry_status_codes_from_json_env(monkeypatch):
    monkeypatch.setenv("SPORTMONKS_RETRY_STATUS_CODES", "[500, 503]")
    try:
        retry = SportMonksSettings().to_retry_config()
    finally:
        monkeypatch.delenv("SPORTMONKS_RETRY_STATUS_CODES")

    assert retry.retry_status_codes == frozenset({500, 503})
