"""
Configuration loader from environment variables and .env files.

Example .env file:
    SPORTMONKS_API_TOKEN=your-token
    SPORTMONKS_TIMEZONE=UTC
    SPORTMONKS_RETRY_MAX_RETRIES=3
    SPORTMONKS_LOG_LEVEL=DEBUG
"""

from typing import Any, FrozenSet, Literal, Optional, Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .config import DEFAULT_BASE_URL, DEFAULT_TIMEZONE, RetryConfig, SportMonksConfig
from .logging.config import LoggingConfig


class SportMonksSettings(BaseSettings):
    """
    SportMonks client settings from environment variables.

    Reads from:
    1. Environment variables (SPORTMONKS_*)
    2. .env file
    3. Defaults
    """

    model_config = SettingsConfigDict(
        env_prefix='SPORTMONKS_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    api_token: Optional[str] = Field(default=None, description="SportMonks API token")

    base_url: str = Field(default=DEFAULT_BASE_URL)
    timeout: float = Field(default=30.0, gt=0)
    include_separator: str = Field(default=";", min_length=1)
    timezone: str = Field(default=DEFAULT_TIMEZONE)

    # Retry
    retry_max_retries: int = Field(default=0, ge=0)
    retry_base_delay: float = Field(default=1.0, ge=0)
    retry_max_delay: float = Field(default=30.0, ge=0)
    retry_on_rate_limit: bool = Field(default=True)
    # JSON list in env: SPORTMONKS_RETRY_STATUS_CODES=[502,503]
    retry_status_codes: FrozenSet[int] = Field(default=frozenset({502, 503, 504}))

    # Logging (disabled unless a level or file is given)
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None
    log_format: Literal["json", "text"] = Field(default="text")
    log_enable_console: bool = Field(default=True)
    log_file_path: Optional[str] = None
    log_params: bool = Field(default=True)

    @field_validator('api_token')
    @classmethod
    def validate_api_token(cls, v: Optional[str]) -> Optional[str]:
        """Empty token is the same as no token."""
        if v is not None:
            v = v.strip()
        return v or None

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    def to_retry_config(self) -> RetryConfig:
        return RetryConfig(
            max_retries=self.retry_max_retries,
            base_delay=self.retry_base_delay,
            max_delay=self.retry_max_delay,
            retry_on_rate_limit=self.retry_on_rate_limit,
            retry_status_codes=self.retry_status_codes,
        )

    def to_logging_config(self) -> Optional[LoggingConfig]:
        """LoggingConfig if a level or a log file is configured."""
        if self.log_level is None and self.log_file_path is None:
            return None

        return LoggingConfig.create(
            level=self.log_level or "INFO",
            format=self.log_format,
            enable_console=self.log_enable_console,
            file_path=self.log_file_path,
            log_params=self.log_params,
        )


def load_from_env(
    env_file: Optional[str] = None,
    **overrides: Any,
) -> Tuple[str, SportMonksConfig]:
    """
    Load API token and SportMonksConfig from environment variables.

    Priority (highest to lowest):
    1. **overrides - explicit SportMonksConfig fields (or ``api_token``)
    2. Environment variables (SPORTMONKS_*)
    3. .env file
    4. Defaults

    Returns:
        (api_token, config)

    Raises:
        ValueError: No API token configured

    Example:
        >>> token, config = load_from_env(timezone="UTC")
        >>> client = SportMonksClient(token, config=config)
    """
    settings = SportMonksSettings(_env_file=env_file) if env_file else SportMonksSettings()

    api_token = overrides.pop('api_token', None) or settings.api_token
    if not api_token:
        raise ValueError(
            "SportMonks API token is not configured. Set SPORTMONKS_API_TOKEN or pass api_token"
        )

    fields = {
        'base_url': settings.base_url,
        'timeout': settings.timeout,
        'include_separator': settings.include_separator,
        'timezone': settings.timezone,
        'retry': settings.to_retry_config(),
        'logging': settings.to_logging_config(),
    }
    fields.update(overrides)

    return api_token, SportMonksConfig(**fields)
