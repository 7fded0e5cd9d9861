"""
Система конфигурации SportMonks клиента.

Все конфиги immutable (frozen dataclasses): ресурсы и RequestExecutor
получают их при создании и никогда не меняют.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .logging import LoggingConfig

DEFAULT_BASE_URL = "https://api.sportmonks.com/v3"
DEFAULT_TIMEZONE = "Europe/Amsterdam"

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# RETRY CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class RetryConfig:
    """
    Конфигурация retry стратегии.

    Args:
        max_retries: Количество повторов (0 = без повторов)
        base_delay: Базовая задержка (сек)
        max_delay: Максимальная задержка (сек)
        retry_on_rate_limit: Ретраить ли 429
        retry_status_codes: Какие статус коды ретраить

    Examples:
        >>> RetryConfig(max_retries=3)
        >>> RetryConfig(max_retries=2, retry_status_codes={503})
    """
    max_retries: int = 0
    base_delay: float = 1.0
    max_delay: float = 30.0
    retry_on_rate_limit: bool = True
    retry_status_codes: FrozenSet[int] = field(
        default_factory=lambda: frozenset({502, 503, 504})
    )

    def __post_init__(self):
        """Валидация и заморозка множества кодов."""
        if self.max_retries < 0:
            raise ValueError("max_retries must be non-negative")
        if self.base_delay < 0:
            raise ValueError("base_delay must be non-negative")
        if self.max_delay < 0:
            raise ValueError("max_delay must be non-negative")
        if not isinstance(self.retry_status_codes, frozenset):
            object.__setattr__(self, 'retry_status_codes', frozenset(self.retry_status_codes))

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# MAIN CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def _freeze_dict(d: Optional[Mapping]) -> Mapping:
    """Convert dict to immutable MappingProxyType."""
    if d is None:
        return MappingProxyType({})
    return MappingProxyType(dict(d))


@dataclass(frozen=True)
class SportMonksConfig:
    """
    Главная конфигурация SportMonksClient.

    Args:
        base_url: Базовый URL API
        timeout: Таймаут HTTP запроса (сек)
        include_separator: Разделитель include токенов
        timezone: Таймзона, передаётся в каждый запрос
        headers: Дефолтные заголовки
        retry: Retry конфигурация по умолчанию
        resource_retry: Retry конфигурация для отдельных ресурсов
        logging: Конфигурация логирования (None = только logging.getLogger)

    Examples:
        >>> config = SportMonksConfig(timezone="UTC")
        >>> config = SportMonksConfig.create(timeout=60, max_retries=3)
    """
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    include_separator: str = ";"
    timezone: str = DEFAULT_TIMEZONE
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    retry: RetryConfig = field(default_factory=RetryConfig)
    resource_retry: Mapping[str, RetryConfig] = field(
        default_factory=lambda: MappingProxyType({})
    )
    logging: Optional['LoggingConfig'] = None

    def __post_init__(self):
        """Normalize base_url and freeze mutable dicts."""
        if isinstance(self.headers, dict):
            object.__setattr__(self, 'headers', _freeze_dict(self.headers))
        if isinstance(self.resource_retry, dict):
            object.__setattr__(self, 'resource_retry', _freeze_dict(self.resource_retry))

        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if not self.include_separator:
            raise ValueError("include_separator must not be empty")

        normalized = self.base_url.rstrip('/')
        if normalized != self.base_url:
            object.__setattr__(self, 'base_url', normalized)

    @classmethod
    def create(
        cls,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        include_separator: str = ";",
        timezone: str = DEFAULT_TIMEZONE,
        max_retries: int = 0,
        base_delay: float = 1.0,
        max_delay: float = 30.0,
        retry_on_rate_limit: bool = True,
        retry_status_codes: Optional[Iterable[int]] = None,
        resource_retry: Optional[Dict[str, RetryConfig]] = None,
        headers: Optional[Dict[str, str]] = None,
        logging: Optional['LoggingConfig'] = None,
        **kwargs
    ) -> 'SportMonksConfig':
        """
        Удобный конструктор с плоскими retry параметрами.

        Examples:
            >>> config = SportMonksConfig.create(max_retries=3, retry_status_codes=[503])
        """
        retry_kwargs = {}
        if retry_status_codes is not None:
            retry_kwargs['retry_status_codes'] = frozenset(retry_status_codes)

        retry_cfg = RetryConfig(
            max_retries=max_retries,
            base_delay=base_delay,
            max_delay=max_delay,
            retry_on_rate_limit=retry_on_rate_limit,
            **retry_kwargs
        )

        return cls(
            base_url=base_url,
            timeout=timeout,
            include_separator=include_separator,
            timezone=timezone,
            headers=headers or {},
            retry=retry_cfg,
            resource_retry=resource_retry or {},
            logging=logging,
            **kwargs
        )

    def retry_for(self, resource: str) -> RetryConfig:
        """Retry конфигурация для ресурса (или общая)."""
        return self.resource_retry.get(resource, self.retry)

    def with_timeout(self, timeout: float) -> 'SportMonksConfig':
        """
        Создать новый конфиг с изменённым timeout.

        Example:
            >>> new_config = config.with_timeout(60)
        """
        return replace(self, timeout=timeout)

    def with_retry(self, retry: RetryConfig, resource: Optional[str] = None) -> 'SportMonksConfig':
        """
        Создать новый конфиг с другой retry стратегией.

        Args:
            retry: Новая конфигурация
            resource: Если указан - переопределить только для этого ресурса

        Example:
            >>> config.with_retry(RetryConfig(max_retries=5), resource="livescores")
        """
        if resource is None:
            return replace(self, retry=retry)

        merged = dict(self.resource_retry)
        merged[resource] = retry
        return replace(self, resource_retry=merged)
