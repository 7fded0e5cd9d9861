"""
SportMonksClient - асинхронный клиент SportMonks Football API v3.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from .core.config import SportMonksConfig
from .core.env_config import load_from_env
from .core.logging import SportMonksLogger
from .core.request_executor import RequestExecutor
from .resources import RESOURCES, Resource, build_resources

logger = logging.getLogger(__name__)


class SportMonksClient:
    """
    Клиент SportMonks Football API.

    Один httpx.AsyncClient на весь клиент. ``api_token`` и ``timezone``
    уходят в каждый запрос как query параметры. У каждого ресурса свой
    RequestExecutor со своей retry конфигурацией.

    Example:
        >>> async with SportMonksClient("token") as client:
        ...     live = await client.livescores.inplay().include(["participants", "scores"]).get()
        ...     players = await client.players.search("Salah").get()

        >>> config = SportMonksConfig.create(timezone="UTC", max_retries=3)
        >>> client = SportMonksClient("token", config=config)
        >>> await client.close()
    """

    leagues: Resource
    teams: Resource
    players: Resource
    standings: Resource
    livescores: Resource
    coaches: Resource
    referees: Resource
    transfers: Resource
    venues: Resource
    fixtures: Resource
    news: Resource
    seasons: Resource
    schedules: Resource
    squads: Resource

    def __init__(
        self,
        api_token: str,
        config: Optional[SportMonksConfig] = None,
        **kwargs: Any,
    ):
        """
        Args:
            api_token: SportMonks API token
            config: SportMonksConfig (если указан, kwargs игнорируются)
            **kwargs: Параметры для SportMonksConfig.create()

        Raises:
            ValueError: Пустой api_token
        """
        if not api_token or not api_token.strip():
            raise ValueError("api_token must not be empty")

        self._config = config if config is not None else SportMonksConfig.create(**kwargs)
        self._api_token = api_token

        self._structured_logger: Optional[SportMonksLogger] = None
        if self._config.logging is not None:
            self._structured_logger = SportMonksLogger(self._config.logging)

        self._client = httpx.AsyncClient(
            base_url=self._config.base_url,
            timeout=httpx.Timeout(self._config.timeout),
            params=self._default_params(),
            headers={"Accept": "application/json", **self._config.headers},
        )

        executors: Dict[str, RequestExecutor] = {
            name: RequestExecutor(
                self._client,
                descriptor.root,
                include_separator=self._config.include_separator,
                retry=self._config.retry_for(name),
                structured_logger=self._structured_logger,
            )
            for name, descriptor in RESOURCES.items()
        }
        self._resources = build_resources(RESOURCES, executors)
        for name, resource in self._resources.items():
            setattr(self, name, resource)

        self._closed = False

    @classmethod
    def from_env(cls, env_file: Optional[str] = None, **overrides: Any) -> "SportMonksClient":
        """
        Создать клиент из переменных окружения SPORTMONKS_*.

        Example:
            >>> client = SportMonksClient.from_env(timezone="UTC")
        """
        api_token, config = load_from_env(env_file=env_file, **overrides)
        return cls(api_token, config=config)

    @property
    def config(self) -> SportMonksConfig:
        return self._config

    @property
    def resources(self) -> Dict[str, Resource]:
        return dict(self._resources)

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._client

    @property
    def is_closed(self) -> bool:
        return self._closed

    def set_api_key(self, api_token: str) -> None:
        """Заменить API token для всех последующих запросов."""
        if not api_token or not api_token.strip():
            raise ValueError("api_token must not be empty")
        self._api_token = api_token
        self._client.params = self._default_params()
        logger.debug("API token updated")

    def set_timeout(self, timeout: float) -> None:
        """Заменить таймаут запросов (сек)."""
        self._config = self._config.with_timeout(timeout)
        self._client.timeout = httpx.Timeout(timeout)

    def _default_params(self) -> Dict[str, str]:
        return {"api_token": self._api_token, "timezone": self._config.timezone}

    async def close(self) -> None:
        """Закрыть HTTP клиент и структурированный логгер. Идемпотентно."""
        if self._closed:
            return
        await self._client.aclose()
        if self._structured_logger is not None:
            self._structured_logger.close()
        self._closed = True

    async def __aenter__(self) -> "SportMonksClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"SportMonksClient(base_url={self._config.base_url!r}, timezone={self._config.timezone!r})"
