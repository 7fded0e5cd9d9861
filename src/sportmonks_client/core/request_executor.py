"""
Выполнение одного логического GET запроса с retry логикой.
"""

import logging
import time
from typing import Any, Mapping, Optional, TYPE_CHECKING

import httpx

from ..utils.sanitizer import mask_sensitive_data
from .config import RetryConfig
from .error_handler import ErrorHandler
from .retry_engine import RetryEngine

if TYPE_CHECKING:
    from .logging import SportMonksLogger

logger = logging.getLogger(__name__)


class RequestExecutor:
    """
    Исполнитель запросов для одного ресурса.

    Хранит корень эндпоинтов ресурса (``/football/fixtures``), разделитель
    include токенов и неизменяемую retry конфигурацию.

    Example:
        >>> executor = RequestExecutor(http, "/football/leagues", retry=RetryConfig(max_retries=2))
        >>> payload = await executor.request("/live", {"include": "country"})
        >>> # Другой корень для того же ресурса
        >>> payload = await executor.request("/squads/teams/1", root="/football")
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_path: str,
        *,
        include_separator: str = ";",
        retry: Optional[RetryConfig] = None,
        structured_logger: Optional['SportMonksLogger'] = None,
    ):
        """
        Args:
            client: Общий httpx клиент (base_url, api_token, timezone, timeout)
            base_path: Корень эндпоинтов ресурса
            include_separator: Разделитель include токенов
            retry: Конфигурация retry (по умолчанию без повторов)
            structured_logger: Логгер из SportMonksConfig.logging
        """
        self._client = client
        self._base_path = base_path
        self._include_separator = include_separator
        self._retry = retry or RetryConfig()
        self._logger = structured_logger

    @property
    def base_path(self) -> str:
        return self._base_path

    @property
    def include_separator(self) -> str:
        return self._include_separator

    @property
    def retry_config(self) -> RetryConfig:
        return self._retry

    def build_path(self, endpoint: str, root: Optional[str] = None) -> str:
        """Корень (свой или явно переданный) + эндпоинт."""
        return f"{self._base_path if root is None else root}{endpoint}"

    async def request(
        self,
        endpoint: str,
        params: Optional[Mapping[str, Any]] = None,
        *,
        root: Optional[str] = None,
    ) -> Any:
        """
        Выполнить GET с retry логикой.

        Args:
            endpoint: Суффикс пути (``""``, ``"/42"``, ``"/date/2024-01-15"``)
            params: Query параметры
            root: Другой корень эндпоинтов вместо base_path

        Returns:
            Декодированное JSON тело ответа без изменений

        Raises:
            SportMonksError: Терминальная ошибка после всех попыток
        """
        path = self.build_path(endpoint, root)
        query = dict(params or {})

        # Новый RetryEngine на каждый запрос: запросы не делят счётчик
        retry_engine = RetryEngine(self._retry)

        while True:
            start = time.monotonic()
            try:
                response = await self._client.get(path, params=query)
                response.raise_for_status()
                payload = response.json()
            except Exception as error:
                if not retry_engine.should_retry(error):
                    classified = ErrorHandler.classify(error, path)
                    self._log_failure(path, query, classified, retry_engine.attempt)
                    raise classified from error

                self._log_retry(path, error, retry_engine)
                await retry_engine.async_wait(error)
                retry_engine.increment()
                continue

            self._log_success(path, query, response.status_code, start, retry_engine.attempt)
            return payload

    # ==================== Логирование ====================

    def _log_success(self, path, query, status_code, start, attempt) -> None:
        duration_ms = round((time.monotonic() - start) * 1000, 2)
        logger.debug(
            "GET %s -> %s in %.2fms (attempt %d)", path, status_code, duration_ms, attempt,
        )
        if self._logger:
            self._logger.debug(
                "Request completed",
                endpoint=path,
                params=query,
                status_code=status_code,
                duration_ms=duration_ms,
                attempt=attempt,
            )

    def _log_retry(self, path, error, retry_engine: RetryEngine) -> None:
        status = RetryEngine.status_of(error)
        logger.warning(
            "GET %s failed (%s), retry %d/%d",
            path, status or type(error).__name__,
            retry_engine.attempt + 1, self._retry.max_retries,
        )
        if self._logger:
            self._logger.warning(
                "Retrying request",
                endpoint=path,
                status_code=status,
                error=type(error).__name__,
                attempt=retry_engine.attempt,
                max_retries=self._retry.max_retries,
            )

    def _log_failure(self, path, query, classified, attempt) -> None:
        logger.error(
            "GET %s failed: %s (params=%s)",
            path, mask_sensitive_data(classified.message), mask_sensitive_data(query),
        )
        if self._logger:
            self._logger.error(
                "Request failed",
                endpoint=path,
                params=query,
                status_code=classified.status_code,
                error_type=classified.error_type.value if classified.error_type else None,
                error_message=classified.message,
                attempt=attempt,
            )
