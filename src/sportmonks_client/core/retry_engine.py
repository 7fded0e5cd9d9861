"""
Retry engine для повторных попыток запросов к SportMonks.

Включает:
- Exponential backoff с ограничением сверху
- Подсказку rate_limit.resets_in_seconds из тела 429 ответа
- Классификацию ретраибельных ошибок
"""

import asyncio
import logging
from typing import Optional

import httpx

from ..models import RateLimit
from .config import RetryConfig
from .error_handler import ErrorHandler

logger = logging.getLogger(__name__)


class RetryEngine:
    """
    Механизм retry для одного логического запроса.

    Счётчик попыток начинается с 0 (первый запрос). Повтор разрешён,
    пока номер текущей попытки меньше ``max_retries``.

    Examples:
        >>> engine = RetryEngine(RetryConfig(max_retries=2))
        >>> if engine.should_retry(error):
        >>>     await engine.async_wait(error)
        >>>     engine.increment()
    """

    def __init__(self, config: RetryConfig):
        """
        Args:
            config: Конфигурация retry
        """
        self.config = config
        self._attempt = 0

    def should_retry(self, error: BaseException) -> bool:
        """
        Решить нужен ли retry.

        Args:
            error: Исключение текущей попытки

        Returns:
            True если нужен retry
        """
        # Бюджет попыток исчерпан
        if self._attempt >= self.config.max_retries:
            return False

        # Ретраим только транспортные/HTTP ошибки, не баги в коде
        if not isinstance(error, httpx.HTTPError):
            return False

        status = self.status_of(error)
        if status is None:
            # Ответа нет - сетевая ошибка
            return True

        if status == 429 and self.config.retry_on_rate_limit:
            return True

        return status in self.config.retry_status_codes

    def get_wait_time(self, error: Optional[BaseException] = None) -> float:
        """
        Вычислить время ожидания (сек).

        Приоритет 1: resets_in_seconds из тела 429 ответа
        Приоритет 2: base_delay * 2^attempt, не больше max_delay
        """
        reset_hint = self.rate_limit_reset(error)
        if reset_hint is not None:
            return reset_hint

        return self.backoff_delay()

    def backoff_delay(self) -> float:
        """Exponential backoff для текущей попытки."""
        wait = self.config.base_delay * (2 ** self._attempt)
        return min(wait, self.config.max_delay)

    async def async_wait(self, error: Optional[BaseException] = None) -> float:
        """
        Асинхронное ожидание перед retry.

        Returns:
            Сколько секунд ждали
        """
        wait_time = self.get_wait_time(error)
        logger.debug(
            "Retry attempt %d/%d in %.2fs",
            self._attempt + 1, self.config.max_retries, wait_time,
        )
        await asyncio.sleep(wait_time)
        return wait_time

    @staticmethod
    def status_of(error: Optional[BaseException]) -> Optional[int]:
        """HTTP статус ошибки или None если ответа не было."""
        if isinstance(error, httpx.HTTPStatusError):
            return error.response.status_code
        return None

    @staticmethod
    def rate_limit_reset(error: Optional[BaseException]) -> Optional[float]:
        """
        Секунды до сброса лимита из тела 429 ответа.

        Нулевое или отсутствующее значение - подсказки нет.
        """
        if RetryEngine.status_of(error) != 429:
            return None

        payload = ErrorHandler.extract_payload(error.response)
        resets_in = RateLimit.from_payload(payload).resets_in_seconds
        if not resets_in or resets_in < 0:
            return None
        return float(resets_in)

    def increment(self):
        """Увеличить счётчик попыток."""
        self._attempt += 1

    def reset(self):
        """Сбросить счётчик."""
        self._attempt = 0

    @property
    def attempt(self) -> int:
        """Текущая попытка."""
        return self._attempt
