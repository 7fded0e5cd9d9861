"""
Иерархия исключений SportMonks клиента.

Классификация:
- SportMonksError - любая терминальная ошибка запроса, с категорией ErrorType
- ValidationError - невалидный аргумент ресурса (до отправки запроса)
- PollingError - неверное использование Poller
"""

from enum import Enum
from typing import Any, Dict, Mapping, Optional


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# КАТЕГОРИИ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class ErrorType(str, Enum):
    """Категория терминальной ошибки."""
    AUTH_ERROR = "AUTH_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    SERVER_ERROR = "SERVER_ERROR"
    CLIENT_ERROR = "CLIENT_ERROR"
    RATE_LIMIT_ERROR = "RATE_LIMIT_ERROR"


_USER_MESSAGES = {
    ErrorType.AUTH_ERROR: (
        "Authentication failed. Please check your API key is valid "
        "and has the necessary permissions."
    ),
    ErrorType.NETWORK_ERROR: (
        "Unable to connect to SportMonks API. Please check your network connection."
    ),
    ErrorType.RATE_LIMIT_ERROR: (
        "API rate limit exceeded. Please wait before making more requests."
    ),
    ErrorType.SERVER_ERROR: "SportMonks API server error. Please try again later.",
}

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# BASE
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class SportMonksError(Exception):
    """
    Терминальная ошибка запроса к SportMonks API.

    Создаётся один раз на цепочку попыток (после исчерпания retry или
    при нересурсной ошибке) и больше не меняется.

    Args:
        message: Человекочитаемое сообщение
        status_code: HTTP статус (None для сетевых ошибок)
        api_message: Поле ``message`` из ответа API
        errors: Ошибки по полям из ответа API
        error_type: Категория ошибки

    Examples:
        >>> try:
        ...     await client.leagues.all().get()
        ... except SportMonksError as e:
        ...     if e.is_rate_limit_error():
        ...         ...
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        api_message: Optional[str] = None,
        errors: Optional[Mapping[str, Any]] = None,
        error_type: Optional[ErrorType] = None,
    ):
        self._message = message
        self._status_code = status_code
        self._api_message = api_message
        self._errors = dict(errors) if errors else None
        self._error_type = error_type
        super().__init__(message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def status_code(self) -> Optional[int]:
        return self._status_code

    @property
    def api_message(self) -> Optional[str]:
        return self._api_message

    @property
    def errors(self) -> Optional[Dict[str, Any]]:
        # Копия, чтобы снаружи нельзя было изменить ошибку
        return dict(self._errors) if self._errors is not None else None

    @property
    def error_type(self) -> Optional[ErrorType]:
        return self._error_type

    def is_network_error(self) -> bool:
        """Ошибка соединения (ответ не получен)."""
        return self._error_type is ErrorType.NETWORK_ERROR

    def is_auth_error(self) -> bool:
        """401/403."""
        return self._error_type is ErrorType.AUTH_ERROR

    def is_rate_limit_error(self) -> bool:
        """429."""
        return self._error_type is ErrorType.RATE_LIMIT_ERROR

    def is_server_error(self) -> bool:
        """5xx."""
        return self._error_type is ErrorType.SERVER_ERROR

    def is_client_error(self) -> bool:
        """4xx (кроме auth/rate limit) или локальная ошибка."""
        return self._error_type is ErrorType.CLIENT_ERROR

    def get_user_message(self) -> str:
        """
        Сообщение для конечного пользователя.

        Для CLIENT_ERROR возвращается техническое сообщение как есть.
        """
        if self._error_type is ErrorType.CLIENT_ERROR:
            return self._message
        return _USER_MESSAGES.get(self._error_type, "An unexpected error occurred.")

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация для логов и отладки."""
        return {
            "message": self._message,
            "status_code": self._status_code,
            "api_message": self._api_message,
            "errors": self.errors,
            "error_type": self._error_type.value if self._error_type else None,
        }

    def __repr__(self) -> str:
        error_type = self._error_type.value if self._error_type else None
        return (
            f"SportMonksError(message={self._message!r}, "
            f"status_code={self._status_code!r}, error_type={error_type!r})"
        )

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ЛОКАЛЬНЫЕ ОШИБКИ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class ValidationError(ValueError):
    """Невалидный аргумент (дата, ID, поисковый запрос)."""
    pass


class PollingError(RuntimeError):
    """Poller уже запущен."""
    pass
