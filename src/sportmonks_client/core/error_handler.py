# src/sportmonks_client/core/error_handler.py

import socket
from typing import Any, Dict, Optional

import httpx

from ..models import RateLimit
from .exceptions import ErrorType, SportMonksError
from ..utils.sanitizer import mask_sensitive_data

_REFUSED_MARKERS = ("connection refused", "errno 111", "errno 61", "winerror 10061")
_DNS_MARKERS = (
    "name or service not known",
    "nodename nor servname",
    "getaddrinfo failed",
    "temporary failure in name resolution",
    "no address associated with hostname",
)


class ErrorHandler:
    """Класс для классификации ошибок HTTP запросов"""

    @staticmethod
    def classify(error: BaseException, url: str) -> SportMonksError:
        """Преобразует любую ошибку запроса в SportMonksError"""

        if isinstance(error, SportMonksError):
            return error

        if isinstance(error, httpx.HTTPStatusError):
            return ErrorHandler.handle_http_error(error, url)

        if isinstance(error, httpx.HTTPError):
            return ErrorHandler.handle_network_error(error)

        return SportMonksError(
            mask_sensitive_data(str(error)) or "Unknown error occurred",
            error_type=ErrorType.CLIENT_ERROR,
        )

    @staticmethod
    def handle_network_error(error: httpx.HTTPError) -> SportMonksError:
        """Ответа нет: таймаут, DNS, отказ в соединении и т.п."""

        if isinstance(error, httpx.TimeoutException):
            message = "Request timeout. The server is not responding."
        elif ErrorHandler._is_connection_refused(error):
            message = "Connection refused. The server may be down or unreachable."
        elif ErrorHandler._is_dns_failure(error):
            message = "Server not found. Please check the API URL."
        elif str(error):
            message = f"Network error: {mask_sensitive_data(str(error))}"
        else:
            message = "Network error"

        return SportMonksError(message, error_type=ErrorType.NETWORK_ERROR)

    @staticmethod
    def handle_http_error(error: httpx.HTTPStatusError, url: str) -> SportMonksError:
        """Обрабатывает HTTP ошибки по статус коду"""

        response = error.response
        status_code = response.status_code
        payload = ErrorHandler.extract_payload(response)

        api_message = payload.get("message") if isinstance(payload.get("message"), str) else None
        errors = payload.get("errors") if isinstance(payload.get("errors"), dict) else None

        if status_code in (401, 403):
            error_type = ErrorType.AUTH_ERROR
            message = api_message or "Authentication failed. Invalid or missing API key."

        elif status_code == 404:
            error_type = ErrorType.CLIENT_ERROR
            message = api_message or f"Resource not found: {url}"

        elif status_code == 429:
            error_type = ErrorType.RATE_LIMIT_ERROR
            resets_in = RateLimit.from_payload(payload).resets_in_seconds
            if resets_in:
                message = f"Rate limit exceeded. Resets in {resets_in:g} seconds."
            else:
                message = "Rate limit exceeded. Please wait before making more requests."

        elif status_code >= 500:
            error_type = ErrorType.SERVER_ERROR
            message = api_message or "Server error. Please try again later."

        else:
            error_type = ErrorType.CLIENT_ERROR
            message = api_message or f"HTTP {status_code} error for {url}"

        return SportMonksError(
            message,
            status_code=status_code,
            api_message=api_message,
            errors=errors,
            error_type=error_type,
        )

    @staticmethod
    def extract_payload(response: Optional[httpx.Response]) -> Dict[str, Any]:
        """JSON тело ошибки или пустой dict"""

        if response is None:
            return {}
        try:
            payload = response.json()
        except ValueError:
            return {}
        return payload if isinstance(payload, dict) else {}

    @staticmethod
    def _iter_causes(error: BaseException):
        seen = set()
        current: Optional[BaseException] = error
        while current is not None and id(current) not in seen:
            seen.add(id(current))
            yield current
            current = current.__cause__ or current.__context__

    @staticmethod
    def _is_connection_refused(error: BaseException) -> bool:
        for exc in ErrorHandler._iter_causes(error):
            if isinstance(exc, ConnectionRefusedError):
                return True
            if any(marker in str(exc).lower() for marker in _REFUSED_MARKERS):
                return True
        return False

    @staticmethod
    def _is_dns_failure(error: BaseException) -> bool:
        for exc in ErrorHandler._iter_causes(error):
            if isinstance(exc, socket.gaierror):
                return True
            if any(marker in str(exc).lower() for marker in _DNS_MARKERS):
                return True
        return False
