# src/sportmonks_client/utils/sanitizer.py
"""
Маскирование чувствительных данных в логах.

SportMonks передаёт ключ в query string (``api_token``), поэтому он
попадает в URL и в параметры запроса - оба места нужно чистить.
"""

import re
from typing import Any, Dict

DEFAULT_MASK = "***REDACTED***"

# Чувствительные поля (case-insensitive, частичное совпадение)
SENSITIVE_KEYS = frozenset({
    'api_token', 'token', 'api_key', 'apikey',
    'authorization', 'password', 'secret',
})

SENSITIVE_PATTERNS = [
    # api_token=... в URL и строках
    (re.compile(r'(api[_-]?token[\s:=]+)([^\s&,;]+)', re.IGNORECASE), r'\1' + DEFAULT_MASK),
    (re.compile(r'(api[_-]?key[\s:=]+)([^\s&,;]+)', re.IGNORECASE), r'\1' + DEFAULT_MASK),
    # Bearer токены в заголовках
    (re.compile(r'(Bearer\s+)([A-Za-z0-9\-._~+/]+=*)', re.IGNORECASE), r'\1' + DEFAULT_MASK),
]


def mask_sensitive_data(data: Any, mask: str = DEFAULT_MASK) -> Any:
    """
    Рекурсивно маскирует чувствительные данные в словарях, списках, строках.

    Args:
        data: Данные для маскирования
        mask: Строка-заменитель

    Returns:
        Копия данных с замаскированными полями

    Examples:
        >>> mask_sensitive_data({"api_token": "abc", "page": 2})
        {'api_token': '***REDACTED***', 'page': 2}
    """
    if data is None or isinstance(data, (bool, int, float)):
        return data

    if isinstance(data, str):
        return _mask_string(data, mask)

    if isinstance(data, dict):
        return _mask_dict(data, mask)

    if isinstance(data, (list, tuple)):
        return type(data)(mask_sensitive_data(item, mask) for item in data)

    return data


def _mask_dict(data: Dict[Any, Any], mask: str) -> Dict[Any, Any]:
    result = {}
    for key, value in data.items():
        if _is_sensitive_key(str(key).lower()):
            result[key] = mask
        else:
            result[key] = mask_sensitive_data(value, mask)
    return result


def _mask_string(text: str, mask: str) -> str:
    result = text
    for pattern, replacement in SENSITIVE_PATTERNS:
        if mask != DEFAULT_MASK:
            replacement = replacement.replace(DEFAULT_MASK, mask)
        result = pattern.sub(replacement, result)
    return result


def _is_sensitive_key(key: str) -> bool:
    # X-Api-Key и api_key - одно и то же
    key = key.replace("-", "_")
    return any(sensitive in key for sensitive in SENSITIVE_KEYS)


def mask_url(url: str, mask: str = DEFAULT_MASK) -> str:
    """
    Маскирует чувствительные query параметры в URL.

    Examples:
        >>> mask_url("https://api.sportmonks.com/v3/football/leagues?api_token=abc&page=1")
        'https://api.sportmonks.com/v3/football/leagues?api_token=***REDACTED***&page=1'
    """
    for key in SENSITIVE_KEYS:
        url = re.sub(
            rf'([?&]{re.escape(key)}=)[^&#]*',
            lambda m: m.group(1) + mask,
            url,
            flags=re.IGNORECASE,
        )
    return url
