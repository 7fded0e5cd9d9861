"""
Проверки аргументов ресурсов (даты, ID, поисковые запросы).

Все функции бросают ValidationError (подкласс ValueError) до отправки
запроса.
"""

import re
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional, Union

from ..core.exceptions import ValidationError

_DATE_RE = re.compile(r'^\d{4}-\d{2}-\d{2}$')
MAX_DATE_RANGE_DAYS = 365


def validate_date_format(value: str) -> date:
    """
    Проверить формат YYYY-MM-DD и что дата существует.

    Returns:
        Распарсенная дата
    """
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise ValidationError(f"Invalid date format: {value}. Expected YYYY-MM-DD")

    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date: {value}") from None


def validate_date_range(start_date: str, end_date: str) -> None:
    """Начало не позже конца, диапазон не больше года."""
    start = validate_date_format(start_date)
    end = validate_date_format(end_date)

    if start > end:
        raise ValidationError(
            f"Invalid date range: start date ({start_date}) is after end date ({end_date})"
        )

    if (end - start).days > MAX_DATE_RANGE_DAYS:
        raise ValidationError("Date range cannot exceed 1 year")


def format_date(value: Union[date, str]) -> str:
    """date/datetime/ISO строку -> YYYY-MM-DD."""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            raise ValidationError("Invalid date provided") from None

    if not isinstance(value, date):
        raise ValidationError("Invalid date provided")

    return value.strftime("%Y-%m-%d")


def get_today() -> str:
    return format_date(date.today())


def get_days_from_now(days: int) -> str:
    return format_date(date.today() + timedelta(days=days))


def get_days_ago(days: int) -> str:
    return get_days_from_now(-days)


def validate_id(value: Union[int, str], name: str = "ID") -> int:
    """
    Положительный целый ID.

    Строки приводятся к int: "42" -> 42.
    """
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {name}: {value}. Must be a positive number")

    try:
        num = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {name}: {value}. Must be a positive number") from None

    if isinstance(value, float) and value != num:
        raise ValidationError(f"Invalid {name}: {value}. Must be a positive number")

    if num <= 0:
        raise ValidationError(f"Invalid {name}: {value}. Must be a positive number")

    return num


def validate_ids(values: Iterable[Union[int, str]], name: str = "IDs") -> List[int]:
    """Непустой список положительных ID."""
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise ValidationError(f"{name} must be a non-empty list")

    values = list(values)
    if not values:
        raise ValidationError(f"{name} must be a non-empty list")

    result = []
    for index, value in enumerate(values):
        try:
            result.append(validate_id(value, f"{name}[{index}]"))
        except ValidationError:
            raise ValidationError(f"Invalid {name}[{index}]: {value}") from None
    return result


def validate_search_query(query: str, min_length: int = 3) -> str:
    """
    Поисковый запрос без пробелов по краям, не короче min_length.

    Returns:
        Очищенный запрос
    """
    if not isinstance(query, str):
        raise ValidationError("Search query must be a string")

    trimmed = query.strip()
    if not trimmed:
        raise ValidationError("Invalid search query")

    if len(trimmed) < min_length:
        raise ValidationError(f"Search query must be at least {min_length} characters")

    return trimmed


def validate_pagination(page: Optional[int] = None, per_page: Optional[int] = None) -> None:
    """page >= 1, 1 <= per_page <= 100."""
    if page is not None:
        if isinstance(page, bool) or not isinstance(page, int) or page < 1:
            raise ValidationError("Page must be a positive integer")

    if per_page is not None:
        if isinstance(per_page, bool) or not isinstance(per_page, int) or not 1 <= per_page <= 100:
            raise ValidationError("Per page must be an integer between 1 and 100")
