"""Утилиты: опрос, проверки аргументов, маскирование секретов."""

from .sanitizer import mask_sensitive_data, mask_url
from .validators import (
    validate_date_format,
    validate_date_range,
    validate_id,
    validate_ids,
    validate_search_query,
    validate_pagination,
    format_date,
    get_today,
    get_days_from_now,
    get_days_ago,
)
from .polling import (
    Poller,
    PollingOptions,
    create_livescores_poller,
    create_transfers_poller,
    compare_latest_transfer,
)

__all__ = [
    # Sanitizer
    "mask_sensitive_data",
    "mask_url",
    # Validators
    "validate_date_format",
    "validate_date_range",
    "validate_id",
    "validate_ids",
    "validate_search_query",
    "validate_pagination",
    "format_date",
    "get_today",
    "get_days_from_now",
    "get_days_ago",
    # Polling
    "Poller",
    "PollingOptions",
    "create_livescores_poller",
    "create_transfers_poller",
    "compare_latest_transfer",
]
