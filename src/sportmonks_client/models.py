"""
Типы конверта ответа SportMonks.

Любой ответ обёрнут в конверт: ``{"data": ..., "pagination": ...,
"rate_limit": ..., "subscription": ..., "timezone": ...}``. Сущности внутри
``data`` отдаются как есть; здесь описаны только те части конверта, которые
читает сам клиент. Неизвестные ключи вендора попадают в ``extra``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class Pagination:
    """Блок pagination постраничного ответа"""
    count: Optional[int] = None
    per_page: Optional[int] = None
    current_page: Optional[int] = None
    next_page: Optional[Any] = None
    has_more: bool = False
    extra: Dict[str, Any] = field(default_factory=dict)

    _KNOWN = ("count", "per_page", "current_page", "next_page", "has_more")

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "Pagination":
        """Из сырого ``pagination`` (нет блока - страниц больше нет)"""
        if not isinstance(data, Mapping):
            return cls()
        return cls(
            count=data.get("count"),
            per_page=data.get("per_page"),
            current_page=data.get("current_page"),
            next_page=data.get("next_page"),
            has_more=bool(data.get("has_more", False)),
            extra={k: v for k, v in data.items() if k not in cls._KNOWN},
        )


@dataclass(frozen=True)
class RateLimit:
    """Блок rate_limit: есть и в успешных ответах, и в 429"""
    resets_in_seconds: Optional[float] = None
    remaining: Optional[int] = None
    requested_entity: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    _KNOWN = ("resets_in_seconds", "remaining", "requested_entity")

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "RateLimit":
        if not isinstance(data, Mapping):
            return cls()

        resets_in = data.get("resets_in_seconds")
        if isinstance(resets_in, bool) or not isinstance(resets_in, (int, float)):
            resets_in = None

        return cls(
            resets_in_seconds=resets_in,
            remaining=data.get("remaining"),
            requested_entity=data.get("requested_entity"),
            extra={k: v for k, v in data.items() if k not in cls._KNOWN},
        )

    @classmethod
    def from_payload(cls, payload: Any) -> "RateLimit":
        """``rate_limit`` из всего ответа"""
        if not isinstance(payload, Mapping):
            return cls()
        return cls.from_dict(payload.get("rate_limit"))


def is_paginated_payload(payload: Any) -> bool:
    """Ответ вида ``{"data": [...], "pagination": ...}``"""
    return (
        isinstance(payload, Mapping)
        and isinstance(payload.get("data"), list)
        and "pagination" in payload
    )


def has_data(payload: Any) -> bool:
    """В ответе есть ``data`` (не None)"""
    return isinstance(payload, Mapping) and payload.get("data") is not None


def is_single_payload(payload: Any) -> bool:
    """Ответ с одной сущностью: ``{"data": {...}}``"""
    return has_data(payload) and not isinstance(payload["data"], list)


def has_include(entity: Any, name: str) -> bool:
    """
    Include ``name`` подгружен в сущность.

    Example:
        >>> team = payload["data"]  # teams.by_id(85).include("country")
        >>> has_include(team, "country")
        True
    """
    return isinstance(entity, Mapping) and entity.get(name) is not None


def get_nested_include(entity: Any, name: str, key: Optional[str] = None, default: Any = None) -> Any:
    """
    Безопасный доступ к include и его полю.

    Example:
        >>> get_nested_include(team, "country", "name")
        'Denmark'
    """
    if not has_include(entity, name):
        return default

    included = entity[name]
    if key is None:
        return included
    if isinstance(included, Mapping):
        return included.get(key, default)
    return default
