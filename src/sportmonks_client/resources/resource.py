"""
Универсальный ресурс: операции из таблицы registry становятся методами.

    >>> client.fixtures.by_date("2024-01-15").include("participants").get()
    >>> client.teams.squad(85, season_id=21646).get()
"""

from typing import Any, Dict, List, Mapping, Tuple
from urllib.parse import quote

from ..core.query_builder import QueryBuilder
from ..core.request_executor import RequestExecutor
from ..utils.validators import (
    validate_date_format,
    validate_date_range,
    validate_id,
    validate_ids,
    validate_search_query,
)
from .registry import Endpoint, ResourceDescriptor

_DATE_ARGS = ("date", "start_date", "end_date")


class Resource:
    """
    Ресурс API (leagues, fixtures, ...) поверх одного RequestExecutor.

    Каждая операция возвращает новый QueryBuilder, поэтому один и тот же
    ресурс безопасно использовать из нескольких корутин.
    """

    def __init__(self, descriptor: ResourceDescriptor, executor: RequestExecutor):
        self._descriptor = descriptor
        self._executor = executor

    @property
    def name(self) -> str:
        return self._descriptor.name

    @property
    def descriptor(self) -> ResourceDescriptor:
        return self._descriptor

    @property
    def executor(self) -> RequestExecutor:
        return self._executor

    @property
    def operations(self) -> List[str]:
        return list(self._descriptor.endpoints)

    def endpoint(self, operation: str, *args: Any, **kwargs: Any) -> QueryBuilder:
        """
        Построить запрос для операции.

        Args:
            operation: Имя операции (``"by_date"``)
            *args: Аргументы пути в порядке Endpoint.args
            **kwargs: Те же аргументы по имени

        Raises:
            AttributeError: Неизвестная операция
            TypeError: Не хватает аргументов или лишние аргументы
            ValidationError: Невалидный ID, дата или поисковый запрос
        """
        entry = self._lookup(operation)
        values = self._bind(operation, entry, args, kwargs)

        if entry.overload and entry.optional and all(values[name] is not None for name in entry.optional):
            return self.endpoint(entry.overload, **values)

        path_values = {
            name: self._prepare(name, value, entry)
            for name, value in values.items()
            if name not in entry.optional
        }

        if entry.check_range and "start_date" in values and "end_date" in values:
            validate_date_range(values["start_date"], values["end_date"])

        return QueryBuilder(self._executor, entry.path.format(**path_values), root=entry.root)

    # ==================== Внутреннее ====================

    def _lookup(self, operation: str) -> Endpoint:
        try:
            return self._descriptor.endpoints[operation]
        except KeyError:
            raise AttributeError(
                f"{self._descriptor.name!r} resource has no operation {operation!r}"
            ) from None

    def _bind(
        self,
        operation: str,
        entry: Endpoint,
        args: Tuple[Any, ...],
        kwargs: Dict[str, Any],
    ) -> Dict[str, Any]:
        if len(args) > len(entry.args):
            raise TypeError(
                f"{self.name}.{operation}() takes {len(entry.args)} positional arguments "
                f"but {len(args)} were given"
            )

        values = dict(zip(entry.args, args))
        for name, value in kwargs.items():
            if name not in entry.args:
                raise TypeError(f"{self.name}.{operation}() got an unexpected argument {name!r}")
            if name in values:
                raise TypeError(f"{self.name}.{operation}() got multiple values for {name!r}")
            values[name] = value

        for name in entry.args:
            if name in values:
                continue
            if name in entry.optional:
                values[name] = None
            else:
                raise TypeError(f"{self.name}.{operation}() missing argument {name!r}")

        return {name: values[name] for name in entry.args}

    @staticmethod
    def _prepare(name: str, value: Any, entry: Endpoint) -> str:
        if name == "ids":
            return ",".join(str(item) for item in validate_ids(value))
        if name == "id" or name.endswith("_id"):
            return str(validate_id(value, name))
        if name in _DATE_ARGS:
            validate_date_format(value)
            return value
        if name == "query":
            return quote(validate_search_query(value, entry.min_query_length), safe="")
        return str(value)

    def __getattr__(self, operation: str):
        if operation.startswith("_"):
            raise AttributeError(operation)

        entry = self._lookup(operation)

        def bound(*args: Any, **kwargs: Any) -> QueryBuilder:
            return self.endpoint(operation, *args, **kwargs)

        bound.__name__ = operation
        bound.__qualname__ = f"{type(self).__name__}.{operation}"
        bound.__doc__ = f"{entry.doc} ({', '.join(entry.args) or 'no arguments'})"
        return bound

    def __dir__(self) -> List[str]:
        return sorted(set(super().__dir__()) | set(self._descriptor.endpoints))

    def __repr__(self) -> str:
        return f"Resource(name={self.name!r}, root={self._descriptor.root!r})"


def build_resources(
    descriptors: Mapping[str, ResourceDescriptor],
    executors: Mapping[str, RequestExecutor],
) -> Dict[str, Resource]:
    """Ресурс на каждый дескриптор, со своим исполнителем."""
    return {name: Resource(descriptor, executors[name]) for name, descriptor in descriptors.items()}


__all__ = ["Resource", "build_resources"]
