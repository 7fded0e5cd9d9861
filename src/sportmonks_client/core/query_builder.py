"""
Построитель запросов с цепочкой вызовов.

Накапливает include/select/filters/order/has/пагинацию и сериализует их в
синтаксис SportMonks только в момент выполнения:

    include=lineups:player_name;events;league.country
    filters=eventTypes:15,16;position:1
    order=-starting_at,name
"""

from typing import Any, Dict, Generic, Iterable, List, Mapping, Optional, TypeVar, Union

from ..models import Pagination
from .request_executor import RequestExecutor

T = TypeVar("T")

FilterValue = Union[str, int, float, bool]


def _format_value(value: Any) -> str:
    # JSON-стиль для bool: filters=active:true
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class QueryBuilder(Generic[T]):
    """
    Построитель запроса к одному эндпоинту.

    Все мутаторы возвращают тот же экземпляр. Ничего не валидируется
    локально - невалидные параметры отклонит API.

    Examples:
        >>> fixtures = await (
        ...     client.fixtures.by_date("2024-01-15")
        ...     .include(["participants", "league.country"])
        ...     .include_fields("events", ["player_name", "minute"])
        ...     .filter("eventTypes", [15, 16])
        ...     .order_by("-starting_at")
        ...     .per_page(50)
        ...     .get()
        ... )
    """

    def __init__(self, executor: RequestExecutor, endpoint: str, *, root: Optional[str] = None):
        """
        Args:
            executor: Исполнитель запросов ресурса
            endpoint: Суффикс пути относительно корня ресурса
            root: Явный корень эндпоинтов вместо корня ресурса
        """
        self._executor = executor
        self._endpoint = endpoint
        self._root = root

        # dict как упорядоченное множество: порядок первого появления
        self._includes: Dict[str, None] = {}
        self._select: Dict[str, None] = {}
        self._filters: Dict[str, str] = {}
        self._order: List[str] = []
        self._has: Dict[str, None] = {}
        self._page: Optional[int] = None
        self._limit: Optional[int] = None

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def path(self) -> str:
        """Полный путь запроса относительно base_url."""
        return self._executor.build_path(self._endpoint, self._root)

    # ==================== Include / select ====================

    def include(self, includes: Union[str, Iterable[str]]) -> "QueryBuilder[T]":
        """
        Подключить связанные сущности.

        Args:
            includes: Один токен (``"lineups:player_name"``) или список
                (``["country", "seasons.stages"]``)

        Повторное добавление существующего токена ничего не меняет.
        """
        if isinstance(includes, str):
            includes = [includes]
        for token in includes:
            self._includes.setdefault(token, None)
        return self

    def include_fields(self, relation: str, fields: Iterable[str]) -> "QueryBuilder[T]":
        """
        Подключить связь с выбором полей.

        Example:
            >>> builder.include_fields("lineups", ["player_name", "jersey_number"])
            >>> # include=lineups:player_name,jersey_number
        """
        return self.include(f"{relation}:{','.join(fields)}")

    def with_includes(self, includes: Mapping[str, Union[bool, Iterable[str]]]) -> "QueryBuilder[T]":
        """
        Подключить несколько связей одним словарём.

        ``True`` - все поля связи, список - только эти поля.
        ``False`` и пустой список пропускаются.

        Example:
            >>> builder.with_includes({"lineups": ["player_name"], "participants": True})
        """
        for relation, fields in includes.items():
            if fields is True:
                self.include(relation)
            elif fields and not isinstance(fields, bool):
                fields = list(fields)
                if fields:
                    self.include_fields(relation, fields)
        return self

    def select(self, fields: Iterable[str]) -> "QueryBuilder[T]":
        """Выбрать поля базовой сущности."""
        if isinstance(fields, str):
            fields = [fields]
        for name in fields:
            self._select.setdefault(name, None)
        return self

    # ==================== Filters / order / has ====================

    def filter(self, key: str, value: Union[FilterValue, Iterable[FilterValue]]) -> "QueryBuilder[T]":
        """
        Добавить фильтр. Повторный вызов с тем же ключом заменяет значение.

        Example:
            >>> builder.filter("eventTypes", [15, 16])   # eventTypes:15,16
        """
        if isinstance(value, (list, tuple, set, frozenset)):
            self._filters[key] = ",".join(_format_value(v) for v in value)
        else:
            self._filters[key] = _format_value(value)
        return self

    def filters(self, filters: Mapping[str, Union[FilterValue, Iterable[FilterValue]]]) -> "QueryBuilder[T]":
        """Несколько фильтров сразу, с той же семантикой перезаписи."""
        for key, value in filters.items():
            self.filter(key, value)
        return self

    def order_by(self, field: str) -> "QueryBuilder[T]":
        """
        Сортировка. ``-`` в начале - по убыванию.

        Дубликаты не схлопываются: каждый вызов добавляет токен.
        """
        self._order.append(field)
        return self

    def has(self, relationships: Union[str, Iterable[str]]) -> "QueryBuilder[T]":
        """Только записи, у которых есть указанные связи."""
        if isinstance(relationships, str):
            relationships = [relationships]
        for name in relationships:
            self._has.setdefault(name, None)
        return self

    # ==================== Пагинация ====================

    def page(self, page: int) -> "QueryBuilder[T]":
        self._page = page
        return self

    def limit(self, limit: int) -> "QueryBuilder[T]":
        """Размер страницы (уходит в API как ``per_page``)."""
        self._limit = limit
        return self

    def per_page(self, per_page: int) -> "QueryBuilder[T]":
        """Синоним limit()."""
        return self.limit(per_page)

    # ==================== Выполнение ====================

    def build_params(self) -> Dict[str, Any]:
        """
        Сериализовать накопленные параметры в query string SportMonks.

        Пустые части не попадают в результат.
        """
        params: Dict[str, Any] = {}

        if self._includes:
            params["include"] = self._executor.include_separator.join(self._includes)

        if self._select:
            params["select"] = ",".join(self._select)

        if self._filters:
            params["filters"] = ";".join(f"{key}:{value}" for key, value in self._filters.items())

        if self._order:
            params["order"] = ",".join(self._order)

        if self._has:
            params["has"] = ",".join(self._has)

        if self._page is not None:
            params["page"] = self._page

        # API называет размер страницы per_page, limit не отправляется
        if self._limit is not None:
            params["per_page"] = self._limit

        return params

    async def get(self) -> T:
        """
        Выполнить запрос.

        Returns:
            Тело ответа как есть (envelope с ``data``)

        Raises:
            SportMonksError: Терминальная ошибка запроса
        """
        return await self._executor.request(self._endpoint, self.build_params(), root=self._root)

    async def get_all(self) -> List[Any]:
        """
        Загрузить все страницы последовательно и вернуть элементы ``data``.

        Останавливается, когда ``pagination.has_more`` ложно или отсутствует.
        Верхней границы по числу страниц нет - для больших выборок
        ограничивайте запрос фильтрами.
        """
        results: List[Any] = []
        current_page = 1
        has_more = True

        while has_more:
            self.page(current_page)
            response = await self.get()

            data = response.get("data") if isinstance(response, Mapping) else None
            if isinstance(data, list):
                results.extend(data)
            elif data is not None:
                results.append(data)

            pagination = response.get("pagination") if isinstance(response, Mapping) else None
            has_more = Pagination.from_dict(pagination).has_more
            current_page += 1

        return results

    def __repr__(self) -> str:
        return f"QueryBuilder(path={self.path!r}, params={self.build_params()!r})"
