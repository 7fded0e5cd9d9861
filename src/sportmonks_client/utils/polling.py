"""
Периодический опрос эндпоинтов с обнаружением изменений.

Poller вызывает fetch функцию по таймеру в текущем event loop и вызывает
``on_data`` только когда ответ изменился относительно предыдущего.
"""

import asyncio
import inspect
import json
import logging
import time
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Awaitable, Callable, Generic, Optional, Set, TypeVar

from ..core.exceptions import PollingError
from ..models import is_paginated_payload

logger = logging.getLogger(__name__)

T = TypeVar("T")

FetchFunction = Callable[[], Awaitable[Any]]
CompareFunction = Callable[[Any, Any], bool]

_MISSING = object()


@dataclass(frozen=True)
class PollingOptions:
    """
    Настройки опроса.

    Args:
        interval: Пауза между опросами (сек)
        max_duration: Максимальная длительность сессии (сек), None - без ограничения
        on_data: Вызывается с новым ответом, если он изменился
        on_error: Вызывается с исключением fetch функции
        stop_on_error: Остановить опрос после первой ошибки
        compare_function: (old, new) -> True если данные изменились
    """
    interval: float
    max_duration: Optional[float] = None
    on_data: Optional[Callable[[Any], Any]] = None
    on_error: Optional[Callable[[BaseException], Any]] = None
    stop_on_error: bool = False
    compare_function: Optional[CompareFunction] = None

    def __post_init__(self):
        if self.interval <= 0:
            raise ValueError("interval must be positive")
        if self.max_duration is not None and self.max_duration <= 0:
            raise ValueError("max_duration must be positive")


class Poller(Generic[T]):
    """
    Опрос по таймеру с двумя состояниями: IDLE и ACTIVE.

    Циклы fetch-and-compare одной сессии никогда не пересекаются: тик,
    пришедший пока предыдущий цикл не закончился, пропускается. После stop()
    уже запущенный fetch доработает, но его колбэки не вызываются. Каждый
    start() открывает новую сессию (поколение), и fetch прошлой сессии не
    попадает в новую.

    Example:
        >>> poller = create_livescores_poller(
        ...     lambda: client.livescores.inplay().include(["scores"]).get(),
        ...     on_data=handle_update,
        ... )
        >>> poller.start()        # внутри работающего event loop
        >>> ...
        >>> poller.stop()
    """

    def __init__(self, fetch_function: FetchFunction, options: PollingOptions):
        self._fetch_function = fetch_function
        self._options = options

        self._last_data: Any = _MISSING
        self._active = False
        self._start_time: Optional[float] = None
        self._generation = 0
        self._in_flight: Set[int] = set()
        self._timer_task: Optional[asyncio.Task] = None
        self._cycle_tasks: Set[asyncio.Task] = set()
        self._stopped: Optional[asyncio.Event] = None

    @property
    def options(self) -> PollingOptions:
        return self._options

    @property
    def last_data(self) -> Optional[T]:
        return None if self._last_data is _MISSING else self._last_data

    def is_active(self) -> bool:
        return self._active

    def start(self) -> None:
        """
        Начать опрос: сразу один цикл, затем по таймеру.

        Raises:
            PollingError: Опрос уже запущен
            RuntimeError: Нет работающего event loop
        """
        if self._active:
            raise PollingError("Polling is already active")

        loop = asyncio.get_running_loop()

        self._generation += 1
        self._active = True
        self._start_time = time.monotonic()
        self._stopped = asyncio.Event()

        self._spawn_cycle(loop, self._generation)
        self._timer_task = loop.create_task(self._run_timer(self._generation))
        logger.debug("Polling started (interval=%ss)", self._options.interval)

    def stop(self) -> None:
        """Остановить опрос. Повторный вызов ничего не делает."""
        if self._timer_task is not None:
            if self._timer_task is not _current_task():
                self._timer_task.cancel()
            self._timer_task = None

        if self._active:
            logger.debug("Polling stopped")
        self._active = False

        if self._stopped is not None:
            self._stopped.set()

    async def wait_stopped(self) -> None:
        """Дождаться перехода в IDLE (по stop(), max_duration или ошибке)."""
        if self._stopped is None or not self._active:
            return
        await self._stopped.wait()

    async def poll_once(self) -> None:
        """
        Один цикл fetch-and-compare в текущей сессии.

        Ничего не делает, если предыдущий цикл этой сессии ещё выполняется.
        Ошибки fetch, compare_function и on_data уходят в on_error.
        """
        await self._cycle(self._generation)

    # ==================== Внутреннее ====================

    async def _cycle(self, generation: int) -> None:
        if generation in self._in_flight:
            logger.debug("Previous poll still in flight, skipping tick")
            return

        self._in_flight.add(generation)
        try:
            data = await self._fetch_function()
            # Ответ прошлой сессии не трогает ни baseline, ни колбэки
            if generation != self._generation:
                return

            changed = self._has_changed(data)
            self._last_data = data

            if changed and self._active and self._options.on_data:
                await _maybe_await(self._options.on_data(data))
        except Exception as error:
            await self._handle_error(error, generation)
        finally:
            self._in_flight.discard(generation)

    def _is_current(self, generation: int) -> bool:
        return self._active and generation == self._generation

    def _spawn_cycle(self, loop: asyncio.AbstractEventLoop, generation: int) -> None:
        task = loop.create_task(self._cycle(generation))
        self._cycle_tasks.add(task)
        task.add_done_callback(self._cycle_tasks.discard)

    async def _run_timer(self, generation: int) -> None:
        loop = asyncio.get_running_loop()
        while self._is_current(generation):
            await asyncio.sleep(self._options.interval)

            if self._duration_exceeded():
                logger.debug("Polling max_duration reached")
                self.stop()
                return

            self._spawn_cycle(loop, generation)

    def _duration_exceeded(self) -> bool:
        if self._options.max_duration is None or self._start_time is None:
            return False
        return time.monotonic() - self._start_time >= self._options.max_duration

    async def _handle_error(self, error: BaseException, generation: int) -> None:
        logger.warning("Poll cycle failed: %s", error)
        if not self._is_current(generation):
            return

        if self._options.on_error:
            try:
                await _maybe_await(self._options.on_error(error))
            except Exception:
                logger.exception("Poll on_error callback failed")

        if self._options.stop_on_error:
            self.stop()

    def _has_changed(self, new_data: Any) -> bool:
        if self._last_data is _MISSING:
            return True

        old_data = self._last_data

        if self._options.compare_function:
            return bool(self._options.compare_function(old_data, new_data))

        if is_paginated_payload(old_data) and is_paginated_payload(new_data):
            # Только состав по id: изменения полей существующих записей не видны
            return _item_ids(old_data) != _item_ids(new_data)

        return _canonical(old_data) != _canonical(new_data)


def _current_task() -> Optional[asyncio.Task]:
    try:
        return asyncio.current_task()
    except RuntimeError:
        return None


async def _maybe_await(result: Any) -> None:
    if inspect.isawaitable(result):
        await result


def _item_ids(payload: Any) -> Set[Any]:
    ids = set()
    for item in payload["data"]:
        item_id = item.get("id") if isinstance(item, dict) else getattr(item, "id", None)
        ids.add(_hashable(item_id))
    return ids


def _hashable(value: Any) -> Any:
    try:
        hash(value)
    except TypeError:
        return _canonical(value)
    return value


def _canonical(value: Any) -> str:
    return json.dumps(value, sort_keys=True, default=str)


def _parse_date(value: Any) -> Optional[float]:
    if not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).timestamp()
    except ValueError:
        return None


def _latest_date(payload: Any) -> Optional[float]:
    timestamps = [
        ts for ts in (
            _parse_date(item.get("date")) for item in payload["data"] if isinstance(item, dict)
        )
        if ts is not None
    ]
    return max(timestamps) if timestamps else None


def compare_latest_transfer(old_data: Any, new_data: Any) -> bool:
    """
    Изменение ленты трансферов: самая свежая дата строго увеличилась.

    Пустой старый или новый список считается изменением.
    """
    old_items = old_data.get("data") if isinstance(old_data, dict) else None
    new_items = new_data.get("data") if isinstance(new_data, dict) else None
    if not old_items or not new_items:
        return True

    old_latest = _latest_date(old_data)
    new_latest = _latest_date(new_data)
    # Нет ни одной разборчивой даты - сравнивать нечего
    if old_latest is None or new_latest is None:
        return False
    return new_latest > old_latest


def create_livescores_poller(
    fetch_function: FetchFunction,
    **options: Any,
) -> Poller:
    """
    Poller для livescores: каждые 10 сек, не дольше часа.

    Example:
        >>> poller = create_livescores_poller(fetch, on_data=print, interval=5)
    """
    defaults = PollingOptions(
        interval=10.0,
        max_duration=3600.0,
        stop_on_error=False,
    )
    return Poller(fetch_function, replace(defaults, **options))


def create_transfers_poller(
    fetch_function: FetchFunction,
    **options: Any,
) -> Poller:
    """Poller для трансферов: раз в минуту, не дольше суток."""
    defaults = PollingOptions(
        interval=60.0,
        max_duration=86400.0,
        stop_on_error=False,
        compare_function=compare_latest_transfer,
    )
    return Poller(fetch_function, replace(defaults, **options))
