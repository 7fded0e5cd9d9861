"""
Таблица ресурсов SportMonks Football API.

Каждый ресурс - это корень эндпоинтов и набор операций с шаблонами путей.
Один универсальный Resource (см. resource.py) превращает операции в методы.

Правила аргументов по имени плейсхолдера:
- ``id`` и ``*_id`` - положительный ID
- ``ids`` - непустой список ID, склеивается через запятую
- ``date``, ``start_date``, ``end_date`` - дата YYYY-MM-DD
- ``query`` - поисковая строка, кодируется для URL
"""

import string
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

FOOTBALL_ROOT = "/football"


@dataclass(frozen=True)
class Endpoint:
    """
    Операция ресурса.

    Args:
        path: Шаблон пути относительно корня (``"/date/{date}"``)
        args: Порядок позиционных аргументов (по умолчанию - порядок в шаблоне)
        root: Другой корень эндпоинтов вместо корня ресурса
        min_query_length: Минимальная длина ``query``
        check_range: Проверять ``start_date <= end_date`` и диапазон <= года
        optional: Необязательные аргументы (значение по умолчанию None)
        overload: Операция, которая вызывается, если переданы все optional
        doc: Описание для help()/dir()
    """
    path: str
    args: Tuple[str, ...] = ()
    root: Optional[str] = None
    min_query_length: int = 1
    check_range: bool = True
    optional: Tuple[str, ...] = ()
    overload: Optional[str] = None
    doc: str = ""

    def __post_init__(self):
        placeholders = tuple(
            name for _, name, _, _ in string.Formatter().parse(self.path) if name
        )
        if not self.args:
            object.__setattr__(self, 'args', placeholders)
        elif set(self.args) - set(self.optional) != set(placeholders):
            raise ValueError(f"args {self.args} do not match placeholders of {self.path!r}")


@dataclass(frozen=True)
class ResourceDescriptor:
    """Ресурс: имя атрибута клиента, корень и операции."""
    name: str
    root: str
    endpoints: Mapping[str, Endpoint] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self):
        if isinstance(self.endpoints, dict):
            object.__setattr__(self, 'endpoints', MappingProxyType(dict(self.endpoints)))


def _resource(name: str, **endpoints: Endpoint) -> ResourceDescriptor:
    return ResourceDescriptor(name=name, root=f"{FOOTBALL_ROOT}/{name}", endpoints=endpoints)


_ALL = Endpoint("", doc="All records (paginated)")
_BY_ID = Endpoint("/{id}", doc="Single record by ID")
_BY_COUNTRY = Endpoint("/countries/{country_id}", doc="Records by country ID")
_BY_SEASON = Endpoint("/seasons/{season_id}", doc="Records by season ID")
_LATEST = Endpoint("/latest", doc="Records updated recently")


RESOURCES: Mapping[str, ResourceDescriptor] = MappingProxyType({
    descriptor.name: descriptor for descriptor in (
        _resource(
            "leagues",
            all=_ALL,
            by_id=_BY_ID,
            by_country=_BY_COUNTRY,
            search=Endpoint("/search/{query}", doc="Search leagues by name"),
            live=Endpoint("/live", doc="Leagues with fixtures in play"),
            by_date=Endpoint("/date/{date}", doc="Leagues with fixtures on a date"),
            by_team=Endpoint("/teams/{team_id}", doc="All leagues of a team"),
            current_by_team=Endpoint("/teams/{team_id}/current", doc="Current leagues of a team"),
        ),
        _resource(
            "teams",
            all=_ALL,
            by_id=_BY_ID,
            by_country=_BY_COUNTRY,
            by_season=_BY_SEASON,
            search=Endpoint("/search/{query}", doc="Search teams by name"),
            squad=Endpoint(
                "/squads/teams/{team_id}",
                args=("team_id", "season_id"),
                root=FOOTBALL_ROOT,
                optional=("season_id",),
                overload="squad_by_season",
                doc="Current squad, or the squad of season_id when given",
            ),
            squad_by_season=Endpoint(
                "/squads/seasons/{season_id}/teams/{team_id}",
                root=FOOTBALL_ROOT,
                doc="Squad of a team in a season",
            ),
        ),
        _resource(
            "players",
            all=_ALL,
            by_id=_BY_ID,
            by_country=_BY_COUNTRY,
            search=Endpoint("/search/{query}", min_query_length=2, doc="Search players by name"),
            latest=_LATEST,
            statistics=Endpoint("/{player_id}/statistics", doc="Statistics of a player"),
        ),
        _resource(
            "standings",
            all=_ALL,
            by_season=_BY_SEASON,
            by_round=Endpoint("/rounds/{round_id}", doc="Standings by round ID"),
            corrections_by_season=Endpoint(
                "/corrections/seasons/{season_id}", doc="Point corrections of a season",
            ),
            live_by_league=Endpoint("/live/leagues/{league_id}", doc="Live standings of a league"),
        ),
        _resource(
            "livescores",
            all=Endpoint("", doc="Fixtures starting within 15 minutes"),
            inplay=Endpoint("/inplay", doc="Fixtures currently in play"),
            latest=Endpoint("/latest", doc="Fixtures updated within 10 seconds"),
        ),
        _resource(
            "coaches",
            all=_ALL,
            by_id=_BY_ID,
            by_country=_BY_COUNTRY,
            search=Endpoint("/search/{query}", doc="Search coaches by name"),
            latest=_LATEST,
        ),
        _resource(
            "referees",
            all=_ALL,
            by_id=_BY_ID,
            by_country=_BY_COUNTRY,
            by_season=_BY_SEASON,
            search=Endpoint("/search/{query}", min_query_length=3, doc="Search referees by name"),
        ),
        _resource(
            "transfers",
            all=_ALL,
            by_id=_BY_ID,
            latest=_LATEST,
            between=Endpoint(
                "/between/{start_date}/{end_date}",
                check_range=False,
                doc="Transfers between two dates",
            ),
            by_team=Endpoint("/teams/{team_id}", doc="Incoming and outgoing transfers of a team"),
            by_player=Endpoint("/players/{player_id}", doc="Transfers of a player"),
        ),
        _resource(
            "venues",
            all=_ALL,
            by_id=_BY_ID,
            by_season=_BY_SEASON,
            search=Endpoint("/search/{query}", min_query_length=3, doc="Search venues by name"),
        ),
        _resource(
            "fixtures",
            all=_ALL,
            by_id=_BY_ID,
            by_ids=Endpoint("/multi/{ids}", doc="Several fixtures by ID"),
            by_date=Endpoint("/date/{date}", doc="Fixtures on a date"),
            by_date_range=Endpoint("/between/{start_date}/{end_date}", doc="Fixtures in a date range"),
            by_team_and_date_range=Endpoint(
                "/between/{start_date}/{end_date}/{team_id}",
                args=("team_id", "start_date", "end_date"),
                doc="Fixtures of a team in a date range",
            ),
            head_to_head=Endpoint("/head-to-head/{team1_id}/{team2_id}", doc="Head-to-head fixtures"),
            search=Endpoint("/search/{query}", min_query_length=3, doc="Search fixtures by name"),
            upcoming_by_market=Endpoint("/upcoming/markets/{market_id}", doc="Upcoming fixtures by market"),
            upcoming_by_tv_station=Endpoint(
                "/upcoming/tv-stations/{tv_station_id}", doc="Upcoming fixtures by TV station",
            ),
            past_by_tv_station=Endpoint(
                "/past/tv-stations/{tv_station_id}", doc="Past fixtures by TV station",
            ),
            latest=Endpoint("/latest", doc="Fixtures updated within 10 seconds"),
        ),
        _resource(
            "news",
            prematch=Endpoint("/pre-match", doc="Pre-match news"),
            postmatch=Endpoint("/post-match", doc="Post-match news"),
            by_id=_BY_ID,
        ),
        _resource(
            "seasons",
            all=_ALL,
            by_id=_BY_ID,
            by_team=Endpoint("/teams/{team_id}", doc="Seasons of a team"),
            search=Endpoint("/search/{query}", doc="Search seasons by name"),
        ),
        _resource(
            "schedules",
            by_season=_BY_SEASON,
            by_team=Endpoint("/teams/{team_id}", doc="Schedule of a team"),
            by_team_and_season=Endpoint(
                "/seasons/{season_id}/teams/{team_id}",
                args=("team_id", "season_id"),
                doc="Schedule of a team in a season",
            ),
        ),
        _resource(
            "squads",
            by_team=Endpoint("/teams/{team_id}", doc="Current domestic squad of a team"),
            by_team_extended=Endpoint("/teams/{team_id}/extended", doc="Squad including loaned players"),
            by_team_and_season=Endpoint(
                "/seasons/{season_id}/teams/{team_id}",
                args=("team_id", "season_id"),
                doc="Squad of a team in a season",
            ),
        ),
    )
})
