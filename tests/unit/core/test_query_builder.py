"""Тесты QueryBuilder."""

from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from sportmonks_client.core.query_builder import QueryBuilder


@pytest.fixture
def executor():
    executor = Mock()
    executor.include_separator = ";"
    executor.request = AsyncMock(return_value={"data": []})
    executor.build_path = Mock(side_effect=lambda endpoint, root=None: f"{root or '/football/fixtures'}{endpoint}")
    return executor


@pytest.fixture
def builder(executor):
    return QueryBuilder(executor, "/date/2024-01-15")


class TestInclude:
    """include() / include_fields() / with_includes()."""

    def test_overlapping_includes_dedup_in_first_occurrence_order(self, builder):
        builder.include(["participants", "league"]).include("events").include(["league", "participants", "venue"])

        assert builder.build_params()["include"] == "participants;league;events;venue"

    def test_include_twice_single_token(self, builder):
        builder.include("x").include("x")
        assert builder.build_params()["include"] == "x"

    def test_custom_separator(self, executor):
        executor.include_separator = ","
        builder = QueryBuilder(executor, "").include(["a", "b"])
        assert builder.build_params()["include"] == "a,b"

    def test_include_fields(self, builder):
        builder.include_fields("lineups", ["player_name", "jersey_number"])
        assert builder.build_params()["include"] == "lineups:player_name,jersey_number"

    def test_with_includes_skips_false_and_empty(self, builder):
        builder.with_includes({
            "participants": True,
            "events": ["minute"],
            "venue": False,
            "league": [],
        })
        assert builder.build_params()["include"] == "participants;events:minute"

    def test_select_dedup(self, builder):
        builder.select(["name", "id"]).select("name")
        assert builder.build_params()["select"] == "name,id"


class TestFilters:
    """filter() / filters()."""

    def test_last_value_wins(self, builder):
        builder.filter("k", "v1").filter("k", "v2")
        assert builder.build_params()["filters"] == "k:v2"

    def test_list_value(self, builder):
        builder.filter("k", [1, 2, 3])
        assert builder.build_params()["filters"] == "k:1,2,3"

    def test_overwrite_keeps_original_position(self, builder):
        builder.filter("a", 1).filter("b", 2).filter("a", 3)
        assert builder.build_params()["filters"] == "a:3;b:2"

    def test_bool_value(self, builder):
        builder.filter("active", True)
        assert builder.build_params()["filters"] == "active:true"

    def test_filters_mapping(self, builder):
        builder.filters({"eventTypes": [15, 16], "position": 1})
        assert builder.build_params()["filters"] == "eventTypes:15,16;position:1"


class TestOrderAndHas:

    def test_order_duplicates_kept(self, builder):
        builder.order_by("name").order_by("name")
        assert builder.build_params()["order"] == "name,name"

    def test_order_descending(self, builder):
        builder.order_by("-starting_at").order_by("name")
        assert builder.build_params()["order"] == "-starting_at,name"

    def test_has_dedup(self, builder):
        builder.has(["odds", "events"]).has("odds")
        assert builder.build_params()["has"] == "odds,events"


class TestPaging:

    def test_limit_sent_as_per_page(self, builder):
        params = builder.limit(50).build_params()
        assert params["per_page"] == 50
        assert "limit" not in params

    def test_per_page_alias(self, builder):
        assert builder.per_page(25).build_params() == {"per_page": 25}

    def test_page(self, builder):
        assert builder.page(3).build_params() == {"page": 3}

    def test_empty_builder_has_no_params(self, builder):
        assert builder.build_params() == {}


class TestGet:

    async def test_get_dispatches_params_and_returns_payload_unmodified(self, builder, executor):
        payload = {"data": [{"id": 1}], "extra": object()}
        executor.request.return_value = payload

        result = await builder.include("participants").limit(10).get()

        assert result is payload
        executor.request.assert_awaited_once_with(
            "/date/2024-01-15",
            {"include": "participants", "per_page": 10},
            root=None,
        )

    async def test_get_passes_explicit_root(self, executor):
        builder = QueryBuilder(executor, "/squads/teams/1", root="/football")
        await builder.get()
        executor.request.assert_awaited_once_with("/squads/teams/1", {}, root="/football")

    def test_path(self, executor):
        assert QueryBuilder(executor, "/live").path == "/football/fixtures/live"
        assert QueryBuilder(executor, "/squads/teams/1", root="/football").path == "/football/squads/teams/1"

    def test_chaining_returns_same_instance(self, builder):
        assert builder.include("a").filter("b", 1).order_by("c").has("d").page(1).limit(2) is builder


class TestGetAll:
    """Pager over a stub server."""

    async def test_three_pages_in_order(self, mock_api, make_executor):
        pages = {
            "1": {"data": [{"id": 1}, {"id": 2}], "pagination": {"current_page": 1, "has_more": True}},
            "2": {"data": [{"id": 3}], "pagination": {"current_page": 2, "has_more": True}},
            "3": {"data": [{"id": 4}], "pagination": {"current_page": 3, "has_more": False}},
        }
        route = mock_api.get("/football/leagues").mock(
            side_effect=lambda request: httpx.Response(200, json=pages[request.url.params["page"]])
        )

        builder = QueryBuilder(make_executor(), "").include("country")
        items = await builder.get_all()

        assert items == [{"id": 1}, {"id": 2}, {"id": 3}, {"id": 4}]
        assert route.call_count == 3
        assert [call.request.url.params["page"] for call in route.calls] == ["1", "2", "3"]
        assert all(call.request.url.params["include"] == "country" for call in route.calls)

    async def test_missing_pagination_stops_after_one_request(self, mock_api, make_executor):
        route = mock_api.get("/football/leagues/1").mock(
            return_value=httpx.Response(200, json={"data": {"id": 1}})
        )

        items = await QueryBuilder(make_executor(), "/1").get_all()

        assert items == [{"id": 1}]
        assert route.call_count == 1

    async def test_missing_has_more_flag_stops(self, mock_api, make_executor):
        route = mock_api.get("/football/leagues").mock(
            return_value=httpx.Response(200, json={"data": [{"id": 1}], "pagination": {"count": 1}})
        )

        assert await QueryBuilder(make_executor(), "").get_all() == [{"id": 1}]
        assert route.call_count == 1
