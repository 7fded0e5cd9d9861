"""
Integration tests: full client stack (resources, builder, executor, retry, poller)
against a mocked SportMonks API.
"""

import asyncio

import httpx
import pytest

from sportmonks_client import (
    ErrorType,
    SportMonksError,
    create_livescores_poller,
)

pytestmark = pytest.mark.integration


async def test_retry_then_success_through_resource(mock_api, retrying_client, no_sleep):
    route = mock_api.get("/football/livescores/inplay").mock(side_effect=[
        httpx.Response(503),
        httpx.Response(503),
        httpx.Response(200, json={"data": [{"id": 1}]}),
    ])

    result = await retrying_client.livescores.inplay().include("scores").get()

    assert result == {"data": [{"id": 1}]}
    assert route.call_count == 3


async def test_auth_error_not_retried(mock_api, retrying_client, no_sleep):
    route = mock_api.get("/football/leagues").mock(
        return_value=httpx.Response(401, json={"message": "Unauthenticated."})
    )

    with pytest.raises(SportMonksError) as exc_info:
        await retrying_client.leagues.all().get()

    assert route.call_count == 1
    assert exc_info.value.error_type is ErrorType.AUTH_ERROR
    assert exc_info.value.is_auth_error()


async def test_get_all_with_retry_mid_pagination(mock_api, retrying_client, no_sleep):
    responses = iter([
        httpx.Response(200, json={"data": [{"id": 1}], "pagination": {"has_more": True}}),
        httpx.Response(503),
        httpx.Response(200, json={"data": [{"id": 2}], "pagination": {"has_more": False}}),
    ])
    route = mock_api.get("/football/teams/countries/462").mock(side_effect=lambda request: next(responses))

    teams = await retrying_client.teams.by_country(462).per_page(1).get_all()

    assert teams == [{"id": 1}, {"id": 2}]
    assert [call.request.url.params["page"] for call in route.calls] == ["1", "2", "2"]


async def test_livescores_poller_over_client(mock_api, client):
    payloads = iter([
        {"data": [{"id": 1}, {"id": 2}], "pagination": {"has_more": False}},
        {"data": [{"id": 1}, {"id": 2}, {"id": 3}], "pagination": {"has_more": False}},
    ])
    last = {"data": [{"id": 1}, {"id": 2}, {"id": 3}], "pagination": {"has_more": False}}
    mock_api.get("/football/livescores/inplay").mock(
        side_effect=lambda request: httpx.Response(200, json=next(payloads, last))
    )
    updates = []

    poller = create_livescores_poller(
        lambda: client.livescores.inplay().get(),
        interval=0.01,
        on_data=updates.append,
    )
    async def two_updates():
        while len(updates) < 2:
            await asyncio.sleep(0.005)

    poller.start()
    try:
        await asyncio.wait_for(two_updates(), timeout=2.0)
    finally:
        poller.stop()

    assert [len(update["data"]) for update in updates] == [2, 3]
