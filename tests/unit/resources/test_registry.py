"""Tests for the resource descriptor table."""

import pytest

from sportmonks_client.resources.registry import FOOTBALL_ROOT, RESOURCES, Endpoint, ResourceDescriptor


def test_all_resources_present():
    assert set(RESOURCES) == {
        "leagues", "teams", "players", "standings", "livescores", "coaches", "referees",
        "transfers", "venues", "fixtures", "news", "seasons", "schedules", "squads",
    }


@pytest.mark.parametrize("name", sorted(RESOURCES))
def test_resource_roots(name):
    assert RESOURCES[name].root == f"{FOOTBALL_ROOT}/{name}"


def test_args_default_to_placeholder_order():
    assert Endpoint("/between/{start_date}/{end_date}").args == ("start_date", "end_date")
    assert Endpoint("").args == ()


def test_explicit_args_must_match_placeholders():
    with pytest.raises(ValueError, match="do not match placeholders"):
        Endpoint("/teams/{team_id}", args=("season_id",))


def test_optional_args_need_no_placeholder():
    endpoint = Endpoint("/squads/teams/{team_id}", args=("team_id", "season_id"), optional=("season_id",))
    assert endpoint.args == ("team_id", "season_id")

    with pytest.raises(ValueError, match="do not match placeholders"):
        Endpoint("/squads/teams/{team_id}", args=("team_id", "season_id"))


def test_teams_squad_args():
    squad = RESOURCES["teams"].endpoints["squad"]
    assert squad.args == ("team_id", "season_id")
    assert squad.optional == ("season_id",)


def test_explicit_args_reorder():
    endpoint = RESOURCES["fixtures"].endpoints["by_team_and_date_range"]
    assert endpoint.args == ("team_id", "start_date", "end_date")


def test_endpoints_read_only():
    descriptor = ResourceDescriptor("x", "/x", {"all": Endpoint("")})
    with pytest.raises(TypeError):
        descriptor.endpoints["other"] = Endpoint("/other")


def test_squad_endpoints_use_football_root():
    endpoints = RESOURCES["teams"].endpoints
    assert endpoints["squad"].root == FOOTBALL_ROOT
    assert endpoints["squad"].overload == "squad_by_season"
    assert endpoints["squad_by_season"].root == FOOTBALL_ROOT


@pytest.mark.parametrize("resource, length", [
    ("players", 2), ("referees", 3), ("venues", 3), ("fixtures", 3), ("leagues", 1), ("teams", 1),
])
def test_search_min_length(resource, length):
    assert RESOURCES[resource].endpoints["search"].min_query_length == length
