"""
Basic SportMonks Client Usage Examples

Demonstrates resources, includes, filters and pagination.

Requires SPORTMONKS_API_TOKEN in the environment or in .env.
"""

import asyncio

from sportmonks_client import SportMonksClient, SportMonksError


async def live_leagues(client: SportMonksClient):
    """Leagues with fixtures in play."""
    print("\n=== Live Leagues ===")

    response = await client.leagues.live().include("country").get()
    for league in response["data"]:
        print(f"{league['id']}: {league['name']}")


async def fixtures_with_events(client: SportMonksClient):
    """Fixtures on a date with selected event fields."""
    print("\n=== Fixtures by Date ===")

    response = await (
        client.fixtures.by_date("2024-01-15")
        .include(["participants", "league.country"])
        .include_fields("events", ["player_name", "minute"])
        .filter("eventTypes", [14, 15])
        .order_by("starting_at")
        .per_page(25)
        .get()
    )
    print(f"Fixtures: {len(response['data'])}")


async def all_teams_of_country(client: SportMonksClient):
    """Every page of a paginated endpoint."""
    print("\n=== All Teams (Denmark) ===")

    teams = await client.teams.by_country(320).select(["name", "short_code"]).get_all()
    print(f"Teams: {len(teams)}")


async def squad_for_season(client: SportMonksClient):
    """Squad endpoints live under /football/squads."""
    print("\n=== Squad ===")

    response = await client.teams.squad(85, season_id=21646).include("player").get()
    print(f"Players: {len(response['data'])}")


async def error_handling(client: SportMonksClient):
    """Classified errors."""
    print("\n=== Error Handling ===")

    try:
        await client.leagues.by_id(999999999).get()
    except SportMonksError as e:
        print(f"{e.error_type.value}: {e.message}")
        print(f"User message: {e.get_user_message()}")


async def main():
    async with SportMonksClient.from_env(max_retries=2) as client:
        await live_leagues(client)
        await fixtures_with_events(client)
        await all_teams_of_country(client)
        await squad_for_season(client)
        await error_handling(client)


if __name__ == "__main__":
    asyncio.run(main())
