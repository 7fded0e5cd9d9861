"""
Polling Examples

Watches in-play fixtures and the transfer feed for changes.

Requires SPORTMONKS_API_TOKEN in the environment or in .env.
"""

import asyncio

from sportmonks_client import (
    LoggingConfig,
    SportMonksClient,
    SportMonksConfig,
    create_livescores_poller,
    create_transfers_poller,
)
from sportmonks_client.core.env_config import SportMonksSettings


def on_livescores(payload):
    print(f"In play: {len(payload['data'])} fixtures")


def on_transfers(payload):
    latest = max(payload["data"], key=lambda item: item.get("date") or "")
    print(f"New transfer: player {latest.get('player_id')} on {latest.get('date')}")


def on_error(error):
    print(f"Poll failed: {error}")


async def main():
    settings = SportMonksSettings()
    config = SportMonksConfig.create(
        max_retries=2,
        logging=LoggingConfig.create(level="INFO", format="json"),
    )

    async with SportMonksClient(settings.api_token, config=config) as client:
        livescores = create_livescores_poller(
            lambda: client.livescores.inplay().include(["participants", "scores"]).get(),
            interval=15,
            max_duration=120,
            on_data=on_livescores,
            on_error=on_error,
        )
        transfers = create_transfers_poller(
            lambda: client.transfers.latest().get(),
            max_duration=120,
            on_data=on_transfers,
            on_error=on_error,
        )

        livescores.start()
        transfers.start()

        await livescores.wait_stopped()
        transfers.stop()


if __name__ == "__main__":
    asyncio.run(main())
