"""Line-oriented terminal front end.

Each input line stands in for the current value of the search box.
"""

from __future__ import annotations

import asyncio
import sys
from typing import Callable, TextIO

import httpx

from weatherdash.client.coordinator import SearchCoordinator
from weatherdash.client.lookup import WeatherLookupClient
from weatherdash.client.search_logger import BackgroundSearchLogger
from weatherdash.config import WeatherdashSettings, get_settings
from weatherdash.logging import configure_logging, logger
from weatherdash.ui.render import render_state


async def run_console(
    coordinator: SearchCoordinator,
    *,
    stream: TextIO | None = None,
    write: Callable[[str], None] = print,
) -> None:
    stream = stream or sys.stdin
    unsubscribe = coordinator.subscribe(lambda state: write(render_state(state)))
    write(render_state(coordinator.state))
    try:
        while True:
            line = await asyncio.to_thread(stream.readline)
            if not line:
                break
            coordinator.update_query(line.rstrip("\r\n"))
        await coordinator.wait_idle()
    finally:
        unsubscribe()


async def main(settings: WeatherdashSettings | None = None) -> None:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    async with httpx.AsyncClient() as http_client:
        lookup_client = WeatherLookupClient(http_client, settings.search)
        search_logger = BackgroundSearchLogger(http_client, settings.search)
        coordinator = SearchCoordinator(
            lookup_client,
            search_logger,
            debounce_seconds=settings.search.debounce_seconds,
        )
        logger.info("console_starting", api_base_url=str(settings.search.api_base_url))
        try:
            await run_console(coordinator)
        finally:
            await coordinator.aclose()
            await search_logger.aclose()


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
