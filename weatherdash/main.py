"""API server entrypoint."""

from __future__ import annotations

import asyncio

import uvicorn

from weatherdash.api import create_app
from weatherdash.config import get_settings
from weatherdash.logging import configure_logging, logger


async def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    if settings.provider.api_key is None:
        logger.warning("provider_api_key_missing")

    app = create_app(settings)
    config = uvicorn.Config(
        app,
        host=settings.server.host,
        port=settings.server.port,
        log_config=None,
    )
    logger.info(
        "server_starting",
        environment=settings.environment,
        host=settings.server.host,
        port=settings.server.port,
    )
    await uvicorn.Server(config).serve()


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
