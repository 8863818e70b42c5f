"""FastAPI application factory for the dashboard API."""

from __future__ import annotations

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from weatherdash.api.routers import health, log_search, weather
from weatherdash.config import WeatherdashSettings, get_settings
from weatherdash.logging import logger
from weatherdash.services.exceptions import WeatherError
from weatherdash.services.search_log import SearchLogStore


async def weather_error_handler(request: Request, exc: WeatherError) -> JSONResponse:
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


def create_app(
    settings: WeatherdashSettings | None = None,
    *,
    http_client: httpx.AsyncClient | None = None,
    log_store: SearchLogStore | None = None,
) -> FastAPI:
    """Build the app. An injected ``http_client`` is used as-is and never closed here."""

    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_client = app.state.http_client is None
        if owns_client:
            app.state.http_client = httpx.AsyncClient()
        logger.info("api_starting", environment=settings.environment)
        try:
            yield
        finally:
            if owns_client:
                await app.state.http_client.aclose()
                app.state.http_client = None
            logger.info("api_stopped")

    app = FastAPI(title="weatherdash", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.http_client = http_client
    app.state.log_store = log_store or SearchLogStore(settings.log_store.max_entries)

    app.add_exception_handler(WeatherError, weather_error_handler)
    app.include_router(health.router, tags=["Health"])
    app.include_router(weather.router, prefix="/api", tags=["Weather"])
    app.include_router(log_search.router, prefix="/api", tags=["Search log"])
    return app


__all__ = ["create_app", "weather_error_handler"]
