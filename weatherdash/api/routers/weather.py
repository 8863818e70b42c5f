"""GET /api/weather: current conditions for a city."""

from __future__ import annotations

from time import perf_counter

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from weatherdash.logging import logger
from weatherdash.services.exceptions import ErrorMessages, ValidationError, WeatherError
from weatherdash.services.provider import WeatherProviderService

router = APIRouter()


@router.get("/weather")
async def get_weather(request: Request, city: str | None = Query(default=None)):
    started_at = perf_counter()
    if not city or not city.strip():
        logger.warning("weather_request_missing_city")
        raise ValidationError(ErrorMessages.CITY_REQUIRED)

    settings = request.app.state.settings
    try:
        provider = WeatherProviderService(request.app.state.http_client, settings.provider)
        snapshot = await provider.fetch_current(city)
    except WeatherError as exc:
        logger.warning(
            "weather_request_failed",
            city=city,
            kind=exc.kind,
            status=exc.status_code,
            duration_ms=_elapsed_ms(started_at),
        )
        raise
    except Exception:
        logger.exception("weather_request_crashed", city=city, duration_ms=_elapsed_ms(started_at))
        return JSONResponse({"error": ErrorMessages.UNKNOWN_ERROR}, status_code=500)

    logger.info("weather_request_completed", city=city, duration_ms=_elapsed_ms(started_at))
    return snapshot.model_dump()


def _elapsed_ms(started_at: float) -> int:
    return int((perf_counter() - started_at) * 1000)
