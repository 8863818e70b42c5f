"""WeatherAPI.com integration used by the lookup endpoint."""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from weatherdash.config import ProviderSettings
from weatherdash.domain.models import WeatherSnapshot
from weatherdash.logging import logger
from weatherdash.services.exceptions import (
    ConfigurationError,
    ErrorMessages,
    TransportError,
    UpstreamError,
    UpstreamNotFound,
    ValidationError,
)


class WeatherProviderService:
    """Fetches current conditions for a city. One request per call, no retry."""

    def __init__(self, http_client: httpx.AsyncClient, settings: ProviderSettings) -> None:
        api_key = settings.api_key.get_secret_value() if settings.api_key else ""
        if not api_key:
            raise ConfigurationError(ErrorMessages.API_KEY_MISSING)
        self._client = http_client
        self._settings = settings
        self._api_key = api_key

    async def fetch_current(self, city: str) -> WeatherSnapshot:
        city = (city or "").strip()
        if not city:
            raise ValidationError(ErrorMessages.CITY_REQUIRED)

        params = {"key": self._api_key, "q": city, "aqi": "no"}
        logger.debug("provider_request", city=city)
        try:
            response = await self._client.get(
                str(self._settings.base_url),
                params=params,
                headers={"Accept": "application/json"},
                timeout=self._settings.request_timeout_seconds,
            )
        except httpx.TimeoutException as exc:
            logger.error("provider_timeout", city=city, error=str(exc))
            raise TransportError(ErrorMessages.NETWORK_ERROR) from exc
        except httpx.RequestError as exc:
            logger.error("provider_transport_error", city=city, error=str(exc))
            raise TransportError(ErrorMessages.NETWORK_ERROR) from exc

        if response.is_error:
            detail = _error_message(response)
            logger.warning(
                "provider_error_response",
                city=city,
                status=response.status_code,
                detail=detail,
            )
            if response.status_code == 400:
                raise UpstreamNotFound(detail or ErrorMessages.CITY_NOT_FOUND)
            raise UpstreamError(ErrorMessages.SERVER_ERROR)

        try:
            snapshot = WeatherSnapshot.model_validate(response.json())
        except (ValueError, PydanticValidationError) as exc:
            logger.error("provider_malformed_body", city=city, error=str(exc))
            raise UpstreamError(ErrorMessages.UNKNOWN_ERROR) from exc

        logger.info("provider_request_succeeded", city=city, location=snapshot.location.name)
        return snapshot


def _error_message(response: httpx.Response) -> str | None:
    # WeatherAPI nests errors as {"error": {"code": 1006, "message": "..."}}.
    try:
        data: Any = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"] or None
    if isinstance(data.get("message"), str):
        return data["message"] or None
    return None


__all__ = ["WeatherProviderService"]
