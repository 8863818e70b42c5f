"""Client for the dashboard's lookup endpoint."""

from __future__ import annotations

from typing import Any, Literal

import httpx
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, model_validator

from weatherdash.config import SearchSettings
from weatherdash.domain.models import WeatherSnapshot
from weatherdash.logging import logger
from weatherdash.services.exceptions import ErrorMessages, ValidationError

LookupKind = Literal["success", "not_found", "server_error", "network_error"]


class LookupResult(BaseModel):
    kind: LookupKind = Field(
        ...,
        description="success, or which of the three failure kinds occurred",
    )
    snapshot: WeatherSnapshot | None = None
    message: str | None = Field(default=None, description="User-facing error message")

    @model_validator(mode="after")
    def _validate_snapshot_message(self) -> "LookupResult":
        if self.kind == "success":
            if self.snapshot is None or self.message is not None:
                raise ValueError("success requires a snapshot and no message")
        elif self.snapshot is not None or not self.message:
            raise ValueError("failures carry a message and no snapshot")
        return self

    @property
    def ok(self) -> bool:
        return self.kind == "success"

    @classmethod
    def success(cls, snapshot: WeatherSnapshot) -> "LookupResult":
        return cls(kind="success", snapshot=snapshot)

    @classmethod
    def failure(cls, kind: LookupKind, message: str) -> "LookupResult":
        return cls(kind=kind, message=message)


class WeatherLookupClient:
    """Issues exactly one GET per lookup; no caching and no retry."""

    def __init__(self, http_client: httpx.AsyncClient, settings: SearchSettings | None = None) -> None:
        self._client = http_client
        self._settings = settings or SearchSettings()

    async def lookup(self, city: str) -> LookupResult:
        city = (city or "").strip()
        if not city:
            raise ValidationError(ErrorMessages.CITY_REQUIRED)

        try:
            response = await self._client.get(
                self._settings.weather_url,
                params={"city": city},
                headers={"Accept": "application/json"},
                timeout=self._settings.request_timeout_seconds,
            )
        except httpx.TimeoutException:
            logger.warning("lookup_timeout", city=city)
            return LookupResult.failure("network_error", ErrorMessages.NETWORK_ERROR)
        except httpx.RequestError as exc:
            logger.warning("lookup_transport_error", city=city, error=str(exc))
            return LookupResult.failure("network_error", ErrorMessages.NETWORK_ERROR)

        if response.status_code == 400:
            message = _error_field(response) or ErrorMessages.CITY_NOT_FOUND
            return LookupResult.failure("not_found", message)
        if not response.is_success:
            message = _error_field(response) or ErrorMessages.SERVER_ERROR
            logger.warning("lookup_server_error", city=city, status=response.status_code)
            return LookupResult.failure("server_error", message)

        try:
            snapshot = WeatherSnapshot.model_validate(response.json())
        except (ValueError, PydanticValidationError):
            logger.warning("lookup_malformed_body", city=city)
            return LookupResult.failure("server_error", ErrorMessages.UNKNOWN_ERROR)
        return LookupResult.success(snapshot)


def _error_field(response: httpx.Response) -> str | None:
    try:
        data: Any = response.json()
    except ValueError:
        return None
    if isinstance(data, dict) and isinstance(data.get("error"), str) and data["error"]:
        return data["error"]
    return None


__all__ = ["LookupKind", "LookupResult", "WeatherLookupClient"]
