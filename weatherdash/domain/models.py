"""Pydantic models shared by the API, the services and the client."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class Location(_Frozen):
    name: str
    region: str = ""
    country: str = ""
    localtime: str | None = None


class Condition(_Frozen):
    text: str = ""
    icon: str = ""
    code: int | None = None


class CurrentConditions(_Frozen):
    last_updated: str
    temp_c: float
    temp_f: float | None = None
    feelslike_c: float | None = None
    condition: Condition = Field(default_factory=Condition)
    humidity: int | None = None
    wind_kph: float | None = None
    wind_dir: str | None = None
    pressure_mb: float | None = None
    uv: float | None = None
    vis_km: float | None = None
    cloud: int | None = None


class WeatherSnapshot(_Frozen):
    """Current weather for one resolved location, as returned by the provider."""

    location: Location
    current: CurrentConditions


class SearchLogEntry(_Frozen):
    city: str
    timestamp: str


class SearchLogPage(BaseModel):
    logs: list[SearchLogEntry]
    count: int


class LogSearchRequest(BaseModel):
    city: str


class LogSearchAck(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    logged_at: str | None = Field(default=None, alias="loggedAt")
    error: str | None = None


class ErrorBody(BaseModel):
    error: str


class VisibleState(_Frozen):
    """What the UI shows. Exactly one of hint, spinner, card or banner at a time."""

    status: Literal["idle", "loading", "loaded", "failed"] = "idle"
    snapshot: WeatherSnapshot | None = None
    error: str | None = None

    @model_validator(mode="after")
    def _validate_shape(self) -> "VisibleState":
        if self.status == "loaded" and (self.snapshot is None or self.error):
            raise ValueError("loaded state requires a snapshot and no error")
        if self.status == "failed" and (not self.error or self.snapshot is not None):
            raise ValueError("failed state requires an error and no snapshot")
        if self.status == "idle" and (self.snapshot is not None or self.error):
            raise ValueError("idle state carries neither snapshot nor error")
        if self.status == "loading" and self.error:
            raise ValueError("loading state cannot carry an error")
        return self

    @classmethod
    def idle(cls) -> "VisibleState":
        return cls()

    @classmethod
    def loaded(cls, snapshot: WeatherSnapshot) -> "VisibleState":
        return cls(status="loaded", snapshot=snapshot)

    @classmethod
    def failed(cls, message: str) -> "VisibleState":
        return cls(status="failed", error=message)

    def loading(self) -> "VisibleState":
        return VisibleState(status="loading", snapshot=self.snapshot)


__all__ = [
    "Condition",
    "CurrentConditions",
    "ErrorBody",
    "Location",
    "LogSearchAck",
    "LogSearchRequest",
    "SearchLogEntry",
    "SearchLogPage",
    "VisibleState",
    "WeatherSnapshot",
]
