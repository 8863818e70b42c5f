"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, BaseModel, Field, HttpUrl, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProviderSettings(BaseModel):
    api_key: SecretStr | None = Field(
        default=None,
        description="WeatherAPI.com key. There is no built-in fallback.",
    )
    base_url: HttpUrl = Field(default="https://api.weatherapi.com/v1/current.json")
    request_timeout_seconds: float = Field(default=10.0, gt=0, le=60)

    @field_validator("api_key", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class SearchSettings(BaseModel):
    api_base_url: AnyHttpUrl = Field(
        default="http://127.0.0.1:8000",
        description="Where the dashboard API is served from.",
    )
    weather_path: str = "/api/weather"
    log_path: str = "/api/log-search"
    debounce_ms: int = Field(default=500, ge=0, le=10_000)
    request_timeout_seconds: float = Field(default=10.0, gt=0, le=60)
    log_timeout_seconds: float = Field(default=5.0, gt=0, le=60)

    @field_validator("weather_path", "log_path")
    @classmethod
    def _require_leading_slash(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("endpoint paths must start with '/'")
        return value

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000

    def endpoint(self, path: str) -> str:
        return f"{str(self.api_base_url).rstrip('/')}{path}"

    @property
    def weather_url(self) -> str:
        return self.endpoint(self.weather_path)

    @property
    def log_url(self) -> str:
        return self.endpoint(self.log_path)


class LogStoreSettings(BaseModel):
    max_entries: int = Field(default=1000, ge=1, le=100_000)


class ServerSettings(BaseModel):
    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)


class WeatherdashSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WEATHERDASH_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    provider: ProviderSettings = Field(default_factory=ProviderSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    log_store: LogStoreSettings = Field(default_factory=LogStoreSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)


@lru_cache
def get_settings() -> WeatherdashSettings:
    """Return cached settings instance."""

    return WeatherdashSettings()


__all__ = [
    "LogStoreSettings",
    "ProviderSettings",
    "SearchSettings",
    "ServerSettings",
    "WeatherdashSettings",
    "get_settings",
]
