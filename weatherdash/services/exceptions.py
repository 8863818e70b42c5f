"""Domain-specific exceptions and the user-facing messages they carry."""

from __future__ import annotations


class ErrorMessages:
    CITY_REQUIRED = "Please enter a city name"
    CITY_NOT_FOUND = "City not found. Please check the spelling and try again."
    NETWORK_ERROR = "Network error. Please check your connection and try again."
    SERVER_ERROR = "Server error. Please try again later."
    UNKNOWN_ERROR = "An unexpected error occurred. Please try again."
    API_KEY_MISSING = "Weather API key is not configured."


class WeatherError(Exception):
    kind = "unknown"
    status_code = 500
    default_message = ErrorMessages.UNKNOWN_ERROR

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(WeatherError):
    """Bad or missing input; raised before any network call."""

    kind = "validation"
    status_code = 400
    default_message = ErrorMessages.CITY_REQUIRED


class UpstreamNotFound(WeatherError):
    kind = "not_found"
    status_code = 400
    default_message = ErrorMessages.CITY_NOT_FOUND


class UpstreamError(WeatherError):
    kind = "server_error"
    status_code = 500
    default_message = ErrorMessages.SERVER_ERROR


class TransportError(WeatherError):
    """Timeout or connectivity failure talking to a remote service."""

    kind = "network_error"
    status_code = 500
    default_message = ErrorMessages.NETWORK_ERROR


class ConfigurationError(WeatherError):
    kind = "configuration"
    status_code = 500
    default_message = ErrorMessages.API_KEY_MISSING


__all__ = [
    "ConfigurationError",
    "ErrorMessages",
    "TransportError",
    "UpstreamError",
    "UpstreamNotFound",
    "ValidationError",
    "WeatherError",
]
