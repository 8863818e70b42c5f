"""Tests for the client side of the lookup boundary."""

from __future__ import annotations

import httpx
import pytest
from pydantic import ValidationError as PydanticValidationError

from weatherdash.client.lookup import LookupResult, WeatherLookupClient
from weatherdash.services.exceptions import ErrorMessages, ValidationError


@pytest.mark.asyncio
async def test_success_parses_snapshot(search_settings, payload):
    requested: list[httpx.URL] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        requested.append(request.url)
        return httpx.Response(200, json=payload)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        result = await WeatherLookupClient(client, search_settings).lookup(" Lon ")

    assert result.kind == "success"
    assert result.ok is True
    assert result.snapshot.location.name == "London"
    assert result.message is None
    assert len(requested) == 1
    assert requested[0].path == "/api/weather"
    assert requested[0].params["city"] == "Lon"


@pytest.mark.asyncio
async def test_blank_city_raises_without_request(search_settings):
    calls = 0

    async def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(200, json={})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(ValidationError):
            await WeatherLookupClient(client, search_settings).lookup("  ")
    assert calls == 0


@pytest.mark.asyncio
async def test_400_is_not_found_with_server_message(search_settings):
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"error": "City not found"})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        result = await WeatherLookupClient(client, search_settings).lookup("Paris")

    assert result.kind == "not_found"
    assert result.message == "City not found"
    assert result.snapshot is None


@pytest.mark.asyncio
async def test_400_without_message_uses_default(search_settings):
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, text="nope")

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        result = await WeatherLookupClient(client, search_settings).lookup("Paris")

    assert result.kind == "not_found"
    assert result.message == ErrorMessages.CITY_NOT_FOUND


@pytest.mark.asyncio
async def test_500_is_server_error(search_settings):
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        result = await WeatherLookupClient(client, search_settings).lookup("London")

    assert result.kind == "server_error"
    assert result.message == ErrorMessages.SERVER_ERROR


@pytest.mark.asyncio
async def test_malformed_success_body_is_server_error(search_settings):
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>")

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        result = await WeatherLookupClient(client, search_settings).lookup("London")

    assert result.kind == "server_error"
    assert result.message == ErrorMessages.UNKNOWN_ERROR


@pytest.mark.parametrize(
    "error",
    [httpx.ReadTimeout, httpx.ConnectError, httpx.RemoteProtocolError],
)
@pytest.mark.asyncio
async def test_transport_failures_are_network_errors(search_settings, error):
    async def handler(request: httpx.Request) -> httpx.Response:
        raise error("failed", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        result = await WeatherLookupClient(client, search_settings).lookup("London")

    assert result.kind == "network_error"
    assert result.message == ErrorMessages.NETWORK_ERROR


class RecordingClient:
    def __init__(self) -> None:
        self.kwargs: dict = {}

    async def get(self, url, **kwargs):
        self.kwargs = kwargs
        raise httpx.ConnectError("offline", request=httpx.Request("GET", url))


@pytest.mark.asyncio
async def test_request_uses_bounded_timeout(search_settings):
    client = RecordingClient()
    await WeatherLookupClient(client, search_settings).lookup("London")
    assert client.kwargs["timeout"] == search_settings.request_timeout_seconds == 10.0


def test_result_shape_is_validated(snapshot):
    with pytest.raises(PydanticValidationError):
        LookupResult(kind="success")
    with pytest.raises(PydanticValidationError):
        LookupResult(kind="not_found", snapshot=snapshot, message="x")
    with pytest.raises(PydanticValidationError):
        LookupResult(kind="network_error")
