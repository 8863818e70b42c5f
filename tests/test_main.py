"""Tests for the server bootstrap and time helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from fastapi import FastAPI

from weatherdash import main as main_module
from weatherdash.config import ServerSettings, WeatherdashSettings
from weatherdash.utils.datetime import iso_timestamp


class DummyServer:
    instances: list["DummyServer"] = []

    def __init__(self, config) -> None:
        self.config = config
        self.served = False
        DummyServer.instances.append(self)

    async def serve(self) -> None:
        self.served = True


@pytest.mark.asyncio
async def test_main_bootstrap(monkeypatch):
    settings = WeatherdashSettings(_env_file=None, server=ServerSettings(port=8123))
    configured: list = []

    monkeypatch.setattr(main_module, "get_settings", lambda: settings)
    monkeypatch.setattr(main_module, "configure_logging", configured.append)
    monkeypatch.setattr(main_module.uvicorn, "Server", DummyServer)
    DummyServer.instances.clear()

    await main_module.main()

    assert configured == ["INFO"]
    server = DummyServer.instances[0]
    assert server.served is True
    assert server.config.port == 8123
    assert isinstance(server.config.app, FastAPI)
    assert server.config.app.state.settings is settings


def test_iso_timestamp_is_utc_with_millis():
    moment = datetime(2024, 5, 1, 14, 30, 15, 123456, tzinfo=timezone(timedelta(hours=2)))
    assert iso_timestamp(moment) == "2024-05-01T12:30:15.123Z"
