"""Fire-and-forget reporting of successful searches."""

from __future__ import annotations

import asyncio
from typing import Any

import httpx

from weatherdash.config import SearchSettings
from weatherdash.logging import logger


class BackgroundSearchLogger:
    """Posts ``{city}`` to the log endpoint from a detached task.

    Nothing here raises into, or blocks, the caller: every failure ends as a
    warning in the structured log.
    """

    def __init__(self, http_client: httpx.AsyncClient, settings: SearchSettings | None = None) -> None:
        self._client = http_client
        self._settings = settings or SearchSettings()
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        return len(self._pending)

    def log_search(self, city: str) -> asyncio.Task[None] | None:
        city = (city or "").strip()
        if not city:
            logger.debug("search_log_skipped_empty_city")
            return None
        task = asyncio.create_task(self._send(city))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def aclose(self) -> None:
        """Wait for notifications that are still in flight."""

        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def _send(self, city: str) -> None:
        try:
            response = await self._client.post(
                self._settings.log_url,
                json={"city": city},
                timeout=self._settings.log_timeout_seconds,
            )
            if not response.is_success:
                logger.warning("search_log_rejected", city=city, status=response.status_code)
                return
            body: Any = response.json()
            if not isinstance(body, dict) or body.get("success") is not True:
                logger.warning("search_log_not_recorded", city=city, body=body)
                return
            logger.debug("search_log_sent", city=city)
        except Exception as exc:
            logger.warning("search_log_failed", city=city, error=repr(exc))


__all__ = ["BackgroundSearchLogger"]
