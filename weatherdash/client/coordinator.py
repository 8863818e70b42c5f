"""Debounced search coordination with stale-response suppression.

Every call to :meth:`SearchCoordinator.update_query` starts a new cycle: the
pending debounce timer is cancelled, the sequence counter is bumped and the
new value captures it as its token. When a cycle's lookup resolves, its outcome
is applied only while its token is still the counter's current value, so the
visible state always reflects the most recently scheduled cycle no matter in
which order the network calls complete.

In-flight lookups are never cancelled. A superseded lookup runs to completion
and its outcome is then dropped by the token check.
"""

from __future__ import annotations

import asyncio
from typing import Callable, Protocol

from weatherdash.client.lookup import LookupResult
from weatherdash.domain.models import VisibleState
from weatherdash.logging import logger
from weatherdash.services.exceptions import ErrorMessages, WeatherError

DEFAULT_DEBOUNCE_SECONDS = 0.5

StateListener = Callable[[VisibleState], None]


class LookupClient(Protocol):
    async def lookup(self, city: str) -> LookupResult: ...


class SearchLogger(Protocol):
    def log_search(self, city: str) -> object: ...


class SearchCoordinator:
    def __init__(
        self,
        lookup_client: LookupClient,
        search_logger: SearchLogger,
        *,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
    ) -> None:
        if debounce_seconds < 0:
            raise ValueError("debounce_seconds must be >= 0")
        self._lookup = lookup_client
        self._search_logger = search_logger
        self._debounce_seconds = debounce_seconds
        self._sequence = 0
        self._state = VisibleState.idle()
        self._timer: asyncio.Task[None] | None = None
        self._in_flight: set[asyncio.Task[None]] = set()
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> VisibleState:
        return self._state

    @property
    def sequence(self) -> int:
        return self._sequence

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called after every transition; returns an unsubscribe callable."""

        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def update_query(self, value: str) -> int:
        """Start a new debounce cycle for ``value`` and return its token."""

        if self._timer is not None and not self._timer.done():
            self._timer.cancel()
        self._sequence += 1
        token = self._sequence
        if not (value or "").strip():
            self._apply(token, VisibleState.idle())
        self._timer = asyncio.create_task(self._debounce(value or "", token))
        return token

    async def wait_idle(self) -> None:
        """Wait until no timer is pending and no lookup is in flight."""

        while True:
            timer = self._timer
            if timer is not None and not timer.done():
                await asyncio.wait([timer])
                continue
            if self._in_flight:
                await asyncio.gather(*list(self._in_flight), return_exceptions=True)
                continue
            return

    async def aclose(self) -> None:
        if self._timer is not None and not self._timer.done():
            self._timer.cancel()
            await asyncio.wait([self._timer])
        if self._in_flight:
            await asyncio.gather(*list(self._in_flight), return_exceptions=True)

    async def _debounce(self, value: str, token: int) -> None:
        await asyncio.sleep(self._debounce_seconds)
        # Spawned separately so a later cancel of the timer cannot reach the lookup.
        task = asyncio.create_task(self._run_cycle(value, token))
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)

    async def _run_cycle(self, value: str, token: int) -> None:
        city = value.strip()
        if not city:
            self._apply(token, VisibleState.idle())
            return

        if not self._apply(token, self._state.loading()):
            return

        try:
            result = await self._lookup.lookup(city)
        except WeatherError as exc:
            result = None
            failure = exc.message
        except Exception:
            logger.exception("lookup_crashed", city=city, token=token)
            result = None
            failure = ErrorMessages.UNKNOWN_ERROR
        else:
            failure = result.message or ErrorMessages.UNKNOWN_ERROR

        if result is not None and result.ok and result.snapshot is not None:
            if self._apply(token, VisibleState.loaded(result.snapshot)):
                self._fire_search_log(city)
            return
        self._apply(token, VisibleState.failed(failure))

    def _apply(self, token: int, state: VisibleState) -> bool:
        if token != self._sequence:
            logger.debug("stale_outcome_discarded", token=token, current=self._sequence, status=state.status)
            return False
        if state == self._state:
            return True
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("state_listener_failed", status=state.status)
        return True

    def _fire_search_log(self, city: str) -> None:
        try:
            self._search_logger.log_search(city)
        except Exception:
            logger.warning("search_log_dispatch_failed", city=city, exc_info=True)


__all__ = ["DEFAULT_DEBOUNCE_SECONDS", "SearchCoordinator", "StateListener"]
