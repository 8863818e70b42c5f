"""Search log endpoints.

POST always answers 200 so that a logging failure can never be mistaken for a
lookup failure by the caller; the ``success`` flag carries the outcome.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request

from weatherdash.domain.models import LogSearchAck, SearchLogPage
from weatherdash.logging import logger
from weatherdash.services.exceptions import ValidationError
from weatherdash.services.search_log import SearchLogStore

router = APIRouter()


def _store(request: Request) -> SearchLogStore:
    return request.app.state.log_store


@router.post("/log-search")
async def log_search(request: Request) -> dict[str, Any]:
    try:
        payload = await request.json()
    except ValueError:
        logger.warning("log_search_malformed_body")
        ack = LogSearchAck(success=False, error="Request body must be JSON")
        return ack.model_dump(by_alias=True, exclude_none=True)

    city = payload.get("city") if isinstance(payload, dict) else None
    if not isinstance(city, str):
        city = ""
    try:
        entry = _store(request).record(city)
    except ValidationError as exc:
        logger.warning("log_search_invalid_city", city=city)
        ack = LogSearchAck(success=False, error=exc.message)
    else:
        ack = LogSearchAck(success=True, logged_at=entry.timestamp)
    return ack.model_dump(by_alias=True, exclude_none=True)


@router.get("/log-search")
async def list_search_logs(request: Request) -> dict[str, Any]:
    store = _store(request)
    logger.debug("log_search_listed", count=store.count)
    return SearchLogPage(logs=store.entries(), count=store.count).model_dump()
