"""In-memory record of successful searches."""

from __future__ import annotations

from collections import deque
from typing import Deque

from weatherdash.domain.models import SearchLogEntry
from weatherdash.logging import logger
from weatherdash.services.exceptions import ValidationError
from weatherdash.utils.datetime import iso_timestamp

DEFAULT_MAX_ENTRIES = 1000


class SearchLogStore:
    """Process-lifetime log, oldest entries evicted once ``max_entries`` is exceeded."""

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be >= 1")
        self._entries: Deque[SearchLogEntry] = deque(maxlen=max_entries)

    def record(self, city: str) -> SearchLogEntry:
        city = (city or "").strip()
        if not city:
            raise ValidationError("City is required and must be a non-empty string")
        entry = SearchLogEntry(city=city, timestamp=iso_timestamp())
        self._entries.append(entry)
        logger.debug("search_logged", city=city, total_logs=len(self._entries))
        return entry

    def entries(self) -> list[SearchLogEntry]:
        return list(self._entries)

    @property
    def count(self) -> int:
        return len(self._entries)

    @property
    def max_entries(self) -> int:
        return self._entries.maxlen or 0

    def clear(self) -> None:
        self._entries.clear()


__all__ = ["DEFAULT_MAX_ENTRIES", "SearchLogStore"]
