"""Time utilities with timezone-aware defaults."""

from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return current UTC time with tzinfo."""

    return datetime.now(timezone.utc)


def iso_timestamp(moment: datetime | None = None) -> str:
    """Format as ISO-8601 UTC with millisecond precision, e.g. ``2024-05-01T12:00:00.000Z``."""

    moment = (moment or utc_now()).astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


__all__ = ["iso_timestamp", "utc_now"]
