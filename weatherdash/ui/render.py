"""Plain-text rendering of the visible state."""

from __future__ import annotations

from datetime import datetime

from weatherdash.domain.models import VisibleState, WeatherSnapshot

EMPTY_HINT = "Start typing to search for weather information"
LOADING_TEXT = "Loading weather data..."


def render_state(state: VisibleState) -> str:
    """Return exactly one view: hint, spinner, error banner or weather card."""

    if state.status == "loading":
        return LOADING_TEXT
    if state.status == "failed":
        return f"Error: {state.error}"
    if state.status == "loaded" and state.snapshot is not None:
        return render_card(state.snapshot)
    return EMPTY_HINT


def render_card(snapshot: WeatherSnapshot) -> str:
    location = snapshot.location
    current = snapshot.current
    place = ", ".join(part for part in (location.region, location.country) if part)
    lines = [location.name]
    if place:
        lines.append(place)
    lines.append(f"{round(current.temp_c)}°C  {current.condition.text}".rstrip())

    metrics = [
        ("Feels like", _fmt(current.feelslike_c, "°C", rounded=True)),
        ("Humidity", _fmt(current.humidity, "%")),
        ("Wind", _fmt(current.wind_kph, " km/h")),
        ("Direction", current.wind_dir),
        ("Pressure", _fmt(current.pressure_mb, " mb")),
        ("UV index", _fmt(current.uv, "")),
        ("Visibility", _fmt(current.vis_km, " km")),
        ("Cloud cover", _fmt(current.cloud, "%")),
    ]
    lines.extend(f"{label}: {value}" for label, value in metrics if value)

    updated = format_last_updated(current.last_updated)
    if updated:
        lines.append(f"Last updated: {updated}")
    return "\n".join(lines)


def format_last_updated(value: str) -> str | None:
    # WeatherAPI sends local time as "YYYY-MM-DD HH:MM".
    try:
        return datetime.fromisoformat(value.strip()).strftime("%H:%M")
    except (AttributeError, ValueError):
        return None


def _fmt(value: float | int | None, unit: str, *, rounded: bool = False) -> str | None:
    if value is None:
        return None
    if rounded:
        value = round(value)
    return f"{value:g}{unit}" if isinstance(value, float) else f"{value}{unit}"


__all__ = ["EMPTY_HINT", "LOADING_TEXT", "format_last_updated", "render_card", "render_state"]
