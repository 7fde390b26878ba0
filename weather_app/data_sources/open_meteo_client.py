"""Helpers for calling the Open-Meteo geocoding and forecast APIs."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests

from weather_app.config import settings
from weather_app.errors import ForecastTransportError, GeocodeTransportError, UpstreamPayloadError
from utils.logging_utils import get_tagged_logger
logger = get_tagged_logger(__name__, tag='open_meteo_client')

session = requests.Session()

CURRENT_VARS = [
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "is_day",
    "weather_code",
    "cloud_cover",
    "pressure_msl",
    "wind_speed_10m",
    "wind_direction_10m",
]
DAILY_VARS = ["sunrise", "sunset", "uv_index_max"]

EXPECTED_CURRENT_UNITS = {
    "temperature_2m": "°F",
    "apparent_temperature": "°F",
    "relative_humidity_2m": "%",
    "cloud_cover": "%",
    "pressure_msl": "hPa",
    "wind_speed_10m": "mph",
}

# Acceptable alternative spellings that should not trigger warnings.
ALLOWED_CURRENT_UNIT_SYNONYMS = {
    "relative_humidity_2m": {"%", "percent"},
    "cloud_cover": {"%", "percent"},
    "wind_speed_10m": {"mph", "mp/h"},
}


@dataclass
class GeocodeMatch:
    """Best geocoding match for a place name."""
    latitude: float
    longitude: float
    name: str
    country_code: Optional[str]
    country: Optional[str]


@dataclass
class CurrentConditions:
    """Current observation block of a forecast response."""
    temperature: float
    apparent_temperature: float
    relative_humidity: int
    weather_code: int
    is_day: int
    cloud_cover: int
    pressure_msl: float
    wind_speed: float


@dataclass
class DailySummary:
    """Today's entry from the daily block of a forecast response."""
    sunrise: str
    sunset: str
    uv_index_max: Optional[float]


@dataclass
class ForecastPayload:
    """Parsed forecast response."""
    current: CurrentConditions
    daily: DailySummary


def _warn_on_unexpected_units(units: dict, *, context: str):
    """Log a warning if Open-Meteo returns units we did not request/expect."""
    if not units:
        return
    for field, expected in EXPECTED_CURRENT_UNITS.items():
        actual = units.get(field)
        if actual and actual != expected:
            allowed = ALLOWED_CURRENT_UNIT_SYNONYMS.get(field, set())
            if actual not in allowed:
                logger.warning(
                    "Unexpected Open-Meteo unit for %s: %r (expected %r, %s)", field, actual, expected, context
                )


def _first(daily: dict, key: str):
    """Return today's value from a daily column, or None when absent."""
    col = daily.get(key)
    if not col:
        return None
    return col[0]


def geocode(name: str) -> Optional[GeocodeMatch]:
    """Look up the single best match for a place name.

    Returns None when the geocoder has no result for the name.
    """
    params = {"name": name, "count": 1, "language": "en", "format": "json"}
    logger.debug("Geocoding request %s params=%s", settings.geocoding_url, params)

    try:
        resp = session.get(settings.geocoding_url, params=params, timeout=settings.request_timeout_seconds)
    except requests.exceptions.RequestException as exc:
        raise GeocodeTransportError(f"Failed to get coordinates for {name}: Geocoding failed: {exc}") from exc

    logger.info("Geocoding response status %s for %r", resp.status_code, name)
    if not resp.ok:
        raise GeocodeTransportError(f"Failed to get coordinates for {name}: Geocoding failed: {resp.reason}")

    try:
        data = resp.json()
    except ValueError as exc:
        raise UpstreamPayloadError(f"Geocoding returned non-JSON response: {resp.text[:200]}") from exc

    results = data.get("results") or []
    if not results:
        return None

    r = results[0]
    try:
        return GeocodeMatch(
            latitude=r["latitude"],
            longitude=r["longitude"],
            name=r["name"],
            country_code=r.get("country_code"),
            country=r.get("country"),
        )
    except (KeyError, TypeError) as exc:
        raise UpstreamPayloadError(f"Geocoding result missing field: {exc}") from exc


def fetch_forecast(latitude: float, longitude: float) -> ForecastPayload:
    """Fetch current conditions and today's daily summary in imperial units."""
    params = {
        "latitude": latitude,
        "longitude": longitude,
        "current": ",".join(CURRENT_VARS),
        "daily": ",".join(DAILY_VARS),
        "timezone": "auto",
        "temperature_unit": "fahrenheit",
        "wind_speed_unit": "mph",
        "precipitation_unit": "inch",
    }
    logger.debug("Forecast request %s params=%s", settings.forecast_url, params)

    try:
        resp = session.get(settings.forecast_url, params=params, timeout=settings.request_timeout_seconds)
    except requests.exceptions.RequestException as exc:
        raise ForecastTransportError(f"Weather API error: {exc}") from exc

    logger.info("Forecast response status %s for (%s, %s)", resp.status_code, latitude, longitude)
    if not resp.ok:
        raise ForecastTransportError(f"Weather API error: {resp.status_code} {resp.reason}")

    try:
        data = resp.json()
    except ValueError as exc:
        raise UpstreamPayloadError(f"Weather API returned non-JSON response: {resp.text[:200]}") from exc

    try:
        current = data["current"]
        daily = data["daily"]
        _warn_on_unexpected_units(data.get("current_units", {}), context="weather_current")
        return ForecastPayload(
            current=CurrentConditions(
                temperature=current["temperature_2m"],
                apparent_temperature=current["apparent_temperature"],
                relative_humidity=current["relative_humidity_2m"],
                weather_code=current["weather_code"],
                is_day=current["is_day"],
                cloud_cover=current["cloud_cover"],
                pressure_msl=current["pressure_msl"],
                wind_speed=current["wind_speed_10m"],
            ),
            daily=DailySummary(
                sunrise=daily["sunrise"][0],
                sunset=daily["sunset"][0],
                uv_index_max=_first(daily, "uv_index_max"),
            ),
        )
    except (KeyError, IndexError, TypeError) as exc:
        raise UpstreamPayloadError(f"Weather API response missing field: {exc}") from exc
