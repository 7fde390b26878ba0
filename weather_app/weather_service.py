"""Fetch a forecast for a resolved location and shape it into a WeatherReport."""
from __future__ import annotations

from typing import Optional

from weather_app.conditions import (
    condition_icon,
    describe_condition,
    dew_point,
    estimate_visibility,
    format_clock_time,
    is_daytime,
    round_half_away,
)
from weather_app.data_sources import ForecastPayload, WeatherDataSource
from weather_app.location_resolver import ResolvedLocation
from weather_app.models import WeatherReport
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="weather_service")


def _rounded_dew_point(temperature: float, humidity: float) -> Optional[int]:
    value = dew_point(temperature, humidity)
    if value is None:
        logger.warning("Dew point undefined for humidity %s", humidity)
        return None
    return round_half_away(value)


def build_report(location: ResolvedLocation, payload: ForecastPayload) -> WeatherReport:
    """Derive display fields from a raw forecast. Pure; no I/O."""
    current = payload.current
    daily = payload.daily
    code = current.weather_code

    return WeatherReport(
        city=location.display_name,
        country=location.country_code,
        temperature=round_half_away(current.temperature),
        description=describe_condition(code),
        icon=condition_icon(code, is_daytime(current.is_day)),
        feelsLike=round_half_away(current.apparent_temperature),
        humidity=current.relative_humidity,
        windSpeed=round_half_away(current.wind_speed),
        pressure=round_half_away(current.pressure_msl),
        visibility=estimate_visibility(code, current.relative_humidity),
        uvIndex=round_half_away(daily.uv_index_max or 0),
        sunrise=format_clock_time(daily.sunrise),
        sunset=format_clock_time(daily.sunset),
        cloudCover=current.cloud_cover,
        dewPoint=_rounded_dew_point(current.temperature, current.relative_humidity),
    )


def fetch_report(location: ResolvedLocation, data_source: WeatherDataSource) -> WeatherReport:
    """Fetch the forecast for ``location`` and return the formatted report."""
    logger.info(f"Fetching forecast for {location.display_name} ({location.latitude}, {location.longitude})")
    payload = data_source.fetch_forecast(location.latitude, location.longitude)
    logger.debug(f"Got forecast payload: {payload}")
    return build_report(location, payload)
