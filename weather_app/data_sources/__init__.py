"""Data source factories for plugging different weather backends."""

from .base import CallableWeatherDataSource, WeatherDataSource
from .factory import build_data_source
from .open_meteo_client import (
    CurrentConditions,
    DailySummary,
    ForecastPayload,
    GeocodeMatch,
    fetch_forecast,
    geocode,
)

__all__ = [
    "build_data_source",
    "WeatherDataSource",
    "CallableWeatherDataSource",
    "CurrentConditions",
    "DailySummary",
    "ForecastPayload",
    "GeocodeMatch",
    "fetch_forecast",
    "geocode",
]
