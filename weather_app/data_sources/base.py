"""Interfaces and helpers for weather data sources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from weather_app.data_sources.open_meteo_client import ForecastPayload, GeocodeMatch


class WeatherDataSource(Protocol):
    """Interface for anything that can geocode places and fetch forecasts."""

    def geocode(self, name: str) -> Optional[GeocodeMatch]:
        """Return the best match for a place name, or None."""
        ...

    def fetch_forecast(self, latitude: float, longitude: float) -> ForecastPayload:
        """Return current conditions and today's daily summary."""
        ...


@dataclass
class CallableWeatherDataSource(WeatherDataSource):
    """Wrap two callables so they can be swapped for different backends."""

    geocoder: Callable[[str], Optional[GeocodeMatch]]
    forecaster: Callable[[float, float], ForecastPayload]

    def geocode(self, name: str) -> Optional[GeocodeMatch]:
        """Delegate to the configured geocoding callable."""
        return self.geocoder(name)

    def fetch_forecast(self, latitude: float, longitude: float) -> ForecastPayload:
        """Delegate to the configured forecast callable."""
        return self.forecaster(latitude, longitude)
