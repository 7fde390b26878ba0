"""Pydantic models for the public API payloads."""

from typing import Optional

from pydantic import BaseModel


class WeatherReport(BaseModel):
    """Flat weather summary returned by ``GET /api/weather``.

    Field names are camelCase because the browser client reads them directly.
    """
    city: str
    country: str
    temperature: int
    description: str
    icon: str
    feelsLike: int
    humidity: int
    windSpeed: int
    pressure: int
    visibility: int
    uvIndex: int
    sunrise: str
    sunset: str
    cloudCover: int
    dewPoint: Optional[int] = None


class ErrorMessage(BaseModel):
    """Body of every non-2xx response."""
    message: str
