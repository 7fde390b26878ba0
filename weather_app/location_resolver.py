"""Turn a city name or a coordinate pair into a fully populated location."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from weather_app.data_sources import WeatherDataSource
from weather_app.errors import CityNotFoundError, InvalidCoordinatesError, MissingQueryError
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="location_resolver")

CURRENT_LOCATION_NAME = "Current Location"
UNKNOWN_COUNTRY = "N/A"


@dataclass(frozen=True)
class LocationQuery:
    """Either a city name or an explicit lat/lon pair."""
    city: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @classmethod
    def from_params(cls, city: Optional[str], lat: Optional[str], lon: Optional[str]) -> "LocationQuery":
        """Build a query from raw request parameters.

        A non-blank city wins over coordinates. Both lat and lon must be
        present for the coordinate form; anything less is a missing query.
        """
        name = (city or "").strip()
        if name:
            return cls(city=name)
        if lat and lon:
            try:
                return cls(latitude=float(lat), longitude=float(lon))
            except ValueError:
                raise InvalidCoordinatesError(f"Invalid coordinates: lat={lat!r}, lon={lon!r}")
        raise MissingQueryError()


@dataclass(frozen=True)
class ResolvedLocation:
    """Coordinates plus the name and country shown to the user."""
    latitude: float
    longitude: float
    display_name: str
    country_code: str


def resolve(query: LocationQuery, data_source: WeatherDataSource) -> ResolvedLocation:
    """Resolve a query to coordinates, geocoding only when a city was given."""
    if query.city:
        return _geocode_city(query.city, data_source)
    if query.has_coordinates:
        # Coordinates are passed through as-is; Open-Meteo rejects out-of-range values itself.
        return ResolvedLocation(
            latitude=query.latitude,
            longitude=query.longitude,
            display_name=CURRENT_LOCATION_NAME,
            country_code=UNKNOWN_COUNTRY,
        )
    raise MissingQueryError()


def _geocode_city(city: str, data_source: WeatherDataSource) -> ResolvedLocation:
    name = city.strip()
    match = data_source.geocode(name)
    if match is None:
        logger.info("No geocoding match for %r", name)
        raise CityNotFoundError(name)

    if match.country_code:
        country = match.country_code.upper()
    else:
        country = match.country or UNKNOWN_COUNTRY

    logger.debug("Resolved %r to %s (%s, %s)", name, match.name, match.latitude, match.longitude)
    return ResolvedLocation(
        latitude=match.latitude,
        longitude=match.longitude,
        display_name=match.name,
        country_code=country,
    )
