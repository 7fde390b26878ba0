"""Error taxonomy for weather lookups.

Every failure raised while resolving a location or fetching a report derives
from ``WeatherLookupError`` and carries the HTTP status it maps to. The API
layer turns these into responses; nothing below it knows about HTTP.
"""


class WeatherLookupError(Exception):
    """Base class for failures surfaced to API clients."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class QueryError(WeatherLookupError):
    """The request did not carry a usable location query."""
    status_code = 400


class MissingQueryError(QueryError):
    """Neither a city nor a lat/lon pair was supplied."""

    def __init__(self, message: str = "Either city name or coordinates (lat, lon) are required"):
        super().__init__(message)


class InvalidCoordinatesError(QueryError):
    """lat/lon were supplied but do not parse as numbers."""


class LocationError(WeatherLookupError):
    """Failure while turning a city name into coordinates."""


class CityNotFoundError(LocationError):
    """The geocoder returned no match for the city."""
    status_code = 404

    def __init__(self, city: str):
        super().__init__("City not found. Please check the spelling and try again.")
        self.city = city


class GeocodeTransportError(LocationError):
    """The geocoding call failed or returned a non-success status."""


class ForecastTransportError(WeatherLookupError):
    """The forecast call failed or returned a non-success status."""


class UpstreamPayloadError(WeatherLookupError):
    """An upstream response was missing fields we rely on."""
