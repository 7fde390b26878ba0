"""HTTP API for the weather lookup service."""

from typing import Optional

from fastapi import APIRouter, HTTPException, status

from .config import settings
from .data_sources import build_data_source
from .errors import WeatherLookupError
from .location_resolver import LocationQuery, resolve
from .models import ErrorMessage, WeatherReport
from .weather_service import fetch_report
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="weather_app/api")

router = APIRouter()
DATA_SOURCE = build_data_source(settings)

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorMessage},
    status.HTTP_404_NOT_FOUND: {"model": ErrorMessage},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorMessage},
}


@router.get("/health")
def health():
    """Liveness probe."""
    return {"status": "ok"}


@router.get("/weather", response_model=WeatherReport, responses=_ERROR_RESPONSES)
def get_weather(city: Optional[str] = None, lat: Optional[str] = None, lon: Optional[str] = None):
    """Resolve the location and return the current weather report."""
    try:
        query = LocationQuery.from_params(city, lat, lon)
        location = resolve(query, DATA_SOURCE)
        return fetch_report(location, DATA_SOURCE)
    except WeatherLookupError as exc:
        if exc.status_code >= 500:
            logger.exception("Weather API error: %s", exc.message)
        else:
            logger.warning("Rejected weather request: %s", exc.message)
        raise HTTPException(status_code=exc.status_code, detail=exc.message) from exc
    except Exception as exc:
        logger.exception("Unexpected error while building weather report")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc) or "Failed to fetch weather data",
        ) from exc
