"""Application configuration pulled from environment variables via pydantic."""
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from utils.logging_utils import get_tagged_logger
logger = get_tagged_logger(__name__, tag="config")


class Settings(BaseSettings):
    """Environment-driven configuration for the weather lookup service."""
    model_config = SettingsConfigDict(env_prefix="WEATHER_", extra="ignore")

    geocoding_url: str = "https://geocoding-api.open-meteo.com/v1/search"
    forecast_url: str = "https://api.open-meteo.com/v1/forecast"
    weather_source: str = "open_meteo"  # options: open_meteo
    request_timeout_seconds: Optional[float] = None  # None = transport default
    log_level: str = "INFO"
    job_name: str = "weather-api"

    @field_validator("geocoding_url", "forecast_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize endpoint URLs to avoid double slashes."""
        return str(v).rstrip("/")


settings = Settings()


if __name__ == "__main__":
    logger.setLevel("DEBUG")
    logger.debug(f"Loaded settings: {settings.model_dump_json(indent=4)}")
