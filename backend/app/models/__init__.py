"""Models package - re-exports for convenience."""

from backend.app.models.common import CamelModel, Coordinate
from backend.app.models.responses import (
    CitiesResponse,
    CityBundle,
    ErrorResponse,
    HealthResponse,
    LandmarksResponse,
    WeatherResponse,
)
from backend.app.models.travel import City, HourlyForecast, Landmark, RatesData, WeatherData

__all__ = [
    # Common
    "CamelModel",
    "Coordinate",
    # Canonical
    "City",
    "Landmark",
    "HourlyForecast",
    "WeatherData",
    "RatesData",
    # Envelopes
    "HealthResponse",
    "ErrorResponse",
    "CitiesResponse",
    "LandmarksResponse",
    "WeatherResponse",
    "CityBundle",
]
