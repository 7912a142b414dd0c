"""Response envelopes for the HTTP surface."""

from pydantic import BaseModel

from backend.app.models.travel import City, Landmark, RatesData, WeatherData


class HealthResponse(BaseModel):
    """Response for GET /health."""

    status: str
    timestamp: int


class ErrorResponse(BaseModel):
    """Error body; `message` carries the underlying upstream error text."""

    error: str
    message: str | None = None


class CitiesResponse(BaseModel):
    """Response for GET /api/v1/cities."""

    cities: list[City]
    count: int


class LandmarksResponse(BaseModel):
    """Response for GET /api/v1/landmarks."""

    landmarks: list[Landmark]
    count: int


class WeatherResponse(BaseModel):
    """Response for GET /api/v1/weather."""

    weather: WeatherData


class CityBundle(BaseModel):
    """Composite response for one city.

    Each section holds either its payload or a sibling `<section>_error`.
    Unset sections are dropped on serialization.
    """

    city: str
    country: str
    landmarks: list[Landmark] | None = None
    landmarks_error: str | None = None
    weather: WeatherData | None = None
    weather_error: str | None = None
    rates: RatesData | None = None
    rates_error: str | None = None
