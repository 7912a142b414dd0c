"""Canonical travel models returned to clients."""

from datetime import datetime

from backend.app.models.common import CamelModel


class City(CamelModel):
    """Capital city of a country, with one of its currency codes.

    `id` is assigned by enumeration order and is not stable across calls.
    """

    id: int
    name: str
    three_letter_code: str
    currency: str
    country: str


class Landmark(CamelModel):
    """Place of interest near a city."""

    name: str
    address: str = ""
    latitude: float
    longitude: float
    rating: float = 0.0


class HourlyForecast(CamelModel):
    """Single hour of a forecast."""

    time: str
    temperature: float
    wind_speed: float
    relative_humidity: int


class WeatherData(CamelModel):
    """Hourly forecast for a coordinate, ordered by time ascending."""

    latitude: float
    longitude: float
    hourly: list[HourlyForecast]


class RatesData(CamelModel):
    """Conversion rates from a base currency."""

    base_currency: str
    rates: dict[str, float]
    timestamp: datetime
