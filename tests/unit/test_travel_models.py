"""Tests for canonical travel models and their wire format."""

import json
from datetime import UTC, datetime

import pytest

from backend.app.models.common import CamelModel
from backend.app.models.responses import CityBundle
from backend.app.models.travel import City, HourlyForecast, Landmark, RatesData, WeatherData

CITY = City(id=1, name="London", three_letter_code="GBR", currency="GBP", country="United Kingdom")
LANDMARK = Landmark(
    name="Test Landmark", address="123 Test St", latitude=51.5074, longitude=-0.1278, rating=8.5
)
WEATHER = WeatherData(
    latitude=51.5074,
    longitude=-0.1278,
    hourly=[
        HourlyForecast(
            time="2024-01-01T00:00", temperature=10.5, wind_speed=5.3, relative_humidity=75
        ),
        HourlyForecast(
            time="2024-01-01T01:00", temperature=11.2, wind_speed=6.1, relative_humidity=73
        ),
    ],
)
RATES = RatesData(
    base_currency="USD",
    rates={"EUR": 0.85, "GBP": 0.73},
    timestamp=datetime(2021, 1, 1, tzinfo=UTC),
)


@pytest.mark.parametrize("model", [CITY, LANDMARK, WEATHER, RATES])
def test_wire_json_round_trip(model: CamelModel) -> None:
    """Test encoding to wire JSON and decoding back yields an equal value."""
    wire = json.dumps(model.model_dump(mode="json", by_alias=True))

    assert type(model).model_validate_json(wire) == model


def test_city_uses_camel_case_keys() -> None:
    """Test City serializes with the client-facing key names."""
    assert CITY.model_dump(mode="json", by_alias=True) == {
        "id": 1,
        "name": "London",
        "threeLetterCode": "GBR",
        "currency": "GBP",
        "country": "United Kingdom",
    }


def test_weather_and_rates_use_camel_case_keys() -> None:
    """Test nested forecast and rates keys are camelCase."""
    hour = WEATHER.model_dump(mode="json", by_alias=True)["hourly"][0]
    assert set(hour) == {"time", "temperature", "windSpeed", "relativeHumidity"}

    rates = RATES.model_dump(mode="json", by_alias=True)
    assert set(rates) == {"baseCurrency", "rates", "timestamp"}
    assert rates["timestamp"].startswith("2021-01-01T00:00:00")


def test_city_bundle_drops_unset_sections() -> None:
    """Test a bundle serializes either a section or its error, never both."""
    bundle = CityBundle(
        city="London",
        country="England",
        landmarks=[LANDMARK],
        weather=WEATHER,
        rates_error="exchange-rate API error: 500 - boom",
    )

    data = bundle.model_dump(mode="json", by_alias=True, exclude_none=True)

    assert set(data) == {"city", "country", "landmarks", "weather", "rates_error"}
    assert data["weather"]["hourly"][0]["windSpeed"] == 5.3
