"""Weather adapter using Open-Meteo API (keyless, free tier)."""

import httpx

from backend.app.adapters.errors import DecodeError, GeocodingError, UpstreamError
from backend.app.adapters.geocoding import geocode_city
from backend.app.adapters.http import get_json, upstream_client
from backend.app.config import Settings
from backend.app.models.travel import HourlyForecast, WeatherData
from backend.app.models.upstream import OpenMeteoHourly, OpenMeteoResponse

SOURCE = "open-meteo"

HOURLY_VARIABLES = "temperature_2m,relative_humidity_2m,wind_speed_10m"
FORECAST_DAYS = 1


def zip_hourly(hourly: OpenMeteoHourly) -> list[HourlyForecast]:
    """Zip Open-Meteo's parallel hourly arrays into forecast entries.

    Raises:
        DecodeError: The arrays differ in length
    """
    lengths = {
        "time": len(hourly.time),
        "temperature_2m": len(hourly.temperature),
        "wind_speed_10m": len(hourly.wind_speed),
        "relative_humidity_2m": len(hourly.relative_humidity),
    }
    if len(set(lengths.values())) > 1:
        detail = ", ".join(f"{name}={n}" for name, n in lengths.items())
        raise DecodeError(f"{SOURCE} hourly arrays have mismatched lengths ({detail})")

    forecasts = []
    for i, t in enumerate(hourly.time):
        # Missing samples come back as null
        temperature = hourly.temperature[i]
        wind_speed = hourly.wind_speed[i]
        humidity = hourly.relative_humidity[i]

        forecasts.append(
            HourlyForecast(
                time=t,
                temperature=temperature if temperature is not None else 0.0,
                wind_speed=wind_speed if wind_speed is not None else 0.0,
                relative_humidity=humidity if humidity is not None else 0,
            )
        )

    return forecasts


async def fetch_weather(
    city_name: str,
    settings: Settings,
    client: httpx.AsyncClient | None = None,
) -> WeatherData:
    """Fetch a one-day hourly forecast for a city.

    The city is geocoded by name only, so ambiguous names resolve to
    Nominatim's best guess.

    Args:
        city_name: City to forecast
        settings: Settings carrying endpoints and timeouts
        client: Optional httpx client (for testing with mocks)

    Returns:
        WeatherData at the geocoded coordinate

    Raises:
        GeocodingError: The city could not be resolved
        UpstreamError: Open-Meteo transport, status or decode failure
    """
    async with upstream_client(client) as http:
        try:
            coord = await geocode_city(city_name, "", settings, client=http)
        except UpstreamError as e:
            raise GeocodingError(e) from e

        # Docs: https://open-meteo.com/en/docs
        params = {
            "latitude": f"{coord.latitude:f}",
            "longitude": f"{coord.longitude:f}",
            "hourly": HOURLY_VARIABLES,
            "forecast_days": str(FORECAST_DAYS),
        }
        data: OpenMeteoResponse = await get_json(
            http,
            SOURCE,
            settings.open_meteo_url,
            OpenMeteoResponse,
            params=params,
            timeout=settings.upstream_timeout_seconds,
        )

    return WeatherData(
        latitude=coord.latitude,
        longitude=coord.longitude,
        hourly=zip_hourly(data.hourly),
    )
