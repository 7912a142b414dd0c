"""City bundle fan-out: landmarks, weather and rates for one city.

The three upstream fetches are independent. They run as concurrent tasks and
are always awaited to completion; a failure in one never cancels its
siblings. Each failure is demoted to a `<field>_error` string on the bundle.
"""

import asyncio
import logging
from collections.abc import Awaitable
from typing import Any, TypeVar

import httpx

from backend.app.adapters.errors import UpstreamError, UpstreamTimeoutError
from backend.app.adapters.http import upstream_client
from backend.app.adapters.landmarks import fetch_landmarks
from backend.app.adapters.rates import fetch_rates
from backend.app.adapters.weather import fetch_weather
from backend.app.config import Settings
from backend.app.models.responses import CityBundle

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def _with_deadline(name: str, call: Awaitable[T], timeout: float | None) -> T:
    """Await `call`, bounding it by `timeout` seconds when one is configured."""
    if timeout is None:
        return await call

    try:
        return await asyncio.wait_for(call, timeout)
    except TimeoutError as e:
        raise UpstreamTimeoutError(f"{name} timed out after {timeout:g}s") from e


def _unwrap(name: str, outcome: Any) -> tuple[Any, str | None]:
    """Split a gather outcome into (value, error message).

    Non-upstream exceptions are programming errors and are re-raised.
    """
    if isinstance(outcome, UpstreamError):
        logger.warning(f"City bundle section failed: {name} - {outcome}")
        return None, str(outcome)
    if isinstance(outcome, BaseException):
        raise outcome
    return outcome, None


async def fetch_city_bundle(
    city_name: str,
    country: str,
    settings: Settings,
    client: httpx.AsyncClient | None = None,
) -> CityBundle:
    """Fetch landmarks, weather and rates for a city concurrently.

    Args:
        city_name: City to aggregate data for
        country: Country used by the landmark lookup
        settings: Settings carrying credentials, endpoints and timeouts
        client: Optional httpx client shared by all three calls

    Returns:
        CityBundle with every section set to its payload or its error
    """
    timeout = settings.bundle_timeout_seconds

    async with upstream_client(client) as http:
        landmarks_task = asyncio.create_task(
            _with_deadline(
                "landmarks", fetch_landmarks(city_name, country, settings, client=http), timeout
            )
        )
        weather_task = asyncio.create_task(
            _with_deadline("weather", fetch_weather(city_name, settings, client=http), timeout)
        )
        rates_task = asyncio.create_task(
            _with_deadline(
                "rates", fetch_rates(settings.bundle_base_currency, settings, client=http), timeout
            )
        )

        # return_exceptions keeps siblings running when one fails
        landmarks_res, weather_res, rates_res = await asyncio.gather(
            landmarks_task, weather_task, rates_task, return_exceptions=True
        )

    landmarks, landmarks_error = _unwrap("landmarks", landmarks_res)
    weather, weather_error = _unwrap("weather", weather_res)
    rates, rates_error = _unwrap("rates", rates_res)

    return CityBundle(
        city=city_name,
        country=country,
        landmarks=landmarks,
        landmarks_error=landmarks_error,
        weather=weather,
        weather_error=weather_error,
        rates=rates,
        rates_error=rates_error,
    )
