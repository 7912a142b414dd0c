"""Travel data endpoints - cities, city bundle, landmarks, weather, rates."""

import logging
from typing import Annotated

import httpx
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from backend.app.adapters.cities import list_cities
from backend.app.adapters.errors import UpstreamError
from backend.app.adapters.landmarks import fetch_landmarks
from backend.app.adapters.rates import fetch_rates
from backend.app.adapters.weather import fetch_weather
from backend.app.api.deps import get_http_client
from backend.app.config import Settings, get_settings
from backend.app.models.responses import (
    CitiesResponse,
    CityBundle,
    ErrorResponse,
    LandmarksResponse,
    WeatherResponse,
)
from backend.app.models.travel import RatesData
from backend.app.orchestration.bundle import fetch_city_bundle

router = APIRouter(prefix="/api/v1")
logger = logging.getLogger(__name__)

SettingsDep = Annotated[Settings, Depends(get_settings)]
ClientDep = Annotated[httpx.AsyncClient, Depends(get_http_client)]

ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def missing_parameter(name: str) -> JSONResponse:
    """400 response for a required parameter that was not supplied."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": f"{name} parameter is required"},
    )


def upstream_failure(resource: str, error: UpstreamError) -> JSONResponse:
    """500 response wrapping an adapter error."""
    logger.error(f"Failed to fetch {resource}: {error}")
    body = ErrorResponse(error=f"Failed to fetch {resource}", message=str(error))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=body.model_dump(),
    )


@router.get("/cities", response_model=CitiesResponse, responses=ERROR_RESPONSES)
async def get_cities(settings: SettingsDep, client: ClientDep) -> CitiesResponse | JSONResponse:
    """List one capital city per country, with a currency code."""
    try:
        cities = await list_cities(settings, client=client)
    except UpstreamError as e:
        return upstream_failure("cities", e)

    return CitiesResponse(cities=cities, count=len(cities))


@router.get(
    "/cities/{name}/{country}",
    response_model=CityBundle,
    response_model_exclude_none=True,
)
async def get_city_data(
    name: str, country: str, settings: SettingsDep, client: ClientDep
) -> CityBundle:
    """All data for one city in a single request.

    Always 200: a failed section is reported as `<section>_error` next to the
    sections that succeeded.
    """
    return await fetch_city_bundle(name, country, settings, client=client)


@router.get("/landmarks", response_model=LandmarksResponse, responses=ERROR_RESPONSES)
async def get_landmarks(
    settings: SettingsDep,
    client: ClientDep,
    city: str | None = None,
    country: str = "",
) -> LandmarksResponse | JSONResponse:
    """Sights around a city."""
    if not city:
        return missing_parameter("city")

    try:
        landmarks = await fetch_landmarks(city, country, settings, client=client)
    except UpstreamError as e:
        return upstream_failure("landmarks", e)

    return LandmarksResponse(landmarks=landmarks, count=len(landmarks))


@router.get("/weather", response_model=WeatherResponse, responses=ERROR_RESPONSES)
async def get_weather(
    settings: SettingsDep,
    client: ClientDep,
    city: str | None = None,
) -> WeatherResponse | JSONResponse:
    """One-day hourly forecast for a city."""
    if not city:
        return missing_parameter("city")

    try:
        weather = await fetch_weather(city, settings, client=client)
    except UpstreamError as e:
        return upstream_failure("weather", e)

    return WeatherResponse(weather=weather)


@router.get("/rates/", response_model=RatesData, responses=ERROR_RESPONSES)
@router.get("/rates/{currency}", response_model=RatesData, responses=ERROR_RESPONSES)
async def get_rates(
    settings: SettingsDep,
    client: ClientDep,
    currency: str = "",
) -> RatesData | JSONResponse:
    """Latest conversion rates from `currency`; the code is not validated."""
    if not currency.strip():
        return missing_parameter("currency")

    try:
        return await fetch_rates(currency, settings, client=client)
    except UpstreamError as e:
        return upstream_failure("rates", e)
