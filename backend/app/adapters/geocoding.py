"""Geocoding resolver using Nominatim (OpenStreetMap, keyless)."""

import httpx

from backend.app.adapters.errors import NotFoundError
from backend.app.adapters.http import get_json, upstream_client
from backend.app.config import Settings
from backend.app.models.common import Coordinate
from backend.app.models.upstream import NominatimResult

SOURCE = "nominatim"


def build_query(city_name: str, country: str = "") -> str:
    """Free-text query: "city" or "city, country"."""
    if country:
        return f"{city_name}, {country}"
    return city_name


async def geocode_city(
    city_name: str,
    country: str,
    settings: Settings,
    client: httpx.AsyncClient | None = None,
) -> Coordinate:
    """Resolve a city name to coordinates, taking the first match.

    Args:
        city_name: Free-text city name
        country: Optional country to disambiguate ("" to omit)
        settings: Settings carrying the endpoint, user agent and timeout
        client: Optional httpx client (for testing with mocks)

    Returns:
        Coordinate of the best match

    Raises:
        NotFoundError: Nominatim returned zero matches
        UpstreamError: Transport, status or decode failure
    """
    query = build_query(city_name, country)
    params = {"q": query, "format": "json", "limit": "1"}
    # Nominatim's usage policy requires an identifying User-Agent
    headers = {"User-Agent": settings.geocoding_user_agent}

    async with upstream_client(client) as http:
        results: list[NominatimResult] = await get_json(
            http,
            SOURCE,
            settings.nominatim_url,
            list[NominatimResult],
            params=params,
            headers=headers,
            timeout=settings.geocoding_timeout_seconds,
        )

    if not results:
        raise NotFoundError(f"location not found: {query}")

    first = results[0]
    return Coordinate(latitude=first.lat, longitude=first.lon)
