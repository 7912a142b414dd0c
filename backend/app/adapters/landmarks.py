"""Landmark adapter using the Foursquare v2 venues/explore API."""

import logging

import httpx

from backend.app.adapters.errors import GeocodingError, MissingCredentialError, UpstreamError
from backend.app.adapters.geocoding import geocode_city
from backend.app.adapters.http import get_json, upstream_client
from backend.app.config import Settings
from backend.app.models.travel import Landmark
from backend.app.models.upstream import FoursquareLocation, FoursquareV2Response, FoursquareVenue

logger = logging.getLogger(__name__)

SOURCE = "foursquare"

API_VERSION = "20240101"
SEARCH_RADIUS_M = 5000
SECTION = "sights"
RESULT_LIMIT = 20


def parse_v2_api_key(api_key: str) -> tuple[str, str]:
    """Split a "CLIENT_ID+CLIENT_SECRET" credential on the first "+".

    A key without "+" is used as both client id and secret. This degraded mode
    is accepted rather than treated as a configuration error.
    """
    client_id, sep, client_secret = api_key.partition("+")
    if not sep:
        logger.warning("Foursquare key has no '+' separator; using it as both id and secret")
        return api_key, api_key
    return client_id, client_secret


def venue_to_landmark(venue: FoursquareVenue) -> Landmark:
    """Map a Foursquare venue into a Landmark; null fields become zero values."""
    location = venue.location or FoursquareLocation()
    address = location.address or ", ".join(location.formatted_address or [])
    return Landmark(
        name=venue.name or "",
        address=address,
        latitude=location.lat if location.lat is not None else 0.0,
        longitude=location.lng if location.lng is not None else 0.0,
        rating=venue.rating if venue.rating is not None else 0.0,
    )


async def fetch_landmarks(
    city_name: str,
    country: str,
    settings: Settings,
    client: httpx.AsyncClient | None = None,
) -> list[Landmark]:
    """Fetch sights around a city.

    The credential is checked before geocoding, so a missing key fails without
    any upstream call.

    Args:
        city_name: City to search around
        country: Country used to disambiguate geocoding ("" to omit)
        settings: Settings carrying credentials and endpoints
        client: Optional httpx client (for testing with mocks)

    Returns:
        Up to RESULT_LIMIT landmarks; empty when Foursquare returns no groups

    Raises:
        MissingCredentialError: FOURSQUARE_API_KEY is not configured
        GeocodingError: The city could not be resolved
        UpstreamError: Foursquare transport, status or decode failure
    """
    if not settings.foursquare_api_key:
        raise MissingCredentialError("FOURSQUARE_API_KEY not set")

    client_id, client_secret = parse_v2_api_key(settings.foursquare_api_key)

    async with upstream_client(client) as http:
        try:
            coord = await geocode_city(city_name, country, settings, client=http)
        except UpstreamError as e:
            raise GeocodingError(e) from e

        params = {
            "ll": f"{coord.latitude:f},{coord.longitude:f}",
            "client_id": client_id,
            "client_secret": client_secret,
            "v": API_VERSION,
            "radius": str(SEARCH_RADIUS_M),
            "section": SECTION,
            "limit": str(RESULT_LIMIT),
        }
        data: FoursquareV2Response = await get_json(
            http,
            SOURCE,
            settings.foursquare_url,
            FoursquareV2Response,
            params=params,
            timeout=settings.upstream_timeout_seconds,
        )

    groups = data.response.groups
    if not groups:
        return []

    # Explore returns the recommended venues in the first group
    return [venue_to_landmark(item.venue) for item in groups[0].items]
