"""City directory adapter using REST Countries v3.1."""

import httpx

from backend.app.adapters.http import get_json, upstream_client
from backend.app.config import Settings
from backend.app.models.travel import City
from backend.app.models.upstream import RestCountry

SOURCE = "rest-countries"

FIELDS = "name,cca3,capital,currencies"


def countries_to_cities(countries: list[RestCountry]) -> list[City]:
    """Keep countries with a capital and a currency, numbering them from 1.

    The currency is the first code in upstream document order; countries with
    several currencies expose only that one.
    """
    cities = []
    for country in countries:
        if not country.capital or not country.currencies:
            continue

        name = country.capital[0]
        currency = next(iter(country.currencies))
        if not name or not currency:
            continue

        cities.append(
            City(
                id=len(cities) + 1,
                name=name,
                three_letter_code=country.cca3,
                currency=currency,
                country=country.name.common,
            )
        )

    return cities


async def list_cities(
    settings: Settings,
    client: httpx.AsyncClient | None = None,
) -> list[City]:
    """Fetch the full country directory and derive one City per country.

    Raises:
        UpstreamError: Transport, status or decode failure
    """
    async with upstream_client(client) as http:
        countries: list[RestCountry] = await get_json(
            http,
            SOURCE,
            settings.rest_countries_url,
            list[RestCountry],
            params={"fields": FIELDS},
            timeout=settings.upstream_timeout_seconds,
        )

    return countries_to_cities(countries)
