"""Currency rates adapter using ExchangeRate-API v6."""

from datetime import UTC, datetime

import httpx

from backend.app.adapters.errors import MissingCredentialError
from backend.app.adapters.http import get_json, upstream_client
from backend.app.config import Settings
from backend.app.models.travel import RatesData
from backend.app.models.upstream import ExchangeRateResponse

SOURCE = "exchange-rate"


async def fetch_rates(
    base_currency: str,
    settings: Settings,
    client: httpx.AsyncClient | None = None,
) -> RatesData:
    """Fetch the latest conversion rates from `base_currency`.

    The currency code is passed through unchecked; an unknown code surfaces as
    whatever error the provider returns.

    Raises:
        MissingCredentialError: EXCHANGE_RATE_API_KEY is not configured
        UpstreamError: Transport, status or decode failure
    """
    api_key = settings.exchange_rate_api_key
    if not api_key:
        raise MissingCredentialError("EXCHANGE_RATE_API_KEY not set")

    base_url = settings.exchange_rate_url.rstrip("/")
    url = f"{base_url}/{api_key}/latest/{base_currency}"

    async with upstream_client(client) as http:
        data: ExchangeRateResponse = await get_json(
            http,
            SOURCE,
            url,
            ExchangeRateResponse,
            timeout=settings.upstream_timeout_seconds,
            log_url=f"{base_url}/<key>/latest/{base_currency}",
        )

    return RatesData(
        base_currency=data.base_code,
        rates=data.conversion_rates,
        timestamp=datetime.fromtimestamp(data.time_last_update_unix, tz=UTC),
    )
