"""Tests for the ExchangeRate-API rates adapter."""

from datetime import UTC, datetime

import httpx
import pytest

from backend.app.adapters.errors import DecodeError, MissingCredentialError, UpstreamStatusError
from backend.app.adapters.rates import fetch_rates
from backend.app.config import Settings
from tests.stubs import EXCHANGE_RATE_HOST, ClientFactory, json_reply


@pytest.mark.asyncio
async def test_fetch_rates_maps_response(settings: Settings, make_client: ClientFactory) -> None:
    """Test base code, rates and update time are carried over."""
    client = make_client()

    rates = await fetch_rates("USD", settings, client=client)

    assert rates.base_currency == "USD"
    assert rates.rates["EUR"] == 0.85
    assert rates.rates["JPY"] == 110.0
    assert rates.timestamp == datetime(2021, 1, 1, tzinfo=UTC)

    await client.aclose()


@pytest.mark.asyncio
async def test_fetch_rates_puts_key_and_currency_in_path(
    settings: Settings, make_client: ClientFactory
) -> None:
    """Test the credential and base currency are path segments."""
    captured: list[httpx.Request] = []
    client = make_client(captured=captured)

    await fetch_rates("EUR", settings, client=client)

    assert len(captured) == 1
    assert captured[0].url.path == "/v6/test-rates-key/latest/EUR"

    await client.aclose()


@pytest.mark.asyncio
async def test_fetch_rates_passes_unknown_currency_through(
    settings: Settings, make_client: ClientFactory
) -> None:
    """Test an invalid code is not validated locally; the provider's error surfaces."""
    error_body = {"result": "error", "error-type": "unsupported-code"}
    client = make_client({EXCHANGE_RATE_HOST: json_reply(error_body, 404)})

    with pytest.raises(UpstreamStatusError) as exc_info:
        await fetch_rates("XYZ", settings, client=client)

    assert exc_info.value.status_code == 404
    assert "unsupported-code" in exc_info.value.body

    await client.aclose()


@pytest.mark.asyncio
async def test_fetch_rates_rejects_unexpected_shape(
    settings: Settings, make_client: ClientFactory
) -> None:
    """Test a 200 body without rates is a DecodeError."""
    client = make_client({EXCHANGE_RATE_HOST: json_reply({"result": "success"})})

    with pytest.raises(DecodeError):
        await fetch_rates("USD", settings, client=client)

    await client.aclose()


@pytest.mark.asyncio
async def test_fetch_rates_requires_credential(
    settings: Settings, make_client: ClientFactory
) -> None:
    """Test that an unset provider key fails without a request."""
    client = make_client()
    no_key = settings.model_copy(update={"exchange_rate_api_key": ""})

    with pytest.raises(MissingCredentialError, match="EXCHANGE_RATE_API_KEY not set"):
        await fetch_rates("USD", no_key, client=client)

    await client.aclose()


@pytest.mark.asyncio
async def test_fetch_rates_is_unbounded_by_default(
    settings: Settings, make_client: ClientFactory
) -> None:
    """Test a non-geocoding call carries no timeout unless one is configured."""
    captured: list[httpx.Request] = []
    client = make_client(captured=captured)

    await fetch_rates("USD", settings, client=client)

    assert settings.upstream_timeout_seconds is None
    assert captured[0].extensions["timeout"]["read"] is None

    bounded = settings.model_copy(update={"upstream_timeout_seconds": 3.0})
    await fetch_rates("USD", bounded, client=client)

    assert captured[1].extensions["timeout"]["read"] == 3.0

    await client.aclose()
