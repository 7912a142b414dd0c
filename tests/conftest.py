"""Shared pytest fixtures for all test suites."""

import pytest

from backend.app.config import Settings
from tests.stubs import ClientFactory, build_client


@pytest.fixture
def settings() -> Settings:
    """Settings with test credentials and no .env lookup."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        foursquare_api_key="CLIENT_ID+CLIENT_SECRET",
        exchange_rate_api_key="test-rates-key",
    )


@pytest.fixture
def make_client() -> ClientFactory:
    """Factory for AsyncClients with mocked upstreams.

    Usage:
        client = make_client({FOURSQUARE_HOST: json_reply({}, 500)}, captured)
    """
    return build_client
