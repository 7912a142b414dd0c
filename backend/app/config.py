"""Typed settings configuration - single source of truth."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Server
    port: int = 8080
    log_level: str = "INFO"

    # CORS
    cors_allow_origins: list[str] = ["*"]

    # Credentials
    # Foursquare v2 format: CLIENT_ID+CLIENT_SECRET
    foursquare_api_key: str = ""
    exchange_rate_api_key: str = ""

    # Upstream endpoints
    nominatim_url: str = "https://nominatim.openstreetmap.org/search"
    foursquare_url: str = "https://api.foursquare.com/v2/venues/explore"
    open_meteo_url: str = "https://api.open-meteo.com/v1/forecast"
    exchange_rate_url: str = "https://v6.exchangerate-api.com/v6"
    rest_countries_url: str = "https://restcountries.com/v3.1/all"

    # Nominatim blocks anonymous clients
    geocoding_user_agent: str = "TravelDataAggregator/0.1 (+https://github.com/travel-aggregator)"

    # Timeouts (seconds, None = unbounded)
    geocoding_timeout_seconds: float = 10.0
    upstream_timeout_seconds: float | None = None
    bundle_timeout_seconds: float | None = None

    # City bundle
    bundle_base_currency: str = "USD"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
