"""Upstream response shapes - only the fields we read are modelled."""

from pydantic import BaseModel, ConfigDict, Field


class UpstreamModel(BaseModel):
    """Base for upstream payloads; unknown fields are ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


# Nominatim (OpenStreetMap) search
class NominatimResult(UpstreamModel):
    """Single geocoding match. Nominatim encodes lat/lon as strings."""

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


# Foursquare v2 venues/explore
class FoursquareLocation(UpstreamModel):
    """Venue location; any field may be missing or null."""

    lat: float | None = None
    lng: float | None = None
    address: str | None = None
    formatted_address: list[str] | None = Field(default=None, alias="formattedAddress")


class FoursquareVenue(UpstreamModel):
    name: str | None = None
    rating: float | None = None
    location: FoursquareLocation | None = None


class FoursquareItem(UpstreamModel):
    venue: FoursquareVenue


class FoursquareGroup(UpstreamModel):
    items: list[FoursquareItem] = Field(default_factory=list)


class FoursquareBody(UpstreamModel):
    groups: list[FoursquareGroup] = Field(default_factory=list)


class FoursquareV2Response(UpstreamModel):
    """Envelope of the v2 explore endpoint."""

    response: FoursquareBody = Field(default_factory=FoursquareBody)


# Open-Meteo forecast
class OpenMeteoHourly(UpstreamModel):
    """Parallel hourly arrays; Open-Meteo emits null for missing samples."""

    time: list[str] = Field(default_factory=list)
    temperature: list[float | None] = Field(default_factory=list, alias="temperature_2m")
    wind_speed: list[float | None] = Field(default_factory=list, alias="wind_speed_10m")
    relative_humidity: list[int | None] = Field(
        default_factory=list, alias="relative_humidity_2m"
    )


class OpenMeteoResponse(UpstreamModel):
    latitude: float
    longitude: float
    hourly: OpenMeteoHourly = Field(default_factory=OpenMeteoHourly)


# ExchangeRate-API v6
class ExchangeRateResponse(UpstreamModel):
    result: str = ""
    base_code: str
    conversion_rates: dict[str, float]
    time_last_update_unix: int = 0


# REST Countries v3.1
class RestCountryName(UpstreamModel):
    common: str = ""
    official: str = ""


class RestCountryCurrency(UpstreamModel):
    name: str = ""
    symbol: str = ""


class RestCountry(UpstreamModel):
    """Country directory entry; capital and currencies may be absent."""

    name: RestCountryName = Field(default_factory=RestCountryName)
    cca3: str = ""
    capital: list[str] = Field(default_factory=list)
    currencies: dict[str, RestCountryCurrency] | None = None
