"""Common types shared across all models."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for canonical wire models (camelCase on the wire, snake_case in Python)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Coordinate(BaseModel):
    """Geographic coordinates (WGS84) resolved by geocoding."""

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
