import math
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from typing import Any
from exoanalysis.normalizer import parse_number, parse_text


class CatalogFilter(BaseModel):
    """Filter parameters. Unreadable or zero values fall back to the defaults."""

    model_config = ConfigDict(frozen=True)

    query: str = Field(default="", description="Case-insensitive substring of the planet name")
    method: str = Field(default="", description="Exact discovery method, empty for any")
    year_min: int = Field(default=0, description="Earliest discovery year (inclusive)")
    year_max: int = Field(default=3000, description="Latest discovery year (inclusive)")
    distance_max_ly: float = Field(default=math.inf, description="Maximum distance (ly)")
    mass_min: float = Field(default=-math.inf, description="Minimum mass (Jupiter masses, inclusive)")
    mass_max: float = Field(default=math.inf, description="Maximum mass (Jupiter masses, inclusive)")

    @field_validator("query", mode="before")
    @classmethod
    def _parse_query(cls, value: Any) -> str:
        # Not stripped: a space only matches names containing a space
        if isinstance(value, str):
            return value
        text = parse_text(value)
        return text or ""

    @field_validator("method", mode="before")
    @classmethod
    def _parse_text(cls, value: Any) -> str:
        return parse_text(value) or ""

    @field_validator("year_min", "year_max", "distance_max_ly", "mass_min", "mass_max", mode="before")
    @classmethod
    def _fallback_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        number = parse_number(value)
        if not number:
            return cls.model_fields[info.field_name].default
        if info.field_name.startswith("year"):
            return int(number)
        return number


class CatalogStatistics(BaseModel):
    total: int = Field(..., description="Planets in the catalog")
    filtered: int = Field(..., description="Planets in the current view")


class NoPlanetSelected(BaseModel):
    """Returned by analysis operations when no planet is selected"""

    model_config = ConfigDict(frozen=True)

    reason: str = Field(default="no_planet_selected", description="Stable reason code")
    message: str = Field(default="Please select a planet first", description="Placeholder text")
