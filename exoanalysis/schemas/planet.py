from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from typing import Any, Mapping, Optional
from exoanalysis.normalizer import (
    parse_number, parse_positive, parse_text, parse_year, to_earth_masses, to_light_years
)


class PlanetRecord(BaseModel):
    """One catalog row. Every field is optional; unknown values are None."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: Optional[str] = Field(
        None, validation_alias=AliasChoices("name", "Planet Name", "pl_name"), description="Planet name"
    )
    host_star: Optional[str] = Field(
        None, validation_alias=AliasChoices("host_star", "hostStar", "Planet Host", "hostname"), description="Host star name"
    )
    mass: Optional[float] = Field(
        None, validation_alias=AliasChoices("mass", "Mass", "pl_bmassj"), description="Planet mass (Jupiter masses)"
    )
    semi_major_axis: Optional[float] = Field(
        None,
        validation_alias=AliasChoices("semi_major_axis", "semiMajorAxis", "Orbit Semi-Major Axis", "pl_orbsmax"),
        description="Orbit semi-major axis (AU)"
    )
    eccentricity: Optional[float] = Field(
        None, validation_alias=AliasChoices("eccentricity", "Eccentricity", "pl_orbeccen"), description="Orbital eccentricity"
    )
    orbital_period_days: Optional[float] = Field(
        None,
        validation_alias=AliasChoices("orbital_period_days", "orbitalPeriodDays", "Orbital Period Days", "pl_orbper"),
        description="Orbital period (days)"
    )
    equilibrium_temperature_k: Optional[float] = Field(
        None,
        validation_alias=AliasChoices(
            "equilibrium_temperature_k", "equilibriumTemperatureK", "Equilibrium Temperature", "pl_eqt"
        ),
        description="Equilibrium temperature (K)"
    )
    distance_parsecs: Optional[float] = Field(
        None,
        validation_alias=AliasChoices("distance_parsecs", "distanceParsecs", "Distance", "sy_dist"),
        description="Distance from Earth (pc)"
    )
    discovery_year: Optional[int] = Field(
        None,
        validation_alias=AliasChoices("discovery_year", "discoveryYear", "Discovery Year", "disc_year"),
        description="Discovery year"
    )
    discovery_method: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("discovery_method", "discoveryMethod", "Discovery Method", "discoverymethod"),
        description="Discovery method"
    )
    discovery_facility: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("discovery_facility", "discoveryFacility", "Discovery Facility", "disc_facility"),
        description="Discovery facility"
    )
    spectral_type: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("spectral_type", "spectralType", "Spectral Type", "st_spectype"),
        description="Catalog spectral type string"
    )
    stellar_effective_temperature_k: Optional[float] = Field(
        None,
        validation_alias=AliasChoices(
            "stellar_effective_temperature_k", "stellarEffectiveTemperatureK", "Stellar Effective Temperature", "st_teff"
        ),
        description="Stellar effective temperature (K)"
    )
    stellar_radius_solar: Optional[float] = Field(
        None,
        validation_alias=AliasChoices("stellar_radius_solar", "stellarRadiusSolar", "Stellar Radius", "st_rad"),
        description="Stellar radius (R☉)"
    )
    stellar_mass_solar: Optional[float] = Field(
        None,
        validation_alias=AliasChoices("stellar_mass_solar", "stellarMassSolar", "Stellar Mass", "st_mass"),
        description="Stellar mass (M☉)"
    )

    @field_validator(
        "name", "host_star", "discovery_method", "discovery_facility", "spectral_type", mode="before"
    )
    @classmethod
    def _parse_text(cls, value: Any) -> Optional[str]:
        return parse_text(value)

    @field_validator(
        "mass", "semi_major_axis", "orbital_period_days", "equilibrium_temperature_k", "distance_parsecs",
        "stellar_effective_temperature_k", "stellar_radius_solar", "stellar_mass_solar", mode="before"
    )
    @classmethod
    def _parse_magnitude(cls, value: Any) -> Optional[float]:
        return parse_positive(value)

    @field_validator("eccentricity", mode="before")
    @classmethod
    def _parse_eccentricity(cls, value: Any) -> Optional[float]:
        # 0 is a measured circular orbit, only negative values are unknown
        number = parse_number(value)
        if number is None or number < 0:
            return None
        return number

    @field_validator("discovery_year", mode="before")
    @classmethod
    def _parse_year(cls, value: Any) -> Optional[int]:
        return parse_year(value)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "PlanetRecord":
        """Build a record from any mapping of catalog fields"""
        return cls.model_validate(dict(raw))


class NormalizedPlanet(BaseModel):
    """Physical quantities derived from a PlanetRecord"""

    model_config = ConfigDict(frozen=True)

    mass_earth: Optional[float] = Field(None, description="Planet mass (M⊕)")
    distance_light_years: Optional[float] = Field(None, description="Distance from Earth (ly)")

    @classmethod
    def from_record(cls, record: PlanetRecord) -> "NormalizedPlanet":
        return cls(
            mass_earth=to_earth_masses(record.mass),
            distance_light_years=to_light_years(record.distance_parsecs)
        )
