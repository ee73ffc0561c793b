from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class EccentricityClass(str, Enum):
    NEARLY_CIRCULAR = "nearly circular"
    SLIGHTLY_ELLIPTICAL = "slightly elliptical"
    HIGHLY_ELLIPTICAL = "highly elliptical"


class SpectralClass(str, Enum):
    A = "A-type"
    F = "F-type"
    G = "G-type"
    K = "K-type"
    M = "M-type"


class HabitableZone(BaseModel):
    model_config = ConfigDict(frozen=True)

    inner_au: float = Field(..., description="Inner edge of the habitable zone (AU)")
    outer_au: float = Field(..., description="Outer edge of the habitable zone (AU)")
    inside_zone: bool = Field(..., description="Semi-major axis lies within the zone")


class OrbitalDynamics(BaseModel):
    model_config = ConfigDict(frozen=True)

    planet_name: Optional[str] = Field(None, description="Planet name")
    semi_major_axis_au: float = Field(..., description="Semi-major axis used (AU)")
    eccentricity: float = Field(..., description="Eccentricity used")
    eccentricity_class: EccentricityClass = Field(..., description="Orbital shape")
    perihelion_au: float = Field(..., description="Closest approach to the star (AU)")
    aphelion_au: float = Field(..., description="Farthest distance from the star (AU)")
    tidally_locked: bool = Field(..., description="Heuristic tidal locking flag (approximate)")
    orbital_velocity_km_s: Optional[float] = Field(None, description="Mean orbital velocity (km/s)")
    year_length_earth_years: Optional[float] = Field(None, description="Orbital period in Earth years")
    defaulted_fields: List[str] = Field(default_factory=list, description="Inputs replaced by defaults")


class StellarProperties(BaseModel):
    model_config = ConfigDict(frozen=True)

    host_star: Optional[str] = Field(None, description="Host star name")
    spectral_type: Optional[str] = Field(None, description="Catalog spectral type, unchanged")
    spectral_class: Optional[SpectralClass] = Field(None, description="Class bucket from effective temperature")
    spectral_color: Optional[str] = Field(None, description="Colour of the spectral class")
    spectral_description: Optional[str] = Field(None, description="Short description of the spectral class")
    effective_temperature_k: Optional[float] = Field(None, description="Stellar effective temperature (K)")
    stellar_mass_solar: Optional[float] = Field(None, description="Stellar mass (M☉)")
    stellar_radius_solar: Optional[float] = Field(None, description="Stellar radius (R☉)")
    luminosity_solar: float = Field(..., description="Luminosity from the mass-luminosity relation (L☉)")
    lifetime_gyr: float = Field(..., description="Main-sequence lifetime (Gyr)")
    defaulted_fields: List[str] = Field(default_factory=list, description="Inputs replaced by defaults")
