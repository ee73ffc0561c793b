from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from .planet import PlanetRecord


class SimilarityMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    planet: PlanetRecord = Field(..., description="Matched catalog record")
    mass_match: bool = Field(..., description="Mass within 30% of the reference")
    distance_match: bool = Field(..., description="Semi-major axis within 30% of the reference")
    temperature_match: bool = Field(..., description="Equilibrium temperature within 100 K of the reference")


class SimilarPlanetsResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    reference_name: Optional[str] = Field(None, description="Reference planet name")
    reference_mass_earth: float = Field(..., description="Reference mass used (M⊕)")
    reference_semi_major_axis_au: float = Field(..., description="Reference semi-major axis used (AU)")
    reference_temperature_k: Optional[float] = Field(None, description="Reference temperature, None when unknown")
    similar_planets: List[SimilarityMatch] = Field(..., description="Matches in catalog order")
    total_found: int = Field(..., description="Number of matches returned")
