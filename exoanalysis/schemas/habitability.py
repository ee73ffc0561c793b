from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from .orbital import HabitableZone


class FactorStatus(str, Enum):
    SATISFIED = "satisfied"
    PARTIAL = "partial"
    FAILED = "failed"


class HabitabilityVerdict(str, Enum):
    HIGHLY_PROMISING = "Highly Promising"
    POTENTIALLY_HABITABLE = "Potentially Habitable"
    MARGINALLY_HABITABLE = "Marginally Habitable"
    UNLIKELY = "Unlikely to be Habitable"


class EarthSimilarityVerdict(str, Enum):
    VERY_SIMILAR = "Very similar to Earth"
    MODERATELY_SIMILAR = "Moderately similar to Earth"
    SOMEWHAT_EARTH_LIKE = "Somewhat Earth-like"
    VERY_DIFFERENT = "Very different from Earth"


class ScoreFactor(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str = Field(..., description="Factor name")
    status: FactorStatus = Field(..., description="satisfied, partial or failed")
    points: int = Field(..., ge=0, description="Points contributed to the score")
    justification: str = Field(..., description="One-line justification for display")


class HabitabilityAssessment(BaseModel):
    model_config = ConfigDict(frozen=True)

    planet_name: Optional[str] = Field(None, description="Planet name")
    score: int = Field(..., ge=0, le=100, description="Habitability score (0-100)")
    verdict: HabitabilityVerdict = Field(..., description="Verdict tier")
    factors: List[ScoreFactor] = Field(..., description="Factors in evaluation order")
    habitable_zone: HabitableZone = Field(..., description="Habitable zone bounds")
    defaulted_fields: List[str] = Field(default_factory=list, description="Inputs replaced by defaults")


class EarthSimilarityAssessment(BaseModel):
    model_config = ConfigDict(frozen=True)

    planet_name: Optional[str] = Field(None, description="Planet name")
    score: int = Field(..., ge=0, le=100, description="Earth similarity index (0-100)")
    verdict: EarthSimilarityVerdict = Field(..., description="Verdict tier")
    factors: List[ScoreFactor] = Field(..., description="Factors in evaluation order")
    mass_ratio_earth: Optional[float] = Field(None, description="Planet mass relative to Earth")
    year_length_earth_years: Optional[float] = Field(None, description="Orbital period in Earth years")
    defaulted_fields: List[str] = Field(default_factory=list, description="Inputs replaced by defaults")
