from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class MassRegime(str, Enum):
    DWARF = "Dwarf/Large-Moon-class"
    ROCKY = "Rocky/Terrestrial"
    SUPER_EARTH = "Super-Earth"
    NEPTUNE_LIKE = "Neptune-like/Ice-Giant"
    GAS_GIANT = "Gas-Giant"
    SUPER_JUPITER = "Super-Jupiter"


class TemperatureRegime(str, Enum):
    FROZEN = "Frozen"
    COLD = "Cold"
    TEMPERATE = "Temperate"
    HOT = "Hot"
    ULTRA_HOT = "Ultra-Hot"


class MassClassification(BaseModel):
    model_config = ConfigDict(frozen=True)

    regime: MassRegime = Field(..., description="Mass regime")
    label: str = Field(..., description="Short planet type label")
    description: str = Field(..., description="Description of the regime")
    analog: str = Field(..., description="Solar System or known analog")


class TemperatureClassification(BaseModel):
    model_config = ConfigDict(frozen=True)

    regime: TemperatureRegime = Field(..., description="Temperature regime")
    description: str = Field(..., description="Description of the regime")


class ClassificationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    planet_name: Optional[str] = Field(None, description="Planet name")
    mass_earth: Optional[float] = Field(None, description="Planet mass (M⊕), None when unknown")
    equilibrium_temperature_k: Optional[float] = Field(None, description="Equilibrium temperature (K)")
    mass_regime: MassClassification = Field(..., description="Mass classification")
    temperature_regime: TemperatureClassification = Field(..., description="Temperature classification")
    defaulted_fields: List[str] = Field(default_factory=list, description="Inputs replaced by defaults")
