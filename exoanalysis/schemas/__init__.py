from .planet import PlanetRecord, NormalizedPlanet
from .orbital import EccentricityClass, SpectralClass, HabitableZone, OrbitalDynamics, StellarProperties
from .classification import (
    MassRegime, TemperatureRegime, MassClassification, TemperatureClassification, ClassificationResult
)
from .habitability import (
    FactorStatus, HabitabilityVerdict, EarthSimilarityVerdict, ScoreFactor,
    HabitabilityAssessment, EarthSimilarityAssessment
)
from .comparison import SimilarityMatch, SimilarPlanetsResponse
from .catalog import CatalogFilter, CatalogStatistics, NoPlanetSelected

__all__ = [
    "PlanetRecord", "NormalizedPlanet",
    "EccentricityClass", "SpectralClass", "HabitableZone", "OrbitalDynamics", "StellarProperties",
    "MassRegime", "TemperatureRegime", "MassClassification", "TemperatureClassification", "ClassificationResult",
    "FactorStatus", "HabitabilityVerdict", "EarthSimilarityVerdict", "ScoreFactor",
    "HabitabilityAssessment", "EarthSimilarityAssessment",
    "SimilarityMatch", "SimilarPlanetsResponse",
    "CatalogFilter", "CatalogStatistics", "NoPlanetSelected"
]
