from .catalog_service import CatalogIndex
from .orbital_mechanics import OrbitalCalculator
from .classification_service import PlanetClassifier
from .habitability_calculator import HabitabilityCalculator, EarthSimilarityCalculator
from .similarity_calculator import SimilarityCalculator
from .analysis_service import PlanetAnalysisService, NO_PLANET_SELECTED

__all__ = [
    "CatalogIndex", "OrbitalCalculator", "PlanetClassifier",
    "HabitabilityCalculator", "EarthSimilarityCalculator", "SimilarityCalculator",
    "PlanetAnalysisService", "NO_PLANET_SELECTED"
]
