"""Exoplanet catalog analysis engine"""

from .schemas import PlanetRecord, NormalizedPlanet, NoPlanetSelected, CatalogFilter
from .services import CatalogIndex, PlanetAnalysisService

__version__ = "2.0.0"

__all__ = [
    "PlanetRecord", "NormalizedPlanet", "NoPlanetSelected", "CatalogFilter",
    "CatalogIndex", "PlanetAnalysisService"
]
