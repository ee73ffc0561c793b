import logging
from typing import Any, Iterable, Mapping, Optional, Union

import pandas as pd

from exoanalysis.normalizer import to_earth_masses
from exoanalysis.schemas import (
    ClassificationResult, EarthSimilarityAssessment, HabitabilityAssessment, NoPlanetSelected,
    OrbitalDynamics, PlanetRecord, SimilarPlanetsResponse, StellarProperties
)
from .catalog_service import CatalogIndex
from .classification_service import PlanetClassifier
from .habitability_calculator import EarthSimilarityCalculator, HabitabilityCalculator
from .orbital_mechanics import OrbitalCalculator
from .similarity_calculator import SimilarityCalculator

logger = logging.getLogger(__name__)

NO_PLANET_SELECTED = NoPlanetSelected()


class PlanetAnalysisService:
    """
    Entry point for the presentation layer.

    The selected planet is passed to every call; with no selection each
    analysis returns NO_PLANET_SELECTED instead of raising.
    """

    def __init__(self, catalog: CatalogIndex):
        self.catalog = catalog
        self.similarity_calculator = SimilarityCalculator(catalog)

    @classmethod
    def from_records(cls, rows: Iterable[Union[PlanetRecord, Mapping[str, Any]]]) -> "PlanetAnalysisService":
        return cls(CatalogIndex.from_records(rows))

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> "PlanetAnalysisService":
        return cls(CatalogIndex.from_dataframe(df))

    def select(self, planet_name: str) -> Optional[PlanetRecord]:
        return self.catalog.find_by_name(planet_name)

    def analyze_habitability(self, selected: Optional[PlanetRecord]) -> Union[HabitabilityAssessment, NoPlanetSelected]:
        if selected is None:
            return NO_PLANET_SELECTED
        return HabitabilityCalculator.assess(selected)

    def classify_planet(self, selected: Optional[PlanetRecord]) -> Union[ClassificationResult, NoPlanetSelected]:
        if selected is None:
            return NO_PLANET_SELECTED
        return PlanetClassifier.classify(selected)

    def compare_to_earth(self, selected: Optional[PlanetRecord]) -> Union[EarthSimilarityAssessment, NoPlanetSelected]:
        if selected is None:
            return NO_PLANET_SELECTED
        return EarthSimilarityCalculator.assess(selected)

    def analyze_orbit(self, selected: Optional[PlanetRecord]) -> Union[OrbitalDynamics, NoPlanetSelected]:
        if selected is None:
            return NO_PLANET_SELECTED
        return OrbitalCalculator.analyze_orbit(selected)

    def analyze_star(self, selected: Optional[PlanetRecord]) -> Union[StellarProperties, NoPlanetSelected]:
        if selected is None:
            return NO_PLANET_SELECTED
        return OrbitalCalculator.analyze_star(selected)

    def find_similar(
        self, selected: Optional[PlanetRecord], limit: Optional[int] = None
    ) -> Union[SimilarPlanetsResponse, NoPlanetSelected]:
        """Similar planets from the catalog, in catalog order"""
        if selected is None:
            return NO_PLANET_SELECTED

        matches = self.similarity_calculator.find_similar(selected, limit)
        return SimilarPlanetsResponse(
            reference_name=selected.name,
            reference_mass_earth=to_earth_masses(selected.mass) or 0.0,
            reference_semi_major_axis_au=selected.semi_major_axis or 0.0,
            reference_temperature_k=selected.equilibrium_temperature_k,
            similar_planets=matches,
            total_found=len(matches)
        )
