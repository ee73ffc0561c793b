"""
Similarity Search
Finds catalog planets close to a reference planet in mass, orbit and temperature
"""

import logging
from typing import List, Optional

import numpy as np

from exoanalysis.normalizer import to_earth_masses
from exoanalysis.schemas import PlanetRecord, SimilarityMatch
from exoanalysis.settings import settings
from .catalog_service import CatalogIndex

logger = logging.getLogger(__name__)

RELATIVE_TOLERANCE = 0.3
TEMPERATURE_TOLERANCE_K = 100
MIN_SCALE = 0.001


class SimilarityCalculator:
    """Calculate similarity between a reference planet and the catalog"""

    def __init__(self, catalog: CatalogIndex):
        self.catalog = catalog
        self._prepare_similarity_data()

    def _prepare_similarity_data(self):
        """Feature columns: unknown mass and axis as 0, unknown temperature as NaN"""
        records = self.catalog.records
        self.mass_earth = np.array([to_earth_masses(p.mass) or 0.0 for p in records], dtype=float)
        self.semi_major_axis = np.array([p.semi_major_axis or 0.0 for p in records], dtype=float)
        self.temperature = np.array(
            [p.equilibrium_temperature_k if p.equilibrium_temperature_k is not None else np.nan for p in records],
            dtype=float
        )

    @staticmethod
    def _relative_match(values: np.ndarray, reference: float) -> np.ndarray:
        scale = np.maximum(np.maximum(values, reference), MIN_SCALE)
        return np.abs(values - reference) / scale < RELATIVE_TOLERANCE

    def find_similar(self, reference: PlanetRecord, limit: Optional[int] = None) -> List[SimilarityMatch]:
        """
        Planets passing at least two of the mass, distance and temperature tests.

        Results keep catalog order and are not ranked. The reference record is
        excluded by identity, so other rows with identical values still match.
        """
        if limit is None:
            limit = settings.similarity_limit
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")

        mass_match = self._relative_match(self.mass_earth, to_earth_masses(reference.mass) or 0.0)
        distance_match = self._relative_match(self.semi_major_axis, reference.semi_major_axis or 0.0)
        if reference.equilibrium_temperature_k is not None:
            with np.errstate(invalid="ignore"):
                temperature_match = np.abs(self.temperature - reference.equilibrium_temperature_k) < TEMPERATURE_TOLERANCE_K
        else:
            temperature_match = np.zeros(len(self.temperature), dtype=bool)

        qualifies = (mass_match & distance_match) | (mass_match & temperature_match) | (distance_match & temperature_match)
        for i, planet in enumerate(self.catalog.records):
            if planet is reference:
                qualifies[i] = False

        records = self.catalog.records
        matches = [
            SimilarityMatch(
                planet=records[i],
                mass_match=bool(mass_match[i]),
                distance_match=bool(distance_match[i]),
                temperature_match=bool(temperature_match[i])
            )
            for i in np.flatnonzero(qualifies)[:limit]
        ]
        logger.debug("Found %d planets similar to %s", len(matches), reference.name)
        return matches
