"""
Habitability Scorer
Weighted multi-factor habitability and Earth-similarity scores
"""

import logging
from typing import List

from exoanalysis.normalizer import to_earth_masses, value_or_default
from exoanalysis.schemas import (
    EarthSimilarityAssessment, EarthSimilarityVerdict, FactorStatus, HabitabilityAssessment,
    HabitabilityVerdict, PlanetRecord, ScoreFactor
)
from .orbital_mechanics import OrbitalCalculator, year_length

logger = logging.getLogger(__name__)

# (minimum score, verdict), highest first
HABITABILITY_VERDICTS = (
    (70, HabitabilityVerdict.HIGHLY_PROMISING),
    (40, HabitabilityVerdict.POTENTIALLY_HABITABLE),
    (20, HabitabilityVerdict.MARGINALLY_HABITABLE),
    (0, HabitabilityVerdict.UNLIKELY),
)

EARTH_SIMILARITY_VERDICTS = (
    (70, EarthSimilarityVerdict.VERY_SIMILAR),
    (50, EarthSimilarityVerdict.MODERATELY_SIMILAR),
    (30, EarthSimilarityVerdict.SOMEWHAT_EARTH_LIKE),
    (0, EarthSimilarityVerdict.VERY_DIFFERENT),
)


def _verdict(table, score: int):
    for minimum, verdict in table:
        if score >= minimum:
            return verdict
    return table[-1][1]


def _factor(label: str, status: FactorStatus, points: int, justification: str) -> ScoreFactor:
    return ScoreFactor(label=label, status=status, points=points, justification=justification)


class HabitabilityCalculator:
    """Calculate habitability scores for exoplanets"""

    @staticmethod
    def verdict_for(score: int) -> HabitabilityVerdict:
        return _verdict(HABITABILITY_VERDICTS, score)

    @staticmethod
    def assess(record: PlanetRecord) -> HabitabilityAssessment:
        """
        Score a planet from 0 to 100 on five independent factors.

        Missing planet mass and temperature count as 0 and therefore against
        habitability. A missing stellar temperature is taken as solar (5778 K)
        and a missing stellar mass as 1 M☉.
        """
        defaulted: List[str] = []
        zone = OrbitalCalculator.habitable_zone_for(record, defaulted)
        eq_temp = value_or_default(record.equilibrium_temperature_k, 'equilibrium_temperature_k', defaulted)
        mass_earth = value_or_default(to_earth_masses(record.mass), 'mass_earth', defaulted)
        stellar_temp = value_or_default(
            record.stellar_effective_temperature_k, 'stellar_effective_temperature_k', defaulted
        )
        eccentricity = value_or_default(record.eccentricity, 'eccentricity', defaulted)

        factors = []

        # Habitable zone
        if zone.inside_zone:
            factors.append(_factor("Habitable zone", FactorStatus.SATISFIED, 35, "Orbits within habitable zone"))
        else:
            factors.append(_factor("Habitable zone", FactorStatus.FAILED, 0, "Outside habitable zone"))

        # Equilibrium temperature
        if 273 < eq_temp < 373:
            factors.append(_factor("Temperature", FactorStatus.SATISFIED, 25, "Temperature allows liquid water"))
        elif 200 < eq_temp < 400:
            factors.append(_factor("Temperature", FactorStatus.PARTIAL, 15, "Temperature possibly suitable"))
        else:
            factors.append(_factor("Temperature", FactorStatus.FAILED, 0, "Temperature extreme"))

        # Planet mass
        if 0.3 <= mass_earth <= 10:
            factors.append(_factor("Mass", FactorStatus.SATISFIED, 20, "Mass suitable for rocky planet"))
        elif 10 < mass_earth < 50:
            factors.append(_factor("Mass", FactorStatus.PARTIAL, 5, "Large planet, might be Neptune-like"))
        else:
            factors.append(_factor("Mass", FactorStatus.FAILED, 0, "Mass not ideal for habitability"))

        # Host star, never below the baseline
        if 3500 < stellar_temp < 7000:
            factors.append(_factor("Host star", FactorStatus.SATISFIED, 15, "Star type suitable for life"))
        else:
            factors.append(_factor("Host star", FactorStatus.PARTIAL, 5, "Star type less ideal"))

        # Orbital eccentricity
        if eccentricity < 0.2:
            factors.append(_factor("Eccentricity", FactorStatus.SATISFIED, 5, "Low orbital eccentricity"))
        else:
            factors.append(_factor(
                "Eccentricity", FactorStatus.PARTIAL, 0, "High eccentricity causes temperature variations"
            ))

        score = sum(factor.points for factor in factors)
        logger.debug("Habitability score for %s: %d", record.name, score)

        return HabitabilityAssessment(
            planet_name=record.name,
            score=score,
            verdict=HabitabilityCalculator.verdict_for(score),
            factors=factors,
            habitable_zone=zone,
            defaulted_fields=defaulted
        )


class EarthSimilarityCalculator:
    """Compare a planet with Earth on mass, orbit, temperature, shape and star"""

    @staticmethod
    def verdict_for(score: int) -> EarthSimilarityVerdict:
        return _verdict(EARTH_SIMILARITY_VERDICTS, score)

    @staticmethod
    def assess(record: PlanetRecord) -> EarthSimilarityAssessment:
        defaulted: List[str] = []
        mass_earth = to_earth_masses(record.mass)
        mass_value = value_or_default(mass_earth, 'mass_earth', defaulted)
        axis = value_or_default(record.semi_major_axis, 'semi_major_axis', defaulted)
        eq_temp = value_or_default(record.equilibrium_temperature_k, 'equilibrium_temperature_k', defaulted)
        eccentricity = value_or_default(record.eccentricity, 'eccentricity', defaulted)
        # Unknown stellar temperature never matches the Sun here
        stellar_temp = record.stellar_effective_temperature_k
        if stellar_temp is None:
            defaulted.append('stellar_effective_temperature_k')
            stellar_temp = 0.0

        factors = []

        if 0.5 <= mass_value <= 2:
            factors.append(_factor("Mass", FactorStatus.SATISFIED, 25, "Similar mass to Earth"))
        else:
            factors.append(_factor("Mass", FactorStatus.FAILED, 0, "Very different mass"))

        if 0.7 <= axis <= 1.5:
            factors.append(_factor("Orbital distance", FactorStatus.SATISFIED, 25, "Similar orbital distance"))
        else:
            factors.append(_factor("Orbital distance", FactorStatus.FAILED, 0, "Very different orbital distance"))

        if 250 <= eq_temp <= 300:
            factors.append(_factor("Temperature", FactorStatus.SATISFIED, 25, "Similar temperature"))
        elif 200 <= eq_temp <= 350:
            factors.append(_factor("Temperature", FactorStatus.PARTIAL, 15, "Somewhat similar temperature"))
        else:
            factors.append(_factor("Temperature", FactorStatus.FAILED, 0, "Very different temperature"))

        if eccentricity < 0.1:
            factors.append(_factor("Orbital shape", FactorStatus.SATISFIED, 15, "Similar orbital shape"))
        else:
            factors.append(_factor("Orbital shape", FactorStatus.PARTIAL, 0, "Different orbital shape"))

        if 5000 <= stellar_temp <= 6500:
            factors.append(_factor("Host star", FactorStatus.SATISFIED, 10, "Similar star type"))
        else:
            factors.append(_factor("Host star", FactorStatus.PARTIAL, 0, "Different star type"))

        score = sum(factor.points for factor in factors)

        return EarthSimilarityAssessment(
            planet_name=record.name,
            score=score,
            verdict=EarthSimilarityCalculator.verdict_for(score),
            factors=factors,
            mass_ratio_earth=mass_earth,
            year_length_earth_years=year_length(record.orbital_period_days),
            defaulted_fields=defaulted
        )
