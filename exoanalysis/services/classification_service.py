import logging
import math
from typing import List, Optional, Sequence, Tuple

from exoanalysis.normalizer import to_earth_masses, value_or_default
from exoanalysis.schemas import (
    ClassificationResult, MassClassification, MassRegime, PlanetRecord,
    TemperatureClassification, TemperatureRegime
)

logger = logging.getLogger(__name__)

# (upper bound M⊕ exclusive, regime, label, description, analog)
MASS_REGIMES = (
    (0.1, MassRegime.DWARF, "Dwarf",
     "Very small body, likely rocky with minimal atmosphere", "Similar to: Pluto, Moon"),
    (2, MassRegime.ROCKY, "Rocky",
     "Earth-sized rocky planet with possible thin atmosphere", "Similar to: Earth, Mars, Venus"),
    (10, MassRegime.SUPER_EARTH, "Super-Earth",
     "Larger rocky planet or small gas planet", "Similar to: Kepler-452b"),
    (50, MassRegime.NEPTUNE_LIKE, "Neptune-like",
     "Planet with substantial hydrogen/helium atmosphere", "Similar to: Neptune, Uranus"),
    (500, MassRegime.GAS_GIANT, "Gas Giant",
     "Massive planet primarily composed of hydrogen and helium", "Similar to: Jupiter, Saturn"),
    (math.inf, MassRegime.SUPER_JUPITER, "Super-Jupiter",
     "Extremely massive gas giant, approaching brown dwarf territory", "Larger than: Jupiter"),
)

# (upper bound K exclusive, regime, description)
TEMPERATURE_REGIMES = (
    (150, TemperatureRegime.FROZEN, "Extremely cold, likely covered in ice"),
    (273, TemperatureRegime.COLD, "Below freezing, ice and frozen gases"),
    (350, TemperatureRegime.TEMPERATE, "Moderate temperature, liquid water possible"),
    (600, TemperatureRegime.HOT, "High temperature, likely no liquid water"),
    (math.inf, TemperatureRegime.ULTRA_HOT, "Extreme heat, molten surface possible"),
)


def lookup_tier(table: Sequence[Tuple], value: float) -> Tuple:
    """First row whose upper bound is above value"""
    for row in table:
        if value < row[0]:
            return row
    return table[-1]


class PlanetClassifier:
    """Assign mass and temperature regimes"""

    @staticmethod
    def classify_mass(mass_earth: float) -> MassClassification:
        _, regime, label, description, analog = lookup_tier(MASS_REGIMES, mass_earth)
        return MassClassification(regime=regime, label=label, description=description, analog=analog)

    @staticmethod
    def classify_temperature(temperature_k: float) -> TemperatureClassification:
        _, regime, description = lookup_tier(TEMPERATURE_REGIMES, temperature_k)
        return TemperatureClassification(regime=regime, description=description)

    @staticmethod
    def planet_type(record: PlanetRecord) -> str:
        """Short type label for list views"""
        mass_earth: Optional[float] = to_earth_masses(record.mass)
        return PlanetClassifier.classify_mass(mass_earth or 0.0).label

    @staticmethod
    def classify(record: PlanetRecord) -> ClassificationResult:
        defaulted: List[str] = []
        mass_earth = to_earth_masses(record.mass)
        mass_value = value_or_default(mass_earth, 'mass_earth', defaulted)
        temperature = value_or_default(
            record.equilibrium_temperature_k, 'equilibrium_temperature_k', defaulted
        )

        result = ClassificationResult(
            planet_name=record.name,
            mass_earth=mass_earth,
            equilibrium_temperature_k=record.equilibrium_temperature_k,
            mass_regime=PlanetClassifier.classify_mass(mass_value),
            temperature_regime=PlanetClassifier.classify_temperature(temperature),
            defaulted_fields=defaulted
        )
        logger.debug("Classified %s as %s / %s", record.name,
                     result.mass_regime.regime.value, result.temperature_regime.regime.value)
        return result
