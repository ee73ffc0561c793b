"""
Orbital Mechanics Module
Habitable zone, orbit geometry and host star quantities
"""

import logging
import math
from typing import List, Optional, Tuple

from exoanalysis.normalizer import value_or_default
from exoanalysis.schemas import (
    EccentricityClass, HabitableZone, OrbitalDynamics, PlanetRecord, SpectralClass, StellarProperties
)

logger = logging.getLogger(__name__)

AU_KM = 149597870.7
SECONDS_PER_DAY = 86400
DAYS_PER_EARTH_YEAR = 365.25

# Stellar flux limits of the conservative liquid-water zone
HZ_INNER_FLUX = 1.1
HZ_OUTER_FLUX = 0.53

# Fixed orbital shape thresholds
NEARLY_CIRCULAR_LIMIT = 0.05
SLIGHTLY_ELLIPTICAL_LIMIT = 0.2

TIDAL_LOCK_AXIS_AU = 0.1
TIDAL_LOCK_PERIOD_DAYS = 10

# (lower bound K, class, colour, description), hottest first
SPECTRAL_CLASSES = (
    (7500, SpectralClass.A, "White", "Hot and white"),
    (6000, SpectralClass.F, "Yellow-white", "Slightly hotter than the Sun"),
    (5200, SpectralClass.G, "Yellow", "Sun-like star"),
    (3700, SpectralClass.K, "Orange", "Cooler orange dwarf"),
    (-math.inf, SpectralClass.M, "Red", "Cool red dwarf"),
)


def stellar_luminosity(stellar_mass_solar: float) -> float:
    """Mass-luminosity power law, in solar luminosities"""
    return stellar_mass_solar ** 3.5


def main_sequence_lifetime(stellar_mass_solar: float) -> float:
    """Rough main-sequence lifetime in Gyr, scaled from 10 Gyr for the Sun"""
    return 10 * stellar_mass_solar ** -2.5


def habitable_zone(stellar_mass_solar: float, semi_major_axis: float) -> HabitableZone:
    luminosity = stellar_luminosity(stellar_mass_solar)
    inner = math.sqrt(luminosity / HZ_INNER_FLUX)
    outer = math.sqrt(luminosity / HZ_OUTER_FLUX)
    return HabitableZone(inner_au=inner, outer_au=outer, inside_zone=inner <= semi_major_axis <= outer)


def perihelion(semi_major_axis: float, eccentricity: float) -> float:
    return semi_major_axis * (1 - eccentricity)


def aphelion(semi_major_axis: float, eccentricity: float) -> float:
    return semi_major_axis * (1 + eccentricity)


def eccentricity_class(eccentricity: float) -> EccentricityClass:
    if eccentricity < NEARLY_CIRCULAR_LIMIT:
        return EccentricityClass.NEARLY_CIRCULAR
    if eccentricity < SLIGHTLY_ELLIPTICAL_LIMIT:
        return EccentricityClass.SLIGHTLY_ELLIPTICAL
    return EccentricityClass.HIGHLY_ELLIPTICAL


def is_tidally_locked(semi_major_axis: float, orbital_period_days: float) -> bool:
    """
    Coarse heuristic: close or fast orbits are flagged as locked.
    No tidal torque is computed.
    """
    return semi_major_axis < TIDAL_LOCK_AXIS_AU or orbital_period_days < TIDAL_LOCK_PERIOD_DAYS


def orbital_velocity(semi_major_axis: float, orbital_period_days: Optional[float]) -> Optional[float]:
    """Mean orbital velocity in km/s, None without a usable period"""
    if not orbital_period_days:
        return None
    return 2 * math.pi * semi_major_axis * AU_KM / (orbital_period_days * SECONDS_PER_DAY)


def year_length(orbital_period_days: Optional[float]) -> Optional[float]:
    if orbital_period_days is None:
        return None
    return orbital_period_days / DAYS_PER_EARTH_YEAR


def spectral_class(effective_temperature_k: float) -> SpectralClass:
    return _spectral_row(effective_temperature_k)[1]


def _spectral_row(effective_temperature_k: float) -> Tuple:
    for row in SPECTRAL_CLASSES:
        if effective_temperature_k > row[0]:
            return row
    return SPECTRAL_CLASSES[-1]


class OrbitalCalculator:
    """Derive orbital and stellar reports from a catalog record"""

    @staticmethod
    def habitable_zone_for(record: PlanetRecord, defaulted: List[str]) -> HabitableZone:
        stellar_mass = value_or_default(record.stellar_mass_solar, 'stellar_mass_solar', defaulted)
        axis = value_or_default(record.semi_major_axis, 'semi_major_axis', defaulted)
        return habitable_zone(stellar_mass, axis)

    @staticmethod
    def analyze_orbit(record: PlanetRecord) -> OrbitalDynamics:
        defaulted: List[str] = []
        axis = value_or_default(record.semi_major_axis, 'semi_major_axis', defaulted)
        ecc = value_or_default(record.eccentricity, 'eccentricity', defaulted)
        period = value_or_default(record.orbital_period_days, 'orbital_period_days', defaulted)

        dynamics = OrbitalDynamics(
            planet_name=record.name,
            semi_major_axis_au=axis,
            eccentricity=ecc,
            eccentricity_class=eccentricity_class(ecc),
            perihelion_au=perihelion(axis, ecc),
            aphelion_au=aphelion(axis, ecc),
            tidally_locked=is_tidally_locked(axis, period),
            orbital_velocity_km_s=orbital_velocity(axis, record.orbital_period_days),
            year_length_earth_years=year_length(record.orbital_period_days),
            defaulted_fields=defaulted
        )
        logger.debug("Orbit analysed for %s (defaults: %s)", record.name, defaulted)
        return dynamics

    @staticmethod
    def analyze_star(record: PlanetRecord) -> StellarProperties:
        defaulted: List[str] = []
        stellar_mass = value_or_default(record.stellar_mass_solar, 'stellar_mass_solar', defaulted)

        teff = record.stellar_effective_temperature_k
        row = _spectral_row(teff) if teff is not None else (None, None, None, None)

        return StellarProperties(
            host_star=record.host_star,
            spectral_type=record.spectral_type,
            spectral_class=row[1],
            spectral_color=row[2],
            spectral_description=row[3],
            effective_temperature_k=teff,
            stellar_mass_solar=record.stellar_mass_solar,
            stellar_radius_solar=record.stellar_radius_solar,
            luminosity_solar=stellar_luminosity(stellar_mass),
            lifetime_gyr=main_sequence_lifetime(stellar_mass),
            defaulted_fields=defaulted
        )
