"""
Unit & Field Normalizer
Parses raw catalog values and converts them to physical quantities.

Raw catalog values arrive as strings, numbers, NaN from pandas or nothing at
all. Anything that is not a finite number is reported as unknown (None) and
never coerced to zero. Formulas that need a finite number take their fallback
from DEFAULTS through `value_or_default`, which also records the substituted
field so results can say which inputs were assumed.
"""

import math
from typing import Any, List, Optional

import pandas as pd

# Conversion factors
JUPITER_TO_EARTH_MASS = 317.8
PARSEC_TO_LIGHT_YEAR = 3.26

# Fallbacks for formulas that need a finite input
DEFAULTS = {
    'mass_earth': 0.0,
    'semi_major_axis': 0.0,
    'eccentricity': 0.0,
    'orbital_period_days': 0.0,
    'equilibrium_temperature_k': 0.0,
    'stellar_effective_temperature_k': 5778.0,
    'stellar_mass_solar': 1.0,
}


def parse_number(raw: Any) -> Optional[float]:
    """Convert value to a finite float, None when it cannot be read"""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    try:
        value = float(raw)
    except (ValueError, TypeError):
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_positive(raw: Any) -> Optional[float]:
    """Physical magnitudes: zero or negative values count as unknown"""
    value = parse_number(raw)
    if value is None or value <= 0:
        return None
    return value


def parse_year(raw: Any) -> Optional[int]:
    value = parse_positive(raw)
    return int(value) if value is not None else None


def parse_text(raw: Any) -> Optional[str]:
    if raw is None:
        return None
    if not isinstance(raw, str):
        # Lists and arrays in a name cell are malformed, not text
        if not pd.api.types.is_scalar(raw) or pd.isna(raw):
            return None
        raw = str(raw)
    text = raw.strip()
    return text or None


def to_earth_masses(mass_jupiter: Any) -> Optional[float]:
    """Jupiter masses to Earth masses"""
    value = parse_positive(mass_jupiter)
    return value * JUPITER_TO_EARTH_MASS if value is not None else None


def to_light_years(distance_parsecs: Any) -> Optional[float]:
    """Parsecs to light-years"""
    value = parse_positive(distance_parsecs)
    return value * PARSEC_TO_LIGHT_YEAR if value is not None else None


def value_or_default(value: Optional[float], field: str, defaulted: List[str]) -> float:
    """Return value, or the documented default for field (recorded in defaulted)"""
    if value is not None:
        return value
    if field not in defaulted:
        defaulted.append(field)
    return DEFAULTS[field]
