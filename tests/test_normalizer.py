import math

import pytest

from exoanalysis.normalizer import (
    parse_number, parse_positive, parse_text, parse_year, to_earth_masses, to_light_years, value_or_default
)


@pytest.mark.parametrize("raw, expected", [
    ("1.5", 1.5),
    (" 42 ", 42.0),
    (7, 7.0),
    (-3.2, -3.2),
    ("", None),
    ("   ", None),
    ("abc", None),
    (None, None),
    (float("nan"), None),
    (math.inf, None),
    (True, None),
])
def test_parse_number(raw, expected):
    assert parse_number(raw) == expected


def test_parse_positive_treats_zero_and_negative_as_unknown():
    assert parse_positive("0") is None
    assert parse_positive(-1) is None
    assert parse_positive("0.5") == 0.5


def test_parse_year_truncates():
    assert parse_year("2015.7") == 2015
    assert parse_year("") is None


def test_parse_text():
    assert parse_text("  Transit ") == "Transit"
    assert parse_text("") is None
    assert parse_text(["Kepler-22", "b"]) is None
    assert parse_text(float("nan")) is None
    assert parse_text(2016) == "2016"


def test_unit_conversions():
    assert to_earth_masses(1.0) == pytest.approx(317.8)
    assert to_earth_masses("0.00315") == pytest.approx(1.00107)
    assert to_light_years(10) == pytest.approx(32.6)


def test_unit_conversions_propagate_unknown():
    assert to_earth_masses(None) is None
    assert to_earth_masses("0") is None
    assert to_light_years("far") is None


def test_value_or_default_records_substitution():
    defaulted = []
    assert value_or_default(2.0, 'stellar_mass_solar', defaulted) == 2.0
    assert defaulted == []
    assert value_or_default(None, 'stellar_mass_solar', defaulted) == 1.0
    assert value_or_default(None, 'stellar_effective_temperature_k', defaulted) == 5778.0
    assert value_or_default(None, 'stellar_mass_solar', defaulted) == 1.0
    assert defaulted == ['stellar_mass_solar', 'stellar_effective_temperature_k']
