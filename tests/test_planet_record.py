import pydantic
import pytest

from exoanalysis.schemas import NormalizedPlanet, PlanetRecord
from exoanalysis.services import CatalogIndex


def test_record_from_catalog_export_columns():
    record = PlanetRecord.from_mapping({
        "Planet Name": " Kepler-22 b ",
        "Planet Host": "Kepler-22",
        "Mass": "0.11",
        "Orbit Semi-Major Axis": "0.849",
        "Discovery Year": "2011",
        "Stellar Mass": "0.97",
        "Unrelated Column": "ignored",
    })
    assert record.name == "Kepler-22 b"
    assert record.host_star == "Kepler-22"
    assert record.mass == pytest.approx(0.11)
    assert record.semi_major_axis == pytest.approx(0.849)
    assert record.discovery_year == 2011
    assert record.stellar_mass_solar == pytest.approx(0.97)


def test_record_from_archive_and_camel_case_columns():
    archive = PlanetRecord.from_mapping({"pl_name": "TOI-700 d", "pl_bmassj": 0.0054, "st_teff": 3480})
    camel = PlanetRecord.from_mapping({"name": "TOI-700 d", "semiMajorAxis": 0.163, "stellarMassSolar": 0.415})
    assert archive.name == "TOI-700 d"
    assert archive.stellar_effective_temperature_k == 3480
    assert camel.semi_major_axis == pytest.approx(0.163)
    assert camel.stellar_mass_solar == pytest.approx(0.415)


def test_malformed_fields_become_unknown():
    record = PlanetRecord.from_mapping({
        "Planet Name": "",
        "Mass": "heavy",
        "Distance": "-4",
        "Equilibrium Temperature": "0",
        "Discovery Year": "unknown",
        "Eccentricity": "-0.1",
    })
    assert record.name is None
    assert record.mass is None
    assert record.distance_parsecs is None
    assert record.equilibrium_temperature_k is None
    assert record.discovery_year is None
    assert record.eccentricity is None


def test_non_scalar_cells_become_unknown():
    record = PlanetRecord.from_mapping({
        "Planet Name": ["Kepler-22", "b"],
        "Planet Host": {"name": "Kepler-22"},
        "Mass": "0.11",
    })
    assert record.name is None
    assert record.host_star is None
    assert record.mass == pytest.approx(0.11)

    catalog = CatalogIndex.from_records([{"Planet Name": ["Kepler-22", "b"], "Mass": "0.11"}])
    assert len(catalog) == 1


def test_zero_eccentricity_is_a_measurement():
    assert PlanetRecord(eccentricity="0").eccentricity == 0.0


def test_record_is_immutable(earth_twin):
    with pytest.raises(pydantic.ValidationError):
        earth_twin.mass = 1.0


def test_normalized_planet(earth_twin):
    normalized = NormalizedPlanet.from_record(earth_twin)
    assert normalized.mass_earth == pytest.approx(1.00107)
    assert normalized.distance_light_years is None

    far = NormalizedPlanet.from_record(PlanetRecord(distance_parsecs=100))
    assert far.distance_light_years == pytest.approx(326.0)
    assert far.mass_earth is None
