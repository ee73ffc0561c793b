import pytest

from exoanalysis.schemas import PlanetRecord
from exoanalysis.services import CatalogIndex


@pytest.fixture
def earth_twin():
    return PlanetRecord(
        name="Earth Twin",
        host_star="Sol Analog",
        mass=0.00315,
        semi_major_axis=1.0,
        eccentricity=0.0167,
        orbital_period_days=365.25,
        equilibrium_temperature_k=288,
        stellar_mass_solar=1.0,
        stellar_effective_temperature_k=5778,
    )


@pytest.fixture
def empty_record():
    return PlanetRecord()


@pytest.fixture
def catalog_rows():
    """Rows as exported by the catalog page, with mixed and missing values"""
    return [
        {
            "Planet Name": "Kepler-22 b", "Planet Host": "Kepler-22", "Mass": "0.11",
            "Distance": "190", "Discovery Year": "2011", "Discovery Method": "Transit",
            "Orbit Semi-Major Axis": "0.849", "Equilibrium Temperature": "262",
        },
        {
            "Planet Name": "Proxima Cen b", "Planet Host": "Proxima Cen", "Mass": 0.00335,
            "Distance": 1.30119, "Discovery Year": 2016, "Discovery Method": "Radial Velocity",
            "Orbit Semi-Major Axis": 0.04857, "Orbital Period Days": 11.18,
        },
        {
            "Planet Name": "51 Peg b", "Planet Host": "51 Peg", "Mass": "0.46",
            "Distance": "15.47", "Discovery Year": "1995", "Discovery Method": "Radial Velocity",
        },
        {
            "Planet Name": "KEPLER-452 b", "Planet Host": "Kepler-452", "Mass": "",
            "Distance": "n/a", "Discovery Year": "2015", "Discovery Method": "Transit",
        },
        {
            "Planet Name": "TRAPPIST-1 e", "Planet Host": "TRAPPIST-1", "Mass": "0.00218",
            "Distance": "12.43", "Discovery Year": "", "Discovery Method": "",
        },
    ]


@pytest.fixture
def catalog(catalog_rows):
    return CatalogIndex.from_records(catalog_rows)
