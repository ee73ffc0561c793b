import pandas as pd
import pytest

from exoanalysis.schemas import (
    ClassificationResult, EarthSimilarityAssessment, HabitabilityAssessment, HabitabilityVerdict,
    NoPlanetSelected, OrbitalDynamics, SimilarPlanetsResponse, StellarProperties
)
from exoanalysis.services import NO_PLANET_SELECTED, PlanetAnalysisService


@pytest.fixture
def service(catalog_rows):
    return PlanetAnalysisService.from_records(catalog_rows)


@pytest.mark.parametrize("operation", [
    "analyze_habitability", "classify_planet", "compare_to_earth",
    "analyze_orbit", "analyze_star", "find_similar",
])
def test_no_planet_selected_is_a_result(service, operation):
    result = getattr(service, operation)(None)
    assert isinstance(result, NoPlanetSelected)
    assert result == NO_PLANET_SELECTED
    assert result.reason == "no_planet_selected"


def test_select_by_name(service):
    assert service.select("Proxima Cen b").host_star == "Proxima Cen"
    assert service.select("Unknown world") is None


def test_operations_return_typed_results(service):
    planet = service.select("Kepler-22 b")
    assert isinstance(service.analyze_habitability(planet), HabitabilityAssessment)
    assert isinstance(service.classify_planet(planet), ClassificationResult)
    assert isinstance(service.compare_to_earth(planet), EarthSimilarityAssessment)
    assert isinstance(service.analyze_orbit(planet), OrbitalDynamics)
    assert isinstance(service.analyze_star(planet), StellarProperties)


def test_proxima_is_tidally_locked(service):
    dynamics = service.analyze_orbit(service.select("Proxima Cen b"))
    assert dynamics.tidally_locked
    assert dynamics.orbital_velocity_km_s == pytest.approx(47.263, abs=0.01)


def test_kepler_22_outside_sun_like_zone(service):
    assessment = service.analyze_habitability(service.select("Kepler-22 b"))
    # 0.849 AU with a default solar-mass star lies inside the inner edge
    assert not assessment.habitable_zone.inside_zone
    assert [f.points for f in assessment.factors] == [0, 15, 5, 15, 5]
    assert assessment.score == 40
    assert assessment.verdict is HabitabilityVerdict.POTENTIALLY_HABITABLE


def test_find_similar_response(service):
    response = service.find_similar(service.select("Proxima Cen b"))
    assert isinstance(response, SimilarPlanetsResponse)
    assert response.reference_name == "Proxima Cen b"
    assert response.reference_mass_earth == pytest.approx(0.00335 * 317.8)
    assert response.reference_temperature_k is None
    assert response.total_found == len(response.similar_planets)
    assert "Proxima Cen b" not in [match.planet.name for match in response.similar_planets]


def test_results_dump_to_plain_data(service):
    dumped = service.analyze_habitability(service.select("51 Peg b")).model_dump(mode="json")
    assert dumped["verdict"] in [verdict.value for verdict in HabitabilityVerdict]
    assert [factor["label"] for factor in dumped["factors"]][0] == "Habitable zone"


def test_from_dataframe(catalog_rows):
    service = PlanetAnalysisService.from_dataframe(pd.DataFrame(catalog_rows))
    assert len(service.catalog) == 5
    assert service.select("TRAPPIST-1 e").mass == pytest.approx(0.00218)
