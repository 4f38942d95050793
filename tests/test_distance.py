import math

import pytest

from graticule.distance import (
    FORMULAS,
    ConvergenceError,
    convert,
    distance,
    haversine,
    spherical,
    vincenty,
)
from graticule.distance.vincenty import MAX_ITERATIONS
from graticule.location import InvalidLocationError, Location

POINTS = [
    (0.0, 0.0),
    (40.7128, -74.0060),
    (-33.8688, 151.2093),
    (89.9, 45.0),
    (-90.0, 0.0),
    (51.5074, -0.1278),
]


@pytest.mark.parametrize("lat,lng", POINTS)
def test_haversine_point_to_itself_is_zero(lat, lng):
    point = Location(latitude=lat, longitude=lng)
    assert haversine(point, point) == 0.0


@pytest.mark.parametrize("lat,lng", POINTS)
def test_spherical_point_to_itself_is_zero_without_domain_error(lat, lng):
    point = Location(latitude=lat, longitude=lng)
    assert spherical(point, point) == pytest.approx(0.0, abs=1e-3)


def test_spherical_near_identical_points_do_not_raise():
    a = Location(latitude=42.262600000, longitude=-71.802300000)
    b = Location(latitude=42.262600001, longitude=-71.802300001)
    assert spherical(a, b) >= 0.0


@pytest.mark.parametrize("formula", sorted(FORMULAS))
def test_formulas_are_symmetric(formula, new_york, los_angeles, worcester, boston):
    for a, b in [(new_york, los_angeles), (worcester, boston), (boston, los_angeles)]:
        assert distance(a, b, formula=formula) == pytest.approx(distance(b, a, formula=formula), rel=1e-9)


def test_close_points_agree_across_formulas(worcester, boston):
    reference = vincenty(worcester, boston, units="kilometers")

    assert reference == pytest.approx(62.1, abs=1.0)
    assert haversine(worcester, boston, units="kilometers") == pytest.approx(reference, rel=0.01)
    assert spherical(worcester, boston, units="kilometers") == pytest.approx(reference, rel=0.01)


def test_vincenty_new_york_to_los_angeles(new_york, los_angeles):
    assert vincenty(new_york, los_angeles) == pytest.approx(2451, abs=5)


def test_haversine_new_york_to_los_angeles_is_close_to_vincenty(new_york, los_angeles):
    assert haversine(new_york, los_angeles) == pytest.approx(vincenty(new_york, los_angeles), rel=0.01)


def test_vincenty_coincident_points():
    point = Location(latitude=10.0, longitude=20.0)
    assert vincenty(point, point) == 0.0


def test_vincenty_along_the_equator_uses_semi_major_axis():
    origin = Location(latitude=0.0, longitude=0.0)
    quarter = Location(latitude=0.0, longitude=90.0)

    # a quarter of the equator on WGS-84
    assert vincenty(origin, quarter, units="kilometers") == pytest.approx(10018.754, rel=1e-6)


def test_vincenty_near_antipodal_points_fail_to_converge():
    origin = Location(latitude=0.0, longitude=0.0)
    antipode = Location(latitude=0.0, longitude=179.9999)

    with pytest.raises(ConvergenceError) as excinfo:
        vincenty(origin, antipode)

    assert excinfo.value.iterations == MAX_ITERATIONS


def test_haversine_handles_near_antipodal_points():
    origin = Location(latitude=0.0, longitude=0.0)
    antipode = Location(latitude=0.0, longitude=179.9999)

    assert haversine(origin, antipode, units="kilometers") == pytest.approx(20015.1, abs=1.0)


@pytest.mark.parametrize("latitude,longitude", [
    (-74.6, -180.0),
    (0.0, 0.0),
    (45.0, 0.0),
    (12.5, 77.25),
    (-33.8688, 151.2093),
    (90.0, 0.0),
])
def test_haversine_exact_antipodes_are_half_a_circumference(latitude, longitude):
    origin = Location(latitude=latitude, longitude=longitude)

    assert haversine(origin, origin.antipode(), units="kilometers") == pytest.approx(
        math.pi * 6371.0088, rel=1e-6
    )


@pytest.mark.parametrize("formula", sorted(FORMULAS))
def test_unresolved_locations_are_rejected(formula, new_york):
    unresolved = Location(street="1 Main St", locality="Nowhere")

    with pytest.raises(InvalidLocationError):
        distance(unresolved, new_york, formula=formula)
    with pytest.raises(InvalidLocationError):
        distance(new_york, unresolved, formula=formula)


def test_units(new_york, los_angeles):
    miles = haversine(new_york, los_angeles, units="miles")
    kilometers = haversine(new_york, los_angeles, units="kilometers")
    meters = haversine(new_york, los_angeles, units="meters")

    assert kilometers == pytest.approx(miles * 1.609344)
    assert meters == pytest.approx(kilometers * 1000)
    assert haversine(new_york, los_angeles, units="km") == pytest.approx(kilometers)


def test_unknown_units_and_formula(new_york, los_angeles):
    with pytest.raises(ValueError):
        haversine(new_york, los_angeles, units="furlongs")
    with pytest.raises(ValueError):
        distance(new_york, los_angeles, formula="manhattan")


def test_convert():
    assert convert(1, "miles", "kilometers") == pytest.approx(1.609344)
    assert convert(2500, "meters", "km") == pytest.approx(2.5)


def test_location_distance_to_delegates(new_york, los_angeles):
    assert new_york.distance_to(los_angeles, formula="vincenty", units="kilometers") == (
        vincenty(new_york, los_angeles, units="kilometers")
    )
