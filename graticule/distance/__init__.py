"""
Distance formulas between two resolved Locations.

Three interchangeable strategies, all returning a float in the requested
units (miles by default):

- haversine: great circle on a sphere (default, stable everywhere)
- spherical: law of cosines on a sphere (imprecise for tiny distances)
- vincenty: WGS-84 ellipsoid (most accurate, fails near antipodes)

Usage:
    from graticule.distance import distance, vincenty

    miles = distance(new_york, los_angeles)
    km = vincenty(new_york, los_angeles, units="kilometers")
"""

from typing import Callable, Dict

from graticule.distance.base import (
    ConvergenceError,
    DistanceUnit,
    canonical_units,
    convert,
    earth_radius,
)
from graticule.distance.haversine import haversine
from graticule.distance.spherical import spherical
from graticule.distance.vincenty import vincenty
from graticule.location import InvalidLocationError, Location

FORMULAS: Dict[str, Callable[..., float]] = {
    "haversine": haversine,
    "spherical": spherical,
    "vincenty": vincenty,
}


def distance(
    origin: Location,
    destination: Location,
    formula: str = "haversine",
    units: str = "miles",
) -> float:
    """
    Calculate the distance between two locations with the named formula.

    Raises:
        ValueError: Unknown formula or units
        InvalidLocationError: Either location has no coordinates
        ConvergenceError: vincenty did not converge
    """
    if formula not in FORMULAS:
        raise ValueError(f"Unknown formula: {formula}. Choose from: {list(FORMULAS.keys())}")
    return FORMULAS[formula](origin, destination, units=units)


__all__ = [
    "FORMULAS",
    "distance",
    "haversine",
    "spherical",
    "vincenty",
    "convert",
    "canonical_units",
    "earth_radius",
    "DistanceUnit",
    "ConvergenceError",
    "InvalidLocationError",
]
