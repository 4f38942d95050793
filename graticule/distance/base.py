"""
Earth models, units and errors shared by the distance formulas.
"""

from typing import Literal

# Mean Earth radius (IUGG), used by the spherical models
EARTH_MEAN_RADIUS_METERS = 6_371_008.8

# WGS-84 ellipsoid, used by Vincenty
WGS84_SEMI_MAJOR_AXIS = 6_378_137.0
WGS84_FLATTENING = 1 / 298.257223563
WGS84_SEMI_MINOR_AXIS = (1 - WGS84_FLATTENING) * WGS84_SEMI_MAJOR_AXIS

METERS_PER_UNIT = {
    "meters": 1.0,
    "kilometers": 1_000.0,
    "miles": 1_609.344,
}

UNIT_ALIASES = {
    "m": "meters",
    "km": "kilometers",
    "mi": "miles",
}

DistanceUnit = Literal["meters", "kilometers", "miles"]


class ConvergenceError(ArithmeticError):
    """Raised when Vincenty's iteration does not settle within its limit."""

    def __init__(self, message: str, iterations: int = 0):
        self.iterations = iterations
        super().__init__(message)


def canonical_units(units: str) -> str:
    """
    Resolve a unit name or abbreviation.

    Raises:
        ValueError: For unknown units
    """
    name = UNIT_ALIASES.get(units, units)
    if name not in METERS_PER_UNIT:
        raise ValueError(
            f"Unknown units: {units}. Choose from: {list(METERS_PER_UNIT.keys())}"
        )
    return name


def convert(value: float, from_units: str, to_units: str) -> float:
    """
    Convert a distance between units.

    Example:
        >>> convert(1, "miles", "kilometers")
        1.609344
    """
    meters = value * METERS_PER_UNIT[canonical_units(from_units)]
    return meters / METERS_PER_UNIT[canonical_units(to_units)]


def earth_radius(units: str = "miles") -> float:
    """Mean Earth radius in the requested units."""
    return EARTH_MEAN_RADIUS_METERS / METERS_PER_UNIT[canonical_units(units)]
