"""
Great-circle distance using the spherical law of cosines.

Loses precision for points a few metres apart, where the cosine sum gets
within rounding error of 1. Prefer haversine or vincenty for short hops.
"""

import math

from graticule.distance.base import earth_radius
from graticule.location import Location


def spherical(origin: Location, destination: Location, units: str = "miles") -> float:
    """
    Calculate the distance between two locations with the law of cosines.

    Raises:
        InvalidLocationError: If either location has no coordinates
    """
    lat1, lon1 = origin.coordinates
    lat2, lon2 = destination.coordinates
    radius = earth_radius(units)

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_lambda = math.radians(lon2 - lon1)

    cosine = (
        math.sin(phi1) * math.sin(phi2) +
        math.cos(phi1) * math.cos(phi2) * math.cos(delta_lambda)
    )
    # Rounding can push the sum just past 1 for identical points
    cosine = max(-1.0, min(1.0, cosine))

    return radius * math.acos(cosine)
