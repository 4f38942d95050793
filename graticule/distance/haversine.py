"""
Great-circle distance using the Haversine formula.

Stable for both very close and nearly antipodal points, which makes it the
default formula.
"""

import math

from graticule.distance.base import earth_radius
from graticule.location import Location


def haversine(origin: Location, destination: Location, units: str = "miles") -> float:
    """
    Calculate the great-circle distance between two locations.

    Args:
        origin: Resolved starting Location
        destination: Resolved ending Location
        units: 'miles', 'kilometers' or 'meters'

    Returns:
        Distance between the two points in the specified unit

    Raises:
        InvalidLocationError: If either location has no coordinates
    """
    lat1, lon1 = origin.coordinates
    lat2, lon2 = destination.coordinates
    radius = earth_radius(units)

    # Convert to radians
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_phi = math.radians(lat2 - lat1)
    delta_lambda = math.radians(lon2 - lon1)

    # Haversine formula
    a = (
        math.sin(delta_phi / 2) ** 2 +
        math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    )
    # Rounding can push `a` just past 1 for antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return radius * c
