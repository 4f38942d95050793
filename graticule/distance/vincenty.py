"""
Ellipsoidal distance using Vincenty's inverse formula on WGS-84.

Accurate to well under a metre, but the iteration fails to converge for
nearly antipodal points. Callers catching ConvergenceError should fall back
to haversine.

Reference: T. Vincenty, "Direct and Inverse Solutions of Geodesics on the
Ellipsoid with application of nested equations", Survey Review, 1975.
"""

import logging
import math

from graticule.distance.base import (
    ConvergenceError,
    METERS_PER_UNIT,
    WGS84_FLATTENING,
    WGS84_SEMI_MAJOR_AXIS,
    WGS84_SEMI_MINOR_AXIS,
    canonical_units,
)
from graticule.location import Location

logger = logging.getLogger(__name__)

CONVERGENCE_TOLERANCE = 1e-12  # radians, roughly 0.006 mm
MAX_ITERATIONS = 200


def vincenty(
    origin: Location,
    destination: Location,
    units: str = "miles",
    tolerance: float = CONVERGENCE_TOLERANCE,
    max_iterations: int = MAX_ITERATIONS,
) -> float:
    """
    Calculate the geodesic distance between two locations on the WGS-84 ellipsoid.

    Args:
        origin: Resolved starting Location
        destination: Resolved ending Location
        units: 'miles', 'kilometers' or 'meters'
        tolerance: Change in lambda (radians) below which iteration stops
        max_iterations: Iteration limit before giving up

    Returns:
        Distance in the specified unit

    Raises:
        InvalidLocationError: If either location has no coordinates
        ConvergenceError: If the iteration limit is reached (near-antipodal points)
    """
    lat1, lon1 = origin.coordinates
    lat2, lon2 = destination.coordinates
    meters_per_unit = METERS_PER_UNIT[canonical_units(units)]

    a = WGS84_SEMI_MAJOR_AXIS
    b = WGS84_SEMI_MINOR_AXIS
    f = WGS84_FLATTENING

    L = math.radians(lon2 - lon1)
    U1 = math.atan((1 - f) * math.tan(math.radians(lat1)))
    U2 = math.atan((1 - f) * math.tan(math.radians(lat2)))
    sin_u1, cos_u1 = math.sin(U1), math.cos(U1)
    sin_u2, cos_u2 = math.sin(U2), math.cos(U2)

    lam = L
    for iteration in range(1, max_iterations + 1):
        sin_lam = math.sin(lam)
        cos_lam = math.cos(lam)

        sin_sigma = math.sqrt(
            (cos_u2 * sin_lam) ** 2 +
            (cos_u1 * sin_u2 - sin_u1 * cos_u2 * cos_lam) ** 2
        )
        if sin_sigma == 0:
            return 0.0  # coincident points

        cos_sigma = sin_u1 * sin_u2 + cos_u1 * cos_u2 * cos_lam
        sigma = math.atan2(sin_sigma, cos_sigma)

        sin_alpha = cos_u1 * cos_u2 * sin_lam / sin_sigma
        cos_sq_alpha = 1 - sin_alpha ** 2
        if cos_sq_alpha != 0:
            cos_2sigma_m = cos_sigma - 2 * sin_u1 * sin_u2 / cos_sq_alpha
        else:
            cos_2sigma_m = 0.0  # both points on the equator

        C = f / 16 * cos_sq_alpha * (4 + f * (4 - 3 * cos_sq_alpha))
        lam_prev = lam
        lam = L + (1 - C) * f * sin_alpha * (
            sigma + C * sin_sigma * (
                cos_2sigma_m + C * cos_sigma * (-1 + 2 * cos_2sigma_m ** 2)
            )
        )

        if abs(lam - lam_prev) < tolerance:
            break
    else:
        logger.debug(
            f"Vincenty did not converge after {max_iterations} iterations "
            f"for ({lat1}, {lon1}) -> ({lat2}, {lon2})"
        )
        raise ConvergenceError(
            f"Vincenty formula failed to converge after {max_iterations} iterations; "
            f"points may be nearly antipodal",
            iterations=max_iterations,
        )

    u_sq = cos_sq_alpha * (a ** 2 - b ** 2) / b ** 2
    A = 1 + u_sq / 16384 * (4096 + u_sq * (-768 + u_sq * (320 - 175 * u_sq)))
    B = u_sq / 1024 * (256 + u_sq * (-128 + u_sq * (74 - 47 * u_sq)))
    delta_sigma = B * sin_sigma * (
        cos_2sigma_m + B / 4 * (
            cos_sigma * (-1 + 2 * cos_2sigma_m ** 2) -
            B / 6 * cos_2sigma_m * (-3 + 4 * sin_sigma ** 2) * (-3 + 4 * cos_2sigma_m ** 2)
        )
    )

    meters = b * A * (sigma - delta_sigma)
    return meters / meters_per_unit
