"""
Geographic utility functions for coordinate checks.

Usage:
    from graticule.core.utils.geo import is_within_bounds, normalize_longitude

    bounds = {"min_lat": 42.20, "max_lat": 42.35, "min_lng": -71.90, "max_lng": -71.70}
    is_within_bounds(42.26, -71.80, bounds)  # True
    normalize_longitude(190.0)  # -170.0
"""

import math
from typing import Any, Callable, Mapping

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0


def is_number(value: Any) -> bool:
    """True for real ints and floats; bools and NaN are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def is_valid_latitude(lat: float) -> bool:
    return MIN_LATITUDE <= lat <= MAX_LATITUDE


def is_valid_longitude(lng: float) -> bool:
    return MIN_LONGITUDE <= lng <= MAX_LONGITUDE


def normalize_longitude(lng: float) -> float:
    """
    Wrap a longitude into [-180, 180].

    Example:
        >>> normalize_longitude(190.0)
        -170.0
        >>> normalize_longitude(180.0)
        180.0
    """
    if MIN_LONGITUDE <= lng <= MAX_LONGITUDE:
        return lng
    return ((lng + 180.0) % 360.0) - 180.0


def is_within_bounds(lat: float, lng: float, bounds: Mapping[str, float]) -> bool:
    """
    Check if coordinates are within a bounding box.

    Args:
        lat: Latitude to check
        lng: Longitude to check
        bounds: Dictionary with min_lat, max_lat, min_lng, max_lng

    Returns:
        True if coordinates are within bounds
    """
    return (
        bounds["min_lat"] <= lat <= bounds["max_lat"] and
        bounds["min_lng"] <= lng <= bounds["max_lng"]
    )


def within_bounds(bounds: Mapping[str, float]) -> Callable[[Any], bool]:
    """
    Build a predicate accepting resolved locations inside `bounds`.

    Meant as the `acceptable` argument of MultiGeocoder, so a provider that
    resolves an address to the wrong city is skipped in favour of the next one.
    """
    def _accept(location) -> bool:
        return location.is_resolved and is_within_bounds(
            location.latitude, location.longitude, bounds
        )

    return _accept
