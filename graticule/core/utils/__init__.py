"""
Shared utility functions for graticule.

Modules:
- geo: Coordinate range and bounding box checks
- inflection: String casing helpers for provider field names

Usage:
    from graticule.core.utils import is_within_bounds, underscore
"""

from graticule.core.utils.geo import (
    is_number,
    is_valid_latitude,
    is_valid_longitude,
    normalize_longitude,
    is_within_bounds,
    within_bounds,
)
from graticule.core.utils.inflection import (
    camelize,
    underscore,
    humanize,
    titleize,
)

__all__ = [
    # Geo utilities
    "is_number",
    "is_valid_latitude",
    "is_valid_longitude",
    "normalize_longitude",
    "is_within_bounds",
    "within_bounds",
    # Inflection utilities
    "camelize",
    "underscore",
    "humanize",
    "titleize",
]
