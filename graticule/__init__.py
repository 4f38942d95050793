"""
graticule: geocoding with interchangeable providers, and distance
calculations between the results.

Usage:
    from graticule import build_geocoder
    from graticule.distance import distance

    geocoder = build_geocoder(["census", "nominatim"])
    worcester = geocoder.geocode("360 Plantation St, Worcester, MA")
    boston = geocoder.geocode("1 City Hall Sq, Boston, MA")

    miles = distance(worcester, boston, formula="vincenty")
"""

from graticule.location import InvalidLocationError, Location, Precision
from graticule.distance import (
    ConvergenceError,
    haversine,
    spherical,
    vincenty,
)
from graticule.geocoding import (
    AllProvidersFailedError,
    BaseGeocoder,
    ConfigurationError,
    GeocodingError,
    MultiGeocoder,
    build_geocoder,
    geocode_address,
    get_geocoder,
    reverse_geocode,
)

__version__ = "1.0.0"

__all__ = [
    "Location",
    "Precision",
    "InvalidLocationError",
    "ConvergenceError",
    "haversine",
    "spherical",
    "vincenty",
    "BaseGeocoder",
    "MultiGeocoder",
    "GeocodingError",
    "AllProvidersFailedError",
    "ConfigurationError",
    "build_geocoder",
    "geocode_address",
    "get_geocoder",
    "reverse_geocode",
]
