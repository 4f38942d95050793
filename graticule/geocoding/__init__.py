"""
Geocoding module with interchangeable providers.

Provides a unified interface for multiple geocoding providers:
- Census: US Census Bureau Geocoder (free, unlimited, US only)
- Google: Google Geocoding API (paid, accurate)
- Nominatim: OpenStreetMap (free, 1 req/sec usage policy)
- Bogus: Fixed answers for development and tests

Usage:
    from graticule.geocoding import CensusGeocoder, MultiGeocoder, geocode_address

    # Using specific provider
    geocoder = CensusGeocoder()
    location = geocoder.geocode("360 Plantation St, Worcester, MA")

    # Using a fallback chain
    location = geocode_address("360 Plantation St, Worcester, MA",
                               providers=["census", "nominatim"])
"""

from graticule.geocoding.base import (
    AddressNotFoundError,
    AddressQuery,
    AllProvidersFailedError,
    BaseGeocoder,
    ConfigurationError,
    GeocodingError,
    ProviderError,
    UnsupportedOperationError,
    format_query,
    normalize_query,
)
from graticule.geocoding.rest import RestGeocoder
from graticule.geocoding.multi import MultiGeocoder
from graticule.geocoding.bogus import BogusGeocoder
from graticule.geocoding.providers.census import CensusGeocoder
from graticule.geocoding.providers.google import GoogleGeocoder
from graticule.geocoding.providers.nominatim import NominatimGeocoder
from graticule.geocoding.facade import (
    PROVIDERS,
    build_geocoder,
    geocode_address,
    get_geocoder,
    reverse_geocode,
)

__all__ = [
    # Base classes
    "AddressQuery",
    "BaseGeocoder",
    "RestGeocoder",
    "MultiGeocoder",
    # Errors
    "GeocodingError",
    "AddressNotFoundError",
    "UnsupportedOperationError",
    "ProviderError",
    "AllProvidersFailedError",
    "ConfigurationError",
    # Providers
    "BogusGeocoder",
    "CensusGeocoder",
    "GoogleGeocoder",
    "NominatimGeocoder",
    # Convenience functions
    "PROVIDERS",
    "get_geocoder",
    "build_geocoder",
    "geocode_address",
    "reverse_geocode",
    "format_query",
    "normalize_query",
]
