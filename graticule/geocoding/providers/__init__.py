"""
Geocoding provider implementations.
"""

from graticule.geocoding.providers.census import CensusGeocoder
from graticule.geocoding.providers.google import GoogleGeocoder
from graticule.geocoding.providers.nominatim import NominatimGeocoder

__all__ = ["CensusGeocoder", "GoogleGeocoder", "NominatimGeocoder"]
