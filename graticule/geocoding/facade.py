"""
Geocoding facade providing a simple interface to all providers.
"""

import logging
from typing import Callable, Dict, List, Optional, Sequence

from graticule.core.config import settings
from graticule.geocoding.base import AddressQuery, BaseGeocoder, ConfigurationError
from graticule.geocoding.bogus import BogusGeocoder
from graticule.geocoding.multi import Acceptable, MultiGeocoder
from graticule.geocoding.providers.census import CensusGeocoder
from graticule.geocoding.providers.google import GoogleGeocoder
from graticule.geocoding.providers.nominatim import NominatimGeocoder
from graticule.location import Location

logger = logging.getLogger(__name__)

PROVIDERS: Dict[str, Callable[[], BaseGeocoder]] = {
    "census": CensusGeocoder,
    "google": GoogleGeocoder,
    "nominatim": NominatimGeocoder,
    "bogus": BogusGeocoder,
}


def get_geocoder(provider: str = "census") -> BaseGeocoder:
    """
    Get a geocoder instance by provider name.

    Args:
        provider: Provider name ("census", "google", "nominatim", "bogus")

    Returns:
        Geocoder instance

    Raises:
        ConfigurationError: Unknown provider name
    """
    name = provider.strip().lower()
    if name not in PROVIDERS:
        raise ConfigurationError(f"Unknown provider: {provider}. Choose from: {list(PROVIDERS.keys())}")

    return PROVIDERS[name]()


def build_geocoder(
    providers: Optional[Sequence[str]] = None,
    acceptable: Optional[Acceptable] = None,
) -> BaseGeocoder:
    """
    Build a geocoder for one provider or a fallback chain of several.

    Args:
        providers: Provider names in fallback order (default: settings.provider_names)
        acceptable: Optional predicate passed to MultiGeocoder

    Returns:
        The single geocoder when one name is given without a predicate,
        otherwise a MultiGeocoder

    Example:
        geocoder = build_geocoder(["census", "nominatim"])
    """
    names: List[str] = list(providers) if providers else settings.provider_names
    if not names:
        raise ConfigurationError("No geocoding providers configured")

    geocoders = [get_geocoder(name) for name in names]
    if len(geocoders) == 1 and acceptable is None:
        return geocoders[0]

    logger.debug(f"Fallback chain: {names}")
    return MultiGeocoder(geocoders, acceptable=acceptable)


def geocode_address(
    address: AddressQuery,
    providers: Optional[Sequence[str]] = None,
    acceptable: Optional[Acceptable] = None,
) -> Location:
    """
    Geocode a single address with optional fallback providers.

    Example:
        location = geocode_address(
            "360 Plantation St, Worcester, MA",
            providers=["census", "nominatim"],
        )
    """
    return build_geocoder(providers, acceptable=acceptable).geocode(address)


def reverse_geocode(
    latitude: float,
    longitude: float,
    providers: Optional[Sequence[str]] = None,
) -> Location:
    """Reverse geocode a coordinate pair with optional fallback providers."""
    return build_geocoder(providers).reverse_geocode(latitude, longitude)
