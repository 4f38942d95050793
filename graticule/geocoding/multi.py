"""
Fallback geocoder that chains several providers.

Providers are tried strictly in the order given. The first one to return an
acceptable Location wins; a GeocodingError moves on to the next provider;
any other exception is a bug or a misconfiguration and propagates
immediately.

Usage:
    from graticule.geocoding import MultiGeocoder, CensusGeocoder, NominatimGeocoder

    geocoder = MultiGeocoder([CensusGeocoder(), NominatimGeocoder()])
    location = geocoder.geocode("360 Plantation St, Worcester, MA")
"""

import logging
from typing import Callable, Iterable, List, Optional

from graticule.geocoding.base import (
    AddressNotFoundError,
    AddressQuery,
    AllProvidersFailedError,
    BaseGeocoder,
    GeocodingError,
    format_query,
)
from graticule.location import Location

logger = logging.getLogger(__name__)

Acceptable = Callable[[Location], bool]


def _always(location: Location) -> bool:
    return True


class MultiGeocoder(BaseGeocoder):
    """
    Presents an ordered sequence of geocoders as a single geocoder.

    Args:
        geocoders: One or more geocoders, tried in order
        acceptable: Optional predicate a resolved Location must satisfy;
            a rejected result counts as a miss for that provider
    """

    def __init__(
        self,
        geocoders: Iterable[BaseGeocoder],
        acceptable: Optional[Acceptable] = None,
    ):
        self._geocoders = tuple(geocoders)
        if not self._geocoders:
            raise ValueError("MultiGeocoder needs at least one geocoder")
        self._acceptable = acceptable or _always

    @property
    def provider_name(self) -> str:
        return "multi"

    @property
    def geocoders(self) -> tuple:
        return self._geocoders

    def geocode(self, address: AddressQuery) -> Location:
        """Geocode with the first provider that can resolve `address`."""
        return self._first_success(
            lambda geocoder: geocoder.geocode(address),
            description=format_query(address),
        )

    def reverse_geocode(self, latitude: float, longitude: float) -> Location:
        """Reverse geocode with the first provider that supports and resolves it."""
        return self._first_success(
            lambda geocoder: geocoder.reverse_geocode(latitude, longitude),
            description=f"{latitude},{longitude}",
        )

    def _first_success(
        self,
        lookup: Callable[[BaseGeocoder], Location],
        description: str,
    ) -> Location:
        errors: List[GeocodingError] = []

        for geocoder in self._geocoders:
            try:
                location = lookup(geocoder)
            except GeocodingError as e:
                logger.info(f"{geocoder.provider_name} failed for {description}: {e}")
                errors.append(e)
                continue

            if location is not None and location.is_resolved and self._acceptable(location):
                logger.debug(f"{geocoder.provider_name} resolved {description}")
                return location

            logger.info(f"{geocoder.provider_name} returned an unacceptable result for {description}")
            errors.append(AddressNotFoundError(
                "Result was unresolved or not acceptable",
                provider=geocoder.provider_name,
                address=description,
            ))

        raise AllProvidersFailedError(
            f"Couldn't resolve '{description}' with any of {len(self._geocoders)} geocoders",
            attempts=len(self._geocoders),
            errors=errors,
            address=description,
        ) from errors[-1]

    def __repr__(self) -> str:
        names = ", ".join(g.provider_name for g in self._geocoders)
        return f"MultiGeocoder([{names}])"
