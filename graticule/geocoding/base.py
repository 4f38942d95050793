"""
Base classes and interfaces for geocoding providers.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Mapping, Optional, Union

from graticule.core.utils.inflection import underscore
from graticule.location import Location

AddressQuery = Union[str, Mapping[str, str], Location]

ADDRESS_FIELDS = ("street", "locality", "region", "postal_code", "country")


class GeocodingError(Exception):
    """Exception raised when an address or coordinate pair cannot be resolved."""

    def __init__(self, message: str, provider: str = "", address: str = ""):
        self.message = message
        self.provider = provider
        self.address = address
        super().__init__(f"[{provider}] {message}" if provider else message)


class AddressNotFoundError(GeocodingError):
    """The provider answered but had no match."""


class UnsupportedOperationError(GeocodingError):
    """The provider does not offer the requested lookup."""


class ProviderError(GeocodingError):
    """The provider or the transport to it failed."""


class AllProvidersFailedError(GeocodingError):
    """Every geocoder in a MultiGeocoder failed."""

    def __init__(
        self,
        message: str,
        attempts: int,
        errors: Optional[List[GeocodingError]] = None,
        address: str = "",
    ):
        self.attempts = attempts
        self.errors = list(errors or [])
        super().__init__(message, provider="multi", address=address)


class ConfigurationError(Exception):
    """
    A geocoder is misconfigured (missing or rejected credentials, unknown
    provider name).

    Deliberately not a GeocodingError: MultiGeocoder lets it propagate
    instead of moving on to the next provider.
    """

    def __init__(self, message: str, provider: str = ""):
        self.provider = provider
        super().__init__(f"[{provider}] {message}" if provider else message)


def normalize_query(address: AddressQuery) -> Dict[str, str]:
    """
    Turn any accepted address form into a dict of address fields.

    A free-form string is returned under the "query" key; structured input
    keeps only the known fields (camelCase keys are accepted).

    Example:
        >>> normalize_query({"street": "1 Main St", "postalCode": "01610"})
        {'street': '1 Main St', 'postal_code': '01610'}
        >>> normalize_query("1 Main St, Worcester")
        {'query': '1 Main St, Worcester'}
    """
    if isinstance(address, str):
        return {"query": address.strip()}

    if isinstance(address, Location):
        address = {name: getattr(address, name) for name in ADDRESS_FIELDS}

    fields = {}
    for key, value in address.items():
        name = underscore(key)
        if name in ADDRESS_FIELDS and value:
            fields[name] = str(value).strip()
    return fields


def format_query(address: AddressQuery) -> str:
    """
    Flatten any accepted address form into a single line.

    Example:
        >>> format_query({"street": "1 Main St", "locality": "Worcester", "region": "MA"})
        '1 Main St, Worcester, MA'
    """
    fields = normalize_query(address)
    if "query" in fields:
        return fields["query"]
    return ", ".join(fields[name] for name in ADDRESS_FIELDS if name in fields)


class BaseGeocoder(ABC):
    """
    Abstract base class for geocoding providers.

    Subclasses must implement:
    - geocode(): Resolve an address to a Location
    - provider_name: Name of the provider

    Optional overrides:
    - reverse_geocode(): Resolve coordinates to a Location. The default
      raises UnsupportedOperationError so callers never receive a silently
      empty result.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Name of the geocoding provider."""
        pass

    @abstractmethod
    def geocode(self, address: AddressQuery) -> Location:
        """
        Geocode a single address.

        Args:
            address: Free-form string, mapping of street/locality/region/
                postal_code/country, or a Location whose address fields are used

        Returns:
            Resolved Location

        Raises:
            GeocodingError: If the address cannot be resolved
        """
        pass

    def reverse_geocode(self, latitude: float, longitude: float) -> Location:
        """
        Find the address at a coordinate pair.

        Raises:
            GeocodingError: If the lookup fails or is not supported
        """
        raise UnsupportedOperationError(
            "Reverse geocoding is not supported",
            provider=self.provider_name,
            address=f"{latitude},{longitude}",
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
