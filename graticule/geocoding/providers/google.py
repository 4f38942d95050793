"""
Google Geocoding API provider.

Paid, accurate geocoding service.
https://developers.google.com/maps/documentation/geocoding
"""

import dataclasses
import logging
from typing import Any, Dict, List, Optional

import requests

from graticule.core.config import settings
from graticule.geocoding.base import (
    AddressNotFoundError,
    AddressQuery,
    ConfigurationError,
    ProviderError,
    format_query,
)
from graticule.geocoding.rest import MALFORMED_RESPONSE_ERRORS, RestGeocoder
from graticule.location import Location, Precision

logger = logging.getLogger(__name__)

GOOGLE_GEOCODING_URL = "https://maps.googleapis.com/maps/api/geocode/json"

# Most specific result type first
PRECISION_BY_TYPE = [
    ("premise", Precision.BUILDING),
    ("street_address", Precision.ADDRESS),
    ("route", Precision.STREET),
    ("postal_code", Precision.POSTAL_CODE),
    ("locality", Precision.LOCALITY),
    ("administrative_area_level_1", Precision.REGION),
    ("country", Precision.COUNTRY),
]


class GoogleGeocoder(RestGeocoder):
    """
    Google Geocoding API provider.

    Pros:
    - Very accurate
    - Global coverage
    - Good address normalization

    Cons:
    - Requires API key
    - Paid service (~$5 per 1000 requests)

    Usage:
        geocoder = GoogleGeocoder()  # Uses GOOGLE_GEOCODING_API_KEY from env
        location = geocoder.geocode("360 Plantation St, Worcester, MA")
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize Google Geocoder.

        Args:
            api_key: Google API key (uses settings if not provided)
            session: Optional preconfigured requests session
            timeout: Request timeout in seconds
        """
        super().__init__(session=session, timeout=timeout)
        self.api_key = api_key or settings.GOOGLE_GEOCODING_API_KEY

    @property
    def provider_name(self) -> str:
        return "google"

    def geocode(self, address: AddressQuery) -> Location:
        """
        Geocode an address using Google Geocoding API.

        Raises:
            ConfigurationError: API key missing or rejected
            AddressNotFoundError: ZERO_RESULTS
            ProviderError: Quota exceeded, invalid request, transport failure
        """
        full_address = format_query(address)
        if not full_address:
            raise AddressNotFoundError("Empty address", provider=self.provider_name)

        return self._lookup({"address": full_address}, full_address)

    def reverse_geocode(self, latitude: float, longitude: float) -> Location:
        """
        Find the address at a coordinate pair using Google Geocoding API.

        The returned Location keeps the requested coordinates.
        """
        description = f"{latitude},{longitude}"
        location = self._lookup({"latlng": description}, description)
        return dataclasses.replace(location, latitude=latitude, longitude=longitude)

    def _lookup(self, params: Dict[str, Any], description: str) -> Location:
        if not self.api_key:
            raise ConfigurationError(
                "GOOGLE_GEOCODING_API_KEY not configured",
                provider=self.provider_name,
            )

        data = self.get_json(
            GOOGLE_GEOCODING_URL,
            {**params, "key": self.api_key},
            address=description,
        )
        try:
            self._check_status(data, description)
            # Get first result
            return self._parse_result(data["results"][0])
        except MALFORMED_RESPONSE_ERRORS as e:
            raise self.malformed_response(e, description) from e

    def _check_status(self, data: Dict[str, Any], description: str) -> None:
        status = data.get("status")
        if status == "OK" and data.get("results"):
            return

        message = data.get("error_message") or status or "Unknown response"
        if status == "ZERO_RESULTS" or status == "OK":
            logger.debug(f"Google: No results for {description}")
            raise AddressNotFoundError("No results", provider=self.provider_name, address=description)
        if status == "REQUEST_DENIED":
            raise ConfigurationError(f"Request denied: {message}", provider=self.provider_name)

        # OVER_QUERY_LIMIT, OVER_DAILY_LIMIT, INVALID_REQUEST, UNKNOWN_ERROR
        logger.warning(f"Google API error: {status}")
        raise ProviderError(message, provider=self.provider_name, address=description)

    def _parse_result(self, result: Dict[str, Any]) -> Location:
        components = self._components(result.get("address_components") or [])
        location = result["geometry"]["location"]

        street = " ".join(
            part for part in (components.get("street_number"), components.get("route")) if part
        )

        return Location(
            latitude=location["lat"],
            longitude=location["lng"],
            street=street or None,
            locality=components.get("locality"),
            region=components.get("administrative_area_level_1"),
            postal_code=components.get("postal_code"),
            country=components.get("country"),
            precision=self._precision(result.get("types") or []),
            warning="Partial match" if result.get("partial_match") else None,
        )

    @staticmethod
    def _components(components: List[Dict[str, Any]]) -> Dict[str, str]:
        """Map each component type to its short name."""
        mapped = {}
        for component in components:
            for component_type in component.get("types", []):
                mapped.setdefault(component_type, component.get("short_name") or component.get("long_name"))
        return mapped

    @staticmethod
    def _precision(types: List[str]) -> Precision:
        for result_type, precision in PRECISION_BY_TYPE:
            if result_type in types:
                return precision
        return Precision.UNKNOWN
