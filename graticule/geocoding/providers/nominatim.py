"""
Nominatim (OpenStreetMap) Geocoder provider.

Free geocoding using OpenStreetMap data.
https://nominatim.org/
"""

import logging
from typing import Any, Dict, Optional

import requests

from graticule.core.http import build_session
from graticule.geocoding.base import (
    AddressNotFoundError,
    AddressQuery,
    ProviderError,
    format_query,
    normalize_query,
)
from graticule.geocoding.rest import MALFORMED_RESPONSE_ERRORS, RestGeocoder
from graticule.location import Location, Precision

logger = logging.getLogger(__name__)

NOMINATIM_SEARCH_URL = "https://nominatim.openstreetmap.org/search"
NOMINATIM_REVERSE_URL = "https://nominatim.openstreetmap.org/reverse"

# Structured search parameter for each address field
STRUCTURED_PARAMS = {
    "street": "street",
    "locality": "city",
    "region": "state",
    "postal_code": "postalcode",
    "country": "country",
}

PRECISION_BY_TYPE = {
    "house": Precision.ADDRESS,
    "building": Precision.BUILDING,
    "street": Precision.STREET,
    "road": Precision.STREET,
    "residential": Precision.STREET,
    "postcode": Precision.POSTAL_CODE,
    "city": Precision.LOCALITY,
    "town": Precision.LOCALITY,
    "village": Precision.LOCALITY,
    "hamlet": Precision.LOCALITY,
    "state": Precision.REGION,
    "country": Precision.COUNTRY,
}


class NominatimGeocoder(RestGeocoder):
    """
    Nominatim (OpenStreetMap) Geocoder.

    Pros:
    - Free
    - Good global coverage
    - Supports reverse geocoding

    Cons:
    - Strict usage policy (1 request/second)
    - Variable accuracy
    - Requires user agent

    Usage:
        geocoder = NominatimGeocoder()
        location = geocoder.geocode("360 Plantation St, Worcester, MA")
        location = geocoder.reverse_geocode(42.2776, -71.7619)
    """

    def __init__(
        self,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize Nominatim Geocoder.

        Args:
            user_agent: User agent string (required by Nominatim TOS)
            session: Optional preconfigured requests session
            timeout: Request timeout in seconds
        """
        super().__init__(session=session or build_session(user_agent=user_agent), timeout=timeout)

    @property
    def provider_name(self) -> str:
        return "nominatim"

    def geocode(self, address: AddressQuery) -> Location:
        """
        Geocode an address using Nominatim.

        Raises:
            AddressNotFoundError: No results
            ProviderError: Transport or HTTP failure
        """
        fields = normalize_query(address)
        full_address = format_query(address)
        if not full_address:
            raise AddressNotFoundError("Empty address", provider=self.provider_name)

        params: Dict[str, Any] = {
            "format": "json",
            "addressdetails": 1,
            "limit": 1,
        }
        if "query" in fields:
            params["q"] = fields["query"]
        else:
            for name, value in fields.items():
                params[STRUCTURED_PARAMS[name]] = value

        data = self.get_json(NOMINATIM_SEARCH_URL, params, address=full_address)

        if not data:
            logger.debug(f"Nominatim: No results for {full_address}")
            raise AddressNotFoundError("No results", provider=self.provider_name, address=full_address)

        # Get first result
        try:
            return self._parse_result(data[0])
        except MALFORMED_RESPONSE_ERRORS as e:
            raise self.malformed_response(e, full_address) from e

    def reverse_geocode(self, latitude: float, longitude: float) -> Location:
        """
        Find the nearest address to a coordinate pair.

        Raises:
            AddressNotFoundError: Nothing found at these coordinates
            ProviderError: Transport or HTTP failure
        """
        description = f"{latitude},{longitude}"
        params = {
            "lat": latitude,
            "lon": longitude,
            "format": "json",
            "addressdetails": 1,
        }

        data = self.get_json(NOMINATIM_REVERSE_URL, params, address=description)

        try:
            if not data or "error" in data:
                logger.debug(f"Nominatim: No reverse result for {description}")
                raise AddressNotFoundError(
                    (data or {}).get("error", "No results"),
                    provider=self.provider_name,
                    address=description,
                )
            return self._parse_result(data)
        except MALFORMED_RESPONSE_ERRORS as e:
            raise self.malformed_response(e, description) from e

    def _parse_result(self, result: Dict[str, Any]) -> Location:
        details = result.get("address") or {}

        street = " ".join(
            part for part in (details.get("house_number"), details.get("road")) if part
        )
        locality = (
            details.get("city") or details.get("town") or
            details.get("village") or details.get("hamlet")
        )
        country_code = details.get("country_code")

        osm_type = result.get("addresstype") or result.get("type", "")

        try:
            lat = float(result["lat"])
            lng = float(result["lon"])
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderError(
                "Result has no usable coordinates",
                provider=self.provider_name,
                address=result.get("display_name", ""),
            ) from e

        return Location(
            latitude=lat,
            longitude=lng,
            street=street or None,
            locality=locality,
            region=details.get("state"),
            postal_code=details.get("postcode"),
            country=country_code.upper() if country_code else details.get("country"),
            precision=PRECISION_BY_TYPE.get(osm_type, Precision.UNKNOWN),
        )
