"""
US Census Bureau Geocoder provider.

Free, unlimited geocoding service optimized for US addresses.
https://geocoding.geo.census.gov/geocoder/
"""

import logging
from typing import Any, Dict

from graticule.geocoding.base import (
    AddressNotFoundError,
    AddressQuery,
    format_query,
    normalize_query,
)
from graticule.geocoding.rest import MALFORMED_RESPONSE_ERRORS, RestGeocoder
from graticule.location import Location, Precision

logger = logging.getLogger(__name__)

CENSUS_ONELINE_URL = "https://geocoding.geo.census.gov/geocoder/locations/onelineaddress"
CENSUS_ADDRESS_URL = "https://geocoding.geo.census.gov/geocoder/locations/address"
CENSUS_BENCHMARK = "Public_AR_Current"


class CensusGeocoder(RestGeocoder):
    """
    US Census Bureau Geocoder.

    Pros:
    - Free and unlimited
    - Good accuracy for US addresses
    - No API key required

    Cons:
    - US only
    - No reverse geocoding of street addresses
    - Can be slow during peak hours

    Usage:
        geocoder = CensusGeocoder()
        location = geocoder.geocode("360 Plantation St, Worcester, MA")
    """

    @property
    def provider_name(self) -> str:
        return "census"

    def geocode(self, address: AddressQuery) -> Location:
        """
        Geocode an address using US Census Geocoder.

        Structured input with a street uses the structured endpoint;
        everything else is sent as one line.

        Returns:
            Resolved Location

        Raises:
            AddressNotFoundError: No match
            ProviderError: Transport or HTTP failure
        """
        fields = normalize_query(address)
        full_address = format_query(address)
        if not full_address:
            raise AddressNotFoundError("Empty address", provider=self.provider_name)

        params: Dict[str, Any] = {"benchmark": CENSUS_BENCHMARK, "format": "json"}
        if "street" in fields:
            url = CENSUS_ADDRESS_URL
            params.update({
                "street": fields["street"],
                "city": fields.get("locality", ""),
                "state": fields.get("region", ""),
                "zip": fields.get("postal_code", ""),
            })
        else:
            url = CENSUS_ONELINE_URL
            params["address"] = full_address

        data = self.get_json(url, params, address=full_address)

        # Check for matches
        try:
            matches = (data.get("result") or {}).get("addressMatches") or []
        except MALFORMED_RESPONSE_ERRORS as e:
            raise self.malformed_response(e, full_address) from e
        if not matches:
            logger.debug(f"Census: No match for {full_address}")
            raise AddressNotFoundError("No match", provider=self.provider_name, address=full_address)

        # Get best match (first result)
        try:
            return self._parse_match(matches[0], full_address)
        except MALFORMED_RESPONSE_ERRORS as e:
            raise self.malformed_response(e, full_address) from e

    def _parse_match(self, match: Dict[str, Any], full_address: str) -> Location:
        coords = match.get("coordinates") or {}
        lat = coords.get("y")
        lng = coords.get("x")

        if lat is None or lng is None:
            raise AddressNotFoundError(
                "Match has no coordinates",
                provider=self.provider_name,
                address=full_address,
            )

        # matchedAddress is "STREET, CITY, STATE, ZIP"
        matched = match.get("matchedAddress", "")
        street = matched.split(",")[0].strip() if matched else None

        return Location.from_mapping({
            **(match.get("addressComponents") or {}),
            "street": street,
            "latitude": float(lat),
            "longitude": float(lng),
            "country": "US",
            "precision": Precision.ADDRESS,
        })
