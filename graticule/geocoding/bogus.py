"""
Offline geocoder that always answers with a fixed Location.

Useful for development and tests where no network is available.
"""

import dataclasses
from typing import Optional

from graticule.geocoding.base import AddressQuery, BaseGeocoder
from graticule.location import Location, Precision

DEFAULT_LOCATION = Location(latitude=0.0, longitude=0.0, precision=Precision.UNKNOWN)


class BogusGeocoder(BaseGeocoder):
    """
    Geocoder returning `location` for every address.

    Reverse lookups return the same address fields at the requested coordinates.
    """

    def __init__(self, location: Optional[Location] = None):
        self.location = location or DEFAULT_LOCATION

    @property
    def provider_name(self) -> str:
        return "bogus"

    def geocode(self, address: AddressQuery) -> Location:
        return self.location

    def reverse_geocode(self, latitude: float, longitude: float) -> Location:
        return dataclasses.replace(self.location, latitude=latitude, longitude=longitude)
