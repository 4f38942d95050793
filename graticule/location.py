"""
The Location value type returned by every geocoder and consumed by the
distance engine.
"""

from dataclasses import dataclass, fields
from enum import IntEnum
from typing import Any, Dict, Mapping, Optional, Tuple

from graticule.core.utils.geo import (
    is_number,
    is_valid_latitude,
    is_valid_longitude,
    normalize_longitude,
)
from graticule.core.utils.inflection import underscore


class InvalidLocationError(ValueError):
    """Raised when coordinates are missing or out of range."""


class Precision(IntEnum):
    """How precisely a geocoder resolved an address, coarsest first."""

    UNKNOWN = 0
    COUNTRY = 1
    REGION = 2
    LOCALITY = 3
    POSTAL_CODE = 4
    STREET = 5
    ADDRESS = 6
    BUILDING = 7

    @classmethod
    def parse(cls, value: Any) -> "Precision":
        if isinstance(value, Precision):
            return value
        if value is None:
            return cls.UNKNOWN
        try:
            return cls[underscore(str(value)).upper()]
        except KeyError:
            raise ValueError(f"Unknown precision: {value!r}") from None


# Provider spellings that differ from our own field names
_FIELD_ALIASES = {
    "lat": "latitude",
    "lng": "longitude",
    "lon": "longitude",
    "city": "locality",
    "town": "locality",
    "state": "region",
    "province": "region",
    "zip": "postal_code",
    "zip_code": "postal_code",
    "postcode": "postal_code",
    "country_code": "country",
}


@dataclass(frozen=True)
class Location:
    """
    A geocoded point plus address metadata.

    Coordinates are decimal degrees. A Location is resolved when both
    coordinates are present; the address fields are informational only.
    """

    latitude: Optional[float] = None
    longitude: Optional[float] = None
    street: Optional[str] = None
    locality: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    precision: Precision = Precision.UNKNOWN
    warning: Optional[str] = None

    def __post_init__(self):
        if is_number(self.latitude) and not is_valid_latitude(self.latitude):
            raise InvalidLocationError(f"Latitude out of range: {self.latitude}")
        if is_number(self.longitude) and not is_valid_longitude(self.longitude):
            raise InvalidLocationError(f"Longitude out of range: {self.longitude}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Location":
        """
        Build a Location from a dict with camelCase or snake_case keys.

        Unknown keys are ignored.

        Example:
            >>> Location.from_mapping({"lat": 42.26, "lng": -71.8, "postalCode": "01610"})
            Location(latitude=42.26, longitude=-71.8, ..., postal_code='01610', ...)
        """
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in data.items():
            name = underscore(key)
            name = _FIELD_ALIASES.get(name, name)
            if name in known and value not in (None, ""):
                values[name] = value
        if "precision" in values:
            values["precision"] = Precision.parse(values["precision"])
        return cls(**values)

    @property
    def is_resolved(self) -> bool:
        """True when both latitude and longitude are usable numbers."""
        return is_number(self.latitude) and is_number(self.longitude)

    @property
    def coordinates(self) -> Tuple[float, float]:
        """(latitude, longitude) of a resolved location."""
        if not self.is_resolved:
            raise InvalidLocationError(f"Location has no coordinates: {self!r}")
        return (self.latitude, self.longitude)

    @property
    def as_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "street": self.street,
            "locality": self.locality,
            "region": self.region,
            "postal_code": self.postal_code,
            "country": self.country,
            "precision": self.precision.name.lower(),
            "warning": self.warning,
        }

    def distance_to(
        self,
        destination: "Location",
        formula: str = "haversine",
        units: str = "miles",
    ) -> float:
        """
        Distance from this location to `destination`.

        Args:
            destination: Another resolved Location
            formula: "haversine", "spherical" or "vincenty"
            units: "miles", "kilometers" or "meters"
        """
        from graticule.distance import distance

        return distance(self, destination, formula=formula, units=units)

    def antipode(self) -> "Location":
        """The point on the exact opposite side of the Earth."""
        latitude, longitude = self.coordinates
        return Location(latitude=-latitude, longitude=normalize_longitude(longitude + 180.0))

    def format(self, coordinates: bool = False, country: bool = True) -> str:
        """
        Format as a postal address.

        Example:
            >>> print(Location(street="1 Main St", locality="Worcester",
            ...                region="MA", postal_code="01610").format())
            1 Main St
            Worcester, MA 01610
        """
        lines = []
        if self.street:
            lines.append(self.street)

        region_line = " ".join(p for p in (self.region, self.postal_code) if p)
        city_line = ", ".join(p for p in (self.locality, region_line) if p)
        if country and self.country:
            city_line = f"{city_line} {self.country}".strip()
        if city_line:
            lines.append(city_line)

        if coordinates and (self.latitude is not None or self.longitude is not None):
            lines.append(f"latitude: {self.latitude}, longitude: {self.longitude}")

        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format()
