#!/usr/bin/env python3
"""
Command-line interface for graticule.

Usage:
    graticule geocode "360 Plantation St, Worcester, MA"
    graticule geocode "360 Plantation St, Worcester, MA" --provider census,nominatim
    graticule reverse 42.2776 -71.7619 --provider nominatim
    graticule distance 40.7128 -74.0060 34.0522 -118.2437 --formula vincenty
"""

import argparse
import logging
import sys
from typing import List, Optional

from graticule.core.config import settings
from graticule.core.utils.inflection import humanize, titleize
from graticule.distance import FORMULAS, ConvergenceError, distance
from graticule.distance.base import METERS_PER_UNIT
from graticule.geocoding.base import ConfigurationError, GeocodingError
from graticule.geocoding.facade import PROVIDERS, build_geocoder
from graticule.location import InvalidLocationError, Location

logger = logging.getLogger(__name__)

ADDRESS_FIELDS = ("street", "locality", "region", "postal_code", "country")


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def parse_providers(value: Optional[str]) -> Optional[List[str]]:
    """Split a comma separated provider list, validating each name."""
    if not value:
        return None
    names = [name.strip().lower() for name in value.split(",") if name.strip()]
    unknown = [name for name in names if name not in PROVIDERS]
    if unknown:
        raise argparse.ArgumentTypeError(
            f"Unknown provider(s): {', '.join(unknown)}. Choose from: {', '.join(PROVIDERS)}"
        )
    return names


def print_location(location: Location, coordinates: bool = True) -> None:
    print("✓ Success!")
    if coordinates:
        print(f"  Latitude:    {location.latitude:.6f}")
        print(f"  Longitude:   {location.longitude:.6f}")
    for name in ADDRESS_FIELDS:
        value = getattr(location, name)
        if value:
            print(f"  {humanize(name) + ':':<12} {value}")
    print(f"  Precision:   {titleize(location.precision.name.lower())}")
    if location.warning:
        print(f"  Warning:     {location.warning}")


def run_geocode(args: argparse.Namespace) -> int:
    """Geocode a single address."""
    try:
        geocoder = build_geocoder(args.provider)
    except ConfigurationError as e:
        print(f"✗ Configuration error: {e}")
        return 1

    print(f"\nGeocoding: {args.address}")
    print(f"Provider: {geocoder.provider_name}")
    print("-" * 50)

    try:
        location = geocoder.geocode(args.address)
    except GeocodingError as e:
        print(f"✗ No match found: {e}")
        return 1
    except ConfigurationError as e:
        print(f"✗ Configuration error: {e}")
        return 1

    print_location(location)
    return 0


def run_reverse(args: argparse.Namespace) -> int:
    """Reverse geocode a coordinate pair."""
    try:
        geocoder = build_geocoder(args.provider)
    except ConfigurationError as e:
        print(f"✗ Configuration error: {e}")
        return 1

    print(f"\nReverse geocoding: {args.latitude}, {args.longitude}")
    print(f"Provider: {geocoder.provider_name}")
    print("-" * 50)

    try:
        location = geocoder.reverse_geocode(args.latitude, args.longitude)
    except GeocodingError as e:
        print(f"✗ No match found: {e}")
        return 1
    except ConfigurationError as e:
        print(f"✗ Configuration error: {e}")
        return 1

    print_location(location, coordinates=False)
    print()
    print(location.format())
    return 0


def run_distance(args: argparse.Namespace) -> int:
    """Calculate the distance between two coordinate pairs."""
    try:
        origin = Location(latitude=args.lat1, longitude=args.lon1)
        destination = Location(latitude=args.lat2, longitude=args.lon2)
        result = distance(origin, destination, formula=args.formula, units=args.units)
    except ConvergenceError as e:
        print(f"✗ {e}. Try --formula haversine.")
        return 1
    except InvalidLocationError as e:
        print(f"✗ {e}")
        return 1

    print(f"{result:.4f} {args.units} ({args.formula})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graticule",
        description="Geocode addresses and measure distances between coordinates",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    subparsers = parser.add_subparsers(dest="command")

    geocode = subparsers.add_parser("geocode", help="Geocode a single address")
    geocode.add_argument("address", type=str, help="Address to geocode")
    geocode.add_argument(
        "--provider", "-p",
        type=parse_providers,
        default=None,
        help="Provider or comma separated fallback chain (default: GEOCODING_PROVIDERS)"
    )
    geocode.set_defaults(handler=run_geocode)

    reverse = subparsers.add_parser("reverse", help="Find the address at a coordinate pair")
    reverse.add_argument("latitude", type=float)
    reverse.add_argument("longitude", type=float)
    reverse.add_argument(
        "--provider", "-p",
        type=parse_providers,
        default=["nominatim"],
        help="Provider or comma separated fallback chain"
    )
    reverse.set_defaults(handler=run_reverse)

    measure = subparsers.add_parser("distance", help="Distance between two coordinate pairs")
    measure.add_argument("lat1", type=float)
    measure.add_argument("lon1", type=float)
    measure.add_argument("lat2", type=float)
    measure.add_argument("lon2", type=float)
    measure.add_argument(
        "--formula", "-f",
        default=settings.DISTANCE_FORMULA,
        choices=list(FORMULAS.keys()),
        help="Distance formula"
    )
    measure.add_argument(
        "--units", "-u",
        default=settings.DISTANCE_UNITS,
        choices=list(METERS_PER_UNIT.keys()),
        help="Result units"
    )
    measure.set_defaults(handler=run_distance)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not getattr(args, "handler", None):
        parser.print_help()
        return 0

    configure_logging(args.verbose)
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
