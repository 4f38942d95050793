import pytest

from graticule.core.config import settings
from graticule.geocoding import (
    BogusGeocoder,
    CensusGeocoder,
    ConfigurationError,
    MultiGeocoder,
    NominatimGeocoder,
    build_geocoder,
    geocode_address,
    get_geocoder,
    reverse_geocode,
)
from graticule.location import Location


def test_get_geocoder_by_name():
    assert isinstance(get_geocoder("census"), CensusGeocoder)
    assert isinstance(get_geocoder(" Nominatim "), NominatimGeocoder)


def test_get_geocoder_unknown_name():
    with pytest.raises(ConfigurationError):
        get_geocoder("yahoo")


def test_build_geocoder_single_provider_is_returned_as_is():
    assert isinstance(build_geocoder(["bogus"]), BogusGeocoder)


def test_build_geocoder_chain_keeps_order():
    geocoder = build_geocoder(["census", "nominatim", "bogus"])

    assert isinstance(geocoder, MultiGeocoder)
    assert [g.provider_name for g in geocoder.geocoders] == ["census", "nominatim", "bogus"]


def test_build_geocoder_with_predicate_always_wraps():
    geocoder = build_geocoder(["bogus"], acceptable=lambda location: True)
    assert isinstance(geocoder, MultiGeocoder)


def test_build_geocoder_defaults_to_settings(monkeypatch):
    monkeypatch.setattr(settings, "GEOCODING_PROVIDERS", "bogus, census")

    geocoder = build_geocoder()

    assert [g.provider_name for g in geocoder.geocoders] == ["bogus", "census"]


def test_build_geocoder_with_nothing_configured(monkeypatch):
    monkeypatch.setattr(settings, "GEOCODING_PROVIDERS", " , ")

    with pytest.raises(ConfigurationError):
        build_geocoder()


def test_geocode_address_and_reverse_geocode_with_bogus():
    location = geocode_address("anything", providers=["bogus"])
    assert location == Location(latitude=0.0, longitude=0.0)

    assert reverse_geocode(12.0, 34.0, providers=["bogus"]).coordinates == (12.0, 34.0)
