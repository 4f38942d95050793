import argparse

import pytest

from graticule.geocoding import cli


def test_distance_command(capsys):
    exit_code = cli.main([
        "distance", "40.7128", "-74.0060", "34.0522", "-118.2437",
        "--formula", "vincenty", "--units", "miles",
    ])

    assert exit_code == 0
    output = capsys.readouterr().out
    assert output.startswith("245")
    assert "miles (vincenty)" in output


def test_distance_command_reports_convergence_failure(capsys):
    exit_code = cli.main(["distance", "0", "0", "0", "179.9999", "-f", "vincenty"])

    assert exit_code == 1
    assert "haversine" in capsys.readouterr().out


def test_distance_command_rejects_out_of_range_coordinates(capsys):
    exit_code = cli.main(["distance", "95", "0", "0", "0"])

    assert exit_code == 1
    assert "Latitude out of range" in capsys.readouterr().out


def test_geocode_command_with_bogus_provider(capsys):
    exit_code = cli.main(["geocode", "360 Plantation St", "-p", "bogus"])

    assert exit_code == 0
    output = capsys.readouterr().out
    assert "Success" in output
    assert "Latitude:    0.000000" in output


def test_geocode_command_reports_failure(monkeypatch, capsys):
    from graticule.geocoding.base import AddressNotFoundError

    def fail(self, address):
        raise AddressNotFoundError("No match", provider="bogus")

    monkeypatch.setattr("graticule.geocoding.bogus.BogusGeocoder.geocode", fail)

    exit_code = cli.main(["geocode", "nowhere", "-p", "bogus"])

    assert exit_code == 1
    assert "No match" in capsys.readouterr().out


def test_reverse_command_with_bogus_provider(capsys):
    exit_code = cli.main(["reverse", "42.2776", "-71.7619", "--provider", "bogus"])

    assert exit_code == 0
    assert "Success" in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    assert cli.main([]) == 0
    assert "usage: graticule" in capsys.readouterr().out


def test_parse_providers():
    assert cli.parse_providers("census, Nominatim") == ["census", "nominatim"]
    assert cli.parse_providers("") is None
    with pytest.raises(argparse.ArgumentTypeError):
        cli.parse_providers("census,yahoo")


@pytest.mark.parametrize("argv", [
    ["geocode", "360 Plantation St", "-p", "google"],
    ["reverse", "42.2776", "-71.7619", "-p", "google"],
])
def test_missing_google_key_is_reported(monkeypatch, capsys, argv):
    from graticule.core.config import settings

    monkeypatch.setattr(settings, "GOOGLE_GEOCODING_API_KEY", "")

    exit_code = cli.main(argv)

    assert exit_code == 1
    output = capsys.readouterr().out
    assert "✗ Configuration error" in output
    assert "GOOGLE_GEOCODING_API_KEY" in output


def test_no_configured_providers_is_reported(monkeypatch, capsys):
    from graticule.core.config import settings

    monkeypatch.setattr(settings, "GEOCODING_PROVIDERS", " , ")

    assert cli.main(["geocode", "360 Plantation St"]) == 1
    assert "✗ Configuration error" in capsys.readouterr().out
