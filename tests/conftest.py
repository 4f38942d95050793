from typing import Any, List, Optional

import pytest

from graticule.location import Location


class FakeResponse:
    def __init__(self, payload: Any = None, status_code: int = 200, invalid_json: bool = False):
        self.payload = payload
        self.status_code = status_code
        self.invalid_json = invalid_json

    def json(self):
        if self.invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


class FakeSession:
    """Stands in for requests.Session: records GETs and replays queued responses."""

    def __init__(self, *responses):
        self.responses: List[Any] = list(responses)
        self.calls: List[dict] = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": dict(params or {}), "timeout": timeout})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def last_params(self) -> Optional[dict]:
        return self.calls[-1]["params"] if self.calls else None


@pytest.fixture
def new_york() -> Location:
    return Location(latitude=40.7128, longitude=-74.0060, locality="New York", region="NY")


@pytest.fixture
def los_angeles() -> Location:
    return Location(latitude=34.0522, longitude=-118.2437, locality="Los Angeles", region="CA")


@pytest.fixture
def worcester() -> Location:
    return Location(latitude=42.2626, longitude=-71.8023, locality="Worcester", region="MA")


@pytest.fixture
def boston() -> Location:
    return Location(latitude=42.3601, longitude=-71.0589, locality="Boston", region="MA")
