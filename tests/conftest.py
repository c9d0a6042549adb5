"""Shared fixtures: isolated config directory and a mocked Open-Meteo API."""

import logging
from unittest.mock import patch

import httpx
import pytest

from geoweather.config import config as config_module
from geoweather.config import ConfigManager
from geoweather.logging import close_logging
from geoweather.tools.weather import client as client_module


TOKYO_GEOCODING = {
    "results": [{
        "id": 1850147,
        "name": "Tokyo",
        "latitude": 35.6895,
        "longitude": 139.6917,
        "country": "Japan",
    }],
    "generationtime_ms": 0.8,
}

TOKYO_FORECAST = {
    "latitude": 35.7,
    "longitude": 139.6875,
    "current": {
        "time": "2024-05-01T12:00",
        "interval": 900,
        "temperature_2m": 22.5,
        "apparent_temperature": 23.1,
        "relative_humidity_2m": 65,
        "wind_speed_10m": 10.8,
        "wind_gusts_10m": 25.2,
        "weather_code": 1,
    },
}


@pytest.fixture(autouse=True)
def isolated_config(tmp_path):
    """Point the config manager at a temp directory and reset the singleton."""
    config_dir = tmp_path / ".geoweather"
    with patch.object(ConfigManager, "CONFIG_DIR", config_dir):
        with patch.object(ConfigManager, "CONFIG_FILE", config_dir / "config.json"):
            with patch.object(config_module, "_manager", None):
                yield config_dir
    close_logging()
    logging.getLogger("geoweather").setLevel(logging.NOTSET)


class OpenMeteoStub:
    """Routes requests by path and records them.

    A route is either a JSON-able body (served with status 200), an
    ``httpx.Response``, or an exception instance to raise.
    """

    def __init__(self, geocoding=None, forecast=None):
        self.routes = {
            "/v1/search": TOKYO_GEOCODING if geocoding is None else geocoding,
            "/v1/forecast": TOKYO_FORECAST if forecast is None else forecast,
        }
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes[request.url.path]
        if isinstance(route, Exception):
            if isinstance(route, httpx.RequestError):
                route.request = request
            raise route
        if isinstance(route, httpx.Response):
            return route
        return httpx.Response(200, json=route)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def open_meteo(monkeypatch):
    """Factory installing an OpenMeteoStub behind every client the tool creates."""
    def install(geocoding=None, forecast=None) -> OpenMeteoStub:
        stub = OpenMeteoStub(geocoding=geocoding, forecast=forecast)
        monkeypatch.setattr(client_module, "make_client", lambda timeout: stub.client())
        return stub
    return install
