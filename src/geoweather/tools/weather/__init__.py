"""
Weather tool implementation.
"""

from geoweather.tools.weather.core import (
    WEATHER_CODES,
    describe_weather_code,
    fetch_conditions,
    get_weather,
    lookup_weather,
    resolve_location,
)
from geoweather.tools.weather.diagnostics import diagnose_network
from geoweather.tools.weather.models import CurrentConditions, GeocodeResult, WeatherSummary

__all__ = [
    "get_weather",
    "lookup_weather",
    "resolve_location",
    "fetch_conditions",
    "describe_weather_code",
    "diagnose_network",
    "WEATHER_CODES",
    "GeocodeResult",
    "CurrentConditions",
    "WeatherSummary",
]
