"""
Weather tool - current conditions from the Open-Meteo API.

A lookup is two sequential requests: the geocoding search resolves the
place name, then the forecast endpoint returns current conditions for the
first match. Any failure aborts the lookup and propagates to the caller.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping

import httpx
from pydantic import Field, ValidationError

from geoweather.config import Config, get_config
from geoweather.core import tool_output
from geoweather.core.exceptions import LocationNotFoundError, TransportError
from geoweather.logging import log_exception
from geoweather.tools._registry import registry
from geoweather.tools.weather.client import fetch_json, open_client
from geoweather.tools.weather.diagnostics import diagnose_network
from geoweather.tools.weather.models import CurrentConditions, GeocodeResult, WeatherSummary

logger = logging.getLogger(__name__)

CURRENT_FIELDS = (
    "temperature_2m",
    "apparent_temperature",
    "relative_humidity_2m",
    "wind_speed_10m",
    "wind_gusts_10m",
    "weather_code",
)

UNKNOWN_CONDITION = "Unknown"

# WMO weather interpretation codes
WEATHER_CODES: Mapping[int, str] = MappingProxyType({
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    56: "Light freezing drizzle",
    57: "Dense freezing drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    66: "Light freezing rain",
    67: "Heavy freezing rain",
    71: "Slight snow fall",
    73: "Moderate snow fall",
    75: "Heavy snow fall",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
})


def describe_weather_code(code: int) -> str:
    """Convert a WMO weather code to a human-readable label.

    Example:
        >>> describe_weather_code(0)
        'Clear sky'
        >>> describe_weather_code(999)
        'Unknown'
    """
    return WEATHER_CODES.get(code, UNKNOWN_CONDITION)


def _settings(config: Config | None) -> Config:
    return config if config is not None else get_config()


async def resolve_location(
    query: str,
    *,
    client: httpx.AsyncClient | None = None,
    config: Config | None = None,
) -> GeocodeResult:
    """Resolve a place name to its best geocoding match.

    Asks for a single result and takes it as-is; ambiguous names resolve to
    whatever the service ranks first.

    Raises:
        LocationNotFoundError: The search returned no results.
        TransportError: The request failed or the result was malformed.
    """
    cfg = _settings(config)
    url = cfg.get("geocoding_url")
    timeout = cfg.get("timeout")

    async with open_client(client, timeout) as http:
        data = await fetch_json(http, url, {"name": query, "count": 1}, timeout)

    results = data.get("results") if isinstance(data, dict) else None
    if not results:
        raise LocationNotFoundError(query)

    try:
        place = GeocodeResult.model_validate(results[0])
    except ValidationError as e:
        raise TransportError(f"Malformed geocoding result from {url}: {e}", url=url, cause=e) from e

    logger.debug(f"Found location: {place.name} at {place.latitude},{place.longitude}")
    return place


async def fetch_conditions(
    latitude: float,
    longitude: float,
    *,
    client: httpx.AsyncClient | None = None,
    config: Config | None = None,
) -> CurrentConditions:
    """Fetch current conditions for a coordinate pair.

    Coordinates are sent as given, without range checks.

    Raises:
        TransportError: The request failed or the body had no usable
            ``current`` block.
    """
    cfg = _settings(config)
    url = cfg.get("forecast_url")
    timeout = cfg.get("timeout")
    params = {
        "latitude": latitude,
        "longitude": longitude,
        "current": ",".join(CURRENT_FIELDS),
    }

    async with open_client(client, timeout) as http:
        data = await fetch_json(http, url, params, timeout)

    current = data.get("current") if isinstance(data, dict) else None
    try:
        return CurrentConditions.model_validate(current)
    except ValidationError as e:
        raise TransportError(f"Malformed forecast response from {url}: {e}", url=url, cause=e) from e


async def lookup_weather(
    location: str,
    *,
    client: httpx.AsyncClient | None = None,
    config: Config | None = None,
) -> WeatherSummary:
    """Resolve ``location`` and return its current weather.

    Errors from either request are logged and re-raised unchanged; there
    is no partial result.
    """
    cfg = _settings(config)

    try:
        if cfg.get("diagnostics"):
            await diagnose_network(httpx.URL(cfg.get("geocoding_url")).host)
            await diagnose_network(httpx.URL(cfg.get("forecast_url")).host)

        async with open_client(client, cfg.get("timeout")) as http:
            place = await resolve_location(location, client=http, config=cfg)
            current = await fetch_conditions(
                place.latitude, place.longitude, client=http, config=cfg
            )
    except Exception as e:
        log_exception(e, context=f"Weather lookup for '{location}' failed", logger=logger)
        raise

    return WeatherSummary.from_lookup(place, current, describe_weather_code(current.weather_code))


def _format_summary(data: dict[str, Any]) -> str:
    return (
        f"{data['location']}: {data['temperature']}°C "
        f"(feels like {data['feelsLike']}°C), {data['conditions']}, "
        f"humidity {data['humidity']}%, wind {data['windSpeed']} km/h "
        f"(gusts {data['windGust']} km/h)"
    )


@registry.register(
    description="Get current weather for a location",
    aliases=["weather", "w"],
    output_model=WeatherSummary,
)
@tool_output(llm_format=_format_summary)
async def get_weather(
    location: str = Field(description="City name"),
) -> dict[str, Any]:
    """Get the current weather for a location.

    Fetches current conditions from the Open-Meteo API (free, no API key
    required), resolving the city name to coordinates first.

    Args:
        location: Name of the city (e.g., "Tokyo", "New York", "Paris").

    Returns:
        Dictionary with keys temperature, feelsLike, humidity, windSpeed,
        windGust, conditions and location (the resolved place name).

    Raises:
        LocationNotFoundError: No place matches ``location``.
        TransportError: Either request failed.

    Example:
        >>> await get_weather("Tokyo")
        {"temperature": 22.5, "feelsLike": 23.1, ..., "conditions": "Mainly clear", "location": "Tokyo"}
    """
    logger.debug(f"Fetching weather for location: {location}")
    summary = await lookup_weather(location)
    return summary.model_dump(by_alias=True)
