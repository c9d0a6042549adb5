"""
Data models for the weather tool.

``GeocodeResult`` and ``CurrentConditions`` parse the Open-Meteo payloads;
``WeatherSummary`` is the tool's output shape.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GeocodeResult(BaseModel):
    """Best match from the geocoding search (``results[0]``)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    latitude: float
    longitude: float
    name: str = Field(description="Display name of the matched place")


class CurrentConditions(BaseModel):
    """The forecast response's ``current`` block.

    Readings keep the numeric type Open-Meteo sent (``65`` stays an int).
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    timestamp: Optional[str] = Field(default=None, alias="time")
    temperature_c: int | float = Field(alias="temperature_2m")
    apparent_temperature_c: int | float = Field(alias="apparent_temperature")
    relative_humidity_pct: int | float = Field(alias="relative_humidity_2m")
    wind_speed_kph: int | float = Field(alias="wind_speed_10m")
    wind_gust_kph: int | float = Field(alias="wind_gusts_10m")
    weather_code: int


class WeatherSummary(BaseModel):
    """Normalized current weather for a resolved location.

    Serialize with ``model_dump(by_alias=True)`` to get the camelCase keys
    (``feelsLike``, ``windSpeed``, ``windGust``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    temperature: int | float
    feels_like: int | float = Field(alias="feelsLike")
    humidity: int | float
    wind_speed: int | float = Field(alias="windSpeed")
    wind_gust: int | float = Field(alias="windGust")
    conditions: str
    location: str

    @classmethod
    def from_lookup(
        cls,
        place: GeocodeResult,
        current: CurrentConditions,
        conditions: str,
    ) -> WeatherSummary:
        return cls(
            temperature=current.temperature_c,
            feels_like=current.apparent_temperature_c,
            humidity=current.relative_humidity_pct,
            wind_speed=current.wind_speed_kph,
            wind_gust=current.wind_gust_kph,
            conditions=conditions,
            location=place.name,
        )
