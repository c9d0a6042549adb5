"""
geoweather - current-weather tool for agent frameworks

Resolves a free-text place name through the Open-Meteo geocoding service,
fetches current conditions for the best match, and returns a normalized
summary. The tool is registered with a ``ToolRegistry`` that carries its
input and output schemas for the host framework.

Example usage:
    import asyncio
    from geoweather import lookup_weather

    summary = asyncio.run(lookup_weather("Tokyo"))
    print(summary.model_dump(by_alias=True))

    # Through the registry, as a host framework would call it
    from geoweather import registry

    result = await registry.aexecute("get_weather", {"location": "Tokyo"})
    print(result.output.llm_format)
"""

__version__ = "0.1.0"

# Core exports
from geoweather.core import (
    LocationNotFoundError,
    ToolEntry,
    ToolError,
    ToolNotFoundError,
    ToolOutput,
    ToolRegistry,
    ToolResult,
    ToolValidationError,
    TransportError,
    WeatherError,
    tool_output,
)


# Tools (lazy import to avoid circular imports)
def __getattr__(name):
    if name == "registry":
        from geoweather.tools import registry
        return registry
    if name in ("lookup_weather", "get_weather", "describe_weather_code", "WeatherSummary"):
        from geoweather.tools import weather
        return getattr(weather, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",
    # Core
    "ToolRegistry",
    "ToolEntry",
    "ToolOutput",
    "ToolResult",
    "ToolError",
    "ToolNotFoundError",
    "ToolValidationError",
    "WeatherError",
    "LocationNotFoundError",
    "TransportError",
    "tool_output",
    # Tools (lazy loaded)
    "registry",
    "lookup_weather",
    "get_weather",
    "describe_weather_code",
    "WeatherSummary",
]
