"""
Core module for the geoweather package.

Provides the Tool Registry, its models, and the exception hierarchy shared
by the registry and the weather lookup.
"""

from geoweather.core.decorators import tool_output
from geoweather.core.exceptions import (
    LocationNotFoundError,
    ToolError,
    ToolNotFoundError,
    ToolValidationError,
    TransportError,
    WeatherError,
)
from geoweather.core.datamodels import ToolEntry, ToolOutput, ToolResult
from geoweather.core.registry import ToolRegistry

__all__ = [
    # Registry
    "ToolRegistry",
    # Models
    "ToolEntry",
    "ToolOutput",
    "ToolResult",
    # Exceptions
    "ToolError",
    "ToolNotFoundError",
    "ToolValidationError",
    "WeatherError",
    "LocationNotFoundError",
    "TransportError",
    # Decorators
    "tool_output",
]
