"""
Tools and shared registry for the geoweather package.

Importing this package registers the built-in tools with ``registry``.
"""

# Import registry first
from geoweather.tools._registry import registry

from geoweather.tools.weather import get_weather

__all__ = [
    "registry",
    "get_weather",
]
