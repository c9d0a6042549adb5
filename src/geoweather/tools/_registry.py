"""
Shared registry that built-in tools register themselves with.
"""

from geoweather.core import ToolRegistry

registry = ToolRegistry()
