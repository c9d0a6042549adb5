"""
Exception classes for the tool registry and the weather lookup.
"""

from __future__ import annotations


class ToolError(Exception):
    """Base exception for tool-related errors."""


class ToolNotFoundError(ToolError):
    """Tool not found in registry."""


class ToolValidationError(ToolError):
    """Tool argument or output validation failed."""


class WeatherError(ToolError):
    """Base exception for weather lookup failures."""


class LocationNotFoundError(WeatherError):
    """Geocoding returned no match for the query."""

    def __init__(self, query: str) -> None:
        super().__init__(f"Location '{query}' not found")
        self.query = query


class TransportError(WeatherError):
    """An outbound HTTP call failed.

    Covers timeouts, connection and DNS failures, non-success status codes
    and bodies that are not the expected JSON. The underlying exception is
    kept on ``cause`` and chained as ``__cause__`` by the raiser.
    """

    def __init__(self, message: str, *, url: str | None = None, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.cause = cause
