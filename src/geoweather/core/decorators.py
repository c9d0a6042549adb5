"""
Decorators for the tool registry.
"""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable

from geoweather.core.datamodels import ToolOutput


def tool_output(
    llm_format: str | Callable[[Any], str] | None = None,
    gui_format: str | Callable[[Any], str] | None = None,
) -> Callable:
    """
    Decorator that wraps function return value in ToolOutput.

    Coroutine functions stay coroutine functions; the wrapping happens
    once the result has been awaited.

    Usage:
        @tool_output(llm_format="{location}: {temperature}°C")
        async def get_weather(...): ...

        @tool_output(llm_format=lambda x: f"Temp: {x['temperature']}")
        def get_temperature(...): ...
    """
    def wrap(result: Any) -> ToolOutput:
        llm_str = _resolve_format(llm_format, result)
        gui_str = _resolve_format(gui_format, result)
        return ToolOutput.create(result, llm_format=llm_str, gui_format=gui_str)

    def decorator(fn: Callable) -> Callable:
        if inspect.iscoroutinefunction(fn):
            @functools.wraps(fn)
            async def async_wrapper(*args, **kwargs) -> ToolOutput:
                return wrap(await fn(*args, **kwargs))

            return async_wrapper

        @functools.wraps(fn)
        def wrapper(*args, **kwargs) -> ToolOutput:
            return wrap(fn(*args, **kwargs))

        return wrapper
    return decorator


def _resolve_format(fmt: str | Callable[[Any], str] | None, data: Any) -> str | None:
    """Resolve format string or callable to final string."""
    if fmt is None:
        return None
    if callable(fmt):
        return fmt(data)
    if isinstance(fmt, str) and isinstance(data, dict):
        try:
            return fmt.format(**data)
        except KeyError:
            return fmt
    return str(fmt)
