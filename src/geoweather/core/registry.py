"""
Tool Registry for managing and executing tools.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

from pydantic import BaseModel, ValidationError

from geoweather.core.exceptions import (
    ToolError,
    ToolNotFoundError,
    ToolValidationError,
)
from geoweather.core.helpers import _normalize_name
from geoweather.core.datamodels import ToolEntry, ToolResult

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Registry for managing tools.

    Tools may be plain functions or coroutine functions. Async callers use
    ``aexecute``; ``execute`` runs coroutine tools to completion on a fresh
    event loop and must not be called from inside a running loop.
    """

    def __init__(self):
        self._tools: dict[str, ToolEntry] = {}
        self._aliases: dict[str, str] = {}

    def register(
        self,
        fn: Callable | None = None,
        *,
        name: str | None = None,
        description: str | None = None,
        aliases: list[str] | None = None,
        output_model: type[BaseModel] | None = None,
    ) -> Callable:
        """
        Register a tool. Can be used as decorator with or without arguments.

        Usage:
            @registry.register
            def my_tool(x: int) -> str: ...

            @registry.register(name="custom_name", aliases=["mt"], output_model=MyOutput)
            async def my_tool(x: int) -> dict: ...
        """
        def decorator(func: Callable) -> Callable:
            canonical = _normalize_name(name or func.__name__)
            tool_aliases = [_normalize_name(a) for a in (aliases or [])]

            if canonical in self._tools:
                raise ToolError(f"Tool name collision: {canonical}")

            entry = ToolEntry(
                name=canonical,
                callable_fn=func,
                aliases=tool_aliases,
                description=description,
                output_model=output_model,
            )
            self._tools[canonical] = entry

            for alias in tool_aliases:
                if alias in self._aliases and self._aliases[alias] != canonical:
                    raise ToolError(f"Alias collision: {alias} -> {self._aliases[alias]}")
                self._aliases[alias] = canonical

            # Attach metadata to function
            func.__tool_name__ = canonical
            func.__tool_aliases__ = tool_aliases

            logger.debug(f"Registered tool: {canonical}")
            return func

        # Handle @registry.register vs @registry.register(...)
        if fn is not None:
            return decorator(fn)
        return decorator

    def get(self, name_or_alias: str) -> ToolEntry:
        """Resolve a tool by name or alias."""
        key = _normalize_name(name_or_alias)
        canonical = self._aliases.get(key, key)

        if canonical not in self._tools:
            raise ToolNotFoundError(f"Unknown tool: {name_or_alias}")

        return self._tools[canonical]

    def _validate_arguments(self, entry: ToolEntry, arguments: dict[str, Any]) -> dict[str, Any]:
        params_model = entry.get_params_model()
        try:
            validated = params_model.model_validate(arguments)
        except ValidationError as e:
            raise ToolValidationError(str(e)) from e
        return validated.model_dump()

    def execute(self, name: str, arguments: dict[str, Any]) -> ToolResult:
        """Execute a tool with the given arguments (synchronous callers)."""
        entry = self.get(name)
        kwargs = self._validate_arguments(entry, arguments)

        if entry.is_async:
            output = asyncio.run(entry.callable_fn(**kwargs))
        else:
            output = entry.callable_fn(**kwargs)
        entry.validate_output(output)

        return ToolResult(
            name=entry.name,
            arguments=arguments,
            output=output,
        )

    async def aexecute(self, name: str, arguments: dict[str, Any]) -> ToolResult:
        """Execute a tool with the given arguments (async callers)."""
        entry = self.get(name)
        kwargs = self._validate_arguments(entry, arguments)

        output = entry.callable_fn(**kwargs)
        if entry.is_async:
            output = await output
        entry.validate_output(output)

        return ToolResult(
            name=entry.name,
            arguments=arguments,
            output=output,
        )

    def to_openai_tools(self) -> list[dict[str, Any]]:
        """Get all tools as OpenAI-style tool specs."""
        return [entry.to_openai_spec() for entry in self._tools.values()]

    def __contains__(self, name: str) -> bool:
        try:
            self.get(name)
            return True
        except ToolNotFoundError:
            return False

    def __iter__(self):
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)
