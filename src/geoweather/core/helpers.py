"""
Helper functions for the tool registry.
"""

from __future__ import annotations

import inspect
import re
from typing import Any, Callable, get_type_hints

from pydantic import BaseModel, create_model


def _normalize_name(name: str) -> str:
    """Normalize tool name to valid identifier."""
    name = (name or "").strip()
    return re.sub(r"[^a-zA-Z0-9_]+", "_", name)


def _create_params_model(fn: Callable, tool_name: str) -> type[BaseModel]:
    """Create a Pydantic model from function signature.

    ``inspect.signature`` follows ``__wrapped__``, so decorated tools
    (``tool_output``) expose the parameters of the original function.
    """
    sig = inspect.signature(fn)
    hints = _safe_get_type_hints(inspect.unwrap(fn))

    fields: dict[str, Any] = {}
    for param in sig.parameters.values():
        if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
            continue

        annotation = hints.get(param.name, str)
        if param.default is inspect.Parameter.empty:
            fields[param.name] = (annotation, ...)
        else:
            # A pydantic FieldInfo default carries description/required-ness
            fields[param.name] = (annotation, param.default)

    return create_model(f"{tool_name}_Params", **fields)


def _safe_get_type_hints(fn: Callable) -> dict[str, Any]:
    """Get type hints with fallback for unresolvable annotations."""
    try:
        return get_type_hints(fn) or {}
    except Exception:
        return getattr(fn, "__annotations__", {}) or {}


def _is_coroutine_tool(fn: Callable) -> bool:
    """True when calling ``fn`` yields an awaitable."""
    return inspect.iscoroutinefunction(fn) or inspect.iscoroutinefunction(inspect.unwrap(fn))

