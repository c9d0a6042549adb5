"""MCP Server - exposes geoweather tools as an MCP server."""
from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any, Optional

from geoweather.mcp.exceptions import MCPError

if TYPE_CHECKING:
    from geoweather.core.datamodels import ToolEntry
    from geoweather.core.registry import ToolRegistry

logger = logging.getLogger(__name__)


def _format_output(output: Any) -> str:
    """Render a tool result as text for MCP clients."""
    if getattr(output, "llm_format", None):
        return output.llm_format
    if hasattr(output, "data"):
        return str(output.data)
    return str(output)


def _handler_signature(entry: "ToolEntry") -> inspect.Signature:
    """Build a keyword-only signature from the tool's params model.

    FastMCP derives the tool's input schema from the handler signature.
    """
    params = []
    for name, field in entry.get_params_model().model_fields.items():
        default = inspect.Parameter.empty if field.is_required() else field.default
        params.append(
            inspect.Parameter(
                name,
                inspect.Parameter.KEYWORD_ONLY,
                default=default,
                annotation=field.annotation,
            )
        )
    return inspect.Signature(params, return_annotation=str)


class MCPServer:
    """MCP Server that exposes geoweather tools.

    Tool errors are not converted into text; they propagate to FastMCP,
    which reports them to the client as failed tool calls.

    Usage:
        from geoweather.tools import registry
        server = MCPServer(registry)
        server.run()  # Runs on stdio by default
    """

    def __init__(
        self,
        registry: "ToolRegistry",
        name: str = "geoweather",
    ):
        self.registry = registry
        self.name = name
        self._mcp = None

    def _create_server(self):
        """Create the FastMCP server instance."""
        try:
            from mcp.server.fastmcp import FastMCP
        except ImportError:
            raise MCPError(
                "MCP package not installed. Install with: pip install 'geoweather[mcp]'"
            )

        self._mcp = FastMCP(self.name)
        self._register_tools()
        return self._mcp

    def _register_tools(self) -> None:
        """Register all registry tools with the MCP server."""
        if self._mcp is None:
            return

        for entry in self.registry:
            self._register_tool(entry)

    def make_handler(self, entry: "ToolEntry"):
        """Create the async MCP handler for one registry entry."""
        registry = self.registry

        async def handler(**kwargs) -> str:
            result = await registry.aexecute(entry.name, kwargs)
            return _format_output(result.output)

        handler.__name__ = entry.name
        handler.__doc__ = entry.get_description() or f"geoweather tool: {entry.name}"
        handler.__signature__ = _handler_signature(entry)
        return handler

    def _register_tool(self, entry: "ToolEntry") -> None:
        """Register a single tool with MCP."""
        handler = self.make_handler(entry)
        self._mcp.tool(name=entry.name, description=handler.__doc__)(handler)
        logger.debug(f"Registered tool with MCP: {entry.name}")

    def run(self, transport: str = "stdio") -> None:
        """Run the MCP server.

        Args:
            transport: Transport type - "stdio" or "sse"
        """
        if transport not in ("stdio", "sse"):
            raise MCPError(f"Unknown transport: {transport}")

        mcp = self._create_server()
        logger.info(f"Starting MCP server '{self.name}' with {transport} transport")
        mcp.run(transport=transport)


def create_mcp_server(
    registry: Optional["ToolRegistry"] = None,
    name: str = "geoweather",
) -> MCPServer:
    """Create an MCP server with the given or default registry.

    Args:
        registry: Tool registry to expose (uses global if None)
        name: Server name

    Returns:
        MCPServer instance
    """
    if registry is None:
        from geoweather.tools import registry as default_registry
        registry = default_registry

    return MCPServer(registry, name=name)
