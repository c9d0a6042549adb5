"""MCP (Model Context Protocol) support for geoweather.

Exposes the registered tools as an MCP server, so MCP clients can call
get_weather directly.

    from geoweather.mcp import create_mcp_server

    server = create_mcp_server()
    server.run()  # Runs on stdio

Running the server needs the optional ``mcp`` dependency
(``pip install 'geoweather[mcp]'``).
"""
from __future__ import annotations

from geoweather.mcp.exceptions import MCPError
from geoweather.mcp.server import MCPServer, create_mcp_server

__all__ = [
    "MCPServer",
    "create_mcp_server",
    "MCPError",
]
