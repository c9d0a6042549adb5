"""MCP server module."""
from __future__ import annotations

from geoweather.mcp.server.server import MCPServer, create_mcp_server

__all__ = ["MCPServer", "create_mcp_server"]
