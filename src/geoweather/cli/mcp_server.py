#!/usr/bin/env python3
"""CLI entry point for running geoweather as an MCP server (geoweather-mcp-server command).

This exposes the weather tool to MCP clients like Claude Desktop.
"""
from __future__ import annotations

import argparse
import sys


def main():
    """Main entry point for the geoweather-mcp-server CLI."""
    parser = argparse.ArgumentParser(
        description="Run geoweather tools as an MCP server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    geoweather-mcp-server                    # Run with stdio transport (default)
    geoweather-mcp-server --transport sse    # Run with SSE transport
    geoweather-mcp-server --list-tools       # List available tools

To use with Claude Desktop, add to your MCP settings:
    {
      "mcpServers": {
        "geoweather": {
          "command": "geoweather-mcp-server"
        }
      }
    }
        """,
    )
    parser.add_argument(
        "--transport", "-t",
        choices=["stdio", "sse"],
        default="stdio",
        help="Transport type (default: stdio)"
    )
    parser.add_argument(
        "--name", "-n",
        default="geoweather",
        help="Server name (default: geoweather)"
    )
    parser.add_argument(
        "--list-tools", "-l",
        action="store_true",
        help="List available tools and exit"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    args = parser.parse_args()

    try:
        # Import here to avoid loading everything for --help
        from geoweather.config import get_config
        from geoweather.logging import configure_logging
        from geoweather.tools import registry

        # stdout carries the stdio transport, so logs go to stderr or the log file
        cfg = get_config()
        level = "DEBUG" if args.verbose else cfg.get("log_level")
        configure_logging(level, log_file=cfg.get("log_file"))

        if args.list_tools:
            print("Available tools:")
            for entry in registry:
                aliases = f" (aliases: {', '.join(entry.aliases)})" if entry.aliases else ""
                print(f"  {entry.name}{aliases}")
                print(f"    {entry.get_description()}")
            return

        from geoweather.mcp import create_mcp_server

        server = create_mcp_server(registry=registry, name=args.name)
        server.run(transport=args.transport)

    except KeyboardInterrupt:
        pass
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
