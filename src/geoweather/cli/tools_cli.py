#!/usr/bin/env python3
"""
CLI entry point for listing, inspecting and running tools (geoweather command).
"""

import argparse
import asyncio
import json
import sys


def _setup_logging(args) -> None:
    from geoweather.config import get_config
    from geoweather.logging import configure_logging

    cfg = get_config()
    level = "DEBUG" if getattr(args, "verbose", False) else cfg.get("log_level")
    configure_logging(level, log_file=cfg.get("log_file"))


def cmd_list(args):
    """List all registered tools."""
    from geoweather.tools import registry

    if args.as_json:
        tools = [
            {
                "name": e.name,
                "aliases": e.aliases,
                "description": e.get_description(),
            }
            for e in registry
        ]
        print(json.dumps(tools, indent=2))
    else:
        print("\nAvailable tools:")
        for entry in registry:
            aliases = f" (aliases: {', '.join(entry.aliases)})" if entry.aliases else ""
            print(f"  - {entry.name}{aliases}")
            print(f"    {entry.get_description()}")
        print()


def cmd_schema(args):
    """Output OpenAI-style tool schema."""
    from geoweather.tools import registry

    print(json.dumps(registry.to_openai_tools(), indent=2))


def cmd_info(args):
    """Show detailed info for a specific tool."""
    from geoweather.core import ToolNotFoundError
    from geoweather.tools import registry

    try:
        entry = registry.get(args.tool)
    except ToolNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    spec = entry.to_openai_spec()
    if args.as_json:
        print(json.dumps(spec, indent=2))
        return

    print(f"\nTool: {entry.name}")
    print(f"Aliases: {', '.join(entry.aliases) or 'none'}")
    print(f"Description: {entry.get_description()}")
    print("\nParameters:")
    params = spec["function"]["parameters"]
    for name, prop in params.get("properties", {}).items():
        required = name in params.get("required", [])
        req_marker = " (required)" if required else ""
        print(f"  - {name}: {prop.get('type', 'any')}{req_marker}")
        if "description" in prop:
            print(f"    {prop['description']}")
    if entry.output_model is not None:
        print("\nOutput:")
        for name in entry.output_model.model_json_schema(by_alias=True).get("properties", {}):
            print(f"  - {name}")
    print()


def cmd_run(args):
    """Look up the current weather for a location."""
    from geoweather.core import ToolError
    from geoweather.tools import registry

    _setup_logging(args)
    try:
        result = asyncio.run(registry.aexecute("get_weather", {"location": args.location}))
    except ToolError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    output = result.output
    if args.as_json:
        print(json.dumps(output.data, indent=2, ensure_ascii=False))
    else:
        print(output.llm_format)


def cmd_config(args):
    """Show or change settings in ~/.geoweather/config.json."""
    from geoweather.config import DEFAULTS, get_config_manager

    manager = get_config_manager()
    try:
        if args.action == "set":
            manager.set(args.key, args.value)
            print(f"{args.key} = {manager.get(args.key)}")
        elif args.action == "unset":
            manager.unset(args.key)
            print(f"{args.key} reset to default ({DEFAULTS.get(args.key)})")
        else:
            for key in DEFAULTS:
                print(f"{key} = {manager.get(key)}")
            print(f"\n(config file: {manager.CONFIG_FILE})")
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def main():
    """Main entry point for the geoweather CLI."""
    parser = argparse.ArgumentParser(
        description="Look up current weather and inspect the weather tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    geoweather run Tokyo             Current weather in Tokyo
    geoweather run "New York" --json Output the raw summary as JSON
    geoweather list                  List all available tools
    geoweather schema                Output OpenAI-style tool schema
    geoweather info weather          Show details for a tool (name or alias)
    geoweather config set timeout 30 Change the per-request timeout
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # run command
    run_parser = subparsers.add_parser("run", help="Look up current weather for a location")
    run_parser.add_argument("location", help="City name")
    run_parser.add_argument(
        "--json", action="store_true", dest="as_json", help="Output as JSON"
    )
    run_parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    run_parser.set_defaults(func=cmd_run)

    # list command
    list_parser = subparsers.add_parser("list", help="List all registered tools")
    list_parser.add_argument(
        "--json", action="store_true", dest="as_json", help="Output as JSON"
    )
    list_parser.set_defaults(func=cmd_list)

    # schema command
    schema_parser = subparsers.add_parser(
        "schema", help="Output OpenAI-style tool schema"
    )
    schema_parser.set_defaults(func=cmd_schema, as_json=False)

    # info command
    info_parser = subparsers.add_parser("info", help="Show details for a specific tool")
    info_parser.add_argument("tool", help="Tool name or alias")
    info_parser.add_argument(
        "--json", action="store_true", dest="as_json", help="Output as JSON"
    )
    info_parser.set_defaults(func=cmd_info)

    # config command
    config_parser = subparsers.add_parser("config", help="Show or change settings")
    config_parser.add_argument("action", nargs="?", choices=["list", "set", "unset"], default="list")
    config_parser.add_argument("key", nargs="?", help="Setting name")
    config_parser.add_argument("value", nargs="?", help="New value (for set)")
    config_parser.set_defaults(func=cmd_config)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == "config" and args.action in ("set", "unset") and not args.key:
        parser.error(f"config {args.action} needs a key")
    if args.command == "config" and args.action == "set" and args.value is None:
        parser.error("config set needs a value")

    args.func(args)


if __name__ == "__main__":
    main()
