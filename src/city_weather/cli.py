"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import asyncio
import functools
import http.server
import logging
import sys
from pathlib import Path

from city_weather import __version__
from city_weather.board import WeatherBoard
from city_weather.config import get_settings
from city_weather.flows.build import build_site
from city_weather.renderers.cards import format_card_text, format_search_text
from city_weather.schemas import SearchStatus


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="city-weather",
        description="Current weather for major cities, plus a city search",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    # 'show' command - current conditions for the predefined cities
    subparsers.add_parser("show", help="Show weather for the predefined cities")

    # 'search' command - one city by name
    search_parser = subparsers.add_parser("search", help="Search weather for a city")
    search_parser.add_argument("query", type=str, help="City name, e.g. 'Paris'")

    # 'build' command - render the site
    build_parser = subparsers.add_parser("build", help="Fetch weather and build site")
    build_parser.add_argument(
        "--search",
        type=str,
        default=None,
        help="Also show a searched city on the page",
    )

    # 'serve' command - serve built site locally
    serve_parser = subparsers.add_parser("serve", help="Serve site locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def configure_logging(debug: bool) -> None:
    """Configure root logging: DEBUG when debugging, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    return 0


def cmd_show(_args: argparse.Namespace) -> int:
    """Handle the 'show' command: one line per predefined city."""
    board = WeatherBoard()
    slots = asyncio.run(board.load_cities())
    for city, slot in zip(board.cities, slots, strict=True):
        print(format_card_text(city.name, slot))
    return 0


def cmd_search(args: argparse.Namespace) -> int:
    """Handle the 'search' command."""
    if not args.query.strip():
        print("Error: search query is empty", file=sys.stderr)
        return 2

    board = WeatherBoard()
    state = asyncio.run(board.search(args.query))
    if state.status is SearchStatus.RESOLVED:
        print(format_search_text(state))
        return 0
    print(format_search_text(state), file=sys.stderr)
    return 1


def cmd_build(args: argparse.Namespace) -> int:
    """Handle the 'build' command: fetch weather and write the site."""
    asyncio.run(build_site(query=args.search))
    print("Done.")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the built site locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    site_dir = Path(settings.site_dir)

    if not site_dir.exists():
        print("No site directory found. Run 'city-weather build' first.", file=sys.stderr)
        return 1

    handler = functools.partial(http.server.SimpleHTTPRequestHandler, directory=str(site_dir))

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving site on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.debug or get_settings().debug)

    commands = {
        "info": cmd_info,
        "show": cmd_show,
        "search": cmd_search,
        "build": cmd_build,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
