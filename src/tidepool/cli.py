"""
Command-line interface: serve the dashboard API or build the dashboard site.

Usage:
    tidepool info
    tidepool serve [--host HOST] [--port PORT]
    tidepool build [--api-url URL] [--output DIR] [--watch [--interval SECONDS]]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import uvicorn

from tidepool import __version__
from tidepool.api import create_app
from tidepool.config import get_settings
from tidepool.frontend.build import build_site, watch
from tidepool.logs import configure_logging

ENDPOINTS = [
    ("/api/health", "Health check"),
    ("/api/fish-species", "Get fish species"),
    ("/api/fish-species/{family}", "Get fish species of one family"),
    ("/api/biodiversity", "Get biodiversity observations"),
    ("/api/biodiversity/area", "Get observations inside a bounding box"),
    ("/api/species-stats", "Get species statistics"),
    ("/api/ocean-weather", "Get ocean weather"),
    ("/api/water-temperature", "Get water temperature"),
    ("/api/ocean-data-locations", "Get multi-location ocean data"),
    ("/api/dashboard", "Get combined dashboard data"),
]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="tidepool",
        description="Marine data dashboard: fish species, biodiversity and ocean weather",
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

    # 'serve' command - run the API (and the built site, if present)
    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Interface to bind (default: host from settings)",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: port from settings)",
    )

    # 'build' command - render the dashboard page from the API
    build_parser = subparsers.add_parser("build", help="Render the dashboard site")
    build_parser.add_argument(
        "--api-url",
        type=str,
        default=None,
        help="Dashboard API base URL (default: api_base_url from settings)",
    )
    build_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output directory (default: site_dir from settings)",
    )
    build_parser.add_argument(
        "--watch",
        action="store_true",
        help="Keep rebuilding on the refresh interval",
    )
    build_parser.add_argument(
        "--interval",
        type=float,
        default=None,
        help="Seconds between rebuilds with --watch (default: refresh_interval)",
    )

    return parser


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"FishBase: {settings.fishbase_api_url}")
    print(f"OBIS: {settings.obis_api_url}")
    print(f"Open-Meteo Marine: {settings.marine_api_url}")
    print(f"Open-Meteo Weather: {settings.weather_api_url}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: run the API with uvicorn."""
    settings = get_settings()
    host = args.host or settings.host
    port = args.port if args.port is not None else settings.port

    print(f"\n\U0001f30a {settings.app_name}")
    print(f"Server running at http://localhost:{port}")
    print("\nAvailable endpoints:")
    for path, description in ENDPOINTS:
        print(f"  GET {path} - {description}")
    print()

    uvicorn.run(
        create_app(settings),
        host=host,
        port=port,
        log_level="debug" if args.debug else settings.log_level.lower(),
    )
    return 0


def cmd_build(args: argparse.Namespace) -> int:
    """Handle the 'build' command: render the site once, or keep refreshing it."""
    settings = get_settings()
    if args.watch:
        try:
            watch(
                settings,
                interval=args.interval,
                api_base_url=args.api_url,
                output_dir=args.output,
            )
        except KeyboardInterrupt:
            print("\nStopped.")
        return 0

    path = build_site(settings, api_base_url=args.api_url, output_dir=args.output)
    print(f"Wrote {path}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    settings = get_settings()
    configure_logging("DEBUG" if args.debug or settings.debug else settings.log_level)

    commands = {
        "info": cmd_info,
        "serve": cmd_serve,
        "build": cmd_build,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
