"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date, datetime
from pathlib import Path

import requests
from pydantic import ValidationError

from csv_weather import __version__
from csv_weather.config import get_settings
from csv_weather.exceptions import CsvWeatherError
from csv_weather.flows.report import build_report
from csv_weather.services.http import configure_session

DATE_FORMAT = "%Y-%m-%d"


def parse_date(value: str) -> date:
    """argparse type for ``YYYY-MM-DD`` dates."""
    try:
        return datetime.strptime(value, DATE_FORMAT).date()  # noqa: DTZ007
    except ValueError:
        msg = f"invalid date {value!r}, expected YYYY-MM-DD"
        raise argparse.ArgumentTypeError(msg) from None


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="csv-weather",
        description="Add daily weather observations to a CSV list of cities",
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
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'report' command - build the weather report
    report_parser = subparsers.add_parser("report", help="Build a weather report CSV")
    report_parser.add_argument(
        "-i",
        "--input",
        type=Path,
        required=True,
        help="Input CSV path. File format: City Name,Area (no header)",
    )
    report_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        required=True,
        help="Output CSV path. Columns: name,area,temperatureC,humidity,windSpeed,pressure",
    )
    report_parser.add_argument(
        "-d",
        "--date",
        type=parse_date,
        default=None,
        help="Date to report the weather for, YYYY-MM-DD (default: today)",
    )
    report_parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Always fetch from the API, don't read or write the cache",
    )
    report_parser.add_argument(
        "--atomic",
        action="store_true",
        help="Write to a temporary file and rename it into place",
    )

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    return parser


def configure_logging(debug: bool = False) -> None:
    """Set up root logging from settings (DEBUG when ``debug``)."""
    settings = get_settings()
    level = logging.DEBUG if debug or settings.debug else settings.log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def cmd_report(args: argparse.Namespace) -> int:
    """Handle the 'report' command."""
    settings = get_settings()
    if args.debug:
        print(f"Debug mode enabled. Settings: {settings}")

    input_path: Path = args.input
    output_path: Path = args.output
    if not input_path.is_file():
        print(f"Error: input file not found: {input_path}", file=sys.stderr)
        return 1

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        print(f"Error: cannot create output directory {output_path.parent}: {e}", file=sys.stderr)
        return 1

    use_cache = settings.use_cache and not args.no_cache
    atomic = settings.atomic_writes or args.atomic

    try:
        result = build_report(
            input_path,
            output_path,
            args.date,
            use_cache=use_cache,
            atomic=atomic,
        )
    except (CsvWeatherError, requests.RequestException) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Wrote {result['rows']} rows for {result['date']} to {result['output']}")
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Data dir: {settings.data_dir}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        return 1

    configure_logging(getattr(args, "debug", False))
    configure_session(settings.request_timeout)

    commands = {
        "report": cmd_report,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
