"""``weather`` console script."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from rich.console import Console

from weather_cli import __version__
from weather_cli.exceptions import WeatherError
from weather_cli.providers import OpenWeatherProvider
from weather_cli.report import print_report
from weather_cli.settings import get_api_key


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="weather", description="Show the current weather for a city")
    parser.add_argument("city", help="The city to get the weather for")
    parser.add_argument(
        "-f",
        "--fahrenheit",
        action="store_true",
        help="Display temperature in Fahrenheit instead of Celsius",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log request details to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.CRITICAL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run(
    city: str,
    fahrenheit: bool = False,
    *,
    provider: Optional[OpenWeatherProvider] = None,
    console: Optional[Console] = None,
) -> None:
    """Fetch the current weather for ``city`` and print the report."""
    provider = provider or OpenWeatherProvider(api_key=get_api_key())
    reading = provider.current(city)
    print_report(reading, fahrenheit=fahrenheit, console=console)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        run(args.city, fahrenheit=args.fahrenheit)
    except WeatherError as exc:
        logger.debug("Weather lookup failed", exc_info=exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


__all__ = ["build_parser", "configure_logging", "main", "run"]
