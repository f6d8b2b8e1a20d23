"""Command-line entry point for departure boards."""

import argparse
import asyncio
import logging
import sys
from typing import Any, TextIO

import aiohttp
from pydantic import ValidationError

from departure_board.adapters.backend_factory import create_backend
from departure_board.adapters.config import AppConfig
from departure_board.adapters.renderers import JsonRenderer, TableRenderer
from departure_board.application.services import DepartureAggregationService
from departure_board.domain.errors import ConfigurationError, DepartureBoardError
from departure_board.domain.models import FetchOptions, StationQuery
from departure_board.domain.ports import ResultRenderer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser. Unset flags fall back to the environment."""
    parser = argparse.ArgumentParser(
        prog="departure-board",
        description="Show upcoming departures for one or more stations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Departures from London Kings Cross and St Pancras
  DARWIN_TOKEN=... departure-board KGX STP

  # HSL stop, 30 minutes from now, as JSON
  DIGITRANSIT_SUBSCRIPTION_KEY=... departure-board --provider hsl --offset 30 --json HSL:1220409
        """,
    )
    parser.add_argument("stations", nargs="*", help="Station codes to query")
    parser.add_argument(
        "--provider", choices=["nationalrail", "hsl"], help="Upstream provider"
    )
    parser.add_argument("--timeout", type=int, help="Timeout for calling the remote service")
    parser.add_argument(
        "--num", dest="rows", type=int, help="Number of results to fetch per station"
    )
    parser.add_argument(
        "--offset", type=int, help="Amount to offset current time in minutes (-120 to 120)"
    )
    parser.add_argument("--window", type=int, help="Width of window to query in minutes (0 to 120)")
    parser.add_argument(
        "--limit", type=int, help="Total number of departures to show across all stations"
    )
    parser.add_argument(
        "--max-concurrency", type=int, help="Maximum number of stations queried at once"
    )
    parser.add_argument(
        "--json", dest="json_output", action="store_true", default=None, help="JSON output"
    )
    parser.add_argument("--log-level", help="Logging level (default: WARNING)")
    return parser


def load_config(args: argparse.Namespace) -> AppConfig:
    """Build the configuration from the environment with flag overrides.

    Raises:
        ConfigurationError: If a value fails validation.
    """
    overrides: dict[str, Any] = {
        key: value
        for key, value in vars(args).items()
        if key != "stations" and value is not None
    }
    try:
        return AppConfig(**overrides)
    except ValidationError as e:
        messages = "; ".join(
            f"{'.'.join(str(p) for p in error['loc'])}: {error['msg']}" for error in e.errors()
        )
        raise ConfigurationError(f"invalid configuration: {messages}") from e


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


async def show_departures(config: AppConfig, stations: list[str], out: TextIO) -> None:
    """Query all stations and write the rendered result to ``out``."""
    if not stations:
        raise ConfigurationError("no stations")

    options = FetchOptions(
        rows=config.rows,
        time_offset_minutes=config.offset,
        time_window_minutes=config.window,
    )
    queries = [StationQuery(station_code=code, options=options) for code in stations]
    renderer: ResultRenderer = JsonRenderer() if config.json_output else TableRenderer()

    async with aiohttp.ClientSession() as session:
        backend = create_backend(config, session)
        service = DepartureAggregationService(backend, max_concurrency=config.max_concurrency)
        result = await service.aggregate(queries, limit=config.limit)

    logger.info(f"{len(result.departures)} departure(s) from {len(result.stations)} station(s)")
    print(renderer.render(result), file=out)


async def run(argv: list[str] | None = None, out: TextIO | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)
    try:
        config = load_config(args)
        configure_logging(config.log_level)
        await show_departures(config, args.stations, out or sys.stdout)
    except DepartureBoardError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


def main() -> None:
    """Synchronous entry point for the departure-board command."""
    sys.exit(asyncio.run(run()))


if __name__ == "__main__":
    main()
