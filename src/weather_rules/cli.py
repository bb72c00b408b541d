"""Command-line interface for weather rules."""

import argparse
import asyncio
import json
import logging
import sys

from pydantic import ValidationError

from weather_rules import __version__
from weather_rules.config import get_settings
from weather_rules.pipeline import run_pipeline
from weather_rules.providers.base import ForecastUnavailableError
from weather_rules.rules.predicates import PredicateError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="weather-rules",
        description="Weather Rules - Evaluate weather rules against the NWS forecast",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--url",
        help="Forecast endpoint URL (default: configured grid point)",
    )
    parser.add_argument(
        "--periods",
        type=int,
        help="Number of forecast periods to keep before evaluating",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (logs go to stderr)",
    )
    return parser


def configure_logging(level: str) -> None:
    """Send logs to stderr so stdout only carries the JSON result."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.periods is not None and args.periods < 1:
        parser.error("--periods must be at least 1")

    try:
        settings = get_settings()
    except ValidationError as e:
        configure_logging(args.log_level or "WARNING")
        logger.error(f"Invalid configuration: {e}")
        return 1

    if args.periods is not None:
        settings = settings.model_copy(update={"periods_to_keep": args.periods})

    configure_logging(args.log_level or settings.log_level)

    try:
        result = asyncio.run(run_pipeline(url=args.url, settings=settings))
    except ForecastUnavailableError as e:
        logger.error(f"Forecast unavailable from {e.provider}: {e}")
        return 1
    except PredicateError as e:
        logger.error(f"Rule evaluation failed ({e.predicate}): {e}")
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
