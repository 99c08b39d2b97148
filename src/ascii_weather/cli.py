"""CLI entry point: resolve a location, fetch its forecast, show the strip."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from rich.console import Console

from .config import load_settings
from .exceptions import ConfigError
from .log_setup import setup_logger
from .service import ForecastService, LocationForecast
from .ui import ForecastRenderer, TerminalApp, ViewState
from .ui.state import parse_city_state


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        description="Show a multi-day ASCII weather forecast for your location."
    )
    parser.add_argument(
        "--location",
        type=str,
        default=None,
        help='Start with "City, ST" instead of the IP-based location.',
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Print the forecast once and exit instead of starting the interactive view.",
    )
    return parser.parse_args(argv)


def _initial_forecast(
    service: ForecastService, location: str | None
) -> LocationForecast:
    if location is None:
        return service.for_current_location()
    parsed = parse_city_state(location)
    if parsed is None:
        raise ValueError(f'--location must look like "City, ST", got {location!r}.')
    return service.for_city_state(*parsed)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the forecast viewer."""
    args = parse_args(argv)
    logger = setup_logger()

    try:
        settings = load_settings()
    except ConfigError as exc:
        logger.error("Configuration failure: %s", exc)
        return 2

    try:
        logger = setup_logger(level=settings.log_level, log_file=settings.log_file)
    except OSError as exc:
        logger.error("Cannot open LOG_FILE %s: %s", settings.log_file, exc)
        return 2
    logger.info("Starting with config %s", settings.safe_summary())
    console = Console()
    renderer = ForecastRenderer(width=settings.column_width)

    try:
        with ForecastService(settings=settings, logger=logger) as service:
            try:
                current = _initial_forecast(service, args.location)
            except ValueError as exc:
                logger.error("%s", exc)
                return 2

            if args.once:
                console.print(
                    renderer.render_text(current.location, current.forecast),
                    crop=False,
                )
                return 0

            app = TerminalApp(
                console=console,
                renderer=renderer,
                service=service,
                logger=logger,
            )
            app.run(ViewState(current=current))
    except Exception as exc:  # pragma: no cover - defensive catch for CLI runtime
        logger.exception("Unexpected failure: %s", exc)
        return 99
    return 0


if __name__ == "__main__":
    sys.exit(main())
