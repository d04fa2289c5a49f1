"""Almanac entry point for running as a module: python -m almanac."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from horae.config import get_settings
from horae.schemas.almanac import Observer
from horae.services.timezones import localize, resolve_timezone

from almanac.calculator import calculate_almanac
from almanac.provider import EphemerisError, get_ephemeris

logger = logging.getLogger("almanac")


def _zone(value: str) -> ZoneInfo:
    try:
        return ZoneInfo(value.strip())
    except (ZoneInfoNotFoundError, ValueError):
        raise argparse.ArgumentTypeError(f"unknown timezone '{value}'") from None


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="almanac", description="Print the daily almanac as JSON.")
    parser.add_argument("--at", type=datetime.fromisoformat, default=None, help="ISO-8601 instant (default: now)")
    parser.add_argument("--lat", type=float, default=settings.default_latitude)
    parser.add_argument("--lon", type=float, default=settings.default_longitude)
    parser.add_argument("--elevation", type=float, default=settings.default_elevation)
    parser.add_argument("--timezone", type=_zone, default=None, help="IANA zone (default: inferred from coordinates)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    args = _parse_args(argv)

    observer = Observer(latitude=args.lat, longitude=args.lon, elevation=args.elevation)
    if args.timezone is not None:
        tz = args.timezone
    else:
        tz = resolve_timezone(
            latitude=observer.latitude,
            longitude=observer.longitude,
            fallback_timezone=settings.timezone,
        )
    when = localize(args.at, tz)

    try:
        report = calculate_almanac(get_ephemeris(), when, observer)
    except EphemerisError as exc:
        logger.error("Almanac calculation failed: %s", exc)
        return 1

    print(report.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
