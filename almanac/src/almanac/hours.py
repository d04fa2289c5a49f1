"""Planetary hours: twelve unequal day hours and twelve night hours."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta

from horae.schemas.almanac import Observer, PlanetaryHour

from almanac.bodies import BODIES_BY_KEY, CHALDEAN_ORDER, WEEKDAY_RULERS, CelestialBody
from almanac.provider import RISE, SET, ensure_aware

logger = logging.getLogger(__name__)

HOURS_PER_HALF = 12
SEARCH_WINDOW_DAYS = 1.0
ONE_DAY = timedelta(days=1)


def day_ruler(day: date) -> CelestialBody:
    """Classical ruler of a weekday (Sunday: Sun, Monday: Moon, ...)."""
    return BODIES_BY_KEY[WEEKDAY_RULERS[day.weekday()]]


def _divide(anchor: datetime, end: datetime) -> list[tuple[datetime, datetime]]:
    """Split [anchor, end) into twelve equal, exactly contiguous intervals."""
    span = end - anchor
    bounds = [anchor + span * i / HOURS_PER_HALF for i in range(HOURS_PER_HALF + 1)]
    return list(zip(bounds[:-1], bounds[1:]))


def find_solar_day(
    provider, when: datetime, observer: Observer
) -> tuple[datetime, datetime, datetime] | None:
    """Sunrise, sunset and next sunrise for the local calendar day of ``when``.

    Returns None if the Sun does not rise or set that day. When only the
    following sunrise is missing it is approximated as sunrise + 24h.
    """
    sun = BODIES_BY_KEY["sun"]
    when = ensure_aware(when)
    start_of_day = when.replace(hour=0, minute=0, second=0, microsecond=0)

    sunrise = provider.search_rise_set(sun, observer, RISE, start_of_day, SEARCH_WINDOW_DAYS)
    if sunrise is None:
        logger.warning("No sunrise on %s at %s", start_of_day.date(), observer)
        return None
    sunset = provider.search_rise_set(sun, observer, SET, sunrise, SEARCH_WINDOW_DAYS)
    if sunset is None:
        logger.warning("No sunset after %s at %s", sunrise.isoformat(), observer)
        return None

    next_start = max(start_of_day + ONE_DAY, sunset)
    next_sunrise = provider.search_rise_set(sun, observer, RISE, next_start, SEARCH_WINDOW_DAYS)
    if next_sunrise is None:
        logger.warning("No sunrise after %s at %s; using sunrise + 24h", next_start.isoformat(), observer)
        next_sunrise = sunrise + ONE_DAY
    return sunrise, sunset, next_sunrise


def planetary_hours(provider, when: datetime, observer: Observer) -> list[PlanetaryHour]:
    """The 24 planetary hours of the day containing ``when``.

    Index 0 is the hour after sunrise, 12 the hour after sunset. The ruler
    sequence starts at the weekday's ruler and steps through the Chaldean
    order once per hour without restarting at sunset. An empty list means
    no schedule exists for that day and place.
    """
    when = ensure_aware(when)
    solar_day = find_solar_day(provider, when, observer)
    if solar_day is None:
        return []
    sunrise, sunset, next_sunrise = solar_day

    intervals = _divide(sunrise, sunset) + _divide(sunset, next_sunrise)
    start_index = CHALDEAN_ORDER.index(day_ruler(when.date()).key)

    hours = []
    for slot, (start, end) in enumerate(intervals):
        ruler = BODIES_BY_KEY[CHALDEAN_ORDER[(start_index + slot) % len(CHALDEAN_ORDER)]]
        hours.append(
            PlanetaryHour(
                start=start,
                end=end,
                ruler=ruler.name,
                glyph=ruler.glyph,
                is_day=slot < HOURS_PER_HALF,
            )
        )
    return hours


def current_hour_index(hours: list[PlanetaryHour], when: datetime) -> int | None:
    """Index of the hour whose [start, end) contains ``when``."""
    when = ensure_aware(when)
    for index, hour in enumerate(hours):
        if hour.start <= when < hour.end:
            return index
    return None
