"""Main almanac calculator - calculate_planets() and calculate_almanac() entry points."""

from __future__ import annotations

import logging
from datetime import datetime

from horae.schemas.almanac import AlmanacReport, Observer, PlanetStatus

from almanac.bodies import BODIES, CelestialBody, longitude_to_sign, zodiac_sign
from almanac.eclipses import eclipse_label
from almanac.hours import current_hour_index, planetary_hours
from almanac.luck import luck_verdict
from almanac.lunar import describe_moon_phase
from almanac.provider import ensure_aware
from almanac.retrograde import is_retrograde

logger = logging.getLogger(__name__)


def _body_status(provider, body: CelestialBody, when: datetime) -> PlanetStatus:
    longitude = provider.ecliptic_longitude(body, when)
    sign = zodiac_sign(longitude)
    _, degree = longitude_to_sign(longitude)

    status = ""
    retrograde = False
    if body.key == "moon":
        status = describe_moon_phase(provider.lunar_phase_angle(when))
    elif body.key == "sun":
        status = eclipse_label(provider, when)
    else:
        retrograde = is_retrograde(provider, body, when)

    return PlanetStatus(
        name=body.name,
        glyph=body.glyph,
        sign=sign.name,
        sign_glyph=sign.glyph,
        longitude=longitude,
        degree=degree,
        retrograde=retrograde,
        status=status,
        color=body.color,
        dark_color=body.dark_color,
    )


def calculate_planets(provider, when: datetime, observer: Observer) -> list[PlanetStatus]:
    """Sign, retrograde flag and status text for every catalog body at ``when``.

    Positions are geocentric, so ``observer`` does not change the result; it
    is accepted so callers can treat both entry points alike.
    """
    when = ensure_aware(when)
    logger.debug("Calculating planets for %s at %s", when.isoformat(), observer)
    return [_body_status(provider, body, when) for body in BODIES]


def calculate_almanac(provider, when: datetime, observer: Observer) -> AlmanacReport:
    """Planets, planetary hours and luck for one observer and moment."""
    when = ensure_aware(when)
    hours = planetary_hours(provider, when, observer)
    return AlmanacReport(
        at=when,
        observer=observer,
        planets=calculate_planets(provider, when, observer),
        hours=hours,
        current_hour=current_hour_index(hours, when),
        luck=luck_verdict(provider, when),
    )
