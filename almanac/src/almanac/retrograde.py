"""Apparent direction of motion along the ecliptic."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from almanac.bodies import LUMINARIES, CelestialBody, normalize_longitude

logger = logging.getLogger(__name__)

# Finite-difference window. Near a station the sign of the difference can be
# wrong for a few hours; the table only needs day-level precision.
SAMPLE_WINDOW = timedelta(hours=1)


def motion_delta(previous: float, current: float) -> float:
    """Signed change in longitude, normalized into (-180, 180]."""
    delta = normalize_longitude(current) - normalize_longitude(previous)
    if delta > 180.0:
        delta -= 360.0
    elif delta <= -180.0:
        delta += 360.0
    return delta


def is_retrograde(provider, body: CelestialBody, when: datetime) -> bool:
    """Whether ``body`` appears to move backwards through the zodiac at ``when``.

    The Sun and Moon never do in the geocentric model, so they are not sampled.
    """
    if body.key in LUMINARIES:
        return False

    current = provider.ecliptic_longitude(body, when)
    previous = provider.ecliptic_longitude(body, when - SAMPLE_WINDOW)
    delta = motion_delta(previous, current)
    logger.debug("%s moved %.6f deg in %s", body.key, delta, SAMPLE_WINDOW)
    return delta < 0
