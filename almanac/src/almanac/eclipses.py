"""Same-day eclipse labels for the Sun's status slot."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from horae.schemas.almanac import Eclipse

from almanac.provider import EphemerisError, ensure_aware

logger = logging.getLogger(__name__)

# Searching from a day earlier keeps an eclipse that peaked earlier on the
# query's local day inside the search window.
SEARCH_LOOKBACK = timedelta(days=1)


def is_same_local_day(when: datetime, instant: datetime) -> bool:
    """Whether ``instant`` falls on the calendar date of ``when`` in when's timezone."""
    when = ensure_aware(when)
    local = ensure_aware(instant).astimezone(when.tzinfo)
    return local.date() == when.date()


def _label(search, when: datetime, kind: str) -> str:
    when = ensure_aware(when)
    try:
        eclipse: Eclipse = search(when - SEARCH_LOOKBACK)
    except EphemerisError as exc:
        logger.warning("%s eclipse search failed for %s: %s", kind.lower(), when.isoformat(), exc)
        return ""
    if is_same_local_day(when, eclipse.peak):
        return f"{eclipse.kind} {kind} Eclipse"
    return ""


def solar_eclipse_label(provider, when: datetime) -> str:
    return _label(provider.next_solar_eclipse, when, "Solar")


def lunar_eclipse_label(provider, when: datetime) -> str:
    return _label(provider.next_lunar_eclipse, when, "Lunar")


def eclipse_label(provider, when: datetime) -> str:
    """Label for an eclipse peaking on the query's local day, or "".

    Solar wins if both match, which cannot happen in practice: solar eclipses
    fall on new moons and lunar ones on full moons two weeks apart.
    """
    return solar_eclipse_label(provider, when) or lunar_eclipse_label(provider, when)
