"""Swiss Ephemeris adapter and time conversion helpers.

The rest of the package only needs an object exposing:

    ecliptic_longitude(body, when) -> float
    search_rise_set(body, observer, direction, start, window_days) -> datetime | None
    lunar_phase_angle(when) -> float
    next_solar_eclipse(start) -> Eclipse
    next_lunar_eclipse(start) -> Eclipse

``SwissEphemeris`` is the production implementation.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta
from functools import lru_cache

import swisseph as swe
from horae.config import get_settings
from horae.schemas.almanac import Eclipse, Observer

from almanac.bodies import BODIES_BY_KEY, CelestialBody, normalize_longitude

logger = logging.getLogger(__name__)

RISE = "rise"
SET = "set"

# Julian Day of 1970-01-01T00:00:00Z
JD_UNIX_EPOCH = 2440587.5
SECONDS_PER_DAY = 86400.0


class EphemerisError(RuntimeError):
    """The ephemeris engine could not answer a query."""


def ensure_aware(when: datetime) -> datetime:
    """Treat naive datetimes as UTC."""
    if when.tzinfo is None:
        return when.replace(tzinfo=UTC)
    return when


def datetime_to_jd(dt: datetime) -> float:
    """Convert datetime to Julian Day number (UT)."""
    return JD_UNIX_EPOCH + ensure_aware(dt).timestamp() / SECONDS_PER_DAY


def jd_to_datetime(jd: float) -> datetime:
    """Convert a Julian Day number (UT) to an aware UTC datetime."""
    seconds = (jd - JD_UNIX_EPOCH) * SECONDS_PER_DAY
    return datetime(1970, 1, 1, tzinfo=UTC) + timedelta(seconds=seconds)


def _eclipse_kind(retflags: int) -> str:
    if retflags & swe.ECL_ANNULAR_TOTAL:
        return "Hybrid"
    if retflags & swe.ECL_TOTAL:
        return "Total"
    if retflags & swe.ECL_ANNULAR:
        return "Annular"
    if retflags & swe.ECL_PARTIAL:
        return "Partial"
    if retflags & swe.ECL_PENUMBRAL:
        return "Penumbral"
    return "Partial"


class SwissEphemeris:
    """Ephemeris provider backed by pyswisseph (tropical, geocentric)."""

    def __init__(self, ephe_path: str = "", backend: str = "swieph") -> None:
        ephe_path = ephe_path.strip()
        swe.set_ephe_path(ephe_path if ephe_path else None)
        self.flags = swe.FLG_MOSEPH if backend.strip().lower() == "moseph" else swe.FLG_SWIEPH

    def ecliptic_longitude(self, body: CelestialBody, when: datetime) -> float:
        jd = datetime_to_jd(when)
        try:
            result, _ = swe.calc_ut(jd, body.body_id, self.flags)
        except swe.Error as exc:
            raise EphemerisError(f"longitude unavailable for {body.key}: {exc}") from exc
        return normalize_longitude(result[0])

    def search_rise_set(
        self,
        body: CelestialBody,
        observer: Observer,
        direction: str,
        start: datetime,
        window_days: float,
    ) -> datetime | None:
        """Find the first rise or set after ``start`` within ``window_days``.

        Returns None when the body does not cross the horizon in the window
        (circumpolar or never rising at high latitudes).
        """
        rsmi = swe.CALC_RISE if direction == RISE else swe.CALC_SET
        jd_start = datetime_to_jd(start)
        geopos = (observer.longitude, observer.latitude, observer.elevation)
        try:
            status, tret = swe.rise_trans(jd_start, body.body_id, rsmi, geopos, 0.0, 0.0, self.flags)
        except swe.Error as exc:
            logger.warning("rise_trans failed for %s %s: %s", body.key, direction, exc)
            return None
        if status != 0 or not tret or tret[0] <= 0.0:
            return None
        if tret[0] > jd_start + window_days:
            return None
        return jd_to_datetime(tret[0])

    def lunar_phase_angle(self, when: datetime) -> float:
        """Moon's elongation east of the Sun along the ecliptic."""
        sun = self.ecliptic_longitude(BODIES_BY_KEY["sun"], when)
        moon = self.ecliptic_longitude(BODIES_BY_KEY["moon"], when)
        return normalize_longitude(moon - sun)

    def next_solar_eclipse(self, start: datetime) -> Eclipse:
        jd = datetime_to_jd(start)
        try:
            retflags, tret = swe.sol_eclipse_when_glob(jd, self.flags, swe.ECL_ALLTYPES_SOLAR)
        except swe.Error as exc:
            raise EphemerisError(f"solar eclipse search failed: {exc}") from exc
        return Eclipse(kind=_eclipse_kind(retflags), peak=jd_to_datetime(tret[0]))

    def next_lunar_eclipse(self, start: datetime) -> Eclipse:
        jd = datetime_to_jd(start)
        try:
            retflags, tret = swe.lun_eclipse_when(jd, self.flags, swe.ECL_ALLTYPES_LUNAR)
        except swe.Error as exc:
            raise EphemerisError(f"lunar eclipse search failed: {exc}") from exc
        return Eclipse(kind=_eclipse_kind(retflags), peak=jd_to_datetime(tret[0]))


@lru_cache(maxsize=1)
def get_ephemeris() -> SwissEphemeris:
    """Get the process-wide provider configured from settings."""
    settings = get_settings()
    return SwissEphemeris(settings.swisseph_ephe_path, settings.ephemeris_backend)
