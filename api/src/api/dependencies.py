"""FastAPI dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo

from almanac.provider import SwissEphemeris, get_ephemeris
from fastapi import HTTPException, Query
from horae.config import get_settings
from horae.schemas.almanac import Observer
from horae.services.timezones import localize, resolve_timezone


@dataclass
class AlmanacQuery:
    """Where and when a request asks about."""

    observer: Observer
    at: datetime
    timezone: ZoneInfo


def get_provider() -> SwissEphemeris:
    return get_ephemeris()


def _parse_instant(value: str | None) -> datetime | None:
    if value is None or not value.strip():
        return None
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid 'at' format; expected ISO-8601")


def get_almanac_query(
    lat: float | None = Query(default=None, ge=-90.0, le=90.0),
    lon: float | None = Query(default=None, ge=-180.0, le=180.0),
    elevation: float | None = Query(default=None),
    at: str | None = Query(default=None),
) -> AlmanacQuery:
    settings = get_settings()
    observer = Observer(
        latitude=settings.default_latitude if lat is None else lat,
        longitude=settings.default_longitude if lon is None else lon,
        elevation=settings.default_elevation if elevation is None else elevation,
    )
    tz = resolve_timezone(
        latitude=observer.latitude,
        longitude=observer.longitude,
        fallback_timezone=settings.timezone,
    )
    return AlmanacQuery(observer=observer, at=localize(_parse_instant(at), tz), timezone=tz)
