"""Observer timezone resolution from coordinates."""

from __future__ import annotations

import logging
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from timezonefinder import TimezoneFinder

logger = logging.getLogger(__name__)

_finder: TimezoneFinder | None = None


def _get_finder() -> TimezoneFinder:
    global _finder
    if _finder is None:
        _finder = TimezoneFinder()
    return _finder


def infer_timezone(*, latitude: float, longitude: float) -> str | None:
    """Infer IANA timezone for the given coordinates."""
    finder = _get_finder()
    timezone_name = finder.timezone_at(lng=longitude, lat=latitude)
    if not timezone_name:
        timezone_name = finder.certain_timezone_at(lng=longitude, lat=latitude)
    if not timezone_name:
        return None

    normalized = str(timezone_name).strip()
    if not normalized:
        return None

    try:
        ZoneInfo(normalized)
    except ZoneInfoNotFoundError:
        return None
    return normalized


def resolve_timezone(*, latitude: float, longitude: float, fallback_timezone: str) -> ZoneInfo:
    """Timezone at the coordinates, or the fallback when none can be inferred."""
    inferred = infer_timezone(latitude=latitude, longitude=longitude)
    if inferred:
        return ZoneInfo(inferred)
    try:
        return ZoneInfo(fallback_timezone.strip())
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown fallback timezone %r, using UTC", fallback_timezone)
        return ZoneInfo("UTC")


def localize(when: datetime | None, tz: ZoneInfo) -> datetime:
    """Attach ``tz`` to a naive datetime, convert an aware one, default to now."""
    if when is None:
        return datetime.now(tz)
    if when.tzinfo is None:
        return when.replace(tzinfo=tz)
    return when.astimezone(tz)
