"""Shared test configuration: an in-memory ephemeris provider."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import pytest
from horae.config import reset_settings_cache
from horae.schemas.almanac import Eclipse

from almanac.provider import EphemerisError


class FakeEphemeris:
    """Scriptable stand-in for SwissEphemeris.

    Longitudes are callables of time per body key (default 0.0), rise/set
    events are plain lists, and eclipse searches return the first listed
    eclipse peaking at or after the search start.
    """

    def __init__(self) -> None:
        self.longitudes: dict[str, Callable[[datetime], float]] = {}
        self.phase_angle = 0.0
        self.events: dict[str, list[datetime]] = {"rise": [], "set": []}
        self.solar_eclipses: list[Eclipse] = []
        self.lunar_eclipses: list[Eclipse] = []
        self.eclipse_error: Exception | None = None
        self.longitude_calls: list[tuple[str, datetime]] = []
        self.rise_set_calls: list[tuple[str, datetime]] = []

    def ecliptic_longitude(self, body, when: datetime) -> float:
        self.longitude_calls.append((body.key, when))
        fn = self.longitudes.get(body.key)
        return fn(when) if fn else 0.0

    def search_rise_set(self, body, observer, direction, start, window_days):
        self.rise_set_calls.append((direction, start))
        limit = start + timedelta(days=window_days)
        for event in sorted(self.events[direction]):
            if start <= event <= limit:
                return event
        return None

    def lunar_phase_angle(self, when: datetime) -> float:
        return self.phase_angle

    def _next(self, eclipses: list[Eclipse], start: datetime) -> Eclipse:
        if self.eclipse_error is not None:
            raise self.eclipse_error
        for eclipse in sorted(eclipses, key=lambda e: e.peak):
            if eclipse.peak >= start:
                return eclipse
        raise EphemerisError("no eclipse found")

    def next_solar_eclipse(self, start: datetime) -> Eclipse:
        return self._next(self.solar_eclipses, start)

    def next_lunar_eclipse(self, start: datetime) -> Eclipse:
        return self._next(self.lunar_eclipses, start)


@pytest.fixture
def fake_ephemeris():
    return FakeEphemeris()


@pytest.fixture
def spring_day(fake_ephemeris):
    """Sunday 2026-03-15 (UTC): 12h30m of daylight, 11h32m of night."""
    fake_ephemeris.events["rise"] = [
        datetime(2026, 3, 15, 6, 0, tzinfo=UTC),
        datetime(2026, 3, 16, 6, 2, tzinfo=UTC),
    ]
    fake_ephemeris.events["set"] = [
        datetime(2026, 3, 15, 18, 30, tzinfo=UTC),
        datetime(2026, 3, 16, 18, 31, tzinfo=UTC),
    ]
    return fake_ephemeris


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings_cache()
    yield
    reset_settings_cache()
