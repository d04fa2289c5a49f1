"""Tests for the Swiss Ephemeris adapter."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from horae.schemas.almanac import Observer

import almanac.provider as provider
from almanac.bodies import BODIES_BY_KEY

J2000 = 2451545.0


class FakeSwe:
    FLG_SWIEPH = 2
    FLG_MOSEPH = 4
    CALC_RISE = 1
    CALC_SET = 2
    ECL_TOTAL = 4
    ECL_ANNULAR = 8
    ECL_PARTIAL = 16
    ECL_ANNULAR_TOTAL = 32
    ECL_PENUMBRAL = 64
    ECL_ALLTYPES_SOLAR = 4 | 8 | 16 | 32
    ECL_ALLTYPES_LUNAR = 4 | 16 | 64

    class Error(Exception):
        pass

    def __init__(self) -> None:
        self.ephe_path = "unset"
        self.longitudes: dict[int, float] = {}
        self.rise_result: tuple[int, tuple[float, ...]] = (0, (J2000,))
        self.rise_calls: list[tuple] = []
        self.eclipse_result: tuple[int, tuple[float, ...]] = (4, (J2000,))
        self.fail = False

    def set_ephe_path(self, path):
        self.ephe_path = path

    def calc_ut(self, jd: float, body_id: int, flags: int):
        if self.fail:
            raise self.Error("missing ephemeris file")
        return (self.longitudes.get(body_id, 0.0), 0.0, 1.0, 0.0, 0.0, 0.0), flags

    def rise_trans(self, jd, body_id, rsmi, geopos, atpress, attemp, flags):
        self.rise_calls.append((jd, body_id, rsmi, geopos, flags))
        if self.fail:
            raise self.Error("rise_trans failed")
        return self.rise_result

    def sol_eclipse_when_glob(self, jd, flags, ecltype):
        if self.fail:
            raise self.Error("eclipse search failed")
        return self.eclipse_result

    def lun_eclipse_when(self, jd, flags, ecltype):
        return self.sol_eclipse_when_glob(jd, flags, ecltype)


@pytest.fixture
def fake_swe(monkeypatch):
    fake = FakeSwe()
    monkeypatch.setattr(provider, "swe", fake)
    return fake


def test_julian_day_conversions():
    noon = datetime(2000, 1, 1, 12, 0, tzinfo=UTC)
    assert provider.datetime_to_jd(noon) == J2000
    assert provider.jd_to_datetime(J2000) == noon
    assert provider.datetime_to_jd(datetime(2000, 1, 1, 12, 0)) == J2000


def test_ensure_aware_keeps_existing_zone():
    aware = datetime(2026, 1, 1, tzinfo=UTC)
    assert provider.ensure_aware(aware) is aware
    assert provider.ensure_aware(datetime(2026, 1, 1)).tzinfo is UTC


def test_backend_selection(fake_swe):
    assert provider.SwissEphemeris(backend="moseph").flags == FakeSwe.FLG_MOSEPH
    assert provider.SwissEphemeris(backend="swieph").flags == FakeSwe.FLG_SWIEPH
    assert fake_swe.ephe_path is None
    provider.SwissEphemeris(ephe_path=" /srv/ephe ")
    assert fake_swe.ephe_path == "/srv/ephe"


def test_ecliptic_longitude_is_normalized(fake_swe):
    fake_swe.longitudes[4] = 361.5
    eph = provider.SwissEphemeris()
    assert eph.ecliptic_longitude(BODIES_BY_KEY["mars"], datetime(2026, 1, 1, tzinfo=UTC)) == 1.5


def test_ecliptic_longitude_wraps_engine_errors(fake_swe):
    fake_swe.fail = True
    eph = provider.SwissEphemeris()
    with pytest.raises(provider.EphemerisError, match="mars"):
        eph.ecliptic_longitude(BODIES_BY_KEY["mars"], datetime(2026, 1, 1, tzinfo=UTC))


def test_lunar_phase_angle_is_elongation(fake_swe):
    fake_swe.longitudes[0] = 350.0
    fake_swe.longitudes[1] = 10.0
    eph = provider.SwissEphemeris()
    assert eph.lunar_phase_angle(datetime(2026, 1, 1, tzinfo=UTC)) == 20.0


def test_search_rise_set_found_within_window(fake_swe):
    start = datetime(2000, 1, 1, 0, 0, tzinfo=UTC)
    fake_swe.rise_result = (0, (J2000 - 0.25,))
    observer = Observer(latitude=51.5, longitude=-0.1, elevation=20.0)
    eph = provider.SwissEphemeris()

    found = eph.search_rise_set(BODIES_BY_KEY["sun"], observer, provider.RISE, start, 1.0)

    assert found == start + timedelta(hours=6)
    _, body_id, rsmi, geopos, _ = fake_swe.rise_calls[0]
    assert body_id == 0
    assert rsmi == FakeSwe.CALC_RISE
    assert geopos == (-0.1, 51.5, 20.0)


def test_search_rise_set_uses_set_flag(fake_swe):
    start = datetime(2000, 1, 1, 0, 0, tzinfo=UTC)
    fake_swe.rise_result = (0, (J2000 + 0.2,))
    eph = provider.SwissEphemeris()
    eph.search_rise_set(BODIES_BY_KEY["sun"], Observer(latitude=0, longitude=0), provider.SET, start, 1.0)
    assert fake_swe.rise_calls[0][2] == FakeSwe.CALC_SET


@pytest.mark.parametrize(
    "result",
    [
        (-2, (0.0,)),  # circumpolar
        (0, ()),
        (0, (J2000 + 3.0,)),  # outside the one-day window
    ],
)
def test_search_rise_set_not_found(fake_swe, result):
    fake_swe.rise_result = result
    eph = provider.SwissEphemeris()
    start = datetime(2000, 1, 1, 0, 0, tzinfo=UTC)
    assert eph.search_rise_set(BODIES_BY_KEY["sun"], Observer(latitude=78, longitude=15), provider.RISE, start, 1.0) is None


def test_search_rise_set_engine_error_is_not_found(fake_swe):
    fake_swe.fail = True
    eph = provider.SwissEphemeris()
    start = datetime(2000, 1, 1, tzinfo=UTC)
    assert eph.search_rise_set(BODIES_BY_KEY["sun"], Observer(latitude=0, longitude=0), provider.SET, start, 1.0) is None


@pytest.mark.parametrize(
    ("flags", "kind"),
    [
        (FakeSwe.ECL_TOTAL, "Total"),
        (FakeSwe.ECL_ANNULAR, "Annular"),
        (FakeSwe.ECL_ANNULAR_TOTAL, "Hybrid"),
        (FakeSwe.ECL_PARTIAL, "Partial"),
        (FakeSwe.ECL_PENUMBRAL, "Penumbral"),
    ],
)
def test_eclipse_kinds(fake_swe, flags, kind):
    fake_swe.eclipse_result = (flags, (J2000, 0.0, 0.0))
    eph = provider.SwissEphemeris()
    solar = eph.next_solar_eclipse(datetime(1999, 12, 1, tzinfo=UTC))
    lunar = eph.next_lunar_eclipse(datetime(1999, 12, 1, tzinfo=UTC))
    assert solar.kind == kind
    assert lunar.kind == kind
    assert solar.peak == datetime(2000, 1, 1, 12, 0, tzinfo=UTC)


def test_eclipse_search_errors_are_wrapped(fake_swe):
    fake_swe.fail = True
    eph = provider.SwissEphemeris()
    with pytest.raises(provider.EphemerisError):
        eph.next_solar_eclipse(datetime(2026, 1, 1, tzinfo=UTC))
    with pytest.raises(provider.EphemerisError):
        eph.next_lunar_eclipse(datetime(2026, 1, 1, tzinfo=UTC))
