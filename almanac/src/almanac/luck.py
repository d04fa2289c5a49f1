"""Lunar-day luck heuristic."""

from __future__ import annotations

import math
from datetime import datetime

from horae.schemas.almanac import LuckVerdict

from almanac.bodies import normalize_longitude

# Mean synodic month in days
SYNODIC_MONTH = 29.53059

LUCKY_DAYS = frozenset({1, 2, 7, 14, 17})
UNLUCKY_DAYS = frozenset({5, 15, 25})

LUCK_COLORS: dict[str, str] = {
    "lucky": "#009626",
    "unlucky": "#ff0036",
    "neutral": "#000",
}


def lunar_day(phase_angle: float) -> int:
    """1-indexed day of the lunar month for a phase angle in degrees."""
    age = normalize_longitude(phase_angle) / 360.0 * SYNODIC_MONTH
    return math.floor(age) + 1


def classify_lunar_day(day: int) -> LuckVerdict:
    if day in LUCKY_DAYS:
        status = "lucky"
    elif day in UNLUCKY_DAYS:
        status = "unlucky"
    else:
        status = "neutral"
    return LuckVerdict(
        text=f"Today is {status}.",
        color=LUCK_COLORS[status],
        status=status,
        lunar_day=day,
    )


def luck_verdict(provider, when: datetime) -> LuckVerdict:
    return classify_lunar_day(lunar_day(provider.lunar_phase_angle(when)))
