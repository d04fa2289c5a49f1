"""Lunar phase classification."""

from __future__ import annotations

import math
from dataclasses import dataclass

from almanac.bodies import normalize_longitude

PHASE_WIDTH = 45.0


@dataclass(frozen=True)
class LunarPhase:
    name: str
    glyph: str


# Eight phases, each centred on a multiple of 45 degrees of elongation
MOON_PHASES: tuple[LunarPhase, ...] = (
    LunarPhase("New Moon", "🌑︎"),
    LunarPhase("Waxing Crescent", "🌒︎"),
    LunarPhase("First Quarter", "🌓︎"),
    LunarPhase("Waxing Gibbous", "🌔︎"),
    LunarPhase("Full Moon", "🌕︎"),
    LunarPhase("Waning Gibbous", "🌖︎"),
    LunarPhase("Last Quarter", "🌗︎"),
    LunarPhase("Waning Crescent", "🌘︎"),
)


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties away from zero (unlike ``round``)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def phase_index(phase_angle: float) -> int:
    """Index into MOON_PHASES for a phase angle in degrees."""
    segment = round_half_away_from_zero(normalize_longitude(phase_angle) / PHASE_WIDTH)
    return segment % len(MOON_PHASES)


def moon_phase(phase_angle: float) -> LunarPhase:
    return MOON_PHASES[phase_index(phase_angle)]


def describe_moon_phase(phase_angle: float) -> str:
    """Status text shown next to the Moon, e.g. ``"Full Moon 🌕︎"``."""
    phase = moon_phase(phase_angle)
    return f"{phase.name} {phase.glyph}"
