"""Body catalog, zodiac signs, and ruler tables."""

from __future__ import annotations

import math
from dataclasses import dataclass

# Celestial body IDs for pyswisseph
# These map to swisseph constants
BODY_IDS: dict[str, int] = {
    "sun": 0,  # SE_SUN
    "moon": 1,  # SE_MOON
    "mercury": 2,  # SE_MERCURY
    "venus": 3,  # SE_VENUS
    "mars": 4,  # SE_MARS
    "jupiter": 5,  # SE_JUPITER
    "saturn": 6,  # SE_SATURN
    "uranus": 7,  # SE_URANUS
    "neptune": 8,  # SE_NEPTUNE
    "pluto": 9,  # SE_PLUTO
}


@dataclass(frozen=True)
class CelestialBody:
    """A body shown on the daily table."""

    key: str
    name: str
    glyph: str
    color: str
    dark_color: str

    @property
    def body_id(self) -> int:
        return BODY_IDS[self.key]


@dataclass(frozen=True)
class ZodiacSign:
    name: str
    glyph: str


# Catalog order is display order
BODIES: tuple[CelestialBody, ...] = (
    CelestialBody("sun", "Sol", "☉", "#ffd071", "#ac7403"),
    CelestialBody("moon", "Luna", "☽︎", "#d1d1d1", "#919191"),
    CelestialBody("mercury", "Mercury", "☿", "#fff59c", "#918308"),
    CelestialBody("venus", "Venus", "♀", "#95f3ad", "#004812"),
    CelestialBody("mars", "Mars", "♂", "#ffc5c5", "#7a0000"),
    CelestialBody("jupiter", "Jupiter", "♃", "#9fdcff", "#00467f"),
    CelestialBody("saturn", "Saturn", "♄", "#a5a5a5", "#1d1d1d"),
    CelestialBody("uranus", "Uranus", "♅", "#c9bcff", "#250076"),
    CelestialBody("neptune", "Neptune", "♆", "#f9b6ff", "#7b0085"),
    CelestialBody("pluto", "Pluto", "⯓", "#e5baa5", "#4f2916"),
)

BODIES_BY_KEY: dict[str, CelestialBody] = {body.key: body for body in BODIES}

# Luminaries are never retrograde in the geocentric model
LUMINARIES = frozenset({"sun", "moon"})

# Zodiac signs in order, 30 degrees each from 0 Aries
ZODIAC: tuple[ZodiacSign, ...] = (
    ZodiacSign("Aries", "♈︎"),
    ZodiacSign("Taurus", "♉︎"),
    ZodiacSign("Gemini", "♊︎"),
    ZodiacSign("Cancer", "♋︎"),
    ZodiacSign("Leo", "♌︎"),
    ZodiacSign("Virgo", "♍︎"),
    ZodiacSign("Libra", "♎︎"),
    ZodiacSign("Scorpio", "♏︎"),
    ZodiacSign("Sagittarius", "♐︎"),
    ZodiacSign("Capricorn", "♑︎"),
    ZodiacSign("Aquarius", "♒︎"),
    ZodiacSign("Pisces", "♓︎"),
)

SIGN_WIDTH = 30.0

# Chaldean order, slowest to fastest, used to rule successive planetary hours
CHALDEAN_ORDER: tuple[str, ...] = (
    "saturn",
    "jupiter",
    "mars",
    "sun",
    "venus",
    "mercury",
    "moon",
)

# Day rulers keyed by datetime.weekday() (Monday == 0).
# Not the Chaldean order: the weekday sequence skips through it in steps of three.
WEEKDAY_RULERS: dict[int, str] = {
    0: "moon",
    1: "mars",
    2: "mercury",
    3: "jupiter",
    4: "venus",
    5: "saturn",
    6: "sun",
}


def normalize_longitude(longitude: float) -> float:
    """Reduce an angle into [0, 360)."""
    longitude = longitude % 360.0
    # -1e-17 % 360.0 == 360.0 in floating point
    if longitude >= 360.0:
        longitude = 0.0
    return longitude


def sign_index(longitude: float) -> int:
    return int(math.floor(normalize_longitude(longitude) / SIGN_WIDTH)) % 12


def zodiac_sign(longitude: float) -> ZodiacSign:
    """Map an ecliptic longitude (any range) to its tropical sign."""
    return ZODIAC[sign_index(longitude)]


def longitude_to_sign(longitude: float) -> tuple[str, float]:
    """Convert ecliptic longitude to sign and degree within sign."""
    longitude = normalize_longitude(longitude)
    index = sign_index(longitude)
    degree = longitude - (index * SIGN_WIDTH)
    return ZODIAC[index].name, degree
