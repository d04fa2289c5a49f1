"""Pydantic schemas for almanac data."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Observer(BaseModel):
    """Geographic position of the observer."""

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    elevation: float = 0.0


class Eclipse(BaseModel):
    """Result of an eclipse search."""

    kind: str  # 'Total', 'Annular', 'Hybrid', 'Partial', 'Penumbral'
    peak: datetime


class PlanetStatus(BaseModel):
    """Zodiac placement and status of one body at a moment."""

    model_config = ConfigDict(frozen=True)

    name: str
    glyph: str
    sign: str
    sign_glyph: str
    longitude: float
    degree: float
    retrograde: bool = False
    status: str = ""
    color: str
    dark_color: str


class PlanetaryHour(BaseModel):
    """A half-open interval [start, end) ruled by one body."""

    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime
    ruler: str
    glyph: str
    is_day: bool


class LuckVerdict(BaseModel):
    """Lunar-day luck classification."""

    model_config = ConfigDict(frozen=True)

    text: str
    color: str
    status: str
    lunar_day: int = Field(ge=1, le=30)


class AlmanacReport(BaseModel):
    """Everything the daily page shows for one observer and moment."""

    at: datetime
    observer: Observer
    planets: list[PlanetStatus]
    hours: list[PlanetaryHour] = Field(default_factory=list)
    current_hour: int | None = None
    luck: LuckVerdict
