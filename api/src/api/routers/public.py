"""Public API endpoints."""

from __future__ import annotations

import logging

from almanac.calculator import calculate_almanac, calculate_planets
from almanac.hours import current_hour_index, planetary_hours
from almanac.luck import luck_verdict
from almanac.provider import EphemerisError, SwissEphemeris
from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import AlmanacQuery, get_almanac_query, get_provider

logger = logging.getLogger(__name__)

router = APIRouter()


def _unavailable(exc: EphemerisError) -> HTTPException:
    logger.warning("Ephemeris unavailable: %s", exc)
    return HTTPException(status_code=503, detail="Ephemeris unavailable")


def _context(query: AlmanacQuery) -> dict:
    return {
        "at": query.at.isoformat(),
        "timezone": query.timezone.key,
        "observer": query.observer.model_dump(),
    }


@router.get("/planets")
def get_planets(
    query: AlmanacQuery = Depends(get_almanac_query),
    provider: SwissEphemeris = Depends(get_provider),
):
    try:
        planets = calculate_planets(provider, query.at, query.observer)
    except EphemerisError as exc:
        raise _unavailable(exc) from exc
    return {**_context(query), "planets": [p.model_dump(mode="json") for p in planets]}


@router.get("/hours")
def get_hours(
    query: AlmanacQuery = Depends(get_almanac_query),
    provider: SwissEphemeris = Depends(get_provider),
):
    hours = planetary_hours(provider, query.at, query.observer)
    return {
        **_context(query),
        "available": bool(hours),
        "current_hour": current_hour_index(hours, query.at),
        "hours": [h.model_dump(mode="json") for h in hours],
    }


@router.get("/luck")
def get_luck(
    query: AlmanacQuery = Depends(get_almanac_query),
    provider: SwissEphemeris = Depends(get_provider),
):
    try:
        verdict = luck_verdict(provider, query.at)
    except EphemerisError as exc:
        raise _unavailable(exc) from exc
    return {**_context(query), "luck": verdict.model_dump(mode="json")}


@router.get("/almanac")
def get_almanac(
    query: AlmanacQuery = Depends(get_almanac_query),
    provider: SwissEphemeris = Depends(get_provider),
):
    try:
        report = calculate_almanac(provider, query.at, query.observer)
    except EphemerisError as exc:
        raise _unavailable(exc) from exc
    return {**report.model_dump(mode="json"), "timezone": query.timezone.key}
