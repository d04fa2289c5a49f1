"""Health check."""

from datetime import UTC, datetime

from almanac.provider import SwissEphemeris
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_provider

router = APIRouter()


@router.get("/health")
async def health_check():
    return {"status": "ok", "service": "horae-api"}


@router.get("/health/ready")
def readiness_check(provider: SwissEphemeris = Depends(get_provider)):
    try:
        provider.lunar_phase_angle(datetime.now(UTC))
        return {"status": "ready"}
    except Exception as exc:
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "error": str(exc)},
        )
