"""FastAPI application factory."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from horae.config import get_settings

from api.routers import health, public

logger = logging.getLogger(__name__)


def _warn_missing_ephemeris_files() -> None:
    settings = get_settings()
    if not settings.swisseph_ephe_path.strip() and settings.ephemeris_backend.strip().lower() != "moseph":
        logger.warning("SWISSEPH_EPHE_PATH is empty; Swiss Ephemeris will fall back to Moshier")


def create_app() -> FastAPI:
    app = FastAPI(title="Horae API", version="0.1.0")
    settings = get_settings()
    _warn_missing_ephemeris_files()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.site_url],
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.include_router(health.router, tags=["health"])
    app.include_router(public.router, prefix="/v1", tags=["public"])
    return app


app = create_app()
