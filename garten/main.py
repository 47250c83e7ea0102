"""
HTTP API serving the Garten accent to host pages.

Run with:
    uvicorn garten.main:app
"""

from fastapi import FastAPI, HTTPException, APIRouter, Query
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from garten.config import API_PREFIX, API_DOCS_ENABLED, HOST_GLOBAL_NAME, LOG_LEVEL
from garten.events import EVENTS
from garten.host import expose
from garten.logger import logger
from garten.resolver import (
    AccentResolution,
    GartenConfig,
    explain_accent,
    resolve_config,
    resolve_season_accent,
)


# ============================================================================
# FastAPI Lifespan
# ============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    Publishes the host namespace on app.state for in-process callers.
    """
    logger.info("Garten starting up")
    logger.info(f"Configuration: API_PREFIX={API_PREFIX}, LOG_LEVEL={LOG_LEVEL}, events={len(EVENTS)}")

    expose(app.state, HOST_GLOBAL_NAME)

    yield

    logger.info("Shutdown complete")


# ============================================================================
# FastAPI App
# ============================================================================

app = FastAPI(
    title="Garten API",
    lifespan=lifespan,
    redoc_url=None,
    docs_url="/docs" if API_DOCS_ENABLED else None
)

garten_router = APIRouter(
    prefix=API_PREFIX,
    tags=["Garten"]
)


# ------------------------------------------------------------------
# Resolution
# ------------------------------------------------------------------

@garten_router.get("/config", response_model=GartenConfig)
async def get_config(
    container: str = Query(..., min_length=1, description="Container identifier"),
    at: Optional[datetime] = Query(None, description="Resolve for this local instant instead of now (ISO-8601)"),
):
    """Get the Garten config for a container."""
    try:
        return resolve_config(container, now=at)
    except Exception as e:
        logger.error(f"Failed to resolve config for {container}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@garten_router.get("/season-accent")
async def get_season_accent(at: Optional[datetime] = Query(None, description="Resolve for this local instant instead of now (ISO-8601)")):
    """
    Get the season accent color.

    Not part of the config; offered for hosts that want a seasonal tint.
    """
    try:
        return {"accent": resolve_season_accent(now=at)}
    except Exception as e:
        logger.error("Failed to resolve season accent", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@garten_router.get("/accent", response_model=AccentResolution)
async def get_accent(at: Optional[datetime] = Query(None, description="Resolve for this local instant instead of now (ISO-8601)")):
    """
    Explain the current accent.

    Useful for:
    - Checking which event is active
    - Debugging host page colors
    """
    try:
        return explain_accent(now=at)
    except Exception as e:
        logger.error("Failed to explain accent", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@garten_router.get("/events")
async def list_events():
    """List calendar events in match order."""
    return [
        {"name": e.name, "start": e.start, "end": e.end, "accent": e.accent}
        for e in EVENTS
    ]


@app.get("/health")
async def health():
    return {"status": "ok"}


# ============================================================================
# Register Routers
# ============================================================================

app.include_router(garten_router)
