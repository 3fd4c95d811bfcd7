"""
Medsite Backend — Banner & Health Check Routes
===============================================

What:  GET / answers with the service banner; GET /health probes the
       database and reports uptime.
Who:   Load balancers, container health checks, uptime monitors.

Status levels:
    - healthy:   database reachable (HTTP 200)
    - unhealthy: database unreachable (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from medsite import __version__
from medsite.database import Database, get_database
from medsite.schemas.common import HealthResponse, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get("/", response_model=MessageResponse, summary="Service banner")
async def root() -> MessageResponse:
    return MessageResponse(message="Medical Website Backend API")


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(db: Database = Depends(get_database)):
    """Runs SELECT 1 against the pool and reports the result."""
    connected = await db.ping()
    body = HealthResponse(
        status="healthy" if connected else "unhealthy",
        version=__version__,
        database="connected" if connected else "disconnected",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    if not connected:
        return JSONResponse(status_code=503, content=body.model_dump())
    return body
