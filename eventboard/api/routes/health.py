"""Health & Readiness Probes: liveness and readiness endpoints for orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if the process is up (liveness)
    - GET /api/v1/health/ready returns 503 if the notification bus is unreachable
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from eventboard.core.domain_types import EntityKind

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "eventboard-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe: notification bus connectivity plus store sizes."""
    bus = getattr(request.app.state, "bus", None)
    store = getattr(request.app.state, "store", None)
    bus_ok = await bus.ping() if bus is not None else False
    if not bus_ok or store is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": (
                    "notification_bus_unavailable" if not bus_ok
                    else "store_not_initialized"
                ),
            },
        )
    return {
        "status": "ready",
        "checks": {"notification_bus": "healthy"},
        "records": {kind.value: store.count(kind) for kind in EntityKind},
    }
