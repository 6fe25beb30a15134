# 📄 File: app/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# Health check endpoints that tell us whether the rental service is up and whether its
# storage can be reached, so load balancers know when to send traffic.
# 🧪 Purpose (Technical Summary):
# Liveness and readiness endpoints; readiness probes the database session factory when the
# database backend is active and reports the in-memory store otherwise.
# 🔗 Dependencies:
# FastAPI, app.shared.config.settings, app.shared.infrastructure.database.session
# 🔄 Connected Modules / Calls From:
# app.main (mounted at the root), monitoring systems, load balancers

import logging
from datetime import datetime

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.shared.config.settings import get_settings
from app.shared.infrastructure.database.session import session_health_check
from app.shared.utils.logging import SERVICE_NAME

logger = logging.getLogger(__name__)

# Create router for health endpoints
health_router = APIRouter()

# Application start time for uptime calculation
_app_start_time = datetime.now()


@health_router.get("/health",
                  summary="Basic Health Check",
                  description="Basic health check endpoint for load balancers and monitoring",
                  tags=["Health Check"])
async def health_check() -> JSONResponse:
    """
    Basic health check endpoint

    Returns simple OK status for quick health verification.
    """
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "timestamp": datetime.now().isoformat(),
            "service": SERVICE_NAME,
            "version": get_settings().APP_VERSION
        }
    )


@health_router.get("/health/live",
                  summary="Liveness Probe",
                  tags=["Health Check"])
async def liveness_probe() -> JSONResponse:
    """Process is alive; reports uptime only."""
    uptime = (datetime.now() - _app_start_time).total_seconds()
    return JSONResponse(
        status_code=200,
        content={"status": "alive", "uptime_seconds": round(uptime, 3)}
    )


@health_router.get("/health/ready",
                  summary="Readiness Probe",
                  description="Checks that the rental storage backend can serve requests",
                  tags=["Health Check"])
async def readiness_probe(request: Request) -> JSONResponse:
    """
    Readiness probe

    - memory backend: ready as soon as the store is attached to the app
    - database backend: ready when a session can run ``SELECT 1``
    """
    store = getattr(request.app.state, "memory_store", None)

    if store is not None:
        backend = {
            "backend": "memory",
            "status": "healthy",
            "users": len(store.users),
            "movies": len(store.movies),
            "rentals": len(store.rentals),
        }
    else:
        backend = {"backend": "database", **await session_health_check()}

    ready = backend["status"] == "healthy"
    if not ready:
        logger.warning(f"Readiness probe failed: {backend}")

    return JSONResponse(
        status_code=200 if ready else 503,
        content={
            "status": "ready" if ready else "not_ready",
            "timestamp": datetime.now().isoformat(),
            "storage": backend
        }
    )
