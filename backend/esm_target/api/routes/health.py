"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 200 once the baseline table is built (readiness)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from
      load balancer (ADR: production readiness)
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from esm_target.config import get_settings
from esm_target.core.unsupported_features import baseline_table

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "esm-target-api",
        "build_version": get_settings().build_version,
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe — baseline table must be available."""
    baselines = baseline_table()
    if not baselines:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "baseline_table_empty"},
        )
    return {"status": "ready", "checks": {"baseline_levels": len(baselines)}}
