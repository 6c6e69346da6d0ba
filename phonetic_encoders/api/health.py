"""Health check and monitoring API endpoints."""

import time
from datetime import datetime

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..config import get_settings
from ..engine_instance import phonetic_engine
from ..models.response import HealthResponse

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

# Track application start time
app_start_time = time.time()

# Known inputs and the codes every healthy deployment must produce
SELF_TEST_CASES = {
    "soundex": ("Robert", "R163"),
    "refined_soundex": ("Testing", "T6036084"),
    "nysiis": ("Knight", "NAGT"),
    "double_metaphone": ("Raymond", "RMNT"),
}


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the phonetic encoding service"
)
async def health_check() -> HealthResponse:
    """
    Perform a health check on the phonetic encoding service.

    Each core encoder is run against a known input and its output checked.
    """
    try:
        uptime = time.time() - app_start_time

        dependencies = {}
        for algorithm, (text, expected) in SELF_TEST_CASES.items():
            try:
                encoding = phonetic_engine.get_encoder(algorithm).encode(text)
                if encoding is not None and encoding.primary == expected:
                    dependencies[algorithm] = "healthy"
                else:
                    dependencies[algorithm] = "degraded"
            except Exception:
                dependencies[algorithm] = "unhealthy"

        # Determine overall status
        if all(status == "healthy" for status in dependencies.values()):
            status = "healthy"
        elif any(status == "unhealthy" for status in dependencies.values()):
            status = "unhealthy"
        else:
            status = "degraded"

        return HealthResponse(
            status=status,
            version=settings.app_version,
            uptime=uptime,
            dependencies=dependencies
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Health check failed: {str(e)}"
        )


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check if the service is ready to accept requests"
)
async def readiness_check() -> JSONResponse:
    """
    Check if the service is ready to accept requests.

    Used by load balancers and orchestration systems to decide whether
    to route traffic to this instance.
    """
    try:
        stats = phonetic_engine.get_stats()

        return JSONResponse(
            status_code=200,
            content={
                "status": "ready",
                "timestamp": datetime.utcnow().isoformat(),
                "algorithms": stats.get("algorithms", [])
            }
        )

    except Exception as e:
        return JSONResponse(
            status_code=503,
            content={
                "status": "not_ready",
                "error": str(e),
                "timestamp": datetime.utcnow().isoformat()
            }
        )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check if the service is alive and responding"
)
async def liveness_check() -> JSONResponse:
    """Check if the service process is alive and responsive."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "alive",
            "timestamp": datetime.utcnow().isoformat(),
            "uptime": time.time() - app_start_time
        }
    )
