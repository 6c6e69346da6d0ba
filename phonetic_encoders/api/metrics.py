"""Metrics and monitoring API endpoints."""

import os
from datetime import datetime

import psutil
from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..engine_instance import phonetic_engine
from ..models.response import MetricsResponse

router = APIRouter(prefix="/api/v1", tags=["metrics"])


def _process_memory_mb() -> float:
    return psutil.Process(os.getpid()).memory_info().rss / (1024 * 1024)


@router.get(
    "/metrics",
    response_model=MetricsResponse,
    summary="Get performance metrics",
    description="Get usage and performance metrics for the phonetic engine"
)
async def get_metrics() -> MetricsResponse:
    """
    Get usage and performance metrics for the phonetic engine.

    Includes operation counts, average response time and process memory.
    """
    try:
        stats = phonetic_engine.get_stats()

        return MetricsResponse(
            total_queries=stats.get("total_queries", 0),
            total_encodings=stats.get("total_encodings", 0),
            empty_results=stats.get("empty_results", 0),
            average_response_time_ms=stats.get("average_execution_time_ms", 0.0),
            queries_by_algorithm=stats.get("queries_by_algorithm", {}),
            memory_usage_mb=_process_memory_mb()
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get metrics: {str(e)}"
        )


@router.get(
    "/metrics/detailed",
    summary="Get detailed metrics",
    description="Get engine counters together with system resource usage"
)
async def get_detailed_metrics() -> JSONResponse:
    """Get engine counters together with system resource usage."""
    try:
        stats = phonetic_engine.get_stats()
        memory_info = psutil.virtual_memory()

        return JSONResponse(
            status_code=200,
            content={
                "query_metrics": {
                    "total_queries": stats.get("total_queries", 0),
                    "total_encodings": stats.get("total_encodings", 0),
                    "comparisons": stats.get("comparisons", 0),
                    "empty_results": stats.get("empty_results", 0),
                    "empty_result_rate": stats.get("empty_result_rate", 0.0),
                    "unknown_algorithms": stats.get("unknown_algorithms", 0),
                    "average_response_time_ms": stats.get("average_execution_time_ms", 0.0),
                    "total_execution_time_ms": stats.get("total_execution_time", 0.0),
                    "queries_by_algorithm": stats.get("queries_by_algorithm", {})
                },
                "system_metrics": {
                    "process_memory_mb": _process_memory_mb(),
                    "memory_usage_mb": memory_info.used / (1024 * 1024),
                    "memory_usage_percent": memory_info.percent,
                    "available_memory_mb": memory_info.available / (1024 * 1024)
                },
                "timestamp": datetime.utcnow().isoformat()
            }
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get detailed metrics: {str(e)}"
        )


@router.post(
    "/metrics/reset",
    summary="Reset metrics",
    description="Reset the engine usage counters"
)
async def reset_metrics() -> JSONResponse:
    """Reset the engine usage counters."""
    phonetic_engine.clear()
    return JSONResponse(
        status_code=200,
        content={"status": "reset", "timestamp": datetime.utcnow().isoformat()}
    )
