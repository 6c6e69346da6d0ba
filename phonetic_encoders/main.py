"""Main FastAPI application for the Phonetic Encoders service."""

import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
import structlog

from .api import (
    encode_router,
    difference_router,
    health_router,
    metrics_router,
)
from .config import get_settings
from .core.exceptions import PhoneticEncoderError
from .engine_instance import phonetic_engine
from .log_config import configure_logging
from .models.response import ErrorResponse

settings = get_settings()
configure_logging(settings)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    logger.info(
        "Starting Phonetic Encoders service",
        version=settings.app_version,
        algorithms=[info.name for info in phonetic_engine.list_algorithms()]
    )

    yield

    # Shutdown
    logger.info("Shutting down Phonetic Encoders service", stats=phonetic_engine.get_stats())


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Phonetic encoding of names and words with Soundex, NYSIIS and Double Metaphone",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# Add middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=1000)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next) -> Response:
    """Log all HTTP requests."""
    start_time = time.time()

    logger.info(
        "Request started",
        method=request.method,
        url=str(request.url),
        client_ip=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent")
    )

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(
        "Request completed",
        method=request.method,
        url=str(request.url),
        status_code=response.status_code,
        process_time_ms=round(process_time * 1000, 2)
    )

    return response


@app.exception_handler(PhoneticEncoderError)
async def encoder_exception_handler(request: Request, exc: PhoneticEncoderError) -> JSONResponse:
    """Handle encoder errors that escape the routers."""
    logger.warning(
        "Encoder error",
        method=request.method,
        url=str(request.url),
        error=str(exc)
    )

    return JSONResponse(
        status_code=400,
        content=ErrorResponse(
            error=type(exc).__name__,
            message=exc.message,
            details={"input": str(exc.input)} if exc.input is not None else None
        ).model_dump(mode="json")
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle global exceptions."""
    logger.error(
        "Unhandled exception",
        method=request.method,
        url=str(request.url),
        error=str(exc),
        exc_info=True
    )

    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal Server Error",
            message="An unexpected error occurred",
            details={"exception": str(exc)} if settings.debug else None
        ).model_dump(mode="json")
    )


# Include API routers
app.include_router(encode_router)
app.include_router(difference_router)
app.include_router(health_router)
app.include_router(metrics_router)


# Root endpoint
@app.get("/", summary="Root endpoint", description="Get basic information about the API")
async def root() -> dict:
    """Root endpoint with basic API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Phonetic encoding of names and words",
        "docs_url": "/docs",
        "health_url": "/api/v1/health",
        "status": "running"
    }


# API info endpoint
@app.get("/api", summary="API information", description="Get detailed API information")
async def api_info() -> dict:
    """Get detailed API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Phonetic encoding of names and words",
        "endpoints": {
            "algorithms": "/api/v1/algorithms",
            "encode": "/api/v1/encode/{algorithm}/{text}",
            "encode_all": "/api/v1/encode/{text}",
            "batch": "/api/v1/encode/batch",
            "difference": "/api/v1/difference/{algorithm}?first=a&second=b",
            "health": "/api/v1/health",
            "metrics": "/api/v1/metrics"
        },
        "algorithms": [info.name for info in phonetic_engine.list_algorithms()],
        "limits": {
            "max_query_length": settings.max_query_length,
            "max_batch_size": settings.max_batch_size
        }
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "phonetic_encoders.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=1 if settings.debug else settings.workers,
        log_level=settings.log_level.lower()
    )
