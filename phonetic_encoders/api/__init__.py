"""API endpoints for the phonetic encoders."""

from .encode import router as encode_router
from .difference import router as difference_router
from .health import router as health_router
from .metrics import router as metrics_router

__all__ = [
    "encode_router",
    "difference_router",
    "health_router",
    "metrics_router",
]
