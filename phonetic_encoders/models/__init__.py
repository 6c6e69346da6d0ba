"""Data models for the phonetic encoders."""

from .response import (
    PhoneticEncoding,
    EncodeResult,
    EncodeResponse,
    BatchEncodeResponse,
    DifferenceResponse,
    AlgorithmInfo,
    ErrorResponse,
    HealthResponse,
    MetricsResponse,
)
from .request import EncodeRequest, BatchEncodeRequest, DifferenceRequest

__all__ = [
    "PhoneticEncoding",
    "EncodeResult",
    "EncodeResponse",
    "BatchEncodeResponse",
    "DifferenceResponse",
    "AlgorithmInfo",
    "ErrorResponse",
    "HealthResponse",
    "MetricsResponse",
    "EncodeRequest",
    "BatchEncodeRequest",
    "DifferenceRequest",
]
