"""Response models for encoders and API endpoints."""

from datetime import datetime
from typing import Any, Dict, FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class PhoneticEncoding(BaseModel):
    """Result of encoding a single input: a primary code plus optional alternates."""

    model_config = ConfigDict(frozen=True)

    primary: str = Field(..., description="Primary phonetic code")
    alternates: Optional[FrozenSet[str]] = Field(
        None, description="Alternate codes, never containing the primary"
    )

    @field_validator("alternates")
    @classmethod
    def empty_alternates_to_none(cls, v: Optional[FrozenSet[str]]) -> Optional[FrozenSet[str]]:
        """Represent an empty alternate set as None."""
        if not v:
            return None
        return v

    @model_validator(mode="after")
    def primary_not_alternate(self) -> "PhoneticEncoding":
        if self.alternates and self.primary in self.alternates:
            raise ValueError("primary code must not be repeated in alternates")
        return self

    def __str__(self) -> str:
        if not self.alternates:
            return self.primary
        return f"{self.primary} {sorted(self.alternates)}"


class EncodeResult(BaseModel):
    """Encoding of one input by one algorithm."""

    text: str = Field(..., description="Original input text")
    algorithm: str = Field(..., description="Algorithm used")
    primary: Optional[str] = Field(None, description="Primary code, absent when nothing was encodable")
    alternates: List[str] = Field(default_factory=list, description="Sorted alternate codes")


class EncodeResponse(BaseModel):
    """Response for encode queries."""

    text: str = Field(..., description="Original input text")
    results: List[EncodeResult] = Field(..., description="One result per requested algorithm")
    execution_time_ms: float = Field(..., description="Encoding time in milliseconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class BatchEncodeResponse(BaseModel):
    """Response for batch encode queries."""

    algorithm: str = Field(..., description="Algorithm used")
    total: int = Field(..., description="Number of inputs processed")
    results: List[EncodeResult] = Field(..., description="Results in input order")
    execution_time_ms: float = Field(..., description="Encoding time in milliseconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class DifferenceResponse(BaseModel):
    """Response for difference queries."""

    algorithm: str = Field(..., description="Algorithm used")
    first: str = Field(..., description="First input")
    second: str = Field(..., description="Second input")
    first_encoding: Optional[str] = Field(None, description="Primary code of the first input")
    second_encoding: Optional[str] = Field(None, description="Primary code of the second input")
    difference: int = Field(..., ge=0, description="Number of matching code positions")
    execution_time_ms: float = Field(..., description="Comparison time in milliseconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class AlgorithmInfo(BaseModel):
    """Description of a registered algorithm."""

    name: str = Field(..., description="Registry name")
    encoder: str = Field(..., description="Encoder class")
    description: str = Field(..., description="Short description")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")
    request_id: Optional[str] = Field(None, description="Request identifier for tracking")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")


class MetricsResponse(BaseModel):
    """Performance metrics response."""

    total_queries: int = Field(..., description="Total encode and compare operations")
    total_encodings: int = Field(..., description="Total individual encodings")
    empty_results: int = Field(..., description="Encodings that produced no code")
    average_response_time_ms: float = Field(..., description="Average operation time")
    queries_by_algorithm: Dict[str, int] = Field(..., description="Operations per algorithm")
    memory_usage_mb: float = Field(..., description="Process memory usage in MB")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Metrics timestamp")
