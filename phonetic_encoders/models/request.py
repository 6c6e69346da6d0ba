"""Request models for API endpoints."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class EncodeRequest(BaseModel):
    """Request model for encoding a single text."""

    text: str = Field(..., min_length=1, max_length=100, description="Text to encode")
    algorithms: Optional[List[str]] = Field(
        None, description="Algorithms to apply; all registered algorithms when omitted"
    )

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Validate and normalize text input."""
        if not v or not v.strip():
            raise ValueError("Text cannot be empty")
        return v.strip()

    @field_validator("algorithms")
    @classmethod
    def validate_algorithms(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        if v is None:
            return None
        names = [name.strip().lower() for name in v if name and name.strip()]
        if not names:
            raise ValueError("Algorithms list cannot be empty")
        return names


class BatchEncodeRequest(BaseModel):
    """Request model for encoding many texts with one algorithm."""

    texts: List[str] = Field(..., min_length=1, max_length=100, description="Texts to encode")
    algorithm: str = Field(default="soundex", description="Algorithm to apply")

    @field_validator("texts")
    @classmethod
    def validate_texts(cls, v: List[str]) -> List[str]:
        """Validate and normalize the text list."""
        if not v:
            raise ValueError("Texts list cannot be empty")

        normalized_texts = []
        for text in v:
            if not text or not text.strip():
                raise ValueError("Text cannot be empty")
            normalized_texts.append(text.strip())

        return normalized_texts

    @field_validator("algorithm")
    @classmethod
    def validate_algorithm(cls, v: str) -> str:
        return v.strip().lower()


class DifferenceRequest(BaseModel):
    """Request model for comparing two texts."""

    first: str = Field(..., min_length=1, max_length=100, description="First text")
    second: str = Field(..., min_length=1, max_length=100, description="Second text")
    algorithm: str = Field(default="soundex", description="Algorithm to compare with")

    @field_validator("algorithm")
    @classmethod
    def validate_algorithm(cls, v: str) -> str:
        """Normalize the algorithm name."""
        return v.strip().lower()
