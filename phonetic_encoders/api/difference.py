"""Similarity API endpoints."""

from fastapi import APIRouter, HTTPException, Path, Query

from ..core.exceptions import UnknownAlgorithmError
from ..engine_instance import phonetic_engine
from ..models.request import DifferenceRequest
from ..models.response import DifferenceResponse

router = APIRouter(prefix="/api/v1", tags=["difference"])


@router.get(
    "/difference/{algorithm}",
    response_model=DifferenceResponse,
    summary="Compare two texts",
    description="Count the matching positions of the primary codes of two texts"
)
async def difference(
    algorithm: str = Path(..., description="Algorithm name, see /algorithms"),
    first: str = Query(..., min_length=1, max_length=100, description="First text"),
    second: str = Query(..., min_length=1, max_length=100, description="Second text")
) -> DifferenceResponse:
    """
    Compare two texts phonetically.

    For Soundex the score ranges from 0 (no similarity) to 4 (strong
    similarity); other algorithms score up to their code length.
    """
    try:
        return phonetic_engine.difference(first, second, algorithm)
    except UnknownAlgorithmError:
        raise HTTPException(status_code=404, detail=f"Unknown algorithm: {algorithm}")
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Comparison failed: {str(e)}"
        )


@router.post(
    "/difference",
    response_model=DifferenceResponse,
    summary="Compare with request body",
    description="Compare two texts using a structured request body"
)
async def difference_with_body(request: DifferenceRequest) -> DifferenceResponse:
    """Compare two texts using a structured request body."""
    try:
        return phonetic_engine.difference(request.first, request.second, request.algorithm)
    except UnknownAlgorithmError:
        raise HTTPException(status_code=404, detail=f"Unknown algorithm: {request.algorithm}")
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Comparison failed: {str(e)}"
        )
