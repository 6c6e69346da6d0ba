"""Encoding API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Path, Query

from ..config import get_settings
from ..core.exceptions import UnknownAlgorithmError
from ..engine_instance import phonetic_engine
from ..models.request import BatchEncodeRequest, EncodeRequest
from ..models.response import AlgorithmInfo, BatchEncodeResponse, EncodeResponse

router = APIRouter(prefix="/api/v1", tags=["encode"])
settings = get_settings()


@router.get(
    "/algorithms",
    response_model=List[AlgorithmInfo],
    summary="List algorithms",
    description="List the phonetic algorithms available for encoding and comparison"
)
async def list_algorithms() -> List[AlgorithmInfo]:
    """List every registered algorithm with a short description."""
    return phonetic_engine.list_algorithms()


@router.get(
    "/encode/{algorithm}/{text}",
    response_model=EncodeResponse,
    summary="Encode text with one algorithm",
    description="Encode a word or name with the named phonetic algorithm"
)
async def encode_text(
    algorithm: str = Path(..., description="Algorithm name, see /algorithms"),
    text: str = Path(..., description="The word or name to encode", min_length=1)
) -> EncodeResponse:
    """
    Encode text with a single algorithm.

    Returns the primary code and any alternate codes. Inputs with no
    encodable letters produce a result without a primary code.
    """
    if len(text) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Text too long. Maximum length is {settings.max_query_length} characters"
        )

    try:
        return phonetic_engine.encode(text, [algorithm])
    except UnknownAlgorithmError:
        raise HTTPException(status_code=404, detail=f"Unknown algorithm: {algorithm}")
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Encoding failed: {str(e)}"
        )


@router.get(
    "/encode/{text}",
    response_model=EncodeResponse,
    summary="Encode text with all algorithms",
    description="Encode a word or name with every registered algorithm"
)
async def encode_text_all(
    text: str = Path(..., description="The word or name to encode", min_length=1),
    algorithm: Optional[List[str]] = Query(
        None, description="Restrict to these algorithms"
    )
) -> EncodeResponse:
    """Encode text with all, or a selection of, the registered algorithms."""
    if len(text) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Text too long. Maximum length is {settings.max_query_length} characters"
        )

    try:
        return phonetic_engine.encode(text, algorithm)
    except UnknownAlgorithmError as e:
        raise HTTPException(status_code=404, detail=f"Unknown algorithm: {e.input}")
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Encoding failed: {str(e)}"
        )


@router.post(
    "/encode",
    response_model=EncodeResponse,
    summary="Encode with request body",
    description="Encode text using a structured request body"
)
async def encode_with_body(request: EncodeRequest) -> EncodeResponse:
    """
    Encode text using a structured request body.

    When no algorithms are given every registered algorithm is applied.
    """
    try:
        return phonetic_engine.encode(request.text, request.algorithms)
    except UnknownAlgorithmError as e:
        raise HTTPException(status_code=404, detail=f"Unknown algorithm: {e.input}")
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Encoding failed: {str(e)}"
        )


@router.post(
    "/encode/batch",
    response_model=BatchEncodeResponse,
    summary="Batch encode",
    description="Encode multiple texts with one algorithm in a single request"
)
async def batch_encode(request: BatchEncodeRequest) -> BatchEncodeResponse:
    """
    Encode many texts in one request.

    Results are returned in the same order as the submitted texts.
    """
    if len(request.texts) > settings.max_batch_size:
        raise HTTPException(
            status_code=400,
            detail=f"Too many texts. Maximum batch size is {settings.max_batch_size}"
        )

    try:
        return phonetic_engine.encode_batch(request.texts, request.algorithm)
    except UnknownAlgorithmError:
        raise HTTPException(status_code=404, detail=f"Unknown algorithm: {request.algorithm}")
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Batch encoding failed: {str(e)}"
        )
