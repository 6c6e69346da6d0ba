"""Phonetic engine: algorithm registry, batch encoding and usage statistics."""

import time
from typing import Dict, List, Optional

import structlog

from ..models.response import (
    AlgorithmInfo,
    BatchEncodeResponse,
    DifferenceResponse,
    EncodeResponse,
    EncodeResult,
    PhoneticEncoding,
)
from .double_metaphone import DoubleMetaphone
from .encoder import PhoneticEncoder
from .exceptions import UnknownAlgorithmError
from .nysiis import Nysiis
from .refined_soundex import RefinedSoundex
from .similarity import difference_encoded
from .soundex import Soundex

logger = structlog.get_logger(__name__)


DEFAULT_ALGORITHMS: Dict[str, PhoneticEncoder] = {
    "soundex": Soundex.american_encoder,
    "soundex_simplified": Soundex.simplified_encoder,
    "soundex_genealogy": Soundex.genealogy_encoder,
    "soundex_special": Soundex.special_encoder,
    "refined_soundex": RefinedSoundex.default_encoder,
    "nysiis": Nysiis.original_encoder,
    "nysiis_modified": Nysiis.modified_encoder,
    "double_metaphone": DoubleMetaphone.default_encoder,
}

DESCRIPTIONS: Dict[str, str] = {
    "soundex": "American Soundex, H and W ignored, vowels separate duplicate codes",
    "soundex_simplified": "Simplified Soundex, H and W separate duplicate codes like vowels",
    "soundex_genealogy": "Genealogy Soundex, vowels, H and W are silent",
    "soundex_special": "Special Soundex, same rules as simplified",
    "refined_soundex": "Refined Soundex for spell checking, unpadded",
    "nysiis": "Original NYSIIS, 6 characters",
    "nysiis_modified": "Modified NYSIIS, 8 characters",
    "double_metaphone": "Double Metaphone with primary and alternate codes",
}


class PhoneticEngine:
    """Looks up encoders by name and tracks how they are used."""

    def __init__(self, encoders: Optional[Dict[str, PhoneticEncoder]] = None) -> None:
        """
        Initialize the engine.

        Args:
            encoders: Algorithm name to encoder, defaults to the built-in presets.
                Names are matched case-insensitively; an empty mapping gives
                an engine with nothing registered
        """
        if encoders is None:
            encoders = DEFAULT_ALGORITHMS

        self._encoders: Dict[str, PhoneticEncoder] = {
            name.lower(): encoder for name, encoder in encoders.items()
        }

        # Performance tracking
        self._stats = self._empty_stats()

    @staticmethod
    def _empty_stats() -> Dict:
        return {
            "total_queries": 0,
            "total_encodings": 0,
            "empty_results": 0,
            "comparisons": 0,
            "unknown_algorithms": 0,
            "total_execution_time": 0.0,
            "queries_by_algorithm": {},
        }

    def register(self, name: str, encoder: PhoneticEncoder) -> None:
        """Register an encoder under a name, replacing any existing one."""
        self._encoders[name.lower()] = encoder
        logger.info("Encoder registered", algorithm=name.lower(), encoder=type(encoder).__name__)

    def get_encoder(self, algorithm: str) -> PhoneticEncoder:
        """
        Get the encoder registered under a name.

        Raises:
            UnknownAlgorithmError: If no encoder has that name
        """
        encoder = self._encoders.get(algorithm.lower())
        if encoder is None:
            self._stats["unknown_algorithms"] += 1
            logger.warning("Unknown algorithm requested", algorithm=algorithm)
            raise UnknownAlgorithmError("Unknown algorithm", algorithm)
        return encoder

    def list_algorithms(self) -> List[AlgorithmInfo]:
        return [
            AlgorithmInfo(
                name=name,
                encoder=type(encoder).__name__,
                description=DESCRIPTIONS.get(name, type(encoder).__name__),
            )
            for name, encoder in sorted(self._encoders.items())
        ]

    def _encode_one(self, text: str, algorithm: str) -> EncodeResult:
        encoder = self.get_encoder(algorithm)
        encoding: Optional[PhoneticEncoding] = encoder.encode(text)

        self._stats["total_encodings"] += 1
        by_algorithm = self._stats["queries_by_algorithm"]
        by_algorithm[algorithm] = by_algorithm.get(algorithm, 0) + 1

        if encoding is None:
            self._stats["empty_results"] += 1
            return EncodeResult(text=text, algorithm=algorithm)

        return EncodeResult(
            text=text,
            algorithm=algorithm,
            primary=encoding.primary,
            alternates=sorted(encoding.alternates or ()),
        )

    def encode(self, text: str, algorithms: Optional[List[str]] = None) -> EncodeResponse:
        """
        Encode text with one or more algorithms.

        Args:
            text: Text to encode
            algorithms: Algorithm names, all registered algorithms when omitted

        Returns:
            EncodeResponse with one result per algorithm

        Raises:
            UnknownAlgorithmError: If any algorithm name is not registered
        """
        start_time = time.time()
        names = [name.lower() for name in algorithms] if algorithms else sorted(self._encoders)

        self._stats["total_queries"] += 1
        results = [self._encode_one(text, name) for name in names]

        execution_time = (time.time() - start_time) * 1000
        self._stats["total_execution_time"] += execution_time

        logger.debug("Encoded text", text=text, algorithms=names, execution_time_ms=execution_time)

        return EncodeResponse(
            text=text,
            results=results,
            execution_time_ms=round(execution_time, 3),
        )

    def encode_all(self, text: str) -> EncodeResponse:
        """Encode text with every registered algorithm."""
        return self.encode(text)

    def encode_batch(self, texts: List[str], algorithm: str) -> BatchEncodeResponse:
        """
        Encode many texts with a single algorithm.

        Args:
            texts: Texts to encode, results keep their order
            algorithm: Algorithm name

        Returns:
            BatchEncodeResponse
        """
        start_time = time.time()
        algorithm = algorithm.lower()
        self.get_encoder(algorithm)

        self._stats["total_queries"] += 1
        results = [self._encode_one(text, algorithm) for text in texts]

        execution_time = (time.time() - start_time) * 1000
        self._stats["total_execution_time"] += execution_time

        logger.debug("Encoded batch", algorithm=algorithm, total=len(texts), execution_time_ms=execution_time)

        return BatchEncodeResponse(
            algorithm=algorithm,
            total=len(results),
            results=results,
            execution_time_ms=round(execution_time, 3),
        )

    def difference(self, first: str, second: str, algorithm: str) -> DifferenceResponse:
        """
        Compare two texts by the matching positions of their primary codes.

        Args:
            first: First text
            second: Second text
            algorithm: Algorithm name

        Returns:
            DifferenceResponse with both codes and the score
        """
        start_time = time.time()
        algorithm = algorithm.lower()
        encoder = self.get_encoder(algorithm)

        first_encoding = encoder.encode(first)
        second_encoding = encoder.encode(second)
        first_code = first_encoding.primary if first_encoding else None
        second_code = second_encoding.primary if second_encoding else None
        score = difference_encoded(first_code, second_code)

        execution_time = (time.time() - start_time) * 1000
        self._stats["total_queries"] += 1
        self._stats["comparisons"] += 1
        self._stats["total_execution_time"] += execution_time
        by_algorithm = self._stats["queries_by_algorithm"]
        by_algorithm[algorithm] = by_algorithm.get(algorithm, 0) + 1

        logger.debug("Compared texts", algorithm=algorithm, difference=score)

        return DifferenceResponse(
            algorithm=algorithm,
            first=first,
            second=second,
            first_encoding=first_code,
            second_encoding=second_code,
            difference=score,
            execution_time_ms=round(execution_time, 3),
        )

    def get_stats(self) -> Dict:
        """
        Get engine statistics.

        Returns:
            Dictionary with counters and derived averages
        """
        stats = dict(self._stats)
        stats["queries_by_algorithm"] = dict(self._stats["queries_by_algorithm"])

        total_queries = stats["total_queries"]
        if total_queries > 0:
            stats["average_execution_time_ms"] = stats["total_execution_time"] / total_queries
        else:
            stats["average_execution_time_ms"] = 0.0

        if stats["total_encodings"] > 0:
            stats["empty_result_rate"] = stats["empty_results"] / stats["total_encodings"]
        else:
            stats["empty_result_rate"] = 0.0

        stats["algorithms"] = sorted(self._encoders)
        return stats

    def clear(self) -> None:
        """Reset usage statistics."""
        self._stats = self._empty_stats()
