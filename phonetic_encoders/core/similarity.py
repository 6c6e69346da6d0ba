"""Similarity scoring over phonetic codes."""

from typing import TYPE_CHECKING, Optional

from rapidfuzz.distance import Hamming

if TYPE_CHECKING:
    from .encoder import PhoneticEncoder


def difference_encoded(first: Optional[str], second: Optional[str]) -> int:
    """
    Count the positions at which two encoded strings agree.

    Only the common prefix length is compared, left-aligned. For Soundex
    codes the result ranges from 0 (no similarity) to 4 (strong similarity).

    Args:
        first: First encoded string
        second: Second encoded string

    Returns:
        Number of equal characters at equal positions, 0 when either is absent
    """
    if not first or not second:
        return 0

    length = min(len(first), len(second))
    return int(Hamming.similarity(first[:length], second[:length]))


def primary_difference(
    encoder: "PhoneticEncoder",
    first: Optional[str],
    second: Optional[str]
) -> int:
    """
    Encode two inputs and compare their primary codes.

    Args:
        encoder: Encoder applied to both inputs
        first: First raw input
        second: Second raw input

    Returns:
        The difference_encoded score of the two primary codes
    """
    first_encoding = encoder.encode(first)
    second_encoding = encoder.encode(second)

    return difference_encoded(
        first_encoding.primary if first_encoding else None,
        second_encoding.primary if second_encoding else None,
    )
