"""Base class for phonetic encoders."""

from abc import ABC, abstractmethod
from typing import Optional

from ..models.response import PhoneticEncoding
from .normalizer import TextNormalizer


class PhoneticEncoder(ABC):
    """
    An algorithm that maps a word or name to codes approximating its sound.

    Encoders hold only immutable configuration, so a single instance can be
    shared freely between threads.
    """

    normalizer = TextNormalizer()

    @abstractmethod
    def encode(self, text: Optional[str]) -> Optional[PhoneticEncoding]:
        """
        Encode text into its phonetic representation.

        Args:
            text: Raw input, may be None or empty

        Returns:
            PhoneticEncoding, or None when the input has no encodable content
        """

    def difference(self, first: Optional[str], second: Optional[str]) -> int:
        """Encode both inputs and count the matching positions of their primary codes."""
        from .similarity import primary_difference

        return primary_difference(self, first, second)
