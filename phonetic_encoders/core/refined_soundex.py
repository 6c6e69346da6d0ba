"""Refined Soundex encoder, tuned for spell checking rather than name matching."""

from types import MappingProxyType
from typing import List, Mapping, Optional

from ..models.response import PhoneticEncoding
from .characters import is_letter, is_special_character
from .encoder import PhoneticEncoder
from .exceptions import EncoderConfigurationError

# Mapping used by the default encoder, one code per letter A..Z
US_ENGLISH_MAPPING = MappingProxyType(
    dict(zip("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "01360240043788015936020505"))
)


class RefinedSoundex(PhoneticEncoder):
    """
    Refined Soundex encoder.

    Unlike Soundex the first letter is also coded, vowels are kept as 0,
    and codes are never padded.
    """

    def __init__(
        self,
        mapping: Mapping[str, str] = US_ENGLISH_MAPPING,
        max_length: Optional[int] = None
    ) -> None:
        """
        Create a Refined Soundex encoder.

        Args:
            mapping: Uppercase character to single character code
            max_length: Truncate codes to this length, None for unlimited

        Raises:
            EncoderConfigurationError: If the mapping or max_length is invalid
        """
        if not mapping:
            raise EncoderConfigurationError("Refined Soundex mapping cannot be empty")
        for key, code in mapping.items():
            if not isinstance(key, str) or len(key) != 1:
                raise EncoderConfigurationError("Mapping keys must be single characters", key)
            if not isinstance(code, str) or len(code) != 1:
                raise EncoderConfigurationError("Mapping codes must be single characters", code)
        if max_length is not None and max_length <= 0:
            raise EncoderConfigurationError("max_length must be positive or None", max_length)

        self.mapping: Mapping[str, str] = MappingProxyType(dict(mapping))
        self.max_length = max_length
        self.allow_latin = any(not is_letter(key) for key in self.mapping)

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, str],
        max_length: Optional[int] = None
    ) -> "RefinedSoundex":
        return cls(mapping, max_length=max_length)

    def encode(self, text: Optional[str]) -> Optional[PhoneticEncoding]:
        """
        Encode a word using Refined Soundex.

        Args:
            text: Word to encode

        Returns:
            PhoneticEncoding with no alternates, or None for empty input
        """
        cleaned = self.normalizer.clean(text, allow_latin=self.allow_latin)
        if cleaned is None:
            return None

        start = 0
        while start < len(cleaned) and is_special_character(cleaned[start]):
            start += 1
        if start >= len(cleaned):
            return None

        encoded: List[str] = [cleaned[start]]
        # Sentinel that equals no code
        last: Optional[str] = None

        for char in cleaned[start:]:
            if self.max_length is not None and len(encoded) >= self.max_length:
                break

            code = self.mapping.get(char)
            if code is None or code == last:
                continue

            encoded.append(code)
            last = code

        return PhoneticEncoding(primary="".join(encoded))


RefinedSoundex.default_encoder = RefinedSoundex()
