"""Soundex encoder with American, Simplified, Genealogy and Special presets."""

import re
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from ..models.response import PhoneticEncoding
from .characters import is_special_character
from .encoder import PhoneticEncoder
from .exceptions import EncoderConfigurationError


class Soundex(PhoneticEncoder):
    """
    Soundex encoder.

    The first letter of a name is kept and the following consonants are
    replaced by digits, collapsing adjacent letters that share a digit.
    Letters mapped to SILENT_MARKER produce no digit; whether they still
    separate two consonants with the same digit is controlled by
    track_ignored.

    Presets:
        american_encoder: H and W are skipped, vowels separate duplicates
        simplified_encoder / special_encoder: H and W behave like vowels
        genealogy_encoder: vowels, H and W are silent and do not separate
    """

    SILENT_MARKER = "-"

    DEFAULT_MAX_LENGTH = 4

    # Surname prefixes; "DE LA" and "DELA" must be tried before "DE"
    PREFIX_PATTERN = re.compile(
        r"^(?:CON|DELA|DE\s+LA|DI|DU|DE|D'|LA|LE|L'|VAN|VON)\s*"
    )

    HW = frozenset("HW")

    def __init__(
        self,
        mapping: Mapping[str, str],
        max_length: Optional[int] = DEFAULT_MAX_LENGTH,
        padding_enabled: bool = True,
        padding_char: str = "0",
        ignore_hw: bool = True,
        track_ignored: bool = True,
        prefixes_enabled: bool = False,
        hyphenated_parts_enabled: bool = True,
        strip_generation: bool = True
    ) -> None:
        """
        Create a Soundex encoder.

        Accented letters are kept through cleaning, so an accented first
        letter is the first character of the code. Elsewhere they are
        skipped unless the mapping assigns them a code.

        Args:
            mapping: Uppercase character to single character code
            max_length: Maximum code length, None for unlimited
            padding_enabled: Right pad short codes to max_length
            padding_char: Character used for padding
            ignore_hw: Skip H and W entirely after the first letter
            track_ignored: Silent letters separate consonants with the same code
            prefixes_enabled: Add an alternate for the name without a surname prefix
            hyphenated_parts_enabled: Encode each hyphen separated part
            strip_generation: Drop a trailing "Jr", "Sr" or Roman numeral token.
                This also drops name parts that look like numerals, such as
                the "X" of "Malcolm X", so disable it for such inputs

        Raises:
            EncoderConfigurationError: If the mapping or options are invalid
        """
        self._validate(mapping, max_length, padding_enabled, padding_char)

        self.mapping: Mapping[str, str] = MappingProxyType(dict(mapping))
        self.max_length = max_length
        self.padding_enabled = padding_enabled
        self.padding_char = padding_char
        self.ignore_hw = ignore_hw
        self.track_ignored = track_ignored
        self.prefixes_enabled = prefixes_enabled
        self.hyphenated_parts_enabled = hyphenated_parts_enabled
        self.strip_generation = strip_generation

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str], **options) -> "Soundex":
        """Create an encoder from a custom mapping and keyword options."""
        return cls(mapping, **options)

    @staticmethod
    def _validate(
        mapping: Mapping[str, str],
        max_length: Optional[int],
        padding_enabled: bool,
        padding_char: str
    ) -> None:
        if not mapping:
            raise EncoderConfigurationError("Soundex mapping cannot be empty")

        for key, code in mapping.items():
            if not isinstance(key, str) or len(key) != 1:
                raise EncoderConfigurationError("Mapping keys must be single characters", key)
            if not isinstance(code, str) or len(code) != 1:
                raise EncoderConfigurationError("Mapping codes must be single characters", code)

        if max_length is not None and max_length <= 0:
            raise EncoderConfigurationError("max_length must be positive or None", max_length)

        if padding_enabled:
            if max_length is None:
                raise EncoderConfigurationError("Padding requires a max_length")
            if not isinstance(padding_char, str) or len(padding_char) != 1:
                raise EncoderConfigurationError(
                    "padding_char must be a single character", padding_char
                )

    def encode(self, text: Optional[str]) -> Optional[PhoneticEncoding]:
        """
        Encode a name using Soundex.

        Args:
            text: Name to encode

        Returns:
            PhoneticEncoding, or None when the input has no encodable letters
        """
        if not text:
            return None

        if self.hyphenated_parts_enabled:
            parts = self.normalizer.split_hyphenated(text)
        else:
            parts = [text]

        primary: Optional[str] = None
        alternates: Dict[str, None] = {}

        for part in parts:
            cleaned = self.normalizer.clean(
                part, allow_latin=True, strip_generation=self.strip_generation
            )
            if cleaned is None:
                continue

            encoded = self._encode_cleaned(cleaned)
            if encoded is None:
                continue

            if primary is None:
                primary = encoded
            else:
                alternates[encoded] = None

            if self.prefixes_enabled:
                without_prefix = self._strip_prefix(cleaned)
                if without_prefix:
                    prefix_encoded = self._encode_cleaned(without_prefix)
                    if prefix_encoded is not None:
                        alternates[prefix_encoded] = None

        if primary is None:
            return None

        alternates.pop(primary, None)
        return PhoneticEncoding(
            primary=primary,
            alternates=frozenset(alternates) if alternates else None
        )

    def _strip_prefix(self, cleaned: str) -> Optional[str]:
        """Remove a leading surname prefix, returning None if there was none."""
        match = self.PREFIX_PATTERN.match(cleaned)
        if match is None:
            return None

        remainder = cleaned[match.end():]
        return remainder or None

    def _encode_cleaned(self, cleaned: str) -> Optional[str]:
        """Apply the Soundex rules to a single cleaned, uppercase part."""
        start = 0
        while start < len(cleaned) and is_special_character(cleaned[start]):
            start += 1

        if start >= len(cleaned):
            return None

        first = cleaned[start]
        encoded: List[str] = [first]
        last = self.mapping.get(first)

        for char in cleaned[start + 1:]:
            if self.max_length is not None and len(encoded) >= self.max_length:
                break

            if self.ignore_hw and char in self.HW:
                continue

            code = self.mapping.get(char)
            if code is None:
                continue

            if code == self.SILENT_MARKER:
                if self.track_ignored:
                    last = code
                continue

            if code != last:
                encoded.append(code)
            last = code

        if self.padding_enabled and len(encoded) < self.max_length:
            encoded.extend(self.padding_char * (self.max_length - len(encoded)))

        return "".join(encoded)


def _mapping(groups: Dict[str, str]) -> Dict[str, str]:
    mapping = {}
    for letters, code in groups.items():
        for letter in letters:
            mapping[letter] = code
    return mapping


AMERICAN_MAPPING = MappingProxyType(_mapping({
    "AEIOUYHW": Soundex.SILENT_MARKER,
    "BFPV": "1",
    "CGJKQSXZ": "2",
    "DT": "3",
    "L": "4",
    "MN": "5",
    "R": "6",
}))

Soundex.american_encoder = Soundex(AMERICAN_MAPPING)

Soundex.simplified_encoder = Soundex(
    AMERICAN_MAPPING,
    ignore_hw=False,
    hyphenated_parts_enabled=False
)

# Same rules, published under both names
Soundex.special_encoder = Soundex.simplified_encoder

Soundex.genealogy_encoder = Soundex(
    AMERICAN_MAPPING,
    ignore_hw=False,
    track_ignored=False,
    hyphenated_parts_enabled=False
)
