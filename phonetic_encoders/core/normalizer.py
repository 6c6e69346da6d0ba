"""Text normalization applied before phonetic encoding."""

import re
from typing import List, Optional


class TextNormalizer:
    """Cleans raw names and words into the uppercase alphabet the encoders expect."""

    # Anything outside this set is dropped during cleaning
    SIMPLE_PATTERN = re.compile(r"[^A-Z'\-./\\\s]")
    LATIN_PATTERN = re.compile(r"[^A-Z'\-./\\\sÀÁÂÃÄÅÇÈÉÊËÌÍÎÏÑÒÓÔÕÖØÙÚÛÜÝ]")

    # Trailing SR, JR or Roman numeral I..XXIX, separated from the name
    GENERATION_PATTERN = re.compile(
        r"[\s,]+(?:SR|JR|(?=[IVX])X{0,2}(?:IX|IV|V?I{0,3}))\.?$"
    )

    HYPHEN_PATTERN = re.compile(r"\s*-\s*")

    def clean(
        self,
        text: Optional[str],
        allow_latin: bool = True,
        strip_generation: bool = False
    ) -> Optional[str]:
        """
        Clean input text for encoding.

        The text is trimmed and uppercased, an optional generational suffix
        is removed, and every character outside the permitted alphabet is
        dropped. Apostrophes, hyphens, periods, slashes and whitespace are
        kept; each algorithm decides what to do with them.

        Args:
            text: Raw input
            allow_latin: Keep accented Latin letters
            strip_generation: Remove a trailing suffix such as "Jr" or "III"

        Returns:
            Cleaned text, or None when nothing encodable remains
        """
        if not text:
            return None

        cleaned = text.strip().upper()

        if strip_generation:
            cleaned = self.GENERATION_PATTERN.sub("", cleaned)

        pattern = self.LATIN_PATTERN if allow_latin else self.SIMPLE_PATTERN
        cleaned = pattern.sub("", cleaned)

        if not cleaned or cleaned.isspace():
            return None

        return cleaned

    def split_hyphenated(self, text: Optional[str]) -> List[str]:
        """Split raw text on hyphens, dropping surrounding whitespace."""
        if not text:
            return []
        return [part for part in self.HYPHEN_PATTERN.split(text.strip()) if part]
