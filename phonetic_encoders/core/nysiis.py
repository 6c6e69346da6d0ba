"""NYSIIS (New York State Identification and Intelligence System) encoder."""

from typing import List, Optional

from ..models.response import PhoneticEncoding
from .characters import is_simple_vowel, is_special_character
from .encoder import PhoneticEncoder
from .exceptions import EncoderConfigurationError


class Nysiis(PhoneticEncoder):
    """
    NYSIIS encoder supporting the original algorithm and the modified
    (USDA) variant.

    The input is transformed in four passes over a working list of
    characters: first letters, last letters, the main left to right pass,
    and a final cleanup of the collected code.
    """

    DEFAULT_ORIGINAL_MAX_LENGTH = 6
    DEFAULT_MODIFIED_MAX_LENGTH = 8

    def __init__(
        self,
        max_length: Optional[int] = DEFAULT_ORIGINAL_MAX_LENGTH,
        enable_modified: bool = False,
        strip_generation: bool = True
    ) -> None:
        """
        Create a NYSIIS encoder.

        Args:
            max_length: Truncate codes to this length, 0 or None for unlimited
            enable_modified: Apply the modified rule set
            strip_generation: Drop a trailing "Jr", "Sr" or Roman numeral token

        Raises:
            EncoderConfigurationError: If max_length is negative
        """
        if max_length is not None and max_length < 0:
            raise EncoderConfigurationError("max_length cannot be negative", max_length)

        self.max_length = max_length or None
        self.enable_modified = enable_modified
        self.strip_generation = strip_generation

    @classmethod
    def with_options(
        cls,
        max_length: Optional[int] = DEFAULT_ORIGINAL_MAX_LENGTH,
        enable_modified: bool = False,
        strip_generation: bool = True
    ) -> "Nysiis":
        return cls(
            max_length=max_length,
            enable_modified=enable_modified,
            strip_generation=strip_generation
        )

    def encode(self, text: Optional[str]) -> Optional[PhoneticEncoding]:
        """
        Encode a name using NYSIIS.

        Args:
            text: Name to encode

        Returns:
            PhoneticEncoding with no alternates, or None for empty input
        """
        cleaned = self.normalizer.clean(
            text, allow_latin=True, strip_generation=self.strip_generation
        )
        if cleaned is None:
            return None

        # Leading punctuation never starts the code
        start = 0
        while start < len(cleaned) and is_special_character(cleaned[start]):
            start += 1

        chars = list(cleaned[start:])
        if not any(char.isalpha() for char in chars):
            return None

        self._transcode_first_letters(chars)
        self._transcode_last_letters(chars)
        encoding = self._encode_letters(chars)
        self._apply_final_rules(encoding)

        code = "".join(encoding)
        if self.max_length is not None:
            code = code[:self.max_length]

        return PhoneticEncoding(primary=code)

    def _transcode_first_letters(self, chars: List[str]) -> None:
        if len(chars) < 2:
            return

        first = chars[0]
        second = chars[1]
        third = chars[2] if len(chars) > 2 else None

        if first == "M":
            if second == "A" and third == "C":
                chars[1] = chars[2] = "C"
        elif first == "K":
            if second == "N":
                chars[0] = chars[1] = "N"
            else:
                chars[0] = "C"
        elif first == "P":
            if second in ("H", "F"):
                chars[0] = chars[1] = "F"
        elif first == "S":
            if second == "C" and third == "H":
                chars[1] = chars[2] = "S"

        if not self.enable_modified:
            return

        if is_simple_vowel(first):
            chars[0] = "A"
            i = 1
            while i < len(chars) and is_simple_vowel(chars[i]):
                chars[i] = "A"
                i += 1
            return

        if (first, second) in (("W", "R"), ("R", "H")):
            chars[0] = chars[1] = "R"
        elif (first, second) == ("D", "G"):
            chars[0] = chars[1] = "G"

    def _transcode_last_letters(self, chars: List[str]) -> None:
        if len(chars) < 2:
            return

        if self.enable_modified and chars[-1] in ("S", "Z"):
            chars.pop()
            if len(chars) < 2:
                return

        last = chars[-1]
        before_last = chars[-2]

        if last == "E":
            if before_last in ("E", "I"):
                chars.pop()
                chars[-1] = "Y"
            elif self.enable_modified and before_last == "Y":
                chars.pop()
        elif last == "T":
            if before_last in ("D", "R"):
                chars.pop()
                chars[-1] = "D"
            elif before_last == "N":
                chars.pop()
                if not self.enable_modified:
                    chars[-1] = "D"
        elif last == "D":
            if before_last == "R":
                del chars[-2]
            elif before_last == "N":
                if self.enable_modified:
                    chars.pop()
                else:
                    del chars[-2]
        elif last == "X":
            if self.enable_modified and before_last in ("I", "E"):
                chars[-1:] = ["C", "K"]

    def _encode_letters(self, chars: List[str]) -> List[str]:
        """Main pass: rewrite chars in place and collect the collapsed code."""
        modified = self.enable_modified
        length = len(chars)
        encoding = [chars[0]]

        for i in range(1, length):
            char = chars[i]
            if is_special_character(char):
                continue

            next_char = chars[i + 1] if i + 1 < length else None
            after_next = chars[i + 2] if i + 2 < length else None

            if is_simple_vowel(char):
                chars[i] = "A"
                if char == "E" and next_char == "V":
                    chars[i + 1] = "F"
            elif modified and char == "Y" and i != length - 1:
                chars[i] = "A"
            elif char == "Q":
                chars[i] = "G"
            elif char == "Z":
                chars[i] = "S"
            elif char == "M":
                chars[i] = "N"
            elif char == "K":
                chars[i] = "N" if next_char == "N" else "C"
            elif char == "S":
                if next_char == "C" and after_next == "H":
                    chars[i + 1] = "S"
                    chars[i + 2] = "A" if modified and i == length - 3 else "S"
                elif modified and next_char == "H":
                    chars[i + 1] = "A" if i + 2 == length else "S"
            elif char == "P":
                if next_char == "H":
                    chars[i] = chars[i + 1] = "F"
            elif modified and char == "G" and next_char == "H" and after_next == "T":
                chars[i] = chars[i + 1] = "T"
            elif modified and char == "D" and next_char == "G":
                chars[i] = "G"
            elif modified and char == "W" and next_char == "R":
                chars[i] = "R"
            elif char == "H" and (
                not is_simple_vowel(chars[i - 1])
                or (next_char is not None and not is_simple_vowel(next_char))
            ):
                chars[i] = chars[i - 1]
            elif char == "W" and is_simple_vowel(chars[i - 1]):
                chars[i] = chars[i - 1]

            if chars[i] != encoding[-1]:
                encoding.append(chars[i])

        return encoding

    @staticmethod
    def _apply_final_rules(encoding: List[str]) -> None:
        if encoding[-1] == "S" and len(encoding) > 1:
            encoding.pop()

        if encoding[-1] == "Y" and len(encoding) > 1 and encoding[-2] == "A":
            del encoding[-2]

        if encoding[-1] == "A" and len(encoding) > 1:
            encoding.pop()


Nysiis.original_encoder = Nysiis(
    max_length=Nysiis.DEFAULT_ORIGINAL_MAX_LENGTH,
    enable_modified=False
)

Nysiis.modified_encoder = Nysiis(
    max_length=Nysiis.DEFAULT_MODIFIED_MAX_LENGTH,
    enable_modified=True
)
