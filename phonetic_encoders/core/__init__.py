"""Phonetic encoding algorithms."""

from .characters import (
    NO_CHARACTER,
    char_at,
    is_digit,
    is_letter,
    is_letter_or_digit,
    is_simple_vowel,
    is_special_character,
    is_vowel,
    starts_with,
)
from .double_metaphone import DoubleMetaphone
from .encoder import PhoneticEncoder
from .engine import PhoneticEngine
from .exceptions import EncoderConfigurationError, PhoneticEncoderError, UnknownAlgorithmError
from .normalizer import TextNormalizer
from .nysiis import Nysiis
from .refined_soundex import RefinedSoundex
from .similarity import difference_encoded, primary_difference
from .soundex import Soundex

__all__ = [
    "NO_CHARACTER",
    "char_at",
    "is_digit",
    "is_letter",
    "is_letter_or_digit",
    "is_simple_vowel",
    "is_special_character",
    "is_vowel",
    "starts_with",
    "DoubleMetaphone",
    "PhoneticEncoder",
    "PhoneticEngine",
    "EncoderConfigurationError",
    "PhoneticEncoderError",
    "UnknownAlgorithmError",
    "TextNormalizer",
    "Nysiis",
    "RefinedSoundex",
    "difference_encoded",
    "primary_difference",
    "Soundex",
]
