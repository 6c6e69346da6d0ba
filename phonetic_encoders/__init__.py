"""
Phonetic Encoders - phonetic encoding algorithms for names and words.

This package maps a word or name to short codes approximating its
pronunciation, using Soundex (American, Simplified, Genealogy and Special
variants), Refined Soundex, NYSIIS (original and modified) and Double
Metaphone, and scores the similarity of the resulting codes.
"""

__version__ = "1.0.0"

from .core.double_metaphone import DoubleMetaphone
from .core.encoder import PhoneticEncoder
from .core.engine import PhoneticEngine
from .core.exceptions import EncoderConfigurationError, PhoneticEncoderError, UnknownAlgorithmError
from .core.normalizer import TextNormalizer
from .core.nysiis import Nysiis
from .core.refined_soundex import RefinedSoundex
from .core.similarity import difference_encoded, primary_difference
from .core.soundex import Soundex
from .models.response import PhoneticEncoding

__all__ = [
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
    "PhoneticEncoding",
]
