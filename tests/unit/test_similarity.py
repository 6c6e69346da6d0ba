"""Unit tests for similarity scoring."""

import pytest

from phonetic_encoders.core.double_metaphone import DoubleMetaphone
from phonetic_encoders.core.nysiis import Nysiis
from phonetic_encoders.core.similarity import difference_encoded, primary_difference
from phonetic_encoders.core.soundex import Soundex


class TestDifferenceEncoded:
    """Test cases for comparing encoded strings."""

    @pytest.mark.parametrize("first,second,expected", [
        ("S530", "S530", 4),
        ("S530", "S531", 3),
        ("A500", "A536", 2),
        ("J530", "M626", 0),
        ("KRTL", "KRT", 3),
        ("T6036084", "T60", 3),
        ("AB", "BA", 0),
    ])
    def test_matching_positions(self, first, second, expected):
        assert difference_encoded(first, second) == expected

    @pytest.mark.parametrize("first,second", [
        (None, None),
        (None, "S530"),
        ("S530", None),
        ("", ""),
        ("", "S530"),
    ])
    def test_absent_or_empty(self, first, second):
        assert difference_encoded(first, second) == 0

    def test_symmetric(self):
        assert difference_encoded("KRTL", "KRT") == difference_encoded("KRT", "KRTL")


class TestPrimaryDifference:
    """Test cases for encoding and comparing raw inputs."""

    def test_absent_inputs(self):
        for encoder in [Soundex.american_encoder, Nysiis.original_encoder, DoubleMetaphone.default_encoder]:
            assert primary_difference(encoder, None, "Smith") == 0
            assert primary_difference(encoder, "", "") == 0

    def test_identical_inputs_score_full_length(self):
        assert primary_difference(Nysiis.original_encoder, "Knight", "Knight") == 4
        assert primary_difference(DoubleMetaphone.default_encoder, "Cardillo", "Cardillo") == 4

    def test_only_primary_is_compared(self):
        # Schmidt's primary XMT differs from Smith's SM0 even though its alternate is SMT
        assert primary_difference(DoubleMetaphone.default_encoder, "Smith", "Schmidt") == 1
