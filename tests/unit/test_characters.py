"""Unit tests for the character classifier."""

import re

import pytest

from phonetic_encoders.core.characters import (
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


class TestClassifiers:
    """Test cases for the character predicates."""

    def test_letters_and_digits(self):
        """Only ASCII letters and digits are recognized."""
        assert is_letter("A")
        assert is_letter("z")
        assert not is_letter("É")
        assert not is_letter("1")
        assert is_digit("7")
        assert not is_digit("A")
        assert is_letter_or_digit("Q")
        assert is_letter_or_digit("0")
        assert not is_letter_or_digit("-")

    @pytest.mark.parametrize("char", list("AEIOU"))
    def test_simple_vowels(self, char):
        assert is_simple_vowel(char)
        assert is_vowel(char)

    def test_extended_vowels(self):
        """Y and accented Latin vowels count as vowels but not simple vowels."""
        for char in "YÀÉÖØÝ":
            assert is_vowel(char)
            assert not is_simple_vowel(char)
        assert not is_vowel("Ç")
        assert not is_vowel("Ñ")
        assert not is_vowel("B")

    def test_special_characters(self):
        for char in "'-./\\ ":
            assert is_special_character(char)
        assert not is_special_character("A")
        assert not is_special_character(",")

    def test_sentinel_is_never_classified(self):
        assert not is_letter(NO_CHARACTER)
        assert not is_vowel(NO_CHARACTER)
        assert not is_special_character(NO_CHARACTER)


class TestCharAt:
    """Test cases for out-of-range safe character access."""

    def test_in_range(self):
        assert char_at("ABC", 0) == "A"
        assert char_at("ABC", 2) == "C"

    def test_out_of_range(self):
        assert char_at("ABC", 3) == NO_CHARACTER
        assert char_at("ABC", -1) == NO_CHARACTER
        assert char_at("", 0) == NO_CHARACTER


class TestStartsWith:
    """Test cases for positional matching."""

    def test_literal(self):
        assert starts_with("SCHMIDT", "SCH")
        assert starts_with("MACHER", "ACH", 1)
        assert not starts_with("MACHER", "ACH", 0)

    def test_pattern(self):
        pattern = re.compile(r"OM|AM")
        assert starts_with("THOMAS", pattern, 2)
        assert not starts_with("THOMAS", pattern, 1)

    def test_out_of_range_is_false(self):
        assert not starts_with("ABC", "A", -1)
        assert not starts_with("ABC", "C", 3)
        assert not starts_with("", "")
