"""Character classification helpers shared by the phonetic encoders."""

import re
from typing import Pattern, Union

# Returned by char_at for any index outside the string. It is never a member
# of the letter, vowel or special character sets.
NO_CHARACTER = "\0"

SIMPLE_VOWELS = frozenset("AEIOU")

ACCENTED_VOWELS = frozenset("ÀÁÂÃÄÅÈÉÊËÌÍÎÏÒÓÔÕÖØÙÚÛÜÝ")

VOWELS = SIMPLE_VOWELS | frozenset("Y") | ACCENTED_VOWELS

SPECIAL_CHARACTERS = frozenset("'-./\\ ")

LETTERS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")

DIGITS = frozenset("0123456789")


def is_letter(char: str) -> bool:
    """Return True for an ASCII letter."""
    return char in LETTERS


def is_digit(char: str) -> bool:
    """Return True for an ASCII digit."""
    return char in DIGITS


def is_letter_or_digit(char: str) -> bool:
    return char in LETTERS or char in DIGITS


def is_simple_vowel(char: str) -> bool:
    """Return True for one of the uppercase vowels A, E, I, O or U."""
    return char in SIMPLE_VOWELS


def is_vowel(char: str) -> bool:
    """
    Return True for an uppercase vowel, including Y and accented Latin vowels.

    Args:
        char: Single uppercase character

    Returns:
        Whether the character is treated as a vowel
    """
    return char in VOWELS


def is_special_character(char: str) -> bool:
    """Return True for apostrophe, hyphen, period, slash, backslash or space."""
    return char in SPECIAL_CHARACTERS


def char_at(value: str, index: int) -> str:
    """
    Get the character at an index without raising.

    Args:
        value: String to read from
        index: Position to read, may be negative or past the end

    Returns:
        The character, or NO_CHARACTER when the index is out of range
    """
    if 0 <= index < len(value):
        return value[index]
    return NO_CHARACTER


def starts_with(value: str, pattern: Union[str, Pattern[str]], index: int = 0) -> bool:
    """
    Check whether a literal string or compiled pattern matches at an index.

    Args:
        value: String to inspect
        pattern: Literal prefix or compiled regular expression
        index: Position the match must start at

    Returns:
        False for out of range indexes, otherwise whether the pattern matches
    """
    if index < 0 or index >= len(value):
        return False
    if isinstance(pattern, str):
        return value.startswith(pattern, index)
    return pattern.match(value, index) is not None


def compile_alternatives(*literals: str) -> Pattern[str]:
    """Compile literal alternatives into a single pattern, longest first."""
    ordered = sorted(literals, key=len, reverse=True)
    return re.compile("|".join(re.escape(literal) for literal in ordered))
