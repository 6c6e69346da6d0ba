"""Exception types raised by the phonetic encoders and engine."""

from typing import Any, Optional


class PhoneticEncoderError(ValueError):
    """Base error for encoder construction and lookup failures."""

    def __init__(self, message: str, input: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.input = input

    def __str__(self) -> str:
        if self.input is None:
            return self.message
        return f"{self.message} (input: {self.input!r})"


class EncoderConfigurationError(PhoneticEncoderError):
    """Raised when an encoder is constructed with invalid options."""


class UnknownAlgorithmError(PhoneticEncoderError, KeyError):
    """Raised when an algorithm name is not registered with the engine."""

    def __str__(self) -> str:
        return PhoneticEncoderError.__str__(self)
