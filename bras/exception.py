from __future__ import annotations

__all__ = [
        'ParseException',
        'InvalidLengthException',
        'InvalidFormatException',
        'InvalidChecksumException',
        'RepeatedDigitsException'
]

from typing import Any


class ParseException(ValueError):
    """Base class of every document parsing error.
    :param message: the error message
    :type message: str
    :param value: the rejected input
    :type value: Any
    """
    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class InvalidLengthException(ParseException):
    """The input does not decode to the expected number of digits."""


class InvalidFormatException(ParseException):
    """The input holds unexpected characters or misplaced separators."""


class InvalidChecksumException(ParseException):
    """The check digits do not match the ones computed from the base."""


class RepeatedDigitsException(ParseException):
    """Every digit is the same."""
