"""
Custom exception hierarchy for number/word conversion.

Each exception type maps to a specific category of conversion failure,
enabling precise error handling and reporting by callers (and the API).
"""

from __future__ import annotations


class ItalianNumberError(ValueError):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class OutOfRangeError(ItalianNumberError):
    """The value lies outside the supported magnitude."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("OUT_OF_RANGE", message, details)


class InvalidWordError(ItalianNumberError):
    """The text cannot be resolved against the Italian number lexicon."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_WORD", message, details)


class InvalidRomanNumeralError(ItalianNumberError):
    """The text is not a canonical Roman numeral."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_ROMAN_NUMERAL", message, details)
