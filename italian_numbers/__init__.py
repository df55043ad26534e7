"""
Italian Numbers — numbers to Italian words and back.

Architecture: Lexicon → Magnitude Decomposer → Cardinal / Ordinal encoders,
mirrored by the Word Decoder (ordinal normalizer → tier parser).
Every call is a pure function over immutable tables: safe to share across threads.
"""

from .cardinal import cardinal
from .exceptions import (
    InvalidRomanNumeralError,
    InvalidWordError,
    ItalianNumberError,
    OutOfRangeError,
)
from .models import OrdinalOptions
from .ordinal import ordinal
from .roman import arabic_to_roman, roman_to_arabic
from .word_to_number import decode_italian_word, words_to_number

__version__ = "1.0.0"

__all__ = [
    "InvalidRomanNumeralError",
    "InvalidWordError",
    "ItalianNumberError",
    "OrdinalOptions",
    "OutOfRangeError",
    "arabic_to_roman",
    "cardinal",
    "decode_italian_word",
    "ordinal",
    "roman_to_arabic",
    "words_to_number",
]
