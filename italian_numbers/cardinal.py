"""
Cardinal encoder — numbers to Italian counting words.

    cardinal(709)                  → "settecentonove"
    cardinal(-1)                   → "meno uno"
    cardinal(33_003_000)           → "trentatré milioni e tremila"
    cardinal(1000.05, True)        → "mille/05"
    cardinal(float("inf"))         → "infinito"
    cardinal(Decimal("-Infinity")) → "infinito"
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal

from .decomposer import accentuate, render
from .lexicon import DECIMAL_SEPARATOR, INFINITY, MINUS, ZERO
from .models import Number, SignedNumber

logger = logging.getLogger(__name__)


def cardinal(value: Number, include_decimals: bool = False) -> str:
    """Convert a number to its Italian cardinal word.

    Args:
        value: int, float or Decimal within ±999,999,999,999.99.
        include_decimals: Append "/" and the two-digit truncated fraction.

    Returns:
        The word, e.g. "dieci/99" for ``cardinal(10.999, True)``.

    Raises:
        TypeError: If ``value`` is not numeric.
        OutOfRangeError: If ``value`` is NaN or exceeds the supported bound.
    """
    if _is_infinite(value):
        return INFINITY

    number = SignedNumber.from_value(value)

    if number.integer_part == 0:
        word = ZERO
    else:
        word = accentuate(render(number.integer_part))

    if include_decimals:
        word += f"{DECIMAL_SEPARATOR}{number.fractional_part or 0:02d}"

    if number.is_negative:
        word = MINUS + word

    logger.debug("cardinal(%r) -> %r", value, word)
    return word


def _is_infinite(value: Number) -> bool:
    if isinstance(value, float):
        return math.isinf(value)
    return isinstance(value, Decimal) and value.is_infinite()
