"""
Ordinal encoder — numbers to Italian ranking words.

    ordinal(1)                                      → "primo"
    ordinal(63)                                     → "sessantatreesimo"
    ordinal(1_000_000_001)                          → "miliardunesimo"
    ordinal(15, OrdinalOptions(female=True))        → "quindicesima"

Up to ten the words are irregular and come straight from the lexicon.
Above ten the cardinal word is compacted into a single token (tier
conjunctions, articles and spaces removed, vowels elided at the joins)
and given the "-esimo" suffix.
"""

from __future__ import annotations

import logging
import re

from .cardinal import cardinal
from .exceptions import OutOfRangeError
from .lexicon import AND, MAX_VALUE, ORDINAL_SUFFIX, THOUSANDS, ZERO_TEN_ORDINALS
from .models import OrdinalOptions

logger = logging.getLogger(__name__)

# "miliardo otto" → "miliardotto", "milioni uno" → "milionuno"
_ELISION = re.compile(r"([io]) ([ou])")
_ARTICLE = "un "


def ordinal(number: int, options: OrdinalOptions | None = None) -> str:
    """Convert a non-negative integer to its Italian ordinal word.

    Args:
        number: 0 to 999,999,999,999.
        options: Gender/number of the word; masculine singular when omitted.

    Raises:
        TypeError: If ``number`` is not an int.
        OutOfRangeError: If ``number`` is negative or too large.
    """
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"Expected int, got {type(number).__name__}")
    if number < 0 or number > MAX_VALUE:
        raise OutOfRangeError(
            f"{number} is outside 0..{MAX_VALUE}",
            {"value": number, "limit": MAX_VALUE},
        )

    word = _masculine_singular(number)
    return (options or OrdinalOptions()).inflect(word)


def _masculine_singular(number: int) -> str:
    if number < len(ZERO_TEN_ORDINALS):
        return ZERO_TEN_ORDINALS[number]

    word = _compact(cardinal(number))
    logger.debug("ordinal base for %d: %r", number, word)

    last_digit = number % 10
    last_two = number % 100

    if last_digit == 3 and last_two != 13:
        return word[:-1] + "e" + ORDINAL_SUFFIX  # ventitré → ventitreesimo
    if last_digit == 6 and last_two != 16:
        return word + ORDINAL_SUFFIX  # ventisei → ventiseiesimo
    if last_two == 10:
        return word[: -len("dieci")] + "decimo"
    if word.endswith(THOUSANDS[1]):
        return word[: -len(THOUSANDS[1])] + "millesimo"
    return word[:-1] + ORDINAL_SUFFIX


def _compact(word: str) -> str:
    """Turn a spaced cardinal into the single token ordinals are built on."""
    word = word.replace(AND, " ")
    word = _ELISION.sub(_elide, word)
    word = word.replace(_ARTICLE, "")
    if word.endswith("ouno"):
        word = word[: -len("ouno")] + "uno"
    elif word.endswith("ootto"):
        word = word[: -len("ootto")] + "otto"
    return word.replace(" ", "")


def _elide(match: re.Match) -> str:
    # "o" is absorbed by the preceding vowel, "u" survives it
    if match.group(2) == "o":
        return match.group(1)
    return match.group(2)
