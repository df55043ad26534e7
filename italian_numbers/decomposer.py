"""
Magnitude decomposer — the recursive grammar shared by both encoders.

    render(1_250_000)  → "un milione e duecentocinquantamila"
    render(188)        → "centottantotto"
    render(3_033)      → "tremilatrentatre"   (accents come later)

A number is split at its most significant tier (billions, millions,
thousands, hundreds) and each group is rendered recursively. Euphony is
applied at the junctions: a tens stem drops its final vowel before "uno"
and "otto", and "cento" drops its "o" before the "ottanta" family.
"""

from __future__ import annotations

import re

from .exceptions import OutOfRangeError
from .lexicon import AND, HUNDRED, MAX_VALUE, TENS, ZERO_NINETEEN
from .models import MagnitudeTier

# "tre" glued to a preceding letter and followed by a tier separator
_GLUED_TRE = re.compile(r"(?<=\S)tre ")


def render(number: int) -> str:
    """Render ``0 <= number <= 999_999_999_999`` as an unaccented Italian word.

    Raises:
        OutOfRangeError: If ``number`` is negative or too large.
    """
    if number < 0 or number > MAX_VALUE:
        raise OutOfRangeError(
            f"{number} is outside 0..{MAX_VALUE}",
            {"value": number, "limit": MAX_VALUE},
        )

    tier = MagnitudeTier.of(number)
    if tier in (MagnitudeTier.UNITS, MagnitudeTier.TENS):
        return _render_tens(number)
    if tier == MagnitudeTier.HUNDREDS:
        return _render_hundreds(number)
    if tier == MagnitudeTier.THOUSANDS:
        return _render_thousands(number)
    return _render_large(number, tier)


def accentuate(word: str) -> str:
    """Mark the final "tre" of a compound numeral with a grave accent.

    The standalone word "tre" is left alone, and so is a "tre" that opens
    a tier ("tre milioni") or precedes "mila" ("ventitremila").
    """
    if word.endswith("tre") and word != "tre":
        word = word[:-1] + "é"
    return _GLUED_TRE.sub("tré ", word)


# ─── Tier Renderers ─────────────────────────────────────────────────


def _render_tens(number: int) -> str:
    if number < 20:
        return ZERO_NINETEEN[number]

    tens, unit = divmod(number, 10)
    word = TENS[tens - 2]
    if unit in (1, 8):
        word = word[:-1]  # venti + otto → ventotto
    if unit:
        word += ZERO_NINETEEN[unit]
    return word


def _render_hundreds(number: int) -> str:
    hundreds, rest = divmod(number, 100)
    prefix = HUNDRED if hundreds == 1 else ZERO_NINETEEN[hundreds] + HUNDRED
    if rest == 0:
        return prefix
    if 80 <= rest <= 89:
        prefix = prefix[:-1]  # cento + ottanta → centottanta
    return prefix + render(rest)


def _render_thousands(number: int) -> str:
    singular, plural = MagnitudeTier.THOUSANDS.words
    head, rest = divmod(number, MagnitudeTier.THOUSANDS.scale)
    word = singular if head == 1 else render(head) + plural
    if rest:
        word += render(rest)
    return word


def _render_large(number: int, tier: MagnitudeTier) -> str:
    """Millions and billions: space-separated, joined to the rest by " e "."""
    singular, plural = tier.words
    head, rest = divmod(number, tier.scale)
    word = singular if head == 1 else render(head) + plural
    if rest:
        word += AND + render(rest)
    return word
