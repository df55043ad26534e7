"""Roman numeral conversion, independent of the Italian word engine.

Arabic → Roman is a per-digit table lookup (thousands, hundreds, tens,
units). Roman → Arabic sums the letter values with the subtractive rule
and then re-encodes the result: anything that is not the canonical
spelling of its own value ("IIII", "XIXIX", "VX") is rejected.
"""

from __future__ import annotations

from .exceptions import InvalidRomanNumeralError, OutOfRangeError
from .lexicon import (
    ROMAN_HUNDREDS,
    ROMAN_LETTER_VALUES,
    ROMAN_MAX,
    ROMAN_TENS,
    ROMAN_THOUSANDS,
    ROMAN_UNITS,
)


def arabic_to_roman(number: int) -> str:
    """Convert 1..3999 to an upper-case Roman numeral.

    Examples:
        >>> arabic_to_roman(79)
        'LXXIX'
        >>> arabic_to_roman(2317)
        'MMCCCXVII'
    """
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"Expected int, got {type(number).__name__}")
    if not 1 <= number <= ROMAN_MAX:
        raise OutOfRangeError(
            f"{number} is outside 1..{ROMAN_MAX}",
            {"value": number, "limit": ROMAN_MAX},
        )

    return (
        ROMAN_THOUSANDS[number // 1000]
        + ROMAN_HUNDREDS[number // 100 % 10]
        + ROMAN_TENS[number // 10 % 10]
        + ROMAN_UNITS[number % 10]
    )


def roman_to_arabic(roman: str) -> int:
    """Convert a canonical upper-case Roman numeral to an int.

    Examples:
        >>> roman_to_arabic("MCMXC")
        1990
        >>> roman_to_arabic("CDXC")
        490

    Raises:
        InvalidRomanNumeralError: On unknown letters or non-canonical spelling.
    """
    values = []
    for letter in roman:
        if letter not in ROMAN_LETTER_VALUES:
            raise InvalidRomanNumeralError(
                f"Invalid Roman numeral character {letter!r} in {roman!r}",
                {"roman": roman, "character": letter},
            )
        values.append(ROMAN_LETTER_VALUES[letter])

    total = 0
    for current, following in zip(values, values[1:] + [0]):
        # Subtractive notation: a smaller value before a larger one
        total += -current if current < following else current

    if not 1 <= total <= ROMAN_MAX or arabic_to_roman(total) != roman:
        raise InvalidRomanNumeralError(
            f"{roman!r} is not a canonical Roman numeral",
            {"roman": roman},
        )
    return total
