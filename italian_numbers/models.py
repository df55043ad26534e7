"""
Pydantic models for the conversion value objects.

All models are frozen: they are built per call and never mutated, so they
can be shared freely between threads.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field

from .exceptions import OutOfRangeError
from .lexicon import BILLIONS, HUNDRED, MAX_DECIMAL_VALUE, MAX_VALUE, MILLIONS, THOUSANDS

Number = Union[int, float, Decimal]

_MAX_DECIMAL = Decimal(MAX_DECIMAL_VALUE)


# ─── Magnitude Tiers ────────────────────────────────────────────────


class MagnitudeTier(str, Enum):
    """Magnitude group a number falls into: units, tens and hundreds, then
    power-of-1000 tiers from thousands up. The most significant tier wins.
    """

    UNITS = "units"  # 0-19
    TENS = "tens"  # 20-99
    HUNDREDS = "hundreds"  # 100-999
    THOUSANDS = "thousands"
    MILLIONS = "millions"
    BILLIONS = "billions"

    @property
    def scale(self) -> int:
        return _TIER_SCALES[self]

    @property
    def words(self) -> tuple[str, ...]:
        """Base word, or the (singular, plural) pair, for the tier."""
        return _TIER_WORDS.get(self, ())

    @classmethod
    def of(cls, number: int) -> MagnitudeTier:
        if number < 20:
            return cls.UNITS
        for tier in (cls.BILLIONS, cls.MILLIONS, cls.THOUSANDS, cls.HUNDREDS):
            if number >= tier.scale:
                return tier
        return cls.TENS


_TIER_SCALES: dict[MagnitudeTier, int] = {
    MagnitudeTier.UNITS: 1,
    MagnitudeTier.TENS: 10,
    MagnitudeTier.HUNDREDS: 100,
    MagnitudeTier.THOUSANDS: 1_000,
    MagnitudeTier.MILLIONS: 1_000_000,
    MagnitudeTier.BILLIONS: 1_000_000_000,
}

_TIER_WORDS: dict[MagnitudeTier, tuple[str, ...]] = {
    MagnitudeTier.HUNDREDS: (HUNDRED,),
    MagnitudeTier.THOUSANDS: THOUSANDS,
    MagnitudeTier.MILLIONS: MILLIONS,
    MagnitudeTier.BILLIONS: BILLIONS,
}


# ─── Signed Number ──────────────────────────────────────────────────


class Sign(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"


class SignedNumber(BaseModel):
    """A value split into sign, integer magnitude and a truncated 2-digit fraction."""

    sign: Sign = Sign.POSITIVE
    integer_part: int = Field(ge=0, le=MAX_VALUE)
    fractional_part: Optional[int] = Field(default=None, ge=0, le=99)

    model_config = {"frozen": True}

    @property
    def is_negative(self) -> bool:
        return self.sign == Sign.NEGATIVE

    @classmethod
    def from_value(cls, value: Number) -> SignedNumber:
        """Split ``value`` into its parts, enforcing the ±999,999,999,999.99 bound.

        Floats go through ``str()`` so that 1000.05 is read as written,
        not as its binary approximation. The fraction is truncated, never
        rounded: 10.999 gives integer 10 and fraction 99.

        Raises:
            TypeError: If ``value`` is not an int, float or Decimal.
            OutOfRangeError: If ``value`` is NaN or its magnitude is too large.
        """
        if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
            raise TypeError(f"Expected int, float or Decimal, got {type(value).__name__}")

        if isinstance(value, float):
            amount = Decimal(str(value))
        else:
            amount = Decimal(value)

        if amount.is_nan():
            raise OutOfRangeError("NaN has no word representation", {"value": str(value)})
        if abs(amount) > _MAX_DECIMAL:
            raise OutOfRangeError(
                f"{value} is outside ±{MAX_DECIMAL_VALUE}",
                {"value": str(value), "limit": MAX_DECIMAL_VALUE},
            )

        magnitude = abs(amount)
        integer_part = int(magnitude)
        fractional_part = None
        if not isinstance(value, int):
            fractional_part = int((magnitude - integer_part) * 100)

        return cls(
            sign=Sign.NEGATIVE if amount < 0 else Sign.POSITIVE,
            integer_part=integer_part,
            fractional_part=fractional_part,
        )


# ─── Ordinal Options ────────────────────────────────────────────────


class OrdinalOptions(BaseModel):
    """Gender/number rendering modifiers; they never change the value."""

    female: bool = False
    plural: bool = False

    model_config = {"frozen": True}

    def inflect(self, word: str) -> str:
        """Swap the final vowel of a masculine singular ordinal."""
        if self.female and self.plural:
            return word[:-1] + "e"
        if self.female:
            return word[:-1] + "a"
        if self.plural:
            return word[:-1] + "i"
        return word
