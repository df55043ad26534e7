"""
Italian number lexicon — the read-only word tables shared by every converter.

Pure data, no behaviour. Tables are tuples / mapping proxies so nothing can
mutate them at runtime.
"""

from __future__ import annotations

from types import MappingProxyType

# ─── Limits ──────────────────────────────────────────────────────────

MAX_VALUE = 999_999_999_999
MAX_DECIMAL_VALUE = "999999999999.99"  # kept as text, parsed as Decimal

# ─── Cardinal Words ──────────────────────────────────────────────────

ZERO_NINETEEN: tuple[str, ...] = (
    "zero",
    "uno",
    "due",
    "tre",
    "quattro",
    "cinque",
    "sei",
    "sette",
    "otto",
    "nove",
    "dieci",
    "undici",
    "dodici",
    "tredici",
    "quattordici",
    "quindici",
    "sedici",
    "diciassette",
    "diciotto",
    "diciannove",
)

# Index 0 is 20, index 7 is 90
TENS: tuple[str, ...] = (
    "venti",
    "trenta",
    "quaranta",
    "cinquanta",
    "sessanta",
    "settanta",
    "ottanta",
    "novanta",
)

HUNDRED = "cento"
THOUSANDS: tuple[str, str] = ("mille", "mila")
MILLIONS: tuple[str, str] = ("un milione", " milioni")
BILLIONS: tuple[str, str] = ("un miliardo", " miliardi")

AND = " e "
MINUS = "meno "
ZERO = "zero"
INFINITY = "infinito"
DECIMAL_SEPARATOR = "/"

# ─── Ordinal Words ───────────────────────────────────────────────────

ZERO_TEN_ORDINALS: tuple[str, ...] = (
    "zeresimo",
    "primo",
    "secondo",
    "terzo",
    "quarto",
    "quinto",
    "sesto",
    "settimo",
    "ottavo",
    "nono",
    "decimo",
)

ORDINAL_SUFFIX = "esimo"

ORDINAL_ENDINGS: tuple[str, ...] = (
    "esima",
    "esimo",
    "esime",
    "esimi",
    "decima",
    "decimo",
    "decime",
    "decimi",
)

# ─── Reverse Lookups (decoder) ───────────────────────────────────────

UNIT_VALUES: MappingProxyType[str, int] = MappingProxyType(
    {
        "un": 1,
        "tré": 3,
        **{word: value for value, word in enumerate(ZERO_NINETEEN) if value},
    }
)

TEN_VALUES: MappingProxyType[str, int] = MappingProxyType(
    {word: (index + 2) * 10 for index, word in enumerate(TENS)}
)

# ─── Roman Numerals ──────────────────────────────────────────────────

ROMAN_UNITS: tuple[str, ...] = ("", "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX")
ROMAN_TENS: tuple[str, ...] = ("", "X", "XX", "XXX", "XL", "L", "LX", "LXX", "LXXX", "XC")
ROMAN_HUNDREDS: tuple[str, ...] = ("", "C", "CC", "CCC", "CD", "D", "DC", "DCC", "DCCC", "CM")
ROMAN_THOUSANDS: tuple[str, ...] = ("", "M", "MM", "MMM")

ROMAN_LETTER_VALUES: MappingProxyType[str, int] = MappingProxyType(
    {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
)

ROMAN_MAX = 3999
