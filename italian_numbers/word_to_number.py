"""
Convert written-out Italian number words back to their integer value.

Supported patterns:
    "novantasette"                          → 97
    "un milione tredicimila"                → 1,013,000
    "tre miliardi e trentatré milioni"      → 3,033,000,000
    "meno trentaquattromilacinquecento..."  → negative values
    "zeresimo", "prima", "ventitreesime"    → ordinals, any gender/number

Pipeline:
  1. Normalize: lowercase, drop the tier conjunction " e " and all spaces.
  2. Strip a leading "meno" (negative sign).
  3. Ordinals: the ten irregular words resolve directly; any other
     "-esimo"/"-decimo" family word is rewritten into its cardinal form by
     the ordered rule table below.
  4. Split recursively on the tier keywords, in this order:
     miliard → milion → mila → mille → cento.

Unrecognized fragments are NEVER skipped: they raise InvalidWordError.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from .exceptions import InvalidWordError
from .lexicon import (
    AND,
    HUNDRED,
    ORDINAL_ENDINGS,
    TEN_VALUES,
    UNIT_VALUES,
    ZERO,
    ZERO_TEN_ORDINALS,
)

logger = logging.getLogger(__name__)

_NEGATIVE = "meno"
_ARTICLE = "un"
_VOWELS = "aeio"


# ─── Ordinal → Cardinal Rule Table ──────────────────────────────────


class RuleAnchor(str, Enum):
    """Where in the word a normalizer rule is allowed to match."""

    SUFFIX = "suffix"  # the ordinal ending; first matching rule wins
    PREFIX = "prefix"  # word start; first matching rule wins
    ANYWHERE = "anywhere"  # tier junctions; every rule applies in turn


@dataclass(frozen=True)
class OrdinalRule:
    """A single rewrite from ordinal morphology back to cardinal form."""

    anchor: RuleAnchor
    pattern: re.Pattern
    replacement: str

    def apply(self, word: str) -> str | None:
        """Return the rewritten word, or None when the rule does not match."""
        rewritten, count = self.pattern.subn(self.replacement, word)
        return rewritten if count else None


def _suffix(pattern: str, replacement: str) -> OrdinalRule:
    return OrdinalRule(RuleAnchor.SUFFIX, re.compile(pattern + "[aeio]$"), replacement)


def _prefix(pattern: str, replacement: str) -> OrdinalRule:
    return OrdinalRule(RuleAnchor.PREFIX, re.compile("^" + pattern), replacement)


def _anywhere(pattern: str, replacement: str) -> OrdinalRule:
    return OrdinalRule(RuleAnchor.ANYWHERE, re.compile(pattern), replacement)


# Order matters inside each anchor class: broader patterns ("ntesim",
# "ttesim", "esim") must come after the specific ones they overlap.
ORDINAL_RULES: tuple[OrdinalRule, ...] = (
    _suffix("decim", "dieci"),
    _suffix("centesim", "cento"),
    _suffix(r"(^|milion[ei]|miliard[oi])millesim", r"\1mille"),
    _suffix("millesim", "mila"),
    _suffix(r"(^|miliard[oi]?)milionesim", r"\1unmilione"),
    _suffix("milionesim", "milioni"),
    _suffix("^miliardesim", "unmiliardo"),
    _suffix("miliardesim", "miliardi"),
    _suffix("ventesim", "venti"),
    _suffix("ntesim", "nta"),
    _suffix("unesim", "uno"),
    _suffix("quattresim", "quattro"),
    _suffix("ottesim", "otto"),
    _suffix("duesim", "due"),
    _suffix("cinquesim", "cinque"),
    _suffix("settesim", "sette"),
    _suffix("novesim", "nove"),
    _suffix("undicesim", "undici"),
    _suffix("dodicesim", "dodici"),
    _suffix("tredicesim", "tredici"),
    _suffix("quattordicesim", "quattordici"),
    _suffix("quindicesim", "quindici"),
    _suffix("sedicesim", "sedici"),
    _suffix("ttesim", "tto"),  # "otto" whose "o" was elided: miliarditt-esimo
    _suffix("esim", ""),  # ventitre-esimo, ventisei-esimo
    _prefix("milione", "unmilione"),
    _prefix("miliard", "unmiliard"),
    _anywhere(r"(miliard[oi]?)milione", r"\1unmilione"),
    _anywhere("centuno", "centouno"),
    _anywhere("centotto", "centootto"),
    _anywhere("miliarduno", "miliardouno"),
    _anywhere("miliardotto", "miliardootto"),
)


def ordinal_to_cardinal(word: str) -> str:
    """Rewrite a compact ordinal ("milioneunesimo") into cardinal form ("unmilioneuno")."""
    matched: set[RuleAnchor] = set()
    for rule in ORDINAL_RULES:
        if rule.anchor in matched:
            continue
        rewritten = rule.apply(word)
        if rewritten is None:
            continue
        word = rewritten
        if rule.anchor != RuleAnchor.ANYWHERE:
            matched.add(rule.anchor)
    return word


# ─── Magnitude Tiers ────────────────────────────────────────────────


class _Tier(NamedTuple):
    keyword: str
    inflections: str  # trailing vowels that belong to the keyword
    scale: int
    elides: bool  # ordinal elision may glue the next word onto the keyword
    literal: bool = False  # "mille" stands alone, no multiplier in front


_TIERS: tuple[_Tier, ...] = (
    _Tier("miliard", "oi", 1_000_000_000, elides=True),
    _Tier("milion", "ei", 1_000_000, elides=True),
    _Tier("mila", "", 1_000, elides=False),
    _Tier("mille", "", 1_000, elides=False, literal=True),
)


# ─── Main Converter ─────────────────────────────────────────────────


def words_to_number(text: str) -> int:
    """Convert Italian number words (cardinal or ordinal) to an int.

    Args:
        text: e.g. "tre milioni e trentatré", "ventitreesima"

    Returns:
        The integer value, negative when the text starts with "meno".

    Raises:
        InvalidWordError: If the text is empty or any fragment cannot be
            resolved against the lexicon.
    """
    if not text or not text.strip():
        raise InvalidWordError("Empty text cannot be converted to a number", {"word": text})

    source = text
    word = " ".join(text.lower().split())
    word = word.replace(AND, "").replace(" ", "")

    negative = word.startswith(_NEGATIVE)
    if negative:
        word = word[len(_NEGATIVE):]

    value = _decode(word, source)
    return -value if negative else value


# Alias under the name used by the HTTP API
decode_italian_word = words_to_number


def _decode(word: str, source: str) -> int:
    if word == ZERO:
        return 0

    if word and word[-1] in _VOWELS:
        index = _irregular_ordinal(word)
        if index is not None:
            return index
        if word.endswith(ORDINAL_ENDINGS):
            word = ordinal_to_cardinal(word)
            logger.debug("ordinal %r normalized to %r", source, word)

    return _parse(word, _TIERS, source)


def _irregular_ordinal(word: str) -> int | None:
    """Match "primo", "prima", "primi", "prime" ... against the zero-to-ten table."""
    stem = word[:-1]
    for index, ordinal_word in enumerate(ZERO_TEN_ORDINALS):
        if stem == ordinal_word[:-1]:
            return index
    return None


# ─── Recursive Parsers ──────────────────────────────────────────────


def _parse(word: str, tiers: tuple[_Tier, ...], source: str) -> int:
    """Split on the first tier keyword found, most significant tier first."""
    for tier in tiers:
        position = word.find(tier.keyword)
        if position == -1:
            continue

        head_word = word[:position]
        rest = word[position + len(tier.keyword):]

        if tier.literal:
            if head_word:
                raise _invalid(head_word, source)
            head = 1
        else:
            head = _parse_hundreds(head_word, source)
            # one thousand is "mille"; one million/billion is "un" + singular
            if head == 1 and (not tier.elides or head_word != _ARTICLE or rest[:1] == "i"):
                raise _invalid(head_word + tier.keyword + rest[:1], source)

        if rest[:1] and rest[0] in tier.inflections:
            rest = rest[1:]
        if tier.elides and rest.startswith("tt"):
            rest = "o" + rest

        lower_tiers = tuple(t for t in tiers if t.scale < tier.scale)
        tail = _parse(rest, lower_tiers, source) if rest else 0
        logger.debug("%r: %d x %s + %d", source, head, tier.keyword, tail)
        return head * tier.scale + tail

    return _parse_hundreds(word, source)


def _parse_hundreds(word: str, source: str) -> int:
    head, separator, rest = word.partition(HUNDRED)
    if not separator:
        return _parse_tens(word, source)

    if head:
        digit = UNIT_VALUES.get(head)
        if digit is None or not 2 <= digit <= 9:
            raise _invalid(head, source)
        value = digit * 100
    else:
        value = 100

    if rest:
        if rest.startswith("tt"):
            rest = "o" + rest  # cent + ottanta
        value += _parse_tens(rest, source)
    return value


def _parse_tens(word: str, source: str) -> int:
    if word in UNIT_VALUES:
        return UNIT_VALUES[word]

    for ten, value in TEN_VALUES.items():
        stem = ten[:-1]
        if not word.startswith(stem):
            continue
        if word == ten:
            return value
        # The tens vowel is dropped before "uno" and "otto"
        unit_word = word[len(ten):] if word.startswith(ten) else word[len(stem):]
        unit = UNIT_VALUES.get(unit_word)
        if unit is None or unit > 9:
            raise _invalid(word, source)
        return value + unit

    raise _invalid(word, source)


def _invalid(fragment: str, source: str) -> InvalidWordError:
    return InvalidWordError(
        f"Unrecognized number word: {fragment!r} in {source!r}",
        {"word": source, "fragment": fragment},
    )
