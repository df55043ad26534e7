#!/usr/bin/env python3
"""
Italian Numbers — Demo
======================

Spells a handful of numbers out in Italian, then reads every word back.

Usage:
    python main.py                     # built-in sample numbers
    python main.py 23 1000.05 -7       # your own numbers
"""

from __future__ import annotations

import logging
import os
import sys
from decimal import Decimal, InvalidOperation

from italian_numbers import (
    ItalianNumberError,
    OrdinalOptions,
    cardinal,
    ordinal,
    words_to_number,
)

# ─── Load .env if available (optional dependency) ────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


SAMPLE_NUMBERS = ["1", "23", "188", "1000.05", "-34564", "1013000", "3033000000"]

_FORMS: list[tuple[str, OrdinalOptions]] = [
    ("m.s.", OrdinalOptions()),
    ("f.s.", OrdinalOptions(female=True)),
    ("m.p.", OrdinalOptions(plural=True)),
    ("f.p.", OrdinalOptions(female=True, plural=True)),
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def _parse_number(raw: str) -> int | Decimal:
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise ValueError(f"Not a number: {raw!r}") from None
    return int(value) if value == value.to_integral_value() else value


def _check(label: str, word: str, expected: int) -> bool:
    """Decode ``word`` and print whether it reads back as ``expected``."""
    try:
        decoded = words_to_number(word)
    except ItalianNumberError as exc:
        print(f"    {label:<9}{word}  {_RED}[{exc.code}]{_RESET}")
        return False

    ok = decoded == expected
    mark = f"{_GREEN}ok{_RESET}" if ok else f"{_RED}→ {decoded}{_RESET}"
    print(f"    {label:<9}{word}  {_DIM}{mark}{_RESET}")
    return ok


def print_number(raw: str) -> bool:
    """Print cardinal and ordinal forms of one number; True when all read back."""
    print(f"\n  {_BOLD}{_CYAN}{raw}{_RESET}")
    try:
        value = _parse_number(raw)
        word = cardinal(value, include_decimals=isinstance(value, Decimal))
    except (ValueError, TypeError) as exc:
        print(f"    {_RED}{exc}{_RESET}")
        return False

    print(f"    cardinal {word}")
    integer = int(value)
    all_ok = _check("decoded", word.split("/")[0], integer)

    if isinstance(value, int) and value >= 0:
        for label, options in _FORMS:
            all_ok &= _check(label, ordinal(value, options), value)
    return all_ok


# ─── Main ────────────────────────────────────────────────────────────


def main():
    """Spell out the requested numbers and exit 1 if any fails to read back."""
    logging.basicConfig(level=os.getenv("ITALIAN_NUMBERS_LOG_LEVEL", "WARNING").upper())

    numbers = sys.argv[1:] or SAMPLE_NUMBERS
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  ITALIAN NUMBERS{_RESET}")
    print(f"{'=' * _WIDTH}")

    results = [print_number(raw) for raw in numbers]

    print(f"\n{'=' * _WIDTH}")
    if all(results):
        print(f"  {_GREEN}{_BOLD}ALL WORDS READ BACK CORRECTLY{_RESET}")
    else:
        print(f"  {_RED}{_BOLD}{results.count(False)} number(s) did not round-trip{_RESET}")
    print(f"{'=' * _WIDTH}\n")

    sys.exit(0 if all(results) else 1)


if __name__ == "__main__":
    main()
