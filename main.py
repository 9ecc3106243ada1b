#!/usr/bin/env python3
"""
Amount in Words — Entry Point
==============================

Spells amounts the way they appear on the "Amount in Words" invoice line.

Usage:
    python main.py                    # Demo table of boundary amounts
    python main.py 1500.50 99999      # Spell the given amounts
"""

from __future__ import annotations

import logging
import sys

from amount_in_words.config import currency_words_from_env, log_level
from amount_in_words.converter import to_words
from amount_in_words.exceptions import AmountConversionError

logger = logging.getLogger("amount_in_words.cli")


# ─── Demo Amounts, One per Boundary ─────────────────────────────────

DEMO_AMOUNTS = [
    "0",
    "1",
    "15",
    "100",
    "1234",
    "99999",
    "100000",
    "10000000",
    "1500.50",
    "0.75",
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


def print_amounts(amounts: list[str]) -> int:
    """Print each amount beside its words.

    Returns:
        0 if every amount converted, 1 if any was rejected.
    """
    currency = currency_words_from_env()
    failures = 0

    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  AMOUNT IN WORDS{_RESET}")
    print(f"{'=' * _WIDTH}")

    for raw in amounts:
        try:
            words = to_words(raw, currency)
        except AmountConversionError as exc:
            failures += 1
            logger.debug("Rejected %r: %s", raw, exc.details)
            print(f"  {raw:>14}  {_RED}[{exc.code}] {exc.message}{_RESET}")
            continue
        print(f"  {raw:>14}  {_GREEN}{words}{_RESET}")

    print(f"{'=' * _WIDTH}")
    if failures:
        print(f"  {_RED}{_BOLD}{failures} amount(s) rejected{_RESET}")
    else:
        print(f"  {_DIM}{len(amounts)} amount(s) converted{_RESET}")
    print()

    return 1 if failures else 0


# ─── Main ────────────────────────────────────────────────────────────


def main():
    """Spell the amounts given on the command line, or the demo set."""
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    amounts = sys.argv[1:] or DEMO_AMOUNTS
    sys.exit(print_amounts(amounts))


if __name__ == "__main__":
    main()
