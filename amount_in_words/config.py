"""
Runtime configuration from the environment (and a local .env file).

    AMOUNT_WORDS_MAJOR_UNIT   default "Rupees"
    AMOUNT_WORDS_MINOR_UNIT   default "Paise"
    AMOUNT_WORDS_QUALIFIER    default "Only"
    LOG_LEVEL                 default "INFO"
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

from .models import CurrencyWords

load_dotenv()


def currency_words_from_env() -> CurrencyWords:
    """Build the unit words, letting environment variables override defaults."""
    defaults = CurrencyWords()
    return CurrencyWords(
        major_unit=os.getenv("AMOUNT_WORDS_MAJOR_UNIT", defaults.major_unit),
        minor_unit=os.getenv("AMOUNT_WORDS_MINOR_UNIT", defaults.minor_unit),
        qualifier=os.getenv("AMOUNT_WORDS_QUALIFIER", defaults.qualifier),
    )


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
