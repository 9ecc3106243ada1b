"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _default_unit_words(monkeypatch):
    """Keep a developer's .env from changing the expected words."""
    for name in (
        "AMOUNT_WORDS_MAJOR_UNIT",
        "AMOUNT_WORDS_MINOR_UNIT",
        "AMOUNT_WORDS_QUALIFIER",
    ):
        monkeypatch.delenv(name, raising=False)
