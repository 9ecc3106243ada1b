"""
Custom exception hierarchy for amount conversion.

Each exception carries a machine-readable code so the API layer can
report failures without parsing messages.
"""

from __future__ import annotations


class AmountConversionError(Exception):
    """Base exception for all amount conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidAmountError(AmountConversionError, ValueError):
    """The amount is negative, not finite, or not a number at all."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_AMOUNT", message, details)
