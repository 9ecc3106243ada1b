"""
Convert a monetary amount to English words using the Indian numbering system.

This is the text printed on the "Amount in Words" line of every invoice,
so the output must be byte-for-byte stable for a given amount.

Supported patterns:
    1234        → "One Thousand Two Hundred Thirty Four Rupees Only"
    100000      → "One Lakh Rupees Only"
    10000000    → "One Crore Rupees Only"
    1500.50     → "One Thousand Five Hundred Rupees and Fifty Paise Only"
    0           → "Zero"

Rounding: amounts are quantized to paise with ROUND_HALF_UP on their
decimal representation. Floats are read through ``str()`` first, so 1.005
is treated as the three decimal digits the caller wrote, not as the binary
value just below it.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Union

from .exceptions import InvalidAmountError
from .models import CurrencyWords

Amount = Union[int, float, Decimal, str]

# ─── Word Lookup Tables ──────────────────────────────────────────────

_ONES: dict[int, str] = {
    1: "One",
    2: "Two",
    3: "Three",
    4: "Four",
    5: "Five",
    6: "Six",
    7: "Seven",
    8: "Eight",
    9: "Nine",
}

_TEENS: dict[int, str] = {
    10: "Ten",
    11: "Eleven",
    12: "Twelve",
    13: "Thirteen",
    14: "Fourteen",
    15: "Fifteen",
    16: "Sixteen",
    17: "Seventeen",
    18: "Eighteen",
    19: "Nineteen",
}

_TENS: dict[int, str] = {
    2: "Twenty",
    3: "Thirty",
    4: "Forty",
    5: "Fifty",
    6: "Sixty",
    7: "Seventy",
    8: "Eighty",
    9: "Ninety",
}

# Indian grouping, largest first. The last group (0-999) has no scale word.
_SCALES: tuple[tuple[int, str], ...] = (
    (10_000_000, "Crore"),
    (100_000, "Lakh"),
    (1_000, "Thousand"),
)

_PAISE = Decimal("0.01")
_DEFAULT_WORDS = CurrencyWords()

# Fixed precision for paise rounding, independent of the caller's context
_PRECISION = 28

# "1,00,000" (Indian) or "100,000" (Western), optionally with decimals
_GROUPED_NUMBER = re.compile(
    r"^(?:\d{1,3}(?:,\d{3})+|\d{1,2}(?:,\d{2})*,\d{3})(?:\.\d*)?$"
)


# ─── Input Validation ────────────────────────────────────────────────


def _to_decimal(amount: Amount) -> Decimal:
    """Coerce the supported input types to a finite, non-negative Decimal.

    Raises:
        InvalidAmountError: For booleans, NaN, infinities, negatives and
            anything that is not a number.
    """
    # bool is an int subclass; True Rupees is never a real invoice total
    if isinstance(amount, bool):
        raise InvalidAmountError(
            f"Amount must be numeric, got bool {amount!r}",
            details={"amount": repr(amount)},
        )

    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, int):
        value = Decimal(amount)
    elif isinstance(amount, float):
        if not math.isfinite(amount):
            raise InvalidAmountError(
                f"Amount must be finite, got {amount!r}",
                details={"amount": repr(amount)},
            )
        value = Decimal(str(amount))
    elif isinstance(amount, str):
        text = amount.strip()
        if "," in text:
            if not _GROUPED_NUMBER.match(text):
                raise InvalidAmountError(
                    f"Misplaced digit separators in amount: {amount!r}",
                    details={"amount": amount},
                )
            text = text.replace(",", "")
        try:
            value = Decimal(text)
        except InvalidOperation:
            raise InvalidAmountError(
                f"Amount is not a number: {amount!r}",
                details={"amount": amount},
            ) from None
    else:
        raise InvalidAmountError(
            f"Unsupported amount type: {type(amount).__name__}",
            details={"amount": repr(amount)},
        )

    if not value.is_finite():
        raise InvalidAmountError(
            f"Amount must be finite, got {amount!r}",
            details={"amount": str(amount)},
        )
    if value < 0:
        raise InvalidAmountError(
            f"Amount cannot be negative: {amount!r}",
            details={"amount": str(amount)},
        )
    return value


def round_paise(value: Decimal) -> Decimal:
    """Quantize to paise with ROUND_HALF_UP under a fixed 28-digit context.

    Raises:
        InvalidAmountError: If the value has too many digits to hold paise.
    """
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        try:
            return value.quantize(_PAISE, rounding=ROUND_HALF_UP)
        except InvalidOperation:
            raise InvalidAmountError(
                f"Amount is too large to convert: {value!r}",
                details={"amount": str(value)},
            ) from None


def split_amount(amount: Amount) -> tuple[int, int]:
    """Split an amount into whole rupees and paise.

    Returns:
        (rupees, paise) with 0 <= paise <= 99.

    Raises:
        InvalidAmountError: If the amount is out of domain or too large to
            quantize to paise.
    """
    quantized = round_paise(_to_decimal(amount))

    rupees = int(quantized)
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        paise = int((quantized - rupees) * 100)
    return rupees, paise


# ─── Group Converters ───────────────────────────────────────────────


def group_to_words(value: int) -> str:
    """Spell a number in [0, 999]. Zero contributes no words.

    Teens are atomic: 15 is "Fifteen", never "Ten Five".
    """
    if not 0 <= value <= 999:
        raise ValueError(f"Group value out of range 0-999: {value}")

    words: list[str] = []
    if value >= 100:
        words += [_ONES[value // 100], "Hundred"]
        value %= 100

    if value >= 20:
        words.append(_TENS[value // 10])
        value %= 10
    elif value >= 10:
        words.append(_TEENS[value])
        return " ".join(words)

    if value > 0:
        words.append(_ONES[value])

    return " ".join(words)


def _integer_to_words(value: int) -> str:
    """Spell a whole number with crore/lakh/thousand grouping.

    A crore count above 999 is itself spelled with the same grouping,
    e.g. 10^10 → "One Thousand Crore".
    """
    parts: list[str] = []
    remainder = value

    for scale, name in _SCALES:
        count, remainder = divmod(remainder, scale)
        if not count:
            continue
        # Only the crore count can exceed 999
        parts.append(f"{_integer_to_words(count)} {name}")

    tail = group_to_words(remainder)
    if tail:
        parts.append(tail)
    return " ".join(parts)


# ─── Main Converter ─────────────────────────────────────────────────


def to_words(amount: Amount, currency: CurrencyWords | None = None) -> str:
    """Convert a monetary amount to words for the "Amount in Words" line.

    Args:
        amount: Non-negative int, float, Decimal or numeric string.
        currency: Unit words to use. Defaults to Rupees / Paise / Only.

    Returns:
        e.g. "One Thousand Five Hundred Rupees and Fifty Paise Only".
        Exactly zero returns the bare zero word ("Zero").

    Raises:
        InvalidAmountError: For negative, non-finite or non-numeric input.

    Singular units are not special-cased: 1 is "One Rupees Only".
    An amount below one rupee has no integer words:
    0.50 is "Rupees and Fifty Paise Only".
    """
    words = currency or _DEFAULT_WORDS
    rupees, paise = split_amount(amount)

    if rupees == 0 and paise == 0:
        return words.zero_word

    text = f"{_integer_to_words(rupees)} {words.major_unit}"
    if paise > 0:
        text += f" and {group_to_words(paise)} {words.minor_unit}"
    text += f" {words.qualifier}"

    return " ".join(text.split())
