"""
Test suite for the amount-to-words converter.

Pure functions only: no network, no state. Every boundary of the Indian
grouping (hundred, thousand, lakh, crore) is checked on both sides.

Run: pytest tests/ -v
"""

from __future__ import annotations

from decimal import Decimal, localcontext

import pytest

from amount_in_words.converter import (
    group_to_words,
    round_paise,
    split_amount,
    to_words,
)
from amount_in_words.exceptions import AmountConversionError, InvalidAmountError
from amount_in_words.models import CurrencyWords


# ═══════════════════════════════════════════════════════════════════════
# DOCUMENTED EXAMPLES
# ═══════════════════════════════════════════════════════════════════════


class TestDocumentedExamples:
    def test_zero_is_bare_word(self):
        assert to_words(0) == "Zero"

    def test_one_keeps_plural_unit(self):
        assert to_words(1) == "One Rupees Only"

    def test_teen(self):
        assert to_words(15) == "Fifteen Rupees Only"

    def test_one_hundred(self):
        assert to_words(100) == "One Hundred Rupees Only"

    def test_thousands(self):
        assert to_words(1234) == "One Thousand Two Hundred Thirty Four Rupees Only"

    def test_one_lakh(self):
        assert to_words(100000) == "One Lakh Rupees Only"

    def test_one_crore(self):
        assert to_words(10000000) == "One Crore Rupees Only"

    def test_paise_clause(self):
        assert to_words(1500.50) == (
            "One Thousand Five Hundred Rupees and Fifty Paise Only"
        )


# ═══════════════════════════════════════════════════════════════════════
# SCALE BOUNDARIES
# ═══════════════════════════════════════════════════════════════════════


class TestScaleBoundaries:
    def test_just_below_lakh_has_no_lakh(self):
        words = to_words(99999)
        assert "Lakh" not in words
        assert words == (
            "Ninety Nine Thousand Nine Hundred Ninety Nine Rupees Only"
        )

    def test_just_below_crore_has_no_crore(self):
        assert to_words(9999999) == (
            "Ninety Nine Lakh Ninety Nine Thousand Nine Hundred Ninety Nine "
            "Rupees Only"
        )

    def test_just_above_lakh(self):
        assert to_words(100001) == "One Lakh One Rupees Only"

    def test_exact_thousand(self):
        assert to_words(1000) == "One Thousand Rupees Only"

    def test_all_groups(self):
        assert to_words(Decimal("12345678.90")) == (
            "One Crore Twenty Three Lakh Forty Five Thousand Six Hundred "
            "Seventy Eight Rupees and Ninety Paise Only"
        )

    def test_crore_count_above_999_uses_grouping(self):
        assert to_words(10**10) == "One Thousand Crore Rupees Only"

    def test_crore_count_in_lakhs(self):
        assert to_words(10**12) == "One Lakh Crore Rupees Only"


# ═══════════════════════════════════════════════════════════════════════
# TENS AND TEENS
# ═══════════════════════════════════════════════════════════════════════


class TestTensAndTeens:
    def test_round_ten(self):
        assert to_words(20) == "Twenty Rupees Only"

    def test_tens_with_ones(self):
        assert to_words(21) == "Twenty One Rupees Only"

    def test_hundred_and_ten(self):
        assert to_words(110) == "One Hundred Ten Rupees Only"

    def test_teens_are_atomic_after_hundred(self):
        assert to_words(119) == "One Hundred Nineteen Rupees Only"

    def test_teen_paise(self):
        assert to_words(Decimal("5.11")) == "Five Rupees and Eleven Paise Only"


# ═══════════════════════════════════════════════════════════════════════
# PAISE AND ROUNDING
# ═══════════════════════════════════════════════════════════════════════


class TestPaiseAndRounding:
    def test_sub_rupee_amount_has_no_integer_words(self):
        assert to_words(0.5) == "Rupees and Fifty Paise Only"

    def test_half_paise_rounds_up(self):
        assert to_words(1.005) == "One Rupees and One Paise Only"

    def test_binary_float_artifact_ignored(self):
        # 2.675 is stored as 2.67499999... in binary
        assert to_words(2.675) == "Two Rupees and Sixty Eight Paise Only"

    def test_rounding_carries_into_rupees(self):
        assert to_words(0.999) == "One Rupees Only"

    def test_rounds_down_to_zero(self):
        assert to_words(0.001) == "Zero"

    def test_zero_paise_omits_clause(self):
        assert to_words(Decimal("250.00")) == "Two Hundred Fifty Rupees Only"

    def test_split_amount(self):
        assert split_amount(1500.50) == (1500, 50)

    def test_split_amount_rounds(self):
        assert split_amount("99.995") == (100, 0)


# ═══════════════════════════════════════════════════════════════════════
# INPUT TYPES
# ═══════════════════════════════════════════════════════════════════════


class TestInputTypes:
    def test_decimal(self):
        assert to_words(Decimal("1500.5")) == to_words(1500.50)

    def test_numeric_string(self):
        assert to_words("1234") == to_words(1234)

    def test_string_with_grouping_commas(self):
        assert to_words("1,00,000") == "One Lakh Rupees Only"

    def test_int_and_float_agree(self):
        assert to_words(100000) == to_words(100000.0)


# ═══════════════════════════════════════════════════════════════════════
# INVALID INPUT
# ═══════════════════════════════════════════════════════════════════════


class TestInvalidInput:
    @pytest.mark.parametrize(
        "amount",
        [-1, -0.01, float("nan"), float("inf"), float("-inf"), Decimal("NaN"),
         Decimal("Infinity"), "banana", "", None, True, [100]],
    )
    def test_rejected(self, amount):
        with pytest.raises(InvalidAmountError):
            to_words(amount)

    def test_error_code_and_details(self):
        with pytest.raises(InvalidAmountError) as exc_info:
            to_words(-5)
        assert exc_info.value.code == "INVALID_AMOUNT"
        assert exc_info.value.details == {"amount": "-5"}

    def test_is_a_value_error(self):
        with pytest.raises(ValueError, match="negative"):
            to_words(-5)

    def test_too_large_to_quantize(self):
        with pytest.raises(AmountConversionError, match="too large"):
            to_words(Decimal("1e40"))


# ═══════════════════════════════════════════════════════════════════════
# GROUP CONVERTER
# ═══════════════════════════════════════════════════════════════════════


class TestGroupToWords:
    def test_zero_contributes_nothing(self):
        assert group_to_words(0) == ""

    def test_ones(self):
        assert group_to_words(7) == "Seven"

    def test_full_group(self):
        assert group_to_words(999) == "Nine Hundred Ninety Nine"

    def test_hundred_with_ones(self):
        assert group_to_words(305) == "Three Hundred Five"

    def test_out_of_range_raises(self):
        with pytest.raises(ValueError, match="out of range"):
            group_to_words(1000)

    def test_negative_raises(self):
        with pytest.raises(ValueError):
            group_to_words(-1)


# ═══════════════════════════════════════════════════════════════════════
# OUTPUT SHAPE
# ═══════════════════════════════════════════════════════════════════════


class TestOutputShape:
    @pytest.mark.parametrize(
        "amount", [1, 10, 100, 1000, 100000, 10000000, 10101010.10, 0.01]
    )
    def test_single_spaced_and_trimmed(self, amount):
        words = to_words(amount)
        assert words == words.strip()
        assert "  " not in words

    def test_repeated_calls_identical(self):
        results = {to_words(4567.89) for _ in range(5)}
        assert len(results) == 1

    def test_custom_unit_words(self):
        dollars = CurrencyWords(major_unit="Dollars", minor_unit="Cents")
        assert to_words(1.25, dollars) == (
            "One Dollars and Twenty Five Cents Only"
        )

    def test_custom_zero_word(self):
        assert to_words(0, CurrencyWords(zero_word="Nil")) == "Nil"


# ═══════════════════════════════════════════════════════════════════════
# DIGIT SEPARATORS AND DECIMAL CONTEXT
# ═══════════════════════════════════════════════════════════════════════


class TestDigitSeparators:
    def test_western_grouping(self):
        assert to_words("1,500.50") == to_words(1500.50)

    def test_indian_grouping_with_crore(self):
        assert to_words("1,23,45,678") == to_words(12345678)

    @pytest.mark.parametrize("amount", ["1,,0", "1,2,3", ",100", "100,", "10,00"])
    def test_misplaced_separators_rejected(self, amount):
        with pytest.raises(InvalidAmountError, match="separators"):
            to_words(amount)


class TestDecimalContext:
    def test_low_caller_precision_does_not_reject_valid_amount(self):
        with localcontext() as ctx:
            ctx.prec = 5
            assert to_words(10**10) == "One Thousand Crore Rupees Only"
            assert to_words(Decimal("12345678.90")).endswith("Ninety Paise Only")

    def test_round_paise(self):
        assert round_paise(Decimal("2.675")) == Decimal("2.68")

    def test_round_paise_too_large(self):
        with pytest.raises(InvalidAmountError, match="too large"):
            round_paise(Decimal("1e30"))
