"""
Test suite for money helpers

Tests half-up rounding, two-decimal formatting and amount parsing.
"""

import pytest
from decimal import Decimal

from account_ledger.money import (
    MAX_BALANCE, round2, format_amount, parse_amount
)


class TestRound2:
    """Test half-up rounding to two decimal places"""
    
    def test_rounds_down_below_half(self):
        assert round2(Decimal('1000.004')) == Decimal('1000.00')
        assert round2(Decimal('1.234')) == Decimal('1.23')
    
    def test_rounds_half_up(self):
        assert round2(Decimal('1000.005')) == Decimal('1000.01')
        assert round2(Decimal('0.125')) == Decimal('0.13')
    
    def test_negative_half_rounds_away_from_zero(self):
        assert round2(Decimal('-1.005')) == Decimal('-1.01')
    
    def test_accepts_int_and_str(self):
        assert round2(1000) == Decimal('1000.00')
        assert round2('100.5') == Decimal('100.50')
    
    def test_result_has_two_places(self):
        assert round2(Decimal('7')).as_tuple().exponent == -2


class TestFormatAmount:
    """Test display formatting"""
    
    def test_pads_trailing_zeros(self):
        assert format_amount(1000) == "1000.00"
        assert format_amount(Decimal('100.5')) == "100.50"
    
    def test_no_thousands_separator(self):
        assert format_amount(MAX_BALANCE) == "999999.99"
    
    def test_zero(self):
        assert format_amount(Decimal('0')) == "0.00"


class TestParseAmount:
    """Test parsing of user-entered amounts"""
    
    def test_parses_decimal_text(self):
        assert parse_amount("50.00") == Decimal('50.00')
        assert parse_amount("  0.01 ") == Decimal('0.01')
    
    def test_keeps_full_precision(self):
        assert parse_amount("1.234") == Decimal('1.234')
    
    def test_negative_is_parsed(self):
        # Sign checks belong to the dispatcher
        assert parse_amount("-5") == Decimal('-5')
    
    @pytest.mark.parametrize("text", ["", "   ", "abc", "12abc", "1,000.00", "$5"])
    def test_rejects_non_numeric(self, text):
        with pytest.raises(ValueError):
            parse_amount(text)
    
    @pytest.mark.parametrize("text", ["NaN", "Infinity", "-inf", "sNaN"])
    def test_rejects_non_finite(self, text):
        with pytest.raises(ValueError):
            parse_amount(text)
    
    def test_rejects_none(self):
        with pytest.raises(ValueError):
            parse_amount(None)
