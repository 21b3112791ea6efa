"""Unit tests for the strict numeric parsing helpers."""

from decimal import Decimal

import pytest

from finwise.domain.shared.exceptions import ErrorCode, ParseError
from finwise.domain.shared.numbers import (
    parse_decimal,
    parse_int,
    parse_money,
    round_money,
)


class TestParseDecimal:
    """Tests for parse_decimal."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("12.50", Decimal("12.50")),
            (" 7 ", Decimal("7")),
            (3, Decimal("3")),
            (0.1, Decimal("0.1")),
            (Decimal("4.2"), Decimal("4.2")),
        ],
    )
    def test_accepts_numeric_values(self, raw, expected):
        """Should parse strings, ints, floats and Decimals."""
        assert parse_decimal(raw, "amount") == expected

    @pytest.mark.parametrize("raw", ["abc", "", "   ", None, True, "NaN", "Infinity"])
    def test_rejects_malformed_values(self, raw):
        """Should raise ParseError instead of coercing to zero."""
        with pytest.raises(ParseError) as exc_info:
            parse_decimal(raw, "amount")

        assert exc_info.value.code == ErrorCode.PARSE_ERROR
        assert exc_info.value.field == "amount"

    def test_error_names_field_and_record(self):
        """Should include the field and the record id in the message."""
        with pytest.raises(ParseError, match="'amount' on record 'txn-42'"):
            parse_decimal("12,50", "amount", "txn-42")

    def test_rejects_unsupported_types(self):
        """Should reject lists and other containers."""
        with pytest.raises(ParseError, match="unsupported type list"):
            parse_decimal([1], "amount")


class TestParseMoney:
    """Tests for parse_money."""

    def test_accepts_cents(self):
        assert parse_money("10.55", "amount") == Decimal("10.55")

    def test_trailing_zeros_are_harmless(self):
        """Should accept '10.500' and normalize it to cents."""
        assert parse_money("10.500", "amount") == Decimal("10.50")

    def test_rejects_sub_cent_precision(self):
        """Should refuse amounts with more than two decimals."""
        with pytest.raises(ParseError, match="more than 2 decimal places"):
            parse_money("10.555", "amount")


class TestParseInt:
    """Tests for parse_int."""

    @pytest.mark.parametrize("raw", [3, "3", Decimal("3.0")])
    def test_accepts_whole_numbers(self, raw):
        assert parse_int(raw, "years") == 3

    @pytest.mark.parametrize("raw", ["3.5", "three", None])
    def test_rejects_non_integral(self, raw):
        with pytest.raises(ParseError):
            parse_int(raw, "years")


class TestRoundMoney:
    """Tests for round_money."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (Decimal("1113.025"), Decimal("1113.03")),
            (Decimal("0.005"), Decimal("0.01")),
            (Decimal("2.344"), Decimal("2.34")),
            (Decimal("100"), Decimal("100.00")),
        ],
    )
    def test_rounds_half_up_to_cents(self, raw, expected):
        assert round_money(raw) == expected
        assert str(round_money(raw)) == str(expected)

    def test_keeps_integer_part_beyond_default_precision(self):
        """Should quantize values wider than 28 significant digits."""
        result = round_money(Decimal("1.1E+30"))

        assert result == Decimal("1100000000000000000000000000000")
        assert str(result) == "1100000000000000000000000000000.00"
