"""Tests for amount parsing and rounding."""

from decimal import Decimal

import pytest

from banksim.domain.errors import InvalidFormatError
from banksim.utils.amount_parser import parse_amount, to_cents


@pytest.mark.parametrize(
    "text, expected",
    [
        ("100.50", Decimal("100.50")),
        ("-5", Decimal("-5")),
        ("  42  ", Decimal("42")),
        ("42\n", Decimal("42")),
        (".5", Decimal("0.5")),
        ("5.", Decimal("5")),
        ("1e3", Decimal("1000")),
        ("+7.25", Decimal("7.25")),
    ],
)
def test_parse_valid_amounts(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize(
    "text", ["", "   ", "abc", "12abc", "1 2", "1,000", "$5", "nan", "inf", "1_000", "1e400"]
)
def test_parse_invalid_amounts(text):
    with pytest.raises(InvalidFormatError):
        parse_amount(text)


def test_invalid_format_is_a_value_error():
    with pytest.raises(ValueError):
        parse_amount("abc")


def test_to_cents_rounds_half_to_even():
    assert to_cents(Decimal("0.125")) == Decimal("0.12")
    assert to_cents(Decimal("0.135")) == Decimal("0.14")
    assert to_cents(Decimal("10.006")) == Decimal("10.01")


def test_to_cents_keeps_two_places():
    assert str(to_cents(Decimal("5"))) == "5.00"


def test_to_cents_handles_large_values():
    assert to_cents(Decimal("1e30")) == Decimal("1000000000000000000000000000000.00")
