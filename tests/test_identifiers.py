"""Tests for identifier validation and generation."""

import random

import pytest

from banksim.utils.identifiers import (
    generate_account_number,
    generate_id,
    is_valid_account_number,
    is_valid_id,
    is_valid_name,
    is_valid_pin,
)


@pytest.mark.parametrize("text", ["1234567", "12345678", "123456789"])
def test_valid_account_numbers(text):
    assert is_valid_account_number(text)


@pytest.mark.parametrize("text", ["123456", "1234567890", "12345a7", "", "١٢٣٤٥٦٧"])
def test_invalid_account_numbers(text):
    assert not is_valid_account_number(text)


def test_id_is_ten_digits():
    assert is_valid_id("1234567890")
    assert not is_valid_id("123456789")
    assert not is_valid_id("12345678901")


def test_pin_is_four_digits():
    assert is_valid_pin("0000")
    assert not is_valid_pin("123")
    assert not is_valid_pin("12345")
    assert not is_valid_pin("12a4")


def test_name_rules():
    assert is_valid_name("Alice Smith")
    assert not is_valid_name("Alice2")
    assert not is_valid_name("   ")


def test_generate_account_number_retries_until_unique():
    seen = []

    def is_unique(field, value):
        assert field == "account_number"
        seen.append(value)
        return len(seen) > 2

    number = generate_account_number(is_unique, random.Random(7))
    assert number == seen[-1]
    assert len(seen) == 3
    assert is_valid_account_number(number)


def test_generate_id_is_ten_digits():
    value = generate_id(lambda field, value: True, random.Random(7))
    assert is_valid_id(value)
