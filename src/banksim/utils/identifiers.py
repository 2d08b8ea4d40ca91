"""Validation and generation of account identifiers."""

import random
from typing import Callable

ACCOUNT_NUMBER_MIN = 1_000_000
ACCOUNT_NUMBER_MAX = 999_999_999
ID_MIN = 1_000_000_000
ID_MAX = 9_999_999_999
PIN_LENGTH = 4

UniquenessCheck = Callable[[str, str], bool]


def _all_digits(text: str) -> bool:
    return text.isascii() and text.isdigit()


def is_valid_account_number(text: str) -> bool:
    """Return True if text is 7 to 9 digits."""
    return 7 <= len(text) <= 9 and _all_digits(text)


def is_valid_id(text: str) -> bool:
    """Return True if text is exactly 10 digits."""
    return len(text) == 10 and _all_digits(text)


def is_valid_pin(text: str) -> bool:
    """Return True if text is exactly 4 digits."""
    return len(text) == PIN_LENGTH and _all_digits(text)


def is_valid_name(text: str) -> bool:
    """Return True if text is non-blank and contains no digits."""
    return bool(text.strip()) and not any(char.isdigit() for char in text)


def generate_account_number(
    is_unique: UniquenessCheck, rng: random.Random | None = None
) -> str:
    """Generate an account number not yet used by any stored account.

    Args:
        is_unique: Storage query ``(field, value) -> bool``
        rng: Optional random source (tests pass a seeded one)
    """
    rng = rng or random.Random()
    while True:
        candidate = str(rng.randint(ACCOUNT_NUMBER_MIN, ACCOUNT_NUMBER_MAX))
        if is_unique("account_number", candidate):
            return candidate


def generate_id(is_unique: UniquenessCheck, rng: random.Random | None = None) -> str:
    """Generate a 10-digit id not yet used by any stored account."""
    rng = rng or random.Random()
    while True:
        candidate = str(rng.randint(ID_MIN, ID_MAX))
        if is_unique("id", candidate):
            return candidate
