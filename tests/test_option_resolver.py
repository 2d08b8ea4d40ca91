"""Tests for the fuzzy menu option resolver."""

import pytest

from banksim.domain.entities import ACCOUNT_TYPES, MAIN_MENU_LOGGED_IN, MAIN_MENU_LOGGED_OUT
from banksim.domain.errors import InvalidOptionError
from banksim.utils.option_resolver import (
    leading_word,
    resolve_menu_option,
    resolve_option,
    score_option,
)


class TestDigitShortcut:
    """Single digits select by 1-based position."""

    @pytest.mark.parametrize("digit", range(1, len(MAIN_MENU_LOGGED_IN) + 1))
    def test_digit_selects_entry(self, digit):
        assert resolve_option(MAIN_MENU_LOGGED_IN, str(digit)) == digit - 1

    def test_digit_out_of_range(self):
        assert resolve_option(MAIN_MENU_LOGGED_OUT, "9") is None

    def test_zero_is_out_of_range(self):
        assert resolve_option(MAIN_MENU_LOGGED_OUT, "0") is None

    def test_multi_digit_input_falls_through_to_fuzzy_matching(self):
        # No digit occurs in any leading word, so every entry scores 0 and
        # the first entry wins the tie.
        assert resolve_option(MAIN_MENU_LOGGED_IN, "12") == 0


class TestScoring:
    """Exact scores for the three tiers."""

    def test_prefix_score(self):
        assert score_option("Deposit", "dep") == 1000 + (100 - 4)

    def test_exact_word_score(self):
        assert score_option("Withdrawal", "WITHDRAWAL") == 1100

    def test_substring_score(self):
        assert score_option("Withdrawal", "draw") == 500 + (100 - 6)

    def test_overlap_score(self):
        # d and e occur in "delete"; p does not
        assert score_option("Delete", "dep") == 20

    def test_overlap_counts_repeated_input_characters(self):
        assert score_option("Logout", "oo") == 20

    def test_only_leading_word_is_scored(self):
        assert score_option("Create a New Bank Account", "account") == 10 * 4

    def test_leading_word_skips_index_markers(self):
        assert leading_word("1. Deposit money") == "deposit"
        assert leading_word("Login to an Existing Bank Account") == "login"


class TestResolve:
    def test_prefix_match(self):
        assert resolve_option(["Deposit", "Withdrawal"], "dep") == 0

    def test_exact_word_any_case(self):
        for index, entry in enumerate(MAIN_MENU_LOGGED_IN):
            assert resolve_option(MAIN_MENU_LOGGED_IN, entry.upper()) == index

    def test_shared_prefix_prefers_closer_length(self):
        # "delete" (1096) is closer in length to "de" than "deposit" (1095)
        assert resolve_option(MAIN_MENU_LOGGED_IN, "de") == 4

    def test_prefix_beats_substring(self):
        # "e" is a prefix of "exit" but only a substring of the others
        assert resolve_option(MAIN_MENU_LOGGED_IN, "e") == 5

    def test_substring_match(self):
        assert resolve_option(MAIN_MENU_LOGGED_IN, "draw") == 1

    def test_tie_goes_to_first_entry(self):
        assert resolve_option(["Save", "Sane"], "sa") == 0

    def test_no_overlap_selects_first_entry(self):
        assert resolve_option(ACCOUNT_TYPES, "xyz") == 0

    def test_account_types(self):
        assert resolve_option(ACCOUNT_TYPES, "sav") == 0
        assert resolve_option(ACCOUNT_TYPES, "c") == 1

    def test_logged_out_menu(self):
        assert resolve_option(MAIN_MENU_LOGGED_OUT, "create") == 0
        assert resolve_option(MAIN_MENU_LOGGED_OUT, "log") == 1
        assert resolve_option(MAIN_MENU_LOGGED_OUT, "exit") == 2

    def test_empty_menu(self):
        assert resolve_option([], "deposit") is None


def test_resolve_menu_option_raises_on_no_match():
    with pytest.raises(InvalidOptionError):
        resolve_menu_option(ACCOUNT_TYPES, "3")


def test_resolve_menu_option_returns_index():
    assert resolve_menu_option(ACCOUNT_TYPES, "current") == 1
