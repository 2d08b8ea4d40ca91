"""Utility functions for banksim."""

from banksim.utils.amount_parser import parse_amount, to_cents
from banksim.utils.option_resolver import resolve_option

__all__ = ["parse_amount", "to_cents", "resolve_option"]
