"""Storage layer for banksim application."""

from banksim.database.base import AccountStore
from banksim.database.factories import create_flat_file_store, create_transaction_log

__all__ = ["AccountStore", "create_flat_file_store", "create_transaction_log"]
