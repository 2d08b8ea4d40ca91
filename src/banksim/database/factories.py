"""Storage factory functions for creating store instances."""

import os
from pathlib import Path
from typing import Optional

from banksim.database.flat_file import FlatFileStore
from banksim.database.transaction_log import LOG_FILE_NAME, TransactionLog

DEFAULT_DATABASE_PATH = "./database"


def resolve_database_path(database_path: Optional[str] = None) -> Path:
    """Resolve the account directory.

    Args:
        database_path: Explicit directory. If None, checks the BANKSIM_DB_PATH
            environment variable, then defaults to ./database
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get("BANKSIM_DB_PATH")

    if database_path is None:
        database_path = DEFAULT_DATABASE_PATH

    return Path(database_path)


def create_flat_file_store(database_path: Optional[str] = None) -> FlatFileStore:
    """Create a flat-file account store.

    The directory is not created here; call ``initialize()`` on the result.
    """
    return FlatFileStore(resolve_database_path(database_path))


def create_transaction_log(database_path: Optional[str] = None) -> TransactionLog:
    """Create the transaction log stored alongside the account records."""
    return TransactionLog(resolve_database_path(database_path) / LOG_FILE_NAME)
