"""Flat-file account store: one text record per account."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from banksim.database.base import AccountStore
from banksim.database.mappers import account_to_record, record_to_account
from banksim.domain.entities import Account
from banksim.domain.errors import (
    DeleteFailedError,
    MalformedRecordError,
    SaveFailedError,
    StorageError,
    malformed_record,
)
from banksim.utils.identifiers import is_valid_account_number

logger = logging.getLogger(__name__)

RECORD_SUFFIX = ".txt"


class FlatFileStore(AccountStore):
    """Account store backed by ``<account_number>.txt`` files in a directory."""

    def __init__(self, directory: str | Path):
        """Initialize flat-file store.

        Args:
            directory: Directory holding the account records
        """
        self.directory = Path(directory)

    def _path_for(self, account_number: str) -> Path:
        return self.directory / f"{account_number}{RECORD_SUFFIX}"

    def initialize(self) -> None:
        """Create the account directory if it does not exist.

        Raises:
            StorageError: If the directory cannot be created or is not a directory
        """
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot access database directory '{self.directory}': {e}")
        if not os.access(self.directory, os.R_OK | os.W_OK | os.X_OK):
            raise StorageError(f"Cannot access database directory '{self.directory}'")

    def load_all(self) -> list[Account]:
        """List all valid accounts, ordered by account number."""
        try:
            paths = sorted(self.directory.glob(f"*{RECORD_SUFFIX}"))
        except OSError as e:
            raise StorageError(f"Cannot read database directory '{self.directory}': {e}")

        accounts = []
        for path in paths:
            if not is_valid_account_number(path.stem):
                continue
            try:
                account = self._read(path)
            except (MalformedRecordError, OSError) as e:
                logger.error("Skipping account record %s: %s", path.name, e)
                continue
            accounts.append(account)
        logger.debug("Loaded %d account(s) from %s", len(accounts), self.directory)
        return accounts

    def load_by_key(self, account_number: str) -> Optional[Account]:
        """Get account by account number.

        Raises:
            MalformedRecordError: If the record exists but cannot be parsed
        """
        if not is_valid_account_number(account_number):
            return None
        path = self._path_for(account_number)
        if not path.is_file():
            return None
        try:
            return self._read(path)
        except OSError as e:
            raise MalformedRecordError(f"Cannot read {path}: {e}")

    def _read(self, path: Path) -> Account:
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            raise MalformedRecordError(malformed_record(str(path), "not UTF-8 text"))
        account = record_to_account(text, source=str(path))
        if account.account_number != path.stem:
            raise MalformedRecordError(
                f"Malformed file: {path} (account number does not match file name)"
            )
        return account

    def save(self, account: Account) -> None:
        """Write the account record atomically.

        The record is written to a temporary file in the same directory and
        moved into place, so a failed write never leaves a truncated record.

        Raises:
            SaveFailedError: If the record cannot be written
        """
        path = self._path_for(account.account_number)
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.directory, prefix=f".{account.account_number}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(account_to_record(account))
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise SaveFailedError(f"Failed to save account {account.account_number}: {e}")
        logger.debug("Saved account %s", account.account_number)

    def delete(self, account: Account) -> None:
        """Delete the account record.

        Raises:
            DeleteFailedError: If the record is missing or cannot be removed
        """
        path = self._path_for(account.account_number)
        try:
            path.unlink()
        except OSError as e:
            raise DeleteFailedError(f"Failed to delete account {account.account_number}: {e}")
        logger.debug("Deleted account %s", account.account_number)
