"""Abstract account storage interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from banksim.domain.entities import Account

UNIQUE_FIELDS = ("id", "account_number")


class AccountStore(ABC):
    """Abstract account store keyed by account number."""

    @abstractmethod
    def initialize(self) -> None:
        """Prepare the store for use (create the directory if absent)."""
        pass

    @abstractmethod
    def load_all(self) -> list[Account]:
        """Enumerate all valid account records. Malformed records are skipped."""
        pass

    @abstractmethod
    def load_by_key(self, account_number: str) -> Optional[Account]:
        """Get account by account number, or None if absent."""
        pass

    @abstractmethod
    def save(self, account: Account) -> None:
        """Create or overwrite the record for an account."""
        pass

    @abstractmethod
    def delete(self, account: Account) -> None:
        """Delete the record for an account."""
        pass

    def is_unique(self, field: str, value: str) -> bool:
        """Return True if no stored account has ``field`` equal to ``value``."""
        if field not in UNIQUE_FIELDS:
            raise ValueError(f"Unknown account field '{field}'")
        return all(getattr(acc, field) != value for acc in self.load_all())
