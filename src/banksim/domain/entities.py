"""Domain model entities for banksim.

These are pure data classes representing business concepts, independent of
the on-disk record layout. Records are immutable; balance changes produce a
new record via ``with_balance``.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum, IntEnum
from typing import Optional

from dateutil import tz


class AccountType(IntEnum):
    """Account type. Integer values are the persisted codes."""

    SAVINGS = 0
    CURRENT = 1

    @property
    def label(self) -> str:
        """Human-readable label ("Savings", "Current")."""
        return self.name.capitalize()


class TransactionKind(Enum):
    """Kinds of balance-changing operations recorded in the transaction log."""

    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"
    REMITTANCE = "REMITTANCE"


# Menu lists are static configuration, defined once at import time.
ACCOUNT_TYPES: tuple[str, ...] = tuple(t.label for t in AccountType)

MAIN_MENU_LOGGED_OUT: tuple[str, ...] = (
    "Create a New Bank Account",
    "Login to an Existing Bank Account",
    "Exit",
)

MAIN_MENU_LOGGED_IN: tuple[str, ...] = (
    "Deposit",
    "Withdrawal",
    "Remittance",
    "Logout",
    "Delete",
    "Exit",
)


@dataclass(frozen=True)
class Account:
    """Bank account domain entity."""

    id: str
    account_number: str
    name: str
    account_type: AccountType
    pin: str
    date_created: int
    balance: Decimal

    @property
    def created_at(self) -> datetime:
        """Creation time as an aware datetime in the local timezone."""
        return datetime.fromtimestamp(self.date_created, tz=tz.tzlocal())

    def with_balance(self, balance: Decimal) -> "Account":
        """Return a copy of this account with a new balance."""
        return replace(self, balance=balance)


@dataclass(frozen=True)
class Receipt:
    """Outcome of a successful deposit, withdrawal or remittance."""

    kind: TransactionKind
    amount: Decimal
    account: Account
    tax: Decimal = Decimal("0.00")
    recipient: Optional[Account] = None
    logged: bool = True
