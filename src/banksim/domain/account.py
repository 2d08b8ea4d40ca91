"""Account domain service."""

import logging
import random
import time
from decimal import Decimal
from typing import Callable, Optional

from banksim.database.base import AccountStore
from banksim.domain.entities import ACCOUNT_TYPES, Account, AccountType
from banksim.domain.errors import (
    InvalidNameError,
    InvalidOptionError,
    InvalidPinError,
)
from banksim.domain.transaction import is_same_account
from banksim.utils.account_resolver import resolve_account
from banksim.utils.identifiers import (
    generate_account_number,
    generate_id,
    is_valid_name,
    is_valid_pin,
)
from banksim.utils.option_resolver import resolve_menu_option

logger = logging.getLogger(__name__)


class AccountService:
    """Service for creating, finding, authenticating and deleting accounts."""

    def __init__(
        self,
        store: AccountStore,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.time,
    ):
        """Initialize account service.

        Args:
            store: Account store
            rng: Random source for identifier generation
            clock: Returns the current time in epoch seconds
        """
        self.store = store
        self.rng = rng or random.Random()
        self.clock = clock

    def create_account(self, name: str, account_type: str, pin: str) -> Account:
        """Create and save a new account with a zero balance.

        Args:
            name: Customer name (no digits)
            account_type: Free text matched against "Savings"/"Current"
            pin: 4-digit PIN

        Returns:
            The saved account

        Raises:
            InvalidNameError: If the name is blank or contains digits
            InvalidOptionError: If the account type matches nothing
            InvalidPinError: If the PIN is not 4 digits
            SaveFailedError: If the record cannot be written
        """
        name = name.strip()
        if not is_valid_name(name):
            raise InvalidNameError("Name must not be empty or contain digits")

        resolved_type = self.parse_account_type(account_type)

        if not is_valid_pin(pin):
            raise InvalidPinError("PIN must be 4 digits long")

        account = Account(
            id=generate_id(self.store.is_unique, self.rng),
            account_number=generate_account_number(self.store.is_unique, self.rng),
            name=name,
            account_type=resolved_type,
            pin=pin,
            date_created=int(self.clock()),
            balance=Decimal("0.00"),
        )
        self.store.save(account)
        logger.info("Created %s account %s", resolved_type.label, account.account_number)
        return account

    @staticmethod
    def parse_account_type(text: str) -> AccountType:
        """Resolve free text to an account type through the menu matcher.

        Raises:
            InvalidOptionError: If nothing matches
        """
        try:
            option = resolve_menu_option(ACCOUNT_TYPES, text.strip())
        except InvalidOptionError:
            raise InvalidOptionError("Please enter a valid account type (Savings/Current)")
        return AccountType(option)

    def find_account(self, identifier: str) -> Account:
        """Resolve an account number, name or id to an account."""
        return resolve_account(self.store, identifier)

    def login(self, identifier: str, pin: str) -> Account:
        """Authenticate by identifier and PIN.

        Raises:
            InvalidPinError: If the PIN is malformed or wrong
            AccountNotFoundError: If the identifier matches nothing
        """
        account = self.find_account(identifier)
        if not is_valid_pin(pin):
            raise InvalidPinError("PIN must be 4 digits long")
        if pin != account.pin:
            logger.info("Rejected PIN for account %s", account.account_number)
            raise InvalidPinError("Incorrect PIN")
        return account

    def list_accounts(self) -> list[Account]:
        """List all stored accounts."""
        return self.store.load_all()

    def other_accounts(self, account: Account) -> list[Account]:
        """List stored accounts other than ``account``."""
        return [acc for acc in self.store.load_all() if not is_same_account(acc, account)]

    def refresh(self, account: Account) -> Optional[Account]:
        """Reload an account from the store, or None if it no longer exists."""
        return self.store.load_by_key(account.account_number)

    def delete_account(self, account: Account) -> None:
        """Delete an account.

        Raises:
            DeleteFailedError: If the record cannot be removed
        """
        self.store.delete(account)
        logger.info("Deleted account %s", account.account_number)
