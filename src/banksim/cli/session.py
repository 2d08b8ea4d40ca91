"""Interactive session state."""

from dataclasses import dataclass
from typing import Optional

from banksim.domain.account import AccountService
from banksim.domain.entities import MAIN_MENU_LOGGED_IN, MAIN_MENU_LOGGED_OUT, Account
from banksim.domain.transaction import TransactionService


@dataclass
class Session:
    """State owned by the menu loop and passed to every page."""

    accounts: AccountService
    transactions: TransactionService
    current: Optional[Account] = None

    @property
    def logged_in(self) -> bool:
        return self.current is not None

    @property
    def menu(self) -> tuple[str, ...]:
        """Menu for the current login state."""
        return MAIN_MENU_LOGGED_IN if self.logged_in else MAIN_MENU_LOGGED_OUT
