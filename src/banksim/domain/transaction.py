"""Transaction domain service: deposits, withdrawals and remittances.

All monetary comparisons are made on amounts already rounded to cents. Every
successful operation is persisted before it returns and then appended to the
transaction log; a log failure is reported on the receipt but does not undo
the balance change.
"""

import logging
from decimal import Decimal

from banksim.database.base import AccountStore
from banksim.database.transaction_log import TransactionLog
from banksim.domain.entities import Account, AccountType, Receipt, TransactionKind
from banksim.domain.errors import (
    InsufficientFundsError,
    InvalidAmountError,
    OutOfRangeError,
    SelfTransferError,
    TransactionLogError,
    insufficient_balance,
)
from banksim.utils.amount_parser import parse_amount, to_cents

logger = logging.getLogger(__name__)

MAX_DEPOSIT = Decimal("50000")

TAX_RATES: dict[tuple[AccountType, AccountType], Decimal] = {
    (AccountType.SAVINGS, AccountType.CURRENT): Decimal("0.02"),
    (AccountType.CURRENT, AccountType.SAVINGS): Decimal("0.03"),
}


def tax_rate(sender_type: AccountType, recipient_type: AccountType) -> Decimal:
    """Return the remittance tax rate for a sender/recipient type pair."""
    return TAX_RATES.get((sender_type, recipient_type), Decimal("0"))


def max_transferable(balance: Decimal, rate: Decimal) -> Decimal:
    """Largest amount that, plus its tax, does not exceed ``balance``."""
    return balance / (1 + rate)


def is_same_account(account: Account, other: Account) -> bool:
    """Return True if both records describe the same account.

    Compares every identifying field; balance is ignored, so a stale copy of
    an account still counts as the same account.
    """
    return (
        account.pin == other.pin
        and account.id == other.id
        and account.account_number == other.account_number
        and account.account_type == other.account_type
        and account.date_created == other.date_created
        and account.name == other.name
    )


class TransactionService:
    """Service applying balance changes to accounts."""

    def __init__(self, store: AccountStore, log: TransactionLog):
        """Initialize transaction service.

        Args:
            store: Account store used to persist every change
            log: Transaction log receiving one line per success
        """
        self.store = store
        self.log = log

    def deposit(self, account: Account, amount_text: str) -> Receipt:
        """Deposit into an account.

        Args:
            account: Account to credit
            amount_text: Amount as typed by the user

        Returns:
            Receipt holding the updated account

        Raises:
            InvalidFormatError: If the amount is not a number
            OutOfRangeError: If the amount is not in (0, 50000]
            SaveFailedError: If the account cannot be saved
        """
        amount = parse_amount(amount_text)
        if amount <= 0 or amount > MAX_DEPOSIT:
            raise OutOfRangeError(f"Deposit must be more than 0 and at most {MAX_DEPOSIT}")
        credited = to_cents(amount)
        if credited <= 0:
            raise OutOfRangeError("Deposit must be at least 0.01")

        updated = account.with_balance(account.balance + credited)
        self.store.save(updated)
        logger.info("Deposited %.2f into %s", credited, account.account_number)

        logged = self._record(TransactionKind.DEPOSIT, account.account_number, credited)
        return Receipt(
            kind=TransactionKind.DEPOSIT, amount=credited, account=updated, logged=logged
        )

    def withdrawal(self, account: Account, amount_text: str) -> Receipt:
        """Withdraw from an account.

        Raises:
            InvalidFormatError: If the amount is not a number
            InsufficientFundsError: If the rounded amount exceeds the balance
            InvalidAmountError: If the rounded amount is not positive
            SaveFailedError: If the account cannot be saved
        """
        amount = parse_amount(amount_text)
        truncated = to_cents(amount)
        if truncated > account.balance:
            raise InsufficientFundsError(insufficient_balance(truncated, account.balance))
        if truncated <= 0:
            raise InvalidAmountError("Cannot withdraw an amount less than or equal to 0")

        updated = account.with_balance(account.balance - truncated)
        self.store.save(updated)
        logger.info("Withdrew %.2f from %s", truncated, account.account_number)

        logged = self._record(TransactionKind.WITHDRAWAL, account.account_number, truncated)
        return Receipt(
            kind=TransactionKind.WITHDRAWAL, amount=truncated, account=updated, logged=logged
        )

    def remittance(self, sender: Account, recipient: Account, amount_text: str) -> Receipt:
        """Transfer money between accounts, charging tax to the sender.

        The recipient receives the full amount; the sender pays the amount
        plus tax. Both records are saved, sender first. If the recipient save
        fails after the sender was saved, the sender change stays in place.

        Raises:
            SelfTransferError: If sender and recipient are the same account
            InvalidFormatError: If the amount is not a number
            InvalidAmountError: If the amount is negative
            InsufficientFundsError: If amount plus tax exceeds the sender balance
            SaveFailedError: If either account cannot be saved
        """
        if is_same_account(sender, recipient):
            raise SelfTransferError("Cannot transfer money to the same account")

        amount = parse_amount(amount_text)
        if amount < 0:
            raise InvalidAmountError("Cannot transfer a negative amount")

        rate = tax_rate(sender.account_type, recipient.account_type)
        rounded = to_cents(amount)
        maximum = to_cents(max_transferable(sender.balance, rate))
        if rounded > maximum:
            raise InsufficientFundsError(insufficient_balance(rounded, maximum))

        tax = to_cents(rounded * rate)
        total = rounded + tax
        # Rounding the maximum up can leave amount plus tax one cent over.
        if total > sender.balance:
            raise InsufficientFundsError(insufficient_balance(total, sender.balance))

        updated_sender = sender.with_balance(sender.balance - total)
        updated_recipient = recipient.with_balance(recipient.balance + rounded)
        self.store.save(updated_sender)
        self.store.save(updated_recipient)
        logger.info(
            "Transferred %.2f from %s to %s (tax %.2f)",
            rounded,
            sender.account_number,
            recipient.account_number,
            tax,
        )

        logged = self._record(
            TransactionKind.REMITTANCE,
            sender.account_number,
            rounded,
            recipient_number=recipient.account_number,
            tax=tax,
        )
        return Receipt(
            kind=TransactionKind.REMITTANCE,
            amount=rounded,
            account=updated_sender,
            tax=tax,
            recipient=updated_recipient,
            logged=logged,
        )

    def _record(self, kind: TransactionKind, account_number: str, amount: Decimal, **kwargs) -> bool:
        try:
            self.log.append(kind, account_number, amount, **kwargs)
        except TransactionLogError as e:
            logger.warning("%s", e)
            return False
        return True
