"""Mapper functions to convert between domain accounts and flat-file records.

A record is seven newline-delimited fields in fixed order: id, account
number, name, account type code, PIN, creation time in epoch seconds and
balance with two decimals.
"""

from decimal import Decimal
import re

from banksim.domain.entities import Account, AccountType
from banksim.domain.errors import MalformedRecordError, malformed_record
from banksim.utils.amount_parser import to_cents
from banksim.utils.identifiers import (
    is_valid_account_number,
    is_valid_id,
    is_valid_name,
    is_valid_pin,
)

RECORD_FIELDS = (
    "id",
    "account_number",
    "name",
    "account_type",
    "pin",
    "date_created",
    "balance",
)

# Balances are written in fixed-point notation and are never negative.
_BALANCE_RE = re.compile(r"\d+(?:\.\d+)?")


def account_to_record(account: Account) -> str:
    """Convert domain Account entity to its flat-file record."""
    lines = [
        account.id,
        account.account_number,
        account.name,
        str(int(account.account_type)),
        account.pin,
        str(account.date_created),
        f"{to_cents(account.balance):.2f}",
    ]
    return "\n".join(lines) + "\n"


def record_to_account(text: str, source: str = "<record>") -> Account:
    """Convert a flat-file record to a domain Account entity.

    Args:
        text: Record contents
        source: Where the record came from, used in error messages

    Raises:
        MalformedRecordError: If any field is missing or fails validation
    """
    fields = text.splitlines()
    if len(fields) < len(RECORD_FIELDS):
        raise MalformedRecordError(
            malformed_record(source, f"expected {len(RECORD_FIELDS)} fields, got {len(fields)}")
        )
    id_, account_number, name, type_code, pin, created, balance_text = (
        field.strip() for field in fields[: len(RECORD_FIELDS)]
    )

    if not is_valid_id(id_):
        raise MalformedRecordError(malformed_record(source, "bad id"))
    if not is_valid_account_number(account_number):
        raise MalformedRecordError(malformed_record(source, "bad account number"))
    if not is_valid_name(name):
        raise MalformedRecordError(malformed_record(source, "bad name"))
    if not is_valid_pin(pin):
        raise MalformedRecordError(malformed_record(source, "bad PIN"))

    try:
        account_type = AccountType(int(type_code))
    except ValueError:
        raise MalformedRecordError(malformed_record(source, "bad account type"))

    try:
        date_created = int(created)
    except ValueError:
        raise MalformedRecordError(malformed_record(source, "bad creation time"))

    if not _BALANCE_RE.fullmatch(balance_text):
        raise MalformedRecordError(malformed_record(source, "bad balance"))
    balance = Decimal(balance_text)

    return Account(
        id=id_,
        account_number=account_number,
        name=name,
        account_type=account_type,
        pin=pin,
        date_created=date_created,
        balance=to_cents(balance),
    )
