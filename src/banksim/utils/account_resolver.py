"""Utility for resolving user-typed account identifiers to accounts."""

from banksim.database.base import AccountStore
from banksim.domain.entities import Account
from banksim.domain.errors import (
    AccountNotFoundError,
    AmbiguousIdentifierError,
    InvalidIdentifierFormatError,
    account_not_found,
)
from banksim.utils.identifiers import is_valid_account_number, is_valid_id


def resolve_account(store: AccountStore, identifier: str) -> Account:
    """Resolve an account number, name or id to an account.

    Tried in order: account number (7-9 digits), unique case-insensitive
    name, unique id (10 digits).

    Args:
        store: Account store to search
        identifier: Text typed by the user

    Returns:
        The matching account

    Raises:
        AmbiguousIdentifierError: If the name or id matches several accounts
        InvalidIdentifierFormatError: If numeric input has the wrong length
        AccountNotFoundError: If nothing matches
    """
    identifier = identifier.strip()

    if is_valid_account_number(identifier):
        account = store.load_by_key(identifier)
        if account is not None:
            return account

    accounts = store.load_all()

    by_name = [acc for acc in accounts if acc.name.lower() == identifier.lower()]
    if len(by_name) == 1:
        return by_name[0]
    if len(by_name) > 1:
        raise AmbiguousIdentifierError(
            f"{len(by_name)} accounts are named '{identifier}'; use the account number instead"
        )

    by_id = [acc for acc in accounts if acc.id == identifier]
    if len(by_id) == 1:
        return by_id[0]
    if len(by_id) > 1:
        raise AmbiguousIdentifierError(
            f"{len(by_id)} accounts share id '{identifier}'; use the account number instead"
        )

    if any(char.isdigit() for char in identifier) and not (
        is_valid_account_number(identifier) or is_valid_id(identifier)
    ):
        raise InvalidIdentifierFormatError(
            f"'{identifier}' is not a valid identifier: account numbers have 7-9 digits, "
            "ids have 10 digits and names contain no digits"
        )
    raise AccountNotFoundError(account_not_found(identifier))
