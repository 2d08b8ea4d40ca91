"""Shared pytest fixtures for banksim tests."""

import random
from decimal import Decimal

import pytest

from banksim.database.flat_file import FlatFileStore
from banksim.database.transaction_log import LOG_FILE_NAME, TransactionLog
from banksim.domain.account import AccountService
from banksim.domain.entities import Account, AccountType
from banksim.domain.transaction import TransactionService

CREATED_AT = 1_700_000_000


@pytest.fixture
def db_dir(tmp_path):
    """Return an empty account directory."""
    path = tmp_path / "database"
    path.mkdir()
    return path


@pytest.fixture
def store(db_dir):
    """Create a FlatFileStore in a temporary directory."""
    store = FlatFileStore(db_dir)
    store.initialize()
    return store


@pytest.fixture
def transaction_log(db_dir):
    return TransactionLog(db_dir / LOG_FILE_NAME)


@pytest.fixture
def account_service(store):
    """Create an AccountService with a seeded random source and fixed clock."""
    return AccountService(store, rng=random.Random(1234), clock=lambda: CREATED_AT)


@pytest.fixture
def transaction_service(store, transaction_log):
    return TransactionService(store, transaction_log)


@pytest.fixture
def make_account():
    """Build an unsaved Account with overridable fields."""

    def _make(**overrides):
        fields = {
            "id": "1234567890",
            "account_number": "1234567",
            "name": "Alice",
            "account_type": AccountType.SAVINGS,
            "pin": "1234",
            "date_created": CREATED_AT,
            "balance": Decimal("0.00"),
        }
        fields.update(overrides)
        return Account(**fields)

    return _make


@pytest.fixture
def savings_account(account_service, store):
    """A saved Savings account named Alice with balance 200.00 and PIN 1234."""
    account = account_service.create_account(name="Alice", account_type="Savings", pin="1234")
    account = account.with_balance(Decimal("200.00"))
    store.save(account)
    return account


@pytest.fixture
def current_account(account_service):
    """A saved Current account named Bob with balance 0.00 and PIN 5678."""
    return account_service.create_account(name="Bob", account_type="Current", pin="5678")


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging so they do not outlive a test."""
    yield
    import logging

    package_logger = logging.getLogger("banksim")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def log_lines(transaction_log):
    """Return a reader giving the transaction log as lists of tab-separated fields."""

    def _read():
        if not transaction_log.path.exists():
            return []
        return [line.split("\t") for line in transaction_log.path.read_text().splitlines()]

    return _read
