"""Console formatting helpers."""

from datetime import datetime
from typing import Sequence

import click
from dateutil import tz

from banksim.domain.entities import Account

DIVIDER = "━" * 50
TIME_FORMAT = "%a %b %d %H:%M:%S %Y"

LOGO = r"""
  ___           _      ___ _
 | _ ) __ _ _ _| |__  / __(_)_ __
 | _ \/ _` | ' \ / /  \__ \ | '  \
 |___/\__,_|_||_\_\_\ |___/_|_|_|_|
"""


def print_divider() -> None:
    click.echo(DIVIDER)


def print_logo() -> None:
    click.echo(LOGO.strip("\n"))
    print_divider()


def print_date_and_time() -> None:
    now = datetime.now(tz.tzlocal())
    click.echo(f"Current time: {now.strftime(TIME_FORMAT)}")


def print_menu(entries: Sequence[str]) -> None:
    """Print a numbered menu (``1. Deposit``)."""
    for index, entry in enumerate(entries, start=1):
        click.echo(f"{index}. {entry}")


def print_account_simple(account: Account) -> None:
    click.echo(f"Name: {account.name}")
    click.echo(f"Account Number: {account.account_number}")


def print_account(account: Account) -> None:
    """Print every public detail of an account (the PIN is never shown)."""
    print_account_simple(account)
    click.echo(f"ID: {account.id}")
    click.echo(f"Type: {account.account_type.label}")
    click.echo(f"Date Created: {account.created_at.strftime(TIME_FORMAT)}")
    click.echo(f"Balance: {account.balance:.2f}")


def print_account_list(accounts: Sequence[Account]) -> None:
    """Print name and account number of each account, or a notice if none."""
    if not accounts:
        click.echo("No accounts found.")
        return
    for account in accounts:
        print_account_simple(account)
        print_divider()
