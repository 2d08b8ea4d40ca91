"""Account pages: create, login, logout and delete."""

import click

from banksim.cli import console
from banksim.cli.error_handling import report_error
from banksim.cli.session import Session
from banksim.domain.errors import DomainError, InvalidNameError, InvalidPinError
from banksim.utils.identifiers import is_valid_name, is_valid_pin


def create_page(session: Session) -> None:
    """Create a new account and log in to it."""
    while True:
        name = click.prompt("Enter your Name").strip()
        if is_valid_name(name):
            break
        report_error(InvalidNameError("Name must not be empty or contain digits"))

    while True:
        account_type = click.prompt("Enter your account type (Savings/Current)")
        try:
            session.accounts.parse_account_type(account_type)
            break
        except DomainError as e:
            report_error(e)

    while True:
        pin = click.prompt("Enter your 4-Digit PIN", hide_input=True)
        if is_valid_pin(pin):
            break
        report_error(InvalidPinError("PIN must be 4 digits long"))

    try:
        account = session.accounts.create_account(name, account_type, pin)
    except DomainError as e:
        report_error(e)
        return

    click.echo("Successfully created a New Account!")
    click.echo(f"Your account number is {account.account_number}")
    session.current = account


def login_page(session: Session) -> None:
    """Log in with an account number, name or id and a PIN."""
    identifier = click.prompt("Enter your Account Number or Name")
    pin = click.prompt("Enter your 4-Digit PIN", hide_input=True)

    try:
        account = session.accounts.login(identifier, pin)
    except DomainError as e:
        click.echo("Failed to Login", err=True)
        report_error(e)
        return

    click.echo(f"Successfully logged in to {account.name}")
    session.current = account


def logout_page(session: Session) -> None:
    if click.confirm("Are you sure you would like to Logout?"):
        session.current = None
        click.echo("Logged out successfully!")


def delete_page(session: Session) -> None:
    """Delete the logged-in account and log out."""
    account = session.current
    if not click.confirm(
        f"Are you sure you want to delete account '{account.name}' "
        f"({account.account_number})? This cannot be undone"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        session.accounts.delete_account(account)
    except DomainError as e:
        report_error(e)
        return

    session.current = None
    click.echo(f"Deleted account '{account.name}'")
    console.print_divider()
