"""Transaction pages: deposit, withdrawal and remittance.

Each page asks again until the amount is accepted. Storage failures are not
input errors, so they return to the menu instead.
"""

import click

from banksim.cli import console
from banksim.cli.error_handling import report_error
from banksim.cli.session import Session
from banksim.domain.entities import Receipt
from banksim.domain.errors import DomainError, SaveFailedError, SelfTransferError
from banksim.domain.transaction import is_same_account, max_transferable, tax_rate
from banksim.utils.amount_parser import to_cents


def _finish(session: Session, receipt: Receipt) -> None:
    session.current = receipt.account
    if not receipt.logged:
        click.echo("Warning: the transaction could not be recorded in the log", err=True)


def deposit_page(session: Session) -> None:
    while True:
        amount = click.prompt("Enter the amount you would like to Deposit")
        try:
            receipt = session.transactions.deposit(session.current, amount)
            break
        except SaveFailedError as e:
            report_error(e)
            return
        except DomainError as e:
            report_error(e)

    click.echo(f"Deposited {receipt.amount:.2f} successfully!")
    _finish(session, receipt)


def withdrawal_page(session: Session) -> None:
    while True:
        amount = click.prompt("Enter the amount you would like to Withdraw")
        try:
            receipt = session.transactions.withdrawal(session.current, amount)
            break
        except SaveFailedError as e:
            report_error(e)
            return
        except DomainError as e:
            report_error(e)

    click.echo(f"Withdrew {receipt.amount:.2f} successfully!")
    _finish(session, receipt)


def remittance_page(session: Session) -> None:
    """Transfer money to another account.

    Lists the other accounts, asks for a recipient until one resolves, shows
    the tax rate and the largest affordable amount, then asks for the amount.
    """
    sender = session.current
    others = session.accounts.other_accounts(sender)
    if not others:
        click.echo("There are no other accounts to transfer to.")
        return

    console.print_divider()
    console.print_account_list(others)

    while True:
        identifier = click.prompt("Enter the account number or name you would like to transfer to")
        try:
            recipient = session.accounts.find_account(identifier)
        except DomainError as e:
            report_error(e)
            continue
        if is_same_account(sender, recipient):
            report_error(SelfTransferError("Cannot transfer money to the same account"))
            continue
        break

    rate = tax_rate(sender.account_type, recipient.account_type)
    click.echo(
        f"Transferring from {sender.account_type.label} to {recipient.account_type.label}: "
        f"{rate * 100:.0f}% tax"
    )
    click.echo(f"Maximum transferable: {to_cents(max_transferable(sender.balance, rate)):.2f}")

    while True:
        amount = click.prompt("Enter the amount you would like to Transfer")
        try:
            receipt = session.transactions.remittance(sender, recipient, amount)
            break
        except SaveFailedError as e:
            report_error(e)
            # The sender may already be saved; pick up whatever is on disk.
            session.current = session.accounts.refresh(sender) or sender
            return
        except DomainError as e:
            report_error(e)

    click.echo(
        f"Transferred {receipt.amount:.2f} to {recipient.name} successfully! "
        f"(tax {receipt.tax:.2f})"
    )
    _finish(session, receipt)
