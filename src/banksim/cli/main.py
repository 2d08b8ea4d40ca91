"""Main CLI entry point."""

import click

from banksim.cli import console
from banksim.cli.error_handling import handle_fatal_error
from banksim.cli.pages import account, transaction
from banksim.cli.session import Session
from banksim.database.factories import create_flat_file_store, create_transaction_log
from banksim.domain.account import AccountService
from banksim.domain.errors import StorageError
from banksim.domain.transaction import TransactionService
from banksim.logging import setup_logging
from banksim.utils.option_resolver import resolve_option

EXIT_OPTION = "Exit"

# Pages in menu order; see MAIN_MENU_LOGGED_OUT / MAIN_MENU_LOGGED_IN.
LOGGED_OUT_PAGES = {
    "Create a New Bank Account": account.create_page,
    "Login to an Existing Bank Account": account.login_page,
}

LOGGED_IN_PAGES = {
    "Deposit": transaction.deposit_page,
    "Withdrawal": transaction.withdrawal_page,
    "Remittance": transaction.remittance_page,
    "Logout": account.logout_page,
    "Delete": account.delete_page,
}


def print_login_details(session: Session) -> None:
    if session.current is None:
        click.echo("Not currently logged in")
    else:
        console.print_account(session.current)


def run(session: Session) -> None:
    """Run the menu loop until the user chooses Exit."""
    while True:
        console.print_divider()
        print_login_details(session)
        menu = session.menu
        console.print_menu(menu)

        choice = click.prompt("What would you like to do").strip()
        option = resolve_option(menu, choice) if choice else None
        if option is None:
            click.echo("Please enter a valid option")
            continue

        selected = menu[option]
        click.echo(f"Selected option {option + 1}: {selected}")
        if selected == EXIT_OPTION:
            click.echo("Goodbye!")
            return

        pages = LOGGED_IN_PAGES if session.logged_in else LOGGED_OUT_PAGES
        pages[selected](session)


@click.command()
@click.option(
    "--db-path",
    type=click.Path(file_okay=False),
    help="Directory holding account records (overrides BANKSIM_DB_PATH environment variable)",
    envvar="BANKSIM_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="BANKSIM_LOG_LEVEL",
    help="Log level for diagnostics written to stderr",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Banksim - Terminal bank-account simulator.

    Create accounts, log in, and deposit, withdraw or transfer money. Menu
    options can be chosen by number or by typing part of their name.
    """
    setup_logging(level=log_level)

    store = create_flat_file_store(database_path=db_path)
    try:
        store.initialize()
    except StorageError as e:
        handle_fatal_error(ctx, e)

    session = Session(
        accounts=AccountService(store),
        transactions=TransactionService(store, create_transaction_log(database_path=db_path)),
    )

    console.print_logo()
    console.print_date_and_time()
    console.print_account_list(session.accounts.list_accounts())
    click.echo("What would you like to do today?")

    try:
        run(session)
    except (EOFError, click.Abort):
        click.echo("\nGoodbye!")


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
