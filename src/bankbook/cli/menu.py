"""Interactive numbered menu loop."""

from typing import Callable

import click

from bankbook.cli.error_handling import render_domain_error
from bankbook.cli.tables import format_account_row, format_account_table
from bankbook.domain.account import AccountStore
from bankbook.domain.errors import DomainError
from bankbook.utils.amount_parser import parse_account_number, parse_amount

EXIT_CHOICE = "0"


def _prompt_number(text: str) -> int:
    return parse_account_number(click.prompt(text))


def _create(store: AccountStore) -> None:
    account_number = _prompt_number("Enter Account Number")
    name = click.prompt("Enter Account Holder Name")
    balance = parse_amount(click.prompt("Enter Initial Balance"))
    store.create_account(account_number, name, balance)
    click.echo("Account Created Successfully!")


def _list(store: AccountStore) -> None:
    accounts = store.list_accounts()
    if not accounts:
        click.echo("No accounts to display.")
        return
    for line in format_account_table(accounts):
        click.echo(line)


def _deposit(store: AccountStore) -> None:
    account_number = _prompt_number("Enter Account Number")
    amount = parse_amount(click.prompt("Enter Deposit Amount"))
    account = store.deposit(account_number, amount)
    click.echo(f"Deposit Successful! New balance: {account.balance:.2f}")


def _withdraw(store: AccountStore) -> None:
    account_number = _prompt_number("Enter Account Number")
    amount = parse_amount(click.prompt("Enter Withdrawal Amount"))
    account = store.withdraw(account_number, amount)
    click.echo(f"Withdrawal Successful! New balance: {account.balance:.2f}")


def _rename(store: AccountStore) -> None:
    account_number = _prompt_number("Enter Account Number to Update")
    # Check first so the operator is not asked for a name in vain
    store.require_account(account_number)
    name = click.prompt("Enter New Name")
    store.rename_account(account_number, name)
    click.echo("Account Updated Successfully!")


def _delete(store: AccountStore) -> None:
    account_number = _prompt_number("Enter Account Number to Delete")
    store.delete_account(account_number)
    click.echo("Account Deleted Successfully!")


def _find(store: AccountStore) -> None:
    account_number = _prompt_number("Enter Account Number to Search")
    account = store.require_account(account_number)
    click.echo("Account Found:")
    click.echo(format_account_row(account))


def _history(store: AccountStore) -> None:
    account_number = _prompt_number("Enter Account Number")
    lines = store.view_history(account_number)
    click.echo(f"Transaction History for account {account_number}:")
    for line in lines:
        click.echo(line)


MENU_OPTIONS: dict[str, tuple[str, Callable[[AccountStore], None]]] = {
    "1": ("Create New Account", _create),
    "2": ("Display All Accounts", _list),
    "3": ("Deposit Money", _deposit),
    "4": ("Withdraw Money", _withdraw),
    "5": ("Update Account", _rename),
    "6": ("Delete Account", _delete),
    "7": ("Find Account", _find),
    "8": ("View Transaction History", _history),
}


def show_menu() -> None:
    click.echo("\n====== Bank Management System ======")
    for choice, (label, _) in MENU_OPTIONS.items():
        click.echo(f"{choice}. {label}")
    click.echo(f"{EXIT_CHOICE}. Exit")


def run_menu(store: AccountStore) -> None:
    """Present the menu until the operator chooses to exit.

    Domain errors are reported and control returns to the menu. End of
    input is treated like choosing Exit.
    """
    while True:
        show_menu()
        try:
            choice = click.prompt("Enter your choice", prompt_suffix=": ").strip()
        except click.Abort:
            click.echo()
            choice = EXIT_CHOICE

        if choice == EXIT_CHOICE:
            click.echo("Exiting system...")
            return

        option = MENU_OPTIONS.get(choice)
        if option is None:
            click.echo("Invalid choice. Try again.")
            continue

        _, action = option
        try:
            action(store)
        except DomainError as e:
            render_domain_error(e)
        except click.Abort:
            click.echo("\nExiting system...")
            return
