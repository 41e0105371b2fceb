"""Account management commands."""

import click

from bankbook.cli.error_handling import handle_domain_error
from bankbook.cli.tables import format_account_row, format_account_table
from bankbook.domain.account import AccountStore
from bankbook.domain.errors import DomainError
from bankbook.storage.mappers import entry_to_log_line
from bankbook.utils.amount_parser import parse_amount
from bankbook.utils.date_parser import parse_date


def _store(ctx: click.Context) -> AccountStore:
    return ctx.obj["store"]


@click.group()
def account_group():
    """Manage accounts."""
    pass


@account_group.command("create")
@click.argument("number", type=int, metavar="NUMBER")
@click.argument("name", metavar="NAME")
@click.option("--balance", default="0", show_default=True, help="Initial balance")
@click.pass_context
def create_account(ctx, number: int, name: str, balance: str):
    """Create a new account.

    Examples:
        bankbook account create 100 "Alice Smith" --balance 50.00
        bankbook account create 200 Bob
    """
    store = _store(ctx)
    try:
        account = store.create_account(number, name, parse_amount(balance))
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created account {account.account_number} for '{account.name}'")


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List all accounts in creation order."""
    accounts = _store(ctx).list_accounts()
    if not accounts:
        click.echo("No accounts to display.")
        return

    for line in format_account_table(accounts):
        click.echo(line)


@account_group.command("deposit")
@click.argument("number", type=int, metavar="NUMBER")
@click.option("--amount", required=True, help="Amount to deposit (e.g., 25.00)")
@click.pass_context
def deposit(ctx, number: int, amount: str):
    """Deposit money into an account.

    AMOUNT is given with --amount and may be negative or zero.

    Examples:
        bankbook account deposit 100 --amount 25.00
    """
    store = _store(ctx)
    try:
        account = store.deposit(number, parse_amount(amount))
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deposit successful. New balance: {account.balance:.2f}")


@account_group.command("withdraw")
@click.argument("number", type=int, metavar="NUMBER")
@click.option("--amount", required=True, help="Amount to withdraw (e.g., 25.00)")
@click.pass_context
def withdraw(ctx, number: int, amount: str):
    """Withdraw money from an account.

    The withdrawal is refused if the balance does not cover it.

    Examples:
        bankbook account withdraw 100 --amount 25.00
    """
    store = _store(ctx)
    try:
        account = store.withdraw(number, parse_amount(amount))
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Withdrawal successful. New balance: {account.balance:.2f}")


@account_group.command("rename")
@click.argument("number", type=int, metavar="NUMBER")
@click.argument("new_name", metavar="NEW_NAME")
@click.pass_context
def rename_account(ctx, number: int, new_name: str):
    """Change an account holder's name.

    Examples:
        bankbook account rename 100 "Alice Jones"
    """
    try:
        _store(ctx).rename_account(number, new_name)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Renamed account {number} to '{new_name}'")


@account_group.command("delete")
@click.argument("number", type=int, metavar="NUMBER")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_account(ctx, number: int, yes: bool):
    """Delete an account.

    If several accounts share NUMBER, only the first one is deleted. The
    account's transaction log is kept.

    Examples:
        bankbook account delete 100
        bankbook account delete 100 --yes
    """
    store = _store(ctx)
    try:
        account = store.require_account(number)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not yes and not click.confirm(
        f"Are you sure you want to delete account {number} ('{account.name}')?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        store.delete_account(number)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted account {number}")


@account_group.command("find")
@click.argument("number", type=int, metavar="NUMBER")
@click.pass_context
def find_account(ctx, number: int):
    """Show one account."""
    try:
        account = _store(ctx).require_account(number)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(format_account_row(account))


@account_group.command("history")
@click.argument("number", type=int, metavar="NUMBER")
@click.option("--start-date", help="Only entries on or after this date (e.g., 2026-01-01, 'this month')")
@click.option("--end-date", help="Only entries on or before this date")
@click.pass_context
def history(ctx, number: int, start_date: str | None, end_date: str | None):
    """Show an account's deposits and withdrawals, oldest first.

    Examples:
        bankbook account history 100
        bankbook account history 100 --start-date "last month" --end-date today
    """
    store = _store(ctx)
    try:
        start = parse_date(start_date) if start_date else None
        end = parse_date(end_date) if end_date else None

        if start is None and end is None:
            lines = store.view_history(number)
        else:
            lines = [
                entry_to_log_line(entry)
                for entry in store.read_transactions(number)
                if (start is None or entry.timestamp.date() >= start)
                and (end is None or entry.timestamp.date() <= end)
            ]
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not lines:
        click.echo("No transactions in the selected range.")
        return
    for line in lines:
        click.echo(line)


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
