"""Main CLI entry point."""

import click

from bankbook.cli.commands import account
from bankbook.cli.error_handling import handle_domain_error
from bankbook.cli.menu import run_menu
from bankbook.domain.account import AccountStore
from bankbook.domain.errors import DomainError
from bankbook.logging_config import setup_logging
from bankbook.storage.factories import create_flat_file_storage


@click.group(invoke_without_command=True)
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    help="Directory for the account file and transaction logs (overrides BANKBOOK_DATA_DIR environment variable)",
    envvar="BANKBOOK_DATA_DIR",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="BANKBOOK_LOG_LEVEL",
    help="Diagnostic logging level (written to stderr)",
)
@click.pass_context
def cli(ctx, data_dir: str | None, log_level: str):
    """Bankbook - Bank account management.

    Run without a command to start the interactive menu.
    """
    ctx.ensure_object(dict)
    setup_logging(log_level)

    store = AccountStore(create_flat_file_storage(data_dir=data_dir))
    try:
        store.load()
    except DomainError as e:
        handle_domain_error(ctx, e)
    ctx.obj["store"] = store

    if ctx.invoked_subcommand is None:
        run_menu(store)


# Register all commands
account.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
