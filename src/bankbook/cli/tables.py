"""Plain text rendering of accounts for the terminal."""

from bankbook.domain.entities import Account

NUMBER_WIDTH = 15
NAME_WIDTH = 20


def account_table_header() -> list[str]:
    """Return the header and rule lines of the account table."""
    return [
        f"{'Account No':<{NUMBER_WIDTH}}{'Name':<{NAME_WIDTH}}Balance",
        "-" * 50,
    ]


def format_account_row(account: Account) -> str:
    """Render one account as a table row, balance to two decimals."""
    return (
        f"{account.account_number:<{NUMBER_WIDTH}}"
        f"{account.name:<{NAME_WIDTH}}"
        f"{account.balance:.2f}"
    )


def format_account_table(accounts: list[Account]) -> list[str]:
    """Render accounts as table lines in the given order."""
    return account_table_header() + [format_account_row(acc) for acc in accounts]
