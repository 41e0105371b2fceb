"""Mapper functions to convert between domain entities and their text form.

Store records are three lines each (number, name, balance); log entries are
single lines of the form ``<timestamp> - <kind>: <amount>``.
"""

from datetime import datetime
from decimal import Decimal, InvalidOperation

from bankbook.domain import entities as domain

LOG_SEPARATOR = " - "


def account_to_lines(account: domain.Account) -> list[str]:
    """Convert an Account to its three store-file lines."""
    return [str(account.account_number), account.name, str(account.balance)]


def lines_to_account(number_line: str, name_line: str, balance_line: str) -> domain.Account:
    """Convert three store-file lines back to an Account.

    Raises:
        ValueError: If the number or balance line cannot be parsed
    """
    try:
        account_number = int(number_line.strip())
    except ValueError:
        raise ValueError(f"invalid account number '{number_line.strip()}'")
    try:
        balance = Decimal(balance_line.strip())
    except InvalidOperation:
        raise ValueError(f"invalid balance '{balance_line.strip()}'")
    if not balance.is_finite():
        raise ValueError(f"invalid balance '{balance_line.strip()}'")
    return domain.Account(account_number=account_number, name=name_line, balance=balance)


def entry_to_log_line(entry: domain.TransactionEntry) -> str:
    """Convert a TransactionEntry to a log line (without newline)."""
    timestamp = entry.timestamp.isoformat(timespec="seconds")
    return f"{timestamp}{LOG_SEPARATOR}{entry.kind.value}: {entry.amount:.2f}"


def log_line_to_entry(line: str) -> domain.TransactionEntry:
    """Convert a log line back to a TransactionEntry.

    Raises:
        ValueError: If the line does not match the log format
    """
    timestamp_str, sep, rest = line.strip().partition(LOG_SEPARATOR)
    kind_str, colon, amount_str = rest.partition(": ")
    if not sep or not colon:
        raise ValueError(f"malformed log line '{line.strip()}'")
    try:
        return domain.TransactionEntry(
            timestamp=datetime.fromisoformat(timestamp_str),
            kind=domain.TransactionKind(kind_str),
            amount=Decimal(amount_str),
        )
    except (ValueError, InvalidOperation) as e:
        raise ValueError(f"malformed log line '{line.strip()}': {e}")
