"""Shared domain error messages and error types."""

from decimal import Decimal


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid operator input."""


class NotFoundError(DomainError):
    """No account with the requested number exists."""


class ConflictError(DomainError):
    """Domain conflict, such as an account number already in use."""


class InsufficientFundsError(DomainError):
    """Withdrawal amount exceeds the account balance."""


class NoHistoryError(DomainError):
    """No transaction log exists for the account."""


class StorageError(DomainError):
    """Store or log file could not be read or written."""


def account_not_found(account_number: int) -> str:
    """Return message for missing account."""
    return f"Account {account_number} not found"


def duplicate_account_number(account_number: int) -> str:
    """Return message for an account number that is already taken."""
    return f"Account {account_number} already exists"


def insufficient_funds(account_number: int, balance: Decimal, amount: Decimal) -> str:
    """Return message for a withdrawal the balance does not cover."""
    return (
        f"Insufficient balance in account {account_number}: "
        f"balance {balance:.2f}, requested {amount:.2f}"
    )


def no_history(account_number: int) -> str:
    """Return message for an account without a transaction log."""
    return f"No transaction history for account {account_number}"


def invalid_holder_name(name: str) -> str:
    """Return message for a blank or multi-line holder name."""
    return f"Invalid account holder name {name!r}: must be non-blank and on one line"
