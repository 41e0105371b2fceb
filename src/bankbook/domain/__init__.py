"""Domain layer for bankbook application."""

from bankbook.domain.account import AccountStore
from bankbook.domain.entities import Account, TransactionEntry, TransactionKind

__all__ = [
    "AccountStore",
    "Account",
    "TransactionEntry",
    "TransactionKind",
]
