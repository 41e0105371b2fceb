"""Abstract storage interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from bankbook.domain.entities import Account, TransactionEntry


class Storage(ABC):
    """Abstract persistence interface for the account store."""

    @abstractmethod
    def load_accounts(self) -> list[Account]:
        """Load all accounts in stored order. A missing store loads as empty."""
        pass

    @abstractmethod
    def save_accounts(self, accounts: list[Account]) -> None:
        """Replace the stored accounts with the given sequence."""
        pass

    @abstractmethod
    def append_transaction(self, account_number: int, entry: TransactionEntry) -> None:
        """Append one entry to the account's transaction log."""
        pass

    @abstractmethod
    def read_history(self, account_number: int) -> Optional[list[str]]:
        """Read the account's transaction log lines in append order.

        Returns None if the account has no log.
        """
        pass
