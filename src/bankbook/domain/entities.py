"""Domain model entities for bankbook.

Accounts are mutated in place by the store, so unlike the log entries they are
not frozen.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class TransactionKind(str, Enum):
    """Kind of a logged balance change."""

    DEPOSIT = "Deposit"
    WITHDRAWAL = "Withdrawal"


@dataclass
class Account:
    """Bank account domain entity."""

    account_number: int
    name: str
    balance: Decimal

    def deposit(self, amount: Decimal) -> None:
        """Add amount to the balance. Any amount is accepted."""
        self.balance += amount

    def withdraw(self, amount: Decimal) -> bool:
        """Subtract amount from the balance if it is covered.

        Returns:
            True if the balance was reduced, False if it was insufficient
        """
        if self.balance >= amount:
            self.balance -= amount
            return True
        return False

    def rename(self, new_name: str) -> None:
        """Replace the holder name."""
        self.name = new_name


@dataclass(frozen=True)
class TransactionEntry:
    """One line of an account's transaction log."""

    timestamp: datetime
    kind: TransactionKind
    amount: Decimal
