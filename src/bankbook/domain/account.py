"""Account store domain service."""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from bankbook.domain.entities import Account, TransactionEntry, TransactionKind
from bankbook.domain.errors import (
    ConflictError,
    InsufficientFundsError,
    NoHistoryError,
    NotFoundError,
    StorageError,
    ValidationError,
    account_not_found,
    duplicate_account_number,
    insufficient_funds,
    invalid_holder_name,
    no_history,
)
from bankbook.storage.mappers import log_line_to_entry

if TYPE_CHECKING:
    from bankbook.storage.base import Storage

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now().replace(microsecond=0)


def _check_name(name: str) -> None:
    # Each name occupies exactly one line of the store file
    if not name.strip() or "\n" in name or "\r" in name:
        raise ValidationError(invalid_holder_name(name))


class AccountStore:
    """Ordered, in-memory collection of accounts backed by a Storage.

    Every mutating operation rewrites the whole store through the storage
    before returning. Lookups scan in insertion order and act on the first
    account with a matching number.
    """

    def __init__(self, storage: Storage):
        """Initialize account store.

        Args:
            storage: Storage used for the store file and transaction logs
        """
        self.storage = storage
        self._accounts: list[Account] = []

    def load(self) -> None:
        """Replace the in-memory accounts with the persisted ones.

        Raises:
            StorageError: If the store file cannot be read or parsed
        """
        self._accounts = self.storage.load_accounts()

        seen: set[int] = set()
        for account in self._accounts:
            if account.account_number in seen:
                logger.warning(
                    "Duplicate account number %d in store; the first one is used",
                    account.account_number,
                )
            seen.add(account.account_number)

    def save(self) -> None:
        """Persist the current accounts.

        Raises:
            StorageError: If the store file cannot be written
        """
        self.storage.save_accounts(self._accounts)

    def create_account(self, account_number: int, name: str, balance: Decimal) -> Account:
        """Create a new account at the end of the store.

        Args:
            account_number: Account number
            name: Holder name
            balance: Initial balance

        Returns:
            The created account

        Raises:
            ValidationError: If the name is blank or spans several lines
            ConflictError: If an account with the same number exists
            StorageError: If the store cannot be saved
        """
        _check_name(name)
        if self.find_by_number(account_number) is not None:
            raise ConflictError(duplicate_account_number(account_number))

        account = Account(account_number=account_number, name=name, balance=balance)
        self._accounts.append(account)
        self.save()
        logger.info("Created account %d", account_number)
        return account

    def list_accounts(self) -> list[Account]:
        """List all accounts in store order."""
        return list(self._accounts)

    def find_by_number(self, account_number: int) -> Optional[Account]:
        """Get the first account with the given number, or None."""
        for account in self._accounts:
            if account.account_number == account_number:
                return account
        return None

    def require_account(self, account_number: int) -> Account:
        """Get the first account with the given number.

        Raises:
            NotFoundError: If no account has that number
        """
        account = self.find_by_number(account_number)
        if account is None:
            raise NotFoundError(account_not_found(account_number))
        return account

    def deposit(self, account_number: int, amount: Decimal) -> Account:
        """Deposit an amount and log it.

        The amount is not validated; negative and zero deposits are applied
        as given.

        Raises:
            NotFoundError: If the account does not exist
            StorageError: If the store or log cannot be written
        """
        account = self.require_account(account_number)
        account.deposit(amount)
        self.save()
        self._log(account_number, TransactionKind.DEPOSIT, amount)
        logger.info("Deposited %s into account %d", amount, account_number)
        return account

    def withdraw(self, account_number: int, amount: Decimal) -> Account:
        """Withdraw an amount and log it.

        Raises:
            NotFoundError: If the account does not exist
            InsufficientFundsError: If the balance is lower than amount; the
                store is neither saved nor logged
            StorageError: If the store or log cannot be written
        """
        account = self.require_account(account_number)
        if not account.withdraw(amount):
            raise InsufficientFundsError(
                insufficient_funds(account_number, account.balance, amount)
            )
        self.save()
        self._log(account_number, TransactionKind.WITHDRAWAL, amount)
        logger.info("Withdrew %s from account %d", amount, account_number)
        return account

    def rename_account(self, account_number: int, name: str) -> Account:
        """Replace an account's holder name.

        Raises:
            NotFoundError: If the account does not exist
            ValidationError: If the name is blank or spans several lines
            StorageError: If the store cannot be saved
        """
        account = self.require_account(account_number)
        _check_name(name)
        account.rename(name)
        self.save()
        logger.info("Renamed account %d", account_number)
        return account

    def delete_account(self, account_number: int) -> Account:
        """Remove the first account with the given number.

        The account's transaction log is left in place.

        Raises:
            NotFoundError: If the account does not exist
            StorageError: If the store cannot be saved
        """
        account = self.require_account(account_number)
        self._accounts.remove(account)
        self.save()
        logger.info("Deleted account %d", account_number)
        return account

    def view_history(self, account_number: int) -> list[str]:
        """Get the account's transaction log lines, oldest first.

        The log is read from storage on every call and does not require the
        account to still exist.

        Raises:
            NoHistoryError: If the account has no transaction log
        """
        lines = self.storage.read_history(account_number)
        if lines is None:
            raise NoHistoryError(no_history(account_number))
        return lines

    def read_transactions(self, account_number: int) -> list[TransactionEntry]:
        """Get the account's transaction log as parsed entries.

        Raises:
            NoHistoryError: If the account has no transaction log
            StorageError: If a log line cannot be parsed
        """
        entries = []
        for line in self.view_history(account_number):
            if not line.strip():
                continue
            try:
                entries.append(log_line_to_entry(line))
            except ValueError as e:
                raise StorageError(f"Transaction log for account {account_number}: {e}") from e
        return entries

    def _log(self, account_number: int, kind: TransactionKind, amount: Decimal) -> None:
        entry = TransactionEntry(timestamp=_now(), kind=kind, amount=amount)
        self.storage.append_transaction(account_number, entry)
