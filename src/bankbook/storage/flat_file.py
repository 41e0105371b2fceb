"""Flat text file implementation of the storage interface."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from bankbook.domain.entities import Account, TransactionEntry
from bankbook.domain.errors import StorageError
from bankbook.storage.base import Storage
from bankbook.storage.mappers import (
    account_to_lines,
    entry_to_log_line,
    lines_to_account,
)

logger = logging.getLogger(__name__)

STORE_FILENAME = "accounts.txt"
LINES_PER_RECORD = 3


class FlatFileStorage(Storage):
    """Stores accounts in one text file and logs in one file per account."""

    def __init__(self, data_dir: str | Path):
        """Initialize flat file storage.

        Args:
            data_dir: Directory holding the store file and transaction logs
        """
        self.data_dir = Path(data_dir)
        self.store_path = self.data_dir / STORE_FILENAME

    def log_path(self, account_number: int) -> Path:
        """Return the transaction log path for an account."""
        return self.data_dir / f"txn_{account_number}.log"

    def load_accounts(self) -> list[Account]:
        """Load accounts from the store file.

        Lines may end in LF or CRLF; a trailing carriage return is dropped
        from every line, names included. Holder names never contain CR or LF
        since the store rejects them on create and rename.
        """
        try:
            with open(self.store_path, encoding="utf-8", newline="") as f:
                content = f.read()
        except FileNotFoundError:
            logger.debug("No store file at %s, starting empty", self.store_path)
            return []
        except OSError as e:
            raise StorageError(f"Could not read {self.store_path}: {e}") from e

        lines = [line.rstrip("\r") for line in content.split("\n")]
        while lines and not lines[-1].strip():
            lines.pop()

        if len(lines) % LINES_PER_RECORD != 0:
            raise StorageError(
                f"{self.store_path} ends inside a record "
                f"(line {len(lines) - len(lines) % LINES_PER_RECORD + 1})"
            )

        accounts = []
        for start in range(0, len(lines), LINES_PER_RECORD):
            try:
                account = lines_to_account(*lines[start:start + LINES_PER_RECORD])
            except ValueError as e:
                raise StorageError(
                    f"{self.store_path}: record at line {start + 1}: {e}"
                ) from e
            accounts.append(account)

        logger.debug("Loaded %d accounts from %s", len(accounts), self.store_path)
        return accounts

    def save_accounts(self, accounts: list[Account]) -> None:
        # Write to a temporary file in the same directory, then swap it in
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=".accounts.", suffix=".tmp", dir=self.data_dir
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                    for account in accounts:
                        f.write("\n".join(account_to_lines(account)) + "\n")
                os.replace(tmp_path, self.store_path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            raise StorageError(f"Could not save accounts to {self.store_path}: {e}") from e

        logger.debug("Saved %d accounts to %s", len(accounts), self.store_path)

    def append_transaction(self, account_number: int, entry: TransactionEntry) -> None:
        path = self.log_path(account_number)
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            with open(path, "a", encoding="utf-8", newline="\n") as f:
                f.write(entry_to_log_line(entry) + "\n")
        except OSError as e:
            raise StorageError(f"Could not append to {path}: {e}") from e

        logger.debug("Appended %s entry to %s", entry.kind.value, path)

    def read_history(self, account_number: int) -> Optional[list[str]]:
        path = self.log_path(account_number)
        try:
            with open(path, encoding="utf-8") as f:
                return [line.rstrip("\n") for line in f]
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageError(f"Could not read {path}: {e}") from e
