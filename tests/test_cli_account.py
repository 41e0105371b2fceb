"""Tests for account commands."""

from datetime import datetime
from decimal import Decimal

import pytest

from bankbook.cli.main import cli
from bankbook.domain.entities import TransactionEntry, TransactionKind


def _run(cli_runner, data_dir, *args, **kwargs):
    return cli_runner.invoke(cli, ["--data-dir", str(data_dir), *args], **kwargs)


def test_create_and_list(cli_runner, data_dir):
    result = _run(cli_runner, data_dir, "account", "create", "100", "Alice Smith", "--balance", "50.00")
    assert result.exit_code == 0
    assert "Created account 100 for 'Alice Smith'" in result.output

    result = _run(cli_runner, data_dir, "account", "list")
    assert result.exit_code == 0
    assert "Account No" in result.output
    assert "Alice Smith" in result.output
    assert "50.00" in result.output


def test_list_empty(cli_runner, data_dir):
    result = _run(cli_runner, data_dir, "account", "list")
    assert result.exit_code == 0
    assert "No accounts to display." in result.output


def test_create_duplicate(cli_runner, data_dir):
    _run(cli_runner, data_dir, "account", "create", "100", "Alice")
    result = _run(cli_runner, data_dir, "account", "create", "100", "Bob")
    assert result.exit_code == 1
    assert "already exists" in result.output


def test_create_invalid_balance(cli_runner, data_dir):
    result = _run(cli_runner, data_dir, "account", "create", "100", "Alice", "--balance", "lots")
    assert result.exit_code == 1
    assert "Could not parse amount" in result.output


def test_data_dir_from_environment(cli_runner, data_dir, monkeypatch):
    monkeypatch.setenv("BANKBOOK_DATA_DIR", str(data_dir))
    result = cli_runner.invoke(cli, ["account", "create", "1", "Env User"])
    assert result.exit_code == 0
    assert (data_dir / "accounts.txt").exists()


def test_deposit_and_withdraw(cli_runner, data_dir):
    _run(cli_runner, data_dir, "account", "create", "100", "Alice", "--balance", "50.00")

    result = _run(cli_runner, data_dir, "account", "deposit", "100", "--amount", "25.00")
    assert result.exit_code == 0
    assert "New balance: 75.00" in result.output

    result = _run(cli_runner, data_dir, "account", "withdraw", "100", "--amount", "-5")
    assert result.exit_code == 0
    assert "New balance: 80.00" in result.output


def test_withdraw_insufficient(cli_runner, data_dir):
    _run(cli_runner, data_dir, "account", "create", "200", "Bob", "--balance", "10.00")
    result = _run(cli_runner, data_dir, "account", "withdraw", "200", "--amount", "50.00")
    assert result.exit_code == 1
    assert "Insufficient balance" in result.output
    assert not (data_dir / "txn_200.log").exists()


def test_deposit_missing_account(cli_runner, data_dir):
    result = _run(cli_runner, data_dir, "account", "deposit", "999", "--amount", "1")
    assert result.exit_code == 1
    assert "Account 999 not found" in result.output


def test_rename_and_find(cli_runner, data_dir):
    _run(cli_runner, data_dir, "account", "create", "100", "Alice")
    result = _run(cli_runner, data_dir, "account", "rename", "100", "Alice B. Jones")
    assert result.exit_code == 0

    result = _run(cli_runner, data_dir, "account", "find", "100")
    assert result.exit_code == 0
    assert "Alice B. Jones" in result.output


def test_find_missing(cli_runner, data_dir):
    result = _run(cli_runner, data_dir, "account", "find", "999")
    assert result.exit_code == 1
    assert "Account 999 not found" in result.output


def test_delete_with_confirmation(cli_runner, data_dir):
    _run(cli_runner, data_dir, "account", "create", "100", "Alice")
    result = _run(cli_runner, data_dir, "account", "delete", "100", input="y\n")
    assert result.exit_code == 0
    assert "Deleted account 100" in result.output

    result = _run(cli_runner, data_dir, "account", "list")
    assert "No accounts to display." in result.output


def test_delete_cancelled(cli_runner, data_dir):
    _run(cli_runner, data_dir, "account", "create", "100", "Alice")
    result = _run(cli_runner, data_dir, "account", "delete", "100", input="n\n")
    assert result.exit_code == 0
    assert "Deletion cancelled." in result.output
    assert "Alice" in (data_dir / "accounts.txt").read_text(encoding="utf-8")


def test_delete_missing(cli_runner, data_dir):
    result = _run(cli_runner, data_dir, "account", "delete", "999", "--yes")
    assert result.exit_code == 1
    assert "Account 999 not found" in result.output


def test_history(cli_runner, data_dir):
    _run(cli_runner, data_dir, "account", "create", "100", "Alice", "--balance", "50")
    _run(cli_runner, data_dir, "account", "deposit", "100", "--amount", "25")

    result = _run(cli_runner, data_dir, "account", "history", "100")
    assert result.exit_code == 0
    assert "Deposit: 25.00" in result.output


def test_history_missing(cli_runner, data_dir):
    result = _run(cli_runner, data_dir, "account", "history", "100")
    assert result.exit_code == 1
    assert "No transaction history for account 100" in result.output


def test_history_date_filter(cli_runner, data_dir, storage):
    storage.append_transaction(
        100,
        TransactionEntry(datetime(2026, 1, 5, 8, 0, 0), TransactionKind.DEPOSIT, Decimal("10")),
    )
    storage.append_transaction(
        100,
        TransactionEntry(datetime(2026, 2, 5, 8, 0, 0), TransactionKind.WITHDRAWAL, Decimal("4")),
    )

    result = _run(
        cli_runner, data_dir, "account", "history", "100",
        "--start-date", "2026-02-01", "--end-date", "2026-02-28",
    )
    assert result.exit_code == 0
    assert "Withdrawal: 4.00" in result.output
    assert "Deposit" not in result.output

    result = _run(cli_runner, data_dir, "account", "history", "100", "--end-date", "2025-12-31")
    assert result.exit_code == 0
    assert "No transactions in the selected range." in result.output


def test_history_invalid_date(cli_runner, data_dir):
    result = _run(cli_runner, data_dir, "account", "history", "100", "--start-date", "whenever")
    assert result.exit_code == 1
    assert "Could not parse date" in result.output


def test_malformed_store_file(cli_runner, data_dir):
    (data_dir / "accounts.txt").write_text("100\nAlice\n", encoding="utf-8")
    result = _run(cli_runner, data_dir, "account", "list")
    assert result.exit_code == 1
    assert "ends inside a record" in result.output


def test_create_multiline_name_keeps_store_usable(cli_runner, data_dir):
    result = _run(cli_runner, data_dir, "account", "create", "1", "Ann\nLee")
    assert result.exit_code == 1
    assert "Invalid account holder name" in result.output

    result = _run(cli_runner, data_dir, "account", "list")
    assert result.exit_code == 0
    assert "No accounts to display." in result.output


def test_rename_multiline_name_rejected(cli_runner, data_dir):
    _run(cli_runner, data_dir, "account", "create", "1", "Ann")
    result = _run(cli_runner, data_dir, "account", "rename", "1", "Ann\r\nLee")
    assert result.exit_code == 1
    assert "Invalid account holder name" in result.output

    result = _run(cli_runner, data_dir, "account", "find", "1")
    assert result.exit_code == 0
    assert "Ann" in result.output


def test_amount_is_given_as_option(cli_runner, data_dir):
    _run(cli_runner, data_dir, "account", "create", "1", "Ann", "--balance", "10")

    result = _run(cli_runner, data_dir, "account", "deposit", "1", "--amount", "-2.5")
    assert result.exit_code == 0
    assert "New balance: 7.50" in result.output

    for command in ("deposit", "withdraw"):
        result = _run(cli_runner, data_dir, "account", command, "1", "5")
        assert result.exit_code == 2
        assert "--amount" in result.output
