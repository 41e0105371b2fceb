"""Shared pytest fixtures for bankbook tests."""

from datetime import datetime
from decimal import Decimal

import pytest

from bankbook.domain.account import AccountStore
from bankbook.storage.factories import create_flat_file_storage


@pytest.fixture
def data_dir(tmp_path):
    """Create a temporary data directory for testing."""
    path = tmp_path / "bankbook"
    path.mkdir()
    return path


@pytest.fixture
def storage(data_dir):
    """Create a FlatFileStorage in the temporary data directory."""
    return create_flat_file_storage(data_dir=str(data_dir))


@pytest.fixture
def store(storage):
    """Create an empty, loaded AccountStore."""
    account_store = AccountStore(storage)
    account_store.load()
    return account_store


@pytest.fixture
def fixed_now(monkeypatch):
    """Pin the timestamp used for transaction log entries."""
    moment = datetime(2026, 3, 14, 9, 26, 53)
    monkeypatch.setattr("bankbook.domain.account._now", lambda: moment)
    return moment


@pytest.fixture
def sample_accounts(store):
    """Create three sample accounts."""
    store.create_account(100, "Alice Smith", Decimal("50.00"))
    store.create_account(200, "Bob", Decimal("10.00"))
    store.create_account(300, "Carol Ann Lee", Decimal("0"))
    return store.list_accounts()


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
