"""Storage factory functions for creating storage instances."""

import os
from pathlib import Path
from typing import Optional

from bankbook.storage.flat_file import FlatFileStorage


def create_flat_file_storage(data_dir: Optional[str] = None) -> FlatFileStorage:
    """Create a flat file storage instance.

    Args:
        data_dir: Directory for the store file and transaction logs. If None,
            checks BANKBOOK_DATA_DIR environment variable, then defaults to
            ~/.bankbook

    Returns:
        FlatFileStorage instance
    """
    if data_dir is None:
        # Check environment variable
        data_dir = os.environ.get("BANKBOOK_DATA_DIR")

    if data_dir is None:
        # Default to ~/.bankbook
        home = Path.home()
        default_dir = home / ".bankbook"
        default_dir.mkdir(exist_ok=True)
        data_dir = str(default_dir)

    return FlatFileStorage(data_dir)
