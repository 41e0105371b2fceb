"""Storage layer for bankbook application."""

from bankbook.storage.base import Storage
from bankbook.storage.factories import create_flat_file_storage
from bankbook.storage.flat_file import FlatFileStorage

__all__ = ["Storage", "FlatFileStorage", "create_flat_file_storage"]
