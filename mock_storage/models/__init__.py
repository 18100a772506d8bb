"""
Data models for the mock storage.
"""

from mock_storage.models.exceptions import InvalidKeyError, InvalidValueError, StorageError
from mock_storage.models.gas import GasConfig
from mock_storage.models.next_item import NextItem
from mock_storage.models.order import Order

__all__ = [
    "GasConfig",
    "InvalidKeyError",
    "InvalidValueError",
    "NextItem",
    "Order",
    "StorageError",
]
