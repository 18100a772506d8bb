"""
In-memory mock of an ordered key-value storage backend.

This package provides a deterministic stand-in for a real storage engine:
- get(key) - point read, returns (value, gas)
- set(key, value) - insert or overwrite, returns gas
- remove(key) - delete (no-op if absent), returns gas
- range(start, end, order) - half-open [start, end) iteration,
  ascending or descending, with gas reported per step
"""

from mock_storage.models.exceptions import InvalidKeyError, InvalidValueError, StorageError
from mock_storage.models.gas import GasConfig
from mock_storage.models.next_item import NextItem
from mock_storage.models.order import Order
from mock_storage.storage import MockIterator, MockStorage

__all__ = [
    "GasConfig",
    "InvalidKeyError",
    "InvalidValueError",
    "MockIterator",
    "MockStorage",
    "NextItem",
    "Order",
    "StorageError",
]
