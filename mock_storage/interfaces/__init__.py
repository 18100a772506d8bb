"""
Abstract base classes for the storage contract and sorted containers.
"""

from mock_storage.interfaces.range_iterable import RangeIterable
from mock_storage.interfaces.sorted_container import SortedContainer
from mock_storage.interfaces.storage import ReadonlyStorage, Storage, StorageIterator

__all__ = [
    "RangeIterable",
    "ReadonlyStorage",
    "SortedContainer",
    "Storage",
    "StorageIterator",
]
