"""
In-memory storage backend and its range iterator.
"""

from mock_storage.storage.iterator import MockIterator
from mock_storage.storage.mock_storage import MockStorage

__all__ = ["MockIterator", "MockStorage"]
