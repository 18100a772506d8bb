"""
Storage contract implemented by storage backends and their mocks.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from mock_storage.models.next_item import NextItem
from mock_storage.models.order import Order


class StorageIterator(ABC):
    """
    Cursor over the result of a range query.

    advance() is the only primitive; every call reports the gas it used,
    including the final call that finds no more items. Once exhausted an
    iterator stays exhausted.

    For convenience a StorageIterator is also a plain Python iterator over
    (key, value) pairs. Gas is dropped on that path.
    """

    @abstractmethod
    def advance(self) -> NextItem:
        """Return the next item, or an exhausted marker with its gas cost."""
        pass

    def elements(self) -> list[tuple[bytes, bytes]]:
        """Drain the iterator and return the remaining (key, value) pairs."""
        return list(self)

    def __iter__(self) -> Iterator[tuple[bytes, bytes]]:
        return self

    def __next__(self) -> tuple[bytes, bytes]:
        item = self.advance()
        if item.is_exhausted():
            raise StopIteration
        return item.kv


class ReadonlyStorage(ABC):
    """Read half of the storage contract."""

    @abstractmethod
    def get(self, key: bytes) -> tuple[bytes | None, int]:
        """
        Read a single key.

        Returns:
            (value or None if absent, gas used)
        """
        pass

    @abstractmethod
    def range(
        self,
        start: bytes | None,
        end: bytes | None,
        order: Order,
    ) -> tuple[StorageIterator, int]:
        """
        Iterate over the keys in [start, end).

        Args:
            start: Inclusive lower bound, or None for unbounded.
            end: Exclusive upper bound, or None for unbounded.
            order: Order.ASCENDING or Order.DESCENDING.

        Returns:
            (iterator, gas used to set up the range)
        """
        pass


class Storage(ReadonlyStorage):
    """Read-write storage contract."""

    @abstractmethod
    def set(self, key: bytes, value: bytes) -> int:
        """Insert or overwrite key. Returns gas used."""
        pass

    @abstractmethod
    def remove(self, key: bytes) -> int:
        """Delete key if present. Returns gas used."""
        pass
