"""
RangeIterable protocol for containers that support ordered range iteration.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator

from mock_storage.models.order import Order


class RangeIterable(ABC):
    """
    Protocol for data structures that can be walked over a key range.

    Implementations must support:
    - Full ascending iteration via __iter__
    - Bounded iteration in either direction via iterator(start, end, order)
    - Async iteration via __aiter__ and async_iterator(start, end, order)

    Bounds follow half-open semantics: start is inclusive, end is exclusive,
    and None leaves that side unbounded.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[tuple[bytes, bytes]]:
        """Return an iterator over all key-value pairs in ascending order."""
        pass

    @abstractmethod
    def iterator(
        self,
        start: bytes | None = None,
        end: bytes | None = None,
        order: Order = Order.ASCENDING,
    ) -> Iterator[tuple[bytes, bytes]]:
        """
        Return an iterator over key-value pairs in [start, end).

        Args:
            start: Start key (inclusive). If None, no lower bound.
            end: End key (exclusive). If None, no upper bound.
            order: Direction of traversal.

        Returns:
            Iterator yielding (key, value) tuples in the requested order.
        """
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[tuple[bytes, bytes]]:
        """Return an async iterator over all key-value pairs in ascending order."""
        pass

    @abstractmethod
    def async_iterator(
        self,
        start: bytes | None = None,
        end: bytes | None = None,
        order: Order = Order.ASCENDING,
    ) -> AsyncIterator[tuple[bytes, bytes]]:
        """
        Return an async iterator over key-value pairs in [start, end).

        Same bound and order rules as iterator().
        """
        pass
