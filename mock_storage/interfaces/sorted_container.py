"""
SortedContainer abstract base class for byte-keyed sorted mappings.
"""

from abc import abstractmethod

from mock_storage.interfaces.range_iterable import RangeIterable


class SortedContainer(RangeIterable):
    """
    Abstract base class for sorted key-value containers.

    Keys are ordered by unsigned byte-lexicographic comparison, which is
    exactly how Python compares bytes objects.

    Implementations:
    - RedBlackTree
    """

    @abstractmethod
    def put(self, key: bytes, value: bytes) -> None:
        """
        Insert or update a key-value pair.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def get(self, key: bytes) -> bytes | None:
        """
        Retrieve the value for a given key.

        Returns:
            The value if found, None otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def delete(self, key: bytes) -> bool:
        """
        Remove a key-value pair.

        Returns:
            True if the key was found and removed, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def has(self, key: bytes) -> bool:
        """Check if a key exists. O(log N)"""
        pass

    @abstractmethod
    def size(self) -> int:
        """Return the number of key-value pairs. O(1)"""
        pass
