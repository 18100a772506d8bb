"""
Iteration order for range queries.
"""

from enum import IntEnum


class Order(IntEnum):
    """Direction of a range traversal, encoded as the backend encodes it."""

    ASCENDING = 1
    DESCENDING = 2
