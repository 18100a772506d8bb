"""
Sorted container implementations for the mock storage.
"""

from mock_storage.models.sortedcontainers.red_black_tree import RedBlackTree

__all__ = ["RedBlackTree"]
