"""
Shared pytest fixtures for mock storage tests.
"""

import pytest

from mock_storage.models.gas import GasConfig
from mock_storage.models.sortedcontainers import RedBlackTree
from mock_storage.storage import MockStorage


@pytest.fixture
def tree():
    """Provide a fresh RedBlackTree instance."""
    return RedBlackTree()


@pytest.fixture
def storage():
    """Provide an empty MockStorage with default gas prices."""
    return MockStorage()


@pytest.fixture
def scenario_storage():
    """
    Provide a storage holding ant=hill, foo=bar, ze=bra.

    A removed key is left behind as noise that must not show up in ranges.
    """
    store = MockStorage()
    store.set(b"foo", b"bar")
    store.set(b"ant", b"hill")
    store.set(b"ze", b"bra")
    store.set(b"bye", b"bye")
    store.remove(b"bye")
    return store


@pytest.fixture
def custom_gas():
    """Provide non-default gas prices."""
    return GasConfig(range_setup=5, iterator_exhausted=2, per_key_byte=3, per_value_byte=10)


@pytest.fixture
def large_sample_entries():
    """Provide larger sample for stress testing."""
    return [(f"key{i:04d}".encode(), f"value{i}".encode()) for i in range(1000)]
