"""
MockStorage - deterministic in-memory implementation of the Storage contract.
"""

import logging
from collections.abc import Iterator
from typing import Any

from mock_storage.interfaces.sorted_container import SortedContainer
from mock_storage.interfaces.storage import Storage, StorageIterator
from mock_storage.models.exceptions import InvalidKeyError, InvalidValueError
from mock_storage.models.gas import GasConfig
from mock_storage.models.order import Order
from mock_storage.models.sortedcontainers import RedBlackTree
from mock_storage.storage.iterator import MockIterator

_BYTES_LIKE = (bytes, bytearray, memoryview)


def _as_key(key: Any) -> bytes:
    if not isinstance(key, _BYTES_LIKE):
        raise InvalidKeyError(key)
    return bytes(key)


def _as_value(value: Any) -> bytes:
    if not isinstance(value, _BYTES_LIKE):
        raise InvalidValueError(value)
    return bytes(value)


class MockStorage(Storage):
    """
    In-memory storage backed by a SortedContainer.

    Supports:
    - O(log N) get, set, remove, each reporting gas
    - Half-open range queries in ascending or descending order
    - Plain ascending iteration over every entry (no gas)

    Not thread-safe; callers sharing an instance across threads must lock
    around it.
    """

    def __init__(
        self,
        gas_config: GasConfig | None = None,
        sorted_container: SortedContainer | None = None,
    ) -> None:
        """
        Initialize MockStorage.

        Args:
            gas_config: Gas prices. Defaults to GasConfig().
            sorted_container: Empty backing sorted data structure.
                Defaults to a new RedBlackTree.
        """
        if gas_config is not None and not isinstance(gas_config, GasConfig):
            raise ValueError(
                f"gas_config must be a GasConfig, got {type(gas_config).__name__}"
            )
        container = sorted_container if sorted_container is not None else RedBlackTree()
        if container.size() != 0:
            raise ValueError("sorted_container must be empty")

        self._gas = gas_config or GasConfig()
        self._container = container

    @property
    def gas_config(self) -> GasConfig:
        return self._gas

    def get(self, key: bytes) -> tuple[bytes | None, int]:
        key = _as_key(key)
        return self._container.get(key), self._gas.read_cost(key)

    def set(self, key: bytes, value: bytes) -> int:
        key = _as_key(key)
        value = _as_value(value)
        self._container.put(key, value)
        return self._gas.write_cost(key, value)

    def remove(self, key: bytes) -> int:
        key = _as_key(key)
        self._container.delete(key)
        return self._gas.remove_cost(key)

    def range(
        self,
        start: bytes | None = None,
        end: bytes | None = None,
        order: Order = Order.ASCENDING,
    ) -> tuple[StorageIterator, int]:
        """
        Iterate over [start, end) in the given order.

        An empty or inverted interval (start >= end) yields nothing. The
        matching entries are snapshotted here, so writes made while the
        iterator is being consumed are not observed by it.

        Args:
            start: Inclusive lower bound, or None for unbounded.
            end: Exclusive upper bound, or None for unbounded.
            order: Order.ASCENDING or Order.DESCENDING (or 1 / 2).

        Returns:
            (iterator, range setup gas)

        Raises:
            ValueError: If order is not a valid Order.
        """
        order = Order(order)
        start = _as_key(start) if start is not None else None
        end = _as_key(end) if end is not None else None
        setup_gas = self._gas.range_setup

        if start is not None and end is not None and start >= end:
            logging.debug(f"Empty range requested: start={start!r} end={end!r}")
            return MockIterator.empty(self._gas), setup_gas

        entries = list(self._container.iterator(start, end, order))
        return MockIterator(entries, self._gas), setup_gas

    def has(self, key: bytes) -> bool:
        return self._container.has(_as_key(key))

    def size(self) -> int:
        return self._container.size()

    def __len__(self) -> int:
        return self._container.size()

    def __iter__(self) -> Iterator[tuple[bytes, bytes]]:
        return iter(self._container)

    def __repr__(self) -> str:
        return f"MockStorage(size={self.size()}, gas_config={self._gas!r})"
