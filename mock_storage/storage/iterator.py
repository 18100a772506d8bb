"""
MockIterator - StorageIterator over a fixed sequence of entries.
"""

import logging
from collections.abc import Iterable

from mock_storage.interfaces.storage import StorageIterator
from mock_storage.models.gas import GasConfig
from mock_storage.models.next_item import NextItem


class MockIterator(StorageIterator):
    """
    Storage iterator fed by an in-memory sequence of (key, value) pairs.

    Gas for each yielded pair is computed when the pair is yielded. The
    source carries no cost for the final probe, so exhaustion is charged
    the flat GasConfig.iterator_exhausted price on every call.
    """

    def __init__(
        self,
        entries: Iterable[tuple[bytes, bytes]],
        gas_config: GasConfig | None = None,
    ) -> None:
        """
        Initialize MockIterator.

        Args:
            entries: Pairs to yield, already filtered and ordered.
            gas_config: Prices used for per-step and exhaustion gas.
        """
        self._source = iter(entries)
        self._gas = gas_config or GasConfig()
        self._exhausted = False

    @classmethod
    def empty(cls, gas_config: GasConfig | None = None) -> "MockIterator":
        """Return an iterator that is exhausted from the start."""
        iterator = cls((), gas_config)
        iterator._exhausted = True
        return iterator

    @property
    def is_exhausted(self) -> bool:
        return self._exhausted

    def advance(self) -> NextItem:
        if self._exhausted:
            return NextItem.exhausted(self._gas.iterator_exhausted)

        try:
            key, value = next(self._source)
        except StopIteration:
            self._exhausted = True
            logging.debug("Range iterator exhausted")
            return NextItem.exhausted(self._gas.iterator_exhausted)

        return NextItem.item(key, value, self._gas.step_cost(key, value))
