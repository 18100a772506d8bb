"""
Gas cost model for the mock storage.

The numbers are placeholders, not a model of any real backend. They only
need to be stable so tests can assert exact values:

- get / remove: key length
- set / iteration step: key length + value length
- range setup: 11
- exhausted iterator probe: 37
"""

from dataclasses import dataclass, fields

DEFAULT_RANGE_SETUP_GAS = 11
DEFAULT_ITERATOR_EXHAUSTED_GAS = 37


@dataclass(frozen=True)
class GasConfig:
    """
    Deterministic gas prices.

    Attributes:
        range_setup: Flat cost of opening a range iterator.
        iterator_exhausted: Flat cost of each advance() past the last item.
        per_key_byte: Cost per byte of key touched.
        per_value_byte: Cost per byte of value written or yielded.
    """

    range_setup: int = DEFAULT_RANGE_SETUP_GAS
    iterator_exhausted: int = DEFAULT_ITERATOR_EXHAUSTED_GAS
    per_key_byte: int = 1
    per_value_byte: int = 1

    def __post_init__(self) -> None:
        for f in fields(self):
            price = getattr(self, f.name)
            if isinstance(price, bool) or not isinstance(price, int):
                raise ValueError(f"{f.name} must be an int, got {price!r}")
            if price < 0:
                raise ValueError(f"{f.name} must be >= 0, got {price}")

    def read_cost(self, key: bytes) -> int:
        return len(key) * self.per_key_byte

    def write_cost(self, key: bytes, value: bytes) -> int:
        return len(key) * self.per_key_byte + len(value) * self.per_value_byte

    def remove_cost(self, key: bytes) -> int:
        return len(key) * self.per_key_byte

    def step_cost(self, key: bytes, value: bytes) -> int:
        """Cost of yielding one entry from a range iterator."""
        return self.write_cost(key, value)
