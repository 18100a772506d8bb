"""
NextItem, the result of advancing a storage iterator.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class NextItem:
    """
    One step of a range iteration.

    Either carries a (key, value) pair or marks the iterator as exhausted.
    Both variants report the gas that step used.

    Attributes:
        key: Key of the yielded entry (None when exhausted).
        value: Value of the yielded entry (None when exhausted).
        gas: Gas charged for this step.
    """

    key: bytes | None
    value: bytes | None
    gas: int

    @classmethod
    def item(cls, key: bytes, value: bytes, gas: int) -> "NextItem":
        return cls(key=key, value=value, gas=gas)

    @classmethod
    def exhausted(cls, gas: int) -> "NextItem":
        return cls(key=None, value=None, gas=gas)

    def is_exhausted(self) -> bool:
        return self.key is None

    @property
    def kv(self) -> tuple[bytes, bytes] | None:
        """The (key, value) pair, or None when exhausted."""
        if self.key is None:
            return None
        return (self.key, self.value)
