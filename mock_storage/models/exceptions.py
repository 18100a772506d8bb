"""
Custom exceptions for the mock storage.

Well-formed input never raises. These only signal arguments that are not
bytes-like, which a real backend would reject before reaching storage.
"""


class StorageError(Exception):
    """Base class for mock storage errors."""


class InvalidKeyError(StorageError, TypeError):
    """Raised when a key is not a bytes-like object."""

    def __init__(self, key: object):
        """
        Initialize key error.

        Args:
            key: The offending key.
        """
        self.key = key
        super().__init__(f"key must be bytes-like, got {type(key).__name__}")


class InvalidValueError(StorageError, TypeError):
    """Raised when a value is not a bytes-like object."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"value must be bytes-like, got {type(value).__name__}")
