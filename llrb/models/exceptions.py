"""
Custom exceptions for the sorted containers.
"""

from typing import Any


class LLRBError(Exception):
    """Base class for all errors raised by the containers."""


class DuplicateKeyError(LLRBError, ValueError):
    """
    Raised when a strict insert is called with a key that is already present.

    The tree is left untouched: the duplicate is detected before any
    rebalancing starts.
    """

    def __init__(self, key: Any):
        """
        Initialize duplicate key error.

        Args:
            key: The key that is already stored.
        """
        self.key = key
        super().__init__(f"Tree already contains key {key!r}")


class KeyNotFoundError(LLRBError, KeyError):
    """
    Raised by indexer-style lookups and removals of a missing key.

    Also raised when removing an extremum from an empty container, in which
    case ``key`` is None.
    """

    def __init__(self, key: Any = None, message: str | None = None):
        self.key = key
        if message is None:
            message = f"Key {key!r} not found"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0])


class InvalidConfigurationError(LLRBError, TypeError):
    """Raised at construction time when the comparer is missing or unusable."""

    def __init__(self, comparer: Any):
        self.comparer = comparer
        super().__init__(
            f"comparer must be a callable taking two keys, got {comparer!r}"
        )


class InvariantViolationError(LLRBError, AssertionError):
    """
    Raised by validate() when a red-black invariant does not hold.

    This indicates a bug or external tampering with node links; a tree driven
    only through its public API never raises it.
    """

    def __init__(self, invariant: str, detail: str):
        """
        Initialize invariant violation.

        Args:
            invariant: Short name of the violated property.
            detail: Human readable description of where it failed.
        """
        self.invariant = invariant
        self.detail = detail
        super().__init__(f"{invariant} violated: {detail}")
