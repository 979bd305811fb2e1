"""
Neighbors: the predecessor/successor pair returned by neighbour queries.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Neighbors(Generic[T]):
    """
    Lower and upper neighbour of a probe key.

    Each side carries an explicit presence flag, so a missing neighbour is
    never confused with a stored key or value that happens to be falsy
    (``0``, ``""``, ``None``).

    Attributes:
        lower: Predecessor side (None when absent).
        upper: Successor side (None when absent).
        has_lower: True if a predecessor exists.
        has_upper: True if a successor exists.
    """

    lower: T | None = None
    upper: T | None = None
    has_lower: bool = False
    has_upper: bool = False

    @classmethod
    def empty(cls) -> "Neighbors[T]":
        return cls()

    @classmethod
    def of(cls, lower: T | None, upper: T | None) -> "Neighbors[T]":
        """Build from two nodes where None means the side is absent."""
        return cls(
            lower=lower,
            upper=upper,
            has_lower=lower is not None,
            has_upper=upper is not None,
        )

    def map(self, fn: Callable[[T], U]) -> "Neighbors[U]":
        """
        Project each present side through ``fn``, keeping the flags.

        Used to turn node neighbours into key, value or pair neighbours.
        """
        return Neighbors(
            lower=fn(self.lower) if self.has_lower else None,
            upper=fn(self.upper) if self.has_upper else None,
            has_lower=self.has_lower,
            has_upper=self.has_upper,
        )

    def is_empty(self) -> bool:
        return not (self.has_lower or self.has_upper)
