"""
RangeIterable protocol for data structures that support range iteration.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Any

from llrb.models.direction import Direction


class RangeIterable(ABC):
    """
    Protocol for data structures that support ordered iteration over keys.

    Implementations must support:
    - Full iteration in both directions via __iter__/__reversed__
    - Range-bounded iteration via iterator(start, end, direction)
    - Async iteration via __aiter__
    - Async range-bounded iteration via async_iterator(start, end, direction)

    Iterators are lazy and single-pass. Mutating the container while an
    iterator is paused gives undefined results.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Return an iterator over all entries in ascending order."""
        pass

    @abstractmethod
    def __reversed__(self) -> Iterator[Any]:
        """Return an iterator over all entries in descending order."""
        pass

    @abstractmethod
    def iterator(
        self,
        start: Any = None,
        end: Any = None,
        direction: Direction = Direction.ASCENDING,
    ) -> Iterator[Any]:
        """
        Return an iterator over entries whose keys fall in [start, end].

        Args:
            start: Lower key (inclusive). If None, there is no lower bound.
            end: Upper key (inclusive). If None, there is no upper bound.
            direction: ASCENDING walks from start up, DESCENDING from end down.

        Returns:
            Iterator yielding entries in the requested order.
        """
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[Any]:
        """Return an async iterator over all entries in ascending order."""
        pass

    @abstractmethod
    def async_iterator(
        self,
        start: Any = None,
        end: Any = None,
        direction: Direction = Direction.ASCENDING,
    ) -> AsyncIterator[Any]:
        """
        Return an async iterator over entries whose keys fall in [start, end].

        Args:
            start: Lower key (inclusive). If None, there is no lower bound.
            end: Upper key (inclusive). If None, there is no upper bound.
            direction: ASCENDING walks from start up, DESCENDING from end down.

        Returns:
            AsyncIterator yielding entries in the requested order.
        """
        pass
