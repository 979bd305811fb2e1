"""
SortedContainer abstract base class for sorted key-value data structures.
"""

from abc import abstractmethod
from typing import Any

from llrb.interfaces.range_iterable import RangeIterable
from llrb.models.neighbors import Neighbors


class SortedContainer(RangeIterable):
    """
    Abstract base class for sorted key-value containers.

    Provides O(log N) operations for insert, lookup and delete, and neighbour
    queries around arbitrary keys. Entries are exposed as nodes carrying
    ``key`` and ``value``. Inherits range iteration capabilities from
    RangeIterable.

    Implementations:
    - RedBlackTree: left-leaning Red-Black Tree
    """

    @abstractmethod
    def add(self, key: Any, value: Any = None) -> Any:
        """
        Insert a new key-value pair.

        Args:
            key: The key to insert.
            value: The value to associate with the key.

        Returns:
            The node holding the new entry.

        Raises:
            DuplicateKeyError: If the key is already present.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def try_add(self, key: Any, value: Any = None) -> Any:
        """
        Insert a key-value pair unless the key is already present.

        Returns:
            The existing node (unchanged) or the newly inserted one.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def set(self, key: Any, value: Any) -> Any:
        """
        Insert or update a key-value pair.

        Returns:
            The node holding the entry.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def delete(self, key: Any) -> bool:
        """
        Remove a key-value pair.

        Args:
            key: The key to remove.

        Returns:
            True if the key was found and removed, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def find(self, key: Any) -> Any | None:
        """
        Look up the node for a key.

        Returns:
            The node if found, None otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def has(self, key: Any) -> bool:
        """
        Check if a key exists.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of key-value pairs.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def minimum(self) -> Any | None:
        """Return the node with the smallest key, or None when empty."""
        pass

    @abstractmethod
    def maximum(self) -> Any | None:
        """Return the node with the largest key, or None when empty."""
        pass

    @abstractmethod
    def sibling_nodes(self, key: Any) -> Neighbors:
        """
        Return the strict predecessor and successor of a key.

        The key itself need not be present; if it is, its own node is never
        part of the result.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def nearest_nodes(self, key: Any) -> Neighbors:
        """
        Return the nearest entries at or around a key.

        An exact match is returned on both sides; otherwise this is the same
        as sibling_nodes.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def remove_minimum(self) -> tuple[Any, Any]:
        """
        Remove the smallest entry.

        Returns:
            The removed (key, value) pair.

        Raises:
            KeyNotFoundError: If the container is empty.
        """
        pass

    @abstractmethod
    def remove_maximum(self) -> tuple[Any, Any]:
        """
        Remove the largest entry.

        Returns:
            The removed (key, value) pair.

        Raises:
            KeyNotFoundError: If the container is empty.
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove all entries."""
        pass
