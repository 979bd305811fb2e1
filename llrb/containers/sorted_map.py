"""
SortedMap - key/value mapping kept in comparer order.
"""

from collections.abc import (
    AsyncIterator,
    Callable,
    ItemsView,
    Iterable,
    Iterator,
    Mapping,
    MutableMapping,
    ValuesView,
)
from typing import Any

from llrb.interfaces.range_iterable import RangeIterable
from llrb.models.comparers import Comparer, natural_order
from llrb.models.direction import Direction
from llrb.models.exceptions import KeyNotFoundError
from llrb.models.neighbors import Neighbors
from llrb.models.sortedcontainers import Node, RedBlackTree


def _key(node: Node) -> Any:
    return node.key


def _pair(node: Node) -> tuple[Any, Any]:
    return node.pair


async def _async_pairs(nodes: AsyncIterator[Node]) -> AsyncIterator[tuple[Any, Any]]:
    async for node in nodes:
        yield node.pair


class _SortedValuesView(ValuesView):
    def __iter__(self) -> Iterator[Any]:
        for node in self._mapping._tree:
            yield node.value

    def __reversed__(self) -> Iterator[Any]:
        for node in reversed(self._mapping._tree):
            yield node.value


class _SortedItemsView(ItemsView):
    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        for node in self._mapping._tree:
            yield node.pair

    def __reversed__(self) -> Iterator[tuple[Any, Any]]:
        for node in reversed(self._mapping._tree):
            yield node.pair


class SortedMap(RangeIterable, MutableMapping):
    """
    Mutable mapping backed by a left-leaning Red-Black Tree.

    Supports:
    - O(log N) lookup, insert, update and delete
    - Strict insert (add), insert-if-absent (try_add, get_or_add)
    - Neighbour queries around keys that may or may not be present
    - Ordered and range iteration in both directions, sync and async

    ``m[key]`` and ``del m[key]`` raise KeyNotFoundError (a KeyError) for a
    missing key; ``m[key] = value`` inserts or overwrites.
    """

    def __init__(
        self,
        items: Mapping | Iterable[tuple[Any, Any]] | None = None,
        *,
        comparer: Comparer = natural_order,
    ) -> None:
        """
        Initialize SortedMap.

        Args:
            items: Initial entries, as a mapping or (key, value) pairs. Keys
                must be distinct; a repeated key raises DuplicateKeyError.
            comparer: Total order over keys, fixed for the map's lifetime.
        """
        self._tree: RedBlackTree = RedBlackTree(comparer)

        if items is not None:
            if isinstance(items, Mapping):
                items = items.items()
            for key, value in items:
                self._tree.add(key, value)

    @property
    def comparer(self) -> Comparer:
        return self._tree.comparer

    def __getitem__(self, key: Any) -> Any:
        node = self._tree.find(key)
        if node is None:
            raise KeyNotFoundError(key)
        return node.value

    def __setitem__(self, key: Any, value: Any) -> None:
        self._tree.set(key, value)

    def __delitem__(self, key: Any) -> None:
        if not self._tree.delete(key):
            raise KeyNotFoundError(key)

    def __contains__(self, key: object) -> bool:
        return self._tree.has(key)

    def __len__(self) -> int:
        return self._tree.size()

    def __iter__(self) -> Iterator[Any]:
        return map(_key, self._tree.nodes())

    def __reversed__(self) -> Iterator[Any]:
        return map(_key, self._tree.nodes(Direction.DESCENDING))

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"SortedMap({{{body}}})"

    def values(self) -> ValuesView:
        return _SortedValuesView(self)

    def items(self) -> ItemsView:
        return _SortedItemsView(self)

    def clear(self) -> None:
        self._tree.clear()

    def add(self, key: Any, value: Any) -> None:
        """
        Insert a new entry.

        Raises:
            DuplicateKeyError: If the key is already present.
        """
        self._tree.add(key, value)

    def try_add(self, key: Any, value: Any) -> bool:
        """
        Insert an entry unless the key is present.

        Returns:
            True if inserted, False if the existing entry was kept.
        """
        before = self._tree.size()
        self._tree.try_add(key, value)
        return self._tree.size() != before

    def get_or_add(
        self,
        key: Any,
        value: Any = None,
        *,
        factory: Callable[[], Any] | None = None,
    ) -> Any:
        """
        Return the value for key, inserting it first if missing.

        Args:
            key: The key to look up.
            value: Value to insert when the key is missing.
            factory: Called to build the value instead of ``value``; only
                invoked when the key is missing.

        Returns:
            The stored value (existing or newly inserted).
        """
        if factory is None:
            return self._tree.try_add(key, value).value
        return self._tree.get_or_add(key, factory).value

    def discard(self, key: Any) -> bool:
        """Remove key if present. Returns True if an entry was removed."""
        return self._tree.delete(key)

    def minimum_item(self) -> tuple[Any, Any] | None:
        node = self._tree.minimum()
        return node.pair if node is not None else None

    def maximum_item(self) -> tuple[Any, Any] | None:
        node = self._tree.maximum()
        return node.pair if node is not None else None

    def remove_minimum(self) -> tuple[Any, Any]:
        return self._tree.remove_minimum()

    def remove_maximum(self) -> tuple[Any, Any]:
        return self._tree.remove_maximum()

    def sibling_items(self, key: Any) -> Neighbors[tuple[Any, Any]]:
        """Strict predecessor and successor entries of key."""
        return self._tree.sibling_nodes(key).map(_pair)

    def nearest_items(self, key: Any) -> Neighbors[tuple[Any, Any]]:
        """Nearest entries at or around key; an exact match fills both sides."""
        return self._tree.nearest_nodes(key).map(_pair)

    def sibling_keys(self, key: Any) -> Neighbors[Any]:
        return self._tree.sibling_nodes(key).map(_key)

    def nearest_keys(self, key: Any) -> Neighbors[Any]:
        return self._tree.nearest_nodes(key).map(_key)

    def next_item(self, key: Any) -> tuple[Any, Any] | None:
        node = self._tree.next_node(key)
        return node.pair if node is not None else None

    def previous_item(self, key: Any) -> tuple[Any, Any] | None:
        node = self._tree.previous_node(key)
        return node.pair if node is not None else None

    def iterator(
        self,
        start: Any = None,
        end: Any = None,
        direction: Direction = Direction.ASCENDING,
    ) -> Iterator[tuple[Any, Any]]:
        return map(_pair, self._tree.iterator(start, end, direction))

    def get_range(self, start: Any, end: Any) -> list[tuple[Any, Any]]:
        """
        Get all key-value pairs in range [start, end].

        Args:
            start: Start key (inclusive).
            end: End key (inclusive).

        Returns:
            List of (key, value) tuples in sorted order.
        """
        return list(self.iterator(start, end))

    def has_keys_in_range(self, start: Any, end: Any) -> bool:
        for _ in self._tree.iterator(start, end):
            return True
        return False

    def __aiter__(self) -> AsyncIterator[tuple[Any, Any]]:
        return self.async_iterator()

    def async_iterator(
        self,
        start: Any = None,
        end: Any = None,
        direction: Direction = Direction.ASCENDING,
    ) -> AsyncIterator[tuple[Any, Any]]:
        return _async_pairs(self._tree.async_iterator(start, end, direction))
