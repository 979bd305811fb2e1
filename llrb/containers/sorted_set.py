"""
SortedSet - key-only set kept in comparer order.
"""

from collections.abc import AsyncIterator, Iterable, Iterator, Set
from typing import Any

from llrb.interfaces.range_iterable import RangeIterable
from llrb.models.comparers import Comparer, natural_order
from llrb.models.direction import Direction
from llrb.models.exceptions import KeyNotFoundError
from llrb.models.neighbors import Neighbors
from llrb.models.sortedcontainers import Node, RedBlackTree


def _key(node: Node) -> Any:
    return node.key


async def _async_keys(nodes: AsyncIterator[Node]) -> AsyncIterator[Any]:
    async for node in nodes:
        yield node.key


class SortedSet(RangeIterable, Set):
    """
    Set of keys backed by a left-leaning Red-Black Tree.

    Nodes carry no payload. Set algebra (``|``, ``&``, ``-``, ``^``) returns
    new SortedSets ordered by the same comparer.
    """

    def __init__(
        self,
        keys: Iterable[Any] | None = None,
        *,
        comparer: Comparer = natural_order,
    ) -> None:
        self._tree: RedBlackTree = RedBlackTree(comparer)
        if keys is not None:
            self.update(keys)

    def _from_iterable(self, keys: Iterable[Any]) -> "SortedSet":
        return SortedSet(keys, comparer=self._tree.comparer)

    @property
    def comparer(self) -> Comparer:
        return self._tree.comparer

    def __contains__(self, key: object) -> bool:
        return self._tree.has(key)

    def __len__(self) -> int:
        return self._tree.size()

    def __iter__(self) -> Iterator[Any]:
        return map(_key, self._tree.nodes())

    def __reversed__(self) -> Iterator[Any]:
        return map(_key, self._tree.nodes(Direction.DESCENDING))

    def __repr__(self) -> str:
        return f"SortedSet({list(self)!r})"

    def add(self, key: Any) -> None:
        """
        Insert a key.

        Raises:
            DuplicateKeyError: If the key is already present.
        """
        self._tree.add(key)

    def try_add(self, key: Any) -> bool:
        """Insert key unless present. Returns True if it was inserted."""
        before = self._tree.size()
        self._tree.try_add(key)
        return self._tree.size() != before

    def update(self, keys: Iterable[Any]) -> None:
        """Insert every key, skipping ones already present."""
        for key in keys:
            self._tree.try_add(key)

    def discard(self, key: Any) -> bool:
        return self._tree.delete(key)

    def remove(self, key: Any) -> None:
        if not self._tree.delete(key):
            raise KeyNotFoundError(key)

    def clear(self) -> None:
        self._tree.clear()

    def minimum(self) -> Any:
        """
        Return the smallest key.

        Raises:
            KeyNotFoundError: If the set is empty.
        """
        node = self._tree.minimum()
        if node is None:
            raise KeyNotFoundError(message="minimum of an empty set")
        return node.key

    def maximum(self) -> Any:
        node = self._tree.maximum()
        if node is None:
            raise KeyNotFoundError(message="maximum of an empty set")
        return node.key

    def remove_minimum(self) -> Any:
        return self._tree.remove_minimum()[0]

    def remove_maximum(self) -> Any:
        return self._tree.remove_maximum()[0]

    def siblings(self, key: Any) -> Neighbors[Any]:
        """Strict predecessor and successor keys of key."""
        return self._tree.sibling_nodes(key).map(_key)

    def nearest(self, key: Any) -> Neighbors[Any]:
        """Nearest keys at or around key; an exact match fills both sides."""
        return self._tree.nearest_nodes(key).map(_key)

    def next_key(self, key: Any) -> Any | None:
        node = self._tree.next_node(key)
        return node.key if node is not None else None

    def previous_key(self, key: Any) -> Any | None:
        node = self._tree.previous_node(key)
        return node.key if node is not None else None

    def iterator(
        self,
        start: Any = None,
        end: Any = None,
        direction: Direction = Direction.ASCENDING,
    ) -> Iterator[Any]:
        return map(_key, self._tree.iterator(start, end, direction))

    def __aiter__(self) -> AsyncIterator[Any]:
        return self.async_iterator()

    def async_iterator(
        self,
        start: Any = None,
        end: Any = None,
        direction: Direction = Direction.ASCENDING,
    ) -> AsyncIterator[Any]:
        return _async_keys(self._tree.async_iterator(start, end, direction))
