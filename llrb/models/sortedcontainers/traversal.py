"""
Explicit-stack iterators over the nodes of a Red-Black Tree.
"""

from collections.abc import AsyncIterator, Iterator
from typing import Any

from llrb.models.comparers import Comparer
from llrb.models.direction import Direction
from llrb.models.sortedcontainers.node import Node


class TreeIterator(Iterator[Node]):
    """
    Ordered iterator over nodes with optional inclusive bounds.

    Ascending walks push the left spine and resume from each popped node's
    right child; descending walks mirror that. Subtrees entirely outside the
    near bound are never pushed, and the walk ends at the first node past the
    far bound.
    """

    def __init__(
        self,
        root: Node | None,
        comparer: Comparer,
        start: Any = None,
        end: Any = None,
        direction: Direction = Direction.ASCENDING,
    ) -> None:
        self._stack: list[Node] = []
        self._compare = comparer
        self._start = start
        self._end = end
        self._ascending = direction == Direction.ASCENDING

        # Initialize stack with nodes on the near side of the range
        if self._ascending:
            self._push_path(root, start)
        else:
            self._push_path(root, end)

    def __iter__(self) -> Iterator[Node]:
        return self

    def __next__(self) -> Node:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()

        # Check far bound
        if self._past_far_bound(node):
            self._stack.clear()
            raise StopIteration

        if self._ascending:
            self._push_path(node.right, None)
        else:
            self._push_path(node.left, None)

        return node

    def _past_far_bound(self, node: Node) -> bool:
        if self._ascending:
            return self._end is not None and self._compare(node.key, self._end) > 0
        return self._start is not None and self._compare(node.key, self._start) < 0

    def _push_path(self, node: Node | None, bound: Any) -> None:
        """Push the spine toward the near end, skipping nodes before bound."""
        compare = self._compare
        if self._ascending:
            while node is not None:
                if bound is not None and compare(node.key, bound) < 0:
                    node = node.right
                else:
                    self._stack.append(node)
                    node = node.left
        else:
            while node is not None:
                if bound is not None and compare(node.key, bound) > 0:
                    node = node.left
                else:
                    self._stack.append(node)
                    node = node.right


class AsyncTreeIterator(AsyncIterator[Node]):
    """Async iterator for range walks on a Red-Black Tree (in-memory, no I/O)."""

    def __init__(
        self,
        root: Node | None,
        comparer: Comparer,
        start: Any = None,
        end: Any = None,
        direction: Direction = Direction.ASCENDING,
    ) -> None:
        self._iterator = TreeIterator(root, comparer, start, end, direction)

    def __aiter__(self) -> "AsyncTreeIterator":
        return self

    async def __anext__(self) -> Node:
        try:
            return next(self._iterator)
        except StopIteration:
            raise StopAsyncIteration from None
