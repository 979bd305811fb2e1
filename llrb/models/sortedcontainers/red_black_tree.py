"""
Left-leaning Red-Black Tree implementation for sorted key-value storage.

Guarantees O(log N) insert, delete and lookup, and lazy ordered traversal.
"""

import logging
from collections.abc import AsyncIterator, Callable, Iterator
from enum import IntEnum
from typing import Any, Generic, TypeVar

from llrb.interfaces.sorted_container import SortedContainer
from llrb.models.comparers import Comparer, natural_order
from llrb.models.direction import Direction
from llrb.models.exceptions import (
    DuplicateKeyError,
    InvalidConfigurationError,
    InvariantViolationError,
    KeyNotFoundError,
)
from llrb.models.neighbors import Neighbors
from llrb.models.sortedcontainers.balance import (
    delete_minimum,
    fix_up,
    flip_color,
    is_red,
    maximum_node,
    minimum_node,
    move_red_left,
    move_red_right,
    rotate_left,
    rotate_right,
)
from llrb.models.sortedcontainers.node import Color, Node
from llrb.models.sortedcontainers.traversal import AsyncTreeIterator, TreeIterator

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


class _OnDuplicate(IntEnum):
    """What the insertion routine does when it reaches an equal key."""

    KEEP = 0  # Leave the existing node untouched
    REPLACE = 1  # Overwrite the existing node's value


class RedBlackTree(SortedContainer, Generic[K, V]):
    """
    Left-leaning Red-Black Tree implementation of SortedContainer.

    Properties maintained after every public mutation:
    1. Keys are in strict binary-search-tree order under the comparer
    2. Root is always black
    3. Red nodes cannot have red children
    4. A red right link only exists next to a red left link (left-leaning)
    5. Every path from root to leaf has same number of black nodes

    Mutations descend recursively and rebalance on the way back up; the
    returned subtree root replaces the old one. Nodes have no parent pointers.
    """

    def __init__(self, comparer: Comparer = natural_order) -> None:
        if comparer is None or not callable(comparer):
            raise InvalidConfigurationError(comparer)

        self._compare: Comparer = comparer
        self._root: Node[K, V] | None = None
        self._count: int = 0
        logger.debug(f"Created RedBlackTree ordered by {getattr(comparer, '__name__', comparer)!r}")

    @property
    def comparer(self) -> Comparer:
        return self._compare

    @property
    def root(self) -> Node[K, V] | None:
        """Root node, exposed read-only for inspection and validation."""
        return self._root

    @property
    def is_empty(self) -> bool:
        return self._root is None

    def add(self, key: K, value: V | None = None) -> Node[K, V]:
        """Insert a new key-value pair; raise DuplicateKeyError if present. O(log N)"""
        # Reject before touching any colors so a failed call changes nothing
        if self._find_node(key) is not None:
            logger.debug(f"Rejected duplicate key {key!r}")
            raise DuplicateKeyError(key)

        return self._insert_from_root(key, value, _OnDuplicate.KEEP)

    def try_add(self, key: K, value: V | None = None) -> Node[K, V]:
        """Insert unless present; return the existing or new node. O(log N)"""
        return self._insert_from_root(key, value, _OnDuplicate.KEEP)

    def set(self, key: K, value: V | None) -> Node[K, V]:
        """Insert or overwrite a key-value pair. O(log N)"""
        return self._insert_from_root(key, value, _OnDuplicate.REPLACE)

    def get_or_add(self, key: K, factory: Callable[[], V]) -> Node[K, V]:
        """
        Return the node for key, inserting factory() as its value if missing.

        The factory is only called when the key is absent.
        """
        node = self._find_node(key)
        if node is not None:
            return node

        return self._insert_from_root(key, factory(), _OnDuplicate.KEEP)

    def delete(self, key: K) -> bool:
        """Remove a key-value pair. O(log N)"""
        if self._find_node(key) is None:
            return False

        initial_count = self._count
        self._root = self._delete(self._root, key)
        if self._root is not None:
            self._root.color = Color.BLACK

        return initial_count != self._count

    def remove_minimum(self) -> tuple[K, V | None]:
        return self._remove_extreme(minimum_node(self._root), "remove_minimum")

    def remove_maximum(self) -> tuple[K, V | None]:
        return self._remove_extreme(maximum_node(self._root), "remove_maximum")

    def clear(self) -> None:
        logger.debug(f"Clearing RedBlackTree with {self._count} entries")
        self._root = None
        self._count = 0

    def find(self, key: K) -> Node[K, V] | None:
        return self._find_node(key)

    def has(self, key: K) -> bool:
        return self._find_node(key) is not None

    def size(self) -> int:
        return self._count

    def minimum(self) -> Node[K, V] | None:
        return minimum_node(self._root)

    def maximum(self) -> Node[K, V] | None:
        return maximum_node(self._root)

    def sibling_nodes(self, key: K) -> Neighbors[Node[K, V]]:
        """
        Return the tightest (predecessor, successor) strictly around key.

        A single root-to-leaf walk remembers the last node where the search
        went right (predecessor candidate) and the last where it went left
        (successor candidate). On an exact match the candidates are replaced
        by the extremes of the matched node's subtrees when those exist.
        """
        lower: Node[K, V] | None = None
        upper: Node[K, V] | None = None
        node = self._root

        while node is not None:
            comparison = self._compare(key, node.key)
            if comparison < 0:
                upper = node
                node = node.left
            elif comparison > 0:
                lower = node
                node = node.right
            else:
                if node.left is not None:
                    lower = maximum_node(node.left)
                if node.right is not None:
                    upper = minimum_node(node.right)
                break

        return Neighbors.of(lower, upper)

    def nearest_nodes(self, key: K) -> Neighbors[Node[K, V]]:
        """Like sibling_nodes, but an exact match is its own nearest on both sides."""
        lower: Node[K, V] | None = None
        upper: Node[K, V] | None = None
        node = self._root

        while node is not None:
            comparison = self._compare(key, node.key)
            if comparison < 0:
                upper = node
                node = node.left
            elif comparison > 0:
                lower = node
                node = node.right
            else:
                return Neighbors.of(node, node)

        return Neighbors.of(lower, upper)

    def next_node(self, key: K) -> Node[K, V] | None:
        """Return the node with the smallest key greater than key."""
        return self.sibling_nodes(key).upper

    def previous_node(self, key: K) -> Node[K, V] | None:
        """Return the node with the largest key less than key."""
        return self.sibling_nodes(key).lower

    def nodes(self, direction: Direction = Direction.ASCENDING) -> Iterator[Node[K, V]]:
        return TreeIterator(self._root, self._compare, None, None, direction)

    def __iter__(self) -> Iterator[Node[K, V]]:
        return self.nodes()

    def __reversed__(self) -> Iterator[Node[K, V]]:
        return self.nodes(Direction.DESCENDING)

    def iterator(
        self,
        start: K | None = None,
        end: K | None = None,
        direction: Direction = Direction.ASCENDING,
    ) -> Iterator[Node[K, V]]:
        return TreeIterator(self._root, self._compare, start, end, direction)

    def __aiter__(self) -> AsyncIterator[Node[K, V]]:
        return self.async_iterator()

    def async_iterator(
        self,
        start: K | None = None,
        end: K | None = None,
        direction: Direction = Direction.ASCENDING,
    ) -> AsyncIterator[Node[K, V]]:
        return AsyncTreeIterator(self._root, self._compare, start, end, direction)

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        return self._find_node(key) is not None

    def __repr__(self) -> str:
        return f"RedBlackTree(size={self._count})"

    def validate(self) -> int:
        """
        Check every structural invariant of the tree.

        Returns:
            The black height of the tree (0 when empty).

        Raises:
            InvariantViolationError: On the first property that does not hold.
        """
        if is_red(self._root):
            raise self._violation("root-black", "root node is red")

        previous: Node[K, V] | None = None
        seen = 0
        for node in self.nodes():
            if previous is not None and self._compare(previous.key, node.key) >= 0:
                raise self._violation(
                    "order", f"{previous.key!r} is not less than {node.key!r}"
                )
            previous = node
            seen += 1

        if seen != self._count:
            raise self._violation(
                "count", f"{seen} reachable nodes but count is {self._count}"
            )

        return self._black_height(self._root)

    def _black_height(self, node: Node[K, V] | None) -> int:
        if node is None:
            return 0

        if is_red(node.right) and not is_red(node.left):
            raise self._violation("left-leaning", f"node {node.key!r} leans right")

        if is_red(node) and (is_red(node.left) or is_red(node.right)):
            raise self._violation("red-red", f"red node {node.key!r} has a red child")

        left = self._black_height(node.left)
        right = self._black_height(node.right)
        if left != right:
            raise self._violation(
                "black-balance",
                f"node {node.key!r} has black heights {left} and {right}",
            )

        return left + (0 if is_red(node) else 1)

    @staticmethod
    def _violation(invariant: str, detail: str) -> InvariantViolationError:
        logger.warning(f"Red-Black invariant {invariant} violated: {detail}")
        return InvariantViolationError(invariant, detail)

    def _find_node(self, key: Any) -> Node[K, V] | None:
        """Find node by key."""
        current = self._root
        while current is not None:
            comparison = self._compare(key, current.key)
            if comparison < 0:
                current = current.left
            elif comparison > 0:
                current = current.right
            else:
                return current
        return None

    def _remove_extreme(self, node: Node[K, V] | None, operation: str) -> tuple[K, V | None]:
        if node is None:
            logger.debug(f"{operation} called on an empty tree")
            raise KeyNotFoundError(message=f"{operation} on an empty tree")

        # Capture before deleting: successor splicing may reuse the node object
        result = node.pair
        self.delete(result[0])
        return result

    def _insert_from_root(self, key: K, value: V | None, on_duplicate: _OnDuplicate) -> Node[K, V]:
        touched: list[Node[K, V]] = []
        self._root = self._insert(self._root, key, value, on_duplicate, touched)
        self._root.color = Color.BLACK
        return touched[0]

    def _insert(
        self,
        node: Node[K, V] | None,
        key: K,
        value: V | None,
        on_duplicate: _OnDuplicate,
        touched: list[Node[K, V]],
    ) -> Node[K, V]:
        """Insert below node and return the new subtree root."""
        if node is None:
            self._count += 1
            leaf = Node(key=key, value=value)
            touched.append(leaf)
            return leaf

        if is_red(node.left) and is_red(node.right):
            # Split node with two red children
            flip_color(node)

        comparison = self._compare(key, node.key)
        if comparison < 0:
            node.left = self._insert(node.left, key, value, on_duplicate, touched)
        elif comparison > 0:
            node.right = self._insert(node.right, key, value, on_duplicate, touched)
        else:
            if on_duplicate == _OnDuplicate.REPLACE:
                node.value = value
            touched.append(node)

        if is_red(node.right):
            # Rotate to prevent red node on right
            node = rotate_left(node)

        if is_red(node.left) and is_red(node.left.left):
            # Rotate to prevent consecutive red nodes
            node = rotate_right(node)

        return node

    def _delete(self, node: Node[K, V], key: K) -> Node[K, V] | None:
        """Delete key below node and return the new subtree root."""
        if self._compare(key, node.key) < 0:
            # Continue search if left is present
            if node.left is not None:
                if not is_red(node.left) and not is_red(node.left.left):
                    node = move_red_left(node)

                node.left = self._delete(node.left, key)
        else:
            if is_red(node.left):
                # Flip a 3-node or unbalance a 4-node
                node = rotate_right(node)

            if self._compare(key, node.key) == 0 and node.right is None:
                # Leaf
                self._count -= 1
                return None

            # Continue search if right is present
            if node.right is not None:
                if not is_red(node.right) and not is_red(node.right.left):
                    node = move_red_right(node)

                if self._compare(key, node.key) == 0:
                    self._count -= 1

                    # Replace with the in-order successor and remove that instead
                    successor = minimum_node(node.right)
                    node.key = successor.key
                    node.value = successor.value
                    node.right = delete_minimum(node.right)
                else:
                    node.right = self._delete(node.right, key)

        return fix_up(node)
