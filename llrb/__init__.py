"""
Ordered containers backed by a left-leaning Red-Black Tree.

This package provides:
- RedBlackTree - generic core with O(log N) insert, delete and lookup
- SortedMap(key -> value) - mutable mapping in comparer order
- SortedSet(key) - set of keys in comparer order
- Neighbors - predecessor/successor results with explicit presence flags
- Ordered and range iteration in both directions, sync and async
"""

from llrb.containers import SortedMap, SortedSet
from llrb.models.comparers import natural_order, reverse_order
from llrb.models.direction import Direction
from llrb.models.exceptions import (
    DuplicateKeyError,
    InvalidConfigurationError,
    InvariantViolationError,
    KeyNotFoundError,
    LLRBError,
)
from llrb.models.neighbors import Neighbors
from llrb.models.sortedcontainers import Color, Node, RedBlackTree

__all__ = [
    "Color",
    "Direction",
    "DuplicateKeyError",
    "InvalidConfigurationError",
    "InvariantViolationError",
    "KeyNotFoundError",
    "LLRBError",
    "Neighbors",
    "Node",
    "RedBlackTree",
    "SortedMap",
    "SortedSet",
    "natural_order",
    "reverse_order",
]
