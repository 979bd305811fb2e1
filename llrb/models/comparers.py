"""
Comparator functions used to order keys.

A comparer takes two keys and returns a negative number, zero or a positive
number when the first key sorts before, equal to or after the second. The
same comparer must be used for the whole lifetime of a tree.
"""

from collections.abc import Callable
from typing import Any

Comparer = Callable[[Any, Any], int]


def natural_order(a: Any, b: Any) -> int:
    """Order keys with their own ``<`` and ``>`` operators."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def reverse_order(comparer: Comparer = natural_order) -> Comparer:
    """Return a comparer that sorts in the opposite direction of ``comparer``."""

    def reversed_comparer(a: Any, b: Any) -> int:
        return comparer(b, a)

    return reversed_comparer
