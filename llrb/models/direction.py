"""
Traversal direction for ordered iteration.
"""

from enum import IntEnum


class Direction(IntEnum):
    """Order in which keys are visited."""

    ASCENDING = 0  # Smallest key first
    DESCENDING = 1  # Largest key first

    def reversed(self) -> "Direction":
        if self is Direction.ASCENDING:
            return Direction.DESCENDING
        return Direction.ASCENDING
