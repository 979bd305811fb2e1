"""
Node and Color for the left-leaning Red-Black Tree.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Color(IntEnum):
    """Color of the link from a node's parent to the node."""

    RED = 0
    BLACK = 1


@dataclass(eq=False)
class Node(Generic[K, V]):
    """
    Node in the Red-Black Tree.

    A missing child is None and counts as a black leaf. Nodes carry no parent
    pointer; only insertion and deletion may change links, color or payload.
    """

    key: K
    value: V | None = None
    color: Color = Color.RED
    left: "Node[K, V] | None" = None
    right: "Node[K, V] | None" = None

    @property
    def is_red(self) -> bool:
        return self.color == Color.RED

    @property
    def pair(self) -> tuple[K, Any]:
        return (self.key, self.value)

    def __repr__(self) -> str:
        return f"Node(key={self.key!r}, value={self.value!r}, color={self.color.name})"
