"""
Data models for the sorted containers.
"""

from llrb.models.comparers import Comparer, natural_order, reverse_order
from llrb.models.direction import Direction
from llrb.models.neighbors import Neighbors

__all__ = [
    "Comparer",
    "Direction",
    "Neighbors",
    "natural_order",
    "reverse_order",
]
