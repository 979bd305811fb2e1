"""
Sorted container implementations.
"""

from llrb.models.sortedcontainers.node import Color, Node
from llrb.models.sortedcontainers.red_black_tree import RedBlackTree

__all__ = ["Color", "Node", "RedBlackTree"]
