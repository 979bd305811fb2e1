"""
Set and map projections over the Red-Black Tree core.
"""

from llrb.containers.sorted_map import SortedMap
from llrb.containers.sorted_set import SortedSet

__all__ = ["SortedMap", "SortedSet"]
