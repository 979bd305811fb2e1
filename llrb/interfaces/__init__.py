"""
Abstract base classes for the sorted containers.
"""

from llrb.interfaces.range_iterable import RangeIterable
from llrb.interfaces.sorted_container import SortedContainer

__all__ = ["RangeIterable", "SortedContainer"]
