"""
Shared pytest fixtures for the sorted container tests.
"""

import random

import pytest

from llrb.containers import SortedMap, SortedSet
from llrb.models.sortedcontainers import RedBlackTree


@pytest.fixture
def tree():
    """Provide an empty RedBlackTree with natural ordering."""
    return RedBlackTree()


@pytest.fixture
def neighbor_tree():
    """Provide a tree holding keys 2, 5 and 8."""
    tree = RedBlackTree()
    tree.add(2, "Two")
    tree.add(5, "Five")
    tree.add(8, "Eight")
    return tree


@pytest.fixture
def digit_tree():
    """Provide a tree holding keys 0..9 inserted in shuffled order."""
    keys = list(range(10))
    random.Random(7).shuffle(keys)
    tree = RedBlackTree()
    for key in keys:
        tree.add(key, f"value{key}")
    return tree


@pytest.fixture
def string_keys():
    """Provide the string keys used by the range traversal tests."""
    return ["abc", "bab", "bba", "bua", "bvka kapa", "zza"]


@pytest.fixture
def string_map(string_keys):
    """Provide a SortedMap of string_keys to their insertion index."""
    return SortedMap((key, index) for index, key in enumerate(string_keys))


@pytest.fixture
def sample_map():
    """Provide a small SortedMap for projection tests."""
    return SortedMap({0: "Zero", 1: "One"})


@pytest.fixture
def sample_set():
    """Provide a SortedSet holding 2, 5 and 8."""
    return SortedSet([8, 2, 5])


@pytest.fixture
def shuffled_keys():
    """Provide 1000 distinct keys in a reproducible random order."""
    keys = list(range(1000))
    random.Random(1234).shuffle(keys)
    return keys
