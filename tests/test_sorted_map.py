"""
Tests for the SortedMap projection.
"""

import pytest

from llrb.containers import SortedMap
from llrb.models.comparers import reverse_order
from llrb.models.direction import Direction
from llrb.models.exceptions import DuplicateKeyError, KeyNotFoundError


class TestMappingBehaviour:
    """Tests for the MutableMapping surface."""

    def test_put_and_get(self):
        """Basic indexer set and get."""
        tree = SortedMap()
        tree["key1"] = "value1"
        tree["key2"] = "value2"

        assert tree["key1"] == "value1"
        assert tree["key2"] == "value2"
        assert tree.get("key3") is None
        assert len(tree) == 2

    def test_missing_key_raises(self, sample_map):
        """Indexer lookup of a missing key raises KeyNotFoundError."""
        with pytest.raises(KeyNotFoundError) as exc_info:
            sample_map[5]

        assert exc_info.value.key == 5
        assert isinstance(exc_info.value, KeyError)

    def test_update_existing_key(self, sample_map):
        """Assigning to an existing key overwrites its value."""
        sample_map[0] = "zero"

        assert sample_map[0] == "zero"
        assert len(sample_map) == 2

    def test_delete(self, sample_map):
        """del removes a key and raises for a missing one."""
        del sample_map[0]

        assert 0 not in sample_map
        assert 1 in sample_map
        with pytest.raises(KeyNotFoundError):
            del sample_map[0]

    def test_initial_duplicates_raise(self):
        """Duplicate keys in the initial pairs are rejected."""
        with pytest.raises(DuplicateKeyError):
            SortedMap([(0, "Zero"), (0, "Zero")])

    def test_ordered_views(self):
        """keys, values and items follow key order."""
        tree = SortedMap({"c": 3, "a": 1, "b": 2})

        assert list(tree) == ["a", "b", "c"]
        assert list(tree.keys()) == ["a", "b", "c"]
        assert list(tree.values()) == [1, 2, 3]
        assert list(tree.items()) == [("a", 1), ("b", 2), ("c", 3)]
        assert list(reversed(tree)) == ["c", "b", "a"]
        assert list(reversed(tree.items())) == [("c", 3), ("b", 2), ("a", 1)]
        assert list(reversed(tree.values())) == [3, 2, 1]
        assert ("b", 2) in tree.items()

    def test_mixins(self, sample_map):
        """pop, popitem, setdefault and equality come from MutableMapping."""
        assert sample_map.setdefault(2, "Two") == "Two"
        assert sample_map.pop(1) == "One"
        assert sample_map.popitem() == (0, "Zero")
        assert sample_map == {2: "Two"}

    def test_clear_and_repr(self, sample_map):
        """repr shows entries in order; clear empties the map."""
        assert repr(sample_map) == "SortedMap({0: 'Zero', 1: 'One'})"

        sample_map.clear()

        assert len(sample_map) == 0
        assert repr(sample_map) == "SortedMap({})"

    def test_custom_comparer(self):
        """The comparer controls iteration order."""
        tree = SortedMap({1: "a", 2: "b", 3: "c"}, comparer=reverse_order())

        assert list(tree) == [3, 2, 1]


class TestInsertVariants:
    """Tests for add, try_add and get_or_add."""

    def test_add(self, sample_map):
        """Strict add inserts new keys and rejects existing ones."""
        sample_map.add(2, "Two")

        assert sample_map[2] == "Two"
        with pytest.raises(DuplicateKeyError):
            sample_map.add(2, "Other")
        assert sample_map[2] == "Two"

    def test_try_add(self, sample_map):
        """try_add reports whether it inserted."""
        assert sample_map.try_add(2, "Two")
        assert not sample_map.try_add(2, "Other")
        assert sample_map[2] == "Two"

    def test_get_or_add_inserts_when_missing(self, sample_map):
        """get_or_add stores and returns a new value."""
        assert sample_map.get_or_add(2, "Two") == "Two"
        assert sample_map[2] == "Two"

        assert sample_map.get_or_add(3, factory=lambda: "Three") == "Three"
        assert sample_map.get_or_add(3, factory=lambda: "Four") == "Three"
        assert sample_map[3] == "Three"

    def test_get_or_add_keeps_existing(self, sample_map):
        """get_or_add returns the stored value for an existing key."""
        assert sample_map.get_or_add(0, "Two") == "Zero"
        assert sample_map[0] == "Zero"

    def test_discard(self, sample_map):
        """discard reports whether a key was removed."""
        assert sample_map.discard(0)
        assert not sample_map.discard(0)


class TestNavigation:
    """Tests for extremes and neighbour queries."""

    def test_extremes(self, sample_map):
        """Minimum and maximum items, and their removal."""
        assert sample_map.minimum_item() == (0, "Zero")
        assert sample_map.maximum_item() == (1, "One")
        assert sample_map.remove_maximum() == (1, "One")
        assert sample_map.remove_minimum() == (0, "Zero")
        assert sample_map.minimum_item() is None
        assert sample_map.maximum_item() is None
        with pytest.raises(KeyNotFoundError):
            sample_map.remove_minimum()

    def test_nearest_items(self):
        """Nearest pairs for the {2, 5, 8} table."""
        tree = SortedMap()
        assert tree.nearest_items(5).is_empty()

        tree.add(2, "Two")
        tree.add(5, "Five")
        tree.add(8, "Eight")

        below = tree.nearest_items(0)
        assert not below.has_lower
        assert below.upper == (2, "Two")

        assert tree.nearest_items(2).lower == (2, "Two")
        assert tree.nearest_items(2).upper == (2, "Two")
        assert tree.nearest_items(3).lower == (2, "Two")
        assert tree.nearest_items(3).upper == (5, "Five")
        assert tree.nearest_items(5).lower == (5, "Five")
        assert tree.nearest_items(5).upper == (5, "Five")
        assert tree.nearest_items(6).lower == (5, "Five")
        assert tree.nearest_items(6).upper == (8, "Eight")
        assert tree.nearest_items(8).lower == (8, "Eight")
        assert tree.nearest_items(8).upper == (8, "Eight")

        above = tree.nearest_items(9)
        assert above.lower == (8, "Eight")
        assert not above.has_upper

    def test_sibling_keys(self):
        """Sibling keys skip the probe key itself."""
        tree = SortedMap({2: "Two", 5: "Five", 8: "Eight"})

        siblings = tree.sibling_keys(5)
        assert (siblings.lower, siblings.upper) == (2, 8)
        assert tree.sibling_items(5).upper == (8, "Eight")
        assert tree.nearest_keys(6).lower == 5

    def test_none_value_is_not_absence(self):
        """A stored None value is still a present neighbour."""
        tree = SortedMap({1: None, 3: None})

        result = tree.sibling_items(2)

        assert result.has_lower and result.has_upper
        assert result.lower == (1, None)

    def test_next_and_previous_item(self, sample_map):
        """Successor and predecessor pairs, None past the ends."""
        assert sample_map.next_item(0) == (1, "One")
        assert sample_map.previous_item(1) == (0, "Zero")
        assert sample_map.next_item(1) is None
        assert sample_map.previous_item(0) is None


class TestRangeIteration:
    """Tests for bounded iteration."""

    def test_forward_from_prefix(self, string_map):
        """Keys at or after "b" in ascending order."""
        keys = [key for key, _ in string_map.iterator("b")]

        assert keys == ["bab", "bba", "bua", "bvka kapa", "zza"]

    def test_backward_from_prefix(self, string_map):
        """Keys at or before "b" in descending order."""
        pairs = list(string_map.iterator(end="b", direction=Direction.DESCENDING))

        assert pairs == [("abc", 0)]

    def test_range_query(self):
        """get_range and has_keys_in_range use inclusive bounds."""
        tree = SortedMap((f"key{i}", f"value{i}") for i in range(5))

        result = tree.get_range("key1", "key3")
        keys = [k for k, v in result]
        assert keys == ["key1", "key2", "key3"]
        assert tree.has_keys_in_range("key0", "key0")
        assert not tree.has_keys_in_range("key5", "key9")

    async def test_async_iteration(self, string_map):
        """Async iteration yields (key, value) pairs."""
        everything = [pair async for pair in string_map]
        bounded = [key async for key, _ in string_map.async_iterator("bb", "bv")]

        assert everything[0] == ("abc", 0)
        assert len(everything) == 6
        assert bounded == ["bba", "bua"]
