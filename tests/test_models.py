"""
Tests for data models: GasConfig, NextItem, Order, and SortedContainers.
"""

import random

import pytest

from mock_storage.models.gas import GasConfig
from mock_storage.models.next_item import NextItem
from mock_storage.models.order import Order
from mock_storage.models.sortedcontainers import RedBlackTree
from mock_storage.models.sortedcontainers.red_black_tree import Color


def _black_height(node) -> int:
    """Check Red-Black properties below node and return its black height."""
    if node is None:
        return 1

    if node.color == Color.RED:
        for child in (node.left, node.right):
            assert child is None or child.color == Color.BLACK, "red node with red child"

    for child in (node.left, node.right):
        if child is not None:
            assert child.parent is node, "broken parent link"
    if node.left is not None:
        assert node.left.key < node.key
    if node.right is not None:
        assert node.right.key > node.key

    left = _black_height(node.left)
    right = _black_height(node.right)
    assert left == right, "unequal black height"
    return left + (1 if node.color == Color.BLACK else 0)


def assert_valid_tree(tree: RedBlackTree) -> None:
    root = tree._root
    if root is not None:
        assert root.color == Color.BLACK
        assert root.parent is None
    _black_height(root)


class TestGasConfig:
    """Tests for GasConfig."""

    def test_defaults(self):
        """Test default prices."""
        gas = GasConfig()
        assert gas.range_setup == 11
        assert gas.iterator_exhausted == 37
        assert gas.per_key_byte == 1
        assert gas.per_value_byte == 1

    def test_costs(self):
        """Test cost formulas with default prices."""
        gas = GasConfig()
        assert gas.read_cost(b"foo") == 3
        assert gas.write_cost(b"foo", b"bank") == 7
        assert gas.remove_cost(b"food") == 4
        assert gas.step_cost(b"ant", b"hill") == 7
        assert gas.read_cost(b"") == 0

    def test_custom_prices(self, custom_gas):
        """Test cost formulas scale with configured prices."""
        assert custom_gas.read_cost(b"ab") == 6
        assert custom_gas.write_cost(b"ab", b"xyz") == 36
        assert custom_gas.step_cost(b"ab", b"xyz") == 36
        assert custom_gas.remove_cost(b"ab") == 6

    def test_negative_price_rejected(self):
        """Test validation of negative prices."""
        with pytest.raises(ValueError, match="range_setup must be >= 0"):
            GasConfig(range_setup=-1)

    def test_non_int_price_rejected(self):
        """Test validation of non-integer prices."""
        with pytest.raises(ValueError, match="per_key_byte must be an int"):
            GasConfig(per_key_byte=1.5)
        with pytest.raises(ValueError):
            GasConfig(per_value_byte=True)

    def test_frozen(self):
        """Test prices cannot be changed after construction."""
        gas = GasConfig()
        with pytest.raises(AttributeError):
            gas.range_setup = 0


class TestNextItem:
    """Tests for NextItem."""

    def test_item(self):
        item = NextItem.item(b"foo", b"bar", 6)
        assert not item.is_exhausted()
        assert item.kv == (b"foo", b"bar")
        assert item.gas == 6

    def test_exhausted(self):
        item = NextItem.exhausted(37)
        assert item.is_exhausted()
        assert item.kv is None
        assert item.gas == 37

    def test_empty_key_is_an_item(self):
        """Test an empty key still counts as a yielded entry."""
        item = NextItem.item(b"", b"", 0)
        assert not item.is_exhausted()
        assert item.kv == (b"", b"")


class TestOrder:
    """Tests for Order."""

    def test_wire_values(self):
        assert Order(1) is Order.ASCENDING
        assert Order(2) is Order.DESCENDING

    def test_invalid_value(self):
        with pytest.raises(ValueError):
            Order(3)


class TestRedBlackTree:
    """Tests for RedBlackTree sorted container."""

    def test_put_and_get(self, tree):
        """Test basic put and get operations."""
        tree.put(b"key1", b"value1")
        tree.put(b"key2", b"value2")

        assert tree.get(b"key1") == b"value1"
        assert tree.get(b"key2") == b"value2"
        assert tree.get(b"key3") is None

    def test_has(self, tree):
        """Test has operation."""
        tree.put(b"key1", b"value1")

        assert tree.has(b"key1")
        assert not tree.has(b"key2")

    def test_delete(self, tree):
        """Test delete operation."""
        tree.put(b"key1", b"value1")
        tree.put(b"key2", b"value2")

        assert tree.delete(b"key1")
        assert not tree.has(b"key1")
        assert tree.has(b"key2")
        assert not tree.delete(b"key3")
        assert tree.size() == 1

    def test_delete_last_key(self, tree):
        """Test deleting the only key leaves an empty tree."""
        tree.put(b"only", b"1")
        assert tree.delete(b"only")
        assert tree.size() == 0
        assert list(tree) == []

    def test_update(self, tree):
        """Test updating existing key."""
        tree.put(b"key1", b"value1")
        tree.put(b"key1", b"value2")

        assert tree.get(b"key1") == b"value2"
        assert tree.size() == 1

    def test_byte_order(self, tree):
        """Test keys sort by unsigned bytes, prefixes first."""
        for key in [b"\xff", b"a", b"ab", b"", b"\x00", b"aa", b"b"]:
            tree.put(key, b"")

        keys = [k for k, v in tree]
        assert keys == [b"", b"\x00", b"a", b"aa", b"ab", b"b", b"\xff"]

    def test_iteration(self, tree):
        """Test sorted iteration."""
        tree.put(b"c", b"3")
        tree.put(b"a", b"1")
        tree.put(b"b", b"2")

        keys = [k for k, v in tree]
        assert keys == [b"a", b"b", b"c"]

    def test_range_iteration(self, tree):
        """Test range iteration."""
        for i in range(10):
            tree.put(f"key{i:02d}".encode(), f"value{i}".encode())

        # Range [key03, key07)
        keys = [k for k, v in tree.iterator(b"key03", b"key07")]
        assert keys == [b"key03", b"key04", b"key05", b"key06"]

    def test_descending_range_iteration(self, tree):
        """Test descending range iteration keeps the same half-open bounds."""
        for i in range(10):
            tree.put(f"key{i:02d}".encode(), f"value{i}".encode())

        keys = [k for k, v in tree.iterator(b"key03", b"key07", Order.DESCENDING)]
        assert keys == [b"key06", b"key05", b"key04", b"key03"]

    def test_bounds_between_keys(self, tree):
        """Test bounds that fall between stored keys."""
        for key in [b"b", b"d", b"f", b"h"]:
            tree.put(key, key)

        assert [k for k, _ in tree.iterator(b"c", b"g")] == [b"d", b"f"]
        assert [k for k, _ in tree.iterator(b"c", b"g", Order.DESCENDING)] == [b"f", b"d"]
        assert [k for k, _ in tree.iterator(None, b"e", Order.DESCENDING)] == [b"d", b"b"]
        assert [k for k, _ in tree.iterator(b"e", None, Order.DESCENDING)] == [b"h", b"f"]

    def test_inverted_range_is_empty(self, tree):
        """Test the container itself yields nothing for start >= end."""
        tree.put(b"a", b"1")
        tree.put(b"m", b"2")

        assert list(tree.iterator(b"z", b"a")) == []
        assert list(tree.iterator(b"m", b"m", Order.DESCENDING)) == []

    def test_invariants_under_random_operations(self, tree, large_sample_entries):
        """Test Red-Black properties hold across inserts and deletes."""
        rng = random.Random(1234)
        entries = list(large_sample_entries)
        rng.shuffle(entries)
        expected = {}

        for key, value in entries:
            tree.put(key, value)
            expected[key] = value
        assert_valid_tree(tree)

        for key, _ in rng.sample(entries, 600):
            assert tree.delete(key)
            del expected[key]
        assert_valid_tree(tree)

        assert tree.size() == len(expected)
        assert list(tree) == sorted(expected.items())
        descending = list(tree.iterator(order=Order.DESCENDING))
        assert descending == sorted(expected.items(), reverse=True)

    def test_delete_everything(self, tree):
        """Test removing all keys in random order."""
        rng = random.Random(7)
        keys = [bytes([rng.randrange(256) for _ in range(4)]) for _ in range(200)]
        for key in keys:
            tree.put(key, b"v")

        unique = list(dict.fromkeys(keys))
        rng.shuffle(unique)
        for key in unique:
            assert tree.delete(key)
            assert_valid_tree(tree)

        assert tree.size() == 0
        assert tree._root is None

    async def test_async_iteration(self, tree):
        """Test async full iteration."""
        tree.put(b"c", b"3")
        tree.put(b"a", b"1")
        tree.put(b"b", b"2")

        keys = [k async for k, v in tree]
        assert keys == [b"a", b"b", b"c"]

    async def test_async_range_iteration(self, tree):
        """Test async range iteration in both directions."""
        for i in range(10):
            tree.put(f"key{i:02d}".encode(), f"value{i}".encode())

        ascending = [k async for k, v in tree.async_iterator(b"key07")]
        assert ascending == [b"key07", b"key08", b"key09"]

        descending = [
            k async for k, v in tree.async_iterator(None, b"key02", Order.DESCENDING)
        ]
        assert descending == [b"key01", b"key00"]
