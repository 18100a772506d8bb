"""
Red-Black Tree implementation for byte-keyed sorted storage.

Balanced binary search tree with O(log N) put, get and delete, and
bounded in-order traversal in both directions.
"""

from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass
from enum import IntEnum

from mock_storage.interfaces.sorted_container import SortedContainer
from mock_storage.models.order import Order

_OPPOSITE = {"left": "right", "right": "left"}


class Color(IntEnum):
    """Node color for Red-Black Tree."""

    RED = 0
    BLACK = 1


@dataclass
class Node:
    """Node in the Red-Black Tree."""

    key: bytes
    value: bytes
    color: Color = Color.RED
    left: "Node | None" = None
    right: "Node | None" = None
    parent: "Node | None" = None


def _is_red(node: Node | None) -> bool:
    return node is not None and node.color == Color.RED


class RedBlackTree(SortedContainer):
    """
    Red-Black Tree implementation of SortedContainer.

    Properties maintained:
    1. Every node is either red or black
    2. Root is always black
    3. Red nodes cannot have red children
    4. Every path from root to leaf has same number of black nodes

    Rebalancing is written once per case and mirrored through the
    side/opposite-side attribute names instead of duplicating each branch.
    """

    def __init__(self) -> None:
        self._root: Node | None = None
        self._size: int = 0

    def put(self, key: bytes, value: bytes) -> None:
        """Insert or update a key-value pair. O(log N)"""
        parent = None
        current = self._root

        while current is not None:
            parent = current
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                current.value = value
                return

        new_node = Node(key=key, value=value, parent=parent)
        if parent is None:
            self._root = new_node
        elif key < parent.key:
            parent.left = new_node
        else:
            parent.right = new_node

        self._size += 1
        self._fix_insert(new_node)

    def get(self, key: bytes) -> bytes | None:
        """Retrieve value by key. O(log N)"""
        node = self._find_node(key)
        return node.value if node else None

    def delete(self, key: bytes) -> bool:
        """Remove a key-value pair. O(log N)"""
        node = self._find_node(key)
        if node is None:
            return False

        self._delete_node(node)
        self._size -= 1
        return True

    def has(self, key: bytes) -> bool:
        return self._find_node(key) is not None

    def size(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[tuple[bytes, bytes]]:
        return self.iterator()

    def iterator(
        self,
        start: bytes | None = None,
        end: bytes | None = None,
        order: Order = Order.ASCENDING,
    ) -> Iterator[tuple[bytes, bytes]]:
        return _RangeIterator(self._root, start, end, Order(order))

    def __aiter__(self) -> AsyncIterator[tuple[bytes, bytes]]:
        return self.async_iterator()

    def async_iterator(
        self,
        start: bytes | None = None,
        end: bytes | None = None,
        order: Order = Order.ASCENDING,
    ) -> AsyncIterator[tuple[bytes, bytes]]:
        return _AsyncRangeIterator(self._root, start, end, Order(order))

    def _find_node(self, key: bytes) -> Node | None:
        current = self._root
        while current is not None:
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                return current
        return None

    def _rotate(self, node: Node, direction: str) -> None:
        """Rotate node down towards `direction` ("left" or "right")."""
        other = _OPPOSITE[direction]
        pivot = getattr(node, other)

        inner = getattr(pivot, direction)
        setattr(node, other, inner)
        if inner is not None:
            inner.parent = node

        self._replace_node(node, pivot)
        setattr(pivot, direction, node)
        node.parent = pivot

    def _replace_node(self, node: Node, child: Node | None) -> None:
        """Put child where node hangs from its parent."""
        if node.parent is None:
            self._root = child
        elif node is node.parent.left:
            node.parent.left = child
        else:
            node.parent.right = child

        if child is not None:
            child.parent = node.parent

    def _fix_insert(self, node: Node) -> None:
        """Restore Red-Black properties after inserting a red node."""
        while node.parent is not None and node.parent.color == Color.RED:
            parent = node.parent
            # A red parent is never the root, so the grandparent exists
            grandparent = parent.parent
            side = "left" if parent is grandparent.left else "right"
            other = _OPPOSITE[side]
            uncle = getattr(grandparent, other)

            if _is_red(uncle):
                parent.color = Color.BLACK
                uncle.color = Color.BLACK
                grandparent.color = Color.RED
                node = grandparent
                continue

            if node is getattr(parent, other):
                # Inner grandchild: rotate into the outer position first
                node = parent
                self._rotate(node, side)
                parent = node.parent

            parent.color = Color.BLACK
            grandparent.color = Color.RED
            self._rotate(grandparent, other)

        self._root.color = Color.BLACK

    def _delete_node(self, node: Node) -> None:
        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left

            node.key = successor.key
            node.value = successor.value
            node = successor

        # Node has at most one child now
        child = node.left if node.left is not None else node.right

        if node.color == Color.BLACK:
            if _is_red(child):
                child.color = Color.BLACK
            else:
                # Rebalance while node is still linked in, then splice it out
                self._fix_delete(node)

        self._replace_node(node, child)

    def _fix_delete(self, node: Node) -> None:
        """Resolve the missing black on node's path before it is removed."""
        while node is not self._root and node.color == Color.BLACK:
            parent = node.parent
            side = "left" if node is parent.left else "right"
            other = _OPPOSITE[side]
            sibling = getattr(parent, other)

            if _is_red(sibling):
                sibling.color = Color.BLACK
                parent.color = Color.RED
                self._rotate(parent, side)
                sibling = getattr(parent, other)

            if not _is_red(sibling.left) and not _is_red(sibling.right):
                sibling.color = Color.RED
                node = parent
                continue

            if not _is_red(getattr(sibling, other)):
                getattr(sibling, side).color = Color.BLACK
                sibling.color = Color.RED
                self._rotate(sibling, other)
                sibling = getattr(parent, other)

            sibling.color = parent.color
            parent.color = Color.BLACK
            getattr(sibling, other).color = Color.BLACK
            self._rotate(parent, side)
            node = self._root

        node.color = Color.BLACK


class _RangeCursor:
    """
    Stack-based in-order walk over [start, end) in either direction.

    The stack holds the path to the next node. Nodes on the near side of
    the range are skipped while the path is built; the first node past the
    far bound ends the walk.
    """

    def __init__(
        self,
        root: Node | None,
        start: bytes | None,
        end: bytes | None,
        order: Order,
    ) -> None:
        self._stack: list[Node] = []
        self._start = start
        self._end = end
        self._ascending = order == Order.ASCENDING

        self._push_path(root)

    def next_node(self) -> Node | None:
        if not self._stack:
            return None

        node = self._stack.pop()

        past_end = self._after_range if self._ascending else self._before_range
        if past_end(node.key):
            self._stack.clear()
            return None

        self._push_path(node.right if self._ascending else node.left)
        return node

    def _before_range(self, key: bytes) -> bool:
        return self._start is not None and key < self._start

    def _after_range(self, key: bytes) -> bool:
        return self._end is not None and key >= self._end

    def _push_path(self, node: Node | None) -> None:
        """Push the path to the first in-range node of this subtree."""
        while node is not None:
            if self._ascending:
                if self._before_range(node.key):
                    node = node.right
                else:
                    self._stack.append(node)
                    node = node.left
            else:
                if self._after_range(node.key):
                    node = node.left
                else:
                    self._stack.append(node)
                    node = node.right


class _RangeIterator(Iterator[tuple[bytes, bytes]]):
    """Iterator for range queries on Red-Black Tree."""

    def __init__(
        self,
        root: Node | None,
        start: bytes | None,
        end: bytes | None,
        order: Order,
    ) -> None:
        self._cursor = _RangeCursor(root, start, end, order)

    def __iter__(self) -> Iterator[tuple[bytes, bytes]]:
        return self

    def __next__(self) -> tuple[bytes, bytes]:
        node = self._cursor.next_node()
        if node is None:
            raise StopIteration
        return (node.key, node.value)


class _AsyncRangeIterator(AsyncIterator[tuple[bytes, bytes]]):
    """Async iterator for range queries on Red-Black Tree (in-memory, no I/O)."""

    def __init__(
        self,
        root: Node | None,
        start: bytes | None,
        end: bytes | None,
        order: Order,
    ) -> None:
        self._cursor = _RangeCursor(root, start, end, order)

    def __aiter__(self) -> "_AsyncRangeIterator":
        return self

    async def __anext__(self) -> tuple[bytes, bytes]:
        node = self._cursor.next_node()
        if node is None:
            raise StopAsyncIteration
        return (node.key, node.value)
