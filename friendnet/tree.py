"""Red-black tree of users, keyed by name, with a friend list on each node."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum


class Color(IntEnum):
    """Node colour; the integer value is what the tree dump prints."""

    RED = 0
    BLACK = 1


@dataclass(eq=False)
class RBNode:
    """A user in the tree: name, record index and friend names."""

    name: str
    index: int
    color: Color = Color.RED
    parent: RBNode | None = field(default=None, repr=False)
    left: RBNode | None = field(default=None, repr=False)
    right: RBNode | None = field(default=None, repr=False)
    friends: list[str] = field(default_factory=list)


class RedBlackTree:
    """Balanced search tree of users ordered by name."""

    def __init__(self) -> None:
        self._root: RBNode | None = None
        self._size = 0

    @property
    def root(self) -> RBNode | None:
        """The root node, or None for an empty tree."""
        return self._root

    def __len__(self) -> int:
        return self._size

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    def __iter__(self) -> Iterator[RBNode]:
        """Yield nodes in name order."""
        stack: list[RBNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def find(self, name: str) -> RBNode | None:
        """Return the node for ``name`` or None."""
        node = self._root
        while node is not None:
            if name == node.name:
                return node
            node = node.left if name < node.name else node.right
        return None

    def insert(self, name: str, index: int) -> bool:
        """Insert a user; an existing name is left untouched and False is returned."""
        parent: RBNode | None = None
        node = self._root
        while node is not None:
            parent = node
            if name < node.name:
                node = node.left
            elif name > node.name:
                node = node.right
            else:
                return False
        new = RBNode(name, index, parent=parent)
        if parent is None:
            self._root = new
        elif name < parent.name:
            parent.left = new
        else:
            parent.right = new
        self._fix_insert(new)
        self._size += 1
        return True

    def add_friend(self, name1: str, name2: str) -> bool:
        """Link two distinct existing users both ways; return whether they were linked."""
        if name1 == name2:
            return False
        first = self.find(name1)
        second = self.find(name2)
        if first is None or second is None:
            return False
        if name2 not in first.friends:
            first.friends.append(name2)
        if name1 not in second.friends:
            second.friends.append(name1)
        return True

    def in_range(self, low: str, high: str) -> Iterator[RBNode]:
        """Yield nodes with ``low <= name <= high`` in name order."""

        def walk(node: RBNode | None) -> Iterator[RBNode]:
            if node is None:
                return
            if node.name > low:
                yield from walk(node.left)
            if low <= node.name <= high:
                yield node
            if node.name < high:
                yield from walk(node.right)

        yield from walk(self._root)

    def _fix_insert(self, node: RBNode) -> None:
        while (
            node is not self._root
            and node.color is Color.RED
            and node.parent is not None
            and node.parent.color is Color.RED
        ):
            parent = node.parent
            grand = parent.parent
            assert grand is not None
            if parent is grand.left:
                uncle = grand.right
                if uncle is not None and uncle.color is Color.RED:
                    grand.color = Color.RED
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    node = grand
                    continue
                if node is parent.right:
                    self._rotate_left(parent)
                    node = parent
                    parent = node.parent
                    assert parent is not None
                self._rotate_right(grand)
            else:
                uncle = grand.left
                if uncle is not None and uncle.color is Color.RED:
                    grand.color = Color.RED
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    node = grand
                    continue
                if node is parent.left:
                    self._rotate_right(parent)
                    node = parent
                    parent = node.parent
                    assert parent is not None
                self._rotate_left(grand)
            parent.color, grand.color = grand.color, parent.color
            node = parent
        assert self._root is not None
        self._root.color = Color.BLACK

    def _replace_child(self, node: RBNode, replacement: RBNode) -> None:
        parent = node.parent
        replacement.parent = parent
        if parent is None:
            self._root = replacement
        elif node is parent.left:
            parent.left = replacement
        else:
            parent.right = replacement

    def _rotate_left(self, node: RBNode) -> None:
        pivot = node.right
        assert pivot is not None
        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node
        self._replace_child(node, pivot)
        pivot.left = node
        node.parent = pivot

    def _rotate_right(self, node: RBNode) -> None:
        pivot = node.left
        assert pivot is not None
        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node
        self._replace_child(node, pivot)
        pivot.right = node
        node.parent = pivot