"""The friend network: user tree plus the profile records behind it."""

from __future__ import annotations

from .profiles import ProfileStore
from .tree import RBNode, RedBlackTree


class FriendNet:
    """Users, their friendships and their stored profiles."""

    def __init__(self, store: ProfileStore) -> None:
        self.store = store
        self.tree = RedBlackTree()
        self._next_index = 0

    def add_user(self, name: str, age: str, occupation: str) -> int:
        """Store a record and index the user; return the record index used.

        The record is always written, so indexes stay aligned with the file,
        but a name already present keeps its first record.
        """
        index = self._next_index
        self.store.append(name, age, occupation)
        self.tree.insert(name, index)
        self._next_index += 1
        return index

    def add_friend(self, name1: str, name2: str) -> bool:
        """Make two existing users friends."""
        return self.tree.add_friend(name1, name2)

    def _line(self, node: RBNode, name: str | None = None) -> str:
        profile = self.store.read(node.index)
        shown = node.name if name is None else name
        return f"{shown},{profile.age},{profile.occupation},"

    def record_line(self, name: str) -> str:
        """Return ``name,age,occupation,`` for a user; KeyError if unknown."""
        node = self.tree.find(name)
        if node is None:
            raise KeyError(name)
        return self._line(node)

    def user_info(self, name: str) -> str | None:
        """The user's record line, or None if there is no such user."""
        node = self.tree.find(name)
        return None if node is None else self._line(node)

    def friends_info(self, name: str) -> list[str]:
        """Record lines of the user's friends, in the order they were added."""
        node = self.tree.find(name)
        if node is None:
            return []
        lines = []
        for friend in node.friends:
            friend_node = self.tree.find(friend)
            assert friend_node is not None
            lines.append(self._line(friend_node, friend))
        return lines

    def range_info(self, low: str, high: str) -> list[str]:
        """Record lines of users with names from ``low`` to ``high`` inclusive."""
        return [self._line(node) for node in self.tree.in_range(low, high)]

    def network_lines(self) -> list[str]:
        """Every user's record line followed by their friends' names."""
        return [
            self._line(node) + "".join(f"{friend}," for friend in node.friends)
            for node in self.tree
        ]

    def tree_lines(self) -> list[str]:
        """Every node as ``name,color,left,right`` in name order."""
        lines = []
        for node in self.tree:
            line = f"{node.name},{int(node.color)},"
            if node.left is not None:
                line += f"{node.left.name},"
            if node.right is not None:
                line += node.right.name
            lines.append(line)
        return lines