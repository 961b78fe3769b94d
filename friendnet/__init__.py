"""FriendNet: user profiles in a fixed-width file, indexed by a red-black tree, with friendship lists."""

__version__ = "0.1.0"
__all__ = ["tree", "profiles", "network", "cli"]