from abc import ABC, abstractmethod
from typing import Any, List, Optional

from treemap.errors import InvalidOperation


class SortedMap(ABC):
    """Abstract base class representing a map ordered by key."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of entries in the map."""
        pass

    def size(self) -> int:
        """Return the number of entries in the map."""
        return len(self)

    def is_empty(self) -> bool:
        """Return True if the map holds no entries."""
        return len(self) == 0

    @abstractmethod
    def get(self, k: Any) -> Optional[Any]:
        """Return the value associated with key k, or None."""
        pass

    @abstractmethod
    def put(self, k: Any, v: Any) -> Optional[Any]:
        """Insert or replace entry (k, v) and return old value, or None."""
        pass

    @abstractmethod
    def remove(self, k: Any) -> Optional[Any]:
        """Remove entry with key k and return its value, or None."""
        pass

    @abstractmethod
    def to_string(self) -> str:
        """Render every entry in ascending key order."""
        pass

    def __str__(self) -> str:
        return self.to_string()


class BinarySearchTreeMap(SortedMap):
    """Map implementation using an unbalanced binary search tree.

    Every node is owned by exactly one slot: the map's root or one of its
    parent's two child slots. Nodes keep no parent pointer, so walks that
    need to modify a slot carry the parent along themselves.

    Only leaf nodes can be removed; removing a node that still has a child
    raises InvalidOperation and leaves the tree untouched.
    """

    class _Node:
        """Nested node class holding one entry and its two subtrees."""
        __slots__ = '_key', '_value', '_left', '_right'

        def __init__(self, key, value, left=None, right=None):
            self._key = key
            self._value = value
            self._left = left
            self._right = right

        def get_key(self): return self._key
        def get_value(self): return self._value
        def get_left(self): return self._left
        def get_right(self): return self._right
        def set_left(self, left): self._left = left
        def set_right(self, right): self._right = right

        def set_value(self, value):
            """Replace the stored value and return the previous one."""
            old = self._value
            self._value = value
            return old

        def is_leaf(self) -> bool:
            return self._left is None and self._right is None

        def __repr__(self): return f"({self._key}, {self._value})"

    def __init__(self):
        self._root = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()})"

    def _child(self, node: "_Node", k: Any) -> Optional["_Node"]:
        """Return the child of node on the side where k belongs."""
        if k > node.get_key():
            return node.get_right()
        return node.get_left()

    def get(self, k: Any) -> Optional[Any]:
        """Return the value associated with key k, or None."""
        walk = self._root
        while walk is not None:
            if k == walk.get_key():
                return walk.get_value()
            walk = self._child(walk, k)
        return None

    def put(self, k: Any, v: Any) -> Optional[Any]:
        """Insert or replace entry (k, v) and return old value, or None."""
        if self._root is None:
            self._root = self._Node(k, v)
            self._size += 1
            return None

        walk = self._root
        while True:
            if k == walk.get_key():
                return walk.set_value(v)
            child = self._child(walk, k)
            if child is None:
                break
            walk = child

        # walk is the parent of the empty slot where k belongs
        if k > walk.get_key():
            walk.set_right(self._Node(k, v))
        else:
            walk.set_left(self._Node(k, v))
        self._size += 1
        return None

    def remove(self, k: Any) -> Optional[Any]:
        """Remove the leaf holding key k and return its value, or None.

        Raises InvalidOperation if the node holding k has any child.
        """
        parent = None
        walk = self._root
        while walk is not None:
            if k == walk.get_key():
                break
            parent = walk
            walk = self._child(walk, k)

        if walk is None:
            return None
        if not walk.is_leaf():
            raise InvalidOperation()

        if parent is None:
            self._root = None
        elif parent.get_left() is walk:
            parent.set_left(None)
        else:
            parent.set_right(None)
        self._size -= 1
        return walk.get_value()

    def to_string(self) -> str:
        """Return "[ (k1, v1) (k2, v2) ... ]" in ascending key order.

        Uses an explicit stack so degenerate trees of any depth render.
        """
        parts = ["["]
        stack: List["BinarySearchTreeMap._Node"] = []
        node = self._root
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.get_left()
            else:
                node = stack.pop()
                parts.append(repr(node))
                node = node.get_right()
        parts.append("]")
        return " ".join(parts)
