from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Optional, List, Tuple, Iterator
from treebench import types
from treebench.compare import natural_compare
from treebench.errors import InvariantViolation


@dataclass
class Node(Generic[types.T]):
    """tree nodes"""

    key: types.T
    left: Optional[Node[types.T]] = None
    right: Optional[Node[types.T]] = None


class BST(Generic[types.T]):
    """
    unbalanced binary search tree. shape depends entirely on insertion
    order, sorted input degrades into a chain. everything here is iterative
    so a chain deeper than the recursion limit is fine
    """

    root: Optional[Node[types.T]] = None

    def __init__(self, comparator: Optional[types.Comparator] = None):
        self._compare = comparator or natural_compare
        self._size = 0

    def insert(self, key: Optional[types.T]) -> None:
        """walk down to a leaf slot. an equal key overwrites the stored one"""

        if key is None:
            return

        if not self.root:
            self.root = Node[types.T](key=key)
            self._size += 1
            return

        node = self.root

        while True:
            cmp = self._compare(key, node.key)

            if cmp == 0:
                node.key = key
                return
            if cmp < 0:
                if not node.left:
                    node.left = Node[types.T](key=key)
                    break
                node = node.left
            else:
                if not node.right:
                    node.right = Node[types.T](key=key)
                    break
                node = node.right

        self._size += 1

    def search(self, key: Optional[types.T]) -> Optional[types.T]:
        """stored key equal to the search key, if any"""

        if key is None:
            return None

        node = self.root

        while node:
            cmp = self._compare(key, node.key)

            if cmp == 0:
                return node.key

            node = node.left if cmp < 0 else node.right

        return None

    def contains(self, key: Optional[types.T]) -> bool:
        """membership check"""

        return self.search(key) is not None

    def size(self) -> int:
        """number of distinct keys"""

        return self._size

    def is_empty(self) -> bool:
        """helper"""

        return self._size == 0

    def height(self) -> int:
        """edges on the longest root to leaf path, -1 when empty"""

        if not self.root:
            return -1

        deepest = 0
        stack: List[Tuple[Node[types.T], int]] = [(self.root, 0)]

        while stack:
            node, depth = stack.pop()
            deepest = max(deepest, depth)

            if node.left:
                stack.append((node.left, depth + 1))
            if node.right:
                stack.append((node.right, depth + 1))

        return deepest

    def in_order(self) -> List[types.T]:
        """keys in ascending order"""

        return list(self)

    def validate(self) -> None:
        """raise if in order traversal is not strictly increasing"""

        prev: Optional[types.T] = None
        count = 0

        for key in self:
            if count and self._compare(prev, key) >= 0:
                raise InvariantViolation(f"{prev!r} is not less than {key!r}")
            prev = key
            count += 1

        if count != self._size:
            raise InvariantViolation(f"size {self._size} but {count} nodes")

    def __iter__(self) -> Iterator[types.T]:
        stack: List[Node[types.T]] = []
        node = self.root

        while stack or node:
            while node:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: types.T) -> bool:
        return self.contains(key)
