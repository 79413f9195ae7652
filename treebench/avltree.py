from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Optional, List, Iterator
from treebench import types
from treebench.compare import natural_compare
from treebench.errors import InvariantViolation


@dataclass
class Node(Generic[types.T]):
    """tree nodes, height is 1 for a leaf"""

    key: types.T
    left: Optional[Node[types.T]] = None
    right: Optional[Node[types.T]] = None
    height: int = 1


class AVLTree(Generic[types.T]):
    """avl tree implementation"""

    root: Optional[Node[types.T]] = None

    def __init__(self, comparator: Optional[types.Comparator] = None):
        self._compare = comparator or natural_compare
        self._size = 0
        self.rotations = 0

    def search(self, key: Optional[types.T]) -> Optional[types.T]:
        """bst search, the balance invariant bounds the walk to O(log n)"""

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

    def insert(self, key: Optional[types.T]) -> None:
        """proxy to root node"""

        if key is None:
            return

        self.root = self._insert(self.root, key)

    def _insert(self, root: Optional[Node[types.T]], key: types.T) -> Node[types.T]:
        """bst insert then rebalance if balance factor +/- 2"""

        if not root:
            self._size += 1
            return Node[types.T](key=key)

        cmp = self._compare(key, root.key)

        if cmp == 0:
            root.key = key
            return root
        if cmp < 0:
            root.left = self._insert(root.left, key)
        else:
            root.right = self._insert(root.right, key)

        self._update(root)
        balance = self._balance(root)

        if balance > 1 and root.left:
            if self._balance(root.left) < 0:
                root.left = self._left_rotate(root.left)
            return self._right_rotate(root)
        if balance < -1 and root.right:
            if self._balance(root.right) > 0:
                root.right = self._right_rotate(root.right)
            return self._left_rotate(root)

        return root

    def _left_rotate(self, node: Node[types.T]) -> Node[types.T]:
        """l rotate"""

        right = node.right
        if not right:
            return node
        node.right = right.left
        right.left = node
        self._update(node)
        self._update(right)
        self.rotations += 1
        return right

    def _right_rotate(self, node: Node[types.T]) -> Node[types.T]:
        """r rotate"""

        left = node.left
        if not left:
            return node
        node.left = left.right
        left.right = node
        self._update(node)
        self._update(left)
        self.rotations += 1
        return left

    def _update(self, node: Node[types.T]) -> None:
        """recompute height from children"""

        node.height = 1 + max(self._getheight(node.left), self._getheight(node.right))

    def _balance(self, node: Node[types.T]) -> int:
        """left height minus right height"""

        return self._getheight(node.left) - self._getheight(node.right)

    def _getheight(self, node: Optional[Node[types.T]]) -> int:
        """helper"""

        if not node:
            return 0

        return node.height

    def size(self) -> int:
        """number of distinct keys"""

        return self._size

    def is_empty(self) -> bool:
        """helper"""

        return self._size == 0

    def height(self) -> int:
        """edges on the longest root to leaf path, -1 when empty"""

        return self._getheight(self.root) - 1

    def in_order(self) -> List[types.T]:
        """keys in ascending order"""

        return list(self)

    def validate(self) -> None:
        """
        raise if ordering, stored heights or the balance invariant are
        broken anywhere in the tree
        """

        count = self._validate(self.root, None, None)

        if count != self._size:
            raise InvariantViolation(f"size {self._size} but {count} nodes")

    def _validate(
        self,
        root: Optional[Node[types.T]],
        low: Optional[types.T],
        high: Optional[types.T],
    ) -> int:
        if not root:
            return 0

        if low is not None and self._compare(root.key, low) <= 0:
            raise InvariantViolation(f"{root.key!r} is not greater than {low!r}")
        if high is not None and self._compare(root.key, high) >= 0:
            raise InvariantViolation(f"{root.key!r} is not less than {high!r}")

        count = 1 + self._validate(root.left, low, root.key)
        count += self._validate(root.right, root.key, high)

        lheight = self._getheight(root.left)
        rheight = self._getheight(root.right)

        if root.height != 1 + max(lheight, rheight):
            raise InvariantViolation(f"stale height at {root.key!r}")
        if abs(lheight - rheight) > 1:
            raise InvariantViolation(
                f"balance factor {lheight - rheight} at {root.key!r}"
            )

        return count

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
