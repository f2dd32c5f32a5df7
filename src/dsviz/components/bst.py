"""Unbalanced binary search tree of numeric values.

Insert, find and remove are O(h) where h is the tree height: O(log n) on
average and O(n) for sorted insertion order. The tree never rebalances.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, List, Optional

if TYPE_CHECKING:
    from ..core.types import Number


# -----------------------------
# Tree Node
# -----------------------------
class TreeNode:
    """A node in a binary search tree. Children are owned by their parent."""

    __slots__ = ("value", "left", "right")

    def __init__(
        self,
        value: Number,
        left: Optional[TreeNode] = None,
        right: Optional[TreeNode] = None,
    ) -> None:
        self.value = value
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"TreeNode({self.value!r})"

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


# -----------------------------
# Binary Search Tree
# -----------------------------
class BinarySearchTree:
    """Binary search tree without duplicates.

    Invariants:
        - every value in a node's left subtree is smaller than the node's value
        - every value in a node's right subtree is larger
        - inserting a value that is already present changes nothing
    """

    __slots__ = ("_root",)

    def __init__(self, initial: Optional[List[Number]] = None) -> None:
        self._root: Optional[TreeNode] = None
        for value in initial or []:
            self.insert(value)

    @property
    def root(self) -> Optional[TreeNode]:
        return self._root

    def is_empty(self) -> bool:
        return self._root is None

    def size(self) -> int:
        return len(self.in_order())

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, value: Number) -> bool:
        return self.contains(value)

    # -------------------------------
    # Insert / Find
    # -------------------------------
    def insert(self, value: Number) -> BinarySearchTree:
        """Attach value at the first empty slot on its comparison path."""
        new_node = TreeNode(value)
        if self._root is None:
            self._root = new_node
            return self

        current = self._root
        while True:
            if value == current.value:
                return self  # first insertion wins
            if value < current.value:
                if current.left is None:
                    current.left = new_node
                    return self
                current = current.left
            else:
                if current.right is None:
                    current.right = new_node
                    return self
                current = current.right

    def find(self, value: Number) -> Optional[TreeNode]:
        current = self._root
        while current is not None:
            if value == current.value:
                return current
            current = current.left if value < current.value else current.right
        return None

    def contains(self, value: Number) -> bool:
        return self.find(value) is not None

    def search_path(self, value: Number) -> List[Number]:
        """
        Values of the nodes visited while descending towards value.
        The last element is value itself when it is present.
        """
        path: List[Number] = []
        current = self._root
        while current is not None:
            path.append(current.value)
            if value == current.value:
                break
            current = current.left if value < current.value else current.right
        return path

    def find_min(self) -> Optional[Number]:
        if self._root is None:
            return None
        current = self._root
        while current.left is not None:
            current = current.left
        return current.value

    def find_max(self) -> Optional[Number]:
        if self._root is None:
            return None
        current = self._root
        while current.right is not None:
            current = current.right
        return current.value

    # -------------------------------
    # Remove
    # -------------------------------
    def remove(self, value: Number) -> BinarySearchTree:
        """Remove value if present; an absent value is a no-op."""
        parent: Optional[TreeNode] = None
        node = self._root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right

        if node is not None:
            self._remove_node(parent, node)
        return self

    def _remove_node(self, parent: Optional[TreeNode], node: TreeNode) -> None:
        # Two children: take the in-order successor's value, then unlink the
        # successor, which has no left child.
        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            parent, node = successor_parent, successor

        # No children or one child
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    # -------------------------------
    # Traversals
    # -------------------------------
    def _walk(self, order: str, visit: Callable[[Number], None]) -> None:
        if self._root is None:
            return

        if order == "pre":
            stack = [self._root]
            while stack:
                node = stack.pop()
                visit(node.value)
                if node.right is not None:
                    stack.append(node.right)
                if node.left is not None:
                    stack.append(node.left)

        elif order == "in":
            stack = []
            node = self._root
            while stack or node is not None:
                while node is not None:
                    stack.append(node)
                    node = node.left
                node = stack.pop()
                visit(node.value)
                node = node.right

        elif order == "post":
            # Root, right, left reversed is left, right, root
            stack = [self._root]
            reverse: List[TreeNode] = []
            while stack:
                node = stack.pop()
                reverse.append(node)
                if node.left is not None:
                    stack.append(node.left)
                if node.right is not None:
                    stack.append(node.right)
            for node in reversed(reverse):
                visit(node.value)

    def in_order(self) -> List[Number]:
        """Left, root, right. Ascending on a valid tree."""
        values: List[Number] = []
        self._walk("in", values.append)
        return values

    def pre_order(self) -> List[Number]:
        """Root, left, right."""
        values: List[Number] = []
        self._walk("pre", values.append)
        return values

    def post_order(self) -> List[Number]:
        """Left, right, root."""
        values: List[Number] = []
        self._walk("post", values.append)
        return values

    # -------------------------------
    # Utility
    # -------------------------------
    def height(self) -> int:
        """
        Number of nodes on the longest root-to-leaf path (0 when empty).
        Time Complexity: O(n) since all nodes must be visited
        """

        levels = 0
        level = [self._root] if self._root is not None else []
        while level:
            levels += 1
            level = [child for node in level for child in (node.left, node.right) if child is not None]
        return levels

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.in_order()})"
