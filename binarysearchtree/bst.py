"""Binary search tree nodes with parent links and the classic tree operations."""

from __future__ import annotations

__all__ = ["BstNode", "tree_insert", "tree_delete"]


class BstNode:
    """A binary search tree node holding an integer key."""

    __slots__ = ("key", "parent", "left", "right")

    def __init__(self, key: int) -> None:
        self.key = key
        self.parent: BstNode | None = None
        self.left: BstNode | None = None
        self.right: BstNode | None = None

    def __repr__(self) -> str:
        left = self.left.key if self.left is not None else None
        right = self.right.key if self.right is not None else None
        parent = self.parent.key if self.parent is not None else None
        return f"BstNode(key={self.key!r}, parent={parent!r}, left={left!r}, right={right!r})"

    def _new_child(self, value: int) -> BstNode:
        child = BstNode(value)
        child.parent = self
        return child

    def add_left_child(self, value: int) -> BstNode:
        """Replace the left child with a new node holding ``value``."""
        self.left = self._new_child(value)
        return self.left

    def add_right_child(self, value: int) -> BstNode:
        """Replace the right child with a new node holding ``value``."""
        self.right = self._new_child(value)
        return self.right

    def copy(self) -> BstNode:
        """Return a new node sharing this node's key, parent and children."""
        clone = BstNode(self.key)
        clone.parent = self.parent
        clone.left = self.left
        clone.right = self.right
        return clone

    def tree_search(self, value: int) -> BstNode | None:
        """Return a copy of the node holding ``value``, or None.

        When ``value`` is smaller than a key but there is no left subtree,
        the search continues into the right subtree.
        """
        node: BstNode | None = self
        while node is not None:
            if node.key == value:
                return node.copy()
            if value < node.key and node.left is not None:
                node = node.left
            else:
                node = node.right
        return None

    def minimum(self) -> BstNode:
        """Return a copy of the leftmost node of this subtree."""
        node = self
        while node.left is not None:
            node = node.left
        return node.copy()

    def maximum(self) -> BstNode:
        """Return a copy of the rightmost node of this subtree."""
        node = self
        while node.right is not None:
            node = node.right
        return node.copy()

    def root(self) -> BstNode:
        """Follow parent links up to the node without a parent."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def tree_successor(self) -> BstNode | None:
        """Return the node with the next larger key, or None for the largest."""
        if self.right is not None:
            return self.right.minimum()
        x = self
        y = x.parent
        while y is not None:
            if y.left is not None and y.left.key == x.key:
                return y
            x = y
            y = y.parent
        return None

    def tree_successor_simpler(self) -> BstNode | None:
        """Successor lookup built on the "nil" test of a node.

        A node counts as nil unless it has a parent and both children.
        Raises ValueError when the walk needs a parent that is missing.
        """
        x = self
        right = x.right
        if not _is_nil(right):
            return right.minimum()
        y = x.parent
        if y is None:
            raise ValueError(f"node {x.key} has no parent")
        y_right = y.right
        while _is_nil(y) and _keys_match(x, y_right):
            x = y
            if y.parent is None:
                raise ValueError(f"node {y.key} has no parent")
            y = y.parent
        if _keys_match(y, x.root()):
            return None
        return y

    def tree_predecessor(self) -> BstNode | None:
        """Return the parent if this node is its right child, else the left subtree's maximum.

        Raises ValueError for a node without a parent.
        """
        parent = self.parent
        if parent is None:
            raise ValueError(f"node {self.key} has no parent")
        if parent.right is not None and parent.right.key == self.key:
            return parent
        if self.left is not None:
            return self.left.maximum()
        return None

    def add_node(self, target_node: BstNode, value: int) -> bool:
        """Add ``value`` below the child of this subtree whose key matches ``target_node``.

        The new node goes to the left of the matching child unless that
        child already has the relevant child, in which case it goes right.
        Its parent becomes ``target_node``. Returns True only when the match
        is a direct child of this node.
        """
        if self.left is not None:
            left = self.left
            if left.key == target_node.key:
                child = left.add_right_child(value) if left.left is not None else left.add_left_child(value)
                child.parent = target_node
                return True
            left.add_node(target_node, value)
        if self.right is not None:
            right = self.right
            if right.key == target_node.key:
                child = right.add_right_child(value) if right.right is not None else right.add_left_child(value)
                child.parent = target_node
                return True
            right.add_node(target_node, value)
        return False

    def median(self) -> BstNode:
        """Pick a median node from the balance of the two subtrees.

        Raises ValueError when there is no left child to start from.
        """
        right_size = self.right._size() if self.right is not None else 0
        left_size = self.left._size() if self.left is not None else 0
        odd = abs(right_size - left_size) % 2
        if self.left is None or self.left.parent is None:
            raise ValueError(f"node {self.key} has no left child")
        med = self.left.parent
        if not odd:
            return med
        if med.left is None:
            raise ValueError(f"node {med.key} has no left child")
        return med.left.maximum()

    def _size(self) -> int:
        return 1 + sum(child._size() for child in (self.left, self.right) if child is not None)


def tree_insert(node: BstNode | None, key: int) -> BstNode:
    """Insert ``key`` below ``node`` and return the root; start a tree when ``node`` is None."""
    if node is None:
        return BstNode(key)
    current = node
    while True:
        if current.key < key:
            if current.right is None:
                current.add_right_child(key)
                break
            current = current.right
        else:
            if current.left is None:
                current.add_left_child(key)
                break
            current = current.left
    return current.root()


def tree_delete(node: BstNode) -> BstNode:
    """Remove ``node`` from its tree and return the node that takes its place.

    Raises ValueError for a node without children.
    """
    if node.right is None:
        if node.left is None:
            raise ValueError(f"node {node.key} has no child to take its place")
        return _transplant(node, node.left)
    if node.left is None:
        return _transplant(node, node.right)

    min_node = node.right.minimum()
    min_parent = min_node.parent
    if not _keys_match(min_parent, node):
        if min_node.right is not None:
            min_node = _transplant(min_node, min_node.right)
        elif min_parent is not None:
            min_parent.left = None
        node.right.parent = min_node
        min_node.right = node.right
    replacement = _transplant(node, min_node)
    node.left.parent = replacement
    replacement.left = node.left
    node.right.parent = replacement
    replacement.right = node.right
    return replacement


def _transplant(u: BstNode, v: BstNode) -> BstNode:
    parent = u.parent
    if parent is not None:
        if parent.left is None:
            raise ValueError(f"parent {parent.key} has no left child")
        if parent.left.key == u.key:
            parent.left = v
        else:
            parent.right = v
        v.parent = parent
    return v


def _is_nil(node: BstNode | None) -> bool:
    if node is None:
        return True
    return node.parent is None or node.left is None or node.right is None


def _keys_match(first: BstNode | None, second: BstNode | None) -> bool:
    if first is None or second is None:
        return first is None and second is None
    return first.key == second.key