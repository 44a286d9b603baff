"""A plain binary tree whose nodes know their parent."""

from __future__ import annotations

__all__ = ["Node", "count_nodes_from"]


class Node:
    """A binary tree node holding an integer value."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int) -> None:
        self.value = value
        self.parent: Node | None = None
        self.left: Node | None = None
        self.right: Node | None = None

    def __repr__(self) -> str:
        left = self.left.value if self.left is not None else None
        right = self.right.value if self.right is not None else None
        parent = self.parent.value if self.parent is not None else None
        return f"Node(value={self.value!r}, parent={parent!r}, left={left!r}, right={right!r})"

    def _new_child(self, value: int) -> Node:
        child = Node(value)
        child.parent = self
        return child

    def add_left_child(self, value: int) -> Node:
        """Replace the left child with a new node holding ``value``."""
        self.left = self._new_child(value)
        return self.left

    def add_right_child(self, value: int) -> Node:
        """Replace the right child with a new node holding ``value``."""
        self.right = self._new_child(value)
        return self.right

    def copy(self) -> Node:
        """Return a new node sharing this node's value, parent and children."""
        clone = Node(self.value)
        clone.parent = self.parent
        clone.left = self.left
        clone.right = self.right
        return clone

    def get_node_by_value(self, value: int) -> Node | None:
        """Return a copy of the first node with ``value``.

        The search descends into the left subtree when there is one and
        only falls back to the right subtree when the left is missing.
        """
        if self.value == value:
            return self.copy()
        if self.left is not None:
            return self.left.get_node_by_value(value)
        if self.right is not None:
            return self.right.get_node_by_value(value)
        return None

    def get_node_by_full_property(self, node: Node) -> Node | None:
        """Return a copy of the node whose value, parent and children match ``node``."""
        if (
            self.value == node.value
            and _values_match(node.parent, self.parent)
            and _values_match(node.left, self.left)
            and _values_match(node.right, self.right)
        ):
            return self.copy()
        if self.left is not None:
            return self.left.get_node_by_full_property(node)
        if self.right is not None:
            return self.right.get_node_by_full_property(node)
        return None

    def discard_node_by_value(self, value: int) -> bool:
        """Detach the node holding ``value`` together with its subtree.

        The matching node loses its parent link; every node on the path
        down to it drops the child it descended into.
        """
        if self.value == value:
            self.parent = None
            return True
        if self.left is not None:
            found = self.left.discard_node_by_value(value)
            self.left = None
            return found
        if self.right is not None:
            found = self.right.discard_node_by_value(value)
            self.right = None
            return found
        return False

    def count_nodes(self) -> int:
        """Number of nodes in the subtree rooted here."""
        return count_nodes_from(self, 0)

    def tree_depth(self) -> int:
        """Number of edges on the longest downward path; a lone node has depth 0."""
        depths = [child.tree_depth() + 1 for child in (self.left, self.right) if child is not None]
        return max(depths, default=0)

    def sibling(self) -> Node | None:
        """Return the other child of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is not None and parent.left.value == self.value:
            return parent.right
        return parent.left


def count_nodes_from(node: Node, count: int) -> int:
    """Count the nodes under ``node``, adding ``count`` at every level."""
    left_count = count_nodes_from(node.left, count) if node.left is not None else 0
    right_count = count_nodes_from(node.right, count) if node.right is not None else 0
    return count + left_count + right_count + 1


def _values_match(first: Node | None, second: Node | None) -> bool:
    if first is None or second is None:
        return first is None and second is None
    return first.value == second.value