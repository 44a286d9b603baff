"""Linked binary trees and binary search trees with parent links, plus Graphviz DOT export."""

__version__ = "0.1.0"
__all__ = ["tree", "bst", "dot", "cli"]