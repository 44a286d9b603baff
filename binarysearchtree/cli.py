"""Command-line demonstrations of the binary tree and binary search tree."""

from __future__ import annotations

import argparse
from os import PathLike
from pathlib import Path

from .bst import BstNode, tree_delete, tree_insert
from .dot import generate_dotfile, generate_dotfile_bst
from .tree import Node, count_nodes_from

__all__ = ["demo_binary_tree", "demo_binary_search_tree", "demo_median", "main"]


def demo_binary_tree(directory: str | PathLike[str]) -> list[Path]:
    """Build a plain binary tree, print its measurements and write dot files.

    Returns the paths of the files written, in order.
    """
    out = Path(directory)
    written: list[Path] = []

    def dump(tree: Node, name: str) -> None:
        path = out / name
        generate_dotfile(tree, path)
        written.append(path)

    root = Node(5)
    left = root.add_left_child(3)
    right = root.add_right_child(7)
    dump(root, "prime.dot")

    left.add_left_child(2)
    left.add_right_child(4)
    right.add_right_child(10)
    dump(root, "prime_t2.dot")

    print(f"Current tree depth: {root.tree_depth()}")
    print(f"Amount of nodes in current tree: {root.count_nodes()}")
    print(f"Amount of nodes in current subtree: {count_nodes_from(right, 0)}")

    by_value = root.get_node_by_value(3)
    print(f"left subtree seek by value {by_value!r}")
    if by_value is not None:
        by_property = root.get_node_by_full_property(by_value)
        print(f"left subtree seek by full property {by_property!r}")

    detached = root.copy()
    flag = detached.discard_node_by_value(3)
    print(f"status of node deletion: {str(flag).lower()}")
    dump(detached, "prime_t3.dot")

    print(f"Depth after discard {detached.tree_depth()}")
    print(f"Count nodes after discard {detached.count_nodes()}")
    dump(root, "prime_t4.dot")
    return written


def demo_binary_search_tree(directory: str | PathLike[str]) -> list[Path]:
    """Build a binary search tree, exercise search, successor, insert and delete.

    Returns the paths of the files written, in order.
    """
    out = Path(directory)
    written: list[Path] = []

    def dump(tree: BstNode, name: str) -> None:
        path = out / name
        generate_dotfile_bst(tree, path)
        written.append(path)

    root = BstNode(15)
    left = root.add_left_child(6)
    right = root.add_right_child(18)
    right.add_left_child(17)
    right.add_right_child(20)
    terminal = left.add_left_child(3)
    seven = left.add_right_child(7)
    terminal.add_left_child(2)
    terminal.add_right_child(4)
    seven.add_right_child(13).add_left_child(9)
    dump(root, "bst_graph.dot")

    for key in (15, 9, 22):
        found = root.tree_search(key)
        result = f"found -> {found.key}" if found is not None else "not found"
        print(f"tree search result of key {key} is {result}")

    max_node = root.maximum()
    print(f"minimum result {root.minimum().key}")
    print(f"maximum result {max_node.key}")
    print(f"root node {max_node.root().key}")

    for key in (2, 20, 15, 13, 9, 7, 22):
        node = root.tree_search(key)
        if node is None:
            print(f"node with key of {key} does not exist, failed to get successor")
            continue
        successor = node.tree_successor_simpler()
        result = str(successor.key) if successor is not None else "not found"
        print(f"successor of node ({key}) is {result}")

    inserted: BstNode | None = None
    for key in (15, 6, 18, 3, 7, 17, 20, 2, 4, 13, 9):
        inserted = tree_insert(inserted, key)
    assert inserted is not None
    dump(inserted, "bst.dot")
    dump(tree_delete(inserted), "bst_delete_root.dot")
    return written


def demo_median() -> BstNode:
    """Build a small tree with ``add_node``, print predecessors and return the median."""
    root = BstNode(15)
    left = root.add_left_child(10)
    root.add_node(left, 8)
    left_left = left.left
    assert left_left is not None
    print(repr(left_left.parent))
    print(repr(left.tree_predecessor()))
    print(repr(left_left.tree_predecessor()))

    root.add_node(left, 12)
    left_right = left.right
    assert left_right is not None
    print(f"predec of 12: {left_right.tree_predecessor()!r}")
    print(f"12 node: {left_right!r}")

    median = root.median()
    print(repr(median))
    return median


def main(argv: list[str] | None = None) -> int:
    """Run one of the demonstrations; the median demo is the default."""
    parser = argparse.ArgumentParser(
        prog="binarysearchtree",
        description="Demonstrate binary tree and binary search tree operations.",
    )
    parser.add_argument(
        "--demo",
        choices=("median", "tree", "bst"),
        default="median",
        help="which demonstration to run (default: median)",
    )
    parser.add_argument(
        "--output-dir",
        default=".",
        help="directory for the generated dot files (default: current directory)",
    )
    args = parser.parse_args(argv)

    if args.demo == "tree":
        demo_binary_tree(args.output_dir)
    elif args.demo == "bst":
        demo_binary_search_tree(args.output_dir)
    else:
        demo_median()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())