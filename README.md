# binarysearchtree

A small teaching library of linked binary trees. Every node holds a reference back to its parent, so trees can be walked both up and down.

The package has four modules:

- `binarysearchtree.tree` holds `Node`, a plain binary tree node with an integer `value`, and the function `count_nodes_from`.
- `binarysearchtree.bst` holds `BstNode`, a binary search tree node with an integer `key`, and the functions `tree_insert` and `tree_delete`.
- `binarysearchtree.dot` renders either kind of tree as a Graphviz `graph` document.
- `binarysearchtree.cli` holds the demonstrations behind the `binarysearchtree` command.

## Installation

```
pip install .
```

To also install the test tools:

```
pip install .[test]
```

## Binary search trees

```python
from binarysearchtree.bst import tree_insert, tree_delete
from binarysearchtree.dot import bst_to_dot, generate_dotfile_bst

root = tree_insert(None, 15)
for key in (6, 18, 3, 7, 17, 20, 2, 4, 13, 9):
    root = tree_insert(root, key)

print(root.tree_search(13).key)  # 13
print(root.minimum().key)        # 2
print(root.maximum().key)        # 20

print(bst_to_dot(root))
generate_dotfile_bst(root, "bst.dot")

new_root = tree_delete(root)
```

`BstNode` offers:

- `add_left_child(value)` and `add_right_child(value)`: replace a child with a new node whose parent is this node, and return it.
- `tree_search(value)`, `minimum()` and `maximum()`: return a *copy* of the node found (`copy()` makes a new node that shares key, parent and children). `tree_search` returns `None` when the key is absent.
- `root()`: follows parent links to the top.
- `tree_successor()` and `tree_successor_simpler()`: the node with the next larger key, or `None` for the largest. The simpler variant raises `ValueError` when its walk reaches a node without a parent.
- `tree_predecessor()`: the parent when this node is its right child, otherwise the maximum of the left subtree, or `None`. Raises `ValueError` on a node without a parent.
- `add_node(target_node, value)`: adds a node below the child whose key matches `target_node`.
- `median()`: picks a median node from the sizes of the two subtrees. Raises `ValueError` when there is no left child.

`tree_insert(node, key)` inserts below `node` and returns the root. If `node` is `None`, it starts a new tree. `tree_delete(node)` unlinks `node` and returns the node that takes its place. It raises `ValueError` for a node without children.

## Plain binary trees

```python
from binarysearchtree.tree import Node, count_nodes_from
from binarysearchtree.dot import tree_to_dot, generate_dotfile

root = Node(5)
left = root.add_left_child(3)
root.add_right_child(7)
left.add_left_child(2)

print(root.count_nodes())        # 4
print(root.tree_depth())         # 2
print(left.sibling().value)      # 7
print(count_nodes_from(left, 0)) # 2

print(tree_to_dot(root))
generate_dotfile(root, "tree.dot")
```

`Node` also has these methods:

- `get_node_by_value(value)` and `get_node_by_full_property(node)` return copies of the matching node. Both descend into the left subtree whenever there is one and look right only when the left is missing.
- `discard_node_by_value(value)` detaches the matching node. Every node on the path down to it drops the child it descended into. It returns whether a match was found.

## Command line

```
binarysearchtree
binarysearchtree --demo tree --output-dir out
binarysearchtree --demo bst --output-dir out
```

- `--demo median` is the default. It builds a small tree with `add_node`, then prints predecessors and the median.
- `--demo tree` exercises the plain binary tree and writes `prime.dot`, `prime_t2.dot`, `prime_t3.dot` and `prime_t4.dot`.
- `--demo bst` exercises search, successor, insert and delete. It writes `bst_graph.dot`, `bst.dot` and `bst_delete_root.dot`.

Dot files go to `--output-dir`, which is the current directory by default.

## What it does not do

- The trees are never rebalanced.
- The DOT output is text only. Turning it into an image is left to Graphviz.
- Nothing is stored between runs.

## Tests

```
pytest
```