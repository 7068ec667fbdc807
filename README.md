# bintrees-lab

Small, readable implementations of two classic data structures, for studying
how they behave.

## What is in the package

- `bintrees_lab.tree`
  - `Node(value, parent=None)` is a plain linked binary tree node with a parent link.
  - `add_left_child` and `add_right_child` attach a new child, replacing any child already there, and return the new child.
  - `get_node_by_value` looks a node up by its value.
  - `get_node_by_full_property` looks a node up by its value, its parent's value and its children's values. Both lookups descend into the left subtree when there is one, and only otherwise into the right subtree.
  - `discard_node_by_value` cuts a node off from the tree.
  - `count_nodes` gives the number of nodes in the subtree.
  - `tree_depth` gives the length in edges of the longest downward path.
  - `sibling` returns the other child of the node's parent.
  - `copy` makes a shallow copy.
  - The module-level `count_nodes_from(node, count)` counts from any node.
- `bintrees_lab.bst`
  - `BstNode(key, parent=None)` is a binary search tree node.
  - `add_node` inserts a key. A key that is already present is ignored.
  - `tree_search` finds a key.
  - `minimum` and `maximum` return the leftmost and rightmost node of the subtree.
  - `successor`, `predecessor` and `successor_simpler` find neighbouring keys.
  - `root` follows parent links to the top of the tree.
  - `inorder_walk` prints each key before the keys of its children.
  - `median` walks both subtrees, prints a count, and returns `[left key, key, right key]`. It raises `ValueError` if either child is missing.
  - Lookups return shallow copies that share their parent and children with the node found.
  - The module-level `tree_insert(node, key)` inserts a key and returns the root. Keys not greater than a node's key go to its left.
  - The module-level `tree_delete(node)` removes a node and returns the node that takes its place. It raises `ValueError` for a node with no children.
- `bintrees_lab.dot`
  - `dot_text` and `dot_text_bst` render a tree as Graphviz `dot` text.
  - `generate_dotfile` and `generate_dotfile_bst` write that text to a file.

## Installation

```
pip install .
```

## Usage

```python
from bintrees_lab.bst import BstNode
from bintrees_lab.dot import dot_text_bst

root = BstNode(15)
for key in (6, 18, 17, 20, 3, 7, 2, 4, 13, 9):
    root.add_node(key)

print(root.minimum().key)   # 2
print(root.maximum().key)   # 20
print(dot_text_bst(root))
```

## Command line

```
bintrees-lab
```

This command builds the sample search tree shown above and prints it. It then runs the tree's median walk and prints the keys that the walk returns.

```
bintrees-lab --binary-tree DIR
```

This also builds a sample plain binary tree and prints its depth, its node counts and the results of its lookups. It writes four dot files into `DIR`: `prime.dot`, `prime_t2.dot`, `prime_t3.dot` and `prime_t4.dot`.

## What it does not do

The package only produces `dot` text. It does not render images itself. To turn a dot file into a picture, use Graphviz if you have it installed, for example `dot -Tpng tree.dot -o tree.png`. Trees live only in memory, and nothing is saved apart from the dot files.

## Tests

```
pip install .[test]
pytest
```