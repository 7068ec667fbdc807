"""Command that builds sample trees and reports on them."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import Optional, Sequence, Union

from bintrees_lab.bst import BstNode
from bintrees_lab.dot import generate_dotfile
from bintrees_lab.tree import Node, count_nodes_from

_BST_KEYS = (6, 18, 17, 20, 3, 7, 2, 4, 13, 9)


def demo_binary_search_tree() -> list[int]:
    """Build the sample search tree, print it and its median walk, and
    return the median keys."""
    root = BstNode(15)
    for key in _BST_KEYS:
        root.add_node(key)
    print(repr(root))
    keys = root.median()
    for key in keys:
        print(f"{key} ")
    return keys


def demo_binary_tree(output_dir: Union[str, "os.PathLike[str]"]) -> list[Path]:
    """Build a sample plain tree, exercise its operations, and write four
    dot files into ``output_dir``. Returns the paths written."""
    directory = Path(output_dir)
    written: list[Path] = []

    def dump(tree: Node, name: str) -> None:
        path = directory / name
        generate_dotfile(tree, path)
        written.append(path)

    root = Node(5)
    root.add_left_child(3)
    root.add_right_child(7)
    dump(root, "prime.dot")

    left_subtree = root.left
    right_subtree = root.right
    left_subtree.add_left_child(2)
    left_subtree.add_right_child(4)
    right_subtree.add_right_child(10)
    dump(root, "prime_t2.dot")

    print(f"Current tree depth: {root.tree_depth()}")
    print(f"Amount of nodes in current tree: {root.count_nodes()}")
    print(f"Amount of nodes in current subtree: {count_nodes_from(right_subtree, 0)}")

    left_subtree.sibling()

    found = root.get_node_by_value(3)
    print(f"left subtree seek by value {found!r}")
    another = root.get_node_by_full_property(found)
    print(f"left subtree seek by full property {another!r}")

    root_copy = root.copy()
    flag = root_copy.discard_node_by_value(3)
    print(f"status of node deletion: {str(flag).lower()}")
    dump(root_copy, "prime_t3.dot")

    print(f"Depth after discard {root_copy.tree_depth()}")
    print(f"Count nodes after discard {root_copy.count_nodes()}")

    dump(root, "prime_t4.dot")
    return written


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the search-tree demo, and optionally the plain-tree demo."""
    parser = argparse.ArgumentParser(
        prog="bintrees-lab", description="Build sample binary trees and report on them."
    )
    parser.add_argument(
        "--binary-tree",
        metavar="DIR",
        help="also run the plain binary tree demo, writing dot files into DIR",
    )
    args = parser.parse_args(argv)
    if args.binary_tree is not None:
        demo_binary_tree(args.binary_tree)
    demo_binary_search_tree()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())