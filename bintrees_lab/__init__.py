"""Linked binary trees and binary search trees, with Graphviz dot export."""

__version__ = "0.1.0"
__all__ = ["bst", "cli", "dot", "tree"]