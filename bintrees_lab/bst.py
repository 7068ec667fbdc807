"""A binary search tree whose nodes keep a link back to their parent.

Lookups such as :meth:`BstNode.tree_search`, :meth:`BstNode.minimum` and
:meth:`BstNode.maximum` hand back shallow copies of the matching node. A copy
shares its parent and children with the original. Nodes are compared by key
when the tree is walked upwards.
"""

from __future__ import annotations

from typing import Iterator, Optional


def _same_key(a: Optional["BstNode"], b: Optional["BstNode"]) -> bool:
    """True when both are absent, or both present with equal keys."""
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    return a.key == b.key


def _is_nil(node: Optional["BstNode"]) -> bool:
    """True when the node is absent or lacks a parent or either child."""
    if node is None:
        return True
    return node.parent is None or node.left is None or node.right is None


class BstNode:
    """A binary search tree node holding an integer key."""

    __slots__ = ("key", "parent", "left", "right")

    def __init__(self, key: int, parent: Optional["BstNode"] = None) -> None:
        self.key = key
        self.parent = parent
        self.left: Optional[BstNode] = None
        self.right: Optional[BstNode] = None

    def __repr__(self) -> str:
        parent = None if self.parent is None else self.parent.key
        return (
            f"BstNode(key={self.key!r}, parent={parent!r}, "
            f"left={self.left!r}, right={self.right!r})"
        )

    def _children(self) -> Iterator["BstNode"]:
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def add_left_child(self, value: int) -> "BstNode":
        """Attach a new left child (replacing any existing one) and return it."""
        self.left = BstNode(value, self)
        return self.left

    def add_right_child(self, value: int) -> "BstNode":
        """Attach a new right child (replacing any existing one) and return it."""
        self.right = BstNode(value, self)
        return self.right

    def add_node(self, value: int) -> bool:
        """Insert ``value`` below this node; a key already present is ignored."""
        node = self
        while True:
            if value < node.key:
                if node.left is None:
                    node.add_left_child(value)
                    return True
                node = node.left
            elif value > node.key:
                if node.right is None:
                    node.add_right_child(value)
                    return True
                node = node.right
            else:
                return True

    def copy(self) -> "BstNode":
        """Return a shallow copy: a new node sharing parent and children."""
        clone = BstNode(self.key, self.parent)
        clone.left = self.left
        clone.right = self.right
        return clone

    def tree_search(self, value: int) -> Optional["BstNode"]:
        """Return a copy of the node holding ``value``, or None.

        A smaller value descends left when a left child exists; otherwise the
        search continues to the right.
        """
        node: Optional[BstNode] = self
        while node is not None:
            if node.key == value:
                return node.copy()
            if value < node.key and node.left is not None:
                node = node.left
            else:
                node = node.right
        return None

    def minimum(self) -> "BstNode":
        """Return a copy of the leftmost node of this subtree."""
        node = self
        while node.left is not None:
            node = node.left
        return node.copy()

    def maximum(self) -> "BstNode":
        """Return a copy of the rightmost node of this subtree."""
        node = self
        while node.right is not None:
            node = node.right
        return node.copy()

    def root(self) -> "BstNode":
        """Follow parent links up and return the topmost node."""
        node = self
        seen = {id(node)}
        while node.parent is not None:
            node = node.parent
            if id(node) in seen:
                raise ValueError("parent links form a cycle")
            seen.add(id(node))
        return node

    def successor(self) -> Optional["BstNode"]:
        """The node with the next larger key, or None for the largest key."""
        if self.right is not None:
            return self.right.minimum()
        x: BstNode = self
        y = x.parent
        while y is not None:
            if y.left is not None and y.left.key == x.key:
                return y
            x, y = y, y.parent
        return None

    def predecessor(self) -> Optional["BstNode"]:
        """The node with the next smaller key, or None for the smallest key."""
        if self.left is not None:
            return self.left.maximum()
        x: BstNode = self
        y = x.parent
        while y is not None:
            if y.right is not None and y.right.key == x.key:
                return y
            x, y = y, y.parent
        return None

    def successor_simpler(self) -> Optional["BstNode"]:
        """Alternative successor search built on a nil-node test.

        Raises ValueError when the walk needs a parent that does not exist.
        """
        if not _is_nil(self.right):
            return self.right.minimum()
        x: BstNode = self
        y = x.parent
        if y is None:
            raise ValueError(f"node {self.key} has no parent")
        y_right = y.right
        while _is_nil(y) and _same_key(x, y_right) and y_right is not None:
            if y is None or y.parent is None:
                raise ValueError("successor walk ran past the root")
            x, y = y, y.parent
        if y is not None and y.key == x.root().key:
            return None
        if y is None:
            raise ValueError("successor walk ran past the root")
        return y

    def median(self) -> list[int]:
        """Walk both subtrees, print a node count, and return
        ``[left key, key, right key]``.

        Raises ValueError when either child is missing.
        """
        if self.left is None or self.right is None:
            raise ValueError(f"node {self.key} needs both children")
        keys = [self.left.inorder_walk(), self.key, self.right.inorder_walk()]
        print(f"Total node is : {len(keys)}")
        return keys

    def inorder_walk(self) -> int:
        """Print this subtree's keys, node before children, and return the key."""
        print(f"{self.key}, ", end="")
        for child in self._children():
            child.inorder_walk()
        return self.key


def tree_insert(node: Optional[BstNode], key: int) -> BstNode:
    """Insert ``key`` into the tree containing ``node`` and return its root.

    Keys not greater than a node's key go to its left. With no node, a new
    single-node tree is returned.
    """
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


def _transplant(u: BstNode, v: BstNode) -> BstNode:
    """Hang ``v`` where ``u`` hangs from its parent and return ``v``."""
    parent = u.parent
    if parent is not None:
        if parent.left is None:
            raise ValueError(f"parent {parent.key} of node {u.key} has no left child")
        if parent.left.key == u.key:
            parent.left = v
        else:
            parent.right = v
        v.parent = parent
    return v


def tree_delete(node: BstNode) -> BstNode:
    """Remove ``node`` from its tree and return the node that takes its place.

    Raises ValueError for a node without children, which has nothing to
    replace it.
    """
    if node.right is None:
        if node.left is None:
            raise ValueError(f"node {node.key} has no child to replace it")
        return _transplant(node, node.left)
    if node.left is None:
        return _transplant(node, node.right)

    min_node = node.right.minimum()
    min_parent = min_node.parent
    if not _same_key(min_parent, node):
        if min_node.right is not None:
            min_node = _transplant(min_node, min_node.right)
        else:
            min_parent.left = None
        node.right.parent = min_node
        min_node.right = node.right
    replacement = _transplant(node, min_node)
    node.left.parent = replacement
    replacement.left = node.left
    node.right.parent = replacement
    replacement.right = node.right
    return replacement