"""A plain binary tree whose nodes keep a link back to their parent."""

from __future__ import annotations

from typing import Iterator, Optional


def _same_value(a: Optional["Node"], b: Optional["Node"]) -> bool:
    """True when both are absent, or both present with equal values."""
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    return a.value == b.value


class Node:
    """A binary tree node holding an integer value."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional["Node"] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        parent = None if self.parent is None else self.parent.value
        return (
            f"Node(value={self.value!r}, parent={parent!r}, "
            f"left={self.left!r}, right={self.right!r})"
        )

    def _children(self) -> Iterator["Node"]:
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def add_left_child(self, value: int) -> "Node":
        """Attach a new left child (replacing any existing one) and return it."""
        self.left = Node(value, self)
        return self.left

    def add_right_child(self, value: int) -> "Node":
        """Attach a new right child (replacing any existing one) and return it."""
        self.right = Node(value, self)
        return self.right

    def copy(self) -> "Node":
        """Return a shallow copy: a new node sharing parent and children."""
        clone = Node(self.value, self.parent)
        clone.left = self.left
        clone.right = self.right
        return clone

    def get_node_by_value(self, value: int) -> Optional["Node"]:
        """Return a copy of the node holding ``value``.

        The search descends into the left subtree when one exists and only
        otherwise into the right subtree.
        """
        if self.value == value:
            return self.copy()
        if self.left is not None:
            return self.left.get_node_by_value(value)
        if self.right is not None:
            return self.right.get_node_by_value(value)
        return None

    def get_node_by_full_property(self, node: "Node") -> Optional["Node"]:
        """Return a copy of the node whose value, parent value and child
        values all match those of ``node``.

        Like :meth:`get_node_by_value`, descends left when possible, else right.
        """
        if (
            self.value == node.value
            and _same_value(node.parent, self.parent)
            and _same_value(node.left, self.left)
            and _same_value(node.right, self.right)
        ):
            return self.copy()
        if self.left is not None:
            return self.left.get_node_by_full_property(node)
        if self.right is not None:
            return self.right.get_node_by_full_property(node)
        return None

    def discard_node_by_value(self, value: int) -> bool:
        """Cut the node holding ``value`` off from the tree.

        The matching node loses its parent link; every node on the path down
        to it loses its link to the child that was followed.
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
        """Length in edges of the longest downward path; a lone node has 0."""
        return max((child.tree_depth() + 1 for child in self._children()), default=0)

    def sibling(self) -> Optional["Node"]:
        """The other child of this node's parent, or None."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is not None and parent.left.value == self.value:
            return parent.right
        return parent.left


def count_nodes_from(node: Node, count: int) -> int:
    """Count the nodes under ``node``, adding ``count`` at every node visited."""
    return count + 1 + sum(count_nodes_from(child, count) for child in node._children())