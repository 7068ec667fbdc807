"""Render trees as Graphviz ``dot`` text and write them to files."""

from __future__ import annotations

import os
from typing import Callable, Iterator, Optional, TypeVar, Union

from bintrees_lab.bst import BstNode
from bintrees_lab.tree import Node

_PREAMBLE = "graph tree{\n"
_EPILOGUE = "}"

_T = TypeVar("_T", Node, BstNode)
PathLike = Union[str, "os.PathLike[str]"]


def _edges(node: _T, label: Callable[[_T], int]) -> Iterator[str]:
    """Yield one edge line per child: a node's own edges, then the left
    subtree's, then the right subtree's."""
    children: list[Optional[_T]] = [node.left, node.right]
    for child in children:
        if child is not None:
            yield f"\t{label(node)}--{label(child)};\n"
    for child in children:
        if child is not None:
            yield from _edges(child, label)


def _render(root: _T, label: Callable[[_T], int]) -> str:
    return _PREAMBLE + "".join(_edges(root, label)) + _EPILOGUE


def dot_text(root: Node) -> str:
    """Return the dot graph of a plain binary tree, labelled by value."""
    return _render(root, lambda node: node.value)


def dot_text_bst(root: BstNode) -> str:
    """Return the dot graph of a binary search tree, labelled by key."""
    return _render(root, lambda node: node.key)


def _write(text: str, output_path: PathLike) -> None:
    with open(output_path, "w", encoding="utf-8") as output:
        output.write(text)


def generate_dotfile(root: Node, output_path: PathLike) -> None:
    """Write the dot graph of a plain binary tree to ``output_path``."""
    _write(dot_text(root), output_path)


def generate_dotfile_bst(root: BstNode, output_path: PathLike) -> None:
    """Write the dot graph of a binary search tree to ``output_path``."""
    _write(dot_text_bst(root), output_path)