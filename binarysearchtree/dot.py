"""Render trees as undirected Graphviz graphs."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from os import PathLike
from pathlib import Path
from typing import Any

from .bst import BstNode
from .tree import Node

__all__ = ["tree_to_dot", "bst_to_dot", "generate_dotfile", "generate_dotfile_bst"]

_PREAMBLE = "graph tree{\n"
_EPILOGUE = "}"


def _edges(node: Any, label: Callable[[Any], object]) -> Iterator[str]:
    """Yield one edge line per child, then descend left before right."""
    children = [child for child in (node.left, node.right) if child is not None]
    for child in children:
        yield f"\t{label(node)}--{label(child)};\n"
    for child in children:
        yield from _edges(child, label)


def _render(root: Any, label: Callable[[Any], object]) -> str:
    return _PREAMBLE + "".join(_edges(root, label)) + _EPILOGUE


def tree_to_dot(root: Node) -> str:
    """Return the Graphviz text for a plain binary tree."""
    return _render(root, lambda node: node.value)


def bst_to_dot(root: BstNode) -> str:
    """Return the Graphviz text for a binary search tree."""
    return _render(root, lambda node: node.key)


def _write(text: str, output_path: str | PathLike[str]) -> None:
    Path(output_path).write_bytes(text.encode("utf-8"))


def generate_dotfile(root: Node, output_path: str | PathLike[str]) -> None:
    """Write the Graphviz text of a plain binary tree to ``output_path``."""
    _write(tree_to_dot(root), output_path)


def generate_dotfile_bst(root: BstNode, output_path: str | PathLike[str]) -> None:
    """Write the Graphviz text of a binary search tree to ``output_path``."""
    _write(bst_to_dot(root), output_path)