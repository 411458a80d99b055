"""Binary tree nodes and depth-first traversals."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["Node", "preorder", "inorder", "postorder"]


@dataclass
class Node:
    """A binary tree node holding a value and optional children."""

    value: Any
    left: Node | None = None
    right: Node | None = None


def _preorder(node: Node | None) -> Iterator[Any]:
    if node is None:
        return
    yield node.value
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def _inorder(node: Node | None) -> Iterator[Any]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.value
    yield from _inorder(node.right)


def _postorder(node: Node | None) -> Iterator[Any]:
    if node is None:
        return
    yield from _postorder(node.left)
    yield from _postorder(node.right)
    yield node.value


def preorder(root: Node | None) -> list[Any]:
    """Return values visiting each node before its left and right subtrees."""
    return list(_preorder(root))


def inorder(root: Node | None) -> list[Any]:
    """Return values visiting the left subtree, the node, then the right."""
    return list(_inorder(root))


def postorder(root: Node | None) -> list[Any]:
    """Return values visiting both subtrees before the node itself."""
    return list(_postorder(root))