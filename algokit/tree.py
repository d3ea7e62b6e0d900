"""A binary tree of numbered nodes and its depth-first traversals."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class Node:
    """A binary tree node."""

    data: int
    left: Node | None = None
    right: Node | None = None


def complete_tree(count: int) -> Node | None:
    """Build a complete tree of nodes 1..count; node i has children 2i and 2i + 1."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    if count == 0:
        return None
    nodes = {number: Node(number) for number in range(1, count + 1)}
    for number in range(2, count + 1):
        parent = nodes[number // 2]
        if number % 2 == 0:
            parent.left = nodes[number]
        else:
            parent.right = nodes[number]
    return nodes[1]


def preorder(node: Node | None) -> Iterator[int]:
    """Yield node values root first, then left subtree, then right subtree."""
    if node is not None:
        yield node.data
        yield from preorder(node.left)
        yield from preorder(node.right)


def inorder(node: Node | None) -> Iterator[int]:
    """Yield node values left subtree first, then root, then right subtree."""
    if node is not None:
        yield from inorder(node.left)
        yield node.data
        yield from inorder(node.right)


def postorder(node: Node | None) -> Iterator[int]:
    """Yield node values left subtree, right subtree, then root."""
    if node is not None:
        yield from postorder(node.left)
        yield from postorder(node.right)
        yield node.data