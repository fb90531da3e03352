"""Binary tree nodes, in-order traversal and mirroring."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node."""

    value: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def inorder(root: TreeNode | None) -> list[int]:
    """Return the values of the tree in in-order sequence."""
    result: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.value)
        node = node.right
    return result


def mirror(root: TreeNode | None) -> TreeNode | None:
    """Return a new tree that is the mirror image of ``root``."""
    if root is None:
        return None
    return TreeNode(root.value, left=mirror(root.right), right=mirror(root.left))