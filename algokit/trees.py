"""Binary trees and depth queries."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Optional

_MISSING = object()


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: Any = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    @classmethod
    def from_level_order(cls, values: Iterable[Any]) -> Optional["TreeNode"]:
        """Build a tree from breadth-first values, with None marking gaps."""
        items = iter(values)
        first = next(items, None)
        if first is None:
            return None
        root = cls(first)
        queue = deque([root])
        while queue:
            node = queue.popleft()
            left = next(items, _MISSING)
            if left is _MISSING:
                break
            if left is not None:
                node.left = cls(left)
                queue.append(node.left)
            right = next(items, _MISSING)
            if right is _MISSING:
                break
            if right is not None:
                node.right = cls(right)
                queue.append(node.right)
        return root


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Return True if both trees have the same shape and values."""
    if p is None or q is None:
        return p is None and q is None
    return p.val == q.val and is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(max_depth(root.left), max_depth(root.right))


def min_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the shortest root-to-leaf path."""
    if root is None:
        return 0
    if root.left is None:
        return 1 + min_depth(root.right)
    if root.right is None:
        return 1 + min_depth(root.left)
    return 1 + min(min_depth(root.left), min_depth(root.right))