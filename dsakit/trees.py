"""Binary tree and binary search tree algorithms."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Optional

from dsakit.nodes import TreeNode


def _levels(root: Optional[TreeNode]) -> Iterator[list[int]]:
    """Yield the values of each level from the top, left to right."""
    if root is None:
        return
    pending: deque[TreeNode] = deque([root])
    while pending:
        level = list(pending)
        pending.clear()
        for node in level:
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        yield [node.val for node in level]


def level_order_bottom(root: Optional[TreeNode]) -> list[list[int]]:
    """Level-order values grouped by level, deepest level first."""
    levels = list(_levels(root))
    levels.reverse()
    return levels


def has_path_sum(root: Optional[TreeNode], target_sum: int) -> bool:
    """True if some root-to-leaf path sums to ``target_sum``."""
    if root is None:
        return False
    stack = [(root, root.val)]
    while stack:
        node, total = stack.pop()
        if node.left is None and node.right is None and total == target_sum:
            return True
        if node.right is not None:
            stack.append((node.right, total + node.right.val))
        if node.left is not None:
            stack.append((node.left, total + node.left.val))
    return False


def flatten(root: Optional[TreeNode]) -> None:
    """Rewire the tree in place into a right-leaning chain in preorder."""
    if root is None:
        return
    stack = [root]
    while stack:
        node = stack.pop()
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
        if stack:
            node.right = stack[-1]
        node.left = None


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """The last value of each level, from the top down."""
    return [level[-1] for level in _levels(root)]


def diameter(root: Optional[TreeNode]) -> int:
    """Number of edges on the longest path between any two nodes."""
    heights: dict[TreeNode, int] = {}
    best = 0
    stack: list[tuple[Optional[TreeNode], bool]] = [(root, False)]
    while stack:
        node, children_done = stack.pop()
        if node is None:
            continue
        if children_done:
            left = heights.get(node.left, 0) if node.left is not None else 0
            right = heights.get(node.right, 0) if node.right is not None else 0
            best = max(best, left + right)
            heights[node] = max(left, right) + 1
        else:
            stack.append((node, True))
            stack.append((node.left, False))
            stack.append((node.right, False))
    return best


def search_bst(root: Optional[TreeNode], val: int) -> Optional[TreeNode]:
    """The node holding ``val`` in a binary search tree, or None."""
    node = root
    while node is not None and node.val != val:
        node = node.left if val < node.val else node.right
    return node


def insert_into_bst(root: Optional[TreeNode], val: int) -> TreeNode:
    """Insert ``val`` as a new leaf; equal values go to the right. Return the root."""
    new = TreeNode(val)
    if root is None:
        return new
    node = root
    while True:
        if node.val > val:
            if node.left is None:
                node.left = new
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new
                return root
            node = node.right