"""Singly linked list and binary tree node types."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional[ListNode]:
        """Build a list holding ``values`` in order; an empty input gives None."""
        head: Optional[ListNode] = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({list(self)!r})"


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None

    @classmethod
    def from_level_order(cls, values: Iterable[Optional[int]]) -> Optional[TreeNode]:
        """Build a tree from level-order values where None marks a missing child."""
        items = iter(values)
        first = next(items, None)
        if first is None:
            return None
        root = cls(first)
        pending: deque[TreeNode] = deque([root])
        while pending:
            node = pending.popleft()
            for side in ("left", "right"):
                try:
                    value = next(items)
                except StopIteration:
                    return root
                if value is not None:
                    child = cls(value)
                    setattr(node, side, child)
                    pending.append(child)
        return root

    def to_level_order(self) -> list[Optional[int]]:
        """Return the level-order values, None for gaps, without trailing Nones."""
        out: list[Optional[int]] = []
        pending: deque[Optional[TreeNode]] = deque([self])
        while pending:
            node = pending.popleft()
            if node is None:
                out.append(None)
                continue
            out.append(node.val)
            pending.append(node.left)
            pending.append(node.right)
        while out and out[-1] is None:
            out.pop()
        return out

    def __repr__(self) -> str:
        return f"TreeNode({self.to_level_order()!r})"