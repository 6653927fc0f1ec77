"""Singly linked list algorithms."""

from __future__ import annotations

from typing import Optional

from dsakit.nodes import ListNode


def _length(head: Optional[ListNode]) -> int:
    return sum(1 for _ in head) if head is not None else 0


def _node_at(head: ListNode, index: int) -> ListNode:
    node = head
    for _ in range(index):
        node = node.next
    return node


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as reversed digit lists; return the sum the same way."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the ``n``-th node counted from the end and return the new head."""
    length = _length(head)
    if not 1 <= n <= length:
        raise ValueError(f"n must be between 1 and {length}, got {n}")
    if n == length:
        return head.next
    before = _node_at(head, length - n - 1)
    before.next = before.next.next
    return head


def merge_sorted(list1: Optional[ListNode], list2: Optional[ListNode]) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list, reusing their nodes.

    On equal values the node from ``list2`` comes first.
    """
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next = list1
            list1 = list1.next
        else:
            tail.next = list2
            list2 = list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def _middle(head: ListNode) -> ListNode:
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort a list in ascending order by merge sort, reusing its nodes."""
    if head is None or head.next is None:
        return head
    mid = _middle(head)
    second = mid.next
    mid.next = None
    return merge_sorted(sort_list(head), sort_list(second))


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list by taking over its successor's value and link."""
    successor = node.next
    if successor is None:
        raise ValueError("cannot delete the last node of a list")
    node.val = successor.val
    node.next = successor.next


def delete_middle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Unlink the node at index ``length // 2`` and return the head."""
    if head is None or head.next is None:
        return None
    before = _node_at(head, _length(head) // 2 - 1)
    before.next = before.next.next
    return head