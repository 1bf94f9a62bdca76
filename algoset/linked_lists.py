"""Linked list problems."""

from __future__ import annotations

from typing import Optional

from algoset.nodes import ListNode


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as lists of digits, least significant digit first."""
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


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where the list's cycle begins, or None if it has no cycle."""
    seen: set[ListNode] = set()
    node = head
    while node is not None:
        if node in seen:
            return node
        seen.add(node)
        node = node.next
    return None


def has_cycle(head: Optional[ListNode]) -> bool:
    """Return whether following next links from head ever revisits a node."""
    return detect_cycle(head) is not None