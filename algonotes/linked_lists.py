"""Singly linked lists and the classic operations on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def values(self) -> list[int]:
        """Return the values from this node to the end of the list."""
        return list(self)


def list_from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> ListNode:
    """Add two numbers stored as little-endian digit lists."""
    if l1 is None and l2 is None:
        return ListNode(0)
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
    assert dummy.next is not None
    return dummy.next


def merge_two_lists(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Merge two sorted lists; the merged part is copied, the tail is shared."""
    if l1 is None:
        return l2
    if l2 is None:
        return l1
    dummy = ListNode()
    tail = dummy
    while l1 is not None and l2 is not None:
        if l1.val <= l2.val:
            tail.next = ListNode(l1.val)
            l1 = l1.next
        else:
            tail.next = ListNode(l2.val)
            l2 = l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next


def merge_k_lists(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge any number of sorted lists into one new sorted list."""
    merged = sorted(value for head in lists if head is not None for value in head)
    return list_from_values(merged)


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the n-th node counted from the end and return the new head."""
    if head is None or n == 0:
        return head
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    lead: Optional[ListNode] = head
    for _ in range(n):
        if lead is None:
            raise ValueError(f"list is shorter than {n} nodes")
        lead = lead.next
    if lead is None:
        return head.next
    trail = head
    while lead.next is not None:
        assert trail.next is not None
        trail, lead = trail.next, lead.next
    assert trail.next is not None
    trail.next = trail.next.next
    return head


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse each full run of ``k`` nodes in place; a short tail stays as is."""
    if head is None or k < 2:
        return head
    dummy = ListNode(0, head)
    group_prev = dummy
    while True:
        kth: Optional[ListNode] = group_prev
        for _ in range(k):
            assert kth is not None
            kth = kth.next
            if kth is None:
                return dummy.next
        group_next = kth.next
        first = group_prev.next
        prev: Optional[ListNode] = group_next
        cur = first
        while cur is not group_next:
            assert cur is not None
            cur.next, prev, cur = prev, cur, cur.next
        group_prev.next = kth
        assert first is not None
        group_prev = first


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two adjacent nodes in place."""
    if head is None or head.next is None:
        return head
    dummy = ListNode(0, head)
    prev = dummy
    while prev.next is not None and prev.next.next is not None:
        first = prev.next
        second = first.next
        assert second is not None
        first.next = second.next
        second.next = first
        prev.next = second
        prev = first
    return dummy.next