"""Singly linked list nodes and the classic pointer problems on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list. Nodes compare by identity."""

    val: int = 0
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order and return its head."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [] if head is None else list(head)


def remove_elements(head: Optional[ListNode], val: int) -> Optional[ListNode]:
    """Unlink every node whose value equals ``val`` and return the new head."""
    sentinel = ListNode(0, head)
    previous = sentinel
    while previous.next is not None:
        if previous.next.val == val:
            previous.next = previous.next.next
        else:
            previous = previous.next
    return sentinel.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    previous: Optional[ListNode] = None
    current = head
    while current is not None:
        following = current.next
        current.next = previous
        previous, current = current, following
    return previous


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two adjacent nodes and return the new head; an odd last node stays."""
    sentinel = ListNode(0, head)
    previous = sentinel
    current = head
    while current is not None and current.next is not None:
        partner = current.next
        following = partner.next
        partner.next = current
        previous.next = partner
        current.next = following
        previous, current = current, following
    return sentinel.next


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Remove the ``n``-th node counted from the end and return the new head.

    Raises ValueError if ``n`` is not between 1 and the length of the list.
    """
    if n < 1:
        raise ValueError(f"position from the end must be at least 1, got {n}")
    sentinel = ListNode(0, head)
    lead = sentinel
    for _ in range(n):
        lead = lead.next
        if lead is None:
            raise ValueError(f"list is shorter than {n} nodes")
    trail = sentinel
    while lead.next is not None:
        lead = lead.next
        trail = trail.next
    trail.next = trail.next.next
    return sentinel.next


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None if they never join."""
    if head_a is None or head_b is None:
        return None
    walker_a, walker_b = head_a, head_b
    while walker_a is not walker_b:
        walker_a = head_b if walker_a is None else walker_a.next
        walker_b = head_a if walker_b is None else walker_b.next
    return walker_a


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where the list's cycle begins, or None if it has no cycle."""
    fast = slow = head
    while True:
        if fast is None or fast.next is None:
            return None
        fast = fast.next.next
        slow = slow.next
        if fast is slow:
            break
    fast = head
    while fast is not slow:
        fast = fast.next
        slow = slow.next
    return fast