"""A singly linked list with index-based access."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class _Node:
    val: int
    next: Optional[_Node] = None


class MyLinkedList:
    """Singly linked list with a sentinel head node.

    ``get`` returns -1 for an index outside the list; insertions past the end
    and deletions outside the list are ignored.
    """

    def __init__(self) -> None:
        self._sentinel = _Node(0)
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._sentinel.next
        while node is not None:
            yield node.val
            node = node.next

    def _node_before(self, index: int) -> _Node:
        node = self._sentinel
        for _ in range(max(index, 0)):
            node = node.next
        return node

    def get(self, index: int) -> int:
        """Return the value at ``index``, or -1 if the index is out of range."""
        if not 0 <= index < self._size:
            return -1
        return self._node_before(index).next.val

    def add_at_head(self, val: int) -> None:
        """Insert ``val`` before the first element."""
        self.add_at_index(0, val)

    def add_at_tail(self, val: int) -> None:
        """Append ``val`` after the last element."""
        self.add_at_index(self._size, val)

    def add_at_index(self, index: int, val: int) -> None:
        """Insert ``val`` before position ``index``; a negative index inserts at the head."""
        if index > self._size:
            return
        previous = self._node_before(index)
        previous.next = _Node(val, previous.next)
        self._size += 1

    def delete_at_index(self, index: int) -> None:
        """Remove the element at ``index`` if it exists."""
        if not 0 <= index < self._size:
            return
        previous = self._node_before(index)
        previous.next = previous.next.next
        self._size -= 1