"""Singly linked lists of values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: Any = 0
    next: Optional["ListNode"] = None

    @classmethod
    def from_values(cls, values: Iterable[Any]) -> Optional["ListNode"]:
        """Build a list holding ``values`` in order; None if there are none."""
        head = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def __iter__(self) -> Iterator[Any]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def merge_two_lists(list1: Optional[ListNode], list2: Optional[ListNode]) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list.

    On equal values the node from ``list2`` comes first.
    """
    if list1 is None:
        return list2
    if list2 is None:
        return list1
    anchor = ListNode()
    tail = anchor
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return anchor.next


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Unlink repeated values from a sorted list, keeping the first of each."""
    node = head
    while node is not None and node.next is not None:
        if node.val == node.next.val:
            node.next = node.next.next
        else:
            node = node.next
    return head