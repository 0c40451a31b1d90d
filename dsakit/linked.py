"""Singly linked list utilities: building, copying, cycle detection, group reversal."""

from __future__ import annotations


class ListNode:
    """A node of a singly linked list, with an optional extra pointer to any node."""

    __slots__ = ("val", "next", "random")

    def __init__(self, val, next=None, random=None):
        self.val = val
        self.next = next
        self.random = random

    def __repr__(self):
        return f"ListNode({self.val!r})"


def build_list(values):
    """Return the head of a new list holding values in order, or None if empty."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head):
    """Return the values of the list starting at head.

    Raises ValueError if the list loops back on itself.
    """
    values = []
    seen = set()
    node = head
    while node is not None:
        if id(node) in seen:
            raise ValueError("list contains a cycle")
        seen.add(id(node))
        values.append(node.val)
        node = node.next
    return values


def copy_random_list(head):
    """Return a deep copy of a list whose nodes also carry a random pointer.

    Uses constant extra space by weaving the copies between the originals;
    the original list is left as it was.
    """
    if head is None:
        return None

    node = head
    while node is not None:
        copy = ListNode(node.val, node.next)
        node.next = copy
        node = copy.next

    node = head
    while node is not None:
        if node.random is not None:
            node.next.random = node.random.next
        node = node.next.next

    copy_head = head.next
    node = head
    while node is not None:
        copy = node.next
        node.next = copy.next
        if copy.next is not None:
            copy.next = copy.next.next
        node = node.next
    return copy_head


def detect_cycle(head):
    """Return the node where the list's cycle begins, or None if it has none."""
    if head is None or head.next is None:
        return None
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            slow = head
            while slow is not fast:
                slow = slow.next
                fast = fast.next
            return slow
    return None


def reverse_k_group(head, k):
    """Reverse the list in consecutive groups of k nodes and return the new head.

    A trailing group shorter than k keeps its order.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    length = 0
    node = head
    while node is not None:
        length += 1
        node = node.next
    if length < k:
        return head

    dummy = ListNode(0, head)
    prev_tail = dummy
    for _ in range(length // k):
        group_head = prev_tail.next
        prev, curr = None, group_head
        for _ in range(k):
            curr.next, prev, curr = prev, curr, curr.next
        prev_tail.next = prev
        group_head.next = curr
        prev_tail = group_head
    return dummy.next