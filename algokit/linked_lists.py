"""Singly linked list algorithms."""

from __future__ import annotations

from algokit.nodes import ListNode, iter_nodes


def _relink(nodes: list[ListNode]) -> ListNode | None:
    """Chain ``nodes`` in the given order and return the first one."""
    for current, following in zip(nodes, nodes[1:]):
        current.next = following
    if not nodes:
        return None
    nodes[-1].next = None
    return nodes[0]


def has_cycle(head: ListNode | None) -> bool:
    """Return whether following ``next`` ever revisits a node."""
    seen: set[ListNode] = set()
    while head is not None:
        if head in seen:
            return True
        seen.add(head)
        head = head.next
    return False


def reorder_list(head: ListNode | None) -> None:
    """Reorder L0, L1, ..., Ln into L0, Ln, L1, Ln-1, ... in place."""
    nodes = list(iter_nodes(head))
    ordered: list[ListNode] = []
    low, high = 0, len(nodes) - 1
    while low <= high:
        ordered.append(nodes[low])
        if low != high:
            ordered.append(nodes[high])
        low += 1
        high -= 1
    _relink(ordered)


def sort_list(head: ListNode | None) -> ListNode | None:
    """Sort the list's nodes by value and return the new head."""
    return _relink(sorted(iter_nodes(head), key=lambda node: node.val))


def get_intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node of ``head_b`` already seen on the walk, or ``None``."""
    seen = set(iter_nodes(head_a))
    while head_b is not None:
        if head_b in seen:
            return head_b
        seen.add(head_b)
        head_b = head_b.next
    return None


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Remove the ``n``-th node from the end and return the head.

    A list of at most one node always becomes empty. When ``n`` exceeds the
    length, the head is removed.
    """
    if head is None or head.next is None:
        return None
    if n < 1:
        raise ValueError("n must be at least 1")
    dummy = ListNode(0, head)
    right: ListNode | None = head
    for _ in range(n):
        if right is None:
            break
        right = right.next
    left = dummy
    while right is not None:
        left = left.next
        right = right.next
    left.next = left.next.next
    return dummy.next


def remove_elements(head: ListNode | None, val: int) -> ListNode | None:
    """Remove every node holding ``val`` and return the head."""
    dummy = ListNode(0, head)
    current = dummy
    while current.next is not None:
        if current.next.val == val:
            current.next = current.next.next
        else:
            current = current.next
    return dummy.next


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return the new head."""
    previous: ListNode | None = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def merge_two_lists(
    list1: ListNode | None, list2: ListNode | None
) -> ListNode | None:
    """Merge two sorted lists, taking from ``list1`` first on ties."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as least-significant-first digit lists."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        value = carry
        if l1 is not None:
            value += l1.val
            l1 = l1.next
        if l2 is not None:
            value += l2.val
            l2 = l2.next
        carry, digit = divmod(value, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def rotate_right(head: ListNode | None, k: int) -> ListNode | None:
    """Rotate the list ``k`` places to the right; ``k`` below 1 leaves it alone."""
    nodes = list(iter_nodes(head))
    if k <= 0 or not nodes:
        return head
    k %= len(nodes)
    if k == 0:
        return head
    return _relink(nodes[-k:] + nodes[:-k])


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """Drop nodes equal to their predecessor and return the head."""
    current = head
    while current is not None and current.next is not None:
        if current.val == current.next.val:
            current.next = current.next.next
        else:
            current = current.next
    return head