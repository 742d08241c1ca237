"""Node types for singly linked lists and binary trees, with builders."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list. Nodes compare and hash by identity."""

    val: int = 0
    next: ListNode | None = None


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree. Nodes compare and hash by identity."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def iter_nodes(head: ListNode | None) -> Iterator[ListNode]:
    """Yield each node of a list in order."""
    while head is not None:
        yield head
        head = head.next


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order and return its head."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: ListNode | None) -> list[int]:
    """Return the values of a linked list in order."""
    return [node.val for node in iter_nodes(head)]


def build_tree(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from level-order values, ``None`` marking a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                pending.append(child)
    return root


def tree_values(root: TreeNode | None) -> list[int | None]:
    """Return the level-order values of a tree, trailing ``None`` removed."""
    result: list[int | None] = []
    pending: deque[TreeNode | None] = deque([root])
    while pending:
        node = pending.popleft()
        if node is None:
            result.append(None)
            continue
        result.append(node.val)
        pending.append(node.left)
        pending.append(node.right)
    while result and result[-1] is None:
        result.pop()
    return result