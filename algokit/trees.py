"""Binary tree algorithms."""

from __future__ import annotations

from algokit.nodes import TreeNode


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Return whether two trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None or p.val != q.val:
        return False
    return is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)


def max_depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(max_depth(root.left), max_depth(root.right)) + 1


def has_path_sum(root: TreeNode | None, target_sum: int) -> bool:
    """Return whether some root-to-leaf path adds up to ``target_sum``."""

    def walk(node: TreeNode | None, total: int) -> bool:
        if node is None:
            return False
        total += node.val
        if node.left is None and node.right is None:
            return total == target_sum
        return walk(node.left, total) or walk(node.right, total)

    return walk(root, 0)


def sum_numbers(root: TreeNode | None) -> int:
    """Sum the numbers spelled by the digits along each root-to-leaf path."""

    def walk(node: TreeNode | None, number: int) -> int:
        if node is None:
            return 0
        number = number * 10 + node.val
        if node.left is None and node.right is None:
            return number
        return walk(node.left, number) + walk(node.right, number)

    return walk(root, 0)


def invert_tree(root: TreeNode | None) -> TreeNode | None:
    """Mirror the tree in place and return its root."""
    if root is None:
        return root
    root.left, root.right = root.right, root.left
    invert_tree(root.left)
    invert_tree(root.right)
    return root


def average_of_levels(root: TreeNode | None) -> list[float]:
    """Return the mean value of the nodes on each level, top first."""
    totals: list[float] = []
    counts: list[int] = []

    def walk(node: TreeNode | None, level: int) -> None:
        if node is None:
            return
        if level == len(totals):
            totals.append(float(node.val))
            counts.append(1)
        else:
            totals[level] += node.val
            counts[level] += 1
        walk(node.left, level + 1)
        walk(node.right, level + 1)

    walk(root, 0)
    return [total / count for total, count in zip(totals, counts)]


def search_bst(root: TreeNode | None, val: int) -> TreeNode | None:
    """Return the first node holding ``val`` in pre-order, or ``None``."""
    if root is None:
        return None
    if root.val == val:
        return root
    found = search_bst(root.left, val)
    if found is None:
        found = search_bst(root.right, val)
    return found