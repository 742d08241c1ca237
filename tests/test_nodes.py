import pytest

from algokit.nodes import ListNode, TreeNode, build_list, build_tree, list_values, tree_values


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3], [5, 5, -1, 0]])
def test_list_round_trip(values):
    assert list_values(build_list(values)) == values


def test_build_list_empty_is_none():
    assert build_list([]) is None


def test_build_list_links_in_order():
    head = build_list([7, 8])
    assert head.val == 7
    assert head.next.val == 8
    assert head.next.next is None


def test_list_nodes_compare_by_identity():
    a = ListNode(1)
    b = ListNode(1)
    assert a != b
    assert len({a, b}) == 2


@pytest.mark.parametrize(
    "values",
    [[], [1], [1, 2, 3], [1, None, 2], [3, 9, 20, None, None, 15, 7], [1, 2, None, 4]],
)
def test_tree_round_trip(values):
    assert tree_values(build_tree(values)) == values


def test_build_tree_structure():
    root = build_tree([1, None, 2])
    assert root.val == 1
    assert root.left is None
    assert root.right.val == 2
    assert root.right.left is None and root.right.right is None


def test_build_tree_leading_none_is_empty():
    assert build_tree([None, 1]) is None


def test_tree_values_trims_trailing_none():
    root = TreeNode(1, TreeNode(2))
    assert tree_values(root) == [1, 2]