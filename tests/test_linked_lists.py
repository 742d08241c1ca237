import pytest

from algokit.linked_lists import (
    add_two_numbers,
    delete_duplicates,
    get_intersection_node,
    has_cycle,
    merge_two_lists,
    remove_elements,
    remove_nth_from_end,
    reorder_list,
    reverse_list,
    rotate_right,
    sort_list,
)
from algokit.nodes import ListNode, build_list, list_values


def _tail(head):
    while head.next is not None:
        head = head.next
    return head


def _digits_to_int(digits):
    return int("".join(str(d) for d in reversed(digits))) if digits else 0


def test_has_cycle_true():
    head = build_list([3, 2, 0, -4])
    _tail(head).next = head.next
    assert has_cycle(head) is True


def test_has_cycle_false():
    assert has_cycle(build_list([1, 2, 3])) is False
    assert has_cycle(None) is False


def test_reorder_list_example():
    head = build_list([1, 2, 3, 4, 5])
    assert reorder_list(head) is None
    assert list_values(head) == [1, 5, 2, 4, 3]


@pytest.mark.parametrize("values", [[1], [1, 2], [1, 2, 3, 4], list(range(9))])
def test_reorder_list_invariants(values):
    head = build_list(values)
    reorder_list(head)
    result = list_values(head)
    assert sorted(result) == sorted(values)
    assert result[0] == values[0]
    if len(values) > 1:
        assert result[1] == values[-1]


def test_reorder_list_empty():
    assert reorder_list(None) is None


@pytest.mark.parametrize("values", [[4, 2, 1, 3], [-1, 5, 3, 4, 0], [2, 2, 1], [1]])
def test_sort_list(values):
    assert list_values(sort_list(build_list(values))) == sorted(values)


def test_sort_list_empty():
    assert sort_list(None) is None


def test_intersection_found():
    shared = build_list([8, 4, 5])
    a = ListNode(4, ListNode(1, shared))
    b = ListNode(5, ListNode(6, ListNode(1, shared)))
    assert get_intersection_node(a, b) is shared


def test_intersection_missing():
    assert get_intersection_node(build_list([2, 6, 4]), build_list([1, 5])) is None
    assert get_intersection_node(None, build_list([1])) is None


@pytest.mark.parametrize("n", [1, 2, 3, 5])
def test_remove_nth_from_end(n):
    values = [1, 2, 3, 4, 5]
    cut = len(values) - n
    expected = values[:cut] + values[cut + 1:]
    assert list_values(remove_nth_from_end(build_list(values), n)) == expected


def test_remove_nth_from_end_short_lists():
    assert remove_nth_from_end(build_list([1]), 1) is None
    assert remove_nth_from_end(None, 1) is None


def test_remove_nth_from_end_too_large_removes_head():
    values = [1, 2, 3]
    assert list_values(remove_nth_from_end(build_list(values), 10)) == values[1:]


def test_remove_nth_from_end_rejects_zero():
    with pytest.raises(ValueError):
        remove_nth_from_end(build_list([1, 2]), 0)


@pytest.mark.parametrize(
    "values, val", [([1, 2, 6, 3, 4, 5, 6], 6), ([7, 7, 7, 7], 7), ([], 1), ([1, 2], 3)]
)
def test_remove_elements(values, val):
    result = list_values(remove_elements(build_list(values), val))
    assert result == [v for v in values if v != val]


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4, 5]])
def test_reverse_list(values):
    assert list_values(reverse_list(build_list(values))) == values[::-1]


@pytest.mark.parametrize(
    "a, b", [([1, 2, 4], [1, 3, 4]), ([], []), ([], [0]), ([5], [1, 2, 3])]
)
def test_merge_two_lists(a, b):
    assert list_values(merge_two_lists(build_list(a), build_list(b))) == sorted(a + b)


def test_merge_two_lists_prefers_first_on_tie():
    first = ListNode(1)
    second = ListNode(1)
    assert merge_two_lists(first, second) is first


def test_add_two_numbers_example():
    result = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
    assert list_values(result) == [7, 0, 8]


@pytest.mark.parametrize(
    "a, b", [([0], [0]), ([9, 9, 9, 9, 9, 9, 9], [9, 9, 9, 9]), ([5], [5]), ([1, 8], [0])]
)
def test_add_two_numbers_matches_integer_sum(a, b):
    result = list_values(add_two_numbers(build_list(a), build_list(b)))
    assert _digits_to_int(result) == _digits_to_int(a) + _digits_to_int(b)
    assert all(0 <= d <= 9 for d in result)


def test_rotate_right_example():
    assert list_values(rotate_right(build_list([1, 2, 3, 4, 5]), 2)) == [4, 5, 1, 2, 3]


@pytest.mark.parametrize("k", [0, -3, 3, 6])
def test_rotate_right_identity_cases(k):
    values = [1, 2, 3]
    assert list_values(rotate_right(build_list(values), k)) == values


def test_rotate_right_wraps():
    values = [0, 1, 2]
    once = list_values(rotate_right(build_list(values), 4))
    assert once == list_values(rotate_right(build_list(values), 1))
    assert once[0] == values[-1]


def test_rotate_right_empty():
    assert rotate_right(None, 5) is None


@pytest.mark.parametrize("values", [[1, 1, 2], [1, 1, 2, 3, 3], [], [4, 4, 4]])
def test_delete_duplicates(values):
    result = list_values(delete_duplicates(build_list(values)))
    assert result == list(dict.fromkeys(values))