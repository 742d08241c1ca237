# algokit

Well-known algorithm routines written as plain Python functions and a few
small classes. It uses nothing beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### `algokit.nodes`

`ListNode` (`val`, `next`) and `TreeNode` (`val`, `left`, `right`) are
dataclasses that compare and hash by identity. Helpers convert between
Python lists and linked structures:

- `build_list(values)` / `list_values(head)`
- `build_tree(values)` / `tree_values(root)`: level order, `None` for a
  missing child; `tree_values` drops trailing `None`s.
- `iter_nodes(head)`: yields each node of a linked list.

### `algokit.linked_lists`

`reverse_list`, `merge_two_lists`, `add_two_numbers`, `sort_list`,
`reorder_list`, `rotate_right`, `has_cycle`, `get_intersection_node`,
`remove_nth_from_end`, `remove_elements`, `delete_duplicates`.
Most of them relink the given nodes and return the new head;
`reorder_list` works in place and returns `None`.

### `algokit.trees`

`is_same_tree`, `max_depth`, `has_path_sum`, `sum_numbers`, `invert_tree`
(in place), `average_of_levels`, `search_bst`. `search_bst` visits every
node in pre-order and does not rely on the tree being ordered.

### `algokit.arrays`

`two_sum`, `two_sum_sorted` (1-based indices), `three_sum`, `max_area`,
`trap`, `max_profit`, `max_sub_array`, `product_except_self`,
`longest_consecutive`, `single_number`, `single_number_ii`,
`majority_element`, `contains_duplicate`, `contains_nearby_duplicate`,
`pivot_index`, `top_k_frequent`, `buy_choco`, `find_non_min_or_max`,
`is_valid_sudoku`, and routines that change the list they are given:
`rotate`, `move_zeroes`, `merge`, `apply_operations`, `remove_element`,
`remove_duplicates`, `remove_duplicates_at_most_twice`.

### `algokit.searching`

`search`, `search_range`, `search_insert`, `search_matrix`, `find_min`,
`find_peak_element`, `guess_number`, `min_eating_speed`,
`find_median_sorted_arrays`. `search`, `search_range`, `search_insert` and
`search_matrix` scan linearly; `find_min` and `find_peak_element` use the
overall minimum and the index of the first maximum.

### `algokit.numbers`

`hamming_weight` (32-bit), `my_pow`, `my_sqrt`, `reverse_integer`
(0 outside the signed 32-bit range), `is_palindrome_number`, `plus_one`
(in place).

### `algokit.strings`

`is_palindrome`, `reverse_words`, `merge_alternately`, `is_isomorphic`,
`is_anagram`, `str_str`, `can_construct`, `is_subsequence`,
`length_of_longest_substring`, `character_replacement`, `group_anagrams`
(lower-case ASCII words only), `check_inclusion`, `length_of_last_word`,
`min_window`.

### `algokit.stacks`

- `MinStack`: `push`, `pop`, `top`, `get_min`, and `len()`.
- `SmallestInfiniteSet`: starts with 1 to 1000; `pop_smallest`, `add_back`.
- `eval_rpn` (division truncates toward zero), `is_valid_parentheses`,
  `generate_parenthesis`, `daily_temperatures`, `largest_rectangle_area`,
  `car_fleet`, `max_sliding_window`.

Empty input where a value is needed raises `ValueError`; reading from an
empty `MinStack` or `SmallestInfiniteSet` raises `IndexError`.

## Examples

```python
from algokit.nodes import build_list, list_values, build_tree
from algokit.linked_lists import reverse_list
from algokit.trees import max_depth
from algokit.stacks import eval_rpn, MinStack

list_values(reverse_list(build_list([1, 2, 3])))      # [3, 2, 1]
max_depth(build_tree([3, 9, 20, None, None, 15, 7]))  # 3
eval_rpn(["2", "1", "+", "3", "*"])                   # 9

stack = MinStack()
stack.push(3)
stack.push(1)
stack.get_min()                                       # 1
```

`guess_number` takes the judge as a callable that returns `-1` when the
guess is too high, `1` when it is too low and `0` when it is right:

```python
from algokit.searching import guess_number

guess_number(10, lambda n: (n < 6) - (n > 6))         # 6
```

## What it does not do

This is a library only: it has no command-line program, and it reads and
writes no files.