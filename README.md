# dsakit

A small library of classic algorithm routines: array scans and searches,
integer parsing, string measures, and operations on singly linked lists and
binary trees. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.nodes`

- `ListNode(val=0, next=None)`: a singly linked list node.
  `ListNode.from_values(values)` builds a list and returns its head, or `None`
  for an empty input. Iterating over a node yields the values from that node
  to the end of the list.
- `TreeNode(val=0, left=None, right=None)`: a binary tree node.
  `TreeNode.from_level_order(values)` builds a tree from level-order values
  where `None` marks a missing child (an empty input or a leading `None` gives
  `None`); `to_level_order()` returns the same form, without trailing `None`s.

Both compare by identity, so nodes can be used as dictionary keys.

### `dsakit.arrays`

- `two_sum(nums, target)`: a tuple `(i, j)` with `i < j` of indices whose
  values add up to `target`; raises `ValueError` if there is none.
- `remove_element(nums, val)`: moves every value other than `val` to the
  front of the list in order and returns how many there are.
- `find_min_rotated(nums)`, `find_min_rotated_with_duplicates(nums)`: the
  minimum of a rotated sorted sequence (distinct values, or possibly
  duplicated); raise `ValueError` on an empty sequence.
- `find_kth_largest(nums, k)`: the `k`-th largest value, counting
  duplicates; raises `ValueError` unless `1 <= k <= len(nums)`.
- `move_zeroes(nums)`: moves zeros to the end in place, keeping the order of
  the other values.
- `find_max_consecutive_ones(nums)`: length of the longest run of ones.
- `pivot_index(nums)`: leftmost index whose left and right sums are equal,
  or `-1`.
- `total_fruit(fruits)`: length of the longest stretch holding at most two
  distinct values.
- `num_subarrays_with_sum(nums, goal)`: number of contiguous subarrays of a
  0/1 sequence that sum to `goal`.
- `valid_mountain_array(arr)`: whether the values strictly rise to an inner
  peak and then strictly fall to the end.
- `sorted_squares(nums)`: the squares of a sorted sequence, ascending.
- `running_sum(nums)`: prefix sums.
- `build_array(nums)`: the list `[nums[nums[i]] for each i]`.
- `is_trionic(nums)`: whether the values strictly rise, strictly fall, then
  strictly rise to the end, each part non-empty.

### `dsakit.integers`

- `my_atoi(s)`: parses an optional sign and leading digits after spaces,
  clamped to the signed 32-bit range; returns `0` if there are no digits.
- `roman_to_int(s)`: the value of a Roman numeral; raises `ValueError` on a
  character that is not a Roman digit.
- `is_power_of_two(n)`: whether `n` is a positive power of two.

### `dsakit.text`

- `length_of_longest_substring(s)`: length of the longest substring with no
  repeated character.
- `min_deletions(s)`: fewest characters to delete so that no two characters
  occur the same number of times.

### `dsakit.linked_lists`

- `add_two_numbers(l1, l2)`: adds two numbers stored as digit lists, least
  significant digit first, and returns the sum in the same form.
- `remove_nth_from_end(head, n)`: unlinks the `n`-th node from the end and
  returns the head; raises `ValueError` unless `1 <= n <= length`.
- `merge_sorted(list1, list2)`: splices two sorted lists into one, reusing
  their nodes; on equal values the node from `list2` comes first.
- `sort_list(head)`: merge sort, reusing the nodes; returns the new head.
- `delete_node(node)`: removes a node by taking over its successor's value
  and link; raises `ValueError` for the last node.
- `delete_middle(head)`: unlinks the node at index `length // 2`; a list of
  zero or one node gives `None`.

### `dsakit.trees`

- `level_order_bottom(root)`: values grouped by level, deepest first.
- `has_path_sum(root, target_sum)`: whether a root-to-leaf path sums to
  `target_sum`.
- `flatten(root)`: rewires the tree in place into a right-leaning chain in
  preorder.
- `right_side_view(root)`: the last value of each level, top down.
- `diameter(root)`: edges on the longest path between any two nodes.
- `search_bst(root, val)`: the node holding `val` in a binary search tree,
  or `None`.
- `insert_into_bst(root, val)`: inserts a new leaf (equal values go right)
  and returns the root.

## Examples

```python
from dsakit.arrays import two_sum, sorted_squares
from dsakit.integers import my_atoi, roman_to_int
from dsakit.nodes import ListNode, TreeNode
from dsakit.linked_lists import add_two_numbers, sort_list
from dsakit.trees import level_order_bottom, right_side_view

two_sum([2, 7, 11, 15], 9)          # (0, 1)
sorted_squares([-4, -1, 0, 3, 10])  # [0, 1, 9, 16, 100]
my_atoi("   -42")                   # -42
roman_to_int("MCMXCIV")             # 1994

total = add_two_numbers(ListNode.from_values([2, 4, 3]),
                        ListNode.from_values([5, 6, 4]))
list(total)                         # [7, 0, 8]
list(sort_list(ListNode.from_values([4, 2, 1, 3])))  # [1, 2, 3, 4]

root = TreeNode.from_level_order([3, 9, 20, None, None, 15, 7])
level_order_bottom(root)            # [[15, 7], [9, 20], [3]]
right_side_view(root)               # [3, 20, 7]
```

## What it does not do

dsakit is a library only: it has no command-line tool, and it does not read
or write files. Inputs are plain Python lists, strings and the node types
above.