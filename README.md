# algoset

A small library of classic algorithms and the node types they work on.
It uses only the standard library.

## Installation

```
pip install .
```

## Modules

### `algoset.nodes`

- `TreeNode(val, left, right)`, `ListNode(val, next)` and
  `GraphNode(val, neighbors)` are dataclasses that compare by identity.
  Iterating over a `ListNode` yields it and every node after it.
- `build_tree(values)` builds a tree from a level-order list in which `None`
  marks a missing child. `tree_values(root)` turns a tree back into such a
  list, with trailing `None` entries removed.
- `build_list(values)` builds a linked list. `list_values(head)` returns its
  values (the list must not contain a cycle).

### `algoset.arrays`

- `two_sum(nums, target)`: indices of the first pair adding up to `target`,
  or `[]`.
- `remove_element(nums, val)`: moves the items not equal to `val` to the
  front of `nums` and returns how many there are.
- `max_sub_array(nums)`: largest sum of a contiguous subarray; raises
  `ValueError` for an empty list.
- `merge(nums1, m, nums2, n)`: merges the sorted first `n` items of `nums2`
  into `nums1` in place; `nums1` must have room for `m + n` items.
- `find_median_sorted_arrays(nums1, nums2)`: median of two sorted lists as a
  `float`; raises `ValueError` if both are empty.
- `divide(dividend, divisor)`: 32-bit integer division truncating toward
  zero, returning `2**31 - 1` for `-2**31 / -1`; raises `ZeroDivisionError`
  for a zero divisor.

### `algoset.strings`

- `is_match(s, p)`: whole-string match with `.` for any character and `*`
  for zero or more of the preceding one.
- `length_of_longest_substring(s)`: length of the longest substring with no
  repeated character.
- `longest_palindrome(s)`: longest palindromic substring, the leftmost on
  ties.
- `is_valid_parentheses(s)`: whether `()`, `[]` and `{}` are balanced and
  correctly nested.

### `algoset.combinatorics`

- `letter_combinations(digits)`: every word the phone digits `2`-`9` can
  spell; raises `ValueError` for any other digit.
- `generate_parenthesis(n)`: every well-formed string of `n` pairs.
- `combination_sum(candidates, target)`: every combination of candidates
  (each usable repeatedly) summing to `target`.
- `permute(nums)`: every ordering of `nums`.
- `solve_n_queens(n)`: every placement of `n` non-attacking queens, each row
  a string of `Q` and `.`.
- `unique_paths(m, n)`: number of right/down paths across an `m` by `n`
  grid; raises `ValueError` for a non-positive size.

### `algoset.linked_lists`

- `add_two_numbers(l1, l2)`: sum of two numbers stored as digit lists, least
  significant digit first.
- `has_cycle(head)` and `detect_cycle(head)`: whether the list loops, and the
  node where the loop begins (or `None`).

### `algoset.lru_cache`

`LRUCache(capacity)` maps keys to values. `get(key)` returns the value and
marks it recently used, or `-1` when the key is absent. `put(key, value)`
stores a value and, when over capacity, drops the least recently used key.
A capacity of zero or less stores nothing. `len()` and `in` are supported.

### `algoset.graphs`

- `clone_graph(node)`: deep copy of the graph reachable from `node`.
- `ladder_length(begin_word, end_word, word_list)`: number of words in the
  shortest chain changing one letter at a time, or `0`.
- `num_islands(grid)`: number of 4-connected groups of `"1"` cells; the grid
  is not changed.
- `capture_surrounded(board)`: turns every `"O"` region not touching the
  border into `"X"`, in place.

### `algoset.trees`

`is_same_tree`, `is_symmetric` (an empty tree counts as not symmetric),
`level_order`, `zigzag_level_order`, `level_order_bottom`, `min_depth`,
`path_sum(root, target_sum)` (every root-to-leaf path with that sum),
`right_side_view` and `is_valid_bst`.

### `algoset.tree_build`

- `build_tree_from_preorder_inorder(preorder, inorder)` and
  `build_tree_from_inorder_postorder(inorder, postorder)` rebuild a tree of
  distinct values.
- `sorted_list_to_bst(head)`: height-balanced search tree from a sorted
  linked list, which is left unchanged.
- `flatten(root)`: relinks the tree in place into a right-leaning chain in
  preorder.
- `recover_tree(root)`: restores search-tree order in place by putting the
  values back in sorted inorder positions.

## Example

```python
from algoset.nodes import build_tree, build_list, list_values
from algoset.trees import level_order, path_sum
from algoset.linked_lists import add_two_numbers
from algoset.strings import is_match

root = build_tree([3, 9, 20, None, None, 15, 7])
print(level_order(root))          # [[3], [9, 20], [15, 7]]

tree = build_tree([5, 4, 8, 11, None, 13, 4, 7, 2, None, None, 5, 1])
print(path_sum(tree, 22))         # [[5, 4, 11, 2], [5, 8, 4, 5]]

total = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
print(list_values(total))         # [7, 0, 8]

print(is_match("aab", "c*a*b"))   # True
```

## Scope

This is a library only: it has no command-line program.

## Running the tests

```
pip install .[test]
pytest
```