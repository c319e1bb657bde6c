# algokit

A small collection of classic algorithm exercises written as plain Python functions
and classes. It uses only the standard library.

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

### `algokit.integers`

- `is_palindrome_number(x)`: whether the decimal digits of `x` read the same both ways. Negative numbers are never palindromes.
- `integer_sqrt(x)`: the square root of `x` rounded down. Values below 2, negative ones included, are returned unchanged.
- `is_power_of_two(n)`: whether `n` is a positive power of two.
- `add_digits(num)`: sums the decimal digits repeatedly until one digit is left. For a negative `num` the result is the negated digit sum, taken once.
- `is_perfect_square(num)`: whether `num` is the square of a non-negative integer.
- `count_odds(low, high)`: how many odd integers lie in the closed range `[low, high]`.

### `algokit.strings`

- `roman_to_int(s)`: converts a Roman numeral, reading `IV`, `IX`, `XL`, `XC`, `CD` and `CM` as subtractive pairs. Raises `ValueError` on a character that is not a Roman digit.
- `is_valid_parentheses(s)`: whether the brackets `()`, `[]` and `{}` are balanced and properly nested. Strings of odd length are never valid.
- `find_substring(haystack, needle)`: index of the first occurrence of `needle`, or `-1`.
- `length_of_last_word(s)`: length of the last space-separated word, or `0` if there is none.
- `is_palindrome_text(s)`: a palindrome check over ASCII letters and digits only, ignoring case.
- `is_anagram(s, t)`: whether `t` is a rearrangement of the characters of `s`.
- `returns_to_origin(moves)`: whether a walk of `U`, `D`, `L` and `R` steps ends where it started. Any other character gives `False`.
- `to_lower_case(s)`: lowers ASCII uppercase letters and leaves everything else alone.
- `reverse_in_place(chars)`: reverses a list in place.

### `algokit.arrays`

- `two_sum(nums, target)`: the first pair of indices `(i, j)` with `i < j` whose values add up to `target`, or `None`.
- `remove_duplicates(nums)`: collapses runs of equal values to the front of the list in place and returns how many are kept.
- `remove_element(nums, val)`: moves the items not equal to `val` to the front of the list in place and returns how many are kept.
- `search_insert(nums, target)`: the first index whose value is not less than `target`.
- `binary_search(nums, target)`: an index of `target` in a sorted sequence, or `-1`.
- `plus_one(digits)`: adds one to a number given as a list of decimal digits.
- `missing_number(nums)`: the one number of `0..len(nums)` that is absent.
- `move_zeroes(nums)`: moves every zero to the end in place, keeping the other items in order.
- `max_consecutive_ones(nums)`: length of the longest run of ones.
- `shuffle(nums, n)`: interleaves `x1..xn` and `y1..yn` as `x1, y1, x2, y2, ...`. Raises `ValueError` unless `nums` holds exactly `2 * n` items.
- `NumArray(nums)`: prefix sums over a fixed sequence. `sum_range(left, right)` returns the inclusive range sum in constant time and raises `IndexError` for an invalid range. `len()` gives the number of elements.

### `algokit.linked_list`

- `ListNode(val, next)`: a list node. `ListNode.from_values(values)` builds a list, or returns `None` for no values. Iterating over a node yields the values from that node on.
- `merge_two_lists(list1, list2)`: splices two sorted lists into one. On equal values the node from `list2` comes first.
- `delete_duplicates(head)`: unlinks repeated values from a sorted list, keeping the first of each.

### `algokit.trees`

- `TreeNode(val, left, right)`: a binary tree node. `TreeNode.from_level_order(values)` builds a tree from breadth-first values, with `None` marking a missing child.
- `is_same_tree(p, q)`: whether two trees have the same shape and values.
- `max_depth(root)` and `min_depth(root)`: the number of nodes on the longest and shortest root-to-leaf paths.

### `algokit.matrices`

- `pascal_triangle(num_rows)`: the first `num_rows` rows of Pascal's triangle.
- `transpose(matrix)`: the transpose of a rectangular matrix. Raises `ValueError` if the rows differ in length.

## Example

```python
from algokit.arrays import two_sum, NumArray
from algokit.linked_list import ListNode, merge_two_lists
from algokit.trees import TreeNode, max_depth

two_sum([2, 7, 11, 15], 9)                          # (0, 1)
NumArray([-2, 0, 3, -5, 2, -1]).sum_range(0, 2)     # 1

merged = merge_two_lists(ListNode.from_values([1, 2, 4]),
                         ListNode.from_values([1, 3, 4]))
list(merged)                                        # [1, 1, 2, 3, 4, 4]

max_depth(TreeNode.from_level_order([3, 9, 20, None, None, 15, 7]))  # 3
```

## What it does not do

algokit is a library only. It has no command-line tool, and it does not store anything.