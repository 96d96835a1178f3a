# algonotes

Classic algorithm exercises and a few small programming notes, written as
ordinary Python functions that take and return Python values. The package has
no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algonotes.linked_lists` | `ListNode` (iterable, with `values()`), `list_from_values`, `add_two_numbers`, `merge_two_lists`, `merge_k_lists`, `remove_nth_from_end`, `reverse_k_group`, `swap_pairs` |
| `algonotes.trees` | `TreeNode`, `tree_from_level_order`, `inorder_traversal`, `max_depth`, `min_depth`, `has_path_sum`, `is_same_tree`, `is_valid_bst`, `invert_tree`, `lowest_common_ancestor` (for binary search trees) |
| `algonotes.grids` | `rotate_image`, `spiral_order`, `set_zeroes`, `is_valid_sudoku`, `solve_sudoku`, `word_exists` |
| `algonotes.strings` | `length_of_longest_substring`, `longest_common_prefix`, `longest_palindrome`, `zigzag_convert`, `str_str`, `find_substring`, `count_and_say`, `group_anagrams`, `min_window`, `is_anagram`, `reverse_string`, `reverse_vowels` |
| `algonotes.matching` | `regex_match` (`.` and `*`), `wildcard_match` (`?` and `*`), `is_valid_parentheses`, `longest_valid_parentheses`, `generate_parentheses`, `letter_combinations`, `num_decodings` |
| `algonotes.numbers` | `is_palindrome_number`, `reverse_integer`, `my_atoi`, `int_to_roman`, `roman_to_int`, `divide`, `multiply_strings`, `climb_stairs`, `unique_paths`, `plus_one`, `title_to_number`, `hamming_weight`, `is_power_of_two`, `is_power_of_three`, `is_power_of_four`, `add_digits`, `is_ugly`, `can_win_nim`, `get_sum`, `pascal_triangle` |
| `algonotes.rearrange` | `next_permutation`, `remove_duplicates`, `remove_element`, `combination_sum`, `combination_sum2`, `permute`, `subsets`, `merge_intervals`, `sort_colors`, `merge_sorted`, `move_zeroes`, `intersection`, `intersect` |
| `algonotes.arrays` | `two_sum`, `three_sum`, `three_sum_closest`, `four_sum`, `max_area`, `find_median_sorted_arrays`, `search_range`, `search_rotated`, `search_insert`, `trap`, `max_sub_array`, `largest_rectangle_area`, `max_profit`, `can_jump`, `first_missing_positive`, `missing_number`, `majority_element`, `contains_duplicate` |
| `algonotes.drawing` | `sierpinski(n)` and `diamond_digit(n)`, which return text pictures, and the `main` behind `algonotes-draw` |
| `algonotes.shared` | `SharedValue`, a reference-counted handle with copy-on-write |
| `algonotes.sequences` | `fibonacci`, `primes_up_to`, `prime_table`, and the `main` behind `algonotes-sequences` |
| `algonotes.notes` | `format_values`, `print_values`, `println_values`, and `OrderedTuple` |

A few conventions hold across the modules:

- Functions that work "in place" (`rotate_image`, `set_zeroes`, `solve_sudoku`,
  `next_permutation`, `sort_colors`, `merge_sorted`, `move_zeroes`,
  `invert_tree`, `reverse_k_group`, `swap_pairs`, `remove_nth_from_end`) change
  the object they are given. `remove_duplicates` and `remove_element` also
  shorten the list and return its new length.
- Input a function cannot make sense of raises an exception rather than
  returning a sentinel. Examples: `ValueError` for a bad Roman numeral symbol,
  a non-digit string given to `num_decodings`, a `two_sum` with no answer or an
  out-of-range `int_to_roman`, and `ZeroDivisionError` from `divide(x, 0)`.
- Several integer functions keep 32-bit limits: `reverse_integer` returns 0
  when the result leaves the signed 32-bit range, `my_atoi` clamps to it,
  `divide` clamps at its maximum, and `get_sum` wraps around.

## Examples

```python
from algonotes.numbers import int_to_roman, roman_to_int
from algonotes.arrays import two_sum
from algonotes.strings import count_and_say
from algonotes.matching import is_valid_parentheses
from algonotes.linked_lists import list_from_values, add_two_numbers
from algonotes.trees import tree_from_level_order, inorder_traversal

int_to_roman(1994)                 # 'MCMXCIV'
roman_to_int("MCMXCIV")            # 1994
two_sum([2, 7, 11, 15], 9)         # [0, 1]
count_and_say(4)                   # '1211'
is_valid_parentheses("()[]{}")     # True

total = add_two_numbers(list_from_values([2, 4, 3]), list_from_values([5, 6, 4]))
total.values()                     # [7, 0, 8]

root = tree_from_level_order([2, 1, 3])
inorder_traversal(root)            # [1, 2, 3]
```

### Shared values

`SharedValue` lets several handles own one value. `share()` gives another
handle on the same value (or on a deep copy, once `mark_unshareable()` has been
called). `read()` returns the value; `modify()` returns it for writing, first
giving this handle its own deep copy if the value is shared. `release()` gives
up a handle, and using a released handle raises `RuntimeError`. A handle is
also a context manager that releases itself on exit.

```python
from algonotes.shared import SharedValue

a = SharedValue([1, 2, 3])
b = a.share()
a.is_shared()          # True
b.modify().append(4)   # b now holds its own copy
a.read()               # [1, 2, 3]
b.read()               # [1, 2, 3, 4]
```

### Notes

`format_values(types, *args)` formats each argument by one letter of `types`:
`i` for an int, `f` for a number printed with six decimals, `c` for a single
character and `s` for anything shown with `str`; other letters are skipped.
Each item is followed by a space. `print_values` writes that line without a
newline, and `println_values` writes each item on its own line.

```python
from algonotes.notes import format_values, OrderedTuple

format_values("iifcs", 1, 2, 3.14159, "c", "string")  # '1 2 3.141590 c string '
OrderedTuple(1, "b") < OrderedTuple(1, "c")            # True
```

`OrderedTuple` compares its values left to right; `OrderedTuple.compare(lhs,
rhs)` returns -1, 0 or 1, and comparing tuples of different lengths raises
`TypeError`.

## Commands

Two commands are installed with the package.

```
algonotes-draw [sierpinski|diamond|all]
```

prints Sierpinski triangles of orders 0 to 5 and digit diamonds of sizes 0, 1,
4, 7 and 9. With no argument it prints both.

```
algonotes-sequences [fibonacci|primes|all] [--count N] [--limit N]
```

prints the Fibonacci numbers 1 to `--count` (default 30), one per line, and a
numbered table of the primes up to `--limit` (default 499). With no argument it
prints both.