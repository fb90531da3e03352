# algokit

A small collection of classic algorithms and data structures in plain Python,
with no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `algokit.sorting`: `bubble_sort`, `insertion_sort`, `selection_sort`,
  `merge_sort`, `heap_sort`, `counting_sort` (any integers),
  `digit_count_sort` (values 0 to 9 only), `sorted_both_ways` (returns the
  ascending and descending lists), `merge_distinct` (merges two sequences into
  one sorted list holding each value once). `heap_sort_steps` is a generator
  that yields `(iteration, snapshot)` after each extraction from the heap.
  All of them return new lists and leave their input untouched.
- `algokit.searching`: `binary_search` and `ternary_search` return the index
  of a key in a sorted sequence, or `-1`; `nth_root(x, n, eps=1e-6)`
  approximates a root by bisection.
- `algokit.stack`: `is_balanced` checks `()[]{}` nesting (other characters are
  ignored); `evaluate_postfix` evaluates single-digit postfix expressions with
  `+ - * / %`, where division truncates toward zero.
- `algokit.arithmetic`: `factorial`, `is_palindrome_number`, `is_leap_year`,
  `digit_sum`, `square_series` (text such as `1^2+2^2+3^2`), `to_binary`,
  `gcd_all`, `is_power_of_two`, `divisors`, `primes_up_to`, `fibonacci`.
- `algokit.arrays`: `contains_nearby_duplicate`, `find_missing_number`,
  `largest`, `smallest`, `square_all`, `push_zeroes_to_end`, `rotate_left`,
  `trapped_water`, `min_chocolate_difference`, `tug_of_war`, `knapsack`
  (0/1 knapsack), and the range-sum classes `PrefixSums` and `PrefixSums2D`,
  which use 1-based, inclusive positions.
- `algokit.strings`: `most_frequent_char` (ties go to the lowest code point),
  `remove_consecutive_duplicates`, `first_non_repeating` (or `None`),
  `letters_only` (ASCII letters), `lexicographic_order`,
  `longest_common_prefix` (`''` when there is none), `is_scramble`,
  `wildcard_match` (`?` matches one character, `*` any run).
- `algokit.linkedlist`: `Node`, and `LinkedList` with 1-based positions:
  `append`, `prepend`, `insert_after`, `insert_at`, `remove`, `remove_at`,
  `find`, `reverse`, `len()` and iteration. On raw `Node` chains,
  `find_loop_start` returns the node where a cycle begins and `break_loop`
  cuts the cycle.
- `algokit.tree`: `TreeNode`, `inorder`, `mirror` (returns a new tree).
- `algokit.puzzles`: `hanoi_moves` yields `(disk, from_pole, to_pole)` moves;
  `pyramid` returns the lines of a centred star pyramid.

## Examples

```python
from algokit.sorting import merge_sort
from algokit.searching import binary_search
from algokit.strings import wildcard_match
from algokit.arrays import PrefixSums, knapsack

merge_sort([5, 2, 7, 9, 1])          # [1, 2, 5, 7, 9]
binary_search([1, 2, 3, 4, 5], 4)    # 3
wildcard_match("abcde", "a*?e")      # True

sums = PrefixSums([1, 2, 3, 4])
sums.range_sum(2, 3)                 # 5

knapsack(50, [10, 20, 30], [60, 100, 120])  # 220
```

```python
from algokit.linkedlist import LinkedList

items = LinkedList([7, 1])
items.append(3)
items.reverse()
list(items)                          # [3, 1, 7]
items.find(1)                        # 2
```

```python
from algokit.puzzles import hanoi_moves

for disc, source, target in hanoi_moves(2, "p", "q", "r"):
    print(f"Move circle {disc} from pole {source} to pole {target}")
```

## Errors

Invalid values raise `ValueError`: for example a negative `factorial`
argument, a malformed postfix expression, `largest` or `smallest` of an empty
sequence, or a rotation outside `0..len`. Positions outside a `PrefixSums`,
`PrefixSums2D` or `LinkedList` raise `IndexError`; `LinkedList.remove` of a
value that is not there raises `ValueError`.

## What it does not do

This is a library only. It has no command-line programs and reads nothing
from standard input; call the functions from your own code.