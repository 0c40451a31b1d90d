# dsakit

Plain, dependency-free Python implementations of well-known algorithm and
data-structure problems. The routines take Python lists and strings and
return new values; the few that change their input in place (`recover_bst`,
the linked-list helpers) say so.

## Installation

```
pip install dsakit
```

To run the test suite:

```
pip install "dsakit[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsakit.primes` | `smallest_prime_factors`, `prime_factorization`, `primes_below`, `distinct_prime_factors` |
| `dsakit.bits` | `binary_pow`, `recursive_pow`, `count_total_set_bits`, `divide` (32-bit division without `/`), `bitmask_subsets`, `two_odd_occurrences` |
| `dsakit.searching` | `can_place_stations`, `min_max_gas_station_distance`, `can_partition`, `split_array`, `bitonic_max`, `find_min_rotated` |
| `dsakit.arrays` | `longest_subarray_with_sum`, `max_product_subarray`, `max_subarray`, `next_permutation`, `three_sum`, `fractional_knapsack`, `running_medians` |
| `dsakit.linked` | `ListNode`, `build_list`, `list_values`, `copy_random_list`, `detect_cycle`, `reverse_k_group` |
| `dsakit.caches` | `LFUCache` and `LRUCache` |
| `dsakit.trees` | `TreeNode`, `inorder`, `is_bst`, `recover_bst`, `count_k_sum_paths`, `max_path_sum`, `serialize`, `deserialize`, `boundary_traversal` |
| `dsakit.stacks` | `largest_rectangle_area`, `longest_valid_parentheses`, `maximal_rectangle`, `next_greater_circular`, `previous_smaller`, `remove_k_digits`, `sliding_window_max`, `sum_subarray_mins`, `sum_subarray_ranges`, `find_celebrity`, `trap_rain_water_stack` |
| `dsakit.sorting` | `count_greater_to_right`, counting later greater elements with merge sort |
| `dsakit.expressions` | `infix_to_postfix`, `infix_to_prefix`, `prefix_to_infix`, `prefix_to_postfix`, `postfix_to_prefix`, `postfix_to_infix` (single-character operands) |
| `dsakit.strings` | `count_substrings_with_k_distinct`, `group_anagrams`, `longest_palindrome`, `character_replacement`, `min_window`, `frequency_sort`, `parse_int`, `find_different_binary_string` |
| `dsakit.windows` | `binary_subarrays_with_sum`, `nice_subarrays`, `subarrays_with_k_distinct`, `trap_rain_water` |
| `dsakit.backtracking` | `binary_strings_without_consecutive_ones`, `unique_permutations`, `generate_parentheses`, `min_coins`, `subsets`, `word_exists` |
| `dsakit.puzzles` | `add_operators`, `solve_n_queens`, `solve_sudoku` |

## Examples

```python
from dsakit.arrays import max_subarray, three_sum
from dsakit.caches import LRUCache
from dsakit.expressions import infix_to_postfix
from dsakit.puzzles import solve_n_queens

max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # 6
three_sum([-1, 0, 1, 2, -1, -4])                # [[-1, -1, 2], [-1, 0, 1]]
infix_to_postfix("a+b*c")                       # "abc*+"
len(solve_n_queens(8))                          # 92

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                                    # 1
cache.put(3, 3)                                 # evicts key 2
cache.get(2)                                    # None
```

Linked lists and trees use small node classes:

```python
from dsakit.linked import build_list, list_values, reverse_k_group
from dsakit.trees import deserialize, inorder, serialize

head = build_list([1, 2, 3, 4, 5])
list_values(reverse_k_group(head, 2))           # [2, 1, 4, 3, 5]

root = deserialize([2, 1, -1, -1, 3, -1, -1])
inorder(root)                                   # [1, 2, 3]
serialize(root)                                 # [2, 1, -1, -1, 3, -1, -1]
```

## Conventions

- "Not found" results are `None`: cache misses (`LFUCache.get`,
  `LRUCache.get`), `next_greater_circular` and `previous_smaller` entries with
  no answer, `find_celebrity` when there is no celebrity, and `min_coins` when
  the total cannot be made.
- Invalid input raises `ValueError` (for example empty sequences where a value
  is required, an unsolvable Sudoku, or unbalanced parentheses in an infix
  expression); `divide` raises `ZeroDivisionError` for a zero divisor and
  `count_greater_to_right` raises `IndexError` for an out-of-range query.
- `serialize` marks missing children with `-1`, so trees holding the value
  `-1` cannot be serialised.

## What it does not do

dsakit is a library only: it has no command-line tool, reads no input files
and prints nothing. Every routine is called from Python code.