# dsakit

A library of classic data-structure and algorithm routines in plain Python,
with no third-party dependencies. Everything works on ordinary lists,
strings and integers.

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

| Module | Contents |
| --- | --- |
| `dsakit.heaps` | `MaxHeap`, `MinHeap`, `build_max_heap`, `build_min_heap`, `change_key_max`, `change_key_min`, `heap_sort`, `min_to_max_heap`, `is_min_heap`, `kth_largest_heap`, `kth_largest_min_heap`, `kth_largest_quickselect` |
| `dsakit.recursion` | `solve_n_queens`, `combination_sum3`, `binary_strings_without_consecutive_ones`, `find_paths`, `subset_sums`, `unique_subsets`, `letter_combinations`, `count_reachable_cells` |
| `dsakit.greedy` | `can_jump`, `find_content_children`, `lemonade_change`, `check_valid_string`, `candy`, `find_platform`, `job_scheduling` |
| `dsakit.intervals` | `merge_intervals`, `insert_interval`, `insert_and_merge`, `erase_overlap_intervals` |
| `dsakit.containers` | `ArrayStack`, `ArrayQueue`, `LinkedListStack`, `LinkedListQueue`, `MinStack`, `QueueStack`, `StackQueue`, and the `Underflow` and `CapacityExceeded` errors |
| `dsakit.sliding_window` | `max_score`, `number_of_substrings`, `num_subarrays_with_sum`, `number_of_nice_subarrays`, `longest_ones`, `total_fruits`, `character_replacement`, `length_of_longest_substring`, `min_window`, `k_distinct_char` |
| `dsakit.stack_problems` | `is_valid_brackets`, `asteroid_collision`, `next_greater_element`, `next_greater_elements_circular`, `next_smaller_element`, `largest_rectangle_area`, `sub_array_ranges`, `sum_subarray_mins`, `trap`, `remove_k_digits`, `max_sliding_window` |

## Examples

```python
from dsakit.heaps import MaxHeap, heap_sort, kth_largest_quickselect
from dsakit.containers import ArrayStack, Underflow
from dsakit.intervals import merge_intervals
from dsakit.stack_problems import trap
import random

heap = MaxHeap()
for key in (3, 9, 4):
    heap.push(key)
heap.peek()        # 9
heap.pop()         # 9
len(heap)          # 2

nums = [7, 4, 1, 5, 3]
heap_sort(nums)    # sorts in place; nums is now [1, 3, 4, 5, 7]

kth_largest_quickselect([1, 2, 3, 4, 5], 2, random.Random(0))   # 4

merge_intervals([[1, 3], [2, 6], [8, 10]])   # [[1, 6], [8, 10]]
trap([4, 2, 0, 3, 2, 5])                     # 9

stack = ArrayStack(2)
stack.push(1)
stack.pop()        # 1
try:
    stack.pop()
except Underflow:
    pass
```

## Errors

- The containers in `dsakit.containers` raise `Underflow` (a subclass of
  `IndexError`) when you read from or remove from an empty container.
  `ArrayStack` and `ArrayQueue` raise `CapacityExceeded` when pushed to while
  full; `ArrayQueue` needs a capacity of at least 1.
- `MaxHeap` and `MinHeap` raise `IndexError` on `pop` or `peek` when empty,
  and `change_key` (like `change_key_max` and `change_key_min`) raises
  `IndexError` for an index outside the heap.
- The `kth_largest_*` functions raise `ValueError` unless `1 <= k <= len(nums)`;
  `max_score` and `max_sliding_window` likewise reject an out-of-range `k`.

## Scope

`dsakit` is a library only: it has no command-line tool and keeps no state
beyond the objects you create.