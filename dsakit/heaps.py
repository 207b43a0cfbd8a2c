"""Binary heaps kept in plain Python lists, and the algorithms built on them."""

from __future__ import annotations

import heapq
import operator
import random
from collections.abc import Callable, MutableSequence, Sequence
from typing import Optional

_Before = Callable[[int, int], bool]


def _sift_up(heap: MutableSequence[int], index: int, before: _Before) -> None:
    while index > 0:
        parent = (index - 1) // 2
        if not before(heap[index], heap[parent]):
            return
        heap[index], heap[parent] = heap[parent], heap[index]
        index = parent


def _sift_down(
    heap: MutableSequence[int],
    index: int,
    before: _Before,
    size: Optional[int] = None,
) -> None:
    limit = len(heap) if size is None else size
    while True:
        best = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < limit and before(heap[child], heap[best]):
                best = child
        if best == index:
            return
        heap[index], heap[best] = heap[best], heap[index]
        index = best


def _change_key(
    heap: MutableSequence[int], index: int, value: int, before: _Before
) -> None:
    if not 0 <= index < len(heap):
        raise IndexError(f"heap index {index} out of range")
    old = heap[index]
    if old == value:
        return
    heap[index] = value
    if before(value, old):
        _sift_up(heap, index, before)
    else:
        _sift_down(heap, index, before)


def _build(heap: MutableSequence[int], before: _Before) -> None:
    for index in reversed(range(len(heap) // 2)):
        _sift_down(heap, index, before)


def _heap_push(items: list[int], key: int, before: _Before) -> None:
    items.append(key)
    _sift_up(items, len(items) - 1, before)


def _heap_pop(items: list[int], before: _Before) -> int:
    if not items:
        raise IndexError("pop from empty heap")
    top = items[0]
    last = items.pop()
    if items:
        items[0] = last
        _sift_down(items, 0, before)
    return top


def _heap_peek(items: list[int]) -> int:
    if not items:
        raise IndexError("peek at empty heap")
    return items[0]


def _check_rank(nums: Sequence[int], k: int) -> None:
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")


def change_key_max(heap: MutableSequence[int], index: int, value: int) -> None:
    """Set ``heap[index]`` to ``value`` in a max-heap and restore the heap order."""
    _change_key(heap, index, value, operator.gt)


def change_key_min(heap: MutableSequence[int], index: int, value: int) -> None:
    """Set ``heap[index]`` to ``value`` in a min-heap and restore the heap order."""
    _change_key(heap, index, value, operator.lt)


def build_max_heap(nums: MutableSequence[int]) -> None:
    """Rearrange ``nums`` in place into a max-heap."""
    _build(nums, operator.gt)


def build_min_heap(nums: MutableSequence[int]) -> None:
    """Rearrange ``nums`` in place into a min-heap."""
    _build(nums, operator.lt)


def heap_sort(nums: MutableSequence[int]) -> None:
    """Sort ``nums`` in place into ascending order."""
    _build(nums, operator.gt)
    for end in range(len(nums) - 1, 0, -1):
        nums[0], nums[end] = nums[end], nums[0]
        _sift_down(nums, 0, operator.gt, size=end)


def kth_largest_heap(nums: Sequence[int], k: int) -> int:
    """Return the k-th largest value by popping a max-heap ``k - 1`` times."""
    _check_rank(nums, k)
    heap = list(nums)
    build_max_heap(heap)
    for _ in range(k - 1):
        last = heap.pop()
        if heap:
            heap[0] = last
            _sift_down(heap, 0, operator.gt)
    return heap[0]


def kth_largest_min_heap(nums: Sequence[int], k: int) -> int:
    """Return the k-th largest value using a min-heap holding the top ``k`` values."""
    _check_rank(nums, k)
    window = list(nums[:k])
    heapq.heapify(window)
    for value in nums[k:]:
        if window[0] < value:
            heapq.heapreplace(window, value)
    return window[0]


def _partition(items: list[int], pivot_index: int, left: int, right: int) -> int:
    """Move values greater than the pivot to its left; return the pivot's place."""
    pivot = items[pivot_index]
    items[left], items[pivot_index] = items[pivot_index], items[left]
    store = left + 1
    for i in range(left + 1, right + 1):
        if items[i] > pivot:
            items[store], items[i] = items[i], items[store]
            store += 1
    items[left], items[store - 1] = items[store - 1], items[left]
    return store - 1


def kth_largest_quickselect(
    nums: Sequence[int], k: int, rng: Optional[random.Random] = None
) -> int:
    """Return the k-th largest value by quickselect with random pivots."""
    _check_rank(nums, k)
    chooser = rng if rng is not None else random.Random()
    items = list(nums)
    left, right = 0, len(items) - 1
    while True:
        pivot = _partition(items, chooser.randint(left, right), left, right)
        if pivot == k - 1:
            return items[pivot]
        if pivot > k - 1:
            right = pivot - 1
        else:
            left = pivot + 1


def min_to_max_heap(nums: Sequence[int]) -> list[int]:
    """Return a max-heap holding the values of ``nums``; the input is left alone."""
    result = list(nums)
    build_max_heap(result)
    return result


def is_min_heap(nums: Sequence[int]) -> bool:
    """Tell whether every parent in ``nums`` is no greater than its children."""
    return all(nums[(i - 1) // 2] <= nums[i] for i in range(1, len(nums)))


class MaxHeap:
    """A heap whose top is its largest value."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, key: int) -> None:
        """Add ``key`` to the heap."""
        _heap_push(self._items, key, operator.gt)

    def change_key(self, index: int, value: int) -> None:
        """Replace the value stored at ``index`` and restore the heap order."""
        _change_key(self._items, index, value, operator.gt)

    def pop(self) -> int:
        """Remove and return the largest value."""
        return _heap_pop(self._items, operator.gt)

    def peek(self) -> int:
        """Return the largest value without removing it."""
        return _heap_peek(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class MinHeap:
    """A heap whose top is its smallest value."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, key: int) -> None:
        """Add ``key`` to the heap."""
        _heap_push(self._items, key, operator.lt)

    def change_key(self, index: int, value: int) -> None:
        """Replace the value stored at ``index`` and restore the heap order."""
        _change_key(self._items, index, value, operator.lt)

    def pop(self) -> int:
        """Remove and return the smallest value."""
        return _heap_pop(self._items, operator.lt)

    def peek(self) -> int:
        """Return the smallest value without removing it."""
        return _heap_peek(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)