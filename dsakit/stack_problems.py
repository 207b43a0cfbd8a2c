"""Problems solved with stacks, monotonic stacks and double-ended queues."""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Callable, Sequence

_MOD = 1_000_000_007
_OPENERS = {")": "(", "]": "[", "}": "{"}

_Pops = Callable[[int, int], bool]


def _next_index(nums: Sequence[int], pops: _Pops) -> list[int]:
    """For each index, the nearest later index kept on the stack, else ``len(nums)``.

    ``pops(stacked, current)`` tells whether a stacked value gives way to the
    current one.
    """
    result = [len(nums)] * len(nums)
    stack: list[int] = []
    for i in reversed(range(len(nums))):
        while stack and pops(nums[stack[-1]], nums[i]):
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(i)
    return result


def _prev_index(nums: Sequence[int], pops: _Pops) -> list[int]:
    """For each index, the nearest earlier index kept on the stack, else -1."""
    result = [-1] * len(nums)
    stack: list[int] = []
    for i, value in enumerate(nums):
        while stack and pops(nums[stack[-1]], value):
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(i)
    return result


def _extreme_total(nums: Sequence[int], pops_next: _Pops, pops_prev: _Pops) -> int:
    """Sum, over every subarray, of the element that survives the given rules."""
    after = _next_index(nums, pops_next)
    before = _prev_index(nums, pops_prev)
    return sum(
        value * (i - before[i]) * (after[i] - i) for i, value in enumerate(nums)
    )


def is_valid_brackets(s: str) -> bool:
    """Tell whether the brackets in ``s`` are balanced and properly nested.

    Any character that is not ``(``, ``[``, ``{``, ``)`` or ``]`` is treated
    as a closing ``}``.
    """
    stack: list[str] = []
    for ch in s:
        if ch in "([{":
            stack.append(ch)
            continue
        if not stack or stack[-1] != _OPENERS.get(ch, "{"):
            return False
        stack.pop()
    return not stack


def asteroid_collision(asteroids: Sequence[int]) -> list[int]:
    """Return the asteroids left after all collisions.

    Positive values move right, others move left; on collision the smaller
    one is destroyed and equal ones destroy each other.
    """
    escaped: list[int] = []
    moving_right: list[int] = []
    for asteroid in asteroids:
        if asteroid > 0:
            moving_right.append(asteroid)
            continue
        size = abs(asteroid)
        while moving_right and moving_right[-1] < size:
            moving_right.pop()
        if moving_right and moving_right[-1] == size:
            moving_right.pop()
            continue
        if not moving_right:
            escaped.append(asteroid)
    return escaped + moving_right


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, return the next greater value after it in ``nums2``.

    -1 stands for no greater value. Every value of ``nums1`` must occur in ``nums2``.
    """
    greater: dict[int, int] = {}
    stack: list[int] = []
    for value in reversed(nums2):
        while stack and stack[-1] <= value:
            stack.pop()
        greater[value] = stack[-1] if stack else -1
        stack.append(value)
    missing = [value for value in nums1 if value not in greater]
    if missing:
        raise ValueError(f"values not found in nums2: {missing}")
    return [greater[value] for value in nums1]


def next_greater_elements_circular(nums: Sequence[int]) -> list[int]:
    """Return the next greater value for each element, wrapping around the end.

    -1 stands for no greater value.
    """
    n = len(nums)
    result = [-1] * n
    stack: list[int] = []
    for i in reversed(range(2 * n)):
        value = nums[i % n]
        while stack and stack[-1] <= value:
            stack.pop()
        if i < n and stack:
            result[i] = stack[-1]
        stack.append(value)
    return result


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle that fits under the histogram."""
    best = 0
    stack: list[int] = []
    n = len(heights)
    for i in range(n + 1):
        current = heights[i] if i < n else None
        while stack and (current is None or heights[stack[-1]] > current):
            height = heights[stack.pop()]
            left = stack[-1] if stack else -1
            best = max(best, height * (i - left - 1))
        stack.append(i)
    return best


def next_smaller_element(nums: Sequence[int]) -> list[int]:
    """Return the next strictly smaller value after each element, or -1."""
    result = [-1] * len(nums)
    stack: list[int] = []
    for i in reversed(range(len(nums))):
        while stack and stack[-1] >= nums[i]:
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(nums[i])
    return result


def sub_array_ranges(nums: Sequence[int]) -> int:
    """Return the sum of ``max - min`` over every contiguous subarray."""
    maxima = _extreme_total(nums, operator.le, operator.lt)
    minima = _extreme_total(nums, operator.ge, operator.gt)
    return maxima - minima


def sum_subarray_mins(arr: Sequence[int]) -> int:
    """Return the sum of the minimum of every contiguous subarray, modulo 1e9+7."""
    return _extreme_total(arr, operator.ge, operator.gt) % _MOD


def trap(height: Sequence[int]) -> int:
    """Return how much rain water the elevation map holds."""
    left, right = 0, len(height) - 1
    left_max = right_max = total = 0
    while left < right:
        if height[left] <= height[right]:
            if left_max > height[left]:
                total += left_max - height[left]
            else:
                left_max = height[left]
            left += 1
        else:
            if right_max > height[right]:
                total += right_max - height[right]
            else:
                right_max = height[right]
            right -= 1
    return total


def remove_k_digits(num: str, k: int) -> str:
    """Drop up to ``k`` digits from ``num`` to make it smaller.

    Each digit may remove the single larger digit just before it while
    removals remain; removals left over at the end are not spent and leading
    zeros are kept.
    """
    kept: list[str] = []
    for digit in num:
        if k > 0 and kept and digit < kept[-1]:
            kept.pop()
            k -= 1
        kept.append(digit)
    return "".join(kept)


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of ``k`` consecutive values."""
    if k < 1:
        raise ValueError(f"window size must be at least 1, got {k}")
    result: list[int] = []
    window: deque[int] = deque()
    for i, value in enumerate(nums):
        if window and window[0] <= i - k:
            window.popleft()
        while window and nums[window[-1]] <= value:
            window.pop()
        window.append(i)
        if i >= k - 1:
            result.append(nums[window[0]])
    return result