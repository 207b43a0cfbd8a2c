"""Sliding-window algorithms over sequences of numbers and characters."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Sequence


def _count_at_most(flags: Sequence[bool], limit: int) -> int:
    """Count the subarrays in which at most ``limit`` flags are set."""
    if limit < 0:
        return 0
    total = left = hits = 0
    for right, flag in enumerate(flags):
        hits += flag
        while hits > limit:
            hits -= flags[left]
            left += 1
        total += right - left + 1
    return total


def _longest_with_few_kinds(items: Sequence[Hashable], limit: int) -> int:
    """Return the longest run of ``items`` holding at most ``limit`` distinct values."""
    counts: Counter[Hashable] = Counter()
    left = best = 0
    for right, item in enumerate(items):
        counts[item] += 1
        if len(counts) > limit:
            old = items[left]
            counts[old] -= 1
            if counts[old] == 0:
                del counts[old]
            left += 1
        if len(counts) <= limit:
            best = max(best, right - left + 1)
    return best


def max_score(card_points: Sequence[int], k: int) -> int:
    """Return the largest total of ``k`` cards taken from either end of the row."""
    if not 0 <= k <= len(card_points):
        raise ValueError(f"k must be between 0 and {len(card_points)}, got {k}")
    left_sum = sum(card_points[:k])
    right_sum = 0
    best = left_sum
    for taken_left, taken_right in zip(
        reversed(card_points[:k]), reversed(card_points)
    ):
        left_sum -= taken_left
        right_sum += taken_right
        best = max(best, left_sum + right_sum)
    return best


def number_of_substrings(s: str) -> int:
    """Count the substrings of ``s`` that hold at least one each of a, b and c."""
    last_seen = {"a": -1, "b": -1, "c": -1}
    count = 0
    for i, ch in enumerate(s):
        if ch not in last_seen:
            raise ValueError(f"only 'a', 'b' and 'c' are allowed, got {ch!r}")
        last_seen[ch] = i
        earliest = min(last_seen.values())
        if earliest != -1:
            count += 1 + earliest
    return count


def num_subarrays_with_sum(nums: Sequence[int], goal: int) -> int:
    """Count the subarrays of a binary array whose sum is exactly ``goal``."""
    flags = [bool(x) for x in nums]
    return _count_at_most(flags, goal) - _count_at_most(flags, goal - 1)


def number_of_nice_subarrays(nums: Sequence[int], k: int) -> int:
    """Count the subarrays holding exactly ``k`` odd numbers."""
    flags = [bool(x & 1) for x in nums]
    return _count_at_most(flags, k) - _count_at_most(flags, k - 1)


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Return the longest run of ones when up to ``k`` zeros may be flipped."""
    left = zeros = best = 0
    for right, value in enumerate(nums):
        if value == 0:
            zeros += 1
        if zeros > k:
            if nums[left] == 0:
                zeros -= 1
            left += 1
        if zeros <= k:
            best = max(best, right - left + 1)
    return best


def total_fruits(fruits: Sequence[int]) -> int:
    """Return the most fruits collectable in a row with two baskets of one kind each."""
    return _longest_with_few_kinds(fruits, 2)


def character_replacement(s: str, k: int) -> int:
    """Return the longest run of one letter after replacing at most ``k`` characters."""
    counts: Counter[str] = Counter()
    left = best = max_freq = 0
    for right, ch in enumerate(s):
        counts[ch] += 1
        max_freq = max(max_freq, counts[ch])
        if right - left + 1 - max_freq > k:
            counts[s[left]] -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_index: dict[str, int] = {}
    left = best = 0
    for right, ch in enumerate(s):
        if ch in last_index:
            left = max(left, last_index[ch] + 1)
        best = max(best, right - left + 1)
        last_index[ch] = right
    return best


def min_window(s: str, t: str) -> str:
    """Return the shortest substring of ``s`` holding every character of ``t``.

    Repeated characters of ``t`` must be repeated in the window. The leftmost
    shortest window wins; an empty string means there is none.
    """
    if not t or len(t) > len(s):
        return ""
    need = Counter(t)
    matched = left = start = 0
    best: int | None = None
    for right, ch in enumerate(s):
        if need[ch] > 0:
            matched += 1
        need[ch] -= 1
        while matched == len(t):
            width = right - left + 1
            if best is None or width < best:
                best = width
                start = left
            need[s[left]] += 1
            if need[s[left]] > 0:
                matched -= 1
            left += 1
    return "" if best is None else s[start:start + best]


def k_distinct_char(s: str, k: int) -> int:
    """Return the longest substring length with at most ``k`` distinct characters."""
    return _longest_with_few_kinds(s, k)