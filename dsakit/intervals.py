"""Operations on closed integer intervals given as ``[start, end]`` pairs."""

from __future__ import annotations

from collections.abc import Sequence

Interval = Sequence[int]


def erase_overlap_intervals(intervals: Sequence[Interval]) -> int:
    """Return the fewest intervals to remove so the rest do not overlap.

    Intervals that only touch at an end point do not overlap.
    """
    ordered = sorted(intervals, key=lambda interval: interval[1])
    if not ordered:
        return 0
    last_end = ordered[0][1]
    removed = 0
    for start, end in ordered[1:]:
        if start >= last_end:
            last_end = end
        else:
            removed += 1
    return removed


def insert_and_merge(intervals: Sequence[Interval], new_interval: Interval) -> list[list[int]]:
    """Sort and merge ``intervals`` while folding ``new_interval`` into them.

    The new interval joins the first group whose end, at the moment it is
    checked, is not before the new interval's start; if no group qualifies
    it is appended at the end.
    """
    if not intervals:
        return [list(new_interval)]
    ordered = sorted(intervals)
    new_start, new_end = new_interval
    low, high = ordered[0]
    merged: list[list[int]] = []
    inserted = False
    if new_start <= high:
        low, high = min(low, new_start), max(high, new_end)
        inserted = True
    for start, end in ordered:
        if start <= high:
            low, high = min(low, start), max(high, end)
            continue
        merged.append([low, high])
        low, high = start, end
        if not inserted and new_start <= high:
            low, high = min(low, new_start), max(high, new_end)
            inserted = True
    merged.append([low, high])
    if not inserted:
        merged.append([new_start, new_end])
    return merged


def insert_interval(intervals: Sequence[Interval], new_interval: Interval) -> list[list[int]]:
    """Insert ``new_interval`` into sorted, disjoint ``intervals``, merging overlaps."""
    low, high = new_interval
    result: list[list[int]] = []
    inserted = False
    for start, end in intervals:
        if end < low:
            result.append([start, end])
        elif start <= high:
            low, high = min(low, start), max(high, end)
        else:
            if not inserted:
                result.append([low, high])
                inserted = True
            result.append([start, end])
    if not inserted:
        result.append([low, high])
    return result


def merge_intervals(intervals: Sequence[Interval]) -> list[list[int]]:
    """Return the intervals sorted, with overlapping or touching ones merged."""
    ordered = sorted(intervals)
    if not ordered:
        return []
    low, high = ordered[0]
    merged: list[list[int]] = []
    for start, end in ordered[1:]:
        if start <= high and end >= low:
            low, high = min(low, start), max(high, end)
        else:
            merged.append([low, high])
            low, high = start, end
    merged.append([low, high])
    return merged