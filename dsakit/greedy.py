"""Greedy algorithms over sequences of numbers and characters."""

from __future__ import annotations

from collections.abc import Sequence


def can_jump(nums: Sequence[int]) -> bool:
    """Tell whether the last index can be reached when ``nums[i]`` is the longest jump from ``i``."""
    farthest = 0
    for i, step in enumerate(nums):
        if i > farthest:
            return False
        if farthest >= len(nums):
            return True
        farthest = max(farthest, i + step)
    return True


def find_content_children(greed: Sequence[int], sizes: Sequence[int]) -> int:
    """Return how many children can each get a cookie at least as large as their greed."""
    wanted = sorted(greed)
    content = 0
    for size in sorted(sizes):
        if content < len(wanted) and wanted[content] <= size:
            content += 1
    return content


def lemonade_change(bills: Sequence[int]) -> bool:
    """Tell whether change can be given to every customer paying for a 5-unit drink.

    Bills of 5 and 10 are recognised; any other bill is treated as a 20.
    """
    fives = tens = 0
    for bill in bills:
        if bill == 5:
            fives += 1
        elif bill == 10:
            if not fives:
                return False
            fives -= 1
            tens += 1
        elif fives and tens:
            fives -= 1
            tens -= 1
        elif fives >= 3:
            fives -= 3
        else:
            return False
    return True


def check_valid_string(s: str) -> bool:
    """Tell whether ``s`` can be balanced when each ``*`` is ``(``, ``)`` or nothing.

    Characters other than parentheses are treated as ``*``.
    """
    if s and (s[0] == ")" or s[-1] == "("):
        return False
    low = high = 0
    for ch in s:
        if ch == "(":
            low += 1
            high += 1
        elif ch == ")":
            low -= 1
            high -= 1
        else:
            low -= 1
            high += 1
        low = max(low, 0)
        if high < 0:
            return False
    return low == 0


def candy(ratings: Sequence[int]) -> int:
    """Return the fewest candies for children in a row, a higher rating beating each neighbour."""
    counts = [1] * len(ratings)
    for i in range(1, len(ratings)):
        if ratings[i] > ratings[i - 1]:
            counts[i] = counts[i - 1] + 1
    for i in reversed(range(len(ratings) - 1)):
        if ratings[i] > ratings[i + 1]:
            counts[i] = max(counts[i], counts[i + 1] + 1)
    return sum(counts)


def find_platform(arrivals: Sequence[int], departures: Sequence[int]) -> int:
    """Return the fewest platforms needed so that no train waits.

    A train arriving at the same time another departs needs its own platform.
    """
    if len(arrivals) != len(departures):
        raise ValueError("arrivals and departures must have the same length")
    if not arrivals:
        return 0
    arrive = sorted(arrivals)
    depart = sorted(departures)
    n = len(arrive)
    busiest = current = 1
    i, j = 1, 0
    while i < n and j < n:
        if arrive[i] <= depart[j]:
            i += 1
            current += 1
        else:
            j += 1
            current -= 1
        busiest = max(busiest, current)
    return busiest


def job_scheduling(jobs: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Schedule ``(id, deadline, profit)`` jobs greedily by profit.

    Each job takes the latest free slot from its deadline down to slot 0.
    Returns the number of jobs done and their total profit.
    """
    ordered = sorted(jobs, key=lambda job: job[2], reverse=True)
    latest = max((job[1] for job in ordered), default=-1)
    taken = [False] * (latest + 1)
    done = profit = 0
    for _, deadline, gain in ordered:
        for slot in range(deadline, -1, -1):
            if not taken[slot]:
                taken[slot] = True
                done += 1
                profit += gain
                break
    return done, profit