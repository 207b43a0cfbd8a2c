import pytest

from dsakit.greedy import (
    can_jump,
    candy,
    check_valid_string,
    find_content_children,
    find_platform,
    job_scheduling,
    lemonade_change,
)


def test_can_jump_reachable():
    assert can_jump([2, 3, 1, 1, 4])
    assert can_jump([3, 2, 1, 1, 4])


def test_can_jump_blocked_by_zero():
    assert not can_jump([3, 2, 1, 0, 4])
    assert not can_jump([0, 1])


def test_can_jump_single_and_empty():
    assert can_jump([0])
    assert can_jump([])


def test_can_jump_all_positive_always_reaches():
    assert can_jump([1] * 20)


def test_content_children_bounded_by_inputs():
    greed = [1, 5, 3, 3, 4]
    sizes = [4, 2, 1, 2, 1, 3]
    result = find_content_children(greed, sizes)
    assert 0 < result <= min(len(greed), len(sizes))


def test_content_children_large_cookies_satisfy_everyone():
    greed = [7, 2, 9, 4]
    assert find_content_children(greed, [100] * 6) == len(greed)


def test_content_children_small_cookies_satisfy_nobody():
    assert not find_content_children([5, 6, 7], [1, 2, 3, 4])


def test_content_children_does_not_mutate():
    greed = [3, 1, 2]
    sizes = [2, 3, 1]
    find_content_children(greed, sizes)
    assert greed == [3, 1, 2]
    assert sizes == [2, 3, 1]


def test_lemonade_change_possible():
    assert lemonade_change([5, 5, 5, 10, 20])
    assert lemonade_change([5, 5, 5, 20])


def test_lemonade_change_impossible():
    assert not lemonade_change([10])
    assert not lemonade_change([5, 5, 10, 10, 20])


def test_check_valid_string_balanced():
    assert check_valid_string("(*())")
    assert check_valid_string("(*))")
    assert check_valid_string("")


def test_candy_worked_example():
    assert candy([1, 2, 2]) == 4


def test_candy_equal_ratings_one_each():
    ratings = [3] * 7
    assert candy(ratings) == len(ratings)


def test_candy_strictly_increasing_is_symmetric_to_decreasing():
    ratings = list(range(6))
    assert candy(ratings) == candy(list(reversed(ratings)))
    assert candy(ratings) == sum(range(1, len(ratings) + 1))


def test_candy_at_least_one_each():
    ratings = [5, 1, 4, 4, 2, 8, 3]
    assert candy(ratings) >= len(ratings)


def test_find_platform_worked_example():
    assert find_platform([900, 1100, 1240], [1000, 1200, 1240]) == 1


def test_find_platform_all_overlapping():
    arrivals = [1, 1, 1, 1]
    assert find_platform(arrivals, [5, 5, 5, 5]) == len(arrivals)


def test_find_platform_order_does_not_matter():
    arrivals = [900, 940, 950, 1100, 1500, 1800]
    departures = [910, 1200, 1120, 1130, 1900, 2000]
    assert find_platform(arrivals, departures) == find_platform(
        list(reversed(arrivals)), list(reversed(departures))
    )


def test_find_platform_empty():
    assert not find_platform([], [])


def test_find_platform_length_mismatch():
    with pytest.raises(ValueError):
        find_platform([1, 2], [3])


def test_job_scheduling_all_fit():
    jobs = [(1, 2, 50), (3, 1, 10), (2, 4, 75)]
    assert job_scheduling(jobs) == (len(jobs), sum(job[2] for job in jobs))


def test_job_scheduling_keeps_most_profitable():
    jobs = [(1, 1, 30), (2, 1, 20), (3, 1, 10)]
    done, profit = job_scheduling(jobs)
    assert done == len(jobs) - 1
    assert profit == sum(job[2] for job in jobs[:done])


def test_job_scheduling_empty():
    assert job_scheduling([]) == (len([]), sum([]))