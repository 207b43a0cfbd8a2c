import pytest

from dsakit.stack_problems import (
    asteroid_collision,
    is_valid_brackets,
    largest_rectangle_area,
    max_sliding_window,
    next_greater_element,
    next_greater_elements_circular,
    next_smaller_element,
    remove_k_digits,
    sub_array_ranges,
    sum_subarray_mins,
    trap,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("{{[)]}}", False),
        ("()[]{}", True),
        ("{[()]}", True),
        ("", True),
        ("(", False),
        (")", False),
        ("(]", False),
    ],
)
def test_is_valid_brackets(text, expected):
    assert is_valid_brackets(text) is expected


def test_asteroid_source_example():
    assert asteroid_collision([10, 2, -5, -10, -20]) == [-20]


def test_asteroid_equal_sizes_destroy_each_other():
    assert asteroid_collision([5, -5]) == []


def test_asteroid_moving_apart_survive():
    assert asteroid_collision([-1, 2]) == [-1, 2]
    assert asteroid_collision([2, -5, 3]) == [-5, 3]


def test_asteroid_result_is_subsequence_of_input():
    data = [3, -2, 7, 1, -4, -9, 6, -6, 8]
    result = asteroid_collision(data)
    it = iter(data)
    assert all(value in it for value in result)


def test_next_greater_element_source_example():
    assert next_greater_element([4, 1, 2], [1, 3, 4, 2]) == [-1, 3, -1]


def test_next_greater_element_missing_value():
    with pytest.raises(ValueError):
        next_greater_element([9], [1, 2, 3])


def test_next_greater_circular():
    assert next_greater_elements_circular([1, 2, 3, 4, 5]) == [2, 3, 4, 5, -1]
    assert next_greater_elements_circular([5, 4, 3]) == [-1, 5, 5]
    assert next_greater_elements_circular([]) == []


def test_largest_rectangle_source_example():
    assert largest_rectangle_area([2, 1, 5, 6, 2, 3]) == 10


def test_largest_rectangle_edges():
    assert largest_rectangle_area([]) == 0
    assert largest_rectangle_area([7]) == 7


def test_largest_rectangle_bounds():
    heights = [4, 2, 0, 3, 2, 5, 6, 1]
    area = largest_rectangle_area(heights)
    assert area >= max(heights)
    assert area >= min(heights) * len(heights)


def test_next_smaller_element():
    assert next_smaller_element([2, 1, 5, 6, 2, 3]) == [1, -1, 2, 2, -1, -1]


def test_sub_array_ranges_source_example():
    assert sub_array_ranges([1, 2, 3]) == 4


def test_sub_array_ranges_invariants():
    data = [4, -2, -3, 4, 1]
    assert sub_array_ranges(data) == sub_array_ranges(data[::-1])
    assert sub_array_ranges([3, 3, 3, 3]) == 0
    assert sub_array_ranges([]) == 0


def test_sum_subarray_mins_basics():
    assert sum_subarray_mins([5]) == 5
    assert sum_subarray_mins([0, 0, 0]) == 0
    assert sum_subarray_mins([3, 1, 2, 4]) == sum_subarray_mins([4, 2, 1, 3])


def test_sum_subarray_mins_is_reduced():
    result = sum_subarray_mins([10**9] * 50)
    assert 0 <= result < 1_000_000_007


def test_trap_source_example():
    assert trap([4, 2, 0, 3, 2, 5]) == 9


def test_trap_simple_basin_and_monotone():
    assert trap([3, 0, 3]) == 3
    assert trap([1, 2, 3, 4]) == 0
    assert trap([]) == 0


def test_remove_k_digits_no_removal_when_increasing():
    assert remove_k_digits("12345", 2) == "12345"


def test_remove_k_digits_small_cases():
    assert remove_k_digits("21", 1) == "1"
    assert remove_k_digits("10", 1) == "0"
    assert remove_k_digits("143229", 0) == "143229"


def test_remove_k_digits_result_is_subsequence():
    num, k = "143229", 3
    result = remove_k_digits(num, k)
    it = iter(num)
    assert all(ch in it for ch in result)
    assert len(num) - k <= len(result) <= len(num)


def test_max_sliding_window_source_example():
    assert max_sliding_window([1, 3, -1, -3, 5, 3, 6, 7], 3) == [3, 3, 5, 5, 6, 7]


def test_max_sliding_window_edges():
    assert max_sliding_window([4, 1, 2], 1) == [4, 1, 2]
    assert max_sliding_window([4, 1, 2], 5) == []
    with pytest.raises(ValueError):
        max_sliding_window([1, 2], 0)


def test_max_sliding_window_length():
    nums = [2, 9, 4, 7, 1, 8, 3]
    assert len(max_sliding_window(nums, 4)) == len(nums) - 4 + 1