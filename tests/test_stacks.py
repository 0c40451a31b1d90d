import pytest

from dsakit.stacks import (
    MOD,
    find_celebrity,
    largest_rectangle_area,
    longest_valid_parentheses,
    maximal_rectangle,
    next_greater_circular,
    previous_smaller,
    remove_k_digits,
    sliding_window_max,
    sum_subarray_mins,
    sum_subarray_ranges,
    trap_rain_water_stack,
)

SAMPLES = [
    [2, 1, 5, 6, 2, 3],
    [4, 2, 0, 3, 2, 5],
    [0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1],
    [7],
    [3, 3, 3, 3],
]


def test_largest_rectangle_classic():
    assert largest_rectangle_area([2, 1, 5, 6, 2, 3]) == 10


def test_largest_rectangle_empty_and_single():
    assert largest_rectangle_area([]) == 0
    assert largest_rectangle_area([9]) == 9


@pytest.mark.parametrize("heights", SAMPLES)
def test_largest_rectangle_bounds_and_symmetry(heights):
    area = largest_rectangle_area(heights)
    assert area >= max(heights)
    assert area >= min(heights) * len(heights)
    assert area == largest_rectangle_area(list(reversed(heights)))


def test_longest_valid_parentheses_balanced_whole():
    s = "(" * 5 + ")" * 5
    assert longest_valid_parentheses(s) == len(s)


def test_longest_valid_parentheses_surrounded():
    inner = "()" * 3
    assert longest_valid_parentheses(")" + inner + "(") == len(inner)
    assert longest_valid_parentheses("") == 0
    assert longest_valid_parentheses(")))(((") == 0


def test_maximal_rectangle_single_row_matches_histogram():
    row = [1, 0, 1, 1, 1, 0, 1, 1]
    assert maximal_rectangle([row]) == largest_rectangle_area(row)


def test_maximal_rectangle_all_ones_and_zeros():
    ones = ["111", "111", "111", "111"]
    assert maximal_rectangle(ones) == len(ones) * len(ones[0])
    assert maximal_rectangle(["000", "000"]) == 0
    assert maximal_rectangle([]) == 0


def test_maximal_rectangle_ragged_rows():
    with pytest.raises(ValueError):
        maximal_rectangle(["11", "1"])


@pytest.mark.parametrize("nums", SAMPLES)
def test_next_greater_circular_invariants(nums):
    result = next_greater_circular(nums)
    assert len(result) == len(nums)
    top = max(nums)
    for value, greater in zip(nums, result):
        if value == top:
            assert greater is None
        else:
            assert greater is not None and greater > value and greater in nums


def test_previous_smaller_monotone():
    increasing = [1, 4, 6, 9]
    assert previous_smaller(increasing) == [None, *increasing[:-1]]
    assert previous_smaller([9, 6, 4, 1]) == [None] * 4


def test_remove_k_digits_example():
    assert remove_k_digits("1432219", 3) == "1219"


def test_remove_k_digits_edges():
    assert remove_k_digits("10", 2) == "0"
    assert remove_k_digits("456", 0) == "456"
    assert remove_k_digits("100", 1) == "0"


def test_remove_k_digits_length():
    num = "987654321"
    for k in range(len(num)):
        assert len(remove_k_digits(num, k)) == len(num) - k


def test_sliding_window_max_example():
    assert sliding_window_max([1, 3, 1, 2, 0, 5], 3) == [3, 3, 2, 5]


@pytest.mark.parametrize("nums", SAMPLES)
def test_sliding_window_max_extremes(nums):
    assert sliding_window_max(nums, 1) == nums
    assert sliding_window_max(nums, len(nums)) == [max(nums)]


@pytest.mark.parametrize("k", [0, 4])
def test_sliding_window_max_bad_k(k):
    with pytest.raises(ValueError):
        sliding_window_max([1, 2, 3], k)


@pytest.mark.parametrize("arr", SAMPLES)
def test_sum_subarray_mins_symmetry(arr):
    assert sum_subarray_mins(arr) == sum_subarray_mins(list(reversed(arr)))


def test_sum_subarray_mins_single_and_mod():
    assert sum_subarray_mins([42]) == 42
    assert sum_subarray_mins([]) == 0
    assert 0 <= sum_subarray_mins([10**9] * 50) < MOD


@pytest.mark.parametrize("nums", SAMPLES)
def test_sum_subarray_ranges_invariants(nums):
    total = sum_subarray_ranges(nums)
    assert total >= 0
    assert total == sum_subarray_ranges(list(reversed(nums)))
    assert total == sum_subarray_ranges([-x for x in nums])
    assert total == sum_subarray_ranges([x + 100 for x in nums])


def test_sum_subarray_ranges_constant():
    assert sum_subarray_ranges([5] * 6) == 0


def _celebrity_matrix(n, celeb):
    return [[1 if j == celeb and i != celeb else 0 for j in range(n)] for i in range(n)]


@pytest.mark.parametrize("celeb", range(4))
def test_find_celebrity_found(celeb):
    assert find_celebrity(_celebrity_matrix(4, celeb)) == celeb


def test_find_celebrity_absent():
    assert find_celebrity([[0, 0, 0], [0, 0, 0], [0, 0, 0]]) is None
    matrix = _celebrity_matrix(3, 1)
    matrix[1][0] = 1
    assert find_celebrity(matrix) is None
    assert find_celebrity([]) is None


def test_trap_rain_water_stack_shapes():
    assert trap_rain_water_stack([1, 2, 3, 4]) == 0
    assert trap_rain_water_stack([4, 3, 2, 1]) == 0
    assert trap_rain_water_stack([5, 0, 5]) == 5
    assert trap_rain_water_stack([]) == 0


@pytest.mark.parametrize("heights", SAMPLES)
def test_trap_rain_water_stack_symmetry(heights):
    water = trap_rain_water_stack(heights)
    assert water >= 0
    assert water == trap_rain_water_stack(list(reversed(heights)))