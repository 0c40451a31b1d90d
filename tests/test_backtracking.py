from itertools import permutations

import pytest

from dsakit.backtracking import (
    binary_strings_without_consecutive_ones,
    generate_parentheses,
    min_coins,
    subsets,
    unique_permutations,
    word_exists,
)
from dsakit.bits import bitmask_subsets


@pytest.mark.parametrize("k", [1, 2, 5, 10])
def test_binary_strings_have_no_adjacent_ones(k):
    strings = binary_strings_without_consecutive_ones(k)
    assert all(len(s) == k and "11" not in s and set(s) <= {"0", "1"} for s in strings)
    assert strings == sorted(set(strings))


@pytest.mark.parametrize("k", [3, 4, 7, 10])
def test_binary_strings_count_follows_fibonacci(k):
    count = len(binary_strings_without_consecutive_ones(k))
    assert count == (
        len(binary_strings_without_consecutive_ones(k - 1))
        + len(binary_strings_without_consecutive_ones(k - 2))
    )


def test_binary_strings_non_positive_length():
    assert binary_strings_without_consecutive_ones(0) == []
    assert binary_strings_without_consecutive_ones(-3) == []


def test_binary_strings_length_one():
    assert binary_strings_without_consecutive_ones(1) == ["0", "1"]


def test_unique_permutations_pinned():
    assert unique_permutations("aab") == ["aab", "aba", "baa"]


@pytest.mark.parametrize("s", ["abc", "aabb", "abca", "zzz"])
def test_unique_permutations_match_all_arrangements(s):
    result = unique_permutations(s)
    assert result == sorted(set(result))
    assert set(result) == {"".join(p) for p in permutations(s)}


def test_unique_permutations_empty():
    assert unique_permutations("") == [""]


def test_generate_parentheses_single_pair():
    assert generate_parentheses(1) == ["()"]


@pytest.mark.parametrize("n", [2, 3, 4])
def test_generate_parentheses_well_formed(n):
    result = generate_parentheses(n)
    assert len(result) == len(set(result))
    assert result == sorted(result)
    for s in result:
        depth = 0
        for char in s:
            depth += 1 if char == "(" else -1
            assert depth >= 0
        assert depth == 0 and len(s) == 2 * n


def test_generate_parentheses_negative():
    with pytest.raises(ValueError):
        generate_parentheses(-1)


def test_min_coins_source_example():
    assert min_coins([25, 10, 5], 30) == 2


def test_min_coins_unit_coin():
    assert min_coins([1], 17) == 17


def test_min_coins_single_denomination():
    assert min_coins([7], 7 * 6) == 6


def test_min_coins_impossible():
    assert min_coins([2], 3) is None
    assert min_coins([], 5) is None
    assert min_coins([3], -1) is None


def test_min_coins_zero_total():
    assert min_coins([4, 9], 0) == 0


def test_min_coins_ignores_zero_denomination():
    assert min_coins([0, 4], 12) == min_coins([4], 12)


def test_subsets_matches_bitmask_version():
    nums = [1, 2, 3, 4]
    result = subsets(nums)
    assert len(result) == 2 ** len(nums)
    assert sorted(map(tuple, result)) == sorted(map(tuple, bitmask_subsets(nums)))


def test_subsets_lexicographic_positions():
    nums = [10, 20, 30]
    result = subsets(nums)
    assert result[0] == []
    positions = [tuple(nums.index(v) for v in subset) for subset in result]
    assert positions == sorted(positions)


def test_subsets_empty():
    assert subsets([]) == [[]]


BOARD = ["ABCE", "SFCS", "ADEE"]


@pytest.mark.parametrize("word, expected", [("ABCCED", True), ("SEE", True), ("ABCB", False)])
def test_word_exists(word, expected):
    assert word_exists(BOARD, word) is expected


def test_word_exists_accepts_char_lists():
    assert word_exists([list(row) for row in BOARD], "SEE") is True


def test_word_exists_cell_not_reused():
    assert word_exists(["AB"], "ABA") is False


def test_word_exists_empty_inputs():
    assert word_exists(BOARD, "") is False
    assert word_exists([], "A") is False