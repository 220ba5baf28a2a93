import statistics

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.searching import (
    find_min_rotated,
    median_of_sorted,
    next_greatest_letter,
    search_rotated,
)

sorted_lists = st.lists(st.integers(-1000, 1000)).map(sorted)


@given(sorted_lists, sorted_lists)
def test_median_matches_statistics(a, b):
    if not a and not b:
        with pytest.raises(ValueError):
            median_of_sorted(a, b)
        return
    assert median_of_sorted(a, b) == statistics.median(a + b)


def test_median_of_empty_raises():
    with pytest.raises(ValueError):
        median_of_sorted([], [])


def test_median_is_symmetric():
    assert median_of_sorted([1, 3], [2, 4]) == median_of_sorted([2, 4], [1, 3])


@st.composite
def rotated(draw):
    values = sorted(draw(st.lists(st.integers(-1000, 1000), unique=True, min_size=1)))
    k = draw(st.integers(0, len(values) - 1))
    return values[k:] + values[:k]


@given(rotated())
def test_search_finds_every_element(nums):
    for value in nums:
        assert search_rotated(nums, value) == nums.index(value)


@given(rotated())
def test_search_missing_returns_minus_one(nums):
    assert search_rotated(nums, max(nums) + 1) == -1
    assert search_rotated(nums, min(nums) - 1) == -1


def test_search_empty():
    assert search_rotated([], 5) == -1


@given(rotated())
def test_find_min_rotated(nums):
    assert find_min_rotated(nums) == min(nums)


def test_find_min_empty_raises():
    with pytest.raises(ValueError):
        find_min_rotated([])


def test_next_greatest_letter_examples():
    letters = ["c", "f", "j"]
    assert next_greatest_letter(letters, "a") == "c"
    assert next_greatest_letter(letters, "c") == "f"
    assert next_greatest_letter(letters, "j") == "c"


@given(st.lists(st.sampled_from("abcdefghijklmnopqrstuvwxyz"), min_size=1).map(sorted),
       st.sampled_from("abcdefghijklmnopqrstuvwxyz"))
def test_next_greatest_letter_invariant(letters, target):
    result = next_greatest_letter(letters, target)
    greater = [c for c in letters if c > target]
    if greater:
        assert result > target
        assert all(result <= c for c in greater)
    else:
        assert result == letters[0]


def test_next_greatest_letter_empty_raises():
    with pytest.raises(ValueError):
        next_greatest_letter([], "a")