"""Searching and selection over sorted and rotated sequences."""

from __future__ import annotations

from collections.abc import Sequence


def median_of_sorted(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of the combined contents of two sorted sequences."""
    merged = sorted([*nums1, *nums2])
    if not merged:
        raise ValueError("median of an empty collection is undefined")
    mid = (len(merged) - 1) // 2
    if len(merged) % 2 == 1:
        return float(merged[mid])
    return (merged[mid] + merged[mid + 1]) / 2.0


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted sequence, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = low + (high - low) // 2
        value = nums[mid]
        if value == target:
            return mid
        if value <= nums[high]:
            if value <= target <= nums[high]:
                low = mid + 1
            else:
                high = mid - 1
        elif nums[low] <= target <= value:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def find_min_rotated(nums: Sequence[int]) -> int:
    """Return the smallest value of a rotated sorted sequence of distinct values."""
    if not nums:
        raise ValueError("cannot find the minimum of an empty sequence")
    low, high = 0, len(nums) - 1
    while True:
        if nums[low] <= nums[high]:
            return nums[low]
        mid = low + (high - low) // 2
        if nums[mid] >= nums[low]:
            low = mid + 1
        else:
            high = mid


def next_greatest_letter(letters: Sequence[str], target: str) -> str:
    """Return the smallest letter greater than ``target``, wrapping to the first."""
    if not letters:
        raise ValueError("letters must not be empty")
    return min((letter for letter in letters if letter > target), default=letters[0])