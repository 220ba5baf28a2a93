"""Operations on integer arrays and matrices."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence
from itertools import accumulate, groupby


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column of ``matrix`` that holds a zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        row[:] = [
            0 if i in zero_rows or j in zero_cols else value
            for j, value in enumerate(row)
        ]


def sort_colors(nums: list[int]) -> None:
    """Sort, in place, a list holding only the values 0, 1 and 2."""
    counts = Counter(nums)
    unexpected = set(counts) - {0, 1, 2}
    if unexpected:
        raise ValueError(f"unexpected colour values: {sorted(unexpected)}")
    nums[:] = [0] * counts[0] + [1] * counts[1] + [2] * counts[2]


def max_consecutive_ones(nums: Sequence[int]) -> int:
    """Return the length of the longest run of 1s."""
    return max(
        (sum(1 for _ in run) for value, run in groupby(nums) if value == 1),
        default=0,
    )


def asteroid_collision(asteroids: Sequence[int]) -> list[int]:
    """Return the asteroids left after all collisions.

    Positive values move right, negative values move left; on collision the
    smaller one explodes and equal ones both explode.
    """
    stack: list[int] = []
    for asteroid in asteroids:
        if stack and stack[-1] > 0 and stack[-1] * asteroid < 0:
            while (
                stack
                and stack[-1] > 0
                and stack[-1] * asteroid < 0
                and abs(stack[-1]) < abs(asteroid)
            ):
                stack.pop()
            if not stack or stack[-1] * asteroid > 0:
                stack.append(asteroid)
            elif abs(stack[-1]) == abs(asteroid) and stack[-1] * asteroid < 0:
                stack.pop()
        else:
            stack.append(asteroid)
    return stack


def running_sum(nums: Sequence[int]) -> list[int]:
    """Return the prefix sums of ``nums``."""
    return list(accumulate(nums))


def gcd_of_extremes(nums: Sequence[int]) -> int:
    """Return the greatest common divisor of the smallest and largest values."""
    if not nums:
        raise ValueError("nums must not be empty")
    return math.gcd(min(nums), max(nums))


def count_strictly_between(nums: Sequence[int]) -> int:
    """Count values with both a strictly smaller and a strictly greater value."""
    if not nums:
        return 0
    low, high = min(nums), max(nums)
    return sum(1 for value in nums if value != low and value != high)


def semi_ordered_moves(nums: Sequence[int]) -> int:
    """Return the adjacent swaps needed to put 1 first and n last in a permutation."""
    n = len(nums)
    try:
        first = nums.index(1)
        last = nums.index(n)
    except ValueError:
        raise ValueError("nums must be a permutation of 1..n") from None
    moves = first + (n - 1 - last)
    if first > last:
        moves -= 1
    return moves