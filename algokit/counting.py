"""Combinatorial counting with dynamic programming."""

from __future__ import annotations

from collections.abc import Sequence


def climb_stairs(n: int) -> int:
    """Return the number of ways to climb ``n`` steps taking 1 or 2 at a time."""
    if n < 0:
        raise ValueError("n must be non-negative")
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def pascal_row(row: int) -> list[int]:
    """Return row ``row`` (counting from 0) of Pascal's triangle."""
    if row < 0:
        raise ValueError("row must be non-negative")
    values = [1]
    size = row + 1
    for col in range(1, size):
        values.append(values[-1] * (size - col) // col)
    return values


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    return [pascal_row(i) for i in range(max(num_rows, 0))]


def target_sum_ways(nums: Sequence[int], target: int) -> int:
    """Count sign assignments to ``nums`` whose signed sum equals ``target``."""
    difference = sum(nums) - target
    if difference < 0 or difference % 2 != 0:
        return 0
    goal = difference // 2
    ways = [1] + [0] * goal
    for value in nums:
        for total in range(goal, value - 1, -1):
            ways[total] += ways[total - value]
    return ways[goal]


def coin_change_ways(amount: int, coins: Sequence[int]) -> int:
    """Count the combinations of ``coins`` (unlimited supply) summing to ``amount``."""
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    if amount < 0:
        return 0
    ways = [1] + [0] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]